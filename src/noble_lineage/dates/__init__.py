from __future__ import annotations

from .intervals import (
    LIVING_SENTINEL,
    is_living,
    lifespan_interval,
    monarchs_during_lifetime,
    overlapping_reign_ids,
    plausible_monarchs,
    reign_interval,
    reigns_overlap,
)
from .reign_dates import parse_reign_date, year_of

__all__ = [
    "LIVING_SENTINEL",
    "is_living",
    "lifespan_interval",
    "monarchs_during_lifetime",
    "overlapping_reign_ids",
    "parse_reign_date",
    "plausible_monarchs",
    "reign_interval",
    "reigns_overlap",
    "year_of",
]
