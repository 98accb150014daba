"""
Lifespan / reign overlap.

A person "lived under" a monarch when the closed intervals

    lifespan = [born-01-01, died-12-31]
    reign    = [reignFrom, reignTo]

intersect, i.e. ``reignFrom <= lifespan_end and reignTo >= lifespan_start``.
Touching at a boundary counts: someone born in 1560 lived under both the
monarch whose reign ended in 1560 and the one whose reign began in 1560.

The same predicate serves the monarch picker (plausible choices), the
per-person lookup and the bulk timeline assignment.
"""

from __future__ import annotations

from datetime import date
from typing import Any, Iterable, List, Optional, Tuple

from noble_lineage.dates.reign_dates import parse_reign_date
from noble_lineage.logging import get_logger
from noble_lineage.registry.build_records import as_monarch
from noble_lineage.registry.entities import Monarch

log = get_logger("intervals")

LIVING_SENTINEL = 9999


def is_living(died_year: Optional[int], *, living_sentinel: int = LIVING_SENTINEL) -> bool:
    return died_year is None or died_year == living_sentinel


def lifespan_interval(
    born_year: int,
    died_year: Optional[int],
    *,
    today: Optional[date] = None,
    living_sentinel: int = LIVING_SENTINEL,
) -> Optional[Tuple[date, date]]:
    """
    Closed lifespan interval; a living person's interval ends today.
    None when a year falls outside what ``date`` can hold (1..9999).
    """
    try:
        start = date(born_year, 1, 1)
        if is_living(died_year, living_sentinel=living_sentinel):
            end = today or date.today()
        else:
            end = date(died_year, 12, 31)
    except ValueError:
        return None
    return start, end


def reign_interval(monarch: Monarch) -> Optional[Tuple[date, date]]:
    start = parse_reign_date(monarch.reign_from)
    end = parse_reign_date(monarch.reign_to, end=True)
    if start is None or end is None:
        return None
    return start, end


def reigns_overlap(lifespan: Tuple[date, date], reign: Tuple[date, date]) -> bool:
    life_start, life_end = lifespan
    reign_start, reign_end = reign
    return reign_start <= life_end and reign_end >= life_start


def monarchs_during_lifetime(
    born_year: Optional[int],
    died_year: Optional[int],
    reigns: Iterable[Any],
    *,
    today: Optional[date] = None,
    living_sentinel: int = LIVING_SENTINEL,
) -> List[Monarch]:
    """
    Monarchs whose reign overlaps the lifespan, in input order.

    ``reigns`` may hold Monarch objects or monarch documents. Without a
    birth year nothing can be evaluated and the result is empty. Reigns with
    unparseable dates are skipped; so is a lifespan whose years
    cannot be represented (the result is then empty).
    """
    if born_year is None:
        return []

    lifespan = lifespan_interval(
        born_year, died_year, today=today, living_sentinel=living_sentinel
    )
    if lifespan is None:
        log.warning("Skipping lifespan %r-%r: year out of range", born_year, died_year)
        return []

    matched: List[Monarch] = []
    for record in reigns:
        monarch = as_monarch(record)
        reign = reign_interval(monarch)
        if reign is None:
            log.warning(
                "Skipping monarch %s: unparseable reign %r-%r",
                monarch.id,
                monarch.reign_from,
                monarch.reign_to,
            )
            continue
        if reigns_overlap(lifespan, reign):
            matched.append(monarch)
    return matched


def overlapping_reign_ids(
    born_year: Optional[int],
    died_year: Optional[int],
    reigns: Iterable[Any],
    *,
    today: Optional[date] = None,
    living_sentinel: int = LIVING_SENTINEL,
) -> List[str]:
    """Ids of the reigns overlapping the lifespan, in input order."""
    return [
        m.id
        for m in monarchs_during_lifetime(
            born_year, died_year, reigns, today=today, living_sentinel=living_sentinel
        )
    ]


def plausible_monarchs(
    born_year: Optional[int],
    died_year: Optional[int],
    monarchs: Iterable[Any],
    *,
    today: Optional[date] = None,
    living_sentinel: int = LIVING_SENTINEL,
) -> List[Monarch]:
    """
    Filter a monarch picker down to timeline-valid choices.

    With no birth year there is nothing to filter on, so every monarch stays
    selectable.
    """
    monarchs = list(monarchs)
    if born_year is None:
        return [as_monarch(m) for m in monarchs]
    return monarchs_during_lifetime(
        born_year, died_year, monarchs, today=today, living_sentinel=living_sentinel
    )
