from __future__ import annotations

from .generation import (
    ROOT_EXTERNAL_ID,
    add_generation_data,
    generation_for,
    generation_of,
    parent_external_id,
)

__all__ = [
    "ROOT_EXTERNAL_ID",
    "add_generation_data",
    "generation_for",
    "generation_of",
    "parent_external_id",
]
