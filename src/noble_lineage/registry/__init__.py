"""
Record model for noble_lineage.

``entities`` defines the Person and Monarch dataclasses; ``build_records``
turns stored documents (camelCase mappings) into them.
"""

from __future__ import annotations

from .entities import Monarch, Person
from .build_records import (
    as_monarch,
    as_person,
    build_monarchs,
    build_people,
    monarch_from_dict,
    person_from_dict,
)

__all__ = [
    "Monarch",
    "Person",
    "as_monarch",
    "as_person",
    "build_monarchs",
    "build_people",
    "monarch_from_dict",
    "person_from_dict",
]
