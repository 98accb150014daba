"""
Lookup helpers over the flat person collection.
"""

from __future__ import annotations

from typing import Any, Iterable, List, Optional

from noble_lineage.registry.build_records import build_people
from noble_lineage.registry.entities import Person


def search_people(people: Iterable[Any], query: str) -> List[Person]:
    """Case-insensitive substring search over names and notes. A blank query matches nothing."""
    if not query or not query.strip():
        return []

    needle = query.lower()
    return [
        p
        for p in build_people(people)
        if needle in p.name.lower() or (p.notes and needle in p.notes.lower())
    ]


def get_person_by_id(people: Iterable[Any], external_id: str) -> Optional[Person]:
    for person in build_people(people):
        if person.external_id == external_id:
            return person
    return None


def find_people_by_name(people: Iterable[Any], name: str) -> List[Person]:
    return [p for p in build_people(people) if p.name == name]
