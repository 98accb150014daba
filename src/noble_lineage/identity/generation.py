# src/noble_lineage/identity/generation.py

from __future__ import annotations

from dataclasses import replace
from typing import Iterable, List, Optional

from noble_lineage.registry.entities import Person

ROOT_EXTERNAL_ID = "0"
SEGMENT_SEPARATOR = "."


def generation_of(external_id: str) -> int:
    """
    Generation depth encoded by a hierarchical external id.

        "0"      -> 1  (the progenitor)
        "0.1"    -> 2
        "1.2.3"  -> 3

    The generation is the number of dot-separated segments. Segment contents
    are not validated; "a.b" is generation 2 like any other id.
    """
    if external_id == ROOT_EXTERNAL_ID:
        return 1
    return len(str(external_id).split(SEGMENT_SEPARATOR))


def parent_external_id(external_id: str) -> Optional[str]:
    """The id one generation up ("1.2.3" -> "1.2"); None for single-segment ids."""
    head, sep, _ = str(external_id).rpartition(SEGMENT_SEPARATOR)
    return head if sep else None


def generation_for(person: Person) -> int:
    """Annotated generation when present, otherwise derived from the id."""
    if person.generation:
        return person.generation
    return generation_of(person.external_id)


def add_generation_data(people: Iterable[Person]) -> List[Person]:
    """Return copies of ``people`` with ``generation`` filled from the external id."""
    return [replace(p, generation=generation_of(p.external_id)) for p in people]
