from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, List, Optional, Union

# Reign and biographical dates arrive as ISO strings ("1523-06-06"), bare
# years ("1523" or 1523) or already-parsed dates.
DateLike = Union[str, int, date]


# -----------------------------
# Person
# -----------------------------

@dataclass(slots=True)
class Person:
    """
    One member of the lineage.

    ``external_id`` is the hierarchical dot-notation id ("0", "0.1", "1.2.3").
    ``father`` holds either the father's external id or, in legacy records,
    his display name.

    ``monarch_ids`` is authoritative. ``monarch_names`` is the legacy
    free-text list (stored as ``monarchDuringLife``) kept for traceability
    while records are migrated.
    """
    external_id: str
    name: str = ""
    born: Optional[int] = None
    died: Optional[int] = None
    father: Optional[str] = None
    age_at_death: Optional[int] = None

    monarch_ids: List[str] = field(default_factory=list)
    monarch_names: List[str] = field(default_factory=list)

    biological_sex: Optional[str] = None
    notes: Optional[str] = None
    died_young: bool = False
    is_succession_son: bool = False
    has_male_children: bool = False
    noble_branch: Optional[str] = None

    # Annotated generation (see identity.generation); None until computed.
    generation: Optional[int] = None

    # Storage document id, if the record came from a document store.
    id: Optional[str] = None

    # Unmodelled keys, carried through unchanged.
    raw: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = dict(self.raw)
        if self.id is not None:
            data["id"] = self.id
        data.update(
            {
                "externalId": self.external_id,
                "name": self.name,
                "born": self.born,
                "died": self.died,
                "father": self.father,
                "ageAtDeath": self.age_at_death,
                "biologicalSex": self.biological_sex,
                "notes": self.notes,
                "diedYoung": self.died_young,
                "isSuccessionSon": self.is_succession_son,
                "hasMaleChildren": self.has_male_children,
                "nobleBranch": self.noble_branch,
                "monarchIds": list(self.monarch_ids),
                "monarchDuringLife": list(self.monarch_names),
            }
        )
        if self.generation is not None:
            data["generation"] = self.generation
        return data


# -----------------------------
# Monarch
# -----------------------------

@dataclass(slots=True)
class Monarch:
    """
    A reign record from the canonical registry.

    Only the year of ``reign_from``/``reign_to`` matters to the legacy name
    matcher; the lifespan overlap check uses full dates where present.
    """
    id: str
    name: str
    reign_from: DateLike
    reign_to: DateLike
    born: Optional[DateLike] = None
    died: Optional[DateLike] = None
    quote: Optional[str] = None
    about: Optional[str] = None
    portrait_file_name: Optional[str] = None
    raw: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = dict(self.raw)
        data.update(
            {
                "id": self.id,
                "name": self.name,
                "born": _date_out(self.born),
                "died": _date_out(self.died),
                "reignFrom": _date_out(self.reign_from),
                "reignTo": _date_out(self.reign_to),
                "quote": self.quote,
                "about": self.about,
                "portraitFileName": self.portrait_file_name,
            }
        )
        return data


def _date_out(value: Optional[DateLike]) -> Optional[Union[str, int]]:
    if isinstance(value, date):
        return value.isoformat()
    return value
