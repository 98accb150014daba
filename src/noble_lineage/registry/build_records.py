from __future__ import annotations

from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from noble_lineage.core.exceptions import RecordShapeError
from noble_lineage.registry.entities import Monarch, Person

# camelCase document key -> Person attribute
_PERSON_KEYS: Dict[str, str] = {
    "id": "id",
    "externalId": "external_id",
    "name": "name",
    "born": "born",
    "died": "died",
    "father": "father",
    "ageAtDeath": "age_at_death",
    "biologicalSex": "biological_sex",
    "notes": "notes",
    "diedYoung": "died_young",
    "isSuccessionSon": "is_succession_son",
    "hasMaleChildren": "has_male_children",
    "nobleBranch": "noble_branch",
    "monarchIds": "monarch_ids",
    "monarchDuringLife": "monarch_names",
    "monarchNames": "monarch_names",
    "generation": "generation",
}

_MONARCH_KEYS: Dict[str, str] = {
    "id": "id",
    "name": "name",
    "born": "born",
    "died": "died",
    "reignFrom": "reign_from",
    "reignTo": "reign_to",
    "quote": "quote",
    "about": "about",
    "portraitFileName": "portrait_file_name",
}

_INT_FIELDS = ("born", "died", "age_at_death", "generation")
_BOOL_FIELDS = ("died_young", "is_succession_son", "has_male_children")
_LIST_FIELDS = ("monarch_ids", "monarch_names")


def _require_mapping(record: Any, kind: str) -> Mapping[str, Any]:
    if not isinstance(record, Mapping):
        raise RecordShapeError(f"{kind} record must be a mapping, got {type(record).__name__}")
    return record


def _optional_int(value: Any, key: str) -> Optional[int]:
    if value is None or value == "":
        return None
    if isinstance(value, bool):
        raise RecordShapeError(f"{key} must be an integer year, got bool")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str) and value.strip().lstrip("-").isdigit():
        return int(value.strip())
    raise RecordShapeError(f"{key} must be an integer, got {value!r}")


def _optional_str(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _string_list(value: Any, key: str) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str) or not isinstance(value, Iterable):
        raise RecordShapeError(f"{key} must be a list of strings, got {type(value).__name__}")
    return [str(v) for v in value if v is not None and str(v).strip()]


def _split_known(record: Mapping[str, Any], keys: Dict[str, str]) -> Tuple[Dict[str, Any], Dict[str, Any]]:
    known: Dict[str, Any] = {}
    raw: Dict[str, Any] = {}
    for key, value in record.items():
        attr = keys.get(key)
        if attr is None:
            raw[key] = value
        elif attr not in known or value:
            # an alias key only replaces an earlier value when non-empty
            known[attr] = value
    return known, raw


def person_from_dict(record: Any) -> Person:
    """
    Build a Person from a stored document (camelCase keys).

    Unknown keys are kept in ``Person.raw`` so a record written back keeps
    everything the store had.
    """
    record = _require_mapping(record, "Person")
    known, raw = _split_known(record, _PERSON_KEYS)

    external_id = known.get("external_id")
    if external_id is None or str(external_id).strip() == "":
        raise RecordShapeError("Person record is missing externalId")

    kwargs: Dict[str, Any] = {"external_id": str(external_id).strip()}
    kwargs["name"] = str(known.get("name") or "")
    for attr in _INT_FIELDS:
        kwargs[attr] = _optional_int(known.get(attr), attr)
    for attr in _BOOL_FIELDS:
        kwargs[attr] = bool(known.get(attr) or False)
    for attr in _LIST_FIELDS:
        kwargs[attr] = _string_list(known.get(attr), attr)
    kwargs["father"] = _optional_str(known.get("father"))
    kwargs["biological_sex"] = _optional_str(known.get("biological_sex"))
    kwargs["notes"] = known.get("notes") or None
    kwargs["noble_branch"] = _optional_str(known.get("noble_branch"))
    kwargs["id"] = _optional_str(known.get("id"))

    return Person(raw=raw, **kwargs)


def monarch_from_dict(record: Any) -> Monarch:
    record = _require_mapping(record, "Monarch")
    known, raw = _split_known(record, _MONARCH_KEYS)

    monarch_id = _optional_str(known.get("id"))
    if monarch_id is None:
        raise RecordShapeError("Monarch record is missing id")

    return Monarch(
        id=monarch_id,
        name=str(known.get("name") or ""),
        reign_from=known.get("reign_from"),
        reign_to=known.get("reign_to"),
        born=known.get("born"),
        died=known.get("died"),
        quote=known.get("quote"),
        about=known.get("about"),
        portrait_file_name=known.get("portrait_file_name"),
        raw=raw,
    )


def as_person(record: Any) -> Person:
    return record if isinstance(record, Person) else person_from_dict(record)


def as_monarch(record: Any) -> Monarch:
    return record if isinstance(record, Monarch) else monarch_from_dict(record)


def build_people(records: Iterable[Any]) -> List[Person]:
    """Coerce a collection of documents and/or Person objects, keeping order."""
    return [as_person(r) for r in records]


def build_monarchs(records: Iterable[Any]) -> List[Monarch]:
    return [as_monarch(r) for r in records]
