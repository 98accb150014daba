"""
JSON snapshot store.

A snapshot is one JSON document holding both collections:

    {
      "people":   [ {"externalId": "0", "name": "...", ...}, ... ],
      "monarchs": [ {"id": "gustav-i-vasa", "name": "Gustav I Vasa", ...}, ... ]
    }

``members`` is accepted as an alias of ``people`` (older exports).
The store implements the three collaborator calls the batch pipeline needs:
retrieve all people, retrieve all monarchs, update one person.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, List, Optional, Protocol, Union

from noble_lineage.core.exceptions import SnapshotError
from noble_lineage.logging import get_logger
from noble_lineage.registry.build_records import build_monarchs, build_people
from noble_lineage.registry.entities import Monarch, Person

log = get_logger("json_store")

PEOPLE_KEYS = ("people", "members")
MONARCHS_KEY = "monarchs"


class PersonStore(Protocol):
    def get_all_people(self) -> List[Person]: ...

    def get_all_monarchs(self) -> List[Monarch]: ...

    def update_person(self, person: Person) -> None: ...


def resolve_snapshot_path(path: Union[str, Path, None]) -> Optional[Path]:
    """
    Turn a user-supplied path into an absolute, existing file path.
    """
    if path is None:
        log.debug("No snapshot path provided")
        return None

    abs_path = Path(os.path.abspath(path))
    if not abs_path.exists():
        log.error("Snapshot file does not exist: %s", abs_path)
        raise FileNotFoundError(f"Snapshot file not found: {abs_path}")
    if not abs_path.is_file():
        log.error("Snapshot path is not a file: %s", abs_path)
        raise SnapshotError(f"Snapshot path is not a file: {abs_path}")
    return abs_path


class JsonSnapshotStore:
    """
    File-backed store. Reads the whole snapshot on construction; updates are
    kept in memory until ``save()``.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = resolve_snapshot_path(path)
        self._document = self._read()
        self._people_key = next((k for k in PEOPLE_KEYS if k in self._document), PEOPLE_KEYS[0])
        self._people = build_people(self._document.get(self._people_key) or [])
        self._monarchs = build_monarchs(self._document.get(MONARCHS_KEY) or [])
        self._dirty = False
        log.info(
            "Loaded snapshot %s (people=%d, monarchs=%d)",
            self.path,
            len(self._people),
            len(self._monarchs),
        )

    # ------------------------------------------------------------------ #
    # Collaborator API
    # ------------------------------------------------------------------ #

    def get_all_people(self) -> List[Person]:
        return list(self._people)

    def get_all_monarchs(self) -> List[Monarch]:
        return list(self._monarchs)

    def update_person(self, person: Person) -> None:
        """Replace the record with the same external id (or append a new one)."""
        for index, existing in enumerate(self._people):
            if existing.external_id == person.external_id:
                self._people[index] = person
                break
        else:
            self._people.append(person)
        self._dirty = True
        log.debug("Updated person %s", person.external_id)

    # ------------------------------------------------------------------ #
    # Persistence
    # ------------------------------------------------------------------ #

    @property
    def dirty(self) -> bool:
        return self._dirty

    def to_document(self) -> Dict[str, Any]:
        document = dict(self._document)
        document[self._people_key] = [p.to_dict() for p in self._people]
        document[MONARCHS_KEY] = [m.to_dict() for m in self._monarchs]
        return document

    def save(self, path: Union[str, Path, None] = None) -> Path:
        target = Path(path) if path is not None else self.path
        target.parent.mkdir(parents=True, exist_ok=True)
        with target.open("w", encoding="utf-8") as f:
            json.dump(self.to_document(), f, indent=2, ensure_ascii=False)
        self._dirty = False
        log.info("Snapshot written to %s", target)
        return target

    def _read(self) -> Dict[str, Any]:
        try:
            with self.path.open("r", encoding="utf-8") as f:
                document = json.load(f)
        except json.JSONDecodeError as exc:
            raise SnapshotError(f"Snapshot {self.path} is not valid JSON: {exc}") from exc

        if not isinstance(document, dict):
            raise SnapshotError(f"Snapshot {self.path} must be a JSON object")
        return document
