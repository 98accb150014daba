"""
Batch migration of legacy monarch names to canonical monarch ids.

All functions are pure: they read the given collections and return new
records or reports. Persisting the migrated records is the caller's job
(see ``noble_lineage.core.pipeline``).
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Dict, Iterable, List

from noble_lineage.logging import get_logger
from noble_lineage.migration.name_resolution import resolve_monarch_name
from noble_lineage.registry.build_records import as_person, build_monarchs, build_people
from noble_lineage.registry.entities import Monarch, Person

log = get_logger("migrator")


# ---------------------------------------------------------------------------
# Report models
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class MigrationDetail:
    member_name: str
    external_id: str
    current_monarch_names: List[str]
    resolved_monarch_ids: List[str]
    unresolved_names: List[str]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "memberName": self.member_name,
            "externalId": self.external_id,
            "currentMonarchNames": list(self.current_monarch_names),
            "resolvedMonarchIds": list(self.resolved_monarch_ids),
            "unresolvedNames": list(self.unresolved_names),
        }


@dataclass(slots=True)
class MigrationReport:
    total_members: int = 0
    members_needing_migration: int = 0
    members_already_migrated: int = 0
    members_without_monarch_data: int = 0
    migration_details: List[MigrationDetail] = field(default_factory=list)

    @property
    def total_resolved(self) -> int:
        return sum(len(d.resolved_monarch_ids) for d in self.migration_details)

    @property
    def total_unresolved(self) -> int:
        return sum(len(d.unresolved_names) for d in self.migration_details)

    @property
    def unresolved_names(self) -> List[str]:
        return [name for d in self.migration_details for name in d.unresolved_names]

    def needs_migration(self, external_id: str) -> bool:
        return any(d.external_id == external_id for d in self.migration_details)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "totalMembers": self.total_members,
            "membersNeedingMigration": self.members_needing_migration,
            "membersAlreadyMigrated": self.members_already_migrated,
            "membersWithoutMonarchData": self.members_without_monarch_data,
            "totalResolved": self.total_resolved,
            "totalUnresolved": self.total_unresolved,
            "migrationDetails": [d.to_dict() for d in self.migration_details],
        }


@dataclass(slots=True)
class DanglingReference:
    member_name: str
    external_id: str
    invalid_ids: List[str]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "memberName": self.member_name,
            "externalId": self.external_id,
            "invalidIds": list(self.invalid_ids),
        }


@dataclass(slots=True)
class ReferenceValidationReport:
    invalid_references: List[DanglingReference] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.invalid_references

    def to_dict(self) -> Dict[str, Any]:
        return {
            "isValid": self.is_valid,
            "invalidReferences": [r.to_dict() for r in self.invalid_references],
        }


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _resolve_names(names: Iterable[str], monarchs: List[Monarch]):
    """Split legacy names into (resolved ids, unresolved names)."""
    resolved: List[str] = []
    unresolved: List[str] = []
    for name in names:
        result = resolve_monarch_name(name, monarchs)
        if result.monarch_id is None:
            unresolved.append(name)
        elif result.monarch_id not in resolved:
            resolved.append(result.monarch_id)
    return resolved, unresolved


# ---------------------------------------------------------------------------
# Migration
# ---------------------------------------------------------------------------

def migrate_person(person: Any, monarchs: Iterable[Any]) -> Person:
    """
    Populate ``monarch_ids`` from the legacy name list.

    A record that already has monarch ids is returned untouched, so running
    the migration twice never overwrites migrated data. Unresolved names are
    dropped from the ids (and logged) but the legacy list itself is kept.
    """
    person = as_person(person)
    if person.monarch_ids:
        return person

    registry = build_monarchs(monarchs)
    resolved, unresolved = _resolve_names(person.monarch_names, registry)
    for name in unresolved:
        log.warning("Could not find monarch id for %r (person %s)", name, person.external_id)

    return replace(
        person,
        monarch_ids=resolved,
        monarch_names=list(person.monarch_names),
    )


def migrate_all(people: Iterable[Any], monarchs: Iterable[Any]) -> List[Person]:
    registry = build_monarchs(monarchs)
    migrated = [migrate_person(p, registry) for p in build_people(people)]
    log.info("Migrated %d records", len(migrated))
    return migrated


def build_migration_report(people: Iterable[Any], monarchs: Iterable[Any]) -> MigrationReport:
    """
    Dry-run view of the migration.

    A person with monarch ids is "already migrated"; one with legacy names
    but no ids "needs migration" and gets a detail entry listing what would
    resolve and what would not. People with neither are only counted.
    """
    registry = build_monarchs(monarchs)
    records = build_people(people)
    report = MigrationReport(total_members=len(records))

    for person in records:
        if person.monarch_ids:
            report.members_already_migrated += 1
            continue
        if not person.monarch_names:
            report.members_without_monarch_data += 1
            continue

        report.members_needing_migration += 1
        resolved, unresolved = _resolve_names(person.monarch_names, registry)
        report.migration_details.append(
            MigrationDetail(
                member_name=person.name,
                external_id=person.external_id,
                current_monarch_names=list(person.monarch_names),
                resolved_monarch_ids=resolved,
                unresolved_names=unresolved,
            )
        )

    log.info(
        "Migration report: total=%d needing=%d migrated=%d unresolved_names=%d",
        report.total_members,
        report.members_needing_migration,
        report.members_already_migrated,
        report.total_unresolved,
    )
    return report


def validate_monarch_id_references(
    people: Iterable[Any],
    monarchs: Iterable[Any],
) -> ReferenceValidationReport:
    """Find monarch ids on person records that no longer exist in the registry."""
    valid_ids = {m.id for m in build_monarchs(monarchs)}
    report = ReferenceValidationReport()

    for person in build_people(people):
        invalid = [mid for mid in person.monarch_ids if mid not in valid_ids]
        if invalid:
            report.invalid_references.append(
                DanglingReference(
                    member_name=person.name,
                    external_id=person.external_id,
                    invalid_ids=invalid,
                )
            )

    if not report.is_valid:
        log.warning("%d record(s) reference unknown monarch ids", len(report.invalid_references))
    return report
