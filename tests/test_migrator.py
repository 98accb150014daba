# tests/test_migrator.py

from __future__ import annotations

from noble_lineage.migration import (
    build_migration_report,
    migrate_all,
    migrate_person,
    validate_monarch_id_references,
)
from noble_lineage.registry import Person


def _by_id(people):
    return {p.external_id: p for p in people}


def test_migrate_person_resolves_legacy_names(people, monarchs):
    erik = _by_id(people)["0.1"]
    migrated = migrate_person(erik, monarchs)

    assert migrated.monarch_ids == ["gustav-i-vasa", "erik-xiv", "johan-iii"]
    # legacy list kept for traceability
    assert migrated.monarch_names == erik.monarch_names
    # input untouched
    assert erik.monarch_ids == []


def test_migrate_person_drops_unresolved_names(people, monarchs):
    per = migrate_person(_by_id(people)["0.1.1"], monarchs)

    assert per.monarch_ids == ["erik-xiv", "johan-iii"]
    assert "Kung Okänd (1400–1410)" in per.monarch_names


def test_migrate_person_is_idempotent(people, monarchs):
    karin = _by_id(people)["0.2"]
    assert migrate_person(karin, monarchs) is karin

    once = migrate_person(_by_id(people)["0.1"], monarchs)
    twice = migrate_person(once, monarchs)
    assert twice.monarch_ids == once.monarch_ids


def test_migrate_person_deduplicates_ids(monarchs):
    person = Person(
        external_id="0.9",
        monarch_names=["Erik XIV", "Erik XIV (1560–1568)", "erik"],
    )
    assert migrate_person(person, monarchs).monarch_ids == ["erik-xiv"]


def test_migrate_person_without_legacy_names(monarchs):
    person = Person(external_id="0.9")
    assert migrate_person(person, monarchs).monarch_ids == []


def test_migrate_all_keeps_order(people, monarchs):
    migrated = migrate_all(people, monarchs)

    assert [p.external_id for p in migrated] == [p.external_id for p in people]
    assert _by_id(migrated)["0.1.1.1"].monarch_ids == ["gustav-ii-adolf"]


def test_report_counts(people, monarchs):
    report = build_migration_report(people, monarchs)

    assert report.total_members == 8
    assert report.members_already_migrated == 1
    assert report.members_needing_migration == 4
    assert report.members_without_monarch_data == 3
    assert report.total_resolved == 7
    assert report.total_unresolved == 1
    assert report.unresolved_names == ["Kung Okänd (1400–1410)"]


def test_report_details(people, monarchs):
    report = build_migration_report(people, monarchs)

    assert [d.external_id for d in report.migration_details] == ["0", "0.1", "0.1.1", "0.1.1.1"]
    per = report.migration_details[2]
    assert per.member_name == "Per Eriksson"
    assert per.resolved_monarch_ids == ["erik-xiv", "johan-iii"]
    assert per.unresolved_names == ["Kung Okänd (1400–1410)"]
    assert report.needs_migration("0.1")
    assert not report.needs_migration("0.2")


def test_report_is_empty_after_migration(people, monarchs):
    migrated = migrate_all(people, monarchs)
    report = build_migration_report(migrated, monarchs)

    assert report.members_needing_migration == 0
    assert report.members_already_migrated == 5
    assert report.migration_details == []


def test_report_to_dict(people, monarchs):
    data = build_migration_report(people, monarchs).to_dict()

    assert data["totalMembers"] == 8
    assert data["membersNeedingMigration"] == 4
    assert data["membersAlreadyMigrated"] == 1
    assert data["migrationDetails"][0] == {
        "memberName": "Lars Eriksson",
        "externalId": "0",
        "currentMonarchNames": ["Gustav Vasa (1523–1560)"],
        "resolvedMonarchIds": ["gustav-i-vasa"],
        "unresolvedNames": [],
    }


def test_validate_references_clean(people, monarchs):
    report = validate_monarch_id_references(migrate_all(people, monarchs), monarchs)
    assert report.is_valid
    assert report.invalid_references == []


def test_validate_references_flags_unknown_ids(monarchs):
    people = [
        Person(external_id="0", name="Lars", monarch_ids=["gustav-i-vasa", "kristina"]),
        Person(external_id="0.1", name="Erik", monarch_ids=["erik-xiv"]),
    ]
    report = validate_monarch_id_references(people, monarchs)

    assert not report.is_valid
    assert len(report.invalid_references) == 1
    ref = report.invalid_references[0]
    assert (ref.external_id, ref.member_name, ref.invalid_ids) == ("0", "Lars", ["kristina"])
    assert report.to_dict()["isValid"] is False


def test_validate_references_against_empty_registry(people):
    report = validate_monarch_id_references(people, [])
    assert [r.external_id for r in report.invalid_references] == ["0.2"]
