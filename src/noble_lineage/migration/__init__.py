"""
Monarch reference migration.

    name_resolution   legacy display name -> canonical monarch id
    migrator          per-person / batch migration, dry-run report, reference check
    timeline          lifespan-based (re)assignment of monarch ids
"""

from __future__ import annotations

from .migrator import (
    DanglingReference,
    MigrationDetail,
    MigrationReport,
    ReferenceValidationReport,
    build_migration_report,
    migrate_all,
    migrate_person,
    validate_monarch_id_references,
)
from .name_resolution import (
    MATCH_STRATEGIES,
    NameResolution,
    convert_monarch_names_to_ids,
    format_monarch_display_name,
    match_exact_name,
    match_parenthetical_years,
    match_roman_numeral_infix,
    match_substring,
    match_word_set,
    resolve_monarch_name,
    resolve_monarch_name_to_id,
)
from .timeline import TimelineAssignment, TimelineAssignmentReport, assign_monarchs_by_lifespan

__all__ = [
    "DanglingReference",
    "MATCH_STRATEGIES",
    "MigrationDetail",
    "MigrationReport",
    "NameResolution",
    "ReferenceValidationReport",
    "TimelineAssignment",
    "TimelineAssignmentReport",
    "assign_monarchs_by_lifespan",
    "build_migration_report",
    "convert_monarch_names_to_ids",
    "format_monarch_display_name",
    "match_exact_name",
    "match_parenthetical_years",
    "match_roman_numeral_infix",
    "match_substring",
    "match_word_set",
    "migrate_all",
    "migrate_person",
    "resolve_monarch_name",
    "resolve_monarch_name_to_id",
    "validate_monarch_id_references",
]
