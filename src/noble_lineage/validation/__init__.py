from __future__ import annotations

from .business_rules import (
    QualityIssue,
    check_age_at_death,
    check_death_after_birth,
    check_external_id_format,
    check_father_exists,
    check_unique_external_ids,
    run_quality_checks,
)

__all__ = [
    "QualityIssue",
    "check_age_at_death",
    "check_death_after_birth",
    "check_external_id_format",
    "check_father_exists",
    "check_unique_external_ids",
    "run_quality_checks",
]
