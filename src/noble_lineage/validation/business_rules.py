"""
Data-quality rules for person records.

These checks report problems; they never change or reject data. The core
derivations (tree, stats, overlap, migration) run regardless of what is
reported here.
"""

from __future__ import annotations

import re
from collections import Counter
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Sequence

from noble_lineage.dates.intervals import LIVING_SENTINEL
from noble_lineage.logging import get_logger
from noble_lineage.registry.build_records import build_people
from noble_lineage.registry.entities import Person

log = get_logger("business_rules")

EXTERNAL_ID_RE = re.compile(r"^[0-9]+(\.[0-9]+)*$")
AGE_AT_DEATH_TOLERANCE = 1

FATHER_NOT_FOUND = "FATHER_NOT_FOUND"
INVALID_EXTERNAL_ID_FORMAT = "INVALID_EXTERNAL_ID_FORMAT"
AGE_MISMATCH = "AGE_MISMATCH"
DEATH_BEFORE_BIRTH = "DEATH_BEFORE_BIRTH"
DUPLICATE_EXTERNAL_ID = "DUPLICATE_EXTERNAL_ID"


@dataclass(slots=True, frozen=True)
class QualityIssue:
    external_id: str
    field: str
    code: str
    message: str
    value: Any = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "externalId": self.external_id,
            "field": self.field,
            "code": self.code,
            "message": self.message,
            "value": self.value,
        }


# ---------------------------------------------------------------------------
# Single-record rules
# ---------------------------------------------------------------------------

def check_father_exists(person: Person, people: Sequence[Person]) -> List[QualityIssue]:
    """The father reference must match some record's external id or name."""
    if not person.father:
        return []
    if any(p.external_id == person.father or p.name == person.father for p in people):
        return []
    return [
        QualityIssue(
            external_id=person.external_id,
            field="father",
            code=FATHER_NOT_FOUND,
            message=f"Father '{person.father}' does not exist in the family tree",
            value=person.father,
        )
    ]


def check_external_id_format(person: Person) -> List[QualityIssue]:
    if EXTERNAL_ID_RE.match(person.external_id):
        return []
    return [
        QualityIssue(
            external_id=person.external_id,
            field="externalId",
            code=INVALID_EXTERNAL_ID_FORMAT,
            message=(
                f"External ID '{person.external_id}' is not in the hierarchical "
                'format ("0", "0.1", "1.2.3")'
            ),
            value=person.external_id,
        )
    ]


def check_age_at_death(
    person: Person,
    *,
    tolerance: int = AGE_AT_DEATH_TOLERANCE,
    living_sentinel: int = LIVING_SENTINEL,
) -> List[QualityIssue]:
    if person.born is None or person.died is None or person.age_at_death is None:
        return []
    if person.died == living_sentinel:
        return []
    calculated = person.died - person.born
    if abs(calculated - person.age_at_death) <= tolerance:
        return []
    return [
        QualityIssue(
            external_id=person.external_id,
            field="ageAtDeath",
            code=AGE_MISMATCH,
            message=(
                f"Age at death ({person.age_at_death}) does not match calculated age "
                f"from birth/death years ({calculated})"
            ),
            value=person.age_at_death,
        )
    ]


def check_death_after_birth(
    person: Person,
    *,
    living_sentinel: int = LIVING_SENTINEL,
) -> List[QualityIssue]:
    if person.born is None or person.died is None or person.died == living_sentinel:
        return []
    if person.died >= person.born:
        return []
    return [
        QualityIssue(
            external_id=person.external_id,
            field="died",
            code=DEATH_BEFORE_BIRTH,
            message=f"Death year ({person.died}) is before birth year ({person.born})",
            value=person.died,
        )
    ]


# ---------------------------------------------------------------------------
# Collection rules
# ---------------------------------------------------------------------------

def check_unique_external_ids(people: Sequence[Person]) -> List[QualityIssue]:
    counts = Counter(p.external_id for p in people)
    return [
        QualityIssue(
            external_id=external_id,
            field="externalId",
            code=DUPLICATE_EXTERNAL_ID,
            message=f"External ID '{external_id}' is used by {n} records",
            value=external_id,
        )
        for external_id, n in counts.items()
        if n > 1
    ]


def run_quality_checks(
    people: Iterable[Any],
    *,
    age_tolerance: int = AGE_AT_DEATH_TOLERANCE,
    living_sentinel: int = LIVING_SENTINEL,
    codes: Optional[Iterable[str]] = None,
) -> List[QualityIssue]:
    """
    Run every rule over the collection and return the issues in record order.
    ``codes`` limits the output to the given issue codes.
    """
    records = build_people(people)
    issues: List[QualityIssue] = list(check_unique_external_ids(records))

    for person in records:
        issues.extend(check_external_id_format(person))
        issues.extend(check_father_exists(person, records))
        issues.extend(check_death_after_birth(person, living_sentinel=living_sentinel))
        issues.extend(
            check_age_at_death(person, tolerance=age_tolerance, living_sentinel=living_sentinel)
        )

    if codes is not None:
        wanted = set(codes)
        issues = [i for i in issues if i.code in wanted]

    if issues:
        log.info("Quality checks found %d issue(s) across %d records", len(issues), len(records))
    return issues
