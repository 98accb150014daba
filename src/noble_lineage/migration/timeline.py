from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import date
from typing import Any, Dict, Iterable, List, Optional

from noble_lineage.dates.intervals import LIVING_SENTINEL, lifespan_interval, overlapping_reign_ids
from noble_lineage.logging import get_logger
from noble_lineage.registry.build_records import build_monarchs, build_people
from noble_lineage.registry.entities import Person

log = get_logger("timeline")

STATUS_UPDATED = "updated"
STATUS_UNCHANGED = "unchanged"
STATUS_SKIPPED = "skipped"


@dataclass(slots=True)
class TimelineAssignment:
    external_id: str
    member_name: str
    status: str
    old_monarch_count: int = 0
    monarch_ids: List[str] = field(default_factory=list)
    reason: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "memberId": self.external_id,
            "memberName": self.member_name,
            "status": self.status,
            "oldMonarchCount": self.old_monarch_count,
            "newMonarchCount": len(self.monarch_ids),
            "monarchIds": list(self.monarch_ids),
        }
        if self.reason:
            data["reason"] = self.reason
        return data


@dataclass(slots=True)
class TimelineAssignmentReport:
    total: int = 0
    entries: List[TimelineAssignment] = field(default_factory=list)
    # Copies of the records whose monarch ids changed.
    updated_people: List[Person] = field(default_factory=list)

    @property
    def updated(self) -> int:
        return len(self.updated_people)

    @property
    def processed(self) -> int:
        return sum(1 for e in self.entries if e.status != STATUS_SKIPPED)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "updated": self.updated,
            "processed": self.processed,
            "total": self.total,
            "detailedReport": [e.to_dict() for e in self.entries],
        }


def assign_monarchs_by_lifespan(
    people: Iterable[Any],
    monarchs: Iterable[Any],
    *,
    today: Optional[date] = None,
    living_sentinel: int = LIVING_SENTINEL,
) -> TimelineAssignmentReport:
    """
    Recompute every person's ``monarch_ids`` from lifespan/reign overlap.

    People without a birth year, or whose years cannot be represented as
    dates, are skipped. A record counts as updated
    only when the computed ids differ from the stored ones; updated copies
    are collected in ``updated_people`` and nothing is written anywhere.
    """
    registry = build_monarchs(monarchs)
    records = build_people(people)
    report = TimelineAssignmentReport(total=len(records))

    for person in records:
        reason = None
        if person.born is None:
            reason = "no birth year"
        elif lifespan_interval(
            person.born, person.died, today=today, living_sentinel=living_sentinel
        ) is None:
            reason = "lifespan out of range"
        if reason:
            log.warning("Skipping %s: %s", person.external_id, reason)
            report.entries.append(
                TimelineAssignment(
                    external_id=person.external_id,
                    member_name=person.name,
                    status=STATUS_SKIPPED,
                    old_monarch_count=len(person.monarch_ids),
                    monarch_ids=list(person.monarch_ids),
                    reason=reason,
                )
            )
            continue

        ids = overlapping_reign_ids(
            person.born,
            person.died,
            registry,
            today=today,
            living_sentinel=living_sentinel,
        )
        status = STATUS_UNCHANGED if ids == person.monarch_ids else STATUS_UPDATED
        report.entries.append(
            TimelineAssignment(
                external_id=person.external_id,
                member_name=person.name,
                status=status,
                old_monarch_count=len(person.monarch_ids),
                monarch_ids=ids,
            )
        )
        if status == STATUS_UPDATED:
            report.updated_people.append(replace(person, monarch_ids=ids))

    log.info(
        "Timeline assignment: %d of %d records would change (%d skipped)",
        report.updated,
        report.total,
        report.total - report.processed,
    )
    return report
