from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional

from noble_lineage.dates.intervals import LIVING_SENTINEL
from noble_lineage.identity.generation import generation_for
from noble_lineage.registry.build_records import build_people
from noble_lineage.registry.entities import Person


@dataclass(slots=True)
class TimeSpan:
    earliest: Optional[int] = None
    latest: Optional[int] = None


@dataclass(slots=True)
class GenerationStats:
    """Summary of one generation, as consumed by the timeline view."""
    generation: int
    count: int
    time_span: TimeSpan
    avg_lifespan: Optional[int]
    notable_count: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "generation": self.generation,
            "count": self.count,
            "timeSpan": {
                "earliest": self.time_span.earliest,
                "latest": self.time_span.latest,
            },
            "avgLifespan": self.avg_lifespan,
            "notableCount": self.notable_count,
        }


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _summarize(generation: int, members: List[Person], living_sentinel: int) -> GenerationStats:
    births = [m.born for m in members if m.born is not None]
    deaths = [m.died for m in members if m.died is not None and m.died != living_sentinel]
    ages = [m.age_at_death for m in members if m.age_at_death is not None]

    return GenerationStats(
        generation=generation,
        count=len(members),
        time_span=TimeSpan(
            earliest=min(births) if births else None,
            latest=max(deaths) if deaths else None,
        ),
        avg_lifespan=_round_half_up(sum(ages) / len(ages)) if ages else None,
        notable_count=sum(1 for m in members if m.is_succession_son),
    )


def stats_by_generation(
    people: Iterable[Any],
    *,
    living_sentinel: int = LIVING_SENTINEL,
) -> List[GenerationStats]:
    """
    Per-generation summaries, ascending by generation.

    Generations with no members are absent rather than zero-filled. The
    living sentinel is not a death year and is ignored for ``latest``.
    """
    groups: Dict[int, List[Person]] = {}
    for person in build_people(people):
        groups.setdefault(generation_for(person), []).append(person)

    return [
        _summarize(generation, groups[generation], living_sentinel)
        for generation in sorted(groups)
    ]
