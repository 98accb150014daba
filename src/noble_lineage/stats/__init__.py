from __future__ import annotations

from .generation_stats import GenerationStats, TimeSpan, stats_by_generation

__all__ = ["GenerationStats", "TimeSpan", "stats_by_generation"]
