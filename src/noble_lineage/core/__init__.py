"""
Orchestration layer: run context, exception hierarchy and batch pipeline.
"""

from __future__ import annotations

from .context import RunContext
from .exceptions import LineageError, PipelineExecutionError, RecordShapeError, SnapshotError

__all__ = [
    "LineageError",
    "PipelineExecutionError",
    "RecordShapeError",
    "RunContext",
    "SnapshotError",
]
