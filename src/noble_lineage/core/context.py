from __future__ import annotations
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, List, Optional


@dataclass
class RunContext:
    """
    State for one batch run, created by the CLI and handed to the pipeline.
    The pipeline fills ``stats`` with counters and ``errors`` with one line
    per record it could not fully process.
    """

    config: Any
    logger: Any

    snapshot_path: Optional[str] = None
    output_path: Optional[str] = None

    # Evaluation date for "still living" lifespans; None means today.
    today: Optional[date] = None
    dry_run: bool = True

    stats: Dict[str, Any] = field(default_factory=dict)
    errors: List[str] = field(default_factory=list)

    debug: bool = False

    def add_error(self, external_id: str, message: str) -> None:
        self.errors.append(f"{external_id}: {message}")
        self.logger.warning("%s: %s", external_id, message)
