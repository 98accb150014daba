
from __future__ import annotations

import time
from pathlib import Path
from typing import Optional

from rich.console import Console

from noble_lineage.config import get_config
from noble_lineage.core.context import RunContext
from noble_lineage.loader.json_store import JsonSnapshotStore
from noble_lineage.logging import get_logger, set_console_level
from noble_lineage.utils import data_path

console = Console()

DEFAULT_SNAPSHOT = "snapshot.json"


def resolve_snapshot(snapshot: Optional[Path]) -> Path:
    """Explicit path, or ``<data_dir>/snapshot.json`` from the config."""
    return snapshot if snapshot is not None else data_path(DEFAULT_SNAPSHOT)


def load_snapshot(snapshot: Optional[Path], *, verbose: bool = False) -> JsonSnapshotStore:
    """
    Read a snapshot into a store.
    """
    if verbose:
        set_console_level("DEBUG")

    path = resolve_snapshot(snapshot)
    t0 = time.perf_counter()
    store = JsonSnapshotStore(path)
    elapsed = time.perf_counter() - t0

    if verbose:
        console.log(
            f"Loaded {len(store.get_all_people())} people and "
            f"{len(store.get_all_monarchs())} monarchs in {elapsed:.2f}s"
        )

    return store


def build_context(
    store: JsonSnapshotStore,
    *,
    dry_run: bool,
    output_path: Optional[Path] = None,
) -> RunContext:
    cfg = get_config()
    return RunContext(
        config=cfg,
        logger=get_logger("cli"),
        snapshot_path=str(store.path),
        output_path=str(output_path) if output_path else None,
        dry_run=dry_run,
        debug=bool(cfg.debug),
    )


def fmt(value) -> str:
    """Table cell text; None renders as '-'."""
    return "-" if value is None else str(value)
