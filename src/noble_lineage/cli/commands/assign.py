
from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from noble_lineage.cli.utils import build_context, load_snapshot
from noble_lineage.core.pipeline import MigrationPipeline
from noble_lineage.exporter import write_json
from noble_lineage.migration.timeline import STATUS_UNCHANGED

console = Console()


def assign_command(
    snapshot: Optional[Path] = typer.Argument(None, help="Snapshot JSON (defaults to <data_dir>/snapshot.json)"),
    apply: bool = typer.Option(
        False,
        "--apply",
        help="Write the recomputed monarch ids back to the snapshot (default: dry run)",
    ),
    out: Optional[Path] = typer.Option(
        None,
        "--out",
        "-o",
        help="Also write the detailed report as JSON",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging",
    ),
):
    """
    Recompute monarch ids from lifespan/reign overlap (dry run unless --apply).
    """
    store = load_snapshot(snapshot, verbose=verbose)
    ctx = build_context(store, dry_run=not apply, output_path=out)
    report = MigrationPipeline(ctx, store).run_timeline_assignment()

    table = Table(title="Timeline Assignment" + ("" if apply else " (dry run)"))
    table.add_column("Person", style="bold")
    table.add_column("Status")
    table.add_column("Before", justify="right")
    table.add_column("After", justify="right")

    for entry in report.entries:
        if entry.status == STATUS_UNCHANGED and not verbose:
            continue
        table.add_row(
            f"{entry.external_id} {entry.member_name}",
            entry.status if not entry.reason else f"{entry.status} ({entry.reason})",
            str(entry.old_monarch_count),
            str(len(entry.monarch_ids)),
        )

    console.print(table)
    console.print(f"{report.updated} of {report.total} record(s) {'updated' if apply else 'would change'}")

    if out is not None:
        write_json(report, out=out, pretty=True)

    if apply and store.dirty:
        store.save()
