
from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from noble_lineage.cli.utils import build_context, load_snapshot
from noble_lineage.core.pipeline import MigrationPipeline
from noble_lineage.exporter import write_json

console = Console()


def migrate_command(
    snapshot: Optional[Path] = typer.Argument(None, help="Snapshot JSON (defaults to <data_dir>/snapshot.json)"),
    apply: bool = typer.Option(
        False,
        "--apply",
        help="Write migrated records back to the snapshot (default: dry run)",
    ),
    out: Optional[Path] = typer.Option(
        None,
        "--out",
        "-o",
        help="Also write the full migration report as JSON",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging",
    ),
):
    """
    Convert legacy monarch names to monarch ids (dry run unless --apply).
    """
    store = load_snapshot(snapshot, verbose=verbose)
    ctx = build_context(store, dry_run=not apply, output_path=out)
    report = MigrationPipeline(ctx, store).run_name_migration()

    table = Table(title="Monarch Name Migration" + ("" if apply else " (dry run)"))
    table.add_column("Members", style="bold")
    table.add_column("Count", justify="right")
    table.add_row("Total", str(report.total_members))
    table.add_row("Already migrated", str(report.members_already_migrated))
    table.add_row("Needing migration", str(report.members_needing_migration))
    table.add_row("Without monarch data", str(report.members_without_monarch_data))
    table.add_row("Resolved ids", str(report.total_resolved))
    table.add_row("Unresolved names", str(report.total_unresolved))
    console.print(table)

    for detail in report.migration_details:
        for name in detail.unresolved_names:
            console.print(f"[yellow]unresolved[/yellow] {detail.external_id}: {name}")

    if out is not None:
        write_json(report, out=out, pretty=True)

    if apply and store.dirty:
        store.save()
        console.print(f"Updated {ctx.stats.get('updated', 0)} record(s) in {store.path}")
