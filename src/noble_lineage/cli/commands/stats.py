
from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from noble_lineage.cli.utils import fmt, load_snapshot
from noble_lineage.config import get_config
from noble_lineage.stats import stats_by_generation

console = Console()


def stats_command(
    snapshot: Optional[Path] = typer.Argument(None, help="Snapshot JSON (defaults to <data_dir>/snapshot.json)"),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging",
    ),
):
    """
    Show per-generation statistics for the lineage.
    """
    store = load_snapshot(snapshot, verbose=verbose)
    stats = stats_by_generation(
        store.get_all_people(),
        living_sentinel=get_config().living_sentinel,
    )

    table = Table(title="Lineage by Generation")
    table.add_column("Generation", style="bold", justify="right")
    table.add_column("Members", justify="right")
    table.add_column("Earliest birth", justify="right")
    table.add_column("Latest death", justify="right")
    table.add_column("Avg. lifespan", justify="right")
    table.add_column("Succession sons", justify="right")

    for row in stats:
        table.add_row(
            str(row.generation),
            str(row.count),
            fmt(row.time_span.earliest),
            fmt(row.time_span.latest),
            fmt(row.avg_lifespan),
            str(row.notable_count),
        )

    console.print(table)
