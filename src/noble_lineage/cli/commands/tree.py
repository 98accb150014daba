from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from noble_lineage.cli.utils import load_snapshot
from noble_lineage.config import get_config
from noble_lineage.exporter import write_json
from noble_lineage.tree import build_tree_with_orphans

console = Console(stderr=True)


def tree_command(
    snapshot: Optional[Path] = typer.Argument(None, help="Snapshot JSON (defaults to <data_dir>/snapshot.json)"),
    out: Optional[Path] = typer.Option(
        None,
        "--out",
        "-o",
        help="Write output to file instead of stdout",
    ),
    pretty: bool = typer.Option(
        False,
        "--pretty",
        help="Pretty-print JSON",
    ),
    show_orphans: bool = typer.Option(
        False,
        "--show-orphans",
        help="Include root candidates that were left out of the tree",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging",
    ),
):
    """
    Build the family tree and export it as nested JSON.
    """
    store = load_snapshot(snapshot, verbose=verbose)
    result = build_tree_with_orphans(
        store.get_all_people(),
        root_external_id=get_config().root_external_id,
    )

    if result.root is None:
        console.print("[yellow]No tree: the snapshot has no usable root[/yellow]")
        raise typer.Exit(code=1)

    data = {"root": result.root}
    if show_orphans:
        data["orphans"] = result.orphans

    write_json(data, out=out, pretty=pretty)

    if result.orphans:
        console.print(
            f"[yellow]{len(result.orphans)} root candidate(s) not attached:[/yellow] "
            + ", ".join(result.orphan_ids)
        )
