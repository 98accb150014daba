
from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from noble_lineage.cli.utils import fmt, load_snapshot
from noble_lineage.search import search_people

console = Console()


def search_command(
    query: str = typer.Argument(..., help="Text to look for in names and notes"),
    snapshot: Optional[Path] = typer.Option(
        None,
        "--snapshot",
        "-s",
        help="Snapshot JSON (defaults to <data_dir>/snapshot.json)",
    ),
):
    """
    Search family members by name or notes.
    """
    store = load_snapshot(snapshot)
    matches = search_people(store.get_all_people(), query)

    table = Table(title=f"Search: {query}")
    table.add_column("Id", style="bold")
    table.add_column("Name")
    table.add_column("Born", justify="right")
    table.add_column("Died", justify="right")

    for person in matches:
        table.add_row(person.external_id, person.name, fmt(person.born), fmt(person.died))

    console.print(table)
    console.print(f"{len(matches)} match(es)")
