
from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from noble_lineage.cli.utils import load_snapshot
from noble_lineage.config import get_config
from noble_lineage.dates import monarchs_during_lifetime, year_of
from noble_lineage.search import get_person_by_id

console = Console()


def monarchs_command(
    external_id: str = typer.Argument(..., help="External id of the person, e.g. 0.1.2"),
    snapshot: Optional[Path] = typer.Option(
        None,
        "--snapshot",
        "-s",
        help="Snapshot JSON (defaults to <data_dir>/snapshot.json)",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging",
    ),
):
    """
    List the monarchs who reigned during a person's lifetime.
    """
    store = load_snapshot(snapshot, verbose=verbose)
    person = get_person_by_id(store.get_all_people(), external_id)

    if person is None:
        console.print(f"[red]Family member not found:[/red] {external_id}")
        raise typer.Exit(code=1)
    if person.born is None:
        console.print(f"[red]{person.name} has no birth year[/red]")
        raise typer.Exit(code=1)

    monarchs = monarchs_during_lifetime(
        person.born,
        person.died,
        store.get_all_monarchs(),
        living_sentinel=get_config().living_sentinel,
    )

    table = Table(title=f"Monarchs during {person.name}'s lifetime")
    table.add_column("Id", style="bold")
    table.add_column("Name")
    table.add_column("Reign", justify="right")

    for monarch in monarchs:
        table.add_row(
            monarch.id,
            monarch.name,
            f"{year_of(monarch.reign_from)}-{year_of(monarch.reign_to)}",
        )

    console.print(table)
    console.print(f"Found {len(monarchs)} monarch(s)")
