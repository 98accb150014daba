
from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from noble_lineage.cli.utils import load_snapshot
from noble_lineage.config import get_config
from noble_lineage.migration import validate_monarch_id_references
from noble_lineage.validation import run_quality_checks

console = Console()


def validate_command(
    snapshot: Optional[Path] = typer.Argument(None, help="Snapshot JSON (defaults to <data_dir>/snapshot.json)"),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging",
    ),
):
    """
    Check monarch id references and record quality. Exits 1 on any finding.
    """
    cfg = get_config()
    store = load_snapshot(snapshot, verbose=verbose)
    people = store.get_all_people()

    references = validate_monarch_id_references(people, store.get_all_monarchs())
    issues = run_quality_checks(
        people,
        age_tolerance=cfg.age_at_death_tolerance,
        living_sentinel=cfg.living_sentinel,
    )

    if not references.is_valid:
        table = Table(title="Dangling Monarch References")
        table.add_column("Person", style="bold")
        table.add_column("Unknown ids")
        for ref in references.invalid_references:
            table.add_row(f"{ref.external_id} {ref.member_name}", ", ".join(ref.invalid_ids))
        console.print(table)

    if issues:
        table = Table(title="Data Quality Issues")
        table.add_column("Person", style="bold")
        table.add_column("Code", no_wrap=True)
        table.add_column("Message")
        for issue in issues:
            table.add_row(issue.external_id, issue.code, issue.message)
        console.print(table)

    if references.is_valid and not issues:
        console.print("[green]No problems found[/green]")
        return

    console.print(
        f"{len(references.invalid_references)} dangling reference record(s), "
        f"{len(issues)} quality issue(s)"
    )
    raise typer.Exit(code=1)
