
from __future__ import annotations

import typer

from noble_lineage.cli.commands.assign import assign_command
from noble_lineage.cli.commands.migrate import migrate_command
from noble_lineage.cli.commands.monarchs import monarchs_command
from noble_lineage.cli.commands.search import search_command
from noble_lineage.cli.commands.stats import stats_command
from noble_lineage.cli.commands.tree import tree_command
from noble_lineage.cli.commands.validate import validate_command

app = typer.Typer(
    name="noble-lineage",
    help="Family tree reconstruction, generation statistics and monarch reference migration",
    add_completion=False,
)

app.command("tree")(tree_command)
app.command("stats")(stats_command)
app.command("monarchs")(monarchs_command)
app.command("migrate")(migrate_command)
app.command("assign")(assign_command)
app.command("validate")(validate_command)
app.command("search")(search_command)


def main():
    app()


if __name__ == "__main__":
    main()
