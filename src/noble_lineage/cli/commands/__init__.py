
"""
CLI command modules for noble_lineage.

Each command module defines a single Typer-compatible command function.
"""

from noble_lineage.cli.commands.assign import assign_command
from noble_lineage.cli.commands.migrate import migrate_command
from noble_lineage.cli.commands.monarchs import monarchs_command
from noble_lineage.cli.commands.search import search_command
from noble_lineage.cli.commands.stats import stats_command
from noble_lineage.cli.commands.tree import tree_command
from noble_lineage.cli.commands.validate import validate_command

__all__ = [
    "assign_command",
    "migrate_command",
    "monarchs_command",
    "search_command",
    "stats_command",
    "tree_command",
    "validate_command",
]
