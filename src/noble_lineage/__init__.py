"""
noble_lineage

Data-reconciliation core for a noble family's lineage and the monarchs who
reigned over it: flat records to a rooted tree, generation depth from
hierarchical ids, lifespan/reign overlap, and migration of legacy monarch
names to canonical monarch ids.
"""

from __future__ import annotations

__version__ = "0.1.0"

from noble_lineage.dates.intervals import monarchs_during_lifetime, overlapping_reign_ids
from noble_lineage.identity.generation import add_generation_data, generation_of
from noble_lineage.migration import (
    build_migration_report,
    migrate_all,
    migrate_person,
    resolve_monarch_name_to_id,
    validate_monarch_id_references,
)
from noble_lineage.registry.entities import Monarch, Person
from noble_lineage.search import get_person_by_id, search_people
from noble_lineage.stats.generation_stats import stats_by_generation
from noble_lineage.tree.builder import TreeNode, build_tree, build_tree_with_orphans

__all__ = [
    "Monarch",
    "Person",
    "TreeNode",
    "__version__",
    "add_generation_data",
    "build_migration_report",
    "build_tree",
    "build_tree_with_orphans",
    "generation_of",
    "get_person_by_id",
    "migrate_all",
    "migrate_person",
    "monarchs_during_lifetime",
    "overlapping_reign_ids",
    "resolve_monarch_name_to_id",
    "search_people",
    "stats_by_generation",
    "validate_monarch_id_references",
]
