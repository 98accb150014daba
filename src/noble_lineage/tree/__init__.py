"""
Public interface for tree reconstruction.

    from noble_lineage.tree import build_tree, build_tree_with_orphans, TreeNode
"""

from __future__ import annotations

from .builder import (
    TreeBuildResult,
    TreeNode,
    build_tree,
    build_tree_with_orphans,
    resolve_parent,
)

__all__ = [
    "TreeBuildResult",
    "TreeNode",
    "build_tree",
    "build_tree_with_orphans",
    "resolve_parent",
]
