# src/noble_lineage/tree/builder.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Iterator, List, Optional

from noble_lineage.identity.generation import ROOT_EXTERNAL_ID
from noble_lineage.logging import get_logger
from noble_lineage.registry.build_records import build_people
from noble_lineage.registry.entities import Person

log = get_logger("tree_builder")


@dataclass
class TreeNode:
    """
    A person placed in the family tree.

    ``children`` keeps input order: a child is appended when it is reached in
    the single pass over the flat collection.
    """

    person: Person
    children: List["TreeNode"] = field(default_factory=list)

    @property
    def external_id(self) -> str:
        return self.person.external_id

    # ------------------------------------------------------------------ #
    # Traversal
    # ------------------------------------------------------------------ #

    def iter_subtree(self) -> Iterator["TreeNode"]:
        """Depth-first, pre-order walk including this node."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def node_count(self) -> int:
        return sum(1 for _ in self.iter_subtree())

    def find(self, external_id: str) -> Optional["TreeNode"]:
        for node in self.iter_subtree():
            if node.external_id == external_id:
                return node
        return None

    def to_dict(self) -> Dict[str, Any]:
        """Person document plus a nested ``children`` list (renderer input)."""
        data = self.person.to_dict()
        data["children"] = [child.to_dict() for child in self.children]
        return data

    def __repr__(self) -> str:  # pragma: no cover - cosmetic
        return f"<TreeNode {self.external_id} children={len(self.children)}>"


@dataclass
class TreeBuildResult:
    """
    Outcome of flat-to-tree reconstruction.

    root:
        The selected root with everything reachable from it.
    orphans:
        Every other root candidate (with its own subtree). These records are
        not part of ``root``; they are kept here so they can be reported
        instead of silently disappearing.
    """

    root: Optional[TreeNode]
    orphans: List[TreeNode] = field(default_factory=list)

    @property
    def orphan_ids(self) -> List[str]:
        return [o.external_id for o in self.orphans]

    def unreachable_count(self) -> int:
        return sum(o.node_count() for o in self.orphans)


# ---------------------------------------------------------------------- #
# Parent resolution
# ---------------------------------------------------------------------- #

def resolve_parent(
    person: Person,
    by_id: Dict[str, TreeNode],
    by_name: Dict[str, TreeNode],
) -> Optional[TreeNode]:
    """
    Find the node for ``person.father``.

    Compatibility shim for legacy records: ``father`` is looked up as an
    external id first and, failing that, as a display name. A reference to
    the person itself is treated as unresolved.
    """
    ref = person.father
    if not ref:
        return None

    parent = by_id.get(ref)
    if parent is None:
        parent = by_name.get(ref)

    if parent is None or parent.person is person:
        return None
    return parent


# ---------------------------------------------------------------------- #
# Builders
# ---------------------------------------------------------------------- #

def build_tree_with_orphans(
    people: Iterable[Any],
    *,
    root_external_id: str = ROOT_EXTERNAL_ID,
) -> TreeBuildResult:
    """
    Assemble the flat collection into a single rooted tree.

    Each person whose father resolves is appended as the last child of that
    father. Everyone else is a root candidate. The candidate whose id is
    ``root_external_id`` becomes the root; without one, the first candidate
    in input order does. The remaining candidates are returned as orphans.
    """
    records = build_people(people)
    if not records:
        return TreeBuildResult(root=None)

    nodes = [TreeNode(person=p) for p in records]
    by_id: Dict[str, TreeNode] = {}
    by_name: Dict[str, TreeNode] = {}
    for node in nodes:
        if node.external_id in by_id:
            log.warning("Duplicate externalId %s; keeping the first record", node.external_id)
        by_id.setdefault(node.external_id, node)
        if node.person.name:
            by_name.setdefault(node.person.name, node)

    candidates: List[TreeNode] = []
    for node in nodes:
        parent = resolve_parent(node.person, by_id, by_name)
        if parent is not None:
            parent.children.append(node)
            continue
        if node.person.father:
            log.debug(
                "Father %r of %s not found; treating as root candidate",
                node.person.father,
                node.external_id,
            )
        candidates.append(node)

    if not candidates:
        log.warning("No root candidate among %d records (every father resolved)", len(nodes))
        return TreeBuildResult(root=None)

    root = next(
        (c for c in candidates if c.external_id == root_external_id),
        candidates[0],
    )
    orphans = [c for c in candidates if c is not root]

    if orphans:
        log.warning(
            "Tree root %s; %d other root candidate(s) left out: %s",
            root.external_id,
            len(orphans),
            ", ".join(o.external_id for o in orphans),
        )
    else:
        log.debug("Tree root %s; all %d records attached", root.external_id, len(nodes))

    return TreeBuildResult(root=root, orphans=orphans)


def build_tree(
    people: Iterable[Any],
    *,
    root_external_id: str = ROOT_EXTERNAL_ID,
) -> Optional[TreeNode]:
    """
    Build the family tree and return its root (None for an empty collection).

    Use ``build_tree_with_orphans`` to see the candidates that were not
    chosen as root.
    """
    return build_tree_with_orphans(people, root_external_id=root_external_id).root
