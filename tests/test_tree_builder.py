# tests/test_tree_builder.py

from __future__ import annotations

from noble_lineage.registry import Person
from noble_lineage.tree import TreeNode, build_tree, build_tree_with_orphans


def _ids(nodes):
    return [n.external_id for n in nodes]


def test_build_tree_returns_root_zero(people):
    root = build_tree(people)

    assert isinstance(root, TreeNode)
    assert root.external_id == "0"


def test_children_keep_input_order(people):
    root = build_tree(people)

    assert _ids(root.children) == ["0.1", "0.2", "0.3"]
    assert _ids(root.find("0.1").children) == ["0.1.1", "0.1.2"]
    assert _ids(root.find("0.1.1").children) == ["0.1.1.1"]


def test_father_given_by_name_is_resolved(people):
    root = build_tree(people)

    karin = root.find("0.2")
    assert karin is not None
    assert karin in root.children


def test_orphan_is_reported_not_attached(people):
    result = build_tree_with_orphans(people)

    assert result.root.external_id == "0"
    assert result.orphan_ids == ["3.1"]
    assert result.root.find("3.1") is None
    assert result.unreachable_count() == 1
    # every record is accounted for
    assert result.root.node_count() + result.unreachable_count() == len(people)


def test_root_is_deterministic_regardless_of_order(people):
    shuffled = list(reversed(people))
    result = build_tree_with_orphans(shuffled)

    assert result.root.external_id == "0"
    assert result.orphan_ids == ["3.1"]


def test_first_candidate_is_root_without_zero():
    people = [
        Person(external_id="5.1", name="Child", father="5"),
        Person(external_id="5", name="Head"),
        Person(external_id="6", name="Other head"),
    ]
    result = build_tree_with_orphans(people)

    # father listed after the child still resolves
    assert result.root.external_id == "5"
    assert _ids(result.root.children) == ["5.1"]
    assert result.orphan_ids == ["6"]


def test_empty_collection_has_no_root():
    assert build_tree([]) is None
    result = build_tree_with_orphans([])
    assert result.root is None
    assert result.orphans == []


def test_self_reference_is_a_root_candidate():
    people = [Person(external_id="0", name="Loop", father="0")]
    root = build_tree(people)

    assert root.external_id == "0"
    assert root.children == []


def test_duplicate_ids_keep_first_record():
    people = [
        Person(external_id="0", name="First"),
        Person(external_id="0", name="Second"),
        Person(external_id="0.1", name="Child", father="0"),
    ]
    result = build_tree_with_orphans(people)

    assert result.root.person.name == "First"
    assert _ids(result.root.children) == ["0.1"]
    assert _ids(result.orphans) == ["0"]


def test_accepts_raw_documents():
    root = build_tree(
        [
            {"externalId": "0", "name": "Root"},
            {"externalId": "0.1", "name": "Son", "father": "0"},
        ]
    )
    assert _ids(root.children) == ["0.1"]


def test_to_dict_nests_children(people):
    data = build_tree(people).to_dict()

    assert data["externalId"] == "0"
    assert [c["externalId"] for c in data["children"]] == ["0.1", "0.2", "0.3"]
    assert data["children"][0]["children"][0]["name"] == "Per Eriksson"
