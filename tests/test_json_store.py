# tests/test_json_store.py

from __future__ import annotations

import json
from dataclasses import replace

import pytest

from noble_lineage.core.exceptions import SnapshotError
from noble_lineage.loader import JsonSnapshotStore, resolve_snapshot_path


def test_store_loads_both_collections(snapshot_path):
    store = JsonSnapshotStore(snapshot_path)

    assert len(store.get_all_people()) == 8
    assert len(store.get_all_monarchs()) == 6
    assert store.dirty is False


def test_get_all_returns_copies(snapshot_path):
    store = JsonSnapshotStore(snapshot_path)
    store.get_all_people().clear()
    assert len(store.get_all_people()) == 8


def test_update_person_replaces_by_external_id(snapshot_path):
    store = JsonSnapshotStore(snapshot_path)
    lars = store.get_all_people()[0]

    store.update_person(replace(lars, monarch_ids=["gustav-i-vasa"]))

    assert store.dirty
    assert len(store.get_all_people()) == 8
    assert store.get_all_people()[0].monarch_ids == ["gustav-i-vasa"]


def test_save_writes_back(snapshot_path):
    store = JsonSnapshotStore(snapshot_path)
    lars = store.get_all_people()[0]
    store.update_person(replace(lars, monarch_ids=["gustav-i-vasa"]))
    store.save()

    assert not store.dirty
    document = json.loads(snapshot_path.read_text(encoding="utf-8"))
    assert document["people"][0]["monarchIds"] == ["gustav-i-vasa"]
    assert document["people"][0]["monarchDuringLife"] == ["Gustav Vasa (1523–1560)"]
    assert document["people"][6]["portraitUrl"] == "portraits/nils.jpg"

    reloaded = JsonSnapshotStore(snapshot_path)
    assert reloaded.get_all_people()[0].monarch_ids == ["gustav-i-vasa"]


def test_members_alias(tmp_path):
    path = tmp_path / "legacy.json"
    path.write_text(
        json.dumps({"members": [{"externalId": "0", "name": "Lars"}], "monarchs": []}),
        encoding="utf-8",
    )
    store = JsonSnapshotStore(path)

    assert [p.name for p in store.get_all_people()] == ["Lars"]
    assert "members" in store.to_document()


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        JsonSnapshotStore(tmp_path / "nope.json")


def test_directory_is_rejected(tmp_path):
    with pytest.raises(SnapshotError):
        resolve_snapshot_path(tmp_path)


def test_invalid_json(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(SnapshotError):
        JsonSnapshotStore(path)


def test_top_level_must_be_object(tmp_path):
    path = tmp_path / "list.json"
    path.write_text("[]", encoding="utf-8")
    with pytest.raises(SnapshotError):
        JsonSnapshotStore(path)
