# tests/test_exporter.py

from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import date

from noble_lineage.exporter import serialize_json, to_json_compatible, write_json
from noble_lineage.stats import stats_by_generation
from noble_lineage.tree import build_tree


@dataclass
class _Plain:
    name: str
    when: date


def test_to_dict_objects_keep_document_shape(people):
    data = to_json_compatible(stats_by_generation(people))
    assert data[0]["timeSpan"] == {"earliest": 1500, "latest": 1560}


def test_plain_dataclasses_and_dates():
    data = to_json_compatible({"item": _Plain("x", date(1560, 9, 29)), "tags": {"a"}})
    assert data == {"item": {"name": "x", "when": "1560-09-29"}, "tags": ["a"]}


def test_serialize_compact_and_pretty():
    assert serialize_json({"a": [1, 2]}, pretty=False) == '{"a":[1,2]}'
    assert "\n" in serialize_json({"a": [1, 2]}, pretty=True)
    assert serialize_json({"name": "Märta"}, pretty=False) == '{"name":"Märta"}'


def test_write_json_to_file(tmp_path, people):
    out = tmp_path / "nested" / "tree.json"
    write_json({"root": build_tree(people)}, out=out)

    data = json.loads(out.read_text(encoding="utf-8"))
    assert data["root"]["externalId"] == "0"
    assert len(data["root"]["children"]) == 3


def test_write_json_to_stdout(capsys):
    write_json({"ok": True}, out=None, pretty=False)
    assert capsys.readouterr().out.strip() == '{"ok":true}'
