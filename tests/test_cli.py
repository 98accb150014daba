# tests/test_cli.py

from __future__ import annotations

import json

from typer.testing import CliRunner

from noble_lineage.cli.app import app

runner = CliRunner()


def _read(path):
    return json.loads(path.read_text(encoding="utf-8"))


def test_tree_writes_nested_json(snapshot_path, tmp_path):
    out = tmp_path / "tree.json"
    result = runner.invoke(app, ["tree", str(snapshot_path), "--out", str(out), "--show-orphans"])

    assert result.exit_code == 0, result.output
    data = _read(out)
    assert data["root"]["externalId"] == "0"
    assert [c["externalId"] for c in data["root"]["children"]] == ["0.1", "0.2", "0.3"]
    assert [o["externalId"] for o in data["orphans"]] == ["3.1"]


def test_tree_on_empty_snapshot_fails(tmp_path):
    path = tmp_path / "empty.json"
    path.write_text(json.dumps({"people": [], "monarchs": []}), encoding="utf-8")

    result = runner.invoke(app, ["tree", str(path)])
    assert result.exit_code == 1


def test_stats(snapshot_path):
    result = runner.invoke(app, ["stats", str(snapshot_path)])

    assert result.exit_code == 0, result.output
    assert "Lineage by Generation" in result.output


def test_monarchs_for_person(snapshot_path):
    result = runner.invoke(app, ["monarchs", "0.1.1", "--snapshot", str(snapshot_path)])

    assert result.exit_code == 0, result.output
    assert "Found 6 monarch(s)" in result.output


def test_monarchs_unknown_person(snapshot_path):
    result = runner.invoke(app, ["monarchs", "9.9", "--snapshot", str(snapshot_path)])
    assert result.exit_code == 1


def test_monarchs_without_birth_year(snapshot_path):
    result = runner.invoke(app, ["monarchs", "0.3", "--snapshot", str(snapshot_path)])
    assert result.exit_code == 1


def test_migrate_dry_run_leaves_snapshot(snapshot_path, tmp_path):
    before = snapshot_path.read_text(encoding="utf-8")
    out = tmp_path / "report.json"

    result = runner.invoke(app, ["migrate", str(snapshot_path), "--out", str(out)])

    assert result.exit_code == 0, result.output
    assert snapshot_path.read_text(encoding="utf-8") == before
    report = _read(out)
    assert report["membersNeedingMigration"] == 4
    assert report["totalUnresolved"] == 1


def test_migrate_apply_writes_ids(snapshot_path):
    result = runner.invoke(app, ["migrate", str(snapshot_path), "--apply"])

    assert result.exit_code == 0, result.output
    people = {p["externalId"]: p for p in _read(snapshot_path)["people"]}
    assert people["0"]["monarchIds"] == ["gustav-i-vasa"]
    assert people["0.1.1"]["monarchIds"] == ["erik-xiv", "johan-iii"]
    assert people["0.1.1"]["monarchDuringLife"][-1] == "Kung Okänd (1400–1410)"


def test_assign_apply(snapshot_path, tmp_path):
    out = tmp_path / "assign.json"
    result = runner.invoke(app, ["assign", str(snapshot_path), "--apply", "--out", str(out)])

    assert result.exit_code == 0, result.output
    assert "6 of 8 record(s) updated" in result.output
    assert _read(out)["updated"] == 6
    people = {p["externalId"]: p for p in _read(snapshot_path)["people"]}
    assert people["0"]["monarchIds"] == ["gustav-i-vasa", "erik-xiv"]


def test_validate_reports_findings(snapshot_path):
    result = runner.invoke(app, ["validate", str(snapshot_path)])

    assert result.exit_code == 1
    assert "2 quality issue(s)" in result.output


def test_validate_clean_snapshot(tmp_path):
    path = tmp_path / "clean.json"
    path.write_text(
        json.dumps(
            {
                "people": [
                    {"externalId": "0", "name": "Lars", "born": 1500, "died": 1560, "ageAtDeath": 60},
                    {"externalId": "0.1", "name": "Erik", "father": "0", "monarchIds": ["erik-xiv"]},
                ],
                "monarchs": [
                    {"id": "erik-xiv", "name": "Erik XIV", "reignFrom": "1560-09-29", "reignTo": "1568-09-29"}
                ],
            }
        ),
        encoding="utf-8",
    )
    result = runner.invoke(app, ["validate", str(path)])

    assert result.exit_code == 0, result.output
    assert "No problems found" in result.output


def test_search(snapshot_path):
    result = runner.invoke(app, ["search", "bielke", "--snapshot", str(snapshot_path)])

    assert result.exit_code == 0, result.output
    assert "1 match(es)" in result.output


def test_missing_snapshot(tmp_path):
    result = runner.invoke(app, ["stats", str(tmp_path / "nope.json")])
    assert result.exit_code != 0
