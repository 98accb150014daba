# tests/test_intervals.py

from __future__ import annotations

from datetime import date

from noble_lineage.dates import (
    lifespan_interval,
    monarchs_during_lifetime,
    overlapping_reign_ids,
    parse_reign_date,
    plausible_monarchs,
    year_of,
)
from noble_lineage.registry import Monarch

ALL_IDS = ["gustav-i-vasa", "erik-xiv", "johan-iii", "sigismund", "karl-ix", "gustav-ii-adolf"]


def test_parse_reign_date_full_and_partial():
    assert parse_reign_date("1523-06-06") == date(1523, 6, 6)
    assert parse_reign_date("1523") == date(1523, 1, 1)
    assert parse_reign_date("1523", end=True) == date(1523, 12, 31)
    assert parse_reign_date(1523, end=True) == date(1523, 12, 31)
    assert parse_reign_date("1600-02", end=True) == date(1600, 2, 29)
    assert parse_reign_date("1523-06-06T00:00:00Z") == date(1523, 6, 6)


def test_parse_reign_date_rejects_garbage():
    assert parse_reign_date(None) is None
    assert parse_reign_date("unknown") is None
    assert parse_reign_date("1523-13-01") is None


def test_year_of():
    assert year_of("1560-09-29") == 1560
    assert year_of(date(1611, 10, 30)) == 1611
    assert year_of(1599) == 1599
    assert year_of("n/a") is None


def test_lifespan_covering_every_reign(monarchs):
    assert overlapping_reign_ids(1545, 1625, monarchs) == ALL_IDS


def test_boundary_year_counts_for_both_reigns(monarchs):
    # 1560: Gustav I died in September, Erik XIV succeeded the same day
    assert overlapping_reign_ids(1500, 1560, monarchs) == ["gustav-i-vasa", "erik-xiv"]
    assert overlapping_reign_ids(1560, 1560, monarchs) == ["gustav-i-vasa", "erik-xiv"]


def test_lifespan_after_a_reign_excludes_it(monarchs):
    assert overlapping_reign_ids(1561, 1570, monarchs) == ["erik-xiv", "johan-iii"]


def test_living_person_runs_until_today(monarchs):
    today = date(1600, 1, 1)
    ids = overlapping_reign_ids(1595, None, monarchs, today=today)
    assert ids == ["sigismund", "karl-ix"]

    # the sentinel death year means the same thing
    assert overlapping_reign_ids(1595, 9999, monarchs, today=today) == ids


def test_custom_living_sentinel(monarchs):
    today = date(1600, 1, 1)
    ids = overlapping_reign_ids(1595, 0, monarchs, today=today, living_sentinel=0)
    assert ids == ["sigismund", "karl-ix"]


def test_no_birth_year_yields_nothing(monarchs):
    assert monarchs_during_lifetime(None, 1600, monarchs) == []


def test_result_follows_input_order(monarchs):
    reversed_ids = overlapping_reign_ids(1545, 1625, list(reversed(monarchs)))
    assert reversed_ids == list(reversed(ALL_IDS))


def test_unparseable_reign_is_skipped(monarchs):
    broken = Monarch(id="broken", name="Broken", reign_from="unknown", reign_to="1600")
    ids = overlapping_reign_ids(1545, 1625, [broken, *monarchs])
    assert "broken" not in ids
    assert ids == ALL_IDS


def test_accepts_monarch_documents():
    docs = [{"id": "m1", "name": "M1", "reignFrom": "1500", "reignTo": "1510"}]
    assert overlapping_reign_ids(1510, 1520, docs) == ["m1"]


def test_plausible_monarchs(monarchs):
    assert [m.id for m in plausible_monarchs(None, None, monarchs)] == ALL_IDS
    assert [m.id for m in plausible_monarchs(1600, 1620, monarchs)] == ["karl-ix", "gustav-ii-adolf"]


def test_plausible_monarchs_honours_living_sentinel(monarchs):
    today = date(1600, 1, 1)
    picks = plausible_monarchs(1595, 0, monarchs, today=today, living_sentinel=0)
    assert [m.id for m in picks] == ["sigismund", "karl-ix"]


def test_bare_year_reigns_meeting_in_a_death_year():
    reigns = [
        {"id": "gustav-i-vasa", "reignFrom": "1523", "reignTo": "1560"},
        {"id": "erik-xiv", "reignFrom": "1560", "reignTo": "1568"},
    ]
    assert overlapping_reign_ids(1560, 1560, reigns) == ["gustav-i-vasa", "erik-xiv"]


def test_unrepresentable_years_yield_nothing(monarchs):
    assert lifespan_interval(-3, 40) is None
    assert lifespan_interval(1545, 10000) is None
    assert overlapping_reign_ids(0, 50, monarchs) == []
    assert overlapping_reign_ids(1545, 10000, monarchs) == []
