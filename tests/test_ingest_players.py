import json
from pathlib import Path

import pytest

from hoopdraft.ingest import (
    RawPlayerSources,
    load_player_pool,
    normalize_player,
    normalize_player_pool,
    normalize_with_report,
    parse_height_inches,
    select_pool_records,
)


def _raw(**overrides):
    record = {
        "id": "p1",
        "name": "Stephen Curry",
        "team": "Golden State Warriors",
        "height": "6'2\"",
        "primaryPosition": "PG",
        "secondaryPosition": "",
        "profilePicture": "https://example.com/curry.png",
        "overallAttribute": "94",
        "closeShot": 80,
        "layup": 88,
        "standingDunk": 30,
        "drivingDunk": 45,
        "midRangeShot": 95,
        "threePointShot": 99,
        "freeThrow": 93,
        "shotIQ": 99,
        "passAccuracy": 88,
        "passIQ": 86,
        "passVision": 87,
        "interiorDefense": 45,
        "perimeterDefense": 75,
        "defensiveRebound": 50,
        "offensiveRebound": 30,
        "hustle": 85,
        "helpDefenseIQ": 70,
        "goldBadgeCount": 7,
        "badgeCount": 24,
    }
    record.update(overrides)
    return record


def test_normalize_player_maps_groups():
    player = normalize_player(_raw())

    assert player is not None
    assert player.player_id == "p1"
    assert player.overall_rating == 94
    assert player.height_inches == 74
    assert player.secondary_position is None
    assert player.shooting.three_point == 99
    assert player.inside_scoring.layup == 88
    assert player.defense.interior == 45
    assert player.intangibles.help_defense_iq == 70
    assert player.badges.gold == 7
    assert player.badges.total == 24
    assert player.badges.legendary == 0
    assert player.athleticism.speed == 0


@pytest.mark.parametrize(
    "overrides",
    [
        {"name": None},
        {"name": ""},
        {"overallAttribute": None},
        {"overallAttribute": ""},
        {"overallAttribute": "N/A"},
    ],
)
def test_normalize_player_rejects_unusable_records(overrides):
    assert normalize_player(_raw(**overrides)) is None


def test_normalize_player_rejects_missing_rating_key():
    raw = _raw()
    del raw["overallAttribute"]
    assert normalize_player(raw) is None


@pytest.mark.parametrize("raw_rating, expected", [("85", 85), (85, 85), (85.9, 85), ("77 OVR", 77)])
def test_overall_rating_uses_leading_integer(raw_rating, expected):
    player = normalize_player(_raw(overallAttribute=raw_rating))
    assert player is not None
    assert player.overall_rating == expected


def test_secondary_position_kept_when_present():
    player = normalize_player(_raw(secondaryPosition="sg"))
    assert player is not None
    assert player.secondary_position == "SG"
    assert player.positions == ["PG", "SG"]


def test_missing_id_falls_back_to_name():
    raw = _raw()
    del raw["id"]
    player = normalize_player(raw)
    assert player is not None
    assert player.player_id == "Stephen Curry"


@pytest.mark.parametrize(
    "label, expected",
    [("6'6\"", 78), ("7'", 84), ("6'11", 83), ("5' 9\"", 69), ("6'x", 72)],
)
def test_parse_height_inches(label, expected):
    assert parse_height_inches(label) == expected


@pytest.mark.parametrize("label", ["garbage", None, "", 81])
def test_parse_height_inches_falls_back_and_logs(label, caplog):
    with caplog.at_level("WARNING"):
        assert parse_height_inches(label) == 72
    assert "Error parsing height" in caplog.text


def test_select_pool_records_variants():
    current = [_raw(id="c1")]
    all_time = [_raw(id="a1"), _raw(id="a2")]
    sources = RawPlayerSources(current=current, all_time=all_time)

    assert [r["id"] for r in select_pool_records(sources, "current")] == ["c1"]
    assert [r["id"] for r in select_pool_records(sources, "allTime")] == ["a1", "a2"]
    assert [r["id"] for r in select_pool_records(sources, "combined")] == ["c1", "a1", "a2"]


def test_unknown_pool_falls_back_to_all_time():
    sources = RawPlayerSources(current=[_raw(id="c1")], all_time=[_raw(id="a1")])
    assert [r["id"] for r in select_pool_records(sources, "legends")] == ["a1"]


def test_normalize_player_pool_sorts_best_first_and_filters():
    records = [
        _raw(id="a", name="Role Player", overallAttribute="70"),
        _raw(id="b", name="Star", overallAttribute="95"),
        _raw(id="c", name=None),
        _raw(id="d", name="Bad Rating", overallAttribute="unknown"),
        _raw(id="e", name="Starter", overallAttribute="82"),
    ]
    players = normalize_player_pool(RawPlayerSources(current=records), "current")

    assert [p.player_id for p in players] == ["b", "e", "a"]


def test_normalize_player_pool_order_independent_of_input_permutation():
    records = [_raw(id=str(idx), name=f"P{idx}", overallAttribute=str(rating)) for idx, rating in enumerate([60, 99, 75, 88])]
    forward = normalize_player_pool(RawPlayerSources(all_time=records), "allTime")
    backward = normalize_player_pool(RawPlayerSources(all_time=list(reversed(records))), "allTime")

    ratings = [p.overall_rating for p in forward]
    assert ratings == sorted(ratings, reverse=True)
    assert ratings == [p.overall_rating for p in backward]


def test_normalize_with_report_counts_rejections():
    records = [_raw(id="a"), _raw(id="b", overallAttribute="")]
    players, report = normalize_with_report(RawPlayerSources(current=records), "current")

    assert len(players) == 1
    assert report.total_records == 2
    assert report.accepted_players == 1
    assert report.rejected_records == ["Stephen Curry"]


def test_load_player_pool_reads_json(tmp_path: Path):
    current = tmp_path / "current.json"
    all_time = tmp_path / "all_time.json"
    current.write_text(json.dumps([_raw(id="c1", overallAttribute="80")]), encoding="utf-8")
    all_time.write_text(json.dumps([_raw(id="a1", overallAttribute="98")]), encoding="utf-8")

    players, report = load_player_pool(current_path=current, all_time_path=all_time, pool="combined")

    assert [p.player_id for p in players] == ["a1", "c1"]
    assert report.pool == "combined"


def test_load_player_pool_requires_array(tmp_path: Path):
    path = tmp_path / "bad.json"
    path.write_text(json.dumps({"players": []}), encoding="utf-8")

    with pytest.raises(ValueError):
        load_player_pool(current_path=path, all_time_path=None, pool="current")
