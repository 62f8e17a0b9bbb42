import pytest
from httpx import ASGITransport, AsyncClient

from hoopdraft.api import create_app
from hoopdraft.config import DraftSettings
from hoopdraft.models import Player


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
async def client():
    app = create_app(DraftSettings(rounds=7, ai_team_count=3))
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as async_client:
        yield async_client


def _raw(player_id: str, name: str | None, rating: str, position: str = "PG") -> dict:
    return {
        "id": player_id,
        "name": name,
        "overallAttribute": rating,
        "primaryPosition": position,
        "height": "6'8\"",
        "threePointShot": 80,
        "midRangeShot": 80,
    }


def _player(player_id: str, primary: str, secondary: str | None = None, level: int = 99) -> dict:
    player = Player(
        player_id=player_id,
        name=f"Player {player_id}",
        primary_position=primary,
        secondary_position=secondary,
        height_inches=79,
        overall_rating=level,
        inside_scoring={"layup": level, "standing_dunk": level, "driving_dunk": level},
        shooting={"mid_range": level, "three_point": level, "free_throw": level, "shot_iq": level},
        playmaking={"pass_accuracy": level, "pass_iq": level, "pass_vision": level},
        defense={"interior": level, "perimeter": level, "defensive_rebound": level, "offensive_rebound": level},
        athleticism={"hustle": level},
        intangibles={"help_defense_iq": level},
        badges={"total": 20},
    )
    return player.model_dump(mode="json")


def _perfect_roster() -> list[dict]:
    pairs = [("PG", "SG"), ("SG", "SF"), ("SF", "PF"), ("PF", "C"), ("C", "PG")]
    return [_player(str(idx), primary, secondary) for idx, (primary, secondary) in enumerate(pairs)]


@pytest.mark.anyio
async def test_health(client: AsyncClient):
    resp = await client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


@pytest.mark.anyio
async def test_settings_endpoint(client: AsyncClient):
    resp = await client.get("/settings")
    assert resp.status_code == 200
    payload = resp.json()
    assert payload["rounds"] == 7
    assert payload["ai_team_count"] == 3
    assert payload["round_choices"] == [5, 7, 10, 12, 15]
    assert "allTime" in payload["pool_choices"]


@pytest.mark.anyio
async def test_pool_endpoint_normalizes_and_reports(client: AsyncClient):
    body = {
        "pool": "combined",
        "current": [_raw("c1", "Current Guard", "81"), _raw("c2", None, "90")],
        "all_time": [_raw("a1", "Legend Center", "97", "C"), _raw("a2", "Unknown", "n/a")],
    }
    resp = await client.post("/pool", json=body)
    assert resp.status_code == 200
    payload = resp.json()

    assert [p["player_id"] for p in payload["players"]] == ["a1", "c1"]
    assert payload["players"][0]["height_inches"] == 80
    assert payload["report"]["total_records"] == 4
    assert payload["report"]["accepted_players"] == 2
    assert payload["summary"]["overall_mean"] == pytest.approx(89.0)


@pytest.mark.anyio
async def test_pool_endpoint_applies_filters(client: AsyncClient):
    body = {
        "pool": "current",
        "current": [_raw("c1", "Guard", "81"), _raw("c2", "Center", "88", "C")],
        "position": "C",
    }
    resp = await client.post("/pool", json=body)
    assert resp.status_code == 200
    assert [p["player_id"] for p in resp.json()["players"]] == ["c2"]


@pytest.mark.anyio
async def test_needs_and_priorities(client: AsyncClient):
    roster = [_player("1", "PG", "SG")]
    resp = await client.post("/needs", json={"roster": roster, "total_rounds": 5})
    assert resp.status_code == 200
    needs = resp.json()["needs"]
    assert needs["PG"] == {"current": 1.0, "target": 1}
    assert needs["SG"]["current"] == pytest.approx(0.5)

    resp = await client.post("/priorities", json={"needs": needs})
    assert resp.status_code == 200
    priorities = resp.json()["priorities"]
    assert [p["position"] for p in priorities] == ["SF", "PF", "C", "SG", "PG"]
    assert priorities[-1]["priority"] == pytest.approx(0.0)


@pytest.mark.anyio
async def test_priorities_zero_target_is_bad_request(client: AsyncClient):
    resp = await client.post("/priorities", json={"needs": {"PG": {"current": 0, "target": 0}}})
    assert resp.status_code == 400


@pytest.mark.anyio
async def test_evaluate_endpoint(client: AsyncClient):
    resp = await client.post("/evaluate", json={"roster": _perfect_roster()})
    assert resp.status_code == 200
    payload = resp.json()
    assert payload["score"] == 100
    assert payload["feedback"].startswith("Elite Dynasty Material!")
    assert len(payload["sub_scores"]) == 10

    resp = await client.post("/evaluate", json={"roster": []})
    assert resp.json()["score"] == 0


@pytest.mark.anyio
async def test_evaluate_reads_height_from_label(client: AsyncClient):
    wing = {"player_id": "1", "name": "Wing", "primary_position": "SF", "height": "6'8\"", "overall_rating": 90}

    resp = await client.post("/evaluate", json={"roster": [wing]})
    assert resp.status_code == 200
    assert resp.json()["sub_scores"]["height_balance"] == pytest.approx(100)

    resp = await client.post(
        "/evaluate/teams",
        json={"teams": [{"team_id": "t1", "name": "Wings", "roster": [wing]}]},
    )
    assert resp.status_code == 200
    evaluation = resp.json()["standings"][0]["evaluation"]
    assert evaluation["sub_scores"]["height_balance"] == pytest.approx(100)


@pytest.mark.anyio
async def test_evaluate_teams_ranks_standings(client: AsyncClient):
    body = {
        "teams": [
            {"team_id": "t1", "name": "Your Team", "is_user": True, "roster": [_player("9", "PG", level=50)]},
            {"team_id": "t2", "name": "Miami Heat", "roster": _perfect_roster()},
        ]
    }
    resp = await client.post("/evaluate/teams", json=body)
    assert resp.status_code == 200
    standings = resp.json()["standings"]
    assert [entry["team_id"] for entry in standings] == ["t2", "t1"]
    assert standings[0]["rank"] == 1
    assert standings[1]["is_user"] is True

    resp = await client.post("/evaluate/teams", json={"teams": []})
    assert resp.status_code == 400


@pytest.mark.anyio
async def test_feedback_endpoint(client: AsyncClient):
    resp = await client.get("/feedback", params={"score": 90})
    assert resp.status_code == 200
    assert resp.json()["feedback"].startswith("Championship Caliber!")

    resp = await client.get("/feedback", params={"score": 101})
    assert resp.status_code == 422
