import pytest
from fastapi.testclient import TestClient

from api.main import _cors_origins, create_app


@pytest.fixture
def client():
    return TestClient(create_app())


def _rated_rounds():
    return [
        {"id": "r1", "course_name": "Pebble Beach", "round_date": "2026-09-01",
         "total_score": 72, "course_rating": 72.0, "course_slope": 113,
         "total_putts": 30, "fairways_hit": 1, "fairways_total": 1, "round_type": "tournament"},
        {"id": "r2", "course_name": "Spyglass Hill", "round_date": "2026-09-08",
         "total_score": 75, "course_rating": 72.0, "course_slope": 120,
         "total_putts": 32, "fairways_hit": 1, "fairways_total": 13, "round_type": "practice"},
        {"id": "r3", "course_name": "Cypress Point", "round_date": "2026-09-15",
         "total_score": 70, "course_rating": 72.0, "course_slope": 110,
         "round_type": "tournament",
         "holes": [
             {"hole_number": 1, "par": 4, "score": 3},
             {"hole_number": 2, "par": 5, "score": 5},
             {"hole_number": 3, "par": 3, "score": 5},
         ]},
    ]


def test_health(client):
    resp = client.get("/api/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


def test_player_stats_endpoint(client):
    resp = client.post("/api/stats/player", json={"rounds": _rated_rounds()})
    assert resp.status_code == 200
    body = resp.json()
    assert body["rounds_played"] == 3
    assert body["scoring_average"] == 72.3
    assert body["best_round"] == 70
    assert body["worst_round"] == 75
    assert body["putts_per_round"] == 31.0
    assert body["fairways_hit_percentage"] == 14.3
    assert body["handicap_index"] == -2.0


def test_player_stats_endpoint_empty(client):
    resp = client.post("/api/stats/player", json={"rounds": []})
    assert resp.status_code == 200
    assert resp.json()["rounds_played"] == 0
    assert resp.json()["handicap_index"] is None


def test_handicap_endpoint_unavailable(client):
    resp = client.post("/api/stats/handicap", json={"rounds": _rated_rounds()[:2]})
    assert resp.status_code == 200
    assert resp.json() == {"handicap_index": None, "eligible_rounds": 2}


def test_distribution_endpoint(client):
    holes = [
        {"par": 4, "score": 4},
        {"par": 4, "score": 3},
        {"par": 4, "score": None},
    ]
    resp = client.post("/api/stats/distribution", json={"holes": holes})
    assert resp.status_code == 200
    assert resp.json() == {"eagles": 0, "birdies": 1, "pars": 1, "bogeys": 0, "double_plus": 0}


def test_trend_endpoint(client):
    rounds = [
        {"round_date": f"2026-0{month}-01", "total_score": score}
        for month, score in zip(range(1, 5), [90, 91, 80, 81])
    ]
    resp = client.post("/api/stats/trend", json={"rounds": rounds})
    assert resp.status_code == 200
    assert resp.json() == {"trend": "improving"}


def test_team_endpoint(client):
    rounds = [
        {"player_id": "a", "round_date": "2026-10-02", "total_score": 80},
        {"player_id": "a", "round_date": "2026-09-20", "total_score": 82},
        {"player_id": "b", "round_date": "2026-10-05", "total_score": 78},
    ]
    resp = client.post(
        "/api/stats/team",
        json={"total_players": 2, "active_players": 2, "rounds": rounds, "today": "2026-10-19"},
    )
    assert resp.status_code == 200
    body = resp.json()
    assert body["best_team_round"] == 78
    assert body["team_scoring_average"] == 80.0
    assert body["rounds_this_month"] == 2


def test_dashboard_endpoint(client):
    resp = client.post("/api/stats/dashboard", json={"rounds": _rated_rounds()})
    assert resp.status_code == 200
    body = resp.json()
    assert body["stats"]["rounds_played"] == 3
    assert body["trend"] == "stable"
    assert body["distribution"]["birdies"] == 1
    assert body["distribution"]["double_plus"] == 1
    assert body["best_round_id"] == "r3"
    assert body["best_round_course"] == "Cypress Point"
    assert [r["id"] for r in body["recent_rounds"]] == ["r3", "r2", "r1"]
    assert body["recent_rounds"][0]["to_par"] == 1
    assert body["average_by_round_type"] == {"tournament": 71.0, "practice": 75.0}


def test_invalid_round_rejected(client):
    bad = {"total_score": 80, "fairways_hit": 10, "fairways_total": 7}
    resp = client.post("/api/stats/player", json={"rounds": [bad]})
    assert resp.status_code == 422


def test_cors_origins_from_env(monkeypatch):
    monkeypatch.setenv("CORS_ORIGINS", "https://a.example.com, https://b.example.com,")
    assert _cors_origins() == ["https://a.example.com", "https://b.example.com"]

    monkeypatch.delenv("CORS_ORIGINS")
    assert _cors_origins() == ["http://localhost:5173"]
