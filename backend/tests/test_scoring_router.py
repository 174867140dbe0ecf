import os
import sys

import pytest
from fastapi.testclient import TestClient

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from app.config import API_PREFIX
from app.main import app

BASE = f"{API_PREFIX}/v0/scoring"


@pytest.fixture()
def client():
    with TestClient(app) as c:
        yield c


def test_health_checks(client):
    assert client.get("/healthz").json() == {"status": "ok"}
    assert client.get(f"{API_PREFIX}/healthz").json() == {"status": "ok"}


def test_lists_scoring_sports(client):
    resp = client.get(f"{BASE}/sports")
    assert resp.status_code == 200
    ids = [s["id"] for s in resp.json()]
    assert ids == ["padel", "racquetball", "open_irt"]


def test_padel_point_moves_to_advantage(client):
    resp = client.post(
        f"{BASE}/padel/points",
        json={
            "state": {"player1Score": "40", "player2Score": "40", "player1Games": 2},
            "pointWinner": "player1",
        },
    )
    assert resp.status_code == 200
    data = resp.json()
    assert data["state"]["player1Score"] == "AD"
    assert data["state"]["player2Score"] == ""
    assert data["state"]["player1Games"] == 2
    assert data["state"]["gameWinner"] is None
    assert data["phase"] == "in_progress"


def test_padel_game_point_reports_game_complete(client):
    resp = client.post(
        f"{BASE}/padel/points",
        json={"state": {"player1Score": "0", "player2Score": "40"}, "pointWinner": "player2"},
    )
    data = resp.json()
    assert data["state"]["player2Games"] == 1
    assert data["state"]["player1Score"] == "0"
    assert data["state"]["gameWinner"] == "player2"
    assert data["phase"] == "game_complete"


def test_racquetball_deciding_set_point(client):
    resp = client.post(
        f"{BASE}/racquetball/points",
        json={
            "state": {
                "player1Score": "10",
                "player2Score": 4,
                "player1Sets": 1,
                "player2Sets": 1,
                "currentSet": 3,
            },
            "pointWinner": "player1",
        },
    )
    assert resp.status_code == 200
    data = resp.json()
    assert data["state"]["player1Sets"] == 2
    assert data["state"]["player1Score"] == 0
    assert data["state"]["matchWinner"] == "player1"
    assert data["phase"] == "match_complete"


def test_unknown_sport_is_a_problem_document(client):
    resp = client.post(
        f"{BASE}/tennis/points",
        json={"state": {}, "pointWinner": "player1"},
    )
    assert resp.status_code == 404
    assert resp.headers["content-type"].startswith("application/problem+json")
    assert resp.json()["code"] == "invalid_sport"


@pytest.mark.parametrize(
    "sport, state",
    [
        ("padel", {"player1Score": "45"}),
        ("racquetball", {"player1Score": "abc"}),
        ("racquetball", {"player1Score": "--3"}),
        ("racquetball", {"player1Score": "²"}),
        ("racquetball", {"player2Score": ""}),
    ],
)
def test_corrupt_state_is_rejected(client, sport, state):
    resp = client.post(f"{BASE}/{sport}/points", json={"state": state, "pointWinner": "player1"})
    assert resp.status_code == 422
    body = resp.json()
    assert body["code"] == "corrupt_state"
    assert body["status"] == 422


def test_invalid_point_winner_fails_validation(client):
    resp = client.post(f"{BASE}/padel/points", json={"state": {}, "pointWinner": "A"})
    assert resp.status_code == 422


def test_open_irt_receiver_takes_serve(client):
    resp = client.post(
        f"{BASE}/open-irt/points",
        json={
            "state": {"player1Id": "ana", "player2Id": "bea", "serverId": "ana", "player1Score": 6},
            "pointWinner": "player2",
        },
    )
    assert resp.status_code == 200
    data = resp.json()
    assert data["state"]["serverId"] == "bea"
    assert data["state"]["serverChanged"] is True
    assert data["state"]["player1Score"] == 6
    assert data["state"]["player2Score"] == 0


def test_open_irt_point_by_player_id(client):
    resp = client.post(
        f"{BASE}/open-irt/points",
        json={"state": {"player1Id": "ana", "player2Id": "bea"}, "playerId": "ana"},
    )
    data = resp.json()
    assert data["state"]["player1Score"] == 1
    assert data["state"]["serverChanged"] is False
    assert data["phase"] == "in_progress"


def test_open_irt_unknown_player_id(client):
    resp = client.post(
        f"{BASE}/open-irt/points",
        json={"state": {"player1Id": "ana", "player2Id": "bea"}, "playerId": "cleo"},
    )
    assert resp.status_code == 422
    assert resp.json()["code"] == "invalid_point_winner"


def test_open_irt_requires_exactly_one_winner(client):
    resp = client.post(
        f"{BASE}/open-irt/points",
        json={
            "state": {"player1Id": "ana", "player2Id": "bea"},
            "pointWinner": "player1",
            "playerId": "ana",
        },
    )
    assert resp.status_code == 422


def test_unknown_route_is_a_problem_document(client):
    resp = client.get(f"{API_PREFIX}/v0/nothing-here")
    assert resp.status_code == 404
    assert resp.headers["content-type"].startswith("application/problem+json")
    assert resp.json()["code"] == "http_404"


def test_sentry_self_test_route_is_not_exposed(client):
    assert client.post(f"{API_PREFIX}/sentry-test").status_code == 404
