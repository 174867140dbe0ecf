import os, sys
import pytest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))
from app.exceptions import InvalidSportError
from app.scoring import (
    MatchPhase,
    PadelPoint,
    ScoreState,
    Side,
    calculate_score,
    padel,
    phase_of,
    racquetball,
    replay,
    select_engine,
)


def test_select_engine_routes_known_sports():
    assert select_engine("padel") is padel
    assert select_engine("racquetball") is racquetball


@pytest.mark.parametrize("sport", ["tennis", "open_irt", "", "PADEL", None])
def test_select_engine_rejects_unknown_sport(sport):
    with pytest.raises(InvalidSportError) as exc:
        select_engine(sport)
    assert exc.value.code == "invalid_sport"
    assert exc.value.status_code == 404


def test_calculate_score_uses_padel_ladder():
    state = calculate_score("padel", padel.init_state(), Side.PLAYER1)
    assert state.player1_score is PadelPoint.FIFTEEN


def test_calculate_score_uses_rally_scoring():
    state = calculate_score("racquetball", racquetball.init_state(), "player2")
    assert state.player2_score == 1


def test_calculate_score_rejects_unknown_sport():
    with pytest.raises(InvalidSportError):
        calculate_score("squash", ScoreState(), Side.PLAYER1)


def test_replay_returns_every_snapshot():
    snapshots = replay("padel", ["player1"] * 4)

    assert len(snapshots) == 4
    assert [s.player1_score for s in snapshots[:3]] == [
        PadelPoint.FIFTEEN,
        PadelPoint.THIRTY,
        PadelPoint.FORTY,
    ]
    assert snapshots[-1].player1_games == 1


def test_replay_continues_from_given_state():
    start = ScoreState(player1_score=14, player2_score=0)
    snapshots = replay("racquetball", [Side.PLAYER1], start)
    assert snapshots[-1].player1_sets == 1


def test_phase_follows_winner_markers():
    assert phase_of(padel.init_state()) is MatchPhase.IN_PROGRESS

    state = replay("padel", ["player1"] * 4)[-1]
    assert phase_of(state) is MatchPhase.GAME_COMPLETE

    state = replay("racquetball", ["player1"] * 15)[-1]
    assert phase_of(state) is MatchPhase.SET_COMPLETE

    state = replay("racquetball", ["player1"] * 30)[-1]
    assert phase_of(state) is MatchPhase.MATCH_COMPLETE


def test_padel_accepts_fresh_all_zero_snapshot():
    fresh = ScoreState()
    state = calculate_score("padel", fresh, "player1")

    assert state.player1_score is PadelPoint.FIFTEEN
    assert state.player2_score is PadelPoint.LOVE
    assert fresh.player1_score == 0
