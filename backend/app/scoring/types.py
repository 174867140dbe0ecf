"""Value types shared by the scoring engines."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

SETS_TO_WIN = 2
GAMES_TO_WIN_SET = 6
WIN_MARGIN = 2
SET_TARGET = 15
TIEBREAK_SET_TARGET = 11


class Side(str, Enum):
    PLAYER1 = "player1"
    PLAYER2 = "player2"

    @property
    def opponent(self) -> "Side":
        return Side.PLAYER2 if self is Side.PLAYER1 else Side.PLAYER1


class PadelPoint(str, Enum):
    """Position on the padel ladder.

    Values match the markers stored by match sessions. ``NONE`` is only
    valid while the opponent holds ``ADVANTAGE``.
    """

    LOVE = "0"
    FIFTEEN = "15"
    THIRTY = "30"
    FORTY = "40"
    ADVANTAGE = "AD"
    NONE = ""


class MatchPhase(str, Enum):
    IN_PROGRESS = "in_progress"
    GAME_COMPLETE = "game_complete"
    SET_COMPLETE = "set_complete"
    MATCH_COMPLETE = "match_complete"


@dataclass(frozen=True)
class ScoreState:
    """Snapshot for padel and racquetball matches.

    Padel uses ``PadelPoint`` markers for the scores, racquetball plain
    integers. Games are only tracked for padel.
    """

    player1_score: Union[PadelPoint, int] = 0
    player2_score: Union[PadelPoint, int] = 0
    player1_games: int = 0
    player2_games: int = 0
    player1_sets: int = 0
    player2_sets: int = 0
    current_set: int = 1
    game_winner: Optional[Side] = None
    set_winner: Optional[Side] = None
    match_winner: Optional[Side] = None

    def score(self, side: Side) -> Union[PadelPoint, int]:
        return self.player1_score if side is Side.PLAYER1 else self.player2_score

    def games(self, side: Side) -> int:
        return self.player1_games if side is Side.PLAYER1 else self.player2_games

    def sets(self, side: Side) -> int:
        return self.player1_sets if side is Side.PLAYER1 else self.player2_sets


@dataclass(frozen=True)
class OpenIRTScoreState:
    """Snapshot for Open IRT matches, where only the server scores."""

    player1_id: str
    player2_id: str
    server_id: str
    player1_score: int = 0
    player2_score: int = 0
    player1_sets: int = 0
    player2_sets: int = 0
    current_set: int = 1
    set_winner: Optional[Side] = None
    match_winner: Optional[Side] = None
    server_changed: bool = False

    def score(self, side: Side) -> int:
        return self.player1_score if side is Side.PLAYER1 else self.player2_score

    def sets(self, side: Side) -> int:
        return self.player1_sets if side is Side.PLAYER1 else self.player2_sets

    def player_id(self, side: Side) -> str:
        return self.player1_id if side is Side.PLAYER1 else self.player2_id


def phase_of(state: Union[ScoreState, OpenIRTScoreState]) -> MatchPhase:
    """Derive the state machine phase from the winner markers."""

    if state.match_winner is not None:
        return MatchPhase.MATCH_COMPLETE
    if state.set_winner is not None:
        return MatchPhase.SET_COMPLETE
    if getattr(state, "game_winner", None) is not None:
        return MatchPhase.GAME_COMPLETE
    return MatchPhase.IN_PROGRESS


def set_target(player1_sets: int, player2_sets: int) -> int:
    # the deciding set at 1-1 is played to the lower target
    if player1_sets == 1 and player2_sets == 1:
        return TIEBREAK_SET_TARGET
    return SET_TARGET


def is_set_won(score: int, opponent_score: int, target: int) -> bool:
    return score >= target and score - opponent_score >= WIN_MARGIN


def side_fields(side: Side, **values) -> dict:
    """Map side-relative field names onto ``player1_*``/``player2_*`` names.

    ``side_fields(Side.PLAYER2, score=3, opponent_score=0)`` returns
    ``{"player2_score": 3, "player1_score": 0}``.
    """

    prefix = side.value
    other = side.opponent.value
    out = {}
    for name, value in values.items():
        if name.startswith("opponent_"):
            out[f"{other}_{name[len('opponent_'):]}"] = value
        else:
            out[f"{prefix}_{name}"] = value
    return out
