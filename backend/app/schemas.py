from typing import Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .scoring import MatchPhase, OpenIRTScoreState, ScoreState, phase_of

SideLiteral = Literal["player1", "player2"]


class SportOut(BaseModel):
    id: str
    name: str


class ScoreStateIn(BaseModel):
    """Padel or racquetball snapshot as stored by match sessions.

    Padel scores are ladder markers (``"0"``, ``"15"``, ``"30"``, ``"40"``,
    ``"AD"``, ``""``); racquetball scores are integers.
    """

    player1Score: Union[int, str] = 0
    player2Score: Union[int, str] = 0
    player1Games: int = 0
    player2Games: int = 0
    player1Sets: int = 0
    player2Sets: int = 0
    currentSet: int = 1
    gameWinner: Optional[SideLiteral] = None
    setWinner: Optional[SideLiteral] = None
    matchWinner: Optional[SideLiteral] = None

    model_config = ConfigDict(extra="forbid")


class ScoreStateOut(BaseModel):
    player1Score: Union[int, str]
    player2Score: Union[int, str]
    player1Games: int
    player2Games: int
    player1Sets: int
    player2Sets: int
    currentSet: int
    gameWinner: Optional[SideLiteral] = None
    setWinner: Optional[SideLiteral] = None
    matchWinner: Optional[SideLiteral] = None

    @classmethod
    def from_state(cls, state: ScoreState) -> "ScoreStateOut":
        return cls(
            player1Score=_score_value(state.player1_score),
            player2Score=_score_value(state.player2_score),
            player1Games=state.player1_games,
            player2Games=state.player2_games,
            player1Sets=state.player1_sets,
            player2Sets=state.player2_sets,
            currentSet=state.current_set,
            gameWinner=_side_value(state.game_winner),
            setWinner=_side_value(state.set_winner),
            matchWinner=_side_value(state.match_winner),
        )


class PointIn(BaseModel):
    state: ScoreStateIn
    pointWinner: SideLiteral


class ScoringResultOut(BaseModel):
    state: ScoreStateOut
    phase: MatchPhase


class OpenIRTStateIn(BaseModel):
    player1Id: str = Field(..., min_length=1)
    player2Id: str = Field(..., min_length=1)
    serverId: Optional[str] = None
    player1Score: Union[int, str] = 0
    player2Score: Union[int, str] = 0
    player1Sets: int = 0
    player2Sets: int = 0
    currentSet: int = 1
    setWinner: Optional[SideLiteral] = None
    matchWinner: Optional[SideLiteral] = None
    serverChanged: bool = False

    model_config = ConfigDict(extra="forbid")


class OpenIRTStateOut(BaseModel):
    player1Id: str
    player2Id: str
    serverId: str
    player1Score: int
    player2Score: int
    player1Sets: int
    player2Sets: int
    currentSet: int
    setWinner: Optional[SideLiteral] = None
    matchWinner: Optional[SideLiteral] = None
    serverChanged: bool

    @classmethod
    def from_state(cls, state: OpenIRTScoreState) -> "OpenIRTStateOut":
        return cls(
            player1Id=state.player1_id,
            player2Id=state.player2_id,
            serverId=state.server_id,
            player1Score=state.player1_score,
            player2Score=state.player2_score,
            player1Sets=state.player1_sets,
            player2Sets=state.player2_sets,
            currentSet=state.current_set,
            setWinner=_side_value(state.set_winner),
            matchWinner=_side_value(state.match_winner),
            serverChanged=state.server_changed,
        )


class OpenIRTPointIn(BaseModel):
    """A rally result, identified either by side or by the winning player."""

    state: OpenIRTStateIn
    pointWinner: Optional[SideLiteral] = None
    playerId: Optional[str] = None

    @model_validator(mode="after")
    def _exactly_one_winner(self) -> "OpenIRTPointIn":
        if (self.pointWinner is None) == (self.playerId is None):
            raise ValueError("provide exactly one of pointWinner or playerId")
        return self


class OpenIRTResultOut(BaseModel):
    state: OpenIRTStateOut
    phase: MatchPhase


def _score_value(value):
    # PadelPoint is a str enum; emit the bare marker
    return getattr(value, "value", value)


def _side_value(side):
    return side.value if side is not None else None


def scoring_result(state: ScoreState) -> ScoringResultOut:
    return ScoringResultOut(state=ScoreStateOut.from_state(state), phase=phase_of(state))


def open_irt_result(state: OpenIRTScoreState) -> OpenIRTResultOut:
    return OpenIRTResultOut(state=OpenIRTStateOut.from_state(state), phase=phase_of(state))
