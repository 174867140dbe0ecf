"""Open IRT racquetball scoring engine.

Only the server can score. When the receiver wins a rally the serve
passes to them and no point is awarded. Set targets match racquetball:
15 points, or 11 in a deciding set, always with a two point lead.
"""

from dataclasses import replace
import logging
from typing import Optional

from ..exceptions import CorruptStateError, InvalidPointWinnerError
from .types import (
    SETS_TO_WIN,
    OpenIRTScoreState,
    Side,
    is_set_won,
    set_target,
    side_fields,
)
from .validation import coerce_side, validate_open_irt_state

logger = logging.getLogger(__name__)


def init_state(
    player1_id: str, player2_id: str, server_id: Optional[str] = None
) -> OpenIRTScoreState:
    """Start a match with ``server_id`` serving (player1 when omitted)."""

    state = OpenIRTScoreState(
        player1_id=player1_id,
        player2_id=player2_id,
        server_id=server_id or player1_id,
    )
    return validate_open_irt_state(state)


def side_of(state: OpenIRTScoreState, player_id: str) -> Side:
    if player_id == state.player1_id:
        return Side.PLAYER1
    if player_id == state.player2_id:
        return Side.PLAYER2
    raise InvalidPointWinnerError(
        player_id, detail=f"player {player_id!r} is not part of this match"
    )


def serving_side(state: OpenIRTScoreState) -> Side:
    try:
        return side_of(state, state.server_id)
    except InvalidPointWinnerError:
        raise CorruptStateError(
            f"server {state.server_id!r} is not a player in this match"
        ) from None


def apply_point(state: OpenIRTScoreState, point_winner) -> OpenIRTScoreState:
    side = coerce_side(point_winner)
    validate_open_irt_state(state)

    if state.match_winner is not None:
        logger.warning(
            "Ignoring Open IRT rally for %s: match already won by %s",
            side.value,
            state.match_winner.value,
        )
        return state

    winner_id = state.player_id(side)
    if winner_id != state.server_id:
        # receiver won the rally: side out, no point
        return replace(
            state,
            server_id=winner_id,
            server_changed=True,
            set_winner=None,
            match_winner=None,
        )

    score = state.score(side) + 1
    opponent_score = state.score(side.opponent)
    target = set_target(state.player1_sets, state.player2_sets)

    if not is_set_won(score, opponent_score, target):
        return replace(
            state,
            server_changed=False,
            set_winner=None,
            match_winner=None,
            **side_fields(side, score=score),
        )

    sets = state.sets(side) + 1
    logger.debug(
        "Open IRT set %d won by %s %d-%d",
        state.current_set,
        side.value,
        score,
        opponent_score,
    )
    return replace(
        state,
        player1_score=0,
        player2_score=0,
        current_set=state.current_set + 1,
        server_changed=False,
        set_winner=side,
        match_winner=side if sets >= SETS_TO_WIN else None,
        **side_fields(side, sets=sets),
    )


def apply_ace(state: OpenIRTScoreState) -> OpenIRTScoreState:
    """An ace is a rally won by the server."""

    return apply_point(state, serving_side(state))


def apply_double_fault(state: OpenIRTScoreState) -> OpenIRTScoreState:
    """A double fault hands the rally, and so the serve, to the receiver."""

    return apply_point(state, serving_side(state).opponent)
