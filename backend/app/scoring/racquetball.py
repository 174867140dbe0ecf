"""Racquetball scoring engine.

Rally scoring: every rally awards a point. Sets are played to 15 with a
two point lead, and a deciding third set (sets tied 1-1) to 11. Matches
are best of three sets.
"""

from dataclasses import replace
import logging

from .types import SETS_TO_WIN, ScoreState, is_set_won, set_target, side_fields
from .validation import coerce_side, validate_racquetball_state

logger = logging.getLogger(__name__)


def init_state() -> ScoreState:
    return ScoreState(player1_score=0, player2_score=0)


def apply_point(state: ScoreState, point_winner) -> ScoreState:
    side = coerce_side(point_winner)
    validate_racquetball_state(state)

    if state.match_winner is not None:
        logger.warning(
            "Ignoring racquetball point for %s: match already won by %s",
            side.value,
            state.match_winner.value,
        )
        return state

    score = state.score(side) + 1
    opponent_score = state.score(side.opponent)
    target = set_target(state.player1_sets, state.player2_sets)

    if not is_set_won(score, opponent_score, target):
        return replace(
            state,
            game_winner=None,
            set_winner=None,
            match_winner=None,
            **side_fields(side, score=score),
        )

    sets = state.sets(side) + 1
    logger.debug(
        "Racquetball set %d won by %s %d-%d",
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
        game_winner=None,
        set_winner=side,
        match_winner=side if sets >= SETS_TO_WIN else None,
        **side_fields(side, sets=sets),
    )
