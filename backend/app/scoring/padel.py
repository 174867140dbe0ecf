"""Padel scoring engine.
Tracks points -> games -> sets using the 0/15/30/40/advantage ladder.

A set goes to the first side with at least six games and a two game lead.
There is no tiebreak game at 6-6, so a set can run past 7 games (8-6,
9-7, ...). Matches are best of three sets.
"""

from dataclasses import replace
import logging

from .types import (
    GAMES_TO_WIN_SET,
    SETS_TO_WIN,
    WIN_MARGIN,
    PadelPoint,
    ScoreState,
    Side,
    side_fields,
)
from .validation import coerce_side, validate_padel_state

logger = logging.getLogger(__name__)

_NEXT_POINT = {
    PadelPoint.LOVE: PadelPoint.FIFTEEN,
    PadelPoint.FIFTEEN: PadelPoint.THIRTY,
    PadelPoint.THIRTY: PadelPoint.FORTY,
}


def init_state() -> ScoreState:
    return ScoreState(player1_score=PadelPoint.LOVE, player2_score=PadelPoint.LOVE)


def apply_point(state: ScoreState, point_winner) -> ScoreState:
    side = coerce_side(point_winner)
    checked = validate_padel_state(state)

    if state.match_winner is not None:
        logger.warning(
            "Ignoring padel point for %s: match already won by %s",
            side.value,
            state.match_winner.value,
        )
        return state

    state = checked
    mine = state.score(side)
    theirs = state.score(side.opponent)
    cleared = {"game_winner": None, "set_winner": None, "match_winner": None}

    # Opponent held advantage: back to deuce.
    if theirs is PadelPoint.ADVANTAGE:
        return replace(
            state,
            player1_score=PadelPoint.FORTY,
            player2_score=PadelPoint.FORTY,
            **cleared,
        )

    if mine is PadelPoint.ADVANTAGE:
        return _win_game(state, side)

    if mine is PadelPoint.FORTY:
        if theirs is PadelPoint.FORTY:
            return replace(
                state,
                **side_fields(
                    side, score=PadelPoint.ADVANTAGE, opponent_score=PadelPoint.NONE
                ),
                **cleared,
            )
        return _win_game(state, side)

    return replace(state, **side_fields(side, score=_NEXT_POINT[mine]), **cleared)


def _win_game(state: ScoreState, side: Side) -> ScoreState:
    games = state.games(side) + 1
    opponent_games = state.games(side.opponent)

    if games >= GAMES_TO_WIN_SET and games - opponent_games >= WIN_MARGIN:
        sets = state.sets(side) + 1
        logger.debug(
            "Padel set %d won by %s %d-%d", state.current_set, side.value, games, opponent_games
        )
        return replace(
            state,
            player1_score=PadelPoint.LOVE,
            player2_score=PadelPoint.LOVE,
            player1_games=0,
            player2_games=0,
            current_set=state.current_set + 1,
            game_winner=side,
            set_winner=side,
            match_winner=side if sets >= SETS_TO_WIN else None,
            **side_fields(side, sets=sets),
        )

    return replace(
        state,
        player1_score=PadelPoint.LOVE,
        player2_score=PadelPoint.LOVE,
        game_winner=side,
        set_winner=None,
        match_winner=None,
        **side_fields(side, games=games),
    )
