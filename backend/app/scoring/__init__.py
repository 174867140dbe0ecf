"""Scoring engines for the racket sports.

``padel`` and ``racquetball`` are reachable through the generic
dispatcher. ``open_irt`` needs the serving player and is called directly.
"""

from __future__ import annotations

from types import ModuleType
from typing import Iterable, List, Optional

from ..exceptions import InvalidSportError
from . import open_irt, padel, racquetball
from .types import MatchPhase, OpenIRTScoreState, PadelPoint, ScoreState, Side, phase_of

ENGINES: dict[str, ModuleType] = {
    "padel": padel,
    "racquetball": racquetball,
}


def select_engine(sport: str) -> ModuleType:
    try:
        return ENGINES[sport]
    except (KeyError, TypeError):
        raise InvalidSportError(sport) from None


def calculate_score(sport: str, state: ScoreState, point_winner) -> ScoreState:
    return select_engine(sport).apply_point(state, point_winner)


def replay(
    sport: str, points: Iterable, state: Optional[ScoreState] = None
) -> List[ScoreState]:
    """Apply ``points`` in order and return every intermediate snapshot."""

    engine = select_engine(sport)
    state = state or engine.init_state()
    snapshots = []
    for point_winner in points:
        state = engine.apply_point(state, point_winner)
        snapshots.append(state)
    return snapshots


__all__ = [
    "ENGINES",
    "MatchPhase",
    "OpenIRTScoreState",
    "PadelPoint",
    "ScoreState",
    "Side",
    "calculate_score",
    "open_irt",
    "padel",
    "phase_of",
    "racquetball",
    "replay",
    "select_engine",
]
