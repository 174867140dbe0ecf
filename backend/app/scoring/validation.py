"""Boundary validation for score snapshots.

Engines call the ``validate_*`` helpers on entry. The ``parse_*`` helpers
build snapshots from the camelCase records kept by match sessions, where
scores are stored as strings (``"15"``, ``"AD"``).
"""

from __future__ import annotations

from dataclasses import replace
import re
from typing import Any, Mapping, Optional

from ..exceptions import CorruptStateError, InvalidPointWinnerError
from .types import SETS_TO_WIN, OpenIRTScoreState, PadelPoint, ScoreState, Side


_INTEGER = re.compile(r"-?[0-9]+")


def coerce_side(value: Any) -> Side:
    if isinstance(value, Side):
        return value
    try:
        return Side(value)
    except ValueError:
        raise InvalidPointWinnerError(value) from None


def _require_count(name: str, value: Any, *, minimum: int = 0) -> int:
    # bool is a subclass of int; a flag is never a valid counter
    if isinstance(value, bool) or not isinstance(value, int):
        raise CorruptStateError(f"{name} must be an integer (got {value!r})")
    if value < minimum:
        raise CorruptStateError(f"{name} must be >= {minimum} (got {value})")
    return value


def _require_optional_side(name: str, value: Any) -> None:
    if value is not None and not isinstance(value, Side):
        raise CorruptStateError(f"{name} must be a side or absent (got {value!r})")


def _is_int_zero(value: Any) -> bool:
    return type(value) is int and value == 0


def _validate_sets(state) -> None:
    p1 = _require_count("player1_sets", state.player1_sets)
    p2 = _require_count("player2_sets", state.player2_sets)
    if p1 > SETS_TO_WIN or p2 > SETS_TO_WIN:
        raise CorruptStateError(f"sets cannot exceed {SETS_TO_WIN} (got {p1}-{p2})")
    if p1 == SETS_TO_WIN and p2 == SETS_TO_WIN:
        raise CorruptStateError("both sides cannot have won the match")
    _require_count("current_set", state.current_set, minimum=1)
    _require_optional_side("set_winner", state.set_winner)
    _require_optional_side("match_winner", state.match_winner)


def validate_padel_state(state: ScoreState) -> ScoreState:
    """Return ``state`` if it is a consistent padel snapshot.

    A fresh ``ScoreState()`` carries integer zero scores; those read as
    love-all and come back as a new snapshot with ``PadelPoint.LOVE`` markers.
    """
    if _is_int_zero(state.player1_score) and _is_int_zero(state.player2_score):
        state = replace(state, player1_score=PadelPoint.LOVE, player2_score=PadelPoint.LOVE)

    p1 = state.player1_score
    p2 = state.player2_score
    for name, marker in (("player1_score", p1), ("player2_score", p2)):
        if not isinstance(marker, PadelPoint):
            raise CorruptStateError(f"{name} is not a padel point marker (got {marker!r})")

    if (p1 is PadelPoint.ADVANTAGE) != (p2 is PadelPoint.NONE) or (
        p2 is PadelPoint.ADVANTAGE
    ) != (p1 is PadelPoint.NONE):
        raise CorruptStateError(
            f"advantage must be paired with an unset opponent (got {p1.value!r}-{p2.value!r})"
        )

    _require_count("player1_games", state.player1_games)
    _require_count("player2_games", state.player2_games)
    _require_optional_side("game_winner", state.game_winner)
    _validate_sets(state)
    return state


def validate_racquetball_state(state: ScoreState) -> ScoreState:
    _require_count("player1_score", state.player1_score)
    _require_count("player2_score", state.player2_score)
    _require_count("player1_games", state.player1_games)
    _require_count("player2_games", state.player2_games)
    _require_optional_side("game_winner", state.game_winner)
    _validate_sets(state)
    return state


def validate_open_irt_state(state: OpenIRTScoreState) -> OpenIRTScoreState:
    for name in ("player1_id", "player2_id", "server_id"):
        value = getattr(state, name)
        if not isinstance(value, str) or not value:
            raise CorruptStateError(f"{name} must be a non-empty string (got {value!r})")
    if state.player1_id == state.player2_id:
        raise CorruptStateError("player1_id and player2_id must differ")
    if state.server_id not in (state.player1_id, state.player2_id):
        raise CorruptStateError(f"server {state.server_id!r} is not a player in this match")

    _require_count("player1_score", state.player1_score)
    _require_count("player2_score", state.player2_score)
    if not isinstance(state.server_changed, bool):
        raise CorruptStateError("server_changed must be a boolean")
    _validate_sets(state)
    return state


def _parse_int(name: str, raw: Any, default: Optional[int] = None) -> int:
    # only an absent field defaults; an empty string is corrupt
    if raw is None:
        if default is None:
            raise CorruptStateError(f"{name} is missing")
        return default
    if isinstance(raw, bool):
        raise CorruptStateError(f"{name} must be an integer (not a boolean)")
    if isinstance(raw, int):
        return raw
    if isinstance(raw, str) and _INTEGER.fullmatch(raw.strip()):
        return int(raw.strip())
    raise CorruptStateError(f"{name} must be an integer (got {raw!r})")


def _parse_padel_point(name: str, raw: Any) -> PadelPoint:
    if raw is None:
        return PadelPoint.LOVE
    try:
        return PadelPoint(str(raw).strip().upper())
    except ValueError:
        raise CorruptStateError(f"{name} is not a padel point marker (got {raw!r})") from None


def _parse_winner(name: str, raw: Any) -> Optional[Side]:
    if raw in (None, ""):
        return None
    try:
        return Side(raw)
    except ValueError:
        raise CorruptStateError(f"{name} must be 'player1' or 'player2' (got {raw!r})") from None


def _common_fields(record: Mapping[str, Any]) -> dict:
    return {
        "player1_sets": _parse_int("player1Sets", record.get("player1Sets"), 0),
        "player2_sets": _parse_int("player2Sets", record.get("player2Sets"), 0),
        "current_set": _parse_int("currentSet", record.get("currentSet"), 1),
        "set_winner": _parse_winner("setWinner", record.get("setWinner")),
        "match_winner": _parse_winner("matchWinner", record.get("matchWinner")),
    }


def parse_padel_state(record: Mapping[str, Any]) -> ScoreState:
    state = ScoreState(
        player1_score=_parse_padel_point("player1Score", record.get("player1Score")),
        player2_score=_parse_padel_point("player2Score", record.get("player2Score")),
        player1_games=_parse_int("player1Games", record.get("player1Games"), 0),
        player2_games=_parse_int("player2Games", record.get("player2Games"), 0),
        game_winner=_parse_winner("gameWinner", record.get("gameWinner")),
        **_common_fields(record),
    )
    return validate_padel_state(state)


def parse_racquetball_state(record: Mapping[str, Any]) -> ScoreState:
    state = ScoreState(
        player1_score=_parse_int("player1Score", record.get("player1Score"), 0),
        player2_score=_parse_int("player2Score", record.get("player2Score"), 0),
        player1_games=_parse_int("player1Games", record.get("player1Games"), 0),
        player2_games=_parse_int("player2Games", record.get("player2Games"), 0),
        game_winner=_parse_winner("gameWinner", record.get("gameWinner")),
        **_common_fields(record),
    )
    return validate_racquetball_state(state)


def parse_open_irt_state(record: Mapping[str, Any]) -> OpenIRTScoreState:
    player1_id = record.get("player1Id")
    # sessions without a recorded server start with player1 serving
    server_id = record.get("serverId") or player1_id
    server_changed = record.get("serverChanged", False)
    state = OpenIRTScoreState(
        player1_id=player1_id,
        player2_id=record.get("player2Id"),
        server_id=server_id,
        player1_score=_parse_int("player1Score", record.get("player1Score"), 0),
        player2_score=_parse_int("player2Score", record.get("player2Score"), 0),
        server_changed=False if server_changed is None else server_changed,
        **_common_fields(record),
    )
    return validate_open_irt_state(state)
