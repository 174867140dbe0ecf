# backend/app/routers/scoring.py
from fastapi import APIRouter

from ..config import SPORT_NAMES
from ..scoring import ENGINES, calculate_score, open_irt, select_engine
from ..scoring.validation import (
    parse_open_irt_state,
    parse_padel_state,
    parse_racquetball_state,
)
from ..schemas import (
    OpenIRTPointIn,
    OpenIRTResultOut,
    PointIn,
    ScoringResultOut,
    SportOut,
    open_irt_result,
    scoring_result,
)

# Resource-only prefix
router = APIRouter(prefix="/scoring", tags=["scoring"])

_STATE_PARSERS = {
    "padel": parse_padel_state,
    "racquetball": parse_racquetball_state,
}


# GET /api/v0/scoring/sports
@router.get("/sports", response_model=list[SportOut])
async def list_scoring_sports() -> list[SportOut]:
    sport_ids = [*ENGINES, "open_irt"]
    return [SportOut(id=sport_id, name=SPORT_NAMES.get(sport_id, sport_id)) for sport_id in sport_ids]


# Declared before /{sport}/points so "open-irt" is not routed as a sport id.
@router.post("/open-irt/points", response_model=OpenIRTResultOut)
async def score_open_irt_point(body: OpenIRTPointIn) -> OpenIRTResultOut:
    state = parse_open_irt_state(body.state.model_dump())
    if body.playerId is not None:
        winner = open_irt.side_of(state, body.playerId)
    else:
        winner = body.pointWinner
    return open_irt_result(open_irt.apply_point(state, winner))


# POST /api/v0/scoring/padel/points
@router.post("/{sport}/points", response_model=ScoringResultOut)
async def score_point(sport: str, body: PointIn) -> ScoringResultOut:
    select_engine(sport)
    state = _STATE_PARSERS[sport](body.state.model_dump())
    return scoring_result(calculate_score(sport, state, body.pointWinner))
