import logging
import uuid
from typing import Dict, Optional

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from superchase.config import settings
from superchase.database import get_db
from superchase.engine import (
    InsufficientRosterError, MatchAlreadyComplete, MatchSession, MatchState, SuperOverNotAllowed,
)
from superchase.engine.session import RosterPlayer
from superchase.services.squad_service import SquadNotFoundError, fetch_squads
from superchase.api.schemas import (
    StartMatchRequest, BallRequest, BallResultResponse, MatchStateResponse,
    BatterStateBrief, BowlerStateBrief, PartnershipResponse,
    MatchEventsResponse, PlayerOfTheMatchResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/match", tags=["Chase"])

# In-memory store for active chases. Discarded on restart.
active_matches: Dict[str, MatchSession] = {}


def _get_session(match_id: str) -> MatchSession:
    session = active_matches.get(match_id)
    if not session:
        raise HTTPException(status_code=404, detail="Active match session not found")
    return session


def _batter_brief(state: MatchState, player: RosterPlayer) -> BatterStateBrief:
    stats = state.batsmen.stats[player.id]
    return BatterStateBrief(
        id=player.id,
        name=player.name,
        runs=stats.runs,
        balls=stats.balls,
        fours=stats.fours,
        sixes=stats.sixes,
        strike_rate=round(stats.strike_rate, 1),
        is_out=stats.out,
    )


def _bowler_brief(state: MatchState, player: RosterPlayer) -> BowlerStateBrief:
    stats = state.bowler.stats[player.id]
    return BowlerStateBrief(
        id=player.id,
        name=player.name,
        overs=stats.overs_display,
        runs=stats.runs_conceded,
        wickets=stats.wickets,
        maidens=stats.maidens,
        economy=round(stats.economy, 2),
    )


def _get_match_state_response(
    match_id: str, session: MatchSession, state: Optional[MatchState] = None
) -> MatchStateResponse:
    """Build the response from one snapshot; `state` defaults to the session's current one"""
    state = state or session.state
    striker = session.player(state.batsmen.striker_id)
    non_striker = session.player(state.batsmen.non_striker_id)
    bowler = session.player(state.bowler.current_bowler_id)

    batting_card = [
        _batter_brief(state, p) for p in session.batters
        if state.batsmen.stats[p.id].balls > 0
        or state.batsmen.stats[p.id].out
        or p.id in (state.batsmen.striker_id, state.batsmen.non_striker_id)
    ]
    bowling_card = [
        _bowler_brief(state, p) for p in session.bowlers
        if state.bowler.stats[p.id].balls > 0 or p.id == state.bowler.current_bowler_id
    ]

    potm = None
    if state.player_of_the_match:
        winner = session.player(state.player_of_the_match.player_id)
        potm = PlayerOfTheMatchResponse(
            player_id=state.player_of_the_match.player_id,
            name=winner.name if winner else "",
            points=state.player_of_the_match.points,
            reason=state.player_of_the_match.reason,
        )

    required_rate = state.required_rate
    return MatchStateResponse(
        match_id=match_id,
        batting_team=session.batting_team,
        bowling_team=session.bowling_team,
        status=state.status.value,
        is_super_over=state.is_super_over,
        pitch_type=state.pitch_type.value,
        target=state.target,
        runs=state.current_score,
        wickets=state.wickets,
        overs=state.overs_display,
        total_overs=state.total_overs,
        runs_needed=state.runs_needed,
        balls_remaining=state.balls_remaining,
        run_rate=round(state.run_rate, 2),
        required_rate=round(required_rate, 2) if required_rate is not None else None,
        striker=_batter_brief(state, striker),
        non_striker=_batter_brief(state, non_striker),
        bowler=_bowler_brief(state, bowler),
        partnership=PartnershipResponse(runs=state.partnership.runs, balls=state.partnership.balls),
        this_over=state.current_over,
        commentary=state.commentary,
        last_ball=state.last_ball_outcome,
        last_ball_detail=state.last_ball_detail,
        events=MatchEventsResponse(
            big_overs=state.match_events.big_overs,
            collapse_overs=state.match_events.collapse_overs,
        ),
        batting_card=batting_card,
        bowling_card=bowling_card,
        player_of_the_match=potm,
    )


@router.post("/start")
def start_match(request: StartMatchRequest, db: Session = Depends(get_db)):
    """Fetch both squads and start a chase"""
    try:
        batters, bowlers = fetch_squads(db, request.batting_team, request.bowling_team)
    except SquadNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

    try:
        session = MatchSession(
            batters,
            bowlers,
            total_overs=settings.TOTAL_OVERS,
            batting_team=request.batting_team.upper(),
            bowling_team=request.bowling_team.upper(),
        )
    except InsufficientRosterError as e:
        raise HTTPException(status_code=400, detail=str(e))

    match_id = uuid.uuid4().hex
    active_matches[match_id] = session
    logger.info("Match %s started: %s chasing %d against %s",
                match_id, session.batting_team, session.state.target, session.bowling_team)
    return _get_match_state_response(match_id, session)


@router.get("/{match_id}/state")
def get_match_state(match_id: str):
    session = _get_session(match_id)
    return _get_match_state_response(match_id, session)


@router.post("/{match_id}/ball")
def play_ball(match_id: str, request: BallRequest):
    session = _get_session(match_id)
    try:
        state = session.play(request.action.value)
    except MatchAlreadyComplete as e:
        raise HTTPException(status_code=400, detail=str(e))

    outcome = state.last_ball_outcome or "0"
    runs = 0 if outcome == "W" else int(outcome)
    return BallResultResponse(
        outcome=outcome,
        detail=state.last_ball_detail,
        runs=runs,
        is_wicket=outcome == "W",
        is_boundary=runs in (4, 6),
        commentary=state.commentary,
        match_state=_get_match_state_response(match_id, session, state),
    )


@router.post("/{match_id}/super-over")
def start_super_over(match_id: str):
    """Replay a tied chase as a one-over eliminator"""
    session = _get_session(match_id)
    try:
        state = session.start_super_over()
    except SuperOverNotAllowed as e:
        raise HTTPException(status_code=400, detail=str(e))
    return _get_match_state_response(match_id, session, state)


@router.delete("/{match_id}")
def abandon_match(match_id: str):
    _get_session(match_id)
    del active_matches[match_id]
    return {"status": "discarded"}
