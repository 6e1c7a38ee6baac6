from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from superchase.database import get_db
from superchase.generators import TeamGenerator
from superchase.services.squad_service import SquadNotFoundError, get_team
from superchase.api.schemas import TeamChoice, PlayerBrief

router = APIRouter(prefix="/teams", tags=["Teams"])


@router.get("", response_model=list[TeamChoice])
def list_teams():
    """Franchises available for a chase"""
    return [TeamChoice(**choice) for choice in TeamGenerator.get_team_choices()]


@router.get("/{short_name}/squad", response_model=list[PlayerBrief])
def get_squad(short_name: str, db: Session = Depends(get_db)):
    try:
        team = get_team(db, short_name)
    except SquadNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return [
        PlayerBrief(
            id=p.id,
            name=p.name,
            role=p.role.value,
            batting_skill=p.batting_skill,
            bowling_skill=p.bowling_skill,
            is_captain=p.is_captain,
        )
        for p in team.players
    ]
