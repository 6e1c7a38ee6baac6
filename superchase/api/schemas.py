"""
Pydantic schemas for API request/response models
"""
from pydantic import BaseModel
from typing import Optional
from enum import Enum


class RiskActionEnum(str, Enum):
    SAFE = "safe"
    HARD = "hard"


# Team / Player Schemas
class TeamChoice(BaseModel):
    index: int
    name: str
    short_name: str
    primary_color: str


class PlayerBrief(BaseModel):
    id: int
    name: str
    role: str
    batting_skill: int
    bowling_skill: int
    is_captain: bool = False


# Match Schemas
class StartMatchRequest(BaseModel):
    batting_team: str
    bowling_team: str


class BallRequest(BaseModel):
    action: RiskActionEnum


class BatterStateBrief(BaseModel):
    id: int
    name: str
    runs: int = 0
    balls: int = 0
    fours: int = 0
    sixes: int = 0
    strike_rate: float = 0.0
    is_out: bool = False


class BowlerStateBrief(BaseModel):
    id: int
    name: str
    overs: str = "0.0"
    runs: int = 0
    wickets: int = 0
    maidens: int = 0
    economy: float = 0.0


class PartnershipResponse(BaseModel):
    runs: int
    balls: int


class MatchEventsResponse(BaseModel):
    big_overs: int
    collapse_overs: int


class PlayerOfTheMatchResponse(BaseModel):
    player_id: int
    name: str
    points: int
    reason: str


class MatchStateResponse(BaseModel):
    match_id: str
    batting_team: str
    bowling_team: str
    status: str
    is_super_over: bool
    pitch_type: str
    target: int
    runs: int
    wickets: int
    overs: str
    total_overs: int
    runs_needed: int
    balls_remaining: int
    run_rate: float
    required_rate: Optional[float] = None
    striker: Optional[BatterStateBrief] = None
    non_striker: Optional[BatterStateBrief] = None
    bowler: Optional[BowlerStateBrief] = None
    partnership: PartnershipResponse
    this_over: list[str]
    commentary: str
    last_ball: Optional[str] = None
    last_ball_detail: str = ""
    events: MatchEventsResponse
    batting_card: list[BatterStateBrief]
    bowling_card: list[BowlerStateBrief]
    player_of_the_match: Optional[PlayerOfTheMatchResponse] = None


class BallResultResponse(BaseModel):
    outcome: str
    detail: str
    runs: int
    is_wicket: bool
    is_boundary: bool
    commentary: str
    match_state: MatchStateResponse
