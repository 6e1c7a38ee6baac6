from superchase.engine.ball_engine import play_ball
from superchase.engine.initializer import initialize_match, InsufficientRosterError
from superchase.engine.evaluator import calculate_potm
from superchase.engine.session import MatchAlreadyComplete, MatchSession, RosterPlayer, SuperOverNotAllowed
from superchase.engine.state import MatchState, MatchStatus, PitchType, RiskAction

__all__ = [
    "play_ball",
    "initialize_match",
    "InsufficientRosterError",
    "calculate_potm",
    "MatchAlreadyComplete",
    "MatchSession",
    "RosterPlayer",
    "SuperOverNotAllowed",
    "MatchState",
    "MatchStatus",
    "PitchType",
    "RiskAction",
]
