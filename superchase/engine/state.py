"""
Match state for a single-innings chase.

The engine owns a MatchState between calls and hands out a fresh copy per
ball; the presentation side only reads it.
"""
import copy
import enum
from dataclasses import dataclass, field
from typing import Dict, List, Optional


BALLS_PER_OVER = 6
MAX_WICKETS = 10
RECENT_ACTIONS_WINDOW = 5

# Ball history tokens that are not legal deliveries
EXTRA_TOKENS = ("wd", "NB")


class RiskAction(str, enum.Enum):
    SAFE = "safe"
    HARD = "hard"


class MatchStatus(enum.Enum):
    SCHEDULED = "SCHEDULED"
    IN_PROGRESS = "IN_PROGRESS"
    WON = "WON"
    LOST = "LOST"
    TIED = "TIED"

    @property
    def is_terminal(self) -> bool:
        return self in (MatchStatus.WON, MatchStatus.LOST, MatchStatus.TIED)


class PitchType(enum.Enum):
    FLAT = "FLAT"
    GREEN = "GREEN"
    DUSTY = "DUSTY"


@dataclass
class BatsmanStats:
    runs: int = 0
    balls: int = 0
    fours: int = 0
    sixes: int = 0
    out: bool = False

    @property
    def strike_rate(self) -> float:
        if self.balls == 0:
            return 0.0
        return (self.runs / self.balls) * 100


@dataclass
class BowlerStats:
    """Bowling figures. `balls` counts legal deliveries; overs are derived."""
    balls: int = 0
    runs_conceded: int = 0
    wickets: int = 0
    maidens: int = 0  # never computed

    @property
    def overs_display(self) -> str:
        return f"{self.balls // BALLS_PER_OVER}.{self.balls % BALLS_PER_OVER}"

    @property
    def economy(self) -> float:
        if self.balls == 0:
            return 0.0
        return (self.runs_conceded / self.balls) * BALLS_PER_OVER


@dataclass
class BattingState:
    striker_id: int
    non_striker_id: int
    stats: Dict[int, BatsmanStats] = field(default_factory=dict)

    def swap_strike(self):
        self.striker_id, self.non_striker_id = self.non_striker_id, self.striker_id


@dataclass
class BowlingState:
    current_bowler_id: int
    stats: Dict[int, BowlerStats] = field(default_factory=dict)


@dataclass
class Partnership:
    runs: int = 0
    balls: int = 0


@dataclass
class MatchEvents:
    big_overs: int = 0        # overs with 20+ runs
    collapse_overs: int = 0   # overs with 2+ wickets
    last_boundary_ball: int = -10


@dataclass
class PlayerOfTheMatch:
    player_id: int
    points: int
    reason: str


@dataclass
class MatchState:
    target: int
    total_overs: int
    batsmen: BattingState
    bowler: BowlingState
    pitch_type: PitchType
    batting_order: List[int] = field(default_factory=list)
    bowling_order: List[int] = field(default_factory=list)

    current_score: int = 0
    wickets: int = 0
    balls_bowled: int = 0
    ball_history: List[str] = field(default_factory=list)
    partnership: Partnership = field(default_factory=Partnership)
    recent_actions: List[RiskAction] = field(default_factory=list)
    status: MatchStatus = MatchStatus.SCHEDULED
    is_super_over: bool = False
    is_free_hit: bool = False  # never set by any rule

    # Per-ball display metadata
    commentary: str = ""
    last_ball_outcome: Optional[str] = None
    last_ball_detail: str = ""

    match_events: MatchEvents = field(default_factory=MatchEvents)
    player_of_the_match: Optional[PlayerOfTheMatch] = None

    def copy(self) -> "MatchState":
        return copy.deepcopy(self)

    @property
    def overs_completed(self) -> int:
        return self.balls_bowled // BALLS_PER_OVER

    @property
    def balls_in_over(self) -> int:
        return self.balls_bowled % BALLS_PER_OVER

    @property
    def overs_display(self) -> str:
        return f"{self.overs_completed}.{self.balls_in_over}"

    @property
    def total_balls(self) -> int:
        return self.total_overs * BALLS_PER_OVER

    @property
    def balls_remaining(self) -> int:
        return self.total_balls - self.balls_bowled

    @property
    def runs_needed(self) -> int:
        return max(0, self.target - self.current_score)

    @property
    def run_rate(self) -> float:
        if self.balls_bowled == 0:
            return 0.0
        return self.current_score / (self.balls_bowled / BALLS_PER_OVER)

    @property
    def required_rate(self) -> Optional[float]:
        """None once no balls remain"""
        if self.balls_remaining <= 0:
            return None
        return self.runs_needed / (self.balls_remaining / BALLS_PER_OVER)

    @property
    def current_over(self) -> List[str]:
        """Tokens of the over in progress (the last full over right after it ends)"""
        if not self.ball_history:
            return []
        wanted = self.balls_in_over or BALLS_PER_OVER
        legal = 0
        tokens = []
        for token in reversed(self.ball_history):
            tokens.insert(0, token)
            if token not in EXTRA_TOKENS:
                legal += 1
            if legal == wanted:
                break
        return tokens

    @property
    def is_terminal(self) -> bool:
        return self.status.is_terminal
