"""
A live chase: the two squads, the current state and the lock that keeps
ball calls in order. The session does all player lookups; the engine only
sees the two Player records it is handed.
"""
import logging
import threading
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Union

from superchase.models.player import PlayerRole
from superchase.engine.ball_engine import play_ball
from superchase.engine.evaluator import calculate_potm
from superchase.engine.initializer import initialize_match
from superchase.engine.state import MatchState, MatchStatus, RiskAction

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RosterPlayer:
    """Detached copy of a squad member"""
    id: int
    name: str
    role: PlayerRole
    batting_skill: int
    bowling_skill: int
    is_captain: bool = False

    @classmethod
    def from_model(cls, player) -> "RosterPlayer":
        return cls(
            id=player.id,
            name=player.name,
            role=player.role,
            batting_skill=player.batting_skill,
            bowling_skill=player.bowling_skill,
            is_captain=bool(getattr(player, "is_captain", False)),
        )


class MatchAlreadyComplete(Exception):
    """Raised when a ball is requested after the chase has finished"""


class SuperOverNotAllowed(Exception):
    """Raised when a super over is requested for a match that did not end in a tie"""


class MatchSession:
    def __init__(
        self,
        batters: Sequence,
        bowlers: Sequence,
        total_overs: Optional[int] = None,
        batting_team: str = "",
        bowling_team: str = "",
        rng=None,
    ):
        self.batters: List[RosterPlayer] = [RosterPlayer.from_model(p) for p in batters]
        self.bowlers: List[RosterPlayer] = [RosterPlayer.from_model(p) for p in bowlers]
        self.batting_team = batting_team
        self.bowling_team = bowling_team
        self.rng = rng
        self._players: Dict[int, RosterPlayer] = {p.id: p for p in self.batters + self.bowlers}
        self._lock = threading.Lock()

        self.state = initialize_match(self.batters, self.bowlers, total_overs, rng=rng)
        self.state.status = MatchStatus.IN_PROGRESS

    @property
    def all_players(self) -> List[RosterPlayer]:
        return self.batters + self.bowlers

    def player(self, player_id: int) -> Optional[RosterPlayer]:
        return self._players.get(player_id)

    @property
    def striker(self) -> RosterPlayer:
        return self._players[self.state.batsmen.striker_id]

    @property
    def non_striker(self) -> RosterPlayer:
        return self._players[self.state.batsmen.non_striker_id]

    @property
    def bowler(self) -> RosterPlayer:
        return self._players[self.state.bowler.current_bowler_id]

    def play(self, action: Union[RiskAction, str]) -> MatchState:
        """
        Play one ball. Calls on the same session run one at a time.

        Returns the state after this ball; read it rather than `self.state`,
        which another call may already have replaced.
        """
        with self._lock:
            if self.state.is_terminal:
                raise MatchAlreadyComplete(f"Match already complete ({self.state.status.value})")
            state = play_ball(self.state, action, self.striker, self.bowler, rng=self.rng)
            if state.is_terminal and state.player_of_the_match is None:
                state.player_of_the_match = calculate_potm(state, self.all_players)
                if state.player_of_the_match:
                    logger.info("Player of the match: %s (%s)",
                                self.player(state.player_of_the_match.player_id).name,
                                state.player_of_the_match.reason)
            self.state = state
            return state

    def start_super_over(self) -> MatchState:
        """Replace a tied chase with a one-over eliminator between the same squads"""
        with self._lock:
            if self.state.status != MatchStatus.TIED:
                raise SuperOverNotAllowed(f"Super over needs a tie, match is {self.state.status.value}")
            state = initialize_match(self.batters, self.bowlers, is_super_over=True, rng=self.rng)
            state.status = MatchStatus.IN_PROGRESS
            self.state = state
            return state
