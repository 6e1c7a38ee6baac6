"""
Shared builders for engine tests
"""
import random

from superchase.models.player import Player, PlayerRole
from superchase.engine import ball_engine, initialize_match, MatchStatus


class ScriptedRandom(random.Random):
    """random() returns the scripted values in order, then `default` forever"""

    def __init__(self, values=(), default=0.5):
        super().__init__(0)
        self.values = list(values)
        self.default = default

    def random(self):
        if self.values:
            return self.values.pop(0)
        return self.default


def create_mock_player(
    id: int,
    name: str,
    role: PlayerRole,
    batting: int = 70,
    bowling: int = 70,
) -> Player:
    """Create a transient player for testing"""
    return Player(
        id=id,
        name=name,
        role=role,
        batting_skill=batting,
        bowling_skill=bowling,
    )


def create_test_team(start_id: int = 1, batting: int = 70, bowling: int = 70) -> list[Player]:
    """11 players: 4 batsmen, a keeper, 2 all-rounders, 4 bowlers"""
    roles = [
        PlayerRole.BATSMAN,
        PlayerRole.BATSMAN,
        PlayerRole.BATSMAN,
        PlayerRole.BATSMAN,
        PlayerRole.WICKET_KEEPER,
        PlayerRole.ALL_ROUNDER,
        PlayerRole.ALL_ROUNDER,
        PlayerRole.BOWLER,
        PlayerRole.BOWLER,
        PlayerRole.BOWLER,
        PlayerRole.BOWLER,
    ]
    return [
        create_mock_player(start_id + i, f"Player{start_id + i}", role, batting, bowling)
        for i, role in enumerate(roles)
    ]


def start_chase(batters=None, bowlers=None, target=180, total_overs=20, rng=None):
    """Initialized, in-progress state with a fixed target and no bowling shuffle"""
    batters = batters or create_test_team(1)
    bowlers = bowlers or create_test_team(101)
    state = initialize_match(batters, bowlers, total_overs, rng=rng or ScriptedRandom())
    state.target = target
    state.status = MatchStatus.IN_PROGRESS
    return state, batters, bowlers


def lookup(players, player_id):
    return next(p for p in players if p.id == player_id)


def play(state, action, batters, bowlers, rng=None):
    """Play a ball the way the presentation layer does: look players up by id"""
    striker = lookup(batters, state.batsmen.striker_id)
    bowler = lookup(bowlers, state.bowler.current_bowler_id)
    return ball_engine.play_ball(state, action, striker, bowler, rng=rng or ScriptedRandom())
