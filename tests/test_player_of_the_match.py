"""
Tests for the player of the match award
"""
from superchase.engine import calculate_potm
from superchase.engine.state import BatsmanStats, BowlerStats
from helpers import create_test_team, start_chase


def _finished_chase():
    state, batters, bowlers = start_chase()
    return state, batters + bowlers


class TestPlayerOfTheMatch:

    def test_bowler_with_wickets_beats_modest_batter(self):
        state, players = _finished_chase()
        state.batsmen.stats[1] = BatsmanStats(runs=100, balls=60, fours=5, sixes=0)
        state.bowler.stats[108] = BowlerStats(balls=24, runs_conceded=30, wickets=3)
        potm = calculate_potm(state, players)
        # 100 + 10 + 40 = 150 vs 120
        assert potm.player_id == 1
        assert potm.points == 150
        assert potm.reason == "100 runs"

    def test_wickets_reason(self):
        state, players = _finished_chase()
        state.batsmen.stats[1] = BatsmanStats(runs=45, balls=30, fours=3, sixes=1)
        state.bowler.stats[108] = BowlerStats(balls=24, runs_conceded=20, wickets=3)
        potm = calculate_potm(state, players)
        # 45 + 6 + 4 = 55 vs 120
        assert potm.player_id == 108
        assert potm.points == 120
        assert potm.reason == "3 wickets"

    def test_tie_goes_to_first_listed(self):
        state, players = _finished_chase()
        state.batsmen.stats[3] = BatsmanStats(runs=40, balls=30)
        state.bowler.stats[106] = BowlerStats(balls=12, wickets=1)
        potm = calculate_potm(state, players)
        assert potm.player_id == 3
        assert potm.points == 40

    def test_small_contribution_is_impact_player(self):
        state, players = _finished_chase()
        state.batsmen.stats[2] = BatsmanStats(runs=30, balls=25, fours=2)
        potm = calculate_potm(state, players)
        assert potm.player_id == 2
        assert potm.reason == "Impact Player"

    def test_runs_and_wickets_reason(self):
        state, batters, bowlers = start_chase()
        # An all-rounder who appears on both cards
        state.batsmen.stats[6] = BatsmanStats(runs=55, balls=35, fours=4, sixes=2)
        state.bowler.stats[6] = BowlerStats(balls=24, wickets=2)
        potm = calculate_potm(state, batters + bowlers)
        assert potm.player_id == 6
        assert potm.points == 55 + 8 + 8 + 40 + 80
        assert potm.reason == "55 runs & 2 wickets"

    def test_players_without_stats_are_skipped(self):
        state, _, _ = start_chase()
        outsiders = create_test_team(501)
        assert calculate_potm(state, outsiders) is None

    def test_nobody_scored_still_awards_first_player(self):
        state, players = _finished_chase()
        potm = calculate_potm(state, players)
        assert potm.player_id == 1
        assert potm.points == 0
        assert potm.reason == "Impact Player"
