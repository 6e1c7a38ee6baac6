"""
Tests for the terminal commands, run against the in-memory database
"""
import random

import pytest
from click.testing import CliRunner

import cli as cli_module
from cli import cli, _choose_action, _result_headline
from superchase.engine import MatchSession, MatchStatus, RiskAction
from superchase.models.player import PlayerRole
from superchase.services.squad_service import seed_squads
from helpers import create_mock_player, create_test_team


@pytest.fixture
def runner(db, monkeypatch):
    """CliRunner whose commands talk to the test database"""
    monkeypatch.setattr(cli_module, "init_db", lambda: None)
    monkeypatch.setattr(cli_module, "get_session", lambda: db)
    return CliRunner()


class TestCli:

    def test_teams_lists_every_franchise(self):
        result = CliRunner().invoke(cli, ["teams"])
        assert result.exit_code == 0
        for code in ("CSK", "MI", "RCB", "GT"):
            assert code in result.output

    def test_fixed_strategies(self):
        assert _choose_action("hard") == RiskAction.HARD
        assert _choose_action("safe") == RiskAction.SAFE

    def test_mixed_strategy(self):
        assert {_choose_action("mixed") for _ in range(50)} <= {RiskAction.HARD, RiskAction.SAFE}


class TestDatabaseCommands:

    def test_seed_is_idempotent(self, runner):
        first = runner.invoke(cli, ["seed"])
        assert first.exit_code == 0
        assert "10 squads generated" in first.output

        second = runner.invoke(cli, ["seed"])
        assert second.exit_code == 0
        assert "already exist" in second.output

    def test_squad(self, runner, db):
        seed_squads(db)
        result = runner.invoke(cli, ["squad", "csk"])
        assert result.exit_code == 0
        assert "CSK" in result.output

    def test_unknown_squad_exits_non_zero(self, runner, db):
        seed_squads(db)
        result = runner.invoke(cli, ["squad", "XYZ"])
        assert result.exit_code == 1
        assert "Unknown team" in result.output


class TestChaseCommands:

    def test_simulate_plays_to_a_result(self, runner, db):
        seed_squads(db)
        result = runner.invoke(cli, ["simulate", "CSK", "MI", "--strategy", "safe"])
        assert result.exit_code == 0, result.output
        assert "Result" in result.output
        assert "Player of the Match" in result.output

    def test_simulate_without_squads_exits_non_zero(self, runner):
        result = runner.invoke(cli, ["simulate", "CSK", "MI"])
        assert result.exit_code == 1

    def test_play_can_be_abandoned(self, runner, db):
        seed_squads(db)
        result = runner.invoke(cli, ["play", "CSK", "MI"], input="q\n")
        assert result.exit_code == 0
        assert "Match abandoned" in result.output

    def test_benchmark(self, runner, db):
        seed_squads(db)
        result = runner.invoke(cli, ["benchmark", "CSK", "MI", "--matches", "3", "--strategy", "hard"])
        assert result.exit_code == 0, result.output
        assert "Average Score" in result.output

    def test_benchmark_needs_at_least_one_match(self, runner, db):
        seed_squads(db)
        result = runner.invoke(cli, ["benchmark", "CSK", "MI", "--matches", "0"])
        assert result.exit_code == 2
        assert "Average Score" not in result.output


class TestResultHeadline:

    def test_wickets_in_hand_for_full_squad(self):
        match = MatchSession(create_test_team(1), create_test_team(101), rng=random.Random(0))
        match.state.status = MatchStatus.WON
        match.state.wickets = 3
        assert "Won by 7 wickets" in _result_headline(match)

    def test_wickets_in_hand_for_short_squad(self):
        batters = [create_mock_player(i, f"B{i}", PlayerRole.BATSMAN) for i in (1, 2, 3)]
        match = MatchSession(batters, create_test_team(101), rng=random.Random(0))
        match.state.status = MatchStatus.WON
        match.state.wickets = 1
        assert "Won by 1 wickets" in _result_headline(match)

    def test_margin_of_defeat_in_runs(self):
        match = MatchSession(create_test_team(1), create_test_team(101), rng=random.Random(0))
        match.state.status = MatchStatus.LOST
        match.state.target = 180
        match.state.current_score = 170
        assert "Lost by 9 runs" in _result_headline(match)
