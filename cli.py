#!/usr/bin/env python3
"""
CLI for playing Super Chase in the terminal
"""
import logging
import random
import sys

import click
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.progress import track

from superchase.config import settings
from superchase.database import init_db, get_session
from superchase.generators import TeamGenerator
from superchase.services.squad_service import SquadNotFoundError, seed_squads, get_team, fetch_squads
from superchase.engine import MatchSession, MatchStatus, RiskAction
from superchase.engine.state import MAX_WICKETS

console = Console()

STRATEGIES = ["hard", "safe", "mixed"]


@click.group()
@click.option("--log-level", default=None, help="Override LOG_LEVEL")
def cli(log_level):
    """Super Chase - T20 Run-Chase Simulator"""
    logging.basicConfig(level=(log_level or settings.LOG_LEVEL).upper())


@cli.command()
def init():
    """Initialize the database"""
    console.print("[yellow]Initializing database...[/yellow]")
    init_db()
    console.print("[green]Database initialized successfully![/green]")


@cli.command()
def seed():
    """Generate squads for every franchise"""
    init_db()
    session = get_session()
    try:
        created = seed_squads(session)
    finally:
        session.close()
    if created:
        console.print(f"[green]{created} squads generated![/green]")
    else:
        console.print("[yellow]All squads already exist.[/yellow]")


@cli.command()
def teams():
    """List the franchises"""
    table = Table(title="Franchises")
    table.add_column("Code", style="cyan")
    table.add_column("Name")
    table.add_column("Colour")
    for choice in TeamGenerator.get_team_choices():
        table.add_row(choice["short_name"], choice["name"], choice["primary_color"])
    console.print(table)


@cli.command()
@click.argument("short_name")
def squad(short_name: str):
    """Show a franchise squad"""
    session = get_session()
    try:
        team = get_team(session, short_name)
        table = Table(title=f"{team.name} ({team.short_name})")
        table.add_column("#", justify="right")
        table.add_column("Name", style="cyan")
        table.add_column("Role", style="magenta")
        table.add_column("BAT", justify="right")
        table.add_column("BOWL", justify="right")
        for i, player in enumerate(team.players, start=1):
            name = f"{player.name} (c)" if player.is_captain else player.name
            table.add_row(str(i), name, player.role.value,
                          str(player.batting_skill), str(player.bowling_skill))
        console.print(table)
    except SquadNotFoundError as e:
        console.print(f"[red]{e}[/red]")
        sys.exit(1)
    finally:
        session.close()


def _start_session(batting: str, bowling: str, overs: int) -> MatchSession:
    session = get_session()
    try:
        batters, bowlers = fetch_squads(session, batting, bowling)
        return MatchSession(batters, bowlers, total_overs=overs,
                            batting_team=batting.upper(), bowling_team=bowling.upper())
    except SquadNotFoundError as e:
        console.print(f"[red]{e}[/red]")
        console.print("[red]Run 'seed' first if the squads are missing.[/red]")
        sys.exit(1)
    finally:
        session.close()


def _print_scoreboard(match: MatchSession):
    state = match.state
    rrr = f"{state.required_rate:.2f}" if state.required_rate is not None else "-"
    striker = state.batsmen.stats[match.striker.id]
    non_striker = state.batsmen.stats[match.non_striker.id]
    bowler = state.bowler.stats[match.bowler.id]
    console.print(Panel(
        f"[bold]{match.batting_team} {state.current_score}/{state.wickets}[/bold] "
        f"({state.overs_display}/{state.total_overs})  Target {state.target}  "
        f"Need {state.runs_needed} off {state.balls_remaining}  CRR {state.run_rate:.2f}  RRR {rrr}\n"
        f"[cyan]{match.striker.name}*[/cyan] {striker.runs} ({striker.balls})   "
        f"{match.non_striker.name} {non_striker.runs} ({non_striker.balls})\n"
        f"[magenta]{match.bowler.name}[/magenta] {bowler.overs_display}-{bowler.runs_conceded}-{bowler.wickets}   "
        f"This over: {' '.join(state.current_over) or 'New Over'}",
        title=f"{match.batting_team} v {match.bowling_team}",
    ))


def _print_ball(match: MatchSession):
    state = match.state
    detail = f" [{state.last_ball_detail}]" if state.last_ball_detail else ""
    colour = "red" if state.last_ball_outcome == "W" else "green" if state.last_ball_outcome in ("4", "6") else "white"
    console.print(f"[{colour}]{state.last_ball_outcome}{detail}[/{colour}] {state.commentary}")


def _result_headline(match: MatchSession) -> str:
    state = match.state
    if state.status == MatchStatus.WON:
        # Short squads are all out before ten wickets
        wickets_in_hand = min(MAX_WICKETS, len(match.batters) - 1) - state.wickets
        return f"[bold green]VICTORY! Won by {wickets_in_hand} wickets[/bold green]"
    if state.status == MatchStatus.TIED:
        return "[bold yellow]MATCH TIED - Scores level[/bold yellow]"
    return f"[bold red]DEFEAT - Lost by {state.target - state.current_score - 1} runs[/bold red]"


def _print_result(match: MatchSession):
    state = match.state
    text = _result_headline(match)

    potm = state.player_of_the_match
    if potm:
        text += f"\nPlayer of the Match: {match.player(potm.player_id).name} - {potm.reason} ({potm.points} pts)"
    text += f"\nBig overs: {state.match_events.big_overs}  Collapse overs: {state.match_events.collapse_overs}"
    console.print(Panel(text, title="Result"))
    _print_scorecard(match)


def _print_scorecard(match: MatchSession):
    """Print batting and bowling cards"""
    state = match.state
    bat_table = Table(title="Batting")
    bat_table.add_column("Batter", style="cyan")
    bat_table.add_column("R", justify="right")
    bat_table.add_column("B", justify="right")
    bat_table.add_column("4s", justify="right")
    bat_table.add_column("6s", justify="right")
    bat_table.add_column("SR", justify="right")

    for player in match.batters:
        stats = state.batsmen.stats[player.id]
        if stats.balls == 0 and not stats.out:
            continue
        name = player.name if stats.out else f"{player.name} (not out)"
        bat_table.add_row(name, str(stats.runs), str(stats.balls), str(stats.fours),
                          str(stats.sixes), f"{stats.strike_rate:.1f}")
    console.print(bat_table)

    bowl_table = Table(title="Bowling")
    bowl_table.add_column("Bowler", style="magenta")
    bowl_table.add_column("O", justify="right")
    bowl_table.add_column("M", justify="right")
    bowl_table.add_column("R", justify="right")
    bowl_table.add_column("W", justify="right")
    bowl_table.add_column("Econ", justify="right")

    for player in match.bowlers:
        stats = state.bowler.stats[player.id]
        if stats.balls == 0:
            continue
        bowl_table.add_row(player.name, stats.overs_display, str(stats.maidens),
                           str(stats.runs_conceded), str(stats.wickets), f"{stats.economy:.1f}")
    console.print(bowl_table)


def _choose_action(strategy: str) -> RiskAction:
    if strategy == "mixed":
        return random.choice([RiskAction.SAFE, RiskAction.HARD])
    return RiskAction(strategy)


@cli.command()
@click.argument("batting")
@click.argument("bowling")
@click.option("--overs", default=None, type=int, help="Overs in the chase")
def play(batting: str, bowling: str, overs):
    """Chase a target interactively: (s)afe or (h)ard each ball"""
    match = _start_session(batting, bowling, overs or settings.TOTAL_OVERS)
    console.print(f"[yellow]{match.state.commentary}[/yellow]")

    while True:
        while not match.state.is_terminal:
            _print_scoreboard(match)
            choice = click.prompt("Shot", type=click.Choice(["s", "h", "q"]), default="s")
            if choice == "q":
                console.print("[yellow]Match abandoned.[/yellow]")
                return
            match.play(RiskAction.SAFE if choice == "s" else RiskAction.HARD)
            _print_ball(match)

        _print_result(match)
        if match.state.status != MatchStatus.TIED or not click.confirm("Play a super over?", default=True):
            return
        match.start_super_over()
        console.print(f"[bold yellow]{match.state.commentary} Target {match.state.target}[/bold yellow]")


@cli.command()
@click.argument("batting")
@click.argument("bowling")
@click.option("--strategy", default="mixed", type=click.Choice(STRATEGIES), help="Shot choice for every ball")
@click.option("--overs", default=None, type=int, help="Overs in the chase")
def simulate(batting: str, bowling: str, strategy: str, overs):
    """Auto-play a chase with a fixed strategy"""
    match = _start_session(batting, bowling, overs or settings.TOTAL_OVERS)
    console.print(f"[yellow]{match.state.commentary}[/yellow]")

    while not match.state.is_terminal:
        match.play(_choose_action(strategy))
        _print_ball(match)

    _print_result(match)


@cli.command()
@click.argument("batting")
@click.argument("bowling")
@click.option("--matches", default=100, type=click.IntRange(min=1), help="Number of chases to simulate")
@click.option("--strategy", default="mixed", type=click.Choice(STRATEGIES), help="Shot choice for every ball")
def benchmark(batting: str, bowling: str, matches: int, strategy: str):
    """Run many chases to check the balance of the engine"""
    session = get_session()
    try:
        batters, bowlers = fetch_squads(session, batting, bowling)
    except SquadNotFoundError as e:
        console.print(f"[red]{e}[/red]")
        sys.exit(1)
    finally:
        session.close()

    results = {status: 0 for status in (MatchStatus.WON, MatchStatus.LOST, MatchStatus.TIED)}
    scores = []
    wickets = []
    balls = []

    for _ in track(range(matches), description="Simulating..."):
        match = MatchSession(batters, bowlers, total_overs=settings.TOTAL_OVERS)
        while not match.state.is_terminal:
            match.play(_choose_action(strategy))
        results[match.state.status] += 1
        scores.append(match.state.current_score)
        wickets.append(match.state.wickets)
        balls.append(match.state.balls_bowled)

    console.print(Panel(f"[bold]{matches} chases, strategy '{strategy}'[/bold]"))
    for status, count in results.items():
        console.print(f"[cyan]{status.value}:[/cyan] {count} ({count / matches * 100:.1f}%)")
    console.print(f"[cyan]Average Score:[/cyan] {sum(scores) / len(scores):.1f}")
    console.print(f"[cyan]Average Wickets:[/cyan] {sum(wickets) / len(wickets):.1f}")
    console.print(f"[cyan]Average Balls:[/cyan] {sum(balls) / len(balls):.1f}")


if __name__ == "__main__":
    cli()
