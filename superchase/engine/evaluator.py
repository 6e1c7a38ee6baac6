"""
Post-match evaluator - picks the player of the match.
"""
from typing import Optional, Sequence

from superchase.engine.state import MatchState, PlayerOfTheMatch

FIFTY_BONUS = 40
WICKET_POINTS = 40
FOUR_BONUS = 2
SIX_BONUS = 4
RUNS_MENTION_ABOVE = 40
DEFAULT_REASON = "Impact Player"


def calculate_potm(state: MatchState, all_players: Sequence) -> Optional[PlayerOfTheMatch]:
    """
    Score every player with stats in the match and return the best one.

    Points: runs + 2 per four + 4 per six + 40 for a fifty, plus 40 per wicket.
    Ties go to the player listed first. None if nobody has any stats.
    """
    best = None
    for player in all_players:
        bat = state.batsmen.stats.get(player.id)
        bowl = state.bowler.stats.get(player.id)
        if bat is None and bowl is None:
            continue

        points = 0
        reasons = []
        if bat:
            points += bat.runs + bat.fours * FOUR_BONUS + bat.sixes * SIX_BONUS
            if bat.runs >= 50:
                points += FIFTY_BONUS
            if bat.runs > RUNS_MENTION_ABOVE:
                reasons.append(f"{bat.runs} runs")
        if bowl:
            points += bowl.wickets * WICKET_POINTS
            if bowl.wickets > 0:
                reasons.append(f"{bowl.wickets} wickets")

        if best is None or points > best.points:
            best = PlayerOfTheMatch(
                player_id=player.id,
                points=points,
                reason=" & ".join(reasons) or DEFAULT_REASON,
            )
    return best
