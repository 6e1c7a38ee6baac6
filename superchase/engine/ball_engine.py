"""
Ball resolution engine.

play_ball() resolves one delivery and returns the next MatchState:
context -> base weights -> modifiers -> sample -> twists -> commit ->
wicket / strike -> over boundary -> result.
"""
import logging
import random
from dataclasses import dataclass
from typing import Optional, Tuple, Union

from superchase.engine.state import (
    BALLS_PER_OVER, MAX_WICKETS, RECENT_ACTIONS_WINDOW,
    MatchState, MatchStatus, RiskAction,
)
from superchase.engine.weights import (
    BallContext, apply_modifiers, base_weights, sample_outcome,
)

logger = logging.getLogger(__name__)

DEATH_OVERS_START_BALL = 90  # 16th over onwards
RRR_SENTINEL = 99.0

MAX_BOWLER_BALLS = 24        # 4 overs
MAX_BOWLER_WICKETS = 5

BIG_OVER_RUNS = 20
COLLAPSE_OVER_WICKETS = 2

DISMISSAL_COMMENTARY = [
    "Clean Bowled!",
    "Caught at cover!",
    "Edged to the keeper!",
    "Holes out to long on!",
    "Trapped LBW!",
]

RUNS_COMMENTARY = {
    6: "That's huge! Out of the ground!",
    4: "Classy shot, finds the gap for four.",
    3: "Great placement! They push hard for three.",
    2: "Good running, they come back for two.",
    1: "Quick single taken.",
}
DOT_COMMENTARY = {
    RiskAction.HARD: "Swing and a miss!",
    RiskAction.SAFE: "Solid defense.",
}
WIN_COMMENTARY = "CHASE COMPLETE! A fantastic victory!"


@dataclass(frozen=True)
class Twist:
    """A low-probability override of the sampled outcome"""
    trigger: str
    result: str
    chance: float
    detail: str
    commentary: str
    hard_only: bool = False


TWISTS = (
    Twist("0", "4", 0.05, "Edge", "Thick edge... flies past slip for FOUR! Lucky.", hard_only=True),
    Twist("6", "W", 0.03, "Stunner", "He's hit that well but... CAUGHT! Absolute blinder on the ropes!"),
    Twist("W", "0", 0.08, "DRS", "Given OUT! Review taken... Missing leg! NOT OUT."),
)


def derive_context(state: MatchState, action: RiskAction, striker, bowler) -> BallContext:
    """Snapshot of the chase before the ball, with the action already in the window"""
    recent = (list(state.recent_actions) + [action])[-RECENT_ACTIONS_WINDOW:]
    balls_remaining = state.balls_remaining
    runs_needed = state.runs_needed
    required_rate = runs_needed / (balls_remaining / BALLS_PER_OVER) if balls_remaining > 0 else RRR_SENTINEL
    return BallContext(
        action=action,
        recent_actions=tuple(recent),
        balls_bowled=state.balls_bowled,
        overs_completed=state.overs_completed,
        balls_in_over=state.balls_in_over,
        wickets=state.wickets,
        runs_needed=runs_needed,
        balls_remaining=balls_remaining,
        required_rate=required_rate,
        is_death_overs=state.balls_bowled >= DEATH_OVERS_START_BALL,
        last_boundary_ball=state.match_events.last_boundary_ball,
        skill_diff=striker.batting_skill - bowler.bowling_skill,
    )


def apply_twist(outcome: str, action: RiskAction, rng) -> Tuple[str, Optional[Twist]]:
    """At most one twist per ball: only the twist whose trigger matches gets a roll"""
    for twist in TWISTS:
        if twist.trigger != outcome:
            continue
        if twist.hard_only and action != RiskAction.HARD:
            continue
        if rng.random() < twist.chance:
            return twist.result, twist
        break
    return outcome, None


def describe_ball(outcome: str, action: RiskAction, rng, commentary: Optional[str]) -> Tuple[bool, int, str]:
    """Returns (is_out, runs, commentary)"""
    if outcome == "W":
        return True, 0, commentary or rng.choice(DISMISSAL_COMMENTARY)
    runs = int(outcome)
    if not commentary:
        commentary = RUNS_COMMENTARY.get(runs) or DOT_COMMENTARY[action]
    return False, runs, commentary


def next_batter_id(state: MatchState) -> Optional[int]:
    at_crease = (state.batsmen.striker_id, state.batsmen.non_striker_id)
    for player_id in state.batting_order:
        if player_id in at_crease:
            continue
        if not state.batsmen.stats[player_id].out:
            return player_id
    return None


def handle_wicket(state: MatchState) -> bool:
    """Dismiss the striker and bring in the next batter. Returns True if the bowler must be rotated now."""
    state.batsmen.stats[state.batsmen.striker_id].out = True
    state.wickets += 1
    bowler_stats = state.bowler.stats[state.bowler.current_bowler_id]
    bowler_stats.wickets += 1

    incoming = next_batter_id(state)
    if incoming is not None and state.wickets < MAX_WICKETS:
        state.batsmen.striker_id = incoming
        state.partnership.runs = 0
        state.partnership.balls = 0

    return bowler_stats.wickets >= MAX_BOWLER_WICKETS


def can_finish_over(state: MatchState, bowler_id: int) -> bool:
    """Room left in the 4-over quota for the rest of the current over"""
    balls_left_in_over = BALLS_PER_OVER - state.balls_in_over
    return state.bowler.stats[bowler_id].balls + balls_left_in_over <= MAX_BOWLER_BALLS


def select_next_bowler(state: MatchState) -> Optional[int]:
    """
    Next bowler in bowling order after the current one.

    Skips the current bowler, anyone who cannot finish the over inside the
    4-over quota and anyone with 5 wickets. If nobody qualifies, any
    non-current bowler who can finish the over; None when even that fails.
    """
    current_id = state.bowler.current_bowler_id
    stats = state.bowler.stats
    order = state.bowling_order

    eligible = [
        bowler_id for bowler_id in order
        if bowler_id != current_id
        and can_finish_over(state, bowler_id)
        and stats[bowler_id].wickets < MAX_BOWLER_WICKETS
    ]
    if eligible:
        current_idx = order.index(current_id) if current_id in order else -1
        after = [bowler_id for bowler_id in eligible if order.index(bowler_id) > current_idx]
        return after[0] if after else eligible[0]

    return next(
        (bowler_id for bowler_id in order
         if bowler_id != current_id and can_finish_over(state, bowler_id)),
        None,
    )


def process_over_boundary(state: MatchState, forced_rotation: bool):
    is_end_of_over = state.balls_bowled > 0 and state.balls_bowled % BALLS_PER_OVER == 0
    if not (is_end_of_over or forced_rotation):
        return

    if is_end_of_over:
        last_over = state.ball_history[-BALLS_PER_OVER:]
        over_runs = sum(int(token) for token in last_over if token.isdigit())
        over_wickets = last_over.count("W")
        if over_runs >= BIG_OVER_RUNS:
            state.match_events.big_overs += 1
        if over_wickets >= COLLAPSE_OVER_WICKETS:
            state.match_events.collapse_overs += 1
        state.batsmen.swap_strike()

    next_bowler = select_next_bowler(state)
    if next_bowler is None:
        logger.warning("No bowler available to replace %s, they carry on", state.bowler.current_bowler_id)
        return
    if next_bowler != state.bowler.current_bowler_id:
        logger.debug("Bowler change: %s -> %s", state.bowler.current_bowler_id, next_bowler)
    state.bowler.current_bowler_id = next_bowler


def is_all_out(state: MatchState) -> bool:
    """Ten down, or nobody left to walk out (short squads)"""
    if state.wickets >= MAX_WICKETS:
        return True
    return state.batsmen.stats[state.batsmen.striker_id].out


def check_result(state: MatchState):
    if state.current_score >= state.target:
        state.status = MatchStatus.WON
        state.commentary = WIN_COMMENTARY
    elif is_all_out(state) or state.balls_bowled >= state.total_balls:
        state.status = MatchStatus.TIED if state.current_score == state.target - 1 else MatchStatus.LOST

    if state.is_terminal:
        logger.info("Chase finished %s: %d/%d in %s overs (target %d)",
                    state.status.value, state.current_score, state.wickets,
                    state.overs_display, state.target)


def play_ball(state: MatchState, action: Union[RiskAction, str], striker, bowler, rng=None) -> MatchState:
    """
    Resolve one delivery.

    Args:
        state: Current match state (not modified)
        action: "safe" or "hard"
        striker: Player facing, looked up by the caller from state.batsmen.striker_id
        bowler: Player bowling, looked up by the caller from state.bowler.current_bowler_id
        rng: random.Random-compatible source, module random by default

    Returns:
        The next MatchState, or `state` itself if the match is not in progress
    """
    if state.status != MatchStatus.IN_PROGRESS:
        return state

    rng = rng or random
    action = RiskAction(action)
    ctx = derive_context(state, action, striker, bowler)

    weights = base_weights(action, rng)
    weights, commentary = apply_modifiers(weights, ctx, rng)
    sampled = sample_outcome(weights, rng)

    outcome, twist = apply_twist(sampled, action, rng)
    detail = ""
    if twist:
        detail = twist.detail
        commentary = twist.commentary

    is_out, runs, commentary = describe_ball(outcome, action, rng, commentary)
    logger.debug("Ball %d (%s): sampled %s -> %s %s", state.balls_bowled + 1,
                 action.value, sampled, outcome, detail)

    new_state = state.copy()
    new_state.recent_actions = list(ctx.recent_actions)

    # Commit
    new_state.balls_bowled += 1
    if runs in (4, 6):
        new_state.match_events.last_boundary_ball = new_state.balls_bowled
    new_state.current_score += runs
    new_state.ball_history.append(outcome)
    new_state.last_ball_outcome = outcome
    new_state.last_ball_detail = detail
    new_state.commentary = commentary

    striker_stats = new_state.batsmen.stats[new_state.batsmen.striker_id]
    striker_stats.runs += runs
    striker_stats.balls += 1
    if runs == 4:
        striker_stats.fours += 1
    elif runs == 6:
        striker_stats.sixes += 1

    bowler_stats = new_state.bowler.stats[new_state.bowler.current_bowler_id]
    bowler_stats.runs_conceded += runs
    bowler_stats.balls += 1

    forced_rotation = False
    if is_out:
        forced_rotation = handle_wicket(new_state)
    else:
        new_state.partnership.runs += runs
        new_state.partnership.balls += 1
        if runs % 2 == 1:
            new_state.batsmen.swap_strike()

    process_over_boundary(new_state, forced_rotation)
    check_result(new_state)
    return new_state
