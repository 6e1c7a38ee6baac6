"""
Match initializer - builds the opening state of a chase.
"""
import logging
import random
from typing import Optional, Sequence

from superchase.models.player import BOWLING_ROLES
from superchase.engine.state import (
    BatsmanStats, BattingState, BowlerStats, BowlingState,
    MatchState, MatchStatus, PitchType,
)

logger = logging.getLogger(__name__)

DEFAULT_TOTAL_OVERS = 20
SUPER_OVER_OVERS = 1

TARGET_RANGE = (175, 215)
SUPER_OVER_TARGET_RANGE = (12, 19)

MIN_BOWLING_OPTIONS = 5
MAX_BOWLING_OPTIONS = 6

# Chance of swapping each adjacent pair in the single shuffle pass.
# Below 0.5, so specialists listed first tend to bowl first.
BOWLER_SHUFFLE_BIAS = 0.3

PITCH_REPORTS = {
    PitchType.FLAT: "Batting paradise!",
    PitchType.GREEN: "Something in it for the bowlers.",
    PitchType.DUSTY: "Spinners might enjoy this.",
}
SUPER_OVER_COMMENTARY = "SUPER OVER! Every ball counts."


class InsufficientRosterError(ValueError):
    """Raised when a squad is too small to start a chase"""


def generate_target(is_super_over: bool, rng) -> int:
    low, high = SUPER_OVER_TARGET_RANGE if is_super_over else TARGET_RANGE
    return rng.randint(low, high)


def random_pitch(rng) -> PitchType:
    roll = rng.random()
    if roll < 0.33:
        return PitchType.FLAT
    if roll < 0.66:
        return PitchType.GREEN
    return PitchType.DUSTY


def build_bowling_order(bowling_players: Sequence, rng) -> list:
    """
    Bowling pool: specialists and all-rounders first, padded from the rest of
    the squad up to 5, capped at 6, then lightly shuffled.
    """
    specialists = [p.id for p in bowling_players if p.role in BOWLING_ROLES]
    if len(specialists) < MIN_BOWLING_OPTIONS:
        others = [p.id for p in bowling_players if p.id not in specialists]
        pool = (specialists + others)[:MIN_BOWLING_OPTIONS]
    else:
        pool = specialists[:MAX_BOWLING_OPTIONS]

    for i in range(len(pool) - 1):
        if rng.random() < BOWLER_SHUFFLE_BIAS:
            pool[i], pool[i + 1] = pool[i + 1], pool[i]
    return pool


def initialize_match(
    batting_players: Sequence,
    bowling_players: Sequence,
    total_overs: Optional[int] = None,
    is_super_over: bool = False,
    rng=None,
) -> MatchState:
    """
    Build the opening state of a chase.

    Args:
        batting_players: Chasing side in batting order
        bowling_players: Defending side
        total_overs: Overs available, 20 by default (1 for a super over)
        is_super_over: Small target, one over
        rng: random.Random-compatible source

    Returns:
        MatchState with status SCHEDULED - the caller starts it
    """
    if len(batting_players) < 2:
        raise InsufficientRosterError(f"Need at least 2 batters, got {len(batting_players)}")
    if len(bowling_players) < 1:
        raise InsufficientRosterError("Need at least 1 bowler")

    rng = rng or random
    if total_overs is None:
        total_overs = SUPER_OVER_OVERS if is_super_over else DEFAULT_TOTAL_OVERS

    batting_order = [p.id for p in batting_players]
    bowling_order = build_bowling_order(bowling_players, rng)
    target = generate_target(is_super_over, rng)
    pitch = random_pitch(rng)

    if is_super_over:
        commentary = SUPER_OVER_COMMENTARY
    else:
        commentary = f"Pitch Report: {PITCH_REPORTS[pitch]} Chase {target} to win."

    state = MatchState(
        target=target,
        total_overs=total_overs,
        batsmen=BattingState(
            striker_id=batting_order[0],
            non_striker_id=batting_order[1],
            stats={player_id: BatsmanStats() for player_id in batting_order},
        ),
        bowler=BowlingState(
            current_bowler_id=bowling_order[0],
            stats={p.id: BowlerStats() for p in bowling_players},
        ),
        pitch_type=pitch,
        batting_order=batting_order,
        bowling_order=bowling_order,
        status=MatchStatus.SCHEDULED,
        is_super_over=is_super_over,
        commentary=commentary,
    )
    logger.info("Chase set up: target %d in %d overs on a %s pitch%s",
                target, total_overs, pitch.value, " (super over)" if is_super_over else "")
    return state
