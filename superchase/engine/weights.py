"""
Outcome weights for one delivery.

The chosen risk action fixes which outcomes are possible; every modifier
below only rescales weights inside that set. Modifiers are pure: each takes
the current weights plus the ball context and returns new weights (and an
optional commentary line).
"""
from dataclasses import dataclass, fields, replace
from typing import Callable, Dict, FrozenSet, Optional, Tuple

from superchase.engine.state import RiskAction


# Sampling order
OUTCOMES = ("0", "1", "2", "3", "4", "6", "W")

FIELD_BY_OUTCOME = {
    "0": "dot",
    "1": "one",
    "2": "two",
    "3": "three",
    "4": "four",
    "6": "six",
    "W": "wicket",
}

ALLOWED_OUTCOMES: Dict[RiskAction, FrozenSet[str]] = {
    RiskAction.SAFE: frozenset({"0", "1", "2", "3"}),
    RiskAction.HARD: frozenset({"0", "4", "6", "W"}),
}

BASE_WEIGHTS: Dict[RiskAction, Dict[str, float]] = {
    RiskAction.SAFE: {"dot": 35, "one": 42, "two": 13, "three": 10},
    RiskAction.HARD: {"dot": 32, "four": 38, "six": 12, "wicket": 18},
}

JITTER_LOW = 0.9
JITTER_SPREAD = 0.2

SPAM_STREAK = 3
SPAM_PENALTY_CHANCE = 0.5
SKILL_GAP = 20
COLLAPSE_WICKETS = 5
COLLAPSE_BEFORE_OVER = 8


@dataclass(frozen=True)
class OutcomeWeights:
    dot: float = 0.0
    one: float = 0.0
    two: float = 0.0
    three: float = 0.0
    four: float = 0.0
    six: float = 0.0
    wicket: float = 0.0

    def get(self, outcome: str) -> float:
        return getattr(self, FIELD_BY_OUTCOME[outcome])

    def add(self, **deltas: float) -> "OutcomeWeights":
        return replace(self, **{name: getattr(self, name) + delta for name, delta in deltas.items()})

    def scale(self, **factors: float) -> "OutcomeWeights":
        return replace(self, **{name: getattr(self, name) * factor for name, factor in factors.items()})

    def restrict_to(self, action: RiskAction) -> "OutcomeWeights":
        """Zero every outcome the action cannot produce"""
        allowed = ALLOWED_OUTCOMES[action]
        return replace(self, **{
            FIELD_BY_OUTCOME[o]: 0.0 for o in OUTCOMES if o not in allowed
        })

    def clamped(self) -> "OutcomeWeights":
        return replace(self, **{f.name: max(0.0, getattr(self, f.name)) for f in fields(self)})

    @property
    def total(self) -> float:
        return sum(getattr(self, f.name) for f in fields(self))

    def items(self) -> Tuple[Tuple[str, float], ...]:
        return tuple((o, self.get(o)) for o in OUTCOMES)


@dataclass(frozen=True)
class BallContext:
    """Everything the modifiers need to know about the delivery"""
    action: RiskAction
    recent_actions: Tuple[RiskAction, ...]
    balls_bowled: int
    overs_completed: int
    balls_in_over: int
    wickets: int
    runs_needed: int
    balls_remaining: int
    required_rate: float
    is_death_overs: bool
    last_boundary_ball: int
    skill_diff: int

    @property
    def is_hard(self) -> bool:
        return self.action == RiskAction.HARD


Modifier = Callable[[OutcomeWeights, BallContext, object], Tuple[OutcomeWeights, Optional[str]]]


def jitter(rng) -> float:
    return JITTER_LOW + rng.random() * JITTER_SPREAD


def base_weights(action: RiskAction, rng) -> OutcomeWeights:
    """Base weights for the action, each scaled by its own jitter in [0.9, 1.1]"""
    base = BASE_WEIGHTS[action]
    return OutcomeWeights(**{name: weight * jitter(rng) for name, weight in base.items()})


def anti_spam(weights: OutcomeWeights, ctx: BallContext, rng) -> Tuple[OutcomeWeights, Optional[str]]:
    """Three of the same action in a row gets read by the fielding side half the time"""
    streak = ctx.recent_actions[-SPAM_STREAK:]
    if len(streak) < SPAM_STREAK or any(a != ctx.action for a in streak):
        return weights, None
    if rng.random() >= SPAM_PENALTY_CHANCE:
        return weights, None
    if ctx.is_hard:
        return weights.add(wicket=35), "Bowler predicted the slog!"
    return weights.add(dot=40), "Field tightens, no gaps found."


def heat_check(weights: OutcomeWeights, ctx: BallContext, rng) -> Tuple[OutcomeWeights, Optional[str]]:
    if ctx.is_hard and ctx.balls_bowled - ctx.last_boundary_ball == 1:
        return weights.add(wicket=15, dot=10, six=-5), None
    return weights, None


def collapse_guard(weights: OutcomeWeights, ctx: BallContext, rng) -> Tuple[OutcomeWeights, Optional[str]]:
    """Keeps a badly collapsing chase alive"""
    if ctx.is_hard and ctx.wickets >= COLLAPSE_WICKETS and ctx.overs_completed < COLLAPSE_BEFORE_OVER:
        return weights.scale(wicket=0.3).add(dot=20), None
    return weights, None


def skill_gap(weights: OutcomeWeights, ctx: BallContext, rng) -> Tuple[OutcomeWeights, Optional[str]]:
    if ctx.is_hard:
        if ctx.skill_diff > SKILL_GAP:
            return weights.add(four=10, six=10), None
        if ctx.skill_diff < -SKILL_GAP:
            return weights.add(wicket=15, dot=10), None
    else:
        if ctx.skill_diff > SKILL_GAP:
            return weights.add(one=15, two=10), None
        if ctx.skill_diff < -SKILL_GAP:
            return weights.add(dot=20), None
    return weights, None


def death_overs(weights: OutcomeWeights, ctx: BallContext, rng) -> Tuple[OutcomeWeights, Optional[str]]:
    if ctx.is_hard and ctx.is_death_overs:
        return weights.add(six=15, wicket=10), None
    return weights, None


MODIFIERS: Tuple[Modifier, ...] = (
    anti_spam,
    heat_check,
    collapse_guard,
    skill_gap,
    death_overs,
)


def apply_modifiers(weights: OutcomeWeights, ctx: BallContext, rng,
                    modifiers: Tuple[Modifier, ...] = MODIFIERS) -> Tuple[OutcomeWeights, Optional[str]]:
    """Run the modifier pipeline in order, then re-enforce the action's outcome set"""
    commentary = None
    for modifier in modifiers:
        weights, line = modifier(weights, ctx, rng)
        if line and not commentary:
            commentary = line
    return weights.restrict_to(ctx.action), commentary


def sample_outcome(weights: OutcomeWeights, rng) -> str:
    """Weighted draw over OUTCOMES. An empty distribution always yields a dot ball."""
    weights = weights.clamped()
    if weights.total <= 0:
        weights = replace(weights, dot=1.0)

    draw = rng.random() * weights.total
    chosen = "0"
    for outcome, weight in weights.items():
        if weight <= 0:
            continue
        chosen = outcome
        if draw < weight:
            break
        draw -= weight
    return chosen
