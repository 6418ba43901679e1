"""Long-term build planning: best-first search over resource states."""

from .engine import DEFAULT_MAX_ITERATIONS, plan, search
from .heuristic import estimate, is_goal
from .results import FailureReason, PlanningFailure, PlanResult, SearchOutcome
from .transitions import (
    DEFAULT_RULES,
    DEFAULT_WAIT_TICKS,
    ImprovementRule,
    TransitionGenerator,
    bank_rule,
    quarry_rule,
)

__all__ = [
    "DEFAULT_MAX_ITERATIONS",
    "DEFAULT_RULES",
    "DEFAULT_WAIT_TICKS",
    "FailureReason",
    "ImprovementRule",
    "PlanResult",
    "PlanningFailure",
    "SearchOutcome",
    "TransitionGenerator",
    "bank_rule",
    "quarry_rule",
    "estimate",
    "is_goal",
    "plan",
    "search",
]
