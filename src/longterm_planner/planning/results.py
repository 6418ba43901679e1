"""Values handed back by the planner."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from enum import Enum

from longterm_planner.models import Action, GameState
from longterm_planner.planning.tree import SearchTree


class FailureReason(str, Enum):
    """Why a search ended without a plan."""

    BUDGET_EXHAUSTED = "budget_exhausted"
    UNREACHABLE = "unreachable"
    CANCELLED = "cancelled"


@dataclass(slots=True)
class PlanResult:
    """A found plan. Empty ``actions`` with zero cost: the start already meets the target."""

    actions: list[Action]
    total_cost: int
    iterations: int
    final_state: GameState

    @property
    def is_trivial(self) -> bool:
        return not self.actions

    def as_queue(self) -> deque[Action]:
        return deque(self.actions)


@dataclass(slots=True)
class PlanningFailure:
    """No plan was found within this attempt."""

    reason: FailureReason
    iterations: int


@dataclass(slots=True)
class SearchOutcome:
    """Raw driver output: the arena plus the terminal entry index, if any."""

    tree: SearchTree
    terminal: int | None
    iterations: int
    reason: FailureReason | None = None
