"""Turns a finished search into a chronological action list."""

from __future__ import annotations

from longterm_planner.models import Action
from longterm_planner.planning.results import FailureReason, PlanningFailure, PlanResult, SearchOutcome


def reconstruct(outcome: SearchOutcome) -> PlanResult | PlanningFailure:
    if outcome.terminal is None:
        return PlanningFailure(reason=outcome.reason or FailureReason.UNREACHABLE, iterations=outcome.iterations)

    terminal = outcome.tree[outcome.terminal]
    actions = [entry.action for entry in outcome.tree.lineage(outcome.terminal) if entry.action != Action.EMPTY]
    actions.reverse()
    return PlanResult(
        actions=actions,
        total_cost=terminal.cost,
        iterations=outcome.iterations,
        final_state=terminal.state,
    )
