"""Best-first search over game states with lazy cost relaxation."""

from __future__ import annotations

from collections.abc import Callable

from longterm_planner.models import GameState
from longterm_planner.planning.costs import BestCostTable
from longterm_planner.planning.frontier import Frontier
from longterm_planner.planning.heuristic import estimate
from longterm_planner.planning.path import reconstruct
from longterm_planner.planning.results import FailureReason, PlanningFailure, PlanResult, SearchOutcome
from longterm_planner.planning.transitions import TransitionGenerator
from longterm_planner.planning.tree import SearchTree

DEFAULT_MAX_ITERATIONS = 5_000_000


def search(
    initial: GameState,
    target: GameState,
    *,
    generator: TransitionGenerator | None = None,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
    should_cancel: Callable[[], bool] | None = None,
) -> SearchOutcome:
    """Run one bounded best-first search and return the raw outcome.

    Entries popped at a cost no better than the committed cost for their
    state are discarded instead of being re-expanded. The number of pops never
    exceeds ``max_iterations``; the final pop is goal-tested but not expanded.
    """
    if max_iterations <= 0:
        raise ValueError(f"max_iterations must be positive, got {max_iterations}")
    generator = generator or TransitionGenerator()

    tree = SearchTree(initial)
    frontier = Frontier()
    best_costs = BestCostTable()
    frontier.push(estimate(initial, target), tree.root_index)

    iterations = 0
    while frontier:
        if should_cancel is not None and should_cancel():
            return SearchOutcome(tree, None, iterations, FailureReason.CANCELLED)

        index = frontier.pop()
        iterations += 1
        entry = tree[index]

        if estimate(entry.state, target) <= 0:
            return SearchOutcome(tree, index, iterations, None)

        if iterations >= max_iterations:
            return SearchOutcome(tree, None, iterations, FailureReason.BUDGET_EXHAUSTED)

        if best_costs.is_dominated(entry.state, entry.cost):
            continue
        best_costs.commit(entry.state, entry.cost)

        for edge in generator.successors(entry.state):
            candidate = entry.cost + edge.cost
            if best_costs.is_dominated(edge.state, candidate):
                continue
            child = tree.add(edge.state, index, edge.action, candidate)
            frontier.push(candidate + estimate(edge.state, target), child)

    return SearchOutcome(tree, None, iterations, FailureReason.UNREACHABLE)


def plan(
    initial: GameState,
    target: GameState,
    *,
    generator: TransitionGenerator | None = None,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
    should_cancel: Callable[[], bool] | None = None,
) -> PlanResult | PlanningFailure:
    """Find a cheapest-looking action order from ``initial`` to ``target``.

    Returns a :class:`PlanResult` (possibly with no actions when ``initial``
    already satisfies ``target``) or a :class:`PlanningFailure`. Search
    exhaustion is never raised.
    """
    outcome = search(
        initial,
        target,
        generator=generator,
        max_iterations=max_iterations,
        should_cancel=should_cancel,
    )
    return reconstruct(outcome)
