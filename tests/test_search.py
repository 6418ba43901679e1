from __future__ import annotations

from collections import Counter

import pytest

from longterm_planner.models import Action, GameState
from longterm_planner.planning import (
    FailureReason,
    ImprovementRule,
    PlanningFailure,
    PlanResult,
    TransitionGenerator,
    bank_rule,
    plan,
    search,
)
from longterm_planner.planning.costs import BestCostTable
from longterm_planner.planning.frontier import Frontier
from longterm_planner.planning.path import reconstruct
from longterm_planner.planning.results import SearchOutcome
from longterm_planner.planning.tree import SearchTree


def _bank_generator() -> TransitionGenerator:
    return TransitionGenerator([bank_rule(gold_cost=10, build_ticks=1, gold_per_tick_delta=10)], wait_ticks=10)


def test_wait_then_bank_reaches_income_target() -> None:
    initial = GameState(gold=0, gold_per_tick=1, stone=0, stone_per_tick=0)
    target = GameState(gold=0, gold_per_tick=11, stone=0, stone_per_tick=0)

    result = plan(initial, target, generator=_bank_generator())

    assert isinstance(result, PlanResult)
    assert result.actions == [Action.WAIT, Action.BUILD_BANK]
    assert result.total_cost == 11
    assert result.final_state.gold_per_tick == 11
    assert list(result.as_queue()) == [Action.WAIT, Action.BUILD_BANK]


def test_identical_start_and_target_is_an_empty_plan_not_a_failure() -> None:
    state = GameState(gold=7, gold_per_tick=3, stone=2, stone_per_tick=1)

    result = plan(state, state)

    assert isinstance(result, PlanResult)
    assert result.actions == []
    assert result.total_cost == 0
    assert result.is_trivial
    assert result.iterations == 1


def test_already_satisfied_target_returns_empty_plan() -> None:
    result = plan(GameState(gold=100, gold_per_tick=50), GameState(gold=10, gold_per_tick=1))

    assert isinstance(result, PlanResult)
    assert result.actions == []
    assert result.total_cost == 0


def test_target_beyond_budget_reports_exhaustion() -> None:
    initial = GameState(gold=0, gold_per_tick=1)
    target = GameState(gold=0, gold_per_tick=1_000)

    result = plan(initial, target, generator=_bank_generator(), max_iterations=50)

    assert isinstance(result, PlanningFailure)
    assert result.reason == FailureReason.BUDGET_EXHAUSTED
    assert result.iterations == 50


def test_pops_never_exceed_the_cap() -> None:
    initial = GameState(gold=0, gold_per_tick=1)
    target = GameState(gold=10_000_000, gold_per_tick=500)

    for cap in (1, 2, 17):
        outcome = search(initial, target, generator=_bank_generator(), max_iterations=cap)
        assert outcome.terminal is None
        assert outcome.iterations == cap


def test_empty_frontier_reports_unreachable() -> None:
    result = plan(GameState(), GameState(gold=5))

    assert isinstance(result, PlanningFailure)
    assert result.reason == FailureReason.UNREACHABLE
    assert result.iterations == 1


def test_replaying_the_plan_reproduces_its_cost_and_state() -> None:
    generator = _bank_generator()
    initial = GameState(gold=3, gold_per_tick=2, stone=1, stone_per_tick=1)
    target = GameState(gold=400, gold_per_tick=31)

    result = plan(initial, target, generator=generator)

    assert isinstance(result, PlanResult)
    assert result.actions
    final_state, total_cost = generator.replay(initial, result.actions)
    assert total_cost == result.total_cost
    assert final_state == result.final_state


def test_search_is_deterministic() -> None:
    initial = GameState(gold=0, gold_per_tick=1)
    target = GameState(gold=200, gold_per_tick=21)

    first = plan(initial, target)
    second = plan(initial, target)

    assert first == second


def test_unused_cancellation_hook_does_not_change_the_result() -> None:
    initial = GameState(gold=0, gold_per_tick=1)
    target = GameState(gold=0, gold_per_tick=11)

    assert plan(initial, target, should_cancel=lambda: False) == plan(initial, target)


def test_cancellation_stops_the_search() -> None:
    calls = {"count": 0}

    def _cancel_after_three() -> bool:
        calls["count"] += 1
        return calls["count"] > 3

    result = plan(GameState(gold_per_tick=1), GameState(gold_per_tick=10_000), should_cancel=_cancel_after_three)

    assert isinstance(result, PlanningFailure)
    assert result.reason == FailureReason.CANCELLED
    assert result.iterations == 3


def test_invalid_budget_is_a_contract_violation() -> None:
    with pytest.raises(ValueError):
        plan(GameState(), GameState(), max_iterations=0)


def test_best_cost_table_only_accepts_improvements() -> None:
    table = BestCostTable()
    state = GameState(gold=1)

    table.commit(state, 10)
    table.commit(state, 4)

    assert table.get(state) == 4
    assert table.is_dominated(state, 4)
    assert not table.is_dominated(state, 3)
    with pytest.raises(ValueError):
        table.commit(state, 4)
    with pytest.raises(ValueError):
        table.commit(state, 9)
    assert table.get(state) == 4


def test_frontier_breaks_ties_in_insertion_order() -> None:
    frontier = Frontier()
    frontier.push(5, 0)
    frontier.push(1, 1)
    frontier.push(5, 2)
    frontier.push(1, 3)

    assert [frontier.pop() for _ in range(len(frontier))] == [1, 3, 0, 2]
    assert not frontier
    with pytest.raises(IndexError):
        frontier.pop()


def test_reconstruct_walks_parents_in_chronological_order() -> None:
    tree = SearchTree(GameState())
    first = tree.add(GameState(gold=10), tree.root_index, Action.WAIT, 10)
    second = tree.add(GameState(gold=20), first, Action.WAIT, 20)
    third = tree.add(GameState(gold=11, gold_per_tick=10), second, Action.BUILD_BANK, 21)

    result = reconstruct(SearchOutcome(tree=tree, terminal=third, iterations=4))

    assert isinstance(result, PlanResult)
    assert result.actions == [Action.WAIT, Action.WAIT, Action.BUILD_BANK]
    assert result.total_cost == 21


def test_reconstruct_without_terminal_is_a_failure() -> None:
    outcome = SearchOutcome(
        tree=SearchTree(GameState()),
        terminal=None,
        iterations=9,
        reason=FailureReason.BUDGET_EXHAUSTED,
    )

    result = reconstruct(outcome)

    assert result == PlanningFailure(reason=FailureReason.BUDGET_EXHAUSTED, iterations=9)


class CountingGenerator(TransitionGenerator):
    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.expanded: list[GameState] = []

    def successors(self, state: GameState):
        self.expanded.append(state)
        return super().successors(state)


def test_replay_matches_a_plan_that_used_a_second_rule() -> None:
    generator = TransitionGenerator(
        [
            bank_rule(gold_cost=10, build_ticks=1, gold_per_tick_delta=1),
            ImprovementRule(action=Action.BUILD_QUARRY, build_ticks=1, gold_cost=10, gold_per_tick_delta=50),
        ],
        wait_ticks=10,
    )
    initial = GameState(gold=0, gold_per_tick=1)

    result = plan(initial, GameState(gold=0, gold_per_tick=51), generator=generator)

    assert isinstance(result, PlanResult)
    assert result.actions == [Action.WAIT, Action.BUILD_QUARRY]
    assert generator.replay(initial, result.actions) == (result.final_state, result.total_cost)
    assert result.final_state == GameState(gold=1, gold_per_tick=51)


def test_pricier_duplicate_entries_are_discarded_without_expansion() -> None:
    # Both edges land on the same stone total; the slow build costs twice the ticks.
    slow_build = ImprovementRule(
        action=Action.BUILD_QUARRY,
        build_ticks=4,
        stone_cost=2,
        predicate=lambda state: True,
    )
    generator = CountingGenerator([slow_build], wait_ticks=2)
    initial = GameState(gold=0, gold_per_tick=0, stone=0, stone_per_tick=1)

    outcome = search(initial, GameState(gold=1), generator=generator, max_iterations=6)

    assert outcome.terminal is None
    assert outcome.reason == FailureReason.BUDGET_EXHAUSTED
    assert outcome.iterations == 6
    assert [state.stone for state in generator.expanded] == [0, 2, 4]
    assert all(count == 1 for count in Counter(generator.expanded).values())
    assert len(outcome.tree) == 7
