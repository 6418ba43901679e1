"""Edge generation: the wait action plus rule-gated improvements."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass

from longterm_planner.models import Action, ActionNotApplicableError, GameState, Transition

DEFAULT_WAIT_TICKS = 10

BANK_GOLD_COST = 10
BANK_BUILD_TICKS = 1
BANK_GOLD_PER_TICK_DELTA = 10

QUARRY_GOLD_COST = 20
QUARRY_BUILD_TICKS = 2
QUARRY_STONE_PER_TICK_DELTA = 5


@dataclass(frozen=True, slots=True)
class ImprovementRule:
    """One-off investment that permanently raises an income rate.

    Building takes ``build_ticks`` during which the current income still
    accrues; afterwards the one-time cost is paid and the rate delta applied.
    ``predicate`` defaults to plain affordability of the one-time cost.
    """

    action: Action
    build_ticks: int
    gold_cost: int = 0
    stone_cost: int = 0
    gold_per_tick_delta: int = 0
    stone_per_tick_delta: int = 0
    predicate: Callable[[GameState], bool] | None = None

    def is_applicable(self, state: GameState) -> bool:
        if self.predicate is not None:
            return self.predicate(state)
        return state.gold >= self.gold_cost and state.stone >= self.stone_cost

    def apply(self, state: GameState) -> Transition:
        built = state.accrue(self.build_ticks)
        result = GameState(
            gold=built.gold - self.gold_cost,
            gold_per_tick=built.gold_per_tick + self.gold_per_tick_delta,
            stone=built.stone - self.stone_cost,
            stone_per_tick=built.stone_per_tick + self.stone_per_tick_delta,
        )
        return Transition(state=result, action=self.action, cost=self.build_ticks)


def bank_rule(
    *,
    gold_cost: int = BANK_GOLD_COST,
    build_ticks: int = BANK_BUILD_TICKS,
    gold_per_tick_delta: int = BANK_GOLD_PER_TICK_DELTA,
) -> ImprovementRule:
    return ImprovementRule(
        action=Action.BUILD_BANK,
        build_ticks=build_ticks,
        gold_cost=gold_cost,
        gold_per_tick_delta=gold_per_tick_delta,
    )


def quarry_rule(
    *,
    gold_cost: int = QUARRY_GOLD_COST,
    build_ticks: int = QUARRY_BUILD_TICKS,
    stone_per_tick_delta: int = QUARRY_STONE_PER_TICK_DELTA,
) -> ImprovementRule:
    return ImprovementRule(
        action=Action.BUILD_QUARRY,
        build_ticks=build_ticks,
        gold_cost=gold_cost,
        stone_per_tick_delta=stone_per_tick_delta,
    )


DEFAULT_RULES: tuple[ImprovementRule, ...] = (bank_rule(),)


class TransitionGenerator:
    """Produces every valid outgoing edge of a state, freshly on each call."""

    def __init__(
        self,
        rules: Iterable[ImprovementRule] = DEFAULT_RULES,
        *,
        wait_ticks: int = DEFAULT_WAIT_TICKS,
    ) -> None:
        if wait_ticks <= 0:
            raise ValueError(f"wait_ticks must be positive, got {wait_ticks}")
        self._rules = tuple(rules)
        seen: set[Action] = set()
        for rule in self._rules:
            if rule.action in (Action.WAIT, Action.EMPTY):
                raise ValueError(f"Improvement rules cannot use the reserved action {rule.action.value!r}")
            if rule.build_ticks < 0:
                raise ValueError(f"build_ticks must not be negative, got {rule.build_ticks}")
            if rule.gold_per_tick_delta < 0 or rule.stone_per_tick_delta < 0:
                raise ValueError(f"{rule.action.value} would lower an income rate")
            if rule.action in seen:
                raise ValueError(f"More than one rule performs {rule.action.value!r}")
            seen.add(rule.action)
        self._wait_ticks = wait_ticks

    @property
    def wait_ticks(self) -> int:
        return self._wait_ticks

    @property
    def rules(self) -> tuple[ImprovementRule, ...]:
        return self._rules

    def wait(self, state: GameState) -> Transition:
        return Transition(state=state.accrue(self._wait_ticks), action=Action.WAIT, cost=self._wait_ticks)

    def successors(self, state: GameState) -> tuple[Transition, ...]:
        """Return the distinct outgoing edges, wait first, then rules in declaration order."""
        edges = [self.wait(state)]
        edges.extend(rule.apply(state) for rule in self._rules if rule.is_applicable(state))
        return tuple(dict.fromkeys(edges))

    def apply(self, state: GameState, action: Action) -> Transition:
        """Re-apply a single planned action to ``state``."""
        if action == Action.WAIT:
            return self.wait(state)

        for rule in self._rules:
            if rule.action != action:
                continue
            if not rule.is_applicable(state):
                raise ActionNotApplicableError(f"Cannot {action.value} from {state}")
            return rule.apply(state)

        raise ActionNotApplicableError(f"No rule performs {action.value!r}")

    def replay(self, initial: GameState, actions: Sequence[Action]) -> tuple[GameState, int]:
        """Fold ``actions`` over ``initial``; return the final state and the summed tick cost."""
        state = initial
        total = 0
        for action in actions:
            edge = self.apply(state, action)
            state = edge.state
            total += edge.cost
        return state, total
