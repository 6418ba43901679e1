"""Calling-layer facade: runs the pure planner and reports what happened."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import Protocol

from longterm_planner.config import Settings
from longterm_planner.models import Action, GameState
from longterm_planner.planning import (
    DEFAULT_MAX_ITERATIONS,
    PlanningFailure,
    PlanResult,
    TransitionGenerator,
    bank_rule,
    plan,
)
from longterm_planner.telemetry import NullTelemetry, Telemetry


class PlanExecutor(Protocol):
    """Applies planned actions to live game state. The planner never calls it."""

    def execute(self, action: Action) -> None:
        """Carry out one action in the host game."""


class LongTermPlanner:
    """Plans build orders and reports each outcome to logs and telemetry."""

    def __init__(
        self,
        generator: TransitionGenerator | None = None,
        *,
        max_iterations: int = DEFAULT_MAX_ITERATIONS,
        telemetry: Telemetry | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.generator = generator or TransitionGenerator()
        self.max_iterations = max_iterations
        self._telemetry = telemetry or NullTelemetry()
        self._logger = logger or logging.getLogger("longterm_planner.planner")

    @classmethod
    def from_settings(
        cls,
        config: Settings,
        *,
        telemetry: Telemetry | None = None,
        logger: logging.Logger | None = None,
    ) -> LongTermPlanner:
        generator = TransitionGenerator(
            [
                bank_rule(
                    gold_cost=config.bank_gold_cost,
                    build_ticks=config.bank_build_ticks,
                    gold_per_tick_delta=config.bank_gold_per_tick_delta,
                )
            ],
            wait_ticks=config.wait_ticks,
        )
        return cls(
            generator,
            max_iterations=config.max_iterations,
            telemetry=telemetry if config.telemetry_enabled else NullTelemetry(),
            logger=logger,
        )

    def plan(
        self,
        initial: GameState,
        target: GameState,
        *,
        should_cancel: Callable[[], bool] | None = None,
    ) -> PlanResult | PlanningFailure:
        self._logger.info(
            "plan_started",
            extra={"initial": initial.as_dict(), "target": target.as_dict(), "max_iterations": self.max_iterations},
        )
        result = plan(
            initial,
            target,
            generator=self.generator,
            max_iterations=self.max_iterations,
            should_cancel=should_cancel,
        )

        if isinstance(result, PlanningFailure):
            payload = {"reason": result.reason.value, "iterations": result.iterations}
            self._logger.warning("plan_failed", extra=payload)
            self._telemetry.emit("plan_failed", payload)
            return result

        payload = {
            "final_gold": result.final_state.gold,
            "final_gold_per_tick": result.final_state.gold_per_tick,
            "total_cost": result.total_cost,
            "iterations": result.iterations,
            "actions": [action.value for action in result.actions],
        }
        self._logger.info("plan_found", extra=payload)
        self._telemetry.emit("plan_found", payload)
        return result

    def replay(self, initial: GameState, actions: Sequence[Action]) -> tuple[GameState, int]:
        return self.generator.replay(initial, actions)

    def dispatch(self, result: PlanResult, executor: PlanExecutor) -> int:
        """Hand every planned action to ``executor`` in order; return how many were sent."""
        for action in result.actions:
            executor.execute(action)
        self._logger.info("plan_dispatched", extra={"actions": len(result.actions)})
        return len(result.actions)
