"""CLI-side handler wrappers that turn planner results into printable payloads."""

from __future__ import annotations

from longterm_planner.models import Action, GameState
from longterm_planner.planner import LongTermPlanner
from longterm_planner.planning import PlanningFailure


def parse_actions(raw: str) -> list[Action]:
    """Parse a comma-separated action list such as ``"wait,build_bank"``."""
    actions: list[Action] = []
    for token in raw.split(","):
        token = token.strip().lower()
        if not token:
            continue
        try:
            action = Action(token)
        except ValueError:
            raise ValueError(f"Unknown action: {token}") from None
        if action == Action.EMPTY:
            raise ValueError("The empty action cannot be replayed")
        actions.append(action)
    return actions


class CliPlanHandler:
    """Sync facade that formats planner output for the terminal."""

    def __init__(self, planner: LongTermPlanner) -> None:
        self._planner = planner

    def plan(self, initial: GameState, target: GameState) -> tuple[bool, dict]:
        result = self._planner.plan(initial, target)
        if isinstance(result, PlanningFailure):
            return False, {"plan": None, "reason": result.reason.value, "iterations": result.iterations}
        return True, {
            "plan": [action.value for action in result.actions],
            "total_cost": result.total_cost,
            "iterations": result.iterations,
            "final_state": result.final_state.as_dict(),
        }

    def replay(self, initial: GameState, actions: list[Action]) -> dict:
        final_state, total_cost = self._planner.replay(initial, actions)
        return {"final_state": final_state.as_dict(), "total_cost": total_cost}
