"""Cheapest committed cost per state (closed set with cost relaxation)."""

from __future__ import annotations

from longterm_planner.models import GameState


class BestCostTable:
    """Maps a state to the cheapest cost at which it has been committed.

    Values only ever decrease; a commit that does not improve on the stored
    cost is rejected.
    """

    def __init__(self) -> None:
        self._costs: dict[GameState, int] = {}

    def get(self, state: GameState) -> int | None:
        return self._costs.get(state)

    def is_dominated(self, state: GameState, cost: int) -> bool:
        """True when ``state`` is already committed at ``cost`` or cheaper."""
        best = self._costs.get(state)
        return best is not None and best <= cost

    def commit(self, state: GameState, cost: int) -> None:
        if self.is_dominated(state, cost):
            raise ValueError(f"Cost {cost} does not improve on {self._costs[state]} for {state}")
        self._costs[state] = cost

    def __contains__(self, state: object) -> bool:
        return state in self._costs

    def __len__(self) -> int:
        return len(self._costs)
