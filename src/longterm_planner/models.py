"""Value types shared by the planner: resource snapshots, actions and edges."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields
from enum import Enum
from typing import Any


class InvalidGameStateError(ValueError):
    """Raised when a game state snapshot is missing fields or holds non-integer values."""


class ActionNotApplicableError(ValueError):
    """Raised when an action is replayed against a state that cannot perform it."""


class Action(str, Enum):
    """Work an agent can schedule. ``EMPTY`` only marks the root of a plan."""

    WAIT = "wait"
    BUILD_BANK = "build_bank"
    BUILD_QUARRY = "build_quarry"
    EMPTY = "empty"


@dataclass(frozen=True, slots=True)
class GameState:
    """Resources and income of a game world at one instant."""

    gold: int = 0
    gold_per_tick: int = 0
    stone: int = 0
    stone_per_tick: int = 0

    def __post_init__(self) -> None:
        for item in fields(self):
            value = getattr(self, item.name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidGameStateError(
                    f"GameState.{item.name} must be an int, got {type(value).__name__}: {value!r}"
                )

    @classmethod
    def from_mapping(cls, payload: Mapping[str, Any]) -> GameState:
        """Build a snapshot from a mapping that must provide every field."""
        names = [item.name for item in fields(cls)]
        missing = [name for name in names if name not in payload]
        if missing:
            raise InvalidGameStateError(f"GameState is missing fields: {', '.join(missing)}")
        return cls(**{name: payload[name] for name in names})

    def accrue(self, ticks: int) -> GameState:
        """Return the snapshot after ``ticks`` of linear income."""
        return GameState(
            gold=self.gold + self.gold_per_tick * ticks,
            gold_per_tick=self.gold_per_tick,
            stone=self.stone + self.stone_per_tick * ticks,
            stone_per_tick=self.stone_per_tick,
        )

    def as_dict(self) -> dict[str, int]:
        return {item.name: getattr(self, item.name) for item in fields(self)}


@dataclass(frozen=True, slots=True)
class Transition:
    """Edge into ``state`` reached by doing ``action`` for ``cost`` ticks.

    The origin is implicit: a transition only means something next to the
    state it was generated from.
    """

    state: GameState
    action: Action
    cost: int
