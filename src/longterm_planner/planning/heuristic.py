"""Remaining-cost estimate used both as goal test and frontier ordering."""

from __future__ import annotations

import math

from longterm_planner.models import GameState


def estimate(current: GameState, target: GameState) -> float:
    """Approximate ticks from ``current`` to ``target``.

    Ticks to close the gold gap at the current income, plus the income
    shortfall counted directly as ticks. Not admissible: the second term is in
    rate units. A positive gold gap with no income yields ``math.inf``.
    """
    gold_gap = max(0, target.gold - current.gold)
    if gold_gap == 0:
        gold_ticks = 0
    elif current.gold_per_tick <= 0:
        return math.inf
    else:
        gold_ticks = gold_gap // current.gold_per_tick

    rate_gap = max(0, target.gold_per_tick - current.gold_per_tick)
    return gold_ticks + rate_gap


def is_goal(current: GameState, target: GameState) -> bool:
    return estimate(current, target) <= 0
