"""Priority frontier of search entries, ordered by estimated total cost."""

from __future__ import annotations

import heapq
from itertools import count


class Frontier:
    """Min-heap of entry indices; equal priorities pop in insertion order."""

    def __init__(self) -> None:
        self._heap: list[tuple[float, int, int]] = []
        self._sequence = count()

    def push(self, priority: float, entry_index: int) -> None:
        heapq.heappush(self._heap, (priority, next(self._sequence), entry_index))

    def pop(self) -> int:
        if not self._heap:
            raise IndexError("pop from an empty frontier")
        _, _, entry_index = heapq.heappop(self._heap)
        return entry_index

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)
