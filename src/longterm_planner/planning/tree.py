"""Arena of search entries linked to their parents by index."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from longterm_planner.models import Action, GameState


@dataclass(frozen=True, slots=True)
class SearchEntry:
    state: GameState
    parent: int | None
    action: Action
    cost: int


class SearchTree:
    """Append-only store of entries; a parent index always precedes its child."""

    def __init__(self, root: GameState) -> None:
        self._entries: list[SearchEntry] = [SearchEntry(state=root, parent=None, action=Action.EMPTY, cost=0)]

    @property
    def root_index(self) -> int:
        return 0

    def add(self, state: GameState, parent: int, action: Action, cost: int) -> int:
        if not 0 <= parent < len(self._entries):
            raise IndexError(f"Unknown parent entry: {parent}")
        self._entries.append(SearchEntry(state=state, parent=parent, action=action, cost=cost))
        return len(self._entries) - 1

    def __getitem__(self, index: int) -> SearchEntry:
        return self._entries[index]

    def __len__(self) -> int:
        return len(self._entries)

    def lineage(self, index: int) -> Iterator[SearchEntry]:
        """Yield the entry at ``index`` and each ancestor up to the root."""
        current: int | None = index
        while current is not None:
            entry = self._entries[current]
            yield entry
            current = entry.parent
