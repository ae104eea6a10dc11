"""Min-priority frontier for the best-first search."""

from __future__ import annotations

import heapq
import itertools
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from backend.engine.gamesolver.solver import SearchNode


class Frontier:
    """Binary heap of search nodes keyed on ``(g + h, h, insertion order)``.

    Nodes with equal total cost come out closest-to-goal first, and
    remaining ties are broken first-in first-out so runs are reproducible.
    """

    def __init__(self) -> None:
        self._heap: list[tuple[int, int, int, SearchNode]] = []
        self._counter = itertools.count()
        self.peak: int = 0

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def push(self, node: SearchNode) -> None:
        heapq.heappush(
            self._heap, (node.priority, node.h, next(self._counter), node)
        )
        self.peak = max(self.peak, len(self._heap))

    def pop(self) -> SearchNode:
        """Remove and return the node with the lowest priority."""
        if not self._heap:
            raise IndexError("pop from an empty frontier")
        return heapq.heappop(self._heap)[-1]

    def peek(self) -> SearchNode:
        if not self._heap:
            raise IndexError("peek at an empty frontier")
        return self._heap[0][-1]
