"""Memoized distance-to-goal estimates for one solver run."""

from __future__ import annotations

import logging

from backend.models.board import Board

logger = logging.getLogger(__name__)


class HeuristicCache:
    """Maps board contents to their heuristic value.

    The value is the Manhattan distance, plus the linear-conflict
    correction when *linear_conflict* is set.  A cache belongs to a single
    search; call :meth:`clear` once the search is over.
    """

    def __init__(self, linear_conflict: bool = True) -> None:
        self.linear_conflict = linear_conflict
        self._values: dict[Board, int] = {}
        self.hits: int = 0
        self.misses: int = 0
        self.incremental: int = 0

    def __len__(self) -> int:
        return len(self._values)

    def __contains__(self, board: object) -> bool:
        return board in self._values

    # -- lookups --------------------------------------------------------------

    def estimate(self, board: Board, parent: Board | None = None) -> int:
        """Return the heuristic for *board*.

        If *parent* is one move away from *board* and already cached, the
        value is derived from the parent's instead of rescanning the grid.
        """
        value = self._values.get(board)
        if value is not None:
            self.hits += 1
            return value

        self.misses += 1
        parent_value = self._values.get(parent) if parent is not None else None
        if parent_value is not None and _one_move_apart(parent, board):
            value = parent_value + self.delta(parent, board)
            self.incremental += 1
        else:
            value = self.compute(board)
        self._values[board] = value
        return value

    def compute(self, board: Board) -> int:
        """Full O(N²) evaluation, bypassing the cache."""
        value = board.manhattan()
        if self.linear_conflict:
            value += board.linear_conflicts()
        return value

    def delta(self, parent: Board, child: Board) -> int:
        """Heuristic change caused by the single move *parent* -> *child*.

        Only the moved tile changes its distance, and only the two lines
        it crossed can change their conflicts: two rows for a vertical
        move, two columns for a horizontal one.
        """
        n = parent.size
        # The tile now under the parent's blank used to sit at child.blank.
        diff = child.tile_distance(parent.blank) - parent.tile_distance(child.blank)
        if not self.linear_conflict:
            return diff

        if abs(child.blank - parent.blank) == n:
            lines = {parent.blank // n, child.blank // n}
            for r in lines:
                diff += child.row_conflicts(r) - parent.row_conflicts(r)
        else:
            lines = {parent.blank % n, child.blank % n}
            for c in lines:
                diff += child.col_conflicts(c) - parent.col_conflicts(c)
        return diff

    # -- lifecycle ------------------------------------------------------------

    def clear(self) -> None:
        logger.debug(
            "Releasing heuristic cache: %d entries, %d hits, %d misses "
            "(%d incremental)",
            len(self._values), self.hits, self.misses, self.incremental,
        )
        self._values.clear()


def _one_move_apart(parent: Board, child: Board) -> bool:
    n = parent.size
    if child.size != n:
        return False
    step = abs(child.blank - parent.blank)
    same_row = parent.blank // n == child.blank // n
    if step != n and not (step == 1 and same_row):
        return False
    return parent._swapped(parent.blank, child.blank) == child
