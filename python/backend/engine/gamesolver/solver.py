"""Sliding puzzle solver (A* search)."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum
from typing import Optional

from backend.engine.gamesolver.frontier import Frontier
from backend.engine.heuristics import HeuristicCache
from backend.models.board import Board, Direction
from backend.models.errors import InvalidArgumentError

logger = logging.getLogger(__name__)


class SolverState(StrEnum):
    RUNNING = "running"
    SOLVED = "solved"
    INFEASIBLE = "infeasible"


class Strategy(StrEnum):
    """How the solver decides that a board cannot be solved."""

    PARITY = "parity"  # closed-form inversion parity, no search when unsolvable
    TWIN = "twin"  # race the board against its twin in one frontier


@dataclass(frozen=True)
class SolverOptions:
    strategy: Strategy = Strategy.PARITY
    linear_conflict: bool = True
    dedupe: bool = True


@dataclass
class SearchStats:
    expanded: int = 0
    generated: int = 0
    max_frontier: int = 0
    cache_hits: int = 0
    cache_misses: int = 0


@dataclass(eq=False)
class SearchNode:
    """One board reached by the search.

    *parent* is only followed backwards to rebuild the solution path.
    """

    board: Board
    g: int
    h: int
    twin: bool = False
    parent: Optional[SearchNode] = None

    @property
    def priority(self) -> int:
        return self.g + self.h

    def path(self) -> list[Board]:
        """Boards from the root of this node's search down to this node."""
        boards: list[Board] = []
        node: Optional[SearchNode] = self
        while node is not None:
            boards.append(node.board)
            node = node.parent
        boards.reverse()
        return boards


class Solver:
    """Finds a minimum-move solution for a board, or proves there is none.

    The search runs to completion in the constructor; afterwards the
    solver is in exactly one of ``SOLVED`` or ``INFEASIBLE``.
    """

    def __init__(
        self, initial: Board | None, options: SolverOptions | None = None
    ) -> None:
        if initial is None:
            raise InvalidArgumentError("Cannot solve a missing initial board.")
        if not isinstance(initial, Board):
            raise InvalidArgumentError(
                f"Expected a Board, got {type(initial).__name__}."
            )
        self.initial = initial
        self.options = options or SolverOptions()
        self.state = SolverState.RUNNING
        self.stats = SearchStats()
        self._solution: list[Board] | None = None
        self._run()

    # -- public contract ------------------------------------------------------

    def is_solvable(self) -> bool:
        return self.state is SolverState.SOLVED

    def moves(self) -> int:
        """Minimum number of moves, or -1 if the board is unsolvable."""
        if self._solution is None:
            return -1
        return len(self._solution) - 1

    def solution(self) -> list[Board] | None:
        """Boards from the initial board to the goal, or ``None``."""
        if self._solution is None:
            return None
        return list(self._solution)

    def directions(self) -> list[Direction] | None:
        """Tile moves along the solution, or ``None`` if unsolvable."""
        if self._solution is None:
            return None
        return [
            a.direction_to(b)
            for a, b in zip(self._solution, self._solution[1:])
        ]

    @classmethod
    def solve(cls, board: Board) -> list[Direction]:
        """Return a move sequence that solves *board*, or ``[]`` if unsolvable."""
        return cls(board).directions() or []

    # -- search ---------------------------------------------------------------

    def _run(self) -> None:
        opts = self.options
        logger.debug(
            "Solving %d×%d board (strategy=%s, linear_conflict=%s, dedupe=%s)",
            self.initial.size, self.initial.size,
            opts.strategy, opts.linear_conflict, opts.dedupe,
        )

        if opts.strategy == Strategy.PARITY and not self.initial.is_solvable():
            logger.debug("Inversion parity rules out a solution")
            self._finish(SolverState.INFEASIBLE)
            return

        cache = HeuristicCache(linear_conflict=opts.linear_conflict)
        try:
            goal = self._search(cache)
        finally:
            self.stats.cache_hits = cache.hits
            self.stats.cache_misses = cache.misses
            cache.clear()

        if goal.twin:
            self._finish(SolverState.INFEASIBLE)
        else:
            self._solution = goal.path()
            self._finish(SolverState.SOLVED)

    def _search(self, cache: HeuristicCache) -> SearchNode:
        """Pop nodes until one search reaches the goal; return that node."""
        frontier = Frontier()
        roots = [SearchNode(self.initial, 0, cache.estimate(self.initial))]
        if self.options.strategy == Strategy.TWIN:
            twin = self.initial.twin()
            roots.append(SearchNode(twin, 0, cache.estimate(twin), twin=True))
        for root in roots:
            frontier.push(root)

        closed: set[tuple[bool, Board]] = set()
        while True:
            # One of the two searches always reaches its goal, so the
            # frontier never runs dry.
            node = frontier.pop()
            if node.board.is_goal():
                self.stats.max_frontier = frontier.peak
                return node

            if self.options.dedupe:
                key = (node.twin, node.board)
                if key in closed:
                    continue
                closed.add(key)

            self.stats.expanded += 1
            previous = node.parent.board if node.parent is not None else None
            for neighbor in node.board.neighbors():
                if neighbor == previous:
                    continue
                if self.options.dedupe and (node.twin, neighbor) in closed:
                    continue
                child = SearchNode(
                    neighbor,
                    node.g + 1,
                    cache.estimate(neighbor, parent=node.board),
                    twin=node.twin,
                    parent=node,
                )
                frontier.push(child)
                self.stats.generated += 1

    def _finish(self, state: SolverState) -> None:
        assert self.state is SolverState.RUNNING, "solver already finished"
        self.state = state
        logger.debug(
            "Search finished: %s, moves=%d, expanded=%d, generated=%d",
            state, self.moves(), self.stats.expanded, self.stats.generated,
        )
