"""Shared fixtures: exact goal distances from breadth-first search."""

from __future__ import annotations

from collections import deque

import pytest

from backend.models.board import Board


def _bfs_from_goal(size: int, max_depth: int | None = None) -> dict[Board, int]:
    """Exact move counts to the goal for every board within *max_depth*.

    Moves are reversible, so distances measured outwards from the goal
    are the distances back to it.
    """
    goal = Board.goal(size)
    distances = {goal: 0}
    queue = deque([goal])
    while queue:
        board = queue.popleft()
        depth = distances[board]
        if max_depth is not None and depth >= max_depth:
            continue
        for neighbor in board.neighbors():
            if neighbor not in distances:
                distances[neighbor] = depth + 1
                queue.append(neighbor)
    return distances


@pytest.fixture(scope="session")
def distances_2x2() -> dict[Board, int]:
    return _bfs_from_goal(2)


@pytest.fixture(scope="session")
def distances_3x3() -> dict[Board, int]:
    return _bfs_from_goal(3, max_depth=12)
