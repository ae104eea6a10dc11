"""Heuristic tests — admissibility, consistency and the incremental cache."""

from __future__ import annotations

import random

import pytest

from backend.engine.gamegenerator import GameGenerator
from backend.engine.heuristics import HeuristicCache
from backend.models.board import Board


# -- admissibility ------------------------------------------------------------


def test_manhattan_is_admissible(
    distances_2x2: dict[Board, int], distances_3x3: dict[Board, int]
) -> None:
    for distances in (distances_2x2, distances_3x3):
        for board, distance in distances.items():
            assert board.manhattan() <= distance, board


@pytest.mark.parametrize("linear_conflict", [False, True])
def test_search_heuristic_is_admissible(
    distances_3x3: dict[Board, int], linear_conflict: bool
) -> None:
    cache = HeuristicCache(linear_conflict=linear_conflict)
    for board, distance in distances_3x3.items():
        assert cache.estimate(board) <= distance, board


def test_hamming_never_exceeds_manhattan(distances_3x3: dict[Board, int]) -> None:
    for board in distances_3x3:
        assert board.hamming() <= board.manhattan()


# -- consistency --------------------------------------------------------------


def test_manhattan_is_consistent(distances_3x3: dict[Board, int]) -> None:
    for board in distances_3x3:
        for neighbor in board.neighbors():
            assert abs(board.manhattan() - neighbor.manhattan()) <= 1


@pytest.mark.parametrize("size", [3, 4])
def test_linear_conflict_heuristic_is_consistent(size: int) -> None:
    cache = HeuristicCache(linear_conflict=True)
    rng = random.Random(size)
    for _ in range(40):
        board = GameGenerator.shuffle(size, seed=rng.randrange(10**6))
        h = cache.compute(board)
        for neighbor in board.neighbors():
            assert abs(h - cache.compute(neighbor)) <= 1, (board, neighbor)


# -- incremental updates ------------------------------------------------------


@pytest.mark.parametrize("linear_conflict", [False, True])
@pytest.mark.parametrize("size", [2, 3, 4, 5])
def test_incremental_matches_full_recomputation(
    size: int, linear_conflict: bool
) -> None:
    cache = HeuristicCache(linear_conflict=linear_conflict)
    rng = random.Random(size * 10 + linear_conflict)
    board = GameGenerator.shuffle(size, seed=rng.randrange(10**6))
    cache.estimate(board)
    for _ in range(300):
        child = rng.choice(board.neighbors())
        if child in cache:
            board = child
            continue
        assert cache.estimate(child, parent=board) == cache.compute(child)
        board = child
    assert cache.incremental > 0


def test_unrelated_parent_falls_back_to_full_computation() -> None:
    cache = HeuristicCache()
    parent = Board.goal(3)
    far = Board.from_grid([[8, 1, 3], [4, 0, 2], [7, 6, 5]])
    cache.estimate(parent)
    assert cache.estimate(far, parent=parent) == cache.compute(far)
    assert cache.incremental == 0


def test_twin_is_not_treated_as_a_move() -> None:
    cache = HeuristicCache()
    board = Board.from_grid([[2, 1, 3], [4, 5, 6], [7, 8, 0]])
    cache.estimate(board)
    assert cache.estimate(board.twin(), parent=board) == 0
    assert cache.incremental == 0


# -- memoization --------------------------------------------------------------


def test_cache_is_keyed_by_content() -> None:
    cache = HeuristicCache()
    a = Board.from_flat(3, [1, 2, 3, 4, 5, 6, 7, 0, 8])
    b = Board.from_flat(3, [1, 2, 3, 4, 5, 6, 7, 0, 8])
    assert cache.estimate(a) == 1
    assert cache.estimate(b) == 1
    assert (cache.hits, cache.misses) == (1, 1)
    assert len(cache) == 1


def test_clear_empties_the_cache() -> None:
    cache = HeuristicCache()
    cache.estimate(Board.goal(3))
    cache.clear()
    assert len(cache) == 0
    assert Board.goal(3) not in cache


def test_values_include_linear_conflict_only_when_enabled() -> None:
    board = Board.from_grid([[2, 1, 3], [4, 5, 6], [7, 8, 0]])
    assert HeuristicCache(linear_conflict=False).estimate(board) == 2
    assert HeuristicCache(linear_conflict=True).estimate(board) == 4
