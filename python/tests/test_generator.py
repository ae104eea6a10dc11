"""Board generator tests."""

from __future__ import annotations

import random

import pytest

from backend.engine.gamegenerator import GameGenerator
from backend.models.board import Board


def test_solved_is_goal() -> None:
    for size in (2, 3, 4):
        assert GameGenerator.solved(size).is_goal()


@pytest.mark.parametrize("size", [2, 3, 4, 6])
def test_generate_is_solvable_and_unsolved(size: int) -> None:
    for seed in range(10):
        board = GameGenerator.generate(size, seed=seed)
        assert board.size == size
        assert board.is_solvable()
        assert not board.is_goal()


def test_generate_is_reproducible() -> None:
    assert GameGenerator.generate(4, seed=3) == GameGenerator.generate(4, seed=3)


def test_scramble_moves_at_most_steps_away() -> None:
    goal = GameGenerator.solved(5)
    board = GameGenerator.scramble(goal, 7, random.Random(0))
    # Each random move shifts the Manhattan sum by exactly one.
    assert board.manhattan() <= 7
    assert goal.is_goal()


def test_scramble_without_steps_returns_same_board() -> None:
    board = Board.from_grid([[1, 2], [0, 3]])
    assert GameGenerator.scramble(board, 0, random.Random(0)) is board


def test_shuffle_produces_both_parities() -> None:
    parities = {GameGenerator.shuffle(3, seed=s).is_solvable() for s in range(40)}
    assert parities == {True, False}
