"""Generates sliding puzzle boards for solving."""

from __future__ import annotations

import logging
import random

from backend.models.board import Board

logger = logging.getLogger(__name__)


class GameGenerator:
    """Creates boards by walking away from the solved state, or by shuffling."""

    @staticmethod
    def solved(size: int) -> Board:
        """Return the goal-state board (all tiles in order, blank bottom-right)."""
        return Board.goal(size)

    @staticmethod
    def scramble(board: Board, steps: int, rng: random.Random) -> Board:
        """Return *board* after *steps* random moves.

        A move never undoes the one right before it unless it is the only
        one available.  Every board on the walk is reachable from *board*,
        so scrambling the goal always yields a solvable board.
        """
        previous: Board | None = None
        for _ in range(steps):
            neighbors = board.neighbors()
            if previous in neighbors and len(neighbors) > 1:
                neighbors.remove(previous)
            previous, board = board, rng.choice(neighbors)
        return board

    @staticmethod
    def generate(
        size: int, steps: int | None = None, seed: int | None = None
    ) -> Board:
        """Return a random *solvable* board that is not already solved."""
        rng = random.Random(seed)
        if steps is None:
            steps = size * size * 100
        steps = max(steps, 1)

        board = GameGenerator.scramble(GameGenerator.solved(size), steps, rng)
        while board.is_goal():
            board = GameGenerator.scramble(board, steps, rng)
        logger.info("Generated %d×%d board in %d random moves", size, size, steps)
        return board

    @staticmethod
    def shuffle(size: int, seed: int | None = None) -> Board:
        """Return a uniformly random tile permutation (may be unsolvable)."""
        rng = random.Random(seed)
        tiles = list(range(size * size))
        rng.shuffle(tiles)
        return Board.from_flat(size, tiles)
