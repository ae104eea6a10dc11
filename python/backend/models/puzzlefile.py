"""Reading and writing board files.

A board file holds the side length N followed by the N×N tiles in
row-major order, all separated by whitespace (0 is the blank)::

    3
     0  1  3
     4  2  5
     7  8  6
"""

from __future__ import annotations

import logging
from pathlib import Path

from backend.models.board import Board
from backend.models.errors import InvalidBoardError

logger = logging.getLogger(__name__)


def parse_board(text: str) -> Board:
    """Build a board from the contents of a board file."""
    tokens = text.split()
    if not tokens:
        raise InvalidBoardError("Board file is empty.")

    size = _to_int(tokens[0], 1)
    if size < 1:
        raise InvalidBoardError(f"Board side length must be positive, got {size}.")
    count = size * size
    if len(tokens) < count + 1:
        raise InvalidBoardError(
            f"Expected {count} tiles for a {size}×{size} board, "
            f"got {len(tokens) - 1}."
        )
    if len(tokens) > count + 1:
        logger.warning("Ignoring %d trailing tokens", len(tokens) - count - 1)

    flat = [_to_int(token, pos) for pos, token in enumerate(tokens[1 : count + 1], 2)]
    for v in flat:
        if not 0 <= v < count:
            raise InvalidBoardError(
                f"Tile {v} is out of range for a {size}×{size} board."
            )
    return Board.from_flat(size, flat)


def _to_int(token: str, pos: int) -> int:
    try:
        return int(token)
    except ValueError:
        raise InvalidBoardError(
            f"Token {pos} ({token!r}) is not an integer."
        ) from None


def load_board(path: Path) -> Board:
    board = parse_board(Path(path).read_text())
    logger.info("Loaded %d×%d board from %s", board.size, board.size, path)
    return board


def save_board(board: Board, path: Path) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(str(board))
