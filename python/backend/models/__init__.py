from backend.models.board import Board, Direction
from backend.models.errors import (
    IndexOutOfRangeError,
    InvalidArgumentError,
    InvalidBoardError,
    SliderError,
)
from backend.models.puzzlefile import load_board, parse_board, save_board

__all__ = [
    "Board",
    "Direction",
    "IndexOutOfRangeError",
    "InvalidArgumentError",
    "InvalidBoardError",
    "SliderError",
    "load_board",
    "parse_board",
    "save_board",
]
