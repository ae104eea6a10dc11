"""Board file loading and saving."""

from __future__ import annotations

from pathlib import Path

import pytest

from backend.models import Board, InvalidBoardError, load_board, parse_board, save_board


def test_parse_board() -> None:
    board = parse_board("3\n 0  1  3\n 4  2  5\n 7  8  6\n")
    assert board == Board.from_grid([[0, 1, 3], [4, 2, 5], [7, 8, 6]])


def test_parse_ignores_layout_and_trailing_tokens() -> None:
    board = parse_board("2 1 2\n3 0 99 extra")
    assert board == Board.goal(2)


@pytest.mark.parametrize(
    "text",
    [
        "",
        "3 1 2 3 4 5 6 7 8",
        "2 1 2 x 0",
        "two 1 2 3 0",
        "0",
        "-2 1 2 3 0",
        "2 1 2 3 4",
        "2 1 2 -3 0",
        "2 1 1 3 0",
        "1 0",
    ],
    ids=[
        "empty",
        "too-few-tiles",
        "non-integer-tile",
        "non-integer-size",
        "zero-size",
        "negative-size",
        "tile-out-of-range",
        "negative-tile",
        "duplicate-tile",
        "one-by-one",
    ],
)
def test_parse_rejects_malformed_files(text: str) -> None:
    with pytest.raises(InvalidBoardError):
        parse_board(text)


def test_save_then_load(tmp_path: Path) -> None:
    board = Board.from_grid([[8, 1, 3], [4, 0, 2], [7, 6, 5]])
    path = tmp_path / "boards" / "puzzle.txt"
    save_board(board, path)
    assert path.read_text() == str(board)
    assert load_board(path) == board


def test_load_missing_file(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        load_board(tmp_path / "missing.txt")
