"""Board model for the sliding puzzle solver."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from functools import cached_property
from typing import Iterable, Sequence

from backend.models.errors import IndexOutOfRangeError, InvalidBoardError


class Direction(StrEnum):
    """Direction in which a *tile* slides into the blank."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class Board:
    """Immutable N×N sliding puzzle board.

    Tiles are stored as a flat row-major tuple of ints; 0 represents the
    blank.  Two boards are equal iff their tiles are equal, so boards can
    be used directly as dict keys and set members.
    """

    size: int = field(compare=False)
    tiles: tuple[int, ...]
    blank: int = field(init=False, compare=False, repr=False)

    def __post_init__(self) -> None:
        _validate(self.size, self.tiles)
        object.__setattr__(self, "tiles", tuple(self.tiles))
        object.__setattr__(self, "blank", self.tiles.index(0))

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_flat(cls, size: int, flat: Iterable[int]) -> Board:
        """Create a board from a flat row-major tile list.

        Example::

            Board.from_flat(3, [1, 2, 3, 4, 5, 6, 7, 0, 8])
        """
        return cls(size=size, tiles=tuple(flat))

    @classmethod
    def from_grid(cls, grid: Sequence[Sequence[int]]) -> Board:
        """Create a board from a list of rows (``grid[r][c]`` = tile)."""
        size = len(grid)
        for r, row in enumerate(grid):
            if len(row) != size:
                raise InvalidBoardError(
                    f"Grid is not square: row {r} has {len(row)} tiles, "
                    f"expected {size}."
                )
        return cls(size=size, tiles=tuple(v for row in grid for v in row))

    @classmethod
    def goal(cls, size: int) -> Board:
        """Return the solved board (tiles in order, blank bottom-right)."""
        return cls(size=size, tiles=(*range(1, size * size), 0))

    def _swapped(self, i: int, j: int) -> Board:
        """Return a copy of this board with cells *i* and *j* exchanged.

        The swap cannot break the board invariants, so validation is
        skipped.
        """
        tiles = list(self.tiles)
        tiles[i], tiles[j] = tiles[j], tiles[i]
        board = object.__new__(Board)
        object.__setattr__(board, "size", self.size)
        object.__setattr__(board, "tiles", tuple(tiles))
        if i == self.blank:
            object.__setattr__(board, "blank", j)
        elif j == self.blank:
            object.__setattr__(board, "blank", i)
        else:
            object.__setattr__(board, "blank", self.blank)
        return board

    # -- queries --------------------------------------------------------------

    def dimension(self) -> int:
        return self.size

    def tile_at(self, row: int, col: int) -> int:
        """Return the tile at one-based coordinates (*row*, *col*)."""
        if not (1 <= row <= self.size and 1 <= col <= self.size):
            raise IndexOutOfRangeError(
                f"({row}, {col}) is outside [1, {self.size}]."
            )
        return self.tiles[(row - 1) * self.size + (col - 1)]

    def rows(self) -> list[tuple[int, ...]]:
        n = self.size
        return [self.tiles[r * n : (r + 1) * n] for r in range(n)]

    def is_tile_correct(self, index: int) -> bool:
        """Check if the tile at flat *index* is in its goal position."""
        val = self.tiles[index]
        if val == 0:
            return index == len(self.tiles) - 1
        return val == index + 1

    def hamming(self) -> int:
        """Number of tiles (blank excluded) out of place."""
        return sum(
            1
            for i, v in enumerate(self.tiles)
            if v != 0 and v != i + 1
        )

    def manhattan(self) -> int:
        """Sum of Manhattan distances between tiles and their goal cells."""
        return self._manhattan

    @cached_property
    def _manhattan(self) -> int:
        return sum(self.tile_distance(i) for i in range(len(self.tiles)))

    def tile_distance(self, index: int) -> int:
        """Manhattan distance of the tile at *index* from its goal cell."""
        v = self.tiles[index]
        if v == 0:
            return 0
        n = self.size
        r, c = divmod(index, n)
        gr, gc = divmod(v - 1, n)
        return abs(gr - r) + abs(gc - c)

    def row_conflicts(self, row: int) -> int:
        """Linear-conflict penalty for one row.

        Only tiles whose goal row is *row* take part.  The penalty is two
        moves for every tile that has to leave the row so the rest are in
        goal order.
        """
        n = self.size
        goal_cols = [
            (v - 1) % n
            for v in self.tiles[row * n : (row + 1) * n]
            if v != 0 and (v - 1) // n == row
        ]
        return 2 * (len(goal_cols) - _longest_increasing(goal_cols))

    def col_conflicts(self, col: int) -> int:
        """Linear-conflict penalty for one column (see :meth:`row_conflicts`)."""
        n = self.size
        goal_rows = [
            (v - 1) // n
            for v in self.tiles[col::n]
            if v != 0 and (v - 1) % n == col
        ]
        return 2 * (len(goal_rows) - _longest_increasing(goal_rows))

    def linear_conflicts(self) -> int:
        """Linear-conflict correction over every row and column."""
        return sum(
            self.row_conflicts(k) + self.col_conflicts(k)
            for k in range(self.size)
        )

    def inversions(self) -> int:
        """Pairs of tiles out of ascending order, read row-major, blank ignored."""
        flat = [v for v in self.tiles if v != 0]
        count = 0
        for i in range(len(flat)):
            for j in range(i + 1, len(flat)):
                if flat[i] > flat[j]:
                    count += 1
        return count

    def is_solvable(self) -> bool:
        """Return True if the goal board is reachable from this one.

        For odd N the inversion count must be even.  For even N the
        inversion count plus the blank's row (zero-based, from the top)
        must be odd.
        """
        inversions = self.inversions()
        if self.size % 2 == 1:
            return inversions % 2 == 0
        blank_row = self.blank // self.size
        return (inversions + blank_row) % 2 == 1

    def is_goal(self) -> bool:
        """Check if all tiles are in their goal positions."""
        last = len(self.tiles) - 1
        if self.blank != last:
            return False
        return all(self.tiles[i] == i + 1 for i in range(last))

    # -- derived boards -------------------------------------------------------

    def twin(self) -> Board:
        """Board with the first two horizontally adjacent tiles exchanged.

        The blank is never part of the swap, so the twin has the opposite
        solvability of this board.
        """
        n = self.size
        for r in range(n):
            for c in range(n - 1):
                i = r * n + c
                if i == self.blank or i + 1 == self.blank:
                    continue
                return self._swapped(i, i + 1)
        raise InvalidBoardError("Board has no two adjacent tiles to swap.")

    def neighbors(self) -> list[Board]:
        """Boards reachable in one move, blank moving up, down, left, right."""
        n = self.size
        br, bc = divmod(self.blank, n)
        result: list[Board] = []
        for dr, dc in ((-1, 0), (1, 0), (0, -1), (0, 1)):
            nr, nc = br + dr, bc + dc
            if 0 <= nr < n and 0 <= nc < n:
                result.append(self._swapped(self.blank, nr * n + nc))
        return result

    def direction_to(self, other: Board) -> Direction:
        """Return the tile move that turns this board into *other*.

        E.g. ``Direction.UP`` means the tile **below** the blank slid up.
        """
        if other not in self.neighbors():
            raise InvalidBoardError("Boards are not one move apart.")
        # The blank moves opposite to the tile that slides into it.
        offsets = {
            self.size: Direction.UP,
            -self.size: Direction.DOWN,
            1: Direction.LEFT,
            -1: Direction.RIGHT,
        }
        return offsets[other.blank - self.blank]

    # -- rendering ------------------------------------------------------------

    def __str__(self) -> str:
        lines = [str(self.size)]
        for row in self.rows():
            lines.append(" ".join(f"{v:2d}" for v in row))
        return "\n".join(lines) + "\n"


# -- helpers ------------------------------------------------------------------


def _validate(size: int, tiles: Sequence[int]) -> None:
    if not isinstance(size, int) or isinstance(size, bool) or size < 2:
        raise InvalidBoardError(f"Board side length must be at least 2, got {size!r}.")
    expected = size * size
    if len(tiles) != expected:
        raise InvalidBoardError(
            f"Expected {expected} tiles for a {size}×{size} board, "
            f"got {len(tiles)}."
        )
    for v in tiles:
        if not isinstance(v, int) or isinstance(v, bool):
            raise InvalidBoardError(f"Tile labels must be integers, got {v!r}.")
    if sorted(tiles) != list(range(expected)):
        blanks = sum(1 for v in tiles if v == 0)
        if blanks != 1:
            raise InvalidBoardError(f"Board must have exactly one blank, found {blanks}.")
        raise InvalidBoardError(
            f"Tile labels must be exactly 0..{expected - 1}, each appearing once."
        )


def _longest_increasing(values: list[int]) -> int:
    """Length of the longest strictly increasing subsequence of *values*."""
    best = 0
    lengths: list[int] = []
    for i, v in enumerate(values):
        length = 1 + max(
            (lengths[j] for j in range(i) if values[j] < v), default=0
        )
        lengths.append(length)
        best = max(best, length)
    return best
