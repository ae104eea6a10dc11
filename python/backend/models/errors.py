"""Exceptions raised by the board model and the solver."""

from __future__ import annotations


class SliderError(Exception):
    """Base class for every error raised by this package."""


class InvalidArgumentError(SliderError, ValueError):
    """The solver was handed something that is not a board."""


class InvalidBoardError(SliderError, ValueError):
    """A grid or board file does not describe a valid puzzle."""


class IndexOutOfRangeError(SliderError, IndexError):
    """A one-based board coordinate fell outside ``[1, N]``."""
