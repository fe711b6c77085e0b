from __future__ import annotations


class InvalidDimension(ValueError):
    """Raised for a non-positive or non-integer row count, or a malformed row."""


class IndexOutOfRange(IndexError):
    """Raised when a row index falls outside [0, num_rows)."""


class InvalidDirection(ValueError):
    """Raised when a slide direction is neither 'left' nor 'right'."""


class GameOverError(RuntimeError):
    """Raised when a move is attempted on a finished game."""
