from __future__ import annotations

from typing import Tuple

from .board import Board, freeze, place_tile, thaw
from .errors import IndexOutOfRange, InvalidDirection

DIRECTIONS: Tuple[str, str] = ('left', 'right')


def slide_row(board: Board, row_index: int, direction: str) -> Board:
    """
    Circularly shifts one row by a single slot and returns the new board.

    'left' moves the first slot's content to the end of the row, 'right' moves the
    last slot's content to the front. Every tile on the board loses its is_new and
    is_matched flags, since a slide starts a new evaluation cycle.
    """
    if direction not in DIRECTIONS:
        raise InvalidDirection(f"direction must be 'left' or 'right', got {direction!r}")
    if isinstance(row_index, bool) or not isinstance(row_index, int):
        raise IndexOutOfRange(f'row index must be an integer, got {row_index!r}')
    if not 0 <= row_index < board.num_rows:
        raise IndexOutOfRange(f'row {row_index} out of range [0, {board.num_rows})')
    grid = thaw(board, clear_flags=True)
    row = grid[row_index]
    if len(row) <= 1:
        return freeze(grid)
    shifted = row[1:] + row[:1] if direction == 'left' else row[-1:] + row[:-1]
    for c, tile in enumerate(shifted):
        row[c] = None
        if tile is not None:
            place_tile(grid, tile, row_index, c)
    return freeze(grid)
