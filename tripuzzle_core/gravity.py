from __future__ import annotations

import random
from typing import Sequence

from .board import Board, Color, DEFAULT_COLORS, Grid, freeze, place_tile, thaw
from .spawn import spawn_tiles


def remove_matched_tiles(board: Board) -> Board:
    """Empties every slot whose tile is flagged is_matched."""
    grid = thaw(board)
    for row in grid:
        for c, tile in enumerate(row):
            if tile is not None and tile.is_matched:
                row[c] = None
    return freeze(grid)


def _fall_pass(grid: Grid) -> int:
    """One sweep of the two-child fall rule, bottom rows first. Returns the number of moves."""
    moves = 0
    for r in range(len(grid) - 2, -1, -1):
        below = grid[r + 1]
        for c, tile in enumerate(grid[r]):
            if tile is None:
                continue
            if below[c] is None:
                target = c
            elif below[c + 1] is None:
                target = c + 1
            else:
                continue
            grid[r][c] = None
            place_tile(grid, tile, r + 1, target)
            moves += 1
    return moves


def settle(board: Board) -> Board:
    """
    Lets tiles fall until none can move.

    A tile at (r, c) drops to (r+1, c) when that slot is empty, otherwise to
    (r+1, c+1). Passes repeat until one moves nothing. Every move takes a tile one
    row down, so the loop is bounded by the number of rows.
    """
    grid = thaw(board, clear_flags=True)
    while _fall_pass(grid):
        pass
    return freeze(grid)


def apply_gravity_and_spawn(board: Board, rng: random.Random,
                            colors: Sequence[Color] = DEFAULT_COLORS) -> Board:
    """Settles the board, then tops up every remaining hole with a fresh tile."""
    settled = settle(board)
    return spawn_tiles(settled, len(settled.empty_cells()), rng, colors)
