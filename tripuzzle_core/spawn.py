from __future__ import annotations

import random
from typing import Optional, Sequence, Set

from .board import Board, Color, Coord, DEFAULT_COLORS, Grid, Slot, Tile, freeze, place_tile, thaw

_ID_ALPHABET = '0123456789abcdefghijklmnopqrstuvwxyz'
_ID_LENGTH = 9


def new_tile_id(rng: random.Random, taken: Optional[Set[str]] = None) -> str:
    """Draws a short base-36 id from rng, redrawing while it collides with taken."""
    while True:
        n = rng.randrange(len(_ID_ALPHABET) ** _ID_LENGTH)
        chars = []
        for _ in range(_ID_LENGTH):
            n, d = divmod(n, len(_ID_ALPHABET))
            chars.append(_ID_ALPHABET[d])
        tile_id = ''.join(chars)
        if not taken or tile_id not in taken:
            return tile_id


def random_color(rng: random.Random, colors: Sequence[Color] = DEFAULT_COLORS) -> Color:
    return rng.choice(tuple(colors))


def _random_empty(rows: Sequence[Sequence[Slot]], rng: random.Random) -> Optional[Coord]:
    empty = [(r, c) for r, row in enumerate(rows) for c, tile in enumerate(row) if tile is None]
    if not empty:
        return None
    return rng.choice(empty)


def find_random_empty_cell(board: Board, rng: random.Random) -> Optional[Coord]:
    """Uniformly picks one empty slot, or None when the board is full."""
    return _random_empty(board.rows, rng)


def _spawn_one(grid: Grid, rng: random.Random, colors: Sequence[Color], taken: Set[str]) -> bool:
    cell = _random_empty(grid, rng)
    if cell is None:
        return False
    r, c = cell
    tile_id = new_tile_id(rng, taken)
    taken.add(tile_id)
    place_tile(grid, Tile(id=tile_id, color=random_color(rng, colors), row=r, col=c, is_new=True), r, c)
    return True


def spawn_tiles(board: Board, count: int, rng: random.Random,
                colors: Sequence[Color] = DEFAULT_COLORS) -> Board:
    """
    Places up to `count` new tiles on random empty slots.
    Stops early once the board is full; that is not an error.
    """
    grid = thaw(board)
    taken = {t.id for t in board.tiles()}
    for _ in range(max(count, 0)):
        if not _spawn_one(grid, rng, colors, taken):
            break
    return freeze(grid)
