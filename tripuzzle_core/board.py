from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterator, List, Optional, Sequence, Tuple

from .errors import InvalidDimension

Color = str  # 'red', 'green', 'blue', 'yellow', ...
Coord = Tuple[int, int]

DEFAULT_COLORS: Tuple[Color, ...] = ('red', 'green', 'blue', 'yellow')
MIN_MATCH_LENGTH = 3


@dataclass(frozen=True)
class Tile:
    """A single colored tile. row/col always mirror the slot the tile sits in."""
    id: str
    color: Color
    row: int
    col: int
    is_new: bool = False
    is_matched: bool = False

    def cleared(self) -> 'Tile':
        """Returns the tile with both transient flags reset."""
        if not self.is_new and not self.is_matched:
            return self
        return replace(self, is_new=False, is_matched=False)


Slot = Optional[Tile]
Row = Tuple[Slot, ...]


@dataclass(frozen=True)
class Board:
    """Triangular board: row r holds r+1 slots."""
    rows: Tuple[Row, ...]

    @property
    def num_rows(self) -> int:
        return len(self.rows)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Slot]]) -> 'Board':
        """Builds a board from nested sequences, syncing each tile's row/col to its slot."""
        if not rows:
            raise InvalidDimension('a board needs at least one row')
        grid = _grid_lists(len(rows))
        for r, row in enumerate(rows):
            if len(row) != r + 1:
                raise InvalidDimension(f'row {r} must have {r + 1} slots, got {len(row)}')
            for c, tile in enumerate(row):
                if tile is not None:
                    place_tile(grid, tile, r, c)
        return freeze(grid)

    def at(self, r: int, c: int) -> Slot:
        return self.rows[r][c]

    def coords(self) -> Iterator[Coord]:
        """Iterates over all slot coordinates, row-major."""
        for r, row in enumerate(self.rows):
            for c in range(len(row)):
                yield (r, c)

    def tiles(self) -> Iterator[Tile]:
        for row in self.rows:
            for tile in row:
                if tile is not None:
                    yield tile

    def empty_cells(self) -> List[Coord]:
        return [(r, c) for (r, c) in self.coords() if self.rows[r][c] is None]

    def is_full(self) -> bool:
        return all(tile is not None for row in self.rows for tile in row)

    def pretty(self) -> str:
        """Generates a human-readable triangle; matched tiles are upper-case, empty slots '.'."""
        lines: List[str] = []
        width = 2 * self.num_rows - 1
        for row in self.rows:
            cells: List[str] = []
            for tile in row:
                if tile is None:
                    cells.append('.')
                elif tile.is_matched:
                    cells.append(tile.color[:1].upper())
                else:
                    cells.append(tile.color[:1].lower())
            lines.append(' '.join(cells).center(width).rstrip())
        return '\n'.join(lines)


def create_board(num_rows: int) -> Board:
    """Creates an empty triangular board with num_rows rows."""
    if isinstance(num_rows, bool) or not isinstance(num_rows, int) or num_rows <= 0:
        raise InvalidDimension(f'num_rows must be a positive integer, got {num_rows!r}')
    return Board(rows=tuple(tuple(None for _ in range(r + 1)) for r in range(num_rows)))


# Working representation used inside a single engine call. Never escapes it.
Grid = List[List[Slot]]


def _grid_lists(num_rows: int) -> Grid:
    return [[None] * (r + 1) for r in range(num_rows)]


def thaw(board: Board, clear_flags: bool = False) -> Grid:
    """Copies the board into mutable lists, optionally dropping is_new/is_matched."""
    if clear_flags:
        return [[t.cleared() if t is not None else None for t in row] for row in board.rows]
    return [list(row) for row in board.rows]


def freeze(grid: Grid) -> Board:
    return Board(rows=tuple(tuple(row) for row in grid))


def place_tile(grid: Grid, tile: Tile, r: int, c: int) -> Tile:
    """Puts tile into slot (r, c) and rewrites its cached row/col."""
    if tile.row != r or tile.col != c:
        tile = replace(tile, row=r, col=c)
    grid[r][c] = tile
    return tile
