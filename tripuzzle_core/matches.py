from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterator, List, Set, Tuple

from .board import Board, Coord, MIN_MATCH_LENGTH, freeze, thaw

Line = List[Coord]


@dataclass(frozen=True)
class MatchResult:
    """Outcome of one detection pass: the annotated board plus summary counts."""
    board: Board
    has_matches: bool
    match_count: int
    matched: Tuple[Coord, ...] = ()


def horizontal_lines(num_rows: int) -> Iterator[Line]:
    for r in range(num_rows):
        yield [(r, c) for c in range(r + 1)]


def left_leaning_lines(num_rows: int) -> Iterator[Line]:
    """Lines with a fixed column index: (c, c), (c+1, c), (c+2, c), ..."""
    for c in range(num_rows):
        yield [(r, c) for r in range(c, num_rows)]


def right_leaning_lines(num_rows: int) -> Iterator[Line]:
    """Lines where the column grows with the row: (k, 0), (k+1, 1), (k+2, 2), ..."""
    for k in range(num_rows):
        yield [(k + i, i) for i in range(num_rows - k)]


def iter_lines(num_rows: int) -> Iterator[Line]:
    """All scan lines of the triangular lattice, in all three directions."""
    yield from horizontal_lines(num_rows)
    yield from left_leaning_lines(num_rows)
    yield from right_leaning_lines(num_rows)


def _runs_in_line(board: Board, line: Line, min_length: int) -> Iterator[Line]:
    """Yields every maximal same-color run of at least min_length occupied slots."""
    run: Line = []
    run_color = None
    for r, c in line:
        tile = board.rows[r][c]
        color = tile.color if tile is not None else None
        if color is not None and color == run_color:
            run.append((r, c))
            continue
        if len(run) >= min_length:
            yield run
        run = [(r, c)] if color is not None else []
        run_color = color
    if len(run) >= min_length:
        yield run


def find_and_mark_matches(board: Board, min_length: int = MIN_MATCH_LENGTH) -> MatchResult:
    """
    Marks every tile that belongs to a run of at least min_length same-colored tiles
    along any of the three lattice directions.

    Existing is_matched flags are cleared first. A slot reached by more than one
    direction is counted once. No tile is removed here.
    """
    grid = thaw(board)
    for row in grid:
        for c, tile in enumerate(row):
            if tile is not None and tile.is_matched:
                row[c] = replace(tile, is_matched=False)

    marked: Set[Coord] = set()
    for line in iter_lines(board.num_rows):
        for run in _runs_in_line(board, line, min_length):
            for r, c in run:
                if (r, c) in marked:
                    continue
                marked.add((r, c))
                grid[r][c] = replace(grid[r][c], is_matched=True)

    return MatchResult(
        board=freeze(grid),
        has_matches=bool(marked),
        match_count=len(marked),
        matched=tuple(sorted(marked)),
    )
