from __future__ import annotations

from typing import Iterator, List, Tuple

from .board import Board, MIN_MATCH_LENGTH
from .matches import find_and_mark_matches
from .slide import DIRECTIONS, slide_row

Probe = Tuple[int, str]


def _probes(board: Board) -> Iterator[Probe]:
    for r in range(board.num_rows):
        if len(board.rows[r]) <= 1:
            continue  # sliding a single slot changes nothing
        for direction in DIRECTIONS:
            yield (r, direction)


def _probe_matches(board: Board, probe: Probe, min_length: int) -> bool:
    r, direction = probe
    return find_and_mark_matches(slide_row(board, r, direction), min_length).has_matches


def find_matching_slides(board: Board, min_length: int = MIN_MATCH_LENGTH) -> List[Probe]:
    """Lists every single (row, direction) slide that would produce a match."""
    return [p for p in _probes(board) if _probe_matches(board, p, min_length)]


def check_game_over(board: Board, min_length: int = MIN_MATCH_LENGTH) -> bool:
    """
    True iff the board is full, has no pending match, and no single row slide in
    either direction would create one. Multi-move sequences are not explored.
    """
    if not board.is_full():
        return False
    if find_and_mark_matches(board, min_length).has_matches:
        return False
    for probe in _probes(board):
        if _probe_matches(board, probe, min_length):
            return False
    return True
