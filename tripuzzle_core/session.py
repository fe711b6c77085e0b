from __future__ import annotations

import logging
import random
from dataclasses import replace
from typing import List, Optional, Tuple

from .board import Board, create_board
from .errors import GameOverError
from .gameover import check_game_over
from .gravity import apply_gravity_and_spawn, remove_matched_tiles
from .matches import find_and_mark_matches
from .settings import GameSettings
from .slide import slide_row
from .spawn import spawn_tiles
from .state import CascadeStep, GameState, SlideOutcome

logger = logging.getLogger(__name__)


def resolve_cascades(board: Board, rng: random.Random, settings: GameSettings,
                     award: bool = True) -> Tuple[Board, int, Tuple[CascadeStep, ...]]:
    """
    Repeats detect -> remove -> gravity+spawn until the board has no match.
    Returns the final board, the points gained and every intermediate step.
    """
    steps: List[CascadeStep] = []
    gained = 0
    while True:
        result = find_and_mark_matches(board, settings.min_match_length)
        if not result.has_matches:
            break
        if len(steps) >= settings.max_cascades:
            logger.warning("cascade limit %d reached with %d tiles still matching",
                           settings.max_cascades, result.match_count)
            break
        points = result.match_count * settings.score_per_tile if award else 0
        gained += points
        removed = remove_matched_tiles(result.board)
        board = apply_gravity_and_spawn(removed, rng, settings.colors)
        steps.append(CascadeStep(
            marked=result.board,
            removed=removed,
            settled=board,
            match_count=result.match_count,
            points=points,
        ))
        logger.debug("cascade %d: %d tiles, +%d", len(steps), result.match_count, points)
    return board, gained, tuple(steps)


def new_game(settings: Optional[GameSettings] = None, rng: Optional[random.Random] = None) -> GameState:
    """Deals a fresh board, clears any matches it was dealt with, and scores nothing for them."""
    settings = (settings or GameSettings()).validate()
    rng = rng or random.Random()
    board = create_board(settings.num_rows)
    count = settings.total_cells if settings.initial_tiles is None else settings.initial_tiles
    board = spawn_tiles(board, count, rng, settings.colors)
    if not board.is_full():
        board = apply_gravity_and_spawn(board, rng, settings.colors)
    board, _, steps = resolve_cascades(board, rng, settings, award=False)
    logger.debug("new game: %d rows, %d initial cascades", settings.num_rows, len(steps))
    return GameState(board=board, score=0,
                     is_game_over=check_game_over(board, settings.min_match_length))


def play_slide(state: GameState, row: int, direction: str, rng: random.Random,
               settings: Optional[GameSettings] = None) -> SlideOutcome:
    """Applies one player slide and resolves every cascade it triggers."""
    settings = settings or GameSettings()
    if state.is_game_over:
        raise GameOverError('game is over; start a new one')
    slid = slide_row(state.board, row, direction)
    board, gained, steps = resolve_cascades(slid, rng, settings)
    over = check_game_over(board, settings.min_match_length)
    next_state = replace(state, board=board, score=state.score + gained,
                         is_game_over=over, moves=state.moves + 1)
    logger.debug("slide row %d %s: %d cascades, +%d, game_over=%s", row, direction, len(steps), gained, over)
    return SlideOutcome(state=next_state, slid=slid, steps=steps, gained=gained)
