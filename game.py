from __future__ import annotations

# Facade module that re-exports the TriPuzzle engine.
# Used by the Flask app, the tools/ scripts and the tests.
# Single-responsibility modules live under tripuzzle_core/*.

from tripuzzle_core.board import (  # noqa: F401
    Board,
    Color,
    Coord,
    DEFAULT_COLORS,
    MIN_MATCH_LENGTH,
    Tile,
    create_board,
)
from tripuzzle_core.errors import (  # noqa: F401
    GameOverError,
    IndexOutOfRange,
    InvalidDimension,
    InvalidDirection,
)
from tripuzzle_core.spawn import find_random_empty_cell, new_tile_id, spawn_tiles  # noqa: F401
from tripuzzle_core.slide import DIRECTIONS, slide_row  # noqa: F401
from tripuzzle_core.matches import MatchResult, find_and_mark_matches, iter_lines  # noqa: F401
from tripuzzle_core.gravity import apply_gravity_and_spawn, remove_matched_tiles, settle  # noqa: F401
from tripuzzle_core.gameover import check_game_over, find_matching_slides  # noqa: F401
from tripuzzle_core.settings import GameSettings, load_settings  # noqa: F401
from tripuzzle_core.state import CascadeStep, GameState, SlideOutcome  # noqa: F401
from tripuzzle_core.session import new_game, play_slide, resolve_cascades  # noqa: F401


def main() -> None:
    # CLI driver delegated to tripuzzle_core.cli
    from tripuzzle_core.cli import main as _main
    _main()


if __name__ == '__main__':
    main()
