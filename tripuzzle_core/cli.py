from __future__ import annotations

import argparse
import logging
import random
from typing import Optional, Sequence, Tuple

from .errors import GameOverError, IndexOutOfRange, InvalidDirection
from .gameover import find_matching_slides
from .session import new_game, play_slide
from .settings import GameSettings, env_flag, load_settings
from .slide import DIRECTIONS
from .state import GameState

_DIRECTION_ALIASES = {'l': 'left', 'left': 'left', 'r': 'right', 'right': 'right'}


def parse_move(text: str) -> Optional[Tuple[int, str]]:
    """Parses '<row> <l|r>' (or 'row,l'); returns None when the text is not a move."""
    sep = ',' if ',' in text else ' '
    parts = [t for t in text.strip().split(sep) if t.strip() != '']
    if len(parts) != 2:
        return None
    try:
        row = int(parts[0])
    except ValueError:
        return None
    direction = _DIRECTION_ALIASES.get(parts[1].strip().lower())
    if direction is None:
        return None
    return row, direction


def _print_state(state: GameState) -> None:
    print(state.board.pretty())
    print(f"Score: {state.score}  Moves: {state.moves}")


def auto_play(state: GameState, moves: int, rng: random.Random, settings: GameSettings,
              verbose: bool = True) -> GameState:
    """Plays random slides until `moves` are used up or the game ends."""
    for _ in range(moves):
        if state.is_game_over:
            break
        row = rng.randrange(1, state.board.num_rows) if state.board.num_rows > 1 else 0
        direction = rng.choice(DIRECTIONS)
        outcome = play_slide(state, row, direction, rng, settings)
        state = outcome.state
        if verbose:
            print(f"slide {row} {direction}: {len(outcome.steps)} cascades, +{outcome.gained}")
    return state


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description='TriPuzzle: slide rows of a triangular grid to match colors')
    parser.add_argument('--rows', type=int, default=None, help='Number of rows (default: TRIPUZZLE_ROWS or 8)')
    parser.add_argument('--seed', type=int, default=None, help='RNG seed for the deal and refills')
    parser.add_argument('--auto', type=int, default=None, metavar='N', help='Play N random slides and exit')
    parser.add_argument('--hints', action='store_true', help='Show matching slides before each move')
    args = parser.parse_args(argv)

    if env_flag('TRIPUZZLE_DEBUG'):
        logging.basicConfig(level=logging.DEBUG)

    settings = load_settings(num_rows=args.rows)
    rng = random.Random(args.seed)
    state = new_game(settings, rng)
    print('Initial board:')
    _print_state(state)

    if args.auto is not None:
        state = auto_play(state, args.auto, rng, settings)
        _print_state(state)
        print('Game over!' if state.is_game_over else 'Stopped.')
        return

    while not state.is_game_over:
        if args.hints:
            print('Matching slides:', find_matching_slides(state.board, settings.min_match_length))
        text = input('Enter a move as "<row> <l|r>", h for hints, q to quit: ').strip().lower()
        if text in ('q', 'quit'):
            return
        if text in ('h', 'hint', 'hints'):
            print('Matching slides:', find_matching_slides(state.board, settings.min_match_length))
            continue
        move = parse_move(text)
        if move is None:
            print('Could not parse. Try again.')
            continue
        try:
            outcome = play_slide(state, move[0], move[1], rng, settings)
        except (IndexOutOfRange, InvalidDirection, GameOverError) as e:
            print(f'Illegal move: {e}')
            continue
        state = outcome.state
        if outcome.gained:
            print(f'+{outcome.gained} ({len(outcome.steps)} cascades)')
        _print_state(state)
    print(f'Game over! Final score: {state.score}')


if __name__ == '__main__':
    main()
