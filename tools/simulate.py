from __future__ import annotations

import argparse
import os
import random
import sys
import time
from typing import Dict, List

sys.path.append(os.path.dirname(os.path.dirname(__file__)))

from game import GameSettings, load_settings, new_game  # type: ignore
from tripuzzle_core.cli import auto_play  # type: ignore


def run_one(seed: int, settings: GameSettings, max_moves: int) -> Dict[str, int]:
    rng = random.Random(seed)
    state = new_game(settings, rng)
    state = auto_play(state, max_moves, rng, settings, verbose=False)
    return {"seed": seed, "score": state.score, "moves": state.moves, "over": int(state.is_game_over)}


def process(args: argparse.Namespace) -> None:
    settings = load_settings(num_rows=args.rows)
    start_time = time.time()
    results: List[Dict[str, int]] = []
    for i in range(args.games):
        seed = args.seed + i
        res = run_one(seed, settings, args.moves)
        results.append(res)
        if args.verbose:
            print(f"seed={res['seed']} score={res['score']} moves={res['moves']} over={res['over']}")

    elapsed = time.time() - start_time
    if not results:
        print("No games played.")
        return
    scores = [r["score"] for r in results]
    finished = sum(r["over"] for r in results)
    avg_moves = sum(r["moves"] for r in results) / len(results)
    print(f"Games={len(results)} rows={settings.num_rows} finished={finished} "
          f"score_min={min(scores)} score_max={max(scores)} score_avg={sum(scores) / len(scores):.1f} "
          f"moves_avg={avg_moves:.1f} elapsed_sec={elapsed:.1f}")


def main() -> None:
    parser = argparse.ArgumentParser(description="Play many seeded random TriPuzzle games and report statistics")
    parser.add_argument('--games', type=int, default=100, help='Number of games to simulate')
    parser.add_argument('--moves', type=int, default=200, help='Move cap per game')
    parser.add_argument('--rows', type=int, default=None, help='Board rows (default: TRIPUZZLE_ROWS or 8)')
    parser.add_argument('--seed', type=int, default=0, help='First seed; game i uses seed+i')
    parser.add_argument('--verbose', action='store_true', help='Print one line per game')
    args = parser.parse_args()
    process(args)


if __name__ == '__main__':
    main()
