"""
TriPuzzle core Python package.

Pure, deterministic helpers for the triangular tile-matching grid. Every engine
function takes a Board snapshot and returns a new one; randomness is always
passed in as a random.Random-compatible object.
Modules:
- board.py: Board, Tile, Coord, create_board
- spawn.py: random empty cells and new tiles
- slide.py: circular row slides
- matches.py: run detection along the three lattice directions
- gravity.py: removal, settling and refill
- gameover.py: terminal-board probe
- session.py: GameState and the turn loop (cascades, score)
- codec.py: JSON encoding used by the web API
"""
