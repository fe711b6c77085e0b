from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from .board import Board


@dataclass(frozen=True)
class GameState:
    """Represents one game snapshot: the board plus score and turn bookkeeping."""
    board: Board
    score: int = 0
    is_game_over: bool = False
    moves: int = 0


@dataclass(frozen=True)
class CascadeStep:
    """One detect -> remove -> settle+spawn iteration, kept so a UI can replay it."""
    marked: Board
    removed: Board
    settled: Board
    match_count: int
    points: int = 0


@dataclass(frozen=True)
class SlideOutcome:
    state: GameState
    slid: Board
    steps: Tuple[CascadeStep, ...]
    gained: int

    @property
    def matched(self) -> bool:
        return bool(self.steps)
