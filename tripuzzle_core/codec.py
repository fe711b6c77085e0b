from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

from .board import Board, Color, Slot, Tile
from .state import CascadeStep, GameState


def tile_to_json(tile: Slot) -> Optional[Dict[str, Any]]:
    if tile is None:
        return None
    return {
        "id": tile.id,
        "color": tile.color,
        "row": tile.row,
        "col": tile.col,
        "isNew": tile.is_new,
        "isMatched": tile.is_matched,
    }


def board_to_json(board: Board) -> List[List[Optional[Dict[str, Any]]]]:
    return [[tile_to_json(t) for t in row] for row in board.rows]


def _flag(obj: Dict[str, Any], key: str, where: str = '') -> bool:
    value = obj.get(key, False)
    if not isinstance(value, bool):
        raise ValueError(f'{key}{where} must be a boolean, got {value!r}')
    return value


def json_to_board(obj: Any, colors: Optional[Sequence[Color]] = None) -> Board:
    """
    Decodes a list-of-rows board. Row lengths are checked, row/col are taken from
    the slot position, and colors outside `colors` (when given) are rejected.
    """
    if not isinstance(obj, list):
        raise ValueError('board must be a list of rows')
    rows: List[List[Slot]] = []
    seen = set()
    for r, raw_row in enumerate(obj):
        if not isinstance(raw_row, list):
            raise ValueError(f'row {r} must be a list')
        row: List[Slot] = []
        for c, cell in enumerate(raw_row):
            if cell is None:
                row.append(None)
                continue
            tile_id = str(cell["id"])
            color = str(cell["color"])
            if colors is not None and color not in colors:
                raise ValueError(f'unknown color {color!r} at ({r},{c})')
            if tile_id in seen:
                raise ValueError(f'duplicate tile id {tile_id!r}')
            seen.add(tile_id)
            row.append(Tile(
                id=tile_id,
                color=color,
                row=r,
                col=c,
                is_new=_flag(cell, "isNew", f" at ({r},{c})"),
                is_matched=_flag(cell, "isMatched", f" at ({r},{c})"),
            ))
        rows.append(row)
    return Board.from_rows(rows)


def state_to_json(s: GameState) -> Dict[str, Any]:
    return {
        "board": board_to_json(s.board),
        "score": s.score,
        "isGameOver": s.is_game_over,
        "moves": s.moves,
    }


def json_to_state(obj: Dict[str, Any], colors: Optional[Sequence[Color]] = None) -> GameState:
    return GameState(
        board=json_to_board(obj["board"], colors),
        score=int(obj.get("score", 0)),
        is_game_over=_flag(obj, "isGameOver"),
        moves=int(obj.get("moves", 0)),
    )


def step_to_json(step: CascadeStep) -> Dict[str, Any]:
    return {
        "marked": board_to_json(step.marked),
        "removed": board_to_json(step.removed),
        "settled": board_to_json(step.settled),
        "matchCount": step.match_count,
        "points": step.points,
    }
