from __future__ import annotations

import os
from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Optional, Tuple

from .board import Color, DEFAULT_COLORS, MIN_MATCH_LENGTH
from .errors import InvalidDimension

DEFAULT_ROWS = 8
SCORE_PER_MATCHED_TILE = 10
MAX_CASCADES = 100


@dataclass(frozen=True)
class GameSettings:
    """Plain configuration values consumed by the session layer."""
    num_rows: int = DEFAULT_ROWS
    colors: Tuple[Color, ...] = DEFAULT_COLORS
    min_match_length: int = MIN_MATCH_LENGTH
    # Tiles dealt before the board is settled and topped up. The dealt board is
    # always full, so a partial deal only changes the color mix. None deals every slot.
    initial_tiles: Optional[int] = None
    score_per_tile: int = SCORE_PER_MATCHED_TILE
    max_cascades: int = MAX_CASCADES

    @property
    def total_cells(self) -> int:
        return self.num_rows * (self.num_rows + 1) // 2

    def validate(self) -> 'GameSettings':
        if isinstance(self.num_rows, bool) or not isinstance(self.num_rows, int) or self.num_rows <= 0:
            raise InvalidDimension(f'num_rows must be a positive integer, got {self.num_rows!r}')
        if len(set(self.colors)) < 3:
            raise ValueError('palette needs at least 3 distinct colors')
        if self.min_match_length < 2:
            raise ValueError('min_match_length must be at least 2')
        if self.max_cascades < 1:
            raise ValueError('max_cascades must be at least 1')
        return self

    def to_json(self) -> Dict[str, Any]:
        return {
            "rows": self.num_rows,
            "colors": list(self.colors),
            "minMatchLength": self.min_match_length,
            "initialTiles": self.initial_tiles,
            "scorePerTile": self.score_per_tile,
            "maxCascades": self.max_cascades,
        }


def env_flag(name: str, default: str = '0') -> bool:
    return os.getenv(name, default).lower() in ('1', 'true', 'yes', 'on')


def _env_int(name: str) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == '':
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f'{name} must be an integer, got {raw!r}') from None


def _parse_colors(raw: str) -> Tuple[Color, ...]:
    return tuple(c.strip() for c in raw.split(',') if c.strip())


def load_settings(**overrides: Any) -> GameSettings:
    """
    Builds GameSettings from TRIPUZZLE_* environment variables.
    Keyword overrides (None values ignored) take precedence over the environment.
    """
    values: Dict[str, Any] = {}
    env_ints = {
        'num_rows': 'TRIPUZZLE_ROWS',
        'min_match_length': 'TRIPUZZLE_MIN_MATCH',
        'initial_tiles': 'TRIPUZZLE_INITIAL_TILES',
        'score_per_tile': 'TRIPUZZLE_SCORE_PER_TILE',
        'max_cascades': 'TRIPUZZLE_MAX_CASCADES',
    }
    for field_name, env_var in env_ints.items():
        v = _env_int(env_var)
        if v is not None:
            values[field_name] = v
    colors = os.getenv('TRIPUZZLE_COLORS')
    if colors:
        values['colors'] = _parse_colors(colors)

    known = {f.name for f in fields(GameSettings)}
    for key, value in overrides.items():
        if key not in known:
            raise TypeError(f'unknown setting: {key}')
        if value is not None:
            if key == 'colors':
                value = _parse_colors(value) if isinstance(value, str) else tuple(value)
            values[key] = value
    return replace(GameSettings(), **values).validate()
