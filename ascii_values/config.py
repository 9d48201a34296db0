#
# PROJECT: ascii-values
# MODULE: ascii_values/config.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import os
from dataclasses import dataclass
from typing import Mapping, Optional, Tuple

# Lowest code placed in a character grid (space)
DEFAULT_START_CODE = 32
# Edge of one tile in pixels; 2 keeps the canvas small enough for ~20k glyphs
DEFAULT_TILE_SIZE = 2

ENV_PREFIX = 'ASCII_VALUES_'


@dataclass
class CalibrationConfig:
    """Geometry and font parameters shared by every calibration stage."""
    tile_size: int = DEFAULT_TILE_SIZE
    start_code: int = DEFAULT_START_CODE
    # Em size handed to the font loader; None means "same as tile_size"
    font_size: Optional[float] = None
    # Pixels below the tile top where the glyph baseline sits
    baseline_offset: Optional[int] = None

    def __post_init__(self):
        if self.tile_size < 1:
            raise ValueError(f"tile_size must be at least 1, got {self.tile_size}")
        # Code 0 is the empty-slot sentinel of a brightness table
        if self.start_code < 1:
            raise ValueError(f"start_code must be at least 1, got {self.start_code}")
        if self.font_size is None:
            self.font_size = self.tile_size
        if self.font_size <= 0:
            raise ValueError(f"font_size must be positive, got {self.font_size}")
        if self.baseline_offset is None:
            self.baseline_offset = self.tile_size
        if self.baseline_offset < 0:
            raise ValueError(f"baseline_offset must not be negative, got {self.baseline_offset}")

    def glyph_origin(self, row: int, col: int) -> Tuple[int, int]:
        """Baseline origin (x, y) at which a cell's glyph is drawn."""
        return (col * self.tile_size, row * self.tile_size + self.baseline_offset)

    @classmethod
    def from_environment(cls, environ: Optional[Mapping[str, str]] = None) -> 'CalibrationConfig':
        """
        Build a config from ASCII_VALUES_* environment variables.
        Unset variables keep their defaults.
        """
        if environ is None:
            environ = os.environ

        def read(name, convert):
            raw = environ.get(ENV_PREFIX + name, '').strip()
            if not raw:
                return None
            try:
                return convert(raw)
            except ValueError:
                raise ValueError(f"{ENV_PREFIX}{name} must be a number, got {raw!r}") from None

        kwargs = {}
        tile_size = read('TILE_SIZE', int)
        if tile_size is not None:
            kwargs['tile_size'] = tile_size
        start_code = read('START_CODE', int)
        if start_code is not None:
            kwargs['start_code'] = start_code
        font_size = read('FONT_SIZE', float)
        if font_size is not None:
            kwargs['font_size'] = font_size
        baseline_offset = read('BASELINE_OFFSET', int)
        if baseline_offset is not None:
            kwargs['baseline_offset'] = baseline_offset
        return cls(**kwargs)
