#
# PROJECT: ascii-values
# MODULE: ascii_values/calibrator.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import logging
from dataclasses import dataclass
from typing import Optional

from .canvas import Canvas
from .config import CalibrationConfig
from .font import GlyphRenderer, load_font
from .grid import CharacterGrid, build_character_grid
from .rasterizer import rasterize
from .sampler import sample
from .table import fill_gaps, table_coverage

log = logging.getLogger(__name__)


@dataclass
class CalibrationResult:
    """Every intermediate product of one calibration run."""
    grid: CharacterGrid
    canvas: Canvas
    sparse: list
    dense: list

    @property
    def filled(self) -> int:
        return table_coverage(self.sparse)[0]

    @property
    def missing(self) -> int:
        return table_coverage(self.sparse)[1]


class Calibrator:
    """
    Turns a font face into a brightness -> character lookup table.

    Pipeline:
      1. Build a square grid of codes from start_code to max_code
      2. Rasterize each code's glyph into its own tile
      3. Sample each tile's mean brightness (first code per level wins)
      4. Stretch the sampled levels over 0-255 and fill the holes
    """

    def __init__(self, config: Optional[CalibrationConfig] = None):
        self.config = config if config is not None else CalibrationConfig()

    def run(self, face: GlyphRenderer, max_code: int) -> CalibrationResult:
        config = self.config
        grid = build_character_grid(max_code, config.start_code)
        canvas = rasterize(grid, face, config)
        sparse = sample(grid, canvas)
        dense = fill_gaps(sparse)

        result = CalibrationResult(grid, canvas, sparse, dense)
        log.debug("calibration for max code %d: %d levels filled, %d missing",
                  max_code, result.filled, result.missing)
        return result

    def build_table(self, face: GlyphRenderer, max_code: int) -> list:
        return self.run(face, max_code).dense

    def rasterize_font(self, face: GlyphRenderer, max_code: int) -> Canvas:
        """Grid + rasterize only; used for exporting the debug canvas."""
        grid = build_character_grid(max_code, self.config.start_code)
        return rasterize(grid, face, self.config)

    def load_font(self, path) -> GlyphRenderer:
        return load_font(path, self.config.font_size)


def build_brightness_table(font_path, max_code: int, config: Optional[CalibrationConfig] = None) -> list:
    """Load the font at `font_path` and return its dense brightness table."""
    calibrator = Calibrator(config)
    return calibrator.build_table(calibrator.load_font(font_path), max_code)
