#
# PROJECT: ascii-values
# MODULE: ascii_values/rasterizer.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import logging
import sys
from typing import Optional

from .canvas import Canvas
from .config import CalibrationConfig
from .font import GlyphRenderer
from .grid import CharacterGrid

log = logging.getLogger(__name__)


def rasterize(grid: CharacterGrid, face: GlyphRenderer, config: Optional[CalibrationConfig] = None) -> Canvas:
    """
    Draws every glyph of `grid` white-on-black into its own tile.

    Glyphs the face does not have leave their tile black. The baseline of
    each glyph sits config.baseline_offset pixels below the tile top.
    """
    if config is None:
        config = CalibrationConfig()

    canvas = Canvas(grid.side, config.tile_size)
    draw = canvas.draw()
    start_code = config.start_code

    drawn = skipped = 0
    for i, j, code in grid.cells():
        # Codes below the start code never come out of build_character_grid;
        # codes past sys.maxunicode fill the last row of very large grids
        if code < start_code or code > sys.maxunicode:
            skipped += 1
            continue

        char = chr(code)
        if not face.has_glyph(char):
            skipped += 1
            continue

        face.render_glyph(draw, config.glyph_origin(i, j), char)
        drawn += 1

    log.debug("rasterized %d glyphs onto %dx%d canvas (%d skipped)",
              drawn, canvas.w, canvas.h, skipped)
    return canvas
