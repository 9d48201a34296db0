#
# PROJECT: ascii-values
# MODULE: ascii_values/sampler.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import logging
import sys

from PIL import Image

from .canvas import Canvas
from .grid import CharacterGrid
from .table import EMPTY, new_table

log = logging.getLogger(__name__)


def average_brightness(gray: Image.Image) -> int:
    """Truncated mean of an "L" image's pixel values."""
    pixels = gray.width * gray.height
    if not pixels:
        return 0
    total = sum(value * count for value, count in enumerate(gray.histogram()))
    return total // pixels


def sample(grid: CharacterGrid, canvas: Canvas) -> list:
    """
    Maps each tile's average brightness to the code drawn in that tile.

    Cells are visited row by row, left to right; when several tiles share a
    brightness the first one visited keeps the slot. Cells past sys.maxunicode
    are not characters and never enter the table.
    """
    if canvas.side != grid.side:
        raise ValueError(f"canvas has {canvas.side} tiles per side, grid has {grid.side}")

    table = new_table()
    if not grid.side:
        return table
    gray = canvas.grayscale()

    for i, j, code in grid.cells():
        if code > sys.maxunicode:
            continue
        level = average_brightness(gray.crop(canvas.tile_box(i, j)))
        if table[level] == EMPTY:
            table[level] = code

    log.debug("sampled %d tiles into %d brightness levels",
              grid.side * grid.side, sum(1 for c in table if c != EMPTY))
    return table
