#
# PROJECT: ascii-values
# MODULE: ascii_values/__init__.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from .config import CalibrationConfig
from .errors import (AsciiValuesError, FontLoadError, FontNotFoundError,
                     FontParseError, EmptyBrightnessRangeError)
from .grid import CharacterGrid, build_character_grid
from .font import GlyphRenderer, PillowFontFace, load_font
from .canvas import Canvas
from .rasterizer import rasterize
from .sampler import sample, average_brightness
from .table import (EMPTY, TABLE_SIZE, new_table, fill_gaps, table_coverage,
                    table_to_string, brightness_index)
from .calibrator import Calibrator, CalibrationResult, build_brightness_table
from .render import image_to_text
