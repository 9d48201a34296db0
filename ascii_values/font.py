#
# PROJECT: ascii-values
# MODULE: ascii_values/font.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import logging
from pathlib import Path
from typing import Optional, Protocol, Set, Tuple

from fontTools.ttLib import TTFont
from PIL import ImageDraw, ImageFont

from .errors import FontNotFoundError, FontParseError

log = logging.getLogger(__name__)


class GlyphRenderer(Protocol):
    """Anything that can tell whether it has a glyph and draw it."""

    def has_glyph(self, char: str) -> bool:
        ...

    def render_glyph(self, draw: ImageDraw.ImageDraw, origin: Tuple[int, int], char: str) -> None:
        ...


class PillowFontFace:
    """
    GlyphRenderer backed by a Pillow FreeType font.

    Coverage is decided by `codepoints` (the font's cmap) when known;
    without it every character is treated as present, since FreeType
    quietly substitutes the .notdef glyph for unmapped ones.
    """
    __slots__ = ('font', 'codepoints', 'path')

    def __init__(self, font: ImageFont.FreeTypeFont, codepoints: Optional[Set[int]] = None,
                 path: Optional[str] = None):
        self.font = font
        self.codepoints = codepoints
        self.path = path

    def has_glyph(self, char: str) -> bool:
        if self.codepoints is None:
            return True
        return ord(char) in self.codepoints

    def render_glyph(self, draw: ImageDraw.ImageDraw, origin: Tuple[int, int], char: str) -> None:
        """Draw `char` in white with its left baseline point at `origin`."""
        draw.text(origin, char, fill='white', font=self.font, anchor='ls')


def _read_codepoints(path: Path) -> Set[int]:
    # fontNumber picks the same face Pillow opens from a .ttc collection
    with TTFont(str(path), lazy=True, fontNumber=0) as tt:
        cmap = tt.getBestCmap()
    if cmap is None:
        raise FontParseError(path, "font has no usable cmap table")
    return set(cmap)


def load_font(path, size: float) -> PillowFontFace:
    """
    Open a TrueType/OpenType font at `size` pixels per em.

    Raises FontNotFoundError when the file is missing and FontParseError
    when either FreeType or the cmap reader rejects it.
    """
    path = Path(path)
    if not path.is_file():
        raise FontNotFoundError(path)

    try:
        font = ImageFont.truetype(str(path), size)
    except OSError as e:
        raise FontParseError(path, str(e) or "unreadable font data") from e

    try:
        codepoints = _read_codepoints(path)
    except FontParseError:
        raise
    except Exception as e:
        raise FontParseError(path, f"cannot read character map: {e}") from e

    log.info("loaded font %s (%d mapped characters, size %s)", path, len(codepoints), size)
    return PillowFontFace(font, codepoints, str(path))
