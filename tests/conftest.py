"""
Shared fixtures: a font-free GlyphRenderer so the pipeline can be exercised
without any font file on disk.
"""
import pytest


class BlockFace:
    """
    Draws every glyph as a solid square filling the tile above the baseline.

    `shades` maps characters to the gray level of their block; characters
    without a shade are "present" but draw nothing (like a space).
    `missing` lists characters the face reports as absent.
    """
    def __init__(self, tile_size=2, shades=None, missing=""):
        self.tile_size = tile_size
        self.shades = dict(shades or {})
        self.missing = set(missing)
        self.queried = []
        self.rendered = []

    def has_glyph(self, char):
        self.queried.append(char)
        return char not in self.missing

    def render_glyph(self, draw, origin, char):
        self.rendered.append((origin, char))
        level = self.shades.get(char)
        if level is None:
            return
        x, y = origin
        t = self.tile_size
        draw.rectangle((x, y - t, x + t - 1, y - 1), fill=(level, level, level))


@pytest.fixture
def make_face():
    return BlockFace
