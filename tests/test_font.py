"""Font loading errors and the Pillow-backed glyph renderer."""
import pytest
from fontTools.fontBuilder import FontBuilder
from fontTools.pens.ttGlyphPen import TTGlyphPen
from fontTools.ttLib import TTCollection
from PIL import Image, ImageDraw, ImageFont

from ascii_values import (FontLoadError, FontNotFoundError, FontParseError,
                          PillowFontFace, load_font)


def test_missing_file(tmp_path):
    path = tmp_path / "missing.ttf"
    with pytest.raises(FontNotFoundError) as exc:
        load_font(path, 12)
    assert isinstance(exc.value, FileNotFoundError)
    assert isinstance(exc.value, FontLoadError)
    assert exc.value.path == str(path)


def test_directory_is_not_a_font(tmp_path):
    with pytest.raises(FontNotFoundError):
        load_font(tmp_path, 12)


def test_garbage_file(tmp_path):
    path = tmp_path / "broken.ttf"
    path.write_bytes(b"definitely not a font" * 10)
    with pytest.raises(FontParseError) as exc:
        load_font(path, 12)
    assert not isinstance(exc.value, FontNotFoundError)


def test_coverage_from_codepoints():
    face = PillowFontFace(font=None, codepoints={32, 65})
    assert face.has_glyph("A")
    assert face.has_glyph(" ")
    assert not face.has_glyph("B")


def test_unknown_coverage_assumes_present():
    assert PillowFontFace(font=None).has_glyph("☃")


def test_render_glyph_draws_white_above_baseline():
    font = ImageFont.load_default(size=12)
    if not isinstance(font, ImageFont.FreeTypeFont):
        pytest.skip("Pillow built without FreeType")
    img = Image.new("RGB", (24, 24))
    PillowFontFace(font).render_glyph(ImageDraw.Draw(img), (2, 18), "M")
    bbox = img.getbbox()
    assert bbox is not None
    assert bbox[3] <= 19
    assert max(img.convert("L").getextrema()) > 128


# --------------------------------------------------------------------------- #
# Real font files built with fontTools
# --------------------------------------------------------------------------- #
def _block_font():
    """Minimal TrueType font mapping space and 'A' (a filled box)."""
    pen = TTGlyphPen(None)
    pen.moveTo((100, 0))
    pen.lineTo((100, 700))
    pen.lineTo((500, 700))
    pen.lineTo((500, 0))
    pen.closePath()
    box = pen.glyph()
    empty = TTGlyphPen(None).glyph()

    fb = FontBuilder(1000, isTTF=True)
    fb.setupGlyphOrder([".notdef", "space", "A"])
    fb.setupCharacterMap({32: "space", 65: "A"})
    fb.setupGlyf({".notdef": empty, "space": empty, "A": box})
    fb.setupHorizontalMetrics({".notdef": (600, 0), "space": (600, 0), "A": (600, 100)})
    fb.setupHorizontalHeader(ascent=800, descent=-200)
    fb.setupNameTable({"familyName": "Block", "styleName": "Regular"})
    fb.setupOS2(sTypoAscender=800, usWinAscent=800, usWinDescent=200)
    fb.setupPost()
    return fb.font


def test_load_truetype_file(tmp_path):
    path = tmp_path / "block.ttf"
    _block_font().save(str(path))
    face = load_font(path, 16)
    assert face.codepoints == {32, 65}
    assert face.has_glyph("A")
    assert not face.has_glyph("B")
    assert face.path == str(path)


def test_load_font_collection(tmp_path):
    path = tmp_path / "block.ttc"
    collection = TTCollection()
    collection.fonts = [_block_font()]
    collection.save(str(path))

    face = load_font(path, 16)
    assert face.codepoints == {32, 65}
