"""
End-to-end calibration
======================

1. Pipeline output on a block font
2. Round-trip sanity (every character comes from the grid)
3. Failure modes
"""
import pytest

from ascii_values import (EMPTY, TABLE_SIZE, CalibrationConfig, Calibrator,
                          EmptyBrightnessRangeError, FontNotFoundError,
                          build_brightness_table)

SHADES = {"!": 64, '"': 128, "#": 255}


# --------------------------------------------------------------------------- #
# 1. Pipeline
# --------------------------------------------------------------------------- #
def test_full_range_font(make_face):
    result = Calibrator().run(make_face(shades=SHADES), max_code=35)

    assert result.grid.rows == ((32, 33), (34, 35))
    assert (result.canvas.w, result.canvas.h) == (4, 4)
    assert {i: c for i, c in enumerate(result.sparse) if c != EMPTY} == \
        {0: 32, 64: 33, 128: 34, 255: 35}
    assert (result.filled, result.missing) == (4, 252)

    dense = result.dense
    assert dense[:64] == [32] * 64
    assert dense[64:128] == [33] * 64
    assert dense[128:255] == [34] * 127
    assert dense[255] == 35


def test_dark_font_is_stretched(make_face):
    face = make_face(shades={"!": 1, '"': 2}, missing="#")
    dense = Calibrator().build_table(face, max_code=35)
    assert len(dense) == TABLE_SIZE
    assert dense[:85] == [32] * 85
    assert dense[85:170] == [33] * 85
    assert dense[170:] == [34] * 86


def test_larger_tiles(make_face):
    config = CalibrationConfig(tile_size=5)
    result = Calibrator(config).run(make_face(tile_size=5, shades=SHADES), max_code=35)
    assert (result.canvas.w, result.canvas.h) == (10, 10)
    assert result.sparse[255] == 35


# --------------------------------------------------------------------------- #
# 2. Round trip
# --------------------------------------------------------------------------- #
def test_dense_characters_come_from_grid(make_face):
    shades = {chr(c): (c * 37) % 256 for c in range(33, 120)}
    result = Calibrator().run(make_face(shades=shades), max_code=150)
    assert EMPTY not in result.dense
    assert set(result.dense) <= result.grid.codes()


# --------------------------------------------------------------------------- #
# 3. Failures
# --------------------------------------------------------------------------- #
def test_max_code_below_start_has_no_range(make_face):
    with pytest.raises(EmptyBrightnessRangeError):
        Calibrator().run(make_face(), max_code=20)


def test_missing_font_file(tmp_path):
    with pytest.raises(FontNotFoundError):
        build_brightness_table(tmp_path / "nope.ttf", 126)


def test_rasterize_font_only(make_face):
    canvas = Calibrator().rasterize_font(make_face(shades=SHADES), max_code=40)
    assert canvas.side == 3
