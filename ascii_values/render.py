#
# PROJECT: ascii-values
# MODULE: ascii_values/render.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from PIL import Image

from .table import TABLE_SIZE, brightness_index, table_to_string

# Grayscale modes whose samples span 0-65535
SIXTEEN_BIT_MODES = ('I', 'I;16', 'I;16B', 'I;16L', 'I;16N')


def image_to_text(image: Image.Image, table, x_step: float = 0.4, y_step: float = 1.0) -> list:
    """
    Renders `image` as lines of text using a dense brightness table.

    Glyphs are taller than they are wide, so by default each pixel column is
    sampled 2.5 times (x_step 0.4) to keep the picture's proportions.
    """
    if x_step <= 0 or y_step <= 0:
        raise ValueError("x_step and y_step must be positive")
    if len(table) != TABLE_SIZE:
        raise ValueError(f"table must have {TABLE_SIZE} slots, got {len(table)}")

    chars = table_to_string(table)
    # Converting 16-bit images to "L" clips rather than scales, so keep their raw samples
    if image.mode in SIXTEEN_BIT_MODES:
        gray, depth = image, 16
    else:
        gray, depth = image.convert('L'), 8
    px = gray.load()
    w, h = gray.size

    lines = []
    y = 0.0
    while y < h:
        row = []
        x = 0.0
        while x < w:
            row.append(chars[brightness_index(px[int(x), int(y)], depth)])
            x += x_step
        lines.append(''.join(row))
        y += y_step
    return lines
