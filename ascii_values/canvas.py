#
# PROJECT: ascii-values
# MODULE: ascii_values/canvas.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from typing import Optional

from PIL import Image, ImageDraw


class Canvas:
    """
    Black RGB image split into side x side square tiles.

    Tile (row, col) covers pixels [col*t, (col+1)*t) x [row*t, (row+1)*t)
    where t is the tile size.
    """
    __slots__ = ['side', 'tile_size', 'image']

    def __init__(self, side: int, tile_size: int, image: Optional[Image.Image] = None):
        self.side, self.tile_size = side, tile_size
        size = side * tile_size
        if image is None:
            image = Image.new('RGB', (size, size), 'black')
        elif image.size != (size, size):
            raise ValueError(f"image is {image.size[0]}x{image.size[1]}, expected {size}x{size}")
        self.image = image

    @property
    def w(self):
        return self.image.width

    @property
    def h(self):
        return self.image.height

    def draw(self) -> ImageDraw.ImageDraw:
        return ImageDraw.Draw(self.image)

    def tile_box(self, row: int, col: int):
        t = self.tile_size
        return (col * t, row * t, (col + 1) * t, (row + 1) * t)

    def tile(self, row: int, col: int) -> Image.Image:
        return self.image.crop(self.tile_box(row, col))

    def grayscale(self) -> Image.Image:
        """ITU-R 601 luma copy of the canvas ("L" mode)."""
        return self.image.convert('L')

    def is_tile_blank(self, row: int, col: int) -> bool:
        return self.tile(row, col).getbbox() is None

    def save(self, path, format=None):
        """Write the canvas to disk; the format follows the file extension."""
        self.image.save(path, format=format)
