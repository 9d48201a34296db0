#
# PROJECT: ascii-values
# MODULE: ascii_values/grid.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import logging
import math

from .config import DEFAULT_START_CODE

log = logging.getLogger(__name__)


class CharacterGrid:
    """
    Square, row-major arrangement of character codes.

    Rows are stored as tuples so a grid cannot change after it has been
    handed to the rasterizer or the sampler.
    """
    __slots__ = ('rows', 'side')

    def __init__(self, rows=()):
        rows = tuple(tuple(r) for r in rows)
        for r in rows:
            if len(r) != len(rows):
                raise ValueError(f"grid must be square, got a row of {len(r)} in a {len(rows)}-row grid")
        self.rows = rows
        self.side = len(rows)

    @classmethod
    def from_rows(cls, rows):
        """Build a grid from rows of characters and/or integer codes."""
        return cls([[ord(c) if isinstance(c, str) else int(c) for c in r] for r in rows])

    def __len__(self):
        return self.side

    def __iter__(self):
        return iter(self.rows)

    def __getitem__(self, index):
        return self.rows[index]

    def __eq__(self, other):
        if isinstance(other, CharacterGrid):
            return self.rows == other.rows
        return NotImplemented

    def __hash__(self):
        return hash(self.rows)

    def __repr__(self):
        return f"CharacterGrid(side={self.side})"

    def cells(self):
        """Yield (row, col, code) in row-major scan order."""
        for i, row in enumerate(self.rows):
            for j, code in enumerate(row):
                yield i, j, code

    def codes(self):
        return {code for row in self.rows for code in row}


def build_character_grid(max_code: int, start_code: int = DEFAULT_START_CODE) -> CharacterGrid:
    """
    Smallest square grid holding every code from start_code to max_code.

    The trailing cells of the last row continue the sequence past max_code
    rather than staying empty; a max_code below start_code gives an empty grid.
    """
    if max_code < start_code:
        return CharacterGrid()

    count = max_code - start_code + 1
    side = math.isqrt(count - 1) + 1

    rows = [[i * side + j + start_code for j in range(side)] for i in range(side)]
    log.debug("built %dx%d character grid for codes %d..%d", side, side, start_code, max_code)
    return CharacterGrid(rows)
