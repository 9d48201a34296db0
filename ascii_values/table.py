#
# PROJECT: ascii-values
# MODULE: ascii_values/table.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import logging

from .errors import EmptyBrightnessRangeError

log = logging.getLogger(__name__)

# Marker for an unset slot; no grid ever holds code 0
EMPTY = 0
# One slot per 8-bit brightness level
TABLE_SIZE = 256


def new_table(size: int = TABLE_SIZE) -> list:
    return [EMPTY] * size


def fill_gaps(sparse) -> list:
    """
    Spreads a sparse brightness table over its full length and fills holes.

    Sampling a low-resolution canvas only reaches the darker end of the
    range, so the populated prefix of the table (everything up to the last
    set slot) is stretched by an integer ratio, after which every empty
    slot takes the nearest set value to its left.
    """
    size = len(sparse)

    missing_from_end = 0
    for code in reversed(sparse):
        if code != EMPTY:
            break
        missing_from_end += 1

    real_length = size - missing_from_end
    if real_length == 0:
        raise EmptyBrightnessRangeError(size)

    ratio = size // real_length

    out = new_table(size)
    for i in range(real_length):
        if sparse[i] != EMPTY:
            out[i * ratio] = sparse[i]

    previous = EMPTY
    for i in range(size):
        if out[i] == EMPTY:
            out[i] = previous
        else:
            previous = out[i]

    log.debug("filled brightness table: %d of %d slots known, ratio %d",
              real_length - sparse[:real_length].count(EMPTY), size, ratio)
    return out


def table_coverage(table):
    """Returns (filled, missing) slot counts."""
    missing = sum(1 for code in table if code == EMPTY)
    return len(table) - missing, missing


def table_to_string(table, placeholder: str = ' ') -> str:
    """One character per slot, `placeholder` standing in for empty slots."""
    return ''.join(placeholder if code == EMPTY else chr(code) for code in table)


def brightness_index(value: int, depth: int = 8) -> int:
    """
    Scales a gray sample of the given bit depth to a 0-255 table index.
    A 16-bit sample is divided by 256.
    """
    if depth < 8:
        raise ValueError(f"depth must be at least 8 bits, got {depth}")
    index = int(value) >> (depth - 8)
    return max(0, min(TABLE_SIZE - 1, index))
