#
# PROJECT: ascii-values
# MODULE: ascii_values/errors.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

class AsciiValuesError(Exception):
    """Base class for every error raised by ascii_values."""


class FontLoadError(AsciiValuesError):
    """The font file could not be turned into a usable face."""

    def __init__(self, path, reason):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"cannot load font '{self.path}': {reason}")


class FontNotFoundError(FontLoadError, FileNotFoundError):
    def __init__(self, path):
        super().__init__(path, "no such file")


class FontParseError(FontLoadError):
    pass


class EmptyBrightnessRangeError(AsciiValuesError):
    """
    Raised by the gap filler when every slot of the sparse table is empty,
    so there is nothing to spread across the brightness range.
    """

    def __init__(self, length: int):
        self.length = length
        super().__init__(f"brightness table of length {length} has no populated slots")
