#
# PROJECT: ascii-values
# MODULE: ascii_values/demo.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import argparse
import logging
import sys

from PIL import Image

from .calibrator import Calibrator
from .config import CalibrationConfig
from .errors import AsciiValuesError
from .render import image_to_text
from .table import EMPTY


def parse_args(argv=None):
    """CLI argument parser with one subcommand per demo program."""
    epilog = """\
examples:
  %(prog)s table Hack-Regular.ttf                        Sampled brightness levels
  %(prog)s table Hack-Regular.ttf --filled               Full 0-255 lookup table
  %(prog)s debug-image Hack-Regular.ttf debug.png        Export the glyph canvas
  %(prog)s convert Hack-Regular.ttf photo.jpg            Print an image as text
  %(prog)s convert Hack-Regular.ttf photo.jpg --tile-size 8 --x-step 0.5
"""
    parser = argparse.ArgumentParser(
        prog="ascii-values",
        description="Font brightness calibration for ASCII art",
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("font", help="Path to a .ttf/.otf font")
    common.add_argument("--tile-size", type=int, default=None,
                        help="Tile edge in pixels (default: 2)")
    common.add_argument("--font-size", type=float, default=None,
                        help="Font em size in pixels (default: tile size)")
    common.add_argument("--start-code", type=int, default=None,
                        help="First character code in the grid (default: 32)")
    common.add_argument("--baseline-offset", type=int, default=None,
                        help="Baseline distance below the tile top (default: tile size)")
    common.add_argument("-v", "--verbose", action="store_true",
                        help="Log pipeline details to stderr")

    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("table", parents=[common],
                       help="Print the brightness table of a font")
    p.add_argument("--max-code", type=int, default=10000,
                   help="Highest character code to calibrate (default: 10000)")
    p.add_argument("--filled", action="store_true",
                   help="Print the gap-filled table instead of the sampled one")

    p = sub.add_parser("debug-image", parents=[common],
                       help="Save the rasterized glyph canvas as an image")
    p.add_argument("output", help="Output image path (format from extension)")
    p.add_argument("--max-code", type=int, default=20000,
                   help="Highest character code to rasterize (default: 20000)")

    p = sub.add_parser("convert", parents=[common],
                       help="Render an image as text")
    p.add_argument("image", help="Path to the image to convert")
    p.add_argument("--max-code", type=int, default=10000,
                   help="Highest character code to calibrate (default: 10000)")
    p.add_argument("--x-step", type=float, default=0.4,
                   help="Horizontal sampling step in pixels (default: 0.4)")
    p.add_argument("--y-step", type=float, default=1.0,
                   help="Vertical sampling step in pixels (default: 1.0)")

    return parser.parse_args(argv)


def build_config(args) -> CalibrationConfig:
    """Environment defaults, then command-line overrides."""
    config = CalibrationConfig.from_environment()
    overrides = {
        'tile_size': args.tile_size,
        'start_code': args.start_code,
        'font_size': args.font_size,
        'baseline_offset': args.baseline_offset,
    }
    if all(v is None for v in overrides.values()):
        return config

    values = {
        'tile_size': config.tile_size,
        'start_code': config.start_code,
        'font_size': None,
        'baseline_offset': None,
    }
    # Derived sizes follow an overridden tile size unless set explicitly
    if args.tile_size is None:
        values['font_size'] = config.font_size
        values['baseline_offset'] = config.baseline_offset
    values.update({k: v for k, v in overrides.items() if v is not None})
    return CalibrationConfig(**values)


class CalibrationDemo:
    """Runs one subcommand and writes its output to `out`."""

    def __init__(self, args, out=None):
        self.args = args
        self.out = out if out is not None else sys.stdout
        self.calibrator = Calibrator(build_config(args))

    def print_table(self):
        args = self.args
        face = self.calibrator.load_font(args.font)
        result = self.calibrator.run(face, args.max_code)
        table = result.dense if args.filled else result.sparse

        for value, code in enumerate(table):
            char = '' if code == EMPTY else chr(code)
            print(f"Value {value}: '{char}'", file=self.out)
        print(f"Missing: {result.missing}, Filled: {result.filled}", file=self.out)

    def write_debug_image(self):
        args = self.args
        face = self.calibrator.load_font(args.font)
        canvas = self.calibrator.rasterize_font(face, args.max_code)
        canvas.save(args.output)
        print(f"Saved {args.output} ({canvas.w}x{canvas.h})", file=self.out)

    def convert_image(self):
        args = self.args
        face = self.calibrator.load_font(args.font)
        table = self.calibrator.build_table(face, args.max_code)
        try:
            with Image.open(args.image) as img:
                lines = image_to_text(img, table, args.x_step, args.y_step)
        except OSError as e:
            raise AsciiValuesError(f"failed to open image '{args.image}': {e}") from e
        for line in lines:
            print(line, file=self.out)

    def run(self):
        handlers = {
            'table': self.print_table,
            'debug-image': self.write_debug_image,
            'convert': self.convert_image,
        }
        handlers[self.args.command]()


def main(argv=None) -> int:
    """Console entry point; returns the process exit status."""
    args = parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG,
                            format="%(levelname)s %(name)s: %(message)s")
    try:
        CalibrationDemo(args).run()
    except (AsciiValuesError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0
