#
# PROJECT: triangle-rasterizer
# MODULE: triangle_rasterizer/cli.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

import argparse
import logging
import sys

from .config import RasterConfig
from .encoder import save_image
from .errors import EncodeError, InvalidVertexError
from .parsing import parse_color, parse_vertex
from .rasterizer import rasterize

logger = logging.getLogger(__name__)


def build_parser():
    epilog = """\
examples:
  %(prog)s out.png --vertex-1 "(0, 0)" --vertex-2 "(511, 0)" --vertex-3 "(0, 511)"
  %(prog)s small.png --width 64 --height 64 --vertex-1 "(5,5)" --vertex-2 "(60,10)" --vertex-3 "(30,60)"
  %(prog)s out.bmp --vertex-1 "(10, 10)" --vertex-2 "(500, 40)" --vertex-3 "(250, 480)" \\
      --color-1 #FFFFFF --color-2 #FF8800 --color-3 #1A1A2E   White/orange/navy blend
  %(prog)s big.png --width 2048 --height 2048 --workers 4 ...  Rasterize in 4 column bands
"""
    parser = argparse.ArgumentParser(
        prog="triangle-rasterizer",
        description="Rasterize a single color-interpolated triangle into an image",
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument("filename",
                        help="Output image path; the extension selects the format")
    parser.add_argument("--width", type=int, default=512,
                        help="Image width in pixels (default: 512)")
    parser.add_argument("--height", type=int, default=512,
                        help="Image height in pixels (default: 512)")
    parser.add_argument("--vertex-1", type=parse_vertex, required=True,
                        help="First vertex as \"(x, y)\"")
    parser.add_argument("--vertex-2", type=parse_vertex, required=True,
                        help="Second vertex as \"(x, y)\"")
    parser.add_argument("--vertex-3", type=parse_vertex, required=True,
                        help="Third vertex as \"(x, y)\"")
    parser.add_argument("--color-1", type=parse_color, default="#FF0000",
                        help="Color at vertex 1 in hex #RRGGBB (default: #FF0000)")
    parser.add_argument("--color-2", type=parse_color, default="#00FF00",
                        help="Color at vertex 2 in hex #RRGGBB (default: #00FF00)")
    parser.add_argument("--color-3", type=parse_color, default="#0000FF",
                        help="Color at vertex 3 in hex #RRGGBB (default: #0000FF)")
    parser.add_argument("--workers", type=int, default=1,
                        help="Worker threads for the fill loop (default: 1)")
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true",
                           help="Log debug output")
    verbosity.add_argument("-q", "--quiet", action="store_true",
                           help="Only log warnings and errors")
    return parser


def setup_logging(verbose=False, quiet=False):
    level = logging.DEBUG if verbose else logging.WARNING if quiet else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        stream=sys.stderr,
    )


def main(argv=None) -> int:
    """Parse arguments, rasterize, write the image. Returns the exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose, args.quiet)

    config = RasterConfig.from_args(args)
    try:
        config.validate()
    except (InvalidVertexError, ValueError) as e:
        parser.error(str(e))

    canvas = rasterize(config.triangle(), config.width, config.height,
                       workers=config.workers)
    try:
        save_image(canvas, config.filename)
    except EncodeError as e:
        logger.error("%s", e)
        return 1

    print("Successfully generated image")
    return 0


if __name__ == "__main__":
    sys.exit(main())
