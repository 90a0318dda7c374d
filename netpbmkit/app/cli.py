from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import List, Optional, Set, Tuple

from .. import transform
from ..buffer import PixelBuffer
from ..codec import read_file, write_file
from ..formats import FormatRegistry
from ..rendering import resize
from ..rendering.pillow import load_image, save_image

logger = logging.getLogger(__name__)

NETPBM_EXTENSIONS: Set[str] = {".pbm", ".pgm", ".ppm", ".pnm"}
PILLOW_EXTENSIONS: Set[str] = {".png", ".jpg", ".jpeg", ".gif", ".bmp"}


def parse_size(value: str) -> Tuple[int, int]:
    parts = value.lower().split("x")
    if len(parts) != 2 or not all(part.isdigit() for part in parts):
        raise argparse.ArgumentTypeError(f"Expected WIDTHxHEIGHT, got {value!r}")
    return int(parts[0]), int(parts[1])


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    magics = [variant.magic for variant in FormatRegistry.load().variants]
    parser = argparse.ArgumentParser(
        description="netpbmkit: convert and transform PBM/PGM/PPM images."
    )
    parser.add_argument("input", help="Input image (.pbm/.pgm/.ppm/.pnm, or .png/.jpg via Pillow)")
    parser.add_argument("output", help="Output image (.pbm/.pgm/.ppm/.pnm, or .png preview)")
    conversion = parser.add_mutually_exclusive_group()
    conversion.add_argument("--to-graymap", action="store_true", help="Convert a pixmap to a graymap")
    conversion.add_argument("--to-bitmap", action="store_true", help="Threshold a graymap or pixmap to a bitmap")
    parser.add_argument("--resize", type=parse_size, metavar="WxH", help="Resize with neighbourhood averaging")
    parser.add_argument("--rotate", type=int, choices=range(0, 4), default=0, help="Quarter turns clockwise")
    parser.add_argument("--flip", action="store_true", help="Mirror horizontally")
    parser.add_argument("--flop", action="store_true", help="Mirror vertically")
    parser.add_argument("--invert", action="store_true", help="Invert pixel values")
    parser.add_argument("--max", type=int, metavar="N", help="Rescale channels to a new max value (1-255)")
    parser.add_argument("--format", choices=magics, help="Output variant of the same family")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    parser.epilog = "Operations run in the order: convert, resize, rotate, flip, flop, invert, max, format."
    return parser.parse_args(argv)


def load_buffer(path: str) -> PixelBuffer:
    ext = os.path.splitext(path)[1].lower()
    if ext in PILLOW_EXTENSIONS:
        return load_image(path)
    return read_file(path)


def save_buffer(buffer: PixelBuffer, path: str) -> None:
    ext = os.path.splitext(path)[1].lower()
    if ext in PILLOW_EXTENSIONS:
        save_image(buffer, path)
        return
    write_file(buffer, path)


def apply_operations(buffer: PixelBuffer, args: argparse.Namespace) -> PixelBuffer:
    if args.to_graymap:
        buffer = transform.to_graymap(buffer)
    if args.to_bitmap:
        buffer = transform.to_bitmap(buffer)
    if args.resize:
        buffer = resize(buffer, *args.resize)
    for _ in range(args.rotate):
        buffer = transform.rotate_clockwise(buffer)
    if args.flip:
        transform.flip_horizontal(buffer)
    if args.flop:
        transform.flip_vertical(buffer)
    if args.invert:
        transform.invert(buffer)
    if args.max is not None:
        transform.rescale_max(buffer, args.max)
    if args.format:
        transform.set_variant(buffer, args.format)
    return buffer


def _validate_paths(args: argparse.Namespace) -> None:
    supported = NETPBM_EXTENSIONS | PILLOW_EXTENSIONS
    for path in (args.input, args.output):
        ext = os.path.splitext(path)[1].lower()
        if ext not in supported:
            raise ValueError("Supported formats: " + ", ".join(sorted(supported)))
    if not os.path.isfile(args.input):
        raise FileNotFoundError(f"File not found: {args.input}")


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        _validate_paths(args)
        buffer = load_buffer(args.input)
        logger.info("Loaded %s %dx%d from %s", buffer.variant, buffer.width, buffer.height, args.input)
        buffer = apply_operations(buffer, args)
        save_buffer(buffer, args.output)
    except Exception as exc:
        print(str(exc), file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
