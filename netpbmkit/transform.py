from __future__ import annotations

from typing import List

from .buffer import Pixel, PixelBuffer, Rgb, check_max_value
from .errors import InvalidVariantError, UnsupportedOperationError
from .formats import BITMAP, GRAYMAP, PIXMAP, FormatRegistry, lookup


def invert(buffer: PixelBuffer) -> None:
    """Toggle bitmap pixels, or map every channel to ``max_value - channel``."""
    top = buffer.max_value
    for row in buffer.rows:
        for x, pix in enumerate(row):
            if buffer.kind == BITMAP:
                row[x] = not pix
            elif buffer.kind == GRAYMAP:
                row[x] = top - pix
            else:
                row[x] = Rgb(top - pix.r, top - pix.g, top - pix.b)


def flip_horizontal(buffer: PixelBuffer) -> None:
    for row in buffer.rows:
        row.reverse()


def flip_vertical(buffer: PixelBuffer) -> None:
    buffer.rows.reverse()


def rotate_clockwise(buffer: PixelBuffer) -> PixelBuffer:
    """Return a new buffer turned a quarter turn clockwise."""
    height = buffer.height
    rows: List[List[Pixel]] = [
        [buffer.rows[height - 1 - j][i] for j in range(height)] for i in range(buffer.width)
    ]
    return PixelBuffer(buffer.kind, buffer.height, buffer.width, buffer.max_value, buffer.variant, rows)


def _rescale(value: int, new_max: int, old_max: int) -> int:
    # Round half up: floor(value * new_max / old_max + 1/2).
    return (2 * value * new_max + old_max) // (2 * old_max)


def rescale_max(buffer: PixelBuffer, new_max: int) -> None:
    if buffer.kind == BITMAP:
        raise UnsupportedOperationError("Bitmaps have no adjustable max value")
    check_max_value(new_max)
    old_max = buffer.max_value
    for row in buffer.rows:
        for x, pix in enumerate(row):
            if buffer.kind == GRAYMAP:
                row[x] = _rescale(pix, new_max, old_max)
            else:
                row[x] = Rgb(*(_rescale(c, new_max, old_max) for c in pix))
    buffer.max_value = new_max


def set_variant(buffer: PixelBuffer, magic: str) -> None:
    """Switch between the text and binary encodings of the buffer's family."""
    variant = lookup(magic)
    if variant.family != buffer.kind:
        raise InvalidVariantError(f"Variant {magic} holds {variant.family} pixels, buffer holds {buffer.kind}")
    buffer.variant = magic


def _same_encoding(buffer: PixelBuffer, family: str) -> str:
    binary = lookup(buffer.variant).binary
    return FormatRegistry.load().for_family(family, binary).magic


def to_graymap(buffer: PixelBuffer) -> PixelBuffer:
    if buffer.kind != PIXMAP:
        raise UnsupportedOperationError(f"Graymap conversion needs a pixmap, got {buffer.kind}")
    rows: List[List[Pixel]] = [[(pix.r + pix.g + pix.b) // 3 for pix in row] for row in buffer.rows]
    return PixelBuffer(
        GRAYMAP,
        buffer.width,
        buffer.height,
        buffer.max_value,
        _same_encoding(buffer, GRAYMAP),
        rows,
    )


def to_bitmap(buffer: PixelBuffer) -> PixelBuffer:
    """Threshold at the midpoint: a pixel is set (black) when its average is below ``max_value / 2``."""
    if buffer.kind == BITMAP:
        raise UnsupportedOperationError("Buffer is already a bitmap")
    top = buffer.max_value
    rows: List[List[Pixel]] = []
    for row in buffer.rows:
        if buffer.kind == GRAYMAP:
            rows.append([2 * pix < top for pix in row])
        else:
            rows.append([2 * ((pix.r + pix.g + pix.b) // 3) < top for pix in row])
    return PixelBuffer(BITMAP, buffer.width, buffer.height, 1, _same_encoding(buffer, BITMAP), rows)
