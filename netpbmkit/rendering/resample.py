from __future__ import annotations

from typing import List

from ..buffer import Pixel, PixelBuffer, Rgb
from ..errors import InvalidDimensionError
from ..formats import BITMAP, GRAYMAP


def _neighbors(buffer: PixelBuffer, cx: int, cy: int) -> List[Pixel]:
    found = []
    for ny in range(cy - 1, cy + 2):
        if not 0 <= ny < buffer.height:
            continue
        row = buffer.rows[ny]
        for nx in range(cx - 1, cx + 2):
            if 0 <= nx < buffer.width:
                found.append(row[nx])
    return found


def _average(kind: str, pixels: List[Pixel]) -> Pixel:
    count = len(pixels)
    if kind == BITMAP:
        return 2 * sum(1 for pix in pixels if pix) > count
    if kind == GRAYMAP:
        return sum(pixels) // count
    return Rgb(
        sum(pix.r for pix in pixels) // count,
        sum(pix.g for pix in pixels) // count,
        sum(pix.b for pix in pixels) // count,
    )


def resize(buffer: PixelBuffer, new_width: int, new_height: int) -> PixelBuffer:
    """Resize by averaging the 3x3 source neighbourhood of each mapped pixel.

    Channels are averaged with integer division. Bitmap pixels are set when
    more than half of the gathered neighbours are set.
    """
    for label, value in (("width", new_width), ("height", new_height)):
        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            raise InvalidDimensionError(f"New {label} must be a positive integer, got {value!r}")
    scale_x = buffer.width / new_width
    scale_y = buffer.height / new_height
    rows: List[List[Pixel]] = []
    for y in range(new_height):
        src_y = int(y * scale_y)
        rows.append(
            [_average(buffer.kind, _neighbors(buffer, int(x * scale_x), src_y)) for x in range(new_width)]
        )
    return PixelBuffer(buffer.kind, new_width, new_height, buffer.max_value, buffer.variant, rows)
