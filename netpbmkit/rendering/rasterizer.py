from __future__ import annotations

import math
from typing import List, Optional, Sequence, Tuple

from ..buffer import Pixel, PixelBuffer, Point


def set_pixel(buffer: PixelBuffer, point: Point, color: Pixel) -> None:
    """Set one pixel; points outside the buffer are clipped silently."""
    if 0 <= point.x < buffer.width and 0 <= point.y < buffer.height:
        buffer.rows[point.y][point.x] = color


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _fill_span(buffer: PixelBuffer, y: int, x1: int, x2: int, color: Pixel) -> None:
    if not 0 <= y < buffer.height:
        return
    if x1 > x2:
        x1, x2 = x2, x1
    x1 = max(x1, 0)
    x2 = min(x2, buffer.width - 1)
    row = buffer.rows[y]
    for x in range(x1, x2 + 1):
        row[x] = color


def draw_line(buffer: PixelBuffer, p1: Point, p2: Point, color: Pixel) -> None:
    """Bresenham line from ``p1`` to ``p2``, both endpoints included."""
    x, y = p1.x, p1.y
    dx = abs(p2.x - x)
    dy = abs(p2.y - y)
    sx = 1 if x < p2.x else -1
    sy = 1 if y < p2.y else -1
    err = dx - dy
    while True:
        set_pixel(buffer, Point(x, y), color)
        if x == p2.x and y == p2.y:
            break
        e2 = 2 * err
        if e2 > -dy:
            err -= dy
            x += sx
        if e2 < dx:
            err += dx
            y += sy


def draw_rectangle(buffer: PixelBuffer, origin: Point, width: int, height: int, color: Pixel) -> None:
    """Outline of the ``width`` x ``height`` box whose top-left pixel is ``origin``.

    Zero or negative sizes draw nothing.
    """
    if width <= 0 or height <= 0:
        return
    right = origin.x + width - 1
    bottom = origin.y + height - 1
    top_right = Point(right, origin.y)
    bottom_right = Point(right, bottom)
    bottom_left = Point(origin.x, bottom)
    draw_line(buffer, origin, top_right, color)
    draw_line(buffer, top_right, bottom_right, color)
    draw_line(buffer, bottom_right, bottom_left, color)
    draw_line(buffer, bottom_left, origin, color)


def draw_filled_rectangle(buffer: PixelBuffer, origin: Point, width: int, height: int, color: Pixel) -> None:
    if width <= 0 or height <= 0:
        return
    top = max(origin.y, 0)
    bottom = min(origin.y + height, buffer.height)
    for y in range(top, bottom):
        _fill_span(buffer, y, origin.x, origin.x + width - 1, color)


def _circle_octant(radius: int) -> List[Tuple[int, int]]:
    """Midpoint circle steps ``(x, y)`` for the octant with ``x >= y``."""
    steps = []
    x, y = radius, 0
    err = 1 - radius
    while x >= y:
        steps.append((x, y))
        y += 1
        if err < 0:
            err += 2 * y + 1
        else:
            x -= 1
            err += 2 * (y - x) + 1
    return steps


def draw_circle(buffer: PixelBuffer, center: Point, radius: int, color: Pixel) -> None:
    if radius < 0:
        return
    cx, cy = center.x, center.y
    for x, y in _circle_octant(radius):
        for px, py in (
            (cx + x, cy + y),
            (cx + y, cy + x),
            (cx - y, cy + x),
            (cx - x, cy + y),
            (cx - x, cy - y),
            (cx - y, cy - x),
            (cx + y, cy - x),
            (cx + x, cy - y),
        ):
            set_pixel(buffer, Point(px, py), color)


def draw_filled_circle(buffer: PixelBuffer, center: Point, radius: int, color: Pixel) -> None:
    if radius < 0:
        return
    cx, cy = center.x, center.y
    for x, y in _circle_octant(radius):
        _fill_span(buffer, cy + y, cx - x, cx + x, color)
        _fill_span(buffer, cy - y, cx - x, cx + x, color)
        _fill_span(buffer, cy + x, cx - y, cx + y, color)
        _fill_span(buffer, cy - x, cx - y, cx + y, color)


def draw_triangle(buffer: PixelBuffer, p1: Point, p2: Point, p3: Point, color: Pixel) -> None:
    draw_line(buffer, p1, p2, color)
    draw_line(buffer, p2, p3, color)
    draw_line(buffer, p3, p1, color)


def interpolate(p1: Point, p2: Point, y: int) -> Optional[float]:
    """X coordinate of the edge ``p1``-``p2`` at row ``y``, or None for a horizontal edge."""
    if p2.y == p1.y:
        return None
    return p1.x + (y - p1.y) * (p2.x - p1.x) / (p2.y - p1.y)


def draw_filled_triangle(buffer: PixelBuffer, p1: Point, p2: Point, p3: Point, color: Pixel) -> None:
    top, middle, bottom = sorted((p1, p2, p3), key=lambda p: p.y)
    if top.y == bottom.y:
        xs = [top.x, middle.x, bottom.x]
        _fill_span(buffer, top.y, min(xs), max(xs), color)
        return
    for y in range(max(top.y, 0), min(bottom.y, buffer.height - 1) + 1):
        long_x = interpolate(top, bottom, y)
        if y < middle.y:
            short_x = interpolate(top, middle, y)
        elif middle.y == bottom.y:
            short_x = None
        else:
            short_x = interpolate(middle, bottom, y)
        if short_x is None:
            # Horizontal lower edge: the row spans out to both of its endpoints.
            xs = [long_x, middle.x, bottom.x]
        else:
            xs = [long_x, short_x]
        _fill_span(buffer, y, round_half_up(min(xs)), round_half_up(max(xs)), color)
    draw_triangle(buffer, p1, p2, p3, color)


def draw_polygon(buffer: PixelBuffer, points: Sequence[Point], color: Pixel) -> None:
    if not points:
        return
    for i in range(len(points) - 1):
        draw_line(buffer, points[i], points[i + 1], color)
    draw_line(buffer, points[-1], points[0], color)


def _row_crossings(points: Sequence[Point], y: int) -> List[float]:
    xs: List[float] = []
    count = len(points)
    for i in range(count):
        a = points[i]
        b = points[(i + 1) % count]
        if not min(a.y, b.y) <= y <= max(a.y, b.y):
            continue
        x = interpolate(a, b, y)
        if x is None:
            xs.extend((a.x, b.x))
        else:
            xs.append(x)
    return xs


def draw_filled_polygon(buffer: PixelBuffer, points: Sequence[Point], color: Pixel) -> None:
    """Scanline fill using the min/max span rule.

    Each row is filled from its leftmost to its rightmost edge crossing, so
    concave notches and self-intersections on a row are filled over.
    """
    if not points:
        return
    low = max(min(p.y for p in points), 0)
    high = min(max(p.y for p in points), buffer.height - 1)
    for y in range(low, high + 1):
        xs = _row_crossings(points, y)
        if xs:
            _fill_span(buffer, y, round_half_up(min(xs)), round_half_up(max(xs)), color)
    draw_polygon(buffer, points, color)
