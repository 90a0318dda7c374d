from __future__ import annotations

import math
from typing import Tuple

from ..buffer import Pixel, PixelBuffer, Point
from .rasterizer import draw_filled_triangle, draw_line, round_half_up

Vertex = Tuple[float, float]

_COS_60 = math.cos(math.pi / 3)
_SIN_60 = math.sin(math.pi / 3)


def _to_point(vertex: Vertex) -> Point:
    return Point(round_half_up(vertex[0]), round_half_up(vertex[1]))


def _triangle(start: Point, size: int) -> Tuple[Vertex, Vertex, Vertex]:
    height = math.sqrt(3) * size / 2
    return (
        (start.x, start.y),
        (start.x + size, start.y),
        (start.x + size / 2, start.y + height),
    )


def _koch_edge(buffer: PixelBuffer, depth: int, a: Vertex, b: Vertex, color: Pixel) -> None:
    if depth <= 0:
        draw_line(buffer, _to_point(a), _to_point(b), color)
        return
    dx = (b[0] - a[0]) / 3
    dy = (b[1] - a[1]) / 3
    first = (a[0] + dx, a[1] + dy)
    second = (a[0] + 2 * dx, a[1] + 2 * dy)
    # Peak: ``first`` rotated 60 degrees around ``second``.
    rx = first[0] - second[0]
    ry = first[1] - second[1]
    peak = (
        rx * _COS_60 - ry * _SIN_60 + second[0],
        rx * _SIN_60 + ry * _COS_60 + second[1],
    )
    _koch_edge(buffer, depth - 1, a, first, color)
    _koch_edge(buffer, depth - 1, first, peak, color)
    _koch_edge(buffer, depth - 1, peak, second, color)
    _koch_edge(buffer, depth - 1, second, b, color)


def draw_koch_snowflake(buffer: PixelBuffer, depth: int, start: Point, size: int, color: Pixel) -> None:
    """Koch snowflake on the equilateral triangle of side ``size`` based at ``start``.

    Negative depths are clamped to 0, which draws the plain triangle.
    """
    p1, p2, p3 = _triangle(start, size)
    depth = max(depth, 0)
    _koch_edge(buffer, depth, p1, p2, color)
    _koch_edge(buffer, depth, p2, p3, color)
    _koch_edge(buffer, depth, p3, p1, color)


def _midpoint(a: Vertex, b: Vertex) -> Vertex:
    return ((a[0] + b[0]) / 2, (a[1] + b[1]) / 2)


def _sierpinski(buffer: PixelBuffer, depth: int, p1: Vertex, p2: Vertex, p3: Vertex, color: Pixel) -> None:
    if depth <= 0:
        draw_filled_triangle(buffer, _to_point(p1), _to_point(p2), _to_point(p3), color)
        return
    m12 = _midpoint(p1, p2)
    m23 = _midpoint(p2, p3)
    m31 = _midpoint(p3, p1)
    _sierpinski(buffer, depth - 1, p1, m12, m31, color)
    _sierpinski(buffer, depth - 1, m12, p2, m23, color)
    _sierpinski(buffer, depth - 1, m31, m23, p3, color)


def draw_sierpinski_triangle(buffer: PixelBuffer, depth: int, start: Point, width: int, color: Pixel) -> None:
    """Sierpinski triangle; negative depths are clamped to 0 (one filled triangle)."""
    p1, p2, p3 = _triangle(start, width)
    _sierpinski(buffer, max(depth, 0), p1, p2, p3, color)
