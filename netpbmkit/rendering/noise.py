from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from ..buffer import Pixel, PixelBuffer, Rgb

DEFAULT_FREQUENCY = 0.02
DEFAULT_OCTAVES = 1
DEFAULT_PERSISTENCE = 0.5


@dataclass
class NoiseSettings:
    frequency: float = DEFAULT_FREQUENCY
    octaves: int = DEFAULT_OCTAVES
    persistence: float = DEFAULT_PERSISTENCE


def lattice_noise(ix: int, iy: int) -> float:
    """Integer hash of a lattice point, in the range (-1, 1]."""
    n = ix + iy * 57
    n = (n << 13) ^ n
    return 1.0 - ((n * (n * n * 15731 + 789221) + 1376312589) & 0x7FFFFFFF) / 1073741824.0


def _blend(a: float, b: float, t: float) -> float:
    f = (1.0 - math.cos(t * math.pi)) / 2.0
    return a * (1.0 - f) + b * f


def smooth_noise(x: float, y: float) -> float:
    ix = math.floor(x)
    iy = math.floor(y)
    fx = x - ix
    fy = y - iy
    top = _blend(lattice_noise(ix, iy), lattice_noise(ix + 1, iy), fx)
    bottom = _blend(lattice_noise(ix, iy + 1), lattice_noise(ix + 1, iy + 1), fx)
    return _blend(top, bottom, fy)


def perlin_noise(x: float, y: float, settings: Optional[NoiseSettings] = None) -> float:
    """Deterministic fractal noise at ``(x, y)`` normalized to [0, 1]."""
    settings = settings or NoiseSettings()
    total = 0.0
    weight = 0.0
    frequency = settings.frequency
    amplitude = 1.0
    for _ in range(max(1, settings.octaves)):
        total += smooth_noise(x * frequency, y * frequency) * amplitude
        weight += amplitude
        frequency *= 2
        amplitude *= settings.persistence
    value = (total / weight + 1.0) / 2.0
    return min(1.0, max(0.0, value))


def interpolate_colors(color1: Pixel, color2: Pixel, t: float) -> Pixel:
    if isinstance(color1, bool):
        return color2 if t >= 0.5 else color1
    if isinstance(color1, Rgb):
        return Rgb(*(int(a * (1 - t) + b * t) for a, b in zip(color1, color2)))
    return int(color1 * (1 - t) + color2 * t)


def draw_perlin_noise(
    buffer: PixelBuffer,
    color1: Pixel,
    color2: Pixel,
    settings: Optional[NoiseSettings] = None,
) -> None:
    """Fill every pixel with a blend of ``color1`` and ``color2`` weighted by noise."""
    settings = settings or NoiseSettings()
    for y, row in enumerate(buffer.rows):
        for x in range(buffer.width):
            row[x] = interpolate_colors(color1, color2, perlin_noise(x, y, settings))
