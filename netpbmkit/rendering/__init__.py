from .fractals import draw_koch_snowflake, draw_sierpinski_triangle
from .noise import NoiseSettings, draw_perlin_noise, interpolate_colors, perlin_noise
from .rasterizer import (
    draw_circle,
    draw_filled_circle,
    draw_filled_polygon,
    draw_filled_rectangle,
    draw_filled_triangle,
    draw_line,
    draw_polygon,
    draw_rectangle,
    draw_triangle,
    set_pixel,
)
from .resample import resize

__all__ = [
    "NoiseSettings",
    "draw_circle",
    "draw_filled_circle",
    "draw_filled_polygon",
    "draw_filled_rectangle",
    "draw_filled_triangle",
    "draw_koch_snowflake",
    "draw_line",
    "draw_perlin_noise",
    "draw_polygon",
    "draw_rectangle",
    "draw_sierpinski_triangle",
    "draw_triangle",
    "interpolate_colors",
    "perlin_noise",
    "resize",
    "set_pixel",
]
