import pytest

from netpbmkit import PixelBuffer, Rgb
from netpbmkit.rendering import NoiseSettings, draw_perlin_noise, interpolate_colors, perlin_noise
from netpbmkit.rendering.noise import lattice_noise


def test_lattice_noise_is_a_pure_hash():
    assert lattice_noise(0, 0) == pytest.approx(1.0 - 1376312589 / 1073741824.0)
    assert lattice_noise(3, 7) == lattice_noise(3, 7)
    for ix in range(-5, 5):
        for iy in range(-5, 5):
            assert -1.0 < lattice_noise(ix, iy) <= 1.0


def test_perlin_noise_range_and_determinism():
    settings = NoiseSettings(frequency=0.3, octaves=3)
    values = [perlin_noise(x, y, settings) for x in range(20) for y in range(20)]
    assert all(0.0 <= v <= 1.0 for v in values)
    assert values == [perlin_noise(x, y, settings) for x in range(20) for y in range(20)]
    assert len(set(values)) > 1


def test_interpolate_colors():
    assert interpolate_colors(Rgb(0, 0, 0), Rgb(200, 100, 50), 0.5) == Rgb(100, 50, 25)
    assert interpolate_colors(0, 255, 0.0) == 0
    assert interpolate_colors(10, 20, 0.5) == 15
    assert interpolate_colors(False, True, 0.4) is False
    assert interpolate_colors(False, True, 0.6) is True


def test_noise_fill_pixmap():
    first = PixelBuffer.blank("P6", 16, 16)
    second = PixelBuffer.blank("P6", 16, 16)
    settings = NoiseSettings(frequency=0.25)
    draw_perlin_noise(first, Rgb(0, 0, 0), Rgb(255, 255, 255), settings)
    draw_perlin_noise(second, Rgb(0, 0, 0), Rgb(255, 255, 255), settings)
    assert first == second
    first.validate()
    assert len({pix for row in first.rows for pix in row}) > 1


def test_noise_fill_graymap_and_bitmap():
    gray = PixelBuffer.blank("P2", 8, 8, max_value=100)
    draw_perlin_noise(gray, 20, 80)
    assert all(20 <= pix <= 80 for row in gray.rows for pix in row)

    bits = PixelBuffer.blank("P1", 8, 8)
    draw_perlin_noise(bits, False, True, NoiseSettings(frequency=0.5))
    bits.validate()
