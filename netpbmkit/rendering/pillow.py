from __future__ import annotations

from pathlib import Path
from typing import List, Union

from PIL import Image, ImageOps

from ..buffer import Pixel, PixelBuffer, Rgb
from ..formats import BITMAP, GRAYMAP, PIXMAP, FormatRegistry


def _to_display(value: int, max_value: int) -> int:
    if max_value == 255:
        return value
    return (2 * value * 255 + max_value) // (2 * max_value)


def to_image(buffer: PixelBuffer) -> Image.Image:
    """Render a buffer as a Pillow image; set bitmap pixels become black."""
    buffer.validate()
    size = (buffer.width, buffer.height)
    if buffer.kind == BITMAP:
        img = Image.new("1", size)
        img.putdata([0 if pix else 255 for row in buffer.rows for pix in row])
        return img
    top = buffer.max_value
    if buffer.kind == GRAYMAP:
        img = Image.new("L", size)
        img.putdata([_to_display(pix, top) for row in buffer.rows for pix in row])
        return img
    img = Image.new("RGB", size)
    img.putdata([tuple(_to_display(c, top) for c in pix) for row in buffer.rows for pix in row])
    return img


def _normalize_image(img: Image.Image) -> Image.Image:
    if img.mode not in ("RGB", "L", "1"):
        return img.convert("RGB")
    return img


def _rows(data: List[Pixel], width: int) -> List[List[Pixel]]:
    return [data[i : i + width] for i in range(0, len(data), width)]


def from_image(img: Image.Image, binary: bool = True) -> PixelBuffer:
    """Build a buffer from a Pillow image (mode ``1``, ``L`` or anything convertible to RGB)."""
    img = _normalize_image(img)
    width, height = img.size
    registry = FormatRegistry.load()
    data = list(img.getdata())
    if img.mode == "1":
        pixels: List[Pixel] = [p == 0 for p in data]
        kind, max_value = BITMAP, 1
    elif img.mode == "L":
        pixels = list(data)
        kind, max_value = GRAYMAP, 255
    else:
        pixels = [Rgb(*p[:3]) for p in data]
        kind, max_value = PIXMAP, 255
    magic = registry.for_family(kind, binary).magic
    return PixelBuffer(kind, width, height, max_value, magic, _rows(pixels, width))


def load_image(path: Union[str, Path], binary: bool = True) -> PixelBuffer:
    with Image.open(path) as img:
        img = ImageOps.exif_transpose(img)
        return from_image(img.copy(), binary)


def save_image(buffer: PixelBuffer, path: Union[str, Path]) -> None:
    to_image(buffer).save(path)
