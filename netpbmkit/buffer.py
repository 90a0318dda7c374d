from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple, Union

from .errors import CorruptBufferError, InvalidDimensionError, InvalidMaxValueError
from .formats import BITMAP, GRAYMAP, PIXMAP, lookup

MAX_CHANNEL_VALUE = 255
DEFAULT_MAX_VALUE = 255


@dataclass(frozen=True)
class Rgb:
    r: int
    g: int
    b: int

    def __iter__(self) -> Iterator[int]:
        return iter((self.r, self.g, self.b))


@dataclass(frozen=True)
class Point:
    x: int
    y: int


Pixel = Union[bool, int, Rgb]


def check_max_value(max_value: int) -> int:
    if isinstance(max_value, bool) or not isinstance(max_value, int):
        raise InvalidMaxValueError(f"Max value must be an integer, got {max_value!r}")
    if not 1 <= max_value <= MAX_CHANNEL_VALUE:
        raise InvalidMaxValueError(f"Max value must be within 1..{MAX_CHANNEL_VALUE}, got {max_value}")
    return max_value


def _is_channel(value: object, max_value: int) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and 0 <= value <= max_value


def is_valid_pixel(kind: str, max_value: int, value: object) -> bool:
    if kind == BITMAP:
        return isinstance(value, bool)
    if kind == GRAYMAP:
        return _is_channel(value, max_value)
    if kind == PIXMAP:
        return isinstance(value, Rgb) and all(_is_channel(c, max_value) for c in value)
    return False


def default_pixel(kind: str) -> Pixel:
    if kind == BITMAP:
        return False
    if kind == GRAYMAP:
        return 0
    return Rgb(0, 0, 0)


@dataclass
class PixelBuffer:
    """Row-major raster for one of the bitmap, graymap or pixmap families.

    ``variant`` only selects the wire encoding; ``kind`` fixes the pixel type
    held in ``rows``: ``bool`` for bitmaps, ``int`` for graymaps and
    :class:`Rgb` for pixmaps.
    """

    kind: str
    width: int
    height: int
    max_value: int
    variant: str
    rows: List[List[Pixel]] = field(default_factory=list)

    @classmethod
    def blank(
        cls,
        variant: str,
        width: int,
        height: int,
        max_value: int = DEFAULT_MAX_VALUE,
        fill: Optional[Pixel] = None,
    ) -> "PixelBuffer":
        """Create a buffer of the given variant with every pixel set to ``fill``."""
        fmt = lookup(variant)
        check_dimensions(width, height)
        if fmt.is_bitmap:
            max_value = 1
        else:
            check_max_value(max_value)
        if fill is None:
            fill = default_pixel(fmt.family)
        if not is_valid_pixel(fmt.family, max_value, fill):
            raise CorruptBufferError(f"Fill value {fill!r} is not a valid {fmt.family} pixel")
        rows = [[fill] * width for _ in range(height)]
        return cls(fmt.family, width, height, max_value, variant, rows)

    def size(self) -> Tuple[int, int]:
        return self.width, self.height

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def at(self, x: int, y: int) -> Pixel:
        if not self.contains(x, y):
            raise IndexError(f"Pixel ({x}, {y}) outside {self.width}x{self.height} buffer")
        return self.rows[y][x]

    def set(self, x: int, y: int, value: Pixel) -> None:
        if not self.contains(x, y):
            raise IndexError(f"Pixel ({x}, {y}) outside {self.width}x{self.height} buffer")
        if not is_valid_pixel(self.kind, self.max_value, value):
            raise CorruptBufferError(f"{value!r} is not a valid {self.kind} pixel (max {self.max_value})")
        self.rows[y][x] = value

    def copy(self) -> "PixelBuffer":
        return PixelBuffer(
            self.kind,
            self.width,
            self.height,
            self.max_value,
            self.variant,
            [list(row) for row in self.rows],
        )

    def validate(self) -> None:
        """Check the grid against width, height, kind and max value."""
        check_dimensions(self.width, self.height)
        if self.kind not in (BITMAP, GRAYMAP, PIXMAP):
            raise CorruptBufferError(f"Unknown pixel kind: {self.kind!r}")
        if self.kind == BITMAP:
            if self.max_value != 1:
                raise CorruptBufferError(f"Bitmap max value must be 1, got {self.max_value}")
        else:
            check_max_value(self.max_value)
        if len(self.rows) != self.height:
            raise CorruptBufferError(f"Expected {self.height} rows, found {len(self.rows)}")
        for y, row in enumerate(self.rows):
            if len(row) != self.width:
                raise CorruptBufferError(f"Row {y} has {len(row)} pixels, expected {self.width}")
            for x, value in enumerate(row):
                if not is_valid_pixel(self.kind, self.max_value, value):
                    raise CorruptBufferError(f"Invalid {self.kind} pixel {value!r} at ({x}, {y})")


def check_dimensions(width: int, height: int) -> None:
    for label, value in (("Width", width), ("Height", height)):
        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            raise InvalidDimensionError(f"{label} must be a positive integer, got {value!r}")
