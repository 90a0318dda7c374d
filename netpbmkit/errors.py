from __future__ import annotations

from typing import Optional


class NetpbmError(ValueError):
    """Base class for every error raised by netpbmkit."""


class FormatError(NetpbmError):
    """Unrecognized magic number or malformed header."""


class PixelDataError(NetpbmError):
    """Pixel payload is shorter than the header implies or holds a bad token."""

    def __init__(
        self,
        message: str,
        row: Optional[int] = None,
        expected: Optional[int] = None,
        actual: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.row = row
        self.expected = expected
        self.actual = actual


class InvalidDimensionError(NetpbmError):
    """Width or height is not a positive integer."""


class InvalidVariantError(NetpbmError):
    """Variant tag is unknown or does not fit the buffer's pixel kind."""


class InvalidMaxValueError(NetpbmError):
    """Max value lies outside the supported 1..255 range."""


class UnsupportedOperationError(NetpbmError):
    """Operation is not defined for the buffer's pixel kind."""


class CorruptBufferError(NetpbmError):
    """Grid shape or pixel values disagree with the buffer metadata."""


__all__ = [
    "CorruptBufferError",
    "FormatError",
    "InvalidDimensionError",
    "InvalidMaxValueError",
    "InvalidVariantError",
    "NetpbmError",
    "PixelDataError",
    "UnsupportedOperationError",
]
