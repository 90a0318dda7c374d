from .buffer import PixelBuffer, Point, Rgb
from .codec import decode, decode_bytes, encode, encode_bytes, read_file, write_file
from .errors import (
    CorruptBufferError,
    FormatError,
    InvalidDimensionError,
    InvalidMaxValueError,
    InvalidVariantError,
    NetpbmError,
    PixelDataError,
    UnsupportedOperationError,
)
from .formats import FormatRegistry, FormatVariant

__version__ = "0.1.0"

__all__ = [
    "CorruptBufferError",
    "FormatError",
    "FormatRegistry",
    "FormatVariant",
    "InvalidDimensionError",
    "InvalidMaxValueError",
    "InvalidVariantError",
    "NetpbmError",
    "PixelBuffer",
    "PixelDataError",
    "Point",
    "Rgb",
    "UnsupportedOperationError",
    "decode",
    "decode_bytes",
    "encode",
    "encode_bytes",
    "read_file",
    "write_file",
]
