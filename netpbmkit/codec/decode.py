from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

from ..buffer import MAX_CHANNEL_VALUE, Pixel, PixelBuffer, Rgb
from ..errors import FormatError, PixelDataError
from ..formats import FormatRegistry, FormatVariant
from .packing import unpack_row
from .stream import ByteReader, Source

logger = logging.getLogger(__name__)

DIGIT_ZERO = ord("0")
DIGIT_ONE = ord("1")


@dataclass(frozen=True)
class Header:
    variant: FormatVariant
    width: int
    height: int
    max_value: int


def _header_int(reader: ByteReader, label: str) -> int:
    token = reader.read_token()
    if token is None:
        raise FormatError(f"Unexpected end of stream while reading {label}")
    if not token.isdigit():
        raise FormatError(f"Invalid {label}: {token!r}")
    return int(token)


def read_header(reader: ByteReader, registry: FormatRegistry) -> Header:
    token = reader.read_token()
    if token is None:
        raise FormatError("Empty stream: missing magic number")
    magic = token.decode("ascii", errors="replace")
    variant = registry.require_decodable(magic)
    width = _header_int(reader, "width")
    height = _header_int(reader, "height")
    if width <= 0 or height <= 0:
        raise FormatError(f"Image dimensions must be positive, got {width}x{height}")
    max_value = 1
    if variant.has_max_value:
        max_value = _header_int(reader, "max value")
        if not 1 <= max_value <= MAX_CHANNEL_VALUE:
            raise FormatError(f"Max value must be within 1..{MAX_CHANNEL_VALUE}, got {max_value}")
    logger.debug("Header %s %dx%d max=%d at offset %d", magic, width, height, max_value, reader.offset)
    return Header(variant, width, height, max_value)


def _read_text_bitmap_row(reader: ByteReader, header: Header, y: int) -> List[Pixel]:
    row: List[Pixel] = []
    for x in range(header.width):
        value = reader.read_digit()
        if value is None:
            raise PixelDataError(
                f"Row {y}: expected {header.width} values, found {x}",
                row=y,
                expected=header.width,
                actual=x,
            )
        if value == DIGIT_ONE:
            row.append(True)
        elif value == DIGIT_ZERO:
            row.append(False)
        else:
            raise PixelDataError(f"Row {y}: invalid bitmap value {chr(value)!r} at column {x}", row=y)
    return row


def _read_text_samples(reader: ByteReader, header: Header, y: int) -> List[int]:
    count = header.width * header.variant.channels
    samples: List[int] = []
    for _ in range(count):
        token = reader.read_token()
        if token is None:
            raise PixelDataError(
                f"Row {y}: expected {count} values, found {len(samples)}",
                row=y,
                expected=count,
                actual=len(samples),
            )
        if not token.isdigit():
            raise PixelDataError(f"Row {y}: invalid sample {token!r}", row=y)
        samples.append(int(token))
    return samples


def _read_binary_samples(reader: ByteReader, header: Header, y: int) -> bytes:
    expected = header.variant.row_bytes(header.width)
    data = reader.read(expected)
    if len(data) < expected:
        raise PixelDataError(
            f"Row {y}: expected {expected} bytes, got {len(data)}",
            row=y,
            expected=expected,
            actual=len(data),
        )
    return data


def _samples_to_row(samples: Sequence[int], header: Header, y: int) -> List[Pixel]:
    for sample in samples:
        if sample > header.max_value:
            raise PixelDataError(f"Row {y}: sample {sample} exceeds max value {header.max_value}", row=y)
    if header.variant.channels == 1:
        return list(samples)
    return [Rgb(samples[i], samples[i + 1], samples[i + 2]) for i in range(0, len(samples), 3)]


def read_payload(reader: ByteReader, header: Header) -> List[List[Pixel]]:
    variant = header.variant
    if variant.binary:
        logger.debug("Reading %d payload bytes", variant.row_bytes(header.width) * header.height)
    rows: List[List[Pixel]] = []
    for y in range(header.height):
        if variant.is_bitmap and variant.binary:
            rows.append(unpack_row(_read_binary_samples(reader, header, y), header.width))
        elif variant.is_bitmap:
            rows.append(_read_text_bitmap_row(reader, header, y))
        elif variant.binary:
            rows.append(_samples_to_row(_read_binary_samples(reader, header, y), header, y))
        else:
            rows.append(_samples_to_row(_read_text_samples(reader, header, y), header, y))
    return rows


def decode(source: Source, registry: Optional[FormatRegistry] = None) -> PixelBuffer:
    """Decode one Netpbm image from a byte string or binary stream."""
    registry = registry or FormatRegistry.load()
    reader = ByteReader(source)
    header = read_header(reader, registry)
    rows = read_payload(reader, header)
    return PixelBuffer(
        header.variant.family,
        header.width,
        header.height,
        header.max_value,
        header.variant.magic,
        rows,
    )
