from __future__ import annotations

import io
import logging
from typing import BinaryIO, List, Optional

from ..buffer import Pixel, PixelBuffer
from ..errors import InvalidVariantError
from ..formats import FormatRegistry, FormatVariant
from .packing import pack_row
from .stream import ByteWriter

logger = logging.getLogger(__name__)


def _resolve_variant(buffer: PixelBuffer, registry: FormatRegistry) -> FormatVariant:
    variant = registry.require(buffer.variant)
    if variant.family != buffer.kind:
        raise InvalidVariantError(f"Variant {variant.magic} cannot encode {buffer.kind} pixels")
    return variant


def _text_row(row: List[Pixel], variant: FormatVariant) -> str:
    if variant.is_bitmap:
        return " ".join("1" if pix else "0" for pix in row)
    if variant.channels == 1:
        return " ".join(str(pix) for pix in row)
    return " ".join(f"{pix.r} {pix.g} {pix.b}" for pix in row)


def _binary_row(row: List[Pixel], variant: FormatVariant) -> bytes:
    if variant.is_bitmap:
        return pack_row(row)
    if variant.channels == 1:
        return bytes(row)
    out = bytearray()
    for pix in row:
        out += bytes((pix.r, pix.g, pix.b))
    return bytes(out)


def encode(buffer: PixelBuffer, sink: BinaryIO, registry: Optional[FormatRegistry] = None) -> None:
    """Write ``buffer`` to ``sink`` using the encoding of ``buffer.variant``."""
    registry = registry or FormatRegistry.load()
    variant = _resolve_variant(buffer, registry)
    buffer.validate()
    writer = ByteWriter(sink)
    writer.write_text(f"{variant.magic}\n{buffer.width} {buffer.height}\n")
    if variant.has_max_value:
        writer.write_text(f"{buffer.max_value}\n")
    for row in buffer.rows:
        if variant.binary:
            writer.write(_binary_row(row, variant))
        else:
            writer.write_text(_text_row(row, variant) + "\n")
    logger.debug("Encoded %s %dx%d", variant.magic, buffer.width, buffer.height)
    writer.flush()


def encode_bytes(buffer: PixelBuffer, registry: Optional[FormatRegistry] = None) -> bytes:
    sink = io.BytesIO()
    encode(buffer, sink, registry)
    return sink.getvalue()
