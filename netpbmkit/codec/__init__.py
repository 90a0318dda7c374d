from __future__ import annotations

from pathlib import Path
from typing import Union

from ..buffer import PixelBuffer
from .decode import Header, decode, read_header, read_payload
from .encode import encode, encode_bytes
from .packing import pack_row, unpack_row
from .stream import ByteReader, ByteWriter


def decode_bytes(data: bytes) -> PixelBuffer:
    return decode(data)


def read_file(path: Union[str, Path]) -> PixelBuffer:
    with open(path, "rb") as handle:
        return decode(handle)


def write_file(buffer: PixelBuffer, path: Union[str, Path]) -> None:
    data = encode_bytes(buffer)
    with open(path, "wb") as handle:
        handle.write(data)


__all__ = [
    "ByteReader",
    "ByteWriter",
    "Header",
    "decode",
    "decode_bytes",
    "encode",
    "encode_bytes",
    "pack_row",
    "read_file",
    "read_header",
    "read_payload",
    "unpack_row",
    "write_file",
]
