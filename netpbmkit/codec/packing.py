from __future__ import annotations

from typing import List, Sequence


def pack_row(line: Sequence[bool]) -> bytes:
    """Pack a bitmap row MSB-first, zero-padding the final byte."""
    out = bytearray()
    for i in range(0, len(line), 8):
        chunk = line[i : i + 8]
        value = 0
        for bit, pix in enumerate(chunk):
            if pix:
                value |= 1 << (7 - bit)
        out.append(value)
    return bytes(out)


def unpack_row(data: bytes, width: int) -> List[bool]:
    """Expand ``width`` pixels from MSB-first packed bytes; padding bits are ignored."""
    return [bool((data[x >> 3] >> (7 - (x & 7))) & 1) for x in range(width)]
