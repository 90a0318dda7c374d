from __future__ import annotations

import io
from typing import BinaryIO, Optional, Union

WHITESPACE = frozenset(b" \t\n\r\v\f")
COMMENT = ord("#")
DEFAULT_CHUNK_SIZE = 1 << 16

Source = Union[bytes, bytearray, memoryview, BinaryIO]


class ByteReader:
    """Buffered sequential reader over a byte string or binary stream."""

    def __init__(self, source: Source, chunk_size: int = DEFAULT_CHUNK_SIZE) -> None:
        if isinstance(source, (bytes, bytearray, memoryview)):
            source = io.BytesIO(bytes(source))
        self._stream = source
        self._chunk_size = chunk_size
        self._buf = b""
        self._pos = 0
        self._eof = False
        self.offset = 0

    def _fill(self) -> bool:
        if self._eof:
            return False
        chunk = self._stream.read(self._chunk_size)
        if not chunk:
            self._eof = True
            return False
        self._buf = self._buf[self._pos :] + chunk
        self._pos = 0
        return True

    def read_byte(self) -> Optional[int]:
        if self._pos >= len(self._buf) and not self._fill():
            return None
        value = self._buf[self._pos]
        self._pos += 1
        self.offset += 1
        return value

    def peek_byte(self) -> Optional[int]:
        if self._pos >= len(self._buf) and not self._fill():
            return None
        return self._buf[self._pos]

    def _skip_lf(self) -> None:
        if self.peek_byte() == 0x0A:
            self.read_byte()

    def read(self, size: int) -> bytes:
        """Read up to ``size`` bytes; fewer are returned only at end of stream."""
        while len(self._buf) - self._pos < size and self._fill():
            pass
        data = self._buf[self._pos : self._pos + size]
        self._pos += len(data)
        self.offset += len(data)
        return data

    def skip_line(self) -> None:
        while True:
            value = self.read_byte()
            if value == 0x0D:
                self._skip_lf()
                return
            if value is None or value == 0x0A:
                return

    def read_token(self) -> Optional[bytes]:
        """Return the next whitespace-delimited token, skipping ``#`` comments.

        The single whitespace byte (or comment line) that terminates the
        token is consumed, a CR LF pair counting as one byte, so a binary
        payload starts right after it.
        """
        while True:
            value = self.read_byte()
            if value is None:
                return None
            if value == COMMENT:
                self.skip_line()
                continue
            if value not in WHITESPACE:
                break
        token = bytearray([value])
        while True:
            value = self.read_byte()
            if value == 0x0D:
                self._skip_lf()
                break
            if value is None or value in WHITESPACE:
                break
            if value == COMMENT:
                self.skip_line()
                break
            token.append(value)
        return bytes(token)

    def read_digit(self) -> Optional[int]:
        """Return the next non-whitespace byte, skipping comments."""
        while True:
            value = self.read_byte()
            if value is None:
                return None
            if value == COMMENT:
                self.skip_line()
                continue
            if value not in WHITESPACE:
                return value


class ByteWriter:
    """Accumulates output and writes it to the sink on :meth:`flush`."""

    def __init__(self, sink: BinaryIO) -> None:
        self._sink = sink
        self._pending = bytearray()

    def write(self, data: bytes) -> None:
        self._pending += data

    def write_text(self, text: str) -> None:
        self._pending += text.encode("ascii")

    def flush(self) -> None:
        if self._pending:
            self._sink.write(bytes(self._pending))
            self._pending.clear()
        flush = getattr(self._sink, "flush", None)
        if flush is not None:
            flush()
