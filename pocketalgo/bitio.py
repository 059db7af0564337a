"""Bit-level reading and writing on top of binary streams."""

from __future__ import annotations

from typing import BinaryIO


class BitWriter:
    """Packs single bits into bytes, most significant bit first."""

    def __init__(self, stream: BinaryIO) -> None:
        self._stream = stream
        self._buffer = 0
        self._filled = 0

    def write_bit(self, bit: int) -> None:
        """Append one bit; a full byte is written to the stream at once."""
        self._buffer = ((self._buffer << 1) | (int(bit) & 1)) & 0xFF
        self._filled += 1
        if self._filled == 8:
            self._stream.write(bytes((self._buffer,)))
            self._buffer = 0
            self._filled = 0

    def flush(self) -> None:
        """Write any pending bits, padding the last byte with zeros."""
        if self._filled:
            self._buffer = (self._buffer << (8 - self._filled)) & 0xFF
            self._stream.write(bytes((self._buffer,)))
            self._buffer = 0
            self._filled = 0


class BitReader:
    """Reads single bits from a stream, most significant bit first."""

    def __init__(self, stream: BinaryIO) -> None:
        self._stream = stream
        self._buffer = 0
        self._left = 0

    def read_bit(self) -> int:
        """Return the next bit; raise EOFError when the stream runs out."""
        if self._left == 0:
            chunk = self._stream.read(1)
            if not chunk:
                raise EOFError("Unexpected EOF")
            self._buffer = chunk[0]
            self._left = 8
        self._left -= 1
        return (self._buffer >> self._left) & 1