"""Reading fixed-size fields from a byte payload."""

from __future__ import annotations

__all__ = ["DecodeError", "ByteReader"]

_NOT_ENOUGH = "Not enough bytes to fill the buffer"


class DecodeError(ValueError):
    """Raised when a payload is too short for the field being read."""


class ByteReader:
    """A cursor over a byte payload that consumes fields from the front.

    A read that fails leaves the reader where it was.
    """

    def __init__(self, data: bytes | bytearray | memoryview) -> None:
        self._data = bytes(data)
        self._pos = 0

    def __len__(self) -> int:
        return len(self._data) - self._pos

    def _take(self, size: int) -> bytes:
        if size > len(self):
            raise DecodeError(_NOT_ENOUGH)
        chunk = self._data[self._pos : self._pos + size]
        self._pos += size
        return chunk

    def read_u8(self) -> int:
        """Consume and return a single byte as an integer."""
        return self._take(1)[0]

    def read_bytes32(self) -> bytes:
        """Consume and return the next 32 bytes."""
        return self._take(32)

    def read_rest(self) -> bytes:
        """Consume and return everything that is left."""
        return self._take(len(self))