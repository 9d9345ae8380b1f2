"""Low-level binary reader with typed read methods and a moving cursor."""

import math
import struct


class BinaryReader:
    """Wraps a bytes buffer with typed reads and a moving cursor.

    The user file stores its doubles big-endian, so the multi-byte reads
    here are big-endian, unlike most PC formats. Parsers seek() to each
    fixed field offset and read from there; a read that would run past the
    end of the buffer raises ValueError instead of returning short data.
    """

    __slots__ = ("_data", "_pos")

    def __init__(self, data: bytes) -> None:
        self._data = data
        self._pos = 0

    def _read(self, size: int) -> bytes:
        if self._pos + size > len(self._data):
            raise ValueError(
                f"Read of {size} bytes at offset {self._pos} "
                f"would exceed boundary at {len(self._data)}"
            )
        chunk = self._data[self._pos : self._pos + size]
        self._pos += size
        return chunk

    def uint8(self) -> int:
        return self._read(1)[0]

    def float64_be(self) -> float:
        return struct.unpack(">d", self._read(8))[0]

    def floored_float64_be(self) -> float:
        """Read a big-endian double and truncate it to a whole number.

        The result stays a float; NaN and infinities pass through unchanged.
        """
        value = self.float64_be()
        if math.isfinite(value):
            return float(math.floor(value))
        return value

    def seek(self, offset: int) -> None:
        """Seek to an absolute position within the buffer."""
        if offset < 0 or offset > len(self._data):
            raise ValueError(f"Seek to {offset} is outside bounds [0, {len(self._data)}]")
        self._pos = offset
