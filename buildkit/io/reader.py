"""Sequential binary reader with position tracking."""

from __future__ import annotations

import struct

from buildkit.errors import TruncatedInputError


class Reader:
    """Forward-only little-endian reader over a bytes-like buffer.

    Accepts ``bytes``, ``bytearray`` or ``memoryview`` so that records can be
    decoded directly from an archive slice without copying.
    """

    def __init__(self, data: bytes | bytearray | memoryview) -> None:
        self._data = memoryview(data).cast('B')
        self._position = 0

    @property
    def position(self) -> int:
        """Current read position."""
        return self._position

    @property
    def size(self) -> int:
        """Total size of data."""
        return len(self._data)

    @property
    def remaining(self) -> int:
        """Bytes remaining to read."""
        return len(self._data) - self._position

    def read_bytes(self, count: int) -> memoryview:
        """Read raw bytes as a view into the underlying buffer."""
        if count < 0 or self._position + count > len(self._data):
            raise TruncatedInputError(
                f'Cannot read {count} bytes at position {self._position}, only {self.remaining} remaining'
            )
        result = self._data[self._position : self._position + count]
        self._position += count
        return result

    def _unpack(self, fmt: str, width: int) -> int:
        return struct.unpack(fmt, self.read_bytes(width))[0]

    def read_int8(self) -> int:
        """Read signed 8-bit integer."""
        return self._unpack('<b', 1)

    def read_uint8(self) -> int:
        """Read unsigned 8-bit integer."""
        return self._unpack('<B', 1)

    def read_int16(self) -> int:
        """Read signed 16-bit integer (little-endian)."""
        return self._unpack('<h', 2)

    def read_uint16(self) -> int:
        """Read unsigned 16-bit integer (little-endian)."""
        return self._unpack('<H', 2)

    def read_int32(self) -> int:
        """Read signed 32-bit integer (little-endian)."""
        return self._unpack('<i', 4)

    def read_uint32(self) -> int:
        """Read unsigned 32-bit integer (little-endian)."""
        return self._unpack('<I', 4)
