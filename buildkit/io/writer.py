"""Binary writer over a pre-sized output buffer."""

from __future__ import annotations

import struct

from buildkit.errors import BufferOverflowError


class Writer:
    """Sequential little-endian writer into a fixed-size buffer.

    Integers are masked to the field width before packing, so values outside
    the field's range wrap around the same way the legacy tools wrote them.
    """

    def __init__(self, size: int) -> None:
        self._buffer = bytearray(size)
        self._position = 0

    @property
    def position(self) -> int:
        """Current write position."""
        return self._position

    @property
    def size(self) -> int:
        """Total size of the output buffer."""
        return len(self._buffer)

    @property
    def remaining(self) -> int:
        """Bytes left before the buffer is full."""
        return len(self._buffer) - self._position

    def to_bytes(self) -> bytes:
        """Get all written data as bytes."""
        return bytes(self._buffer)

    def _reserve(self, count: int) -> int:
        if self._position + count > len(self._buffer):
            raise BufferOverflowError(
                f'Cannot write {count} bytes at position {self._position}, only {self.remaining} remaining'
            )
        start = self._position
        self._position += count
        return start

    def _pack(self, fmt: str, width: int, value: int) -> None:
        start = self._reserve(width)
        struct.pack_into(fmt, self._buffer, start, value & ((1 << (width * 8)) - 1))

    def write_bytes(self, data: bytes) -> None:
        """Write raw bytes."""
        start = self._reserve(len(data))
        self._buffer[start : start + len(data)] = data

    def write_int8(self, value: int) -> None:
        """Write signed 8-bit integer."""
        self._pack('<B', 1, value)

    def write_uint8(self, value: int) -> None:
        """Write unsigned 8-bit integer."""
        self._pack('<B', 1, value)

    def write_int16(self, value: int) -> None:
        """Write signed 16-bit integer (little-endian)."""
        self._pack('<H', 2, value)

    def write_uint16(self, value: int) -> None:
        """Write unsigned 16-bit integer (little-endian)."""
        self._pack('<H', 2, value)

    def write_int32(self, value: int) -> None:
        """Write signed 32-bit integer (little-endian)."""
        self._pack('<I', 4, value)

    def write_uint32(self, value: int) -> None:
        """Write unsigned 32-bit integer (little-endian)."""
        self._pack('<I', 4, value)
