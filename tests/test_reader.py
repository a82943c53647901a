"""
Tests for the sequential binary reader.
"""

import pytest

from buildkit.errors import TruncatedInputError
from buildkit.io.reader import Reader


def test_read_little_endian_fields() -> None:
    """Test each integer width and signedness."""
    data = b'\xff' + b'\xff' + b'\x00\x80' + b'\x00\x80' + b'\xfe\xff\xff\xff' + b'\xfe\xff\xff\xff'
    reader = Reader(data)

    assert reader.read_int8() == -1
    assert reader.read_uint8() == 255
    assert reader.read_int16() == -32768
    assert reader.read_uint16() == 32768
    assert reader.read_int32() == -2
    assert reader.read_uint32() == 0xFFFFFFFE
    assert reader.remaining == 0


def test_position_advances_by_width() -> None:
    reader = Reader(bytes(7))

    reader.read_uint8()
    assert reader.position == 1
    reader.read_int16()
    assert reader.position == 3
    reader.read_uint32()
    assert reader.position == 7


def test_read_past_end_raises() -> None:
    """Test that a short read fails and leaves the position unchanged."""
    reader = Reader(b'\x01\x02\x03')
    reader.read_uint8()

    with pytest.raises(TruncatedInputError):
        reader.read_int32()

    assert reader.position == 1
    assert reader.read_uint16() == 0x0302


def test_reads_from_memoryview_slice() -> None:
    """Test reading from a view into a larger buffer."""
    data = b'\x00\x00\x2a\x00\x00\x00'
    reader = Reader(memoryview(data)[2:])

    assert reader.size == 4
    assert reader.read_int32() == 42


def test_read_bytes() -> None:
    reader = Reader(b'abcdef')

    assert bytes(reader.read_bytes(4)) == b'abcd'
    with pytest.raises(TruncatedInputError):
        reader.read_bytes(3)
