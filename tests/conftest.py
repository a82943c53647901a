"""
Pytest configuration and shared fixtures.
"""

import struct
from collections.abc import Callable

import pytest

from buildkit.model.build_map import BuildMap
from buildkit.model.factory import new_square_map


GRP_SIGNATURE = b'KenSilverman'


def build_grp(directory: list[tuple[bytes, int]], data: bytes = b'', signature: bytes = GRP_SIGNATURE) -> bytes:
    """Assemble GRP bytes from (raw name, size) directory entries and a data region."""
    out = bytearray(signature)
    out += struct.pack('<i', len(directory))
    for name, size in directory:
        out += name.ljust(12, b'\x00')[:12]
        out += struct.pack('<i', size)
    out += data
    return bytes(out)


def build_map_header(version: int, counts: tuple[int, int, int] | None = None) -> bytes:
    """Map header plus start position, optionally followed by three empty table counts."""
    out = struct.pack('<I', version) + struct.pack('<iiihh', 100, -200, 300, 512, 0)
    if counts is not None:
        out += struct.pack('<HHH', *counts)
    return out


@pytest.fixture()
def make_grp() -> Callable[..., bytes]:
    """Return the GRP builder."""
    return build_grp


@pytest.fixture()
def square_map() -> BuildMap:
    """A fresh single-sector map."""
    return new_square_map()


@pytest.fixture()
def square_map_bytes(square_map: BuildMap) -> bytes:
    """Serialized single-sector map."""
    return square_map.to_bytes()


@pytest.fixture()
def make_map_header() -> Callable[..., bytes]:
    """Return the map header builder."""
    return build_map_header
