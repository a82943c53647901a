"""Codecs for BUILD engine maps and GRP archives."""

from buildkit.errors import (
    BufferOverflowError,
    DecodeError,
    OutOfBoundsError,
    SignatureError,
    TruncatedInputError,
    VersionError,
)
from buildkit.grp import GrpArchive, GrpEntry
from buildkit.model import BuildMap, Sector, Sprite, StartPosition, Wall, new_square_map

__all__ = [
    'BufferOverflowError',
    'BuildMap',
    'DecodeError',
    'GrpArchive',
    'GrpEntry',
    'OutOfBoundsError',
    'Sector',
    'SignatureError',
    'Sprite',
    'StartPosition',
    'TruncatedInputError',
    'VersionError',
    'Wall',
    'new_square_map',
]
