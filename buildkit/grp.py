"""
GRP archive parsing.

A GRP file is a flat, uncompressed container:
- Header (16 bytes): "KenSilverman" signature, int32 entry count
- Directory: count x (12-byte name, int32 size)
- Data: entry contents concatenated in directory order

Offsets are not stored; each entry starts where the previous one ends.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path

from buildkit.const import (
    GRP_DIR_ENTRY_SIZE,
    GRP_HEADER_SIZE,
    GRP_NAME_SIZE,
    GRP_SIGNATURE,
    GRP_SIGNATURE_SIZE,
)
from buildkit.errors import OutOfBoundsError, SignatureError
from buildkit.io.reader import Reader
from buildkit.log import log
from buildkit.model.build_map import BuildMap


def normalize_name(raw: bytes) -> str:
    """Normalize a raw directory name field.

    Everything from the first NUL byte on is dropped, even if non-zero bytes
    follow it.
    """
    raw = bytes(raw).split(b'\x00', 1)[0]
    return raw.decode('latin-1').strip().upper()


@dataclass(frozen=True)
class GrpEntry:
    """A named entry in a GRP archive."""

    name: str
    size: int  # int32
    offset: int  # derived from preceding sizes

    @property
    def extension(self) -> str:
        """Upper-case text after the last dot, or the whole name if there is no dot."""
        return self.name.rpartition('.')[2]


@dataclass(frozen=True)
class GrpArchive:
    """Parsed GRP archive.

    Entries are kept in directory order. ``slice`` hands out read-only views
    of the buffer the archive was parsed from; those views are only valid
    while that buffer is alive. Use ``read`` for an owned copy.
    """

    signature: str
    count: int
    entries: tuple[GrpEntry, ...]
    _data: memoryview = field(repr=False, compare=False)

    @classmethod
    def load(cls, path: Path) -> GrpArchive:
        """Load a GRP archive from disk.

        Args:
            path: Path to a .GRP file

        Returns:
            Parsed GrpArchive
        """
        return cls.from_bytes(path.read_bytes())

    @classmethod
    def from_bytes(cls, data: bytes | bytearray | memoryview) -> GrpArchive:
        """Parse the archive header and directory.

        Data-region bounds are not checked here; a bad entry only fails when
        it is sliced.

        Args:
            data: Archive contents

        Returns:
            Parsed GrpArchive

        Raises:
            SignatureError: the buffer does not start with the GRP signature
            TruncatedInputError: the directory runs past the end of the buffer
        """
        reader = Reader(data)

        signature = bytes(reader.read_bytes(GRP_SIGNATURE_SIZE)).decode('latin-1')
        if signature != GRP_SIGNATURE:
            raise SignatureError(f'Invalid GRP signature: {signature!r}')

        # A negative count leaves the directory empty
        count = reader.read_int32()

        offset = GRP_HEADER_SIZE + max(count, 0) * GRP_DIR_ENTRY_SIZE
        entries = []
        for _ in range(count):
            name = normalize_name(reader.read_bytes(GRP_NAME_SIZE))
            size = reader.read_int32()
            entries.append(GrpEntry(name=name, size=size, offset=offset))
            offset += size

        log.debug(f'Parsed GRP directory: {count} entries, data region ends at {offset} of {reader.size} bytes')

        return cls(
            signature=signature,
            count=count,
            entries=tuple(entries),
            _data=memoryview(data).cast('B').toreadonly(),
        )

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[GrpEntry]:
        return iter(self.entries)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.get(name) is not None

    def get(self, name: str) -> GrpEntry | None:
        """Find an entry by name, ignoring case.

        Returns:
            The first matching entry in directory order, or None
        """
        upper = name.upper()
        for entry in self.entries:
            if entry.name == upper:
                return entry
        return None

    def entries_with_extension(self, ext: str) -> list[GrpEntry]:
        """Get all entries with the given extension (e.g. 'map')."""
        ext = ext.lstrip('.').upper()
        return [entry for entry in self.entries if entry.extension == ext]

    def slice(self, entry: GrpEntry) -> memoryview:
        """Get a read-only view of an entry's bytes.

        Raises:
            OutOfBoundsError: the entry's range is outside the archive buffer
        """
        end = entry.offset + entry.size
        if entry.offset < 0 or entry.size < 0 or end > len(self._data):
            raise OutOfBoundsError(
                f'Entry {entry.name} range [{entry.offset}, {end}) exceeds archive size {len(self._data)}'
            )
        return self._data[entry.offset : end]

    def read(self, entry: GrpEntry) -> bytes:
        """Get an owned copy of an entry's bytes."""
        return bytes(self.slice(entry))

    def load_map(self, entry: GrpEntry | str) -> BuildMap:
        """Decode a map stored in the archive.

        Args:
            entry: The entry, or its name

        Returns:
            Parsed BuildMap
        """
        if isinstance(entry, str):
            found = self.get(entry)
            if found is None:
                raise KeyError(f'No entry named {entry!r} in archive')
            entry = found
        return BuildMap.from_bytes(self.slice(entry))
