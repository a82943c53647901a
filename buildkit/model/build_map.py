"""BuildMap - top-level entry point for BUILD .MAP files."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from buildkit.const import MAP_HEADER_SIZE, MAP_VERSION_MAX, MAP_VERSION_MIN, MAX_RECORDS
from buildkit.errors import VersionError
from buildkit.io.reader import Reader
from buildkit.io.writer import Writer
from buildkit.log import log
from buildkit.model.records import Sector, Sprite, StartPosition, Wall


@dataclass(frozen=True)
class BuildMap:
    """Complete BUILD map: header, start position and the three record tables.

    Records reference each other by index (``wallptr``, ``point2``,
    ``nextwall``, ``nextsector``, ``sectnum``) with -1 meaning none. Those
    indices are carried through untouched and never validated here.
    """

    version: int  # uint32
    start: StartPosition
    sectors: tuple[Sector, ...] = ()
    walls: tuple[Wall, ...] = ()
    sprites: tuple[Sprite, ...] = ()

    def __post_init__(self) -> None:
        # Accept any sequence but store tuples so equality and immutability hold
        object.__setattr__(self, 'sectors', tuple(self.sectors))
        object.__setattr__(self, 'walls', tuple(self.walls))
        object.__setattr__(self, 'sprites', tuple(self.sprites))

    @classmethod
    def load(cls, path: Path) -> BuildMap:
        """Load a map file from disk.

        Args:
            path: Path to a .MAP file

        Returns:
            Parsed BuildMap
        """
        return cls.from_bytes(path.read_bytes())

    @classmethod
    def from_bytes(cls, data: bytes | bytearray | memoryview) -> BuildMap:
        """Parse a map from raw bytes.

        Args:
            data: Map file contents, or an archive slice

        Returns:
            Parsed BuildMap

        Raises:
            VersionError: version is outside the supported range
            TruncatedInputError: a table needs more bytes than are available
        """
        reader = Reader(data)

        version = reader.read_uint32()
        if version < MAP_VERSION_MIN or version > MAP_VERSION_MAX:
            raise VersionError(
                f'Unexpected BUILD map version: {version} (supported {MAP_VERSION_MIN}..{MAP_VERSION_MAX})'
            )

        start = StartPosition.read(reader)

        num_sectors = reader.read_uint16()
        sectors = tuple(Sector.read(reader) for _ in range(num_sectors))

        num_walls = reader.read_uint16()
        walls = tuple(Wall.read(reader) for _ in range(num_walls))

        num_sprites = reader.read_uint16()
        sprites = tuple(Sprite.read(reader) for _ in range(num_sprites))

        log.debug(
            f'Decoded map v{version}: {num_sectors} sectors, {num_walls} walls, {num_sprites} sprites '
            f'({reader.position} of {reader.size} bytes)'
        )

        return cls(version=version, start=start, sectors=sectors, walls=walls, sprites=sprites)

    @property
    def encoded_size(self) -> int:
        """Exact size in bytes of the serialized map."""
        return (
            MAP_HEADER_SIZE
            + 2
            + len(self.sectors) * Sector.SIZE
            + 2
            + len(self.walls) * Wall.SIZE
            + 2
            + len(self.sprites) * Sprite.SIZE
        )

    def to_bytes(self) -> bytes:
        """Serialize to map file bytes.

        Field values are written with fixed-width wrap-around; only the table
        lengths are checked since they must fit the uint16 counts.

        Returns:
            Map file bytes
        """
        for table_name, table in (('sectors', self.sectors), ('walls', self.walls), ('sprites', self.sprites)):
            if len(table) > MAX_RECORDS:
                raise ValueError(f'Too many {table_name}: {len(table)} (max {MAX_RECORDS})')

        writer = Writer(self.encoded_size)

        writer.write_uint32(self.version)
        self.start.write(writer)

        writer.write_uint16(len(self.sectors))
        for sector in self.sectors:
            sector.write(writer)

        writer.write_uint16(len(self.walls))
        for wall in self.walls:
            wall.write(writer)

        writer.write_uint16(len(self.sprites))
        for sprite in self.sprites:
            sprite.write(writer)

        log.debug(f'Encoded map v{self.version}: {writer.position} bytes')
        return writer.to_bytes()

    def save(self, path: Path) -> None:
        """Save to a map file.

        Args:
            path: Output file path
        """
        path.write_bytes(self.to_bytes())

    def sector_walls(self, sector_index: int) -> tuple[Wall, ...]:
        """Get the walls of one sector, in outline order.

        Raises:
            IndexError: the sector's wall range is negative or runs past the wall table
        """
        walls = self.sectors[sector_index].wall_range()
        if walls.stop > len(self.walls):
            raise IndexError(
                f'Sector {sector_index} walls [{walls.start}, {walls.stop}) exceed wall table of {len(self.walls)}'
            )
        return self.walls[walls.start : walls.stop]
