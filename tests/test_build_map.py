"""
Tests for BUILD map decoding and encoding.
"""

import struct
from dataclasses import replace
from pathlib import Path

import pytest

from buildkit.errors import TruncatedInputError, VersionError
from buildkit.model.build_map import BuildMap
from buildkit.model.records import Sector, Sprite, StartPosition, Wall


def test_record_sizes(square_map: BuildMap) -> None:
    """Test that every record encodes to its fixed on-disk size."""
    empty = BuildMap(version=7, start=square_map.start)
    base = len(empty.to_bytes())

    assert base == 20 + 2 + 2 + 2
    assert len(BuildMap(version=7, start=square_map.start, sectors=[Sector()]).to_bytes()) == base + 40
    assert len(BuildMap(version=7, start=square_map.start, walls=[Wall()]).to_bytes()) == base + 32
    assert len(BuildMap(version=7, start=square_map.start, sprites=[Sprite()]).to_bytes()) == base + 44


def test_encoded_size_matches_output(square_map: BuildMap) -> None:
    data = square_map.to_bytes()

    assert square_map.encoded_size == len(data) == 20 + 2 + 40 + 2 + 4 * 32 + 2 == 194


def test_header_layout(square_map_bytes: bytes) -> None:
    """Test the header and table counts land at their fixed offsets."""
    version, posx, posy, posz, ang, cursectnum = struct.unpack_from('<Iiiihh', square_map_bytes, 0)
    assert (version, posx, posy, posz, ang, cursectnum) == (7, 0, -2048, 512, 0, 0)

    assert struct.unpack_from('<H', square_map_bytes, 20)[0] == 1
    assert struct.unpack_from('<H', square_map_bytes, 22 + 40)[0] == 4
    assert struct.unpack_from('<H', square_map_bytes, 24 + 40 + 4 * 32)[0] == 0

    # first sector (wallptr, wallnum) and first wall (x, y)
    assert struct.unpack_from('<hh', square_map_bytes, 22) == (0, 4)
    assert struct.unpack_from('<ii', square_map_bytes, 24 + 40) == (-1024, -1024)


def test_empty_map_bytes() -> None:
    """Test the exact bytes of a map with no records."""
    empty = BuildMap(version=7, start=StartPosition(posx=1, posy=-2, posz=3, ang=4, cursectnum=-1))

    assert empty.to_bytes() == struct.pack('<IiiihhHHH', 7, 1, -2, 3, 4, -1, 0, 0, 0)


def test_roundtrip_square_map(square_map: BuildMap, square_map_bytes: bytes) -> None:
    """Test that decode(encode(map)) reproduces the map exactly."""
    decoded = BuildMap.from_bytes(square_map_bytes)

    assert decoded == square_map
    assert decoded.to_bytes() == square_map_bytes


def test_roundtrip_extreme_values() -> None:
    """Test field widths and signedness survive a round trip at their limits."""
    sector = Sector(
        wallptr=-32768,
        wallnum=32767,
        ceilingz=-(2**31),
        floorz=2**31 - 1,
        ceilingshade=-128,
        ceilingpal=255,
        floorshade=127,
        floorypanning=255,
        visibility=255,
        filler=1,
        lotag=-1,
        hitag=0x7FFF,
        extra=-1,
    )
    wall = Wall(x=-(2**31), y=2**31 - 1, point2=0, shade=-128, pal=255, xrepeat=255, ypanning=255, hitag=-32768)
    sprite = Sprite(
        x=1,
        y=-1,
        z=-(2**31),
        cstat=-32768,
        shade=-128,
        clipdist=255,
        xoffset=-128,
        yoffset=127,
        sectnum=0,
        statnum=1024,
        owner=-1,
        zvel=-32768,
        extra=32767,
    )
    original = BuildMap(
        version=8,
        start=StartPosition(posx=-(2**31), posy=2**31 - 1, posz=0, ang=2047, cursectnum=-1),
        sectors=[sector, replace(sector, lotag=5)],
        walls=[wall, replace(wall, point2=1), replace(wall, nextwall=0, nextsector=1)],
        sprites=[sprite],
    )

    assert BuildMap.from_bytes(original.to_bytes()) == original


def test_sequences_are_tuples(square_map: BuildMap) -> None:
    assert isinstance(square_map.sectors, tuple)
    assert isinstance(square_map.walls, tuple)
    assert isinstance(square_map.sprites, tuple)


def test_encode_wraps_out_of_range_values(square_map: BuildMap) -> None:
    """Test that out-of-range values are written with fixed-width wrap-around."""
    walls = list(square_map.walls)
    walls[0] = replace(walls[0], x=2**31, pal=256, shade=200)
    modified = replace(square_map, walls=walls)

    decoded = BuildMap.from_bytes(modified.to_bytes())

    assert decoded.walls[0].x == -(2**31)
    assert decoded.walls[0].pal == 0
    assert decoded.walls[0].shade == 200 - 256


def test_encode_does_not_mutate(square_map: BuildMap) -> None:
    before = replace(square_map)
    square_map.to_bytes()

    assert square_map == before


def test_too_many_records_rejected(square_map: BuildMap) -> None:
    too_many = replace(square_map, sprites=[Sprite()] * 0x10000)

    with pytest.raises(ValueError, match='Too many sprites'):
        too_many.to_bytes()


@pytest.mark.parametrize('version', [6, 7, 8, 9, 10])
def test_supported_versions(version: int, make_map_header) -> None:
    build_map = BuildMap.from_bytes(make_map_header(version, (0, 0, 0)))

    assert build_map.version == version
    assert build_map.start == StartPosition(posx=100, posy=-200, posz=300, ang=512, cursectnum=0)
    assert build_map.sectors == ()
    assert build_map.walls == ()
    assert build_map.sprites == ()


@pytest.mark.parametrize('version', [0, 5, 11, 0xFFFFFFFF])
def test_unsupported_versions(version: int, make_map_header) -> None:
    with pytest.raises(VersionError):
        BuildMap.from_bytes(make_map_header(version, (0, 0, 0)))


def test_truncated_sector_table(make_map_header) -> None:
    """Test a sector count of 1 with fewer than 40 payload bytes."""
    data = make_map_header(7) + struct.pack('<H', 1) + bytes(39)

    with pytest.raises(TruncatedInputError):
        BuildMap.from_bytes(data)


def test_truncated_wall_table(square_map_bytes: bytes) -> None:
    with pytest.raises(TruncatedInputError):
        BuildMap.from_bytes(square_map_bytes[:-10])


def test_missing_sprite_count(square_map_bytes: bytes) -> None:
    with pytest.raises(TruncatedInputError):
        BuildMap.from_bytes(square_map_bytes[:-2])


def test_truncated_header() -> None:
    with pytest.raises(TruncatedInputError):
        BuildMap.from_bytes(struct.pack('<I', 7) + bytes(5))


def test_empty_input() -> None:
    with pytest.raises(TruncatedInputError):
        BuildMap.from_bytes(b'')


def test_trailing_bytes_ignored(square_map: BuildMap, square_map_bytes: bytes) -> None:
    assert BuildMap.from_bytes(square_map_bytes + b'\x00' * 8) == square_map


def test_indices_not_validated() -> None:
    """Test that dangling index relations decode without complaint."""
    wall = Wall(point2=99, nextwall=500, nextsector=7)
    source = BuildMap(version=7, start=StartPosition(0, 0, 0, 0, 42), walls=[wall])

    decoded = BuildMap.from_bytes(source.to_bytes())

    assert decoded.walls[0].point2 == 99
    assert decoded.start.cursectnum == 42


def test_sector_walls(square_map: BuildMap) -> None:
    walls = square_map.sector_walls(0)

    assert len(walls) == 4
    assert walls == square_map.walls
    assert list(square_map.sectors[0].wall_range()) == [0, 1, 2, 3]


def test_load_and_save(square_map: BuildMap, tmp_path: Path) -> None:
    path = tmp_path / 'NEWBOARD.MAP'
    square_map.save(path)

    assert BuildMap.load(path) == square_map


def test_records_are_immutable(square_map: BuildMap) -> None:
    with pytest.raises(AttributeError):
        square_map.version = 8  # type: ignore[misc]
    with pytest.raises(AttributeError):
        square_map.walls[0].x = 5  # type: ignore[misc]


@pytest.mark.parametrize(
    'sector',
    [
        Sector(wallptr=-1, wallnum=4),
        Sector(wallptr=-2, wallnum=1),
        Sector(wallptr=0, wallnum=-1),
        Sector(wallptr=2, wallnum=3),
    ],
)
def test_sector_walls_bad_range(sector: Sector, square_map: BuildMap) -> None:
    """Test that a negative or overlong wall range fails instead of wrapping around."""
    build_map = replace(square_map, sectors=[sector])

    with pytest.raises(IndexError):
        build_map.sector_walls(0)


def test_wall_range_negative_wallptr() -> None:
    with pytest.raises(IndexError):
        Sector(wallptr=-1, wallnum=2).wall_range()


def test_sector_walls_empty_sector(square_map: BuildMap) -> None:
    build_map = replace(square_map, sectors=[Sector(wallptr=4, wallnum=0)])

    assert build_map.sector_walls(0) == ()
