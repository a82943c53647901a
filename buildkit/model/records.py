"""Fixed-size BUILD map records.

Field order and widths match the on-disk layout exactly; every record is
read and written field by field in that order.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from buildkit.io.reader import Reader
    from buildkit.io.writer import Writer


@dataclass(frozen=True)
class StartPosition:
    """Player start position (12 + 4 bytes of the map header)."""

    posx: int  # int32
    posy: int  # int32
    posz: int  # int32
    ang: int  # int16
    cursectnum: int  # int16

    @classmethod
    def read(cls, reader: Reader) -> StartPosition:
        """Read StartPosition from reader."""
        return cls(
            posx=reader.read_int32(),
            posy=reader.read_int32(),
            posz=reader.read_int32(),
            ang=reader.read_int16(),
            cursectnum=reader.read_int16(),
        )

    def write(self, writer: Writer) -> None:
        """Write StartPosition to writer."""
        writer.write_int32(self.posx)
        writer.write_int32(self.posy)
        writer.write_int32(self.posz)
        writer.write_int16(self.ang)
        writer.write_int16(self.cursectnum)


@dataclass(frozen=True)
class Sector:
    """Sector record (40 bytes).

    ``wallptr`` is the index of the sector's first wall and ``wallnum`` the
    number of consecutive walls forming its outline.
    """

    wallptr: int = 0  # int16
    wallnum: int = 0  # int16
    ceilingz: int = 0  # int32
    floorz: int = 0  # int32
    ceilingstat: int = 0  # int16
    floorstat: int = 0  # int16
    ceilingpicnum: int = 0  # int16
    ceilingheinum: int = 0  # int16 - slope
    ceilingshade: int = 0  # int8
    ceilingpal: int = 0  # uint8
    ceilingxpanning: int = 0  # uint8
    ceilingypanning: int = 0  # uint8
    floorpicnum: int = 0  # int16
    floorheinum: int = 0  # int16 - slope
    floorshade: int = 0  # int8
    floorpal: int = 0  # uint8
    floorxpanning: int = 0  # uint8
    floorypanning: int = 0  # uint8
    visibility: int = 0  # uint8
    filler: int = 0  # uint8
    lotag: int = 0  # int16
    hitag: int = 0  # int16
    extra: int = 0  # int16

    SIZE = 40

    @classmethod
    def read(cls, reader: Reader) -> Sector:
        """Read Sector from reader."""
        return cls(
            wallptr=reader.read_int16(),
            wallnum=reader.read_int16(),
            ceilingz=reader.read_int32(),
            floorz=reader.read_int32(),
            ceilingstat=reader.read_int16(),
            floorstat=reader.read_int16(),
            ceilingpicnum=reader.read_int16(),
            ceilingheinum=reader.read_int16(),
            ceilingshade=reader.read_int8(),
            ceilingpal=reader.read_uint8(),
            ceilingxpanning=reader.read_uint8(),
            ceilingypanning=reader.read_uint8(),
            floorpicnum=reader.read_int16(),
            floorheinum=reader.read_int16(),
            floorshade=reader.read_int8(),
            floorpal=reader.read_uint8(),
            floorxpanning=reader.read_uint8(),
            floorypanning=reader.read_uint8(),
            visibility=reader.read_uint8(),
            filler=reader.read_uint8(),
            lotag=reader.read_int16(),
            hitag=reader.read_int16(),
            extra=reader.read_int16(),
        )

    def write(self, writer: Writer) -> None:
        """Write Sector to writer."""
        writer.write_int16(self.wallptr)
        writer.write_int16(self.wallnum)
        writer.write_int32(self.ceilingz)
        writer.write_int32(self.floorz)
        writer.write_int16(self.ceilingstat)
        writer.write_int16(self.floorstat)
        writer.write_int16(self.ceilingpicnum)
        writer.write_int16(self.ceilingheinum)
        writer.write_int8(self.ceilingshade)
        writer.write_uint8(self.ceilingpal)
        writer.write_uint8(self.ceilingxpanning)
        writer.write_uint8(self.ceilingypanning)
        writer.write_int16(self.floorpicnum)
        writer.write_int16(self.floorheinum)
        writer.write_int8(self.floorshade)
        writer.write_uint8(self.floorpal)
        writer.write_uint8(self.floorxpanning)
        writer.write_uint8(self.floorypanning)
        writer.write_uint8(self.visibility)
        writer.write_uint8(self.filler)
        writer.write_int16(self.lotag)
        writer.write_int16(self.hitag)
        writer.write_int16(self.extra)

    def wall_range(self) -> range:
        """Indices of the walls owned by this sector.

        Raises:
            IndexError: wallptr or wallnum is negative
        """
        if self.wallptr < 0 or self.wallnum < 0:
            raise IndexError(f'Sector has no wall range (wallptr={self.wallptr}, wallnum={self.wallnum})')
        return range(self.wallptr, self.wallptr + self.wallnum)


@dataclass(frozen=True)
class Wall:
    """Wall record (32 bytes).

    ``point2`` is the index of the wall holding this edge's second vertex;
    ``nextwall``/``nextsector`` point at the matching wall of an adjoining
    sector, or -1 for a solid wall.
    """

    x: int = 0  # int32
    y: int = 0  # int32
    point2: int = 0  # int16
    nextwall: int = -1  # int16
    nextsector: int = -1  # int16
    cstat: int = 0  # int16
    picnum: int = 0  # int16
    overpicnum: int = 0  # int16
    shade: int = 0  # int8
    pal: int = 0  # uint8
    xrepeat: int = 0  # uint8
    yrepeat: int = 0  # uint8
    xpanning: int = 0  # uint8
    ypanning: int = 0  # uint8
    lotag: int = 0  # int16
    hitag: int = 0  # int16
    extra: int = 0  # int16

    SIZE = 32

    @classmethod
    def read(cls, reader: Reader) -> Wall:
        """Read Wall from reader."""
        return cls(
            x=reader.read_int32(),
            y=reader.read_int32(),
            point2=reader.read_int16(),
            nextwall=reader.read_int16(),
            nextsector=reader.read_int16(),
            cstat=reader.read_int16(),
            picnum=reader.read_int16(),
            overpicnum=reader.read_int16(),
            shade=reader.read_int8(),
            pal=reader.read_uint8(),
            xrepeat=reader.read_uint8(),
            yrepeat=reader.read_uint8(),
            xpanning=reader.read_uint8(),
            ypanning=reader.read_uint8(),
            lotag=reader.read_int16(),
            hitag=reader.read_int16(),
            extra=reader.read_int16(),
        )

    def write(self, writer: Writer) -> None:
        """Write Wall to writer."""
        writer.write_int32(self.x)
        writer.write_int32(self.y)
        writer.write_int16(self.point2)
        writer.write_int16(self.nextwall)
        writer.write_int16(self.nextsector)
        writer.write_int16(self.cstat)
        writer.write_int16(self.picnum)
        writer.write_int16(self.overpicnum)
        writer.write_int8(self.shade)
        writer.write_uint8(self.pal)
        writer.write_uint8(self.xrepeat)
        writer.write_uint8(self.yrepeat)
        writer.write_uint8(self.xpanning)
        writer.write_uint8(self.ypanning)
        writer.write_int16(self.lotag)
        writer.write_int16(self.hitag)
        writer.write_int16(self.extra)

    @property
    def is_portal(self) -> bool:
        """True if this wall opens onto another sector."""
        return self.nextsector != -1


@dataclass(frozen=True)
class Sprite:
    """Sprite record (44 bytes)."""

    x: int = 0  # int32
    y: int = 0  # int32
    z: int = 0  # int32
    cstat: int = 0  # int16
    picnum: int = 0  # int16
    shade: int = 0  # int8
    pal: int = 0  # uint8
    clipdist: int = 0  # uint8
    filler: int = 0  # uint8
    xrepeat: int = 0  # uint8
    yrepeat: int = 0  # uint8
    xoffset: int = 0  # int8
    yoffset: int = 0  # int8
    sectnum: int = 0  # int16
    statnum: int = 0  # int16
    ang: int = 0  # int16
    owner: int = -1  # int16
    xvel: int = 0  # int16
    yvel: int = 0  # int16
    zvel: int = 0  # int16
    lotag: int = 0  # int16
    hitag: int = 0  # int16
    extra: int = 0  # int16

    SIZE = 44

    @classmethod
    def read(cls, reader: Reader) -> Sprite:
        """Read Sprite from reader."""
        return cls(
            x=reader.read_int32(),
            y=reader.read_int32(),
            z=reader.read_int32(),
            cstat=reader.read_int16(),
            picnum=reader.read_int16(),
            shade=reader.read_int8(),
            pal=reader.read_uint8(),
            clipdist=reader.read_uint8(),
            filler=reader.read_uint8(),
            xrepeat=reader.read_uint8(),
            yrepeat=reader.read_uint8(),
            xoffset=reader.read_int8(),
            yoffset=reader.read_int8(),
            sectnum=reader.read_int16(),
            statnum=reader.read_int16(),
            ang=reader.read_int16(),
            owner=reader.read_int16(),
            xvel=reader.read_int16(),
            yvel=reader.read_int16(),
            zvel=reader.read_int16(),
            lotag=reader.read_int16(),
            hitag=reader.read_int16(),
            extra=reader.read_int16(),
        )

    def write(self, writer: Writer) -> None:
        """Write Sprite to writer."""
        writer.write_int32(self.x)
        writer.write_int32(self.y)
        writer.write_int32(self.z)
        writer.write_int16(self.cstat)
        writer.write_int16(self.picnum)
        writer.write_int8(self.shade)
        writer.write_uint8(self.pal)
        writer.write_uint8(self.clipdist)
        writer.write_uint8(self.filler)
        writer.write_uint8(self.xrepeat)
        writer.write_uint8(self.yrepeat)
        writer.write_int8(self.xoffset)
        writer.write_int8(self.yoffset)
        writer.write_int16(self.sectnum)
        writer.write_int16(self.statnum)
        writer.write_int16(self.ang)
        writer.write_int16(self.owner)
        writer.write_int16(self.xvel)
        writer.write_int16(self.yvel)
        writer.write_int16(self.zvel)
        writer.write_int16(self.lotag)
        writer.write_int16(self.hitag)
        writer.write_int16(self.extra)
