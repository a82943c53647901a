"""Construction of new, minimal maps."""

from __future__ import annotations

from buildkit.const import NEW_MAP_VERSION
from buildkit.model.build_map import BuildMap
from buildkit.model.records import Sector, StartPosition, Wall

NEW_MAP_HALF_SIZE = 1024


def new_square_map() -> BuildMap:
    """Create a map with one square sector of four walls around the origin.

    Used as the starting document for a new map.
    """
    size = NEW_MAP_HALF_SIZE
    corners = [(-size, -size), (size, -size), (size, size), (-size, size)]

    walls = [
        Wall(
            x=x,
            y=y,
            point2=(i + 1) % len(corners),
            nextwall=-1,
            nextsector=-1,
            xrepeat=8,
            yrepeat=8,
            extra=-1,
        )
        for i, (x, y) in enumerate(corners)
    ]

    sector = Sector(wallptr=0, wallnum=len(walls), ceilingz=0, floorz=1024, extra=-1)

    return BuildMap(
        version=NEW_MAP_VERSION,
        start=StartPosition(posx=0, posy=-2048, posz=512, ang=0, cursectnum=0),
        sectors=[sector],
        walls=walls,
        sprites=[],
    )
