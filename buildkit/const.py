"""
Constants for the BUILD map and GRP archive codecs.
"""

import os
from pathlib import Path

# GRP archive header
GRP_SIGNATURE = 'KenSilverman'
GRP_SIGNATURE_SIZE = 12
GRP_HEADER_SIZE = 16  # signature + int32 count
GRP_NAME_SIZE = 12
GRP_DIR_ENTRY_SIZE = 16  # name + int32 size

# BUILD map versions accepted on decode (inclusive)
MAP_VERSION_MIN = 6
MAP_VERSION_MAX = 10
NEW_MAP_VERSION = 7

# Fixed record sizes
MAP_HEADER_SIZE = 20  # version + posx/posy/posz + ang + cursectnum
SECTOR_SIZE = 40
WALL_SIZE = 32
SPRITE_SIZE = 44

# Record counts are stored as uint16
MAX_RECORDS = 0xFFFF

# Default archive location, override with BUILDKIT_GRP
DEFAULT_GRP_PATH = Path(os.environ.get('BUILDKIT_GRP', 'DUKE3D.GRP'))
