"""BUILD map model classes."""

from buildkit.model.build_map import BuildMap
from buildkit.model.factory import new_square_map
from buildkit.model.records import Sector, Sprite, StartPosition, Wall

__all__ = ['BuildMap', 'Sector', 'Sprite', 'StartPosition', 'Wall', 'new_square_map']
