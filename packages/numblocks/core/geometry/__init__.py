"""Block geometry: value types, cube layout and collision detection."""

from numblocks.core.geometry.collision import box_at, overlaps, point_in_box
from numblocks.core.geometry.layout import (
    CUBE_GAP,
    CUBE_SIZE,
    block_dimensions,
    cube_positions,
    layout,
)
from numblocks.core.geometry.models import BoundingBox, CubeLayout, Position, Size

__all__ = [
    # Value types
    "BoundingBox",
    "CubeLayout",
    "Position",
    "Size",
    # Layout
    "CUBE_GAP",
    "CUBE_SIZE",
    "block_dimensions",
    "cube_positions",
    "layout",
    # Collision
    "box_at",
    "overlaps",
    "point_in_box",
]
