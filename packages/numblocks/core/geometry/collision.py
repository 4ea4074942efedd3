"""Stateless overlap tests between block bounding boxes."""

from __future__ import annotations

from numblocks.core.config.models import CubeConfig
from numblocks.core.geometry.layout import block_dimensions
from numblocks.core.geometry.models import BoundingBox, Position


def overlaps(a: BoundingBox, b: BoundingBox) -> bool:
    """True iff the open rectangles intersect on both axes.

    Edge-touching boxes do not overlap, and the test is symmetric.
    """
    return (
        a.x < b.x + b.width
        and a.x + a.width > b.x
        and a.y < b.y + b.height
        and a.y + a.height > b.y
    )


def box_at(value: int, position: Position, cube: CubeConfig | None = None) -> BoundingBox:
    """Bounding box ``value`` would occupy with its top-left at ``position``."""
    return BoundingBox.from_position(position, block_dimensions(value, cube))


def point_in_box(point: Position, box: BoundingBox) -> bool:
    """Inclusive containment test used for drop-target hit testing."""
    return box.x <= point.x <= box.x + box.width and box.y <= point.y <= box.y + box.height
