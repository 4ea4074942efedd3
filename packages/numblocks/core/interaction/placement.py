"""Canvas placement math for spawned, merged and split blocks.

All results are clamped so the block stays inside the visible canvas,
keeping ``margin`` on the left, right and bottom and ``top_margin`` at the
top for the value label. A block larger than the canvas is pinned to the
top-left margins.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from numblocks.core.config.models import CanvasConfig, InteractionConfig
from numblocks.core.geometry.models import BoundingBox, Position, Size
from numblocks.core.utils.math import clamp


class SplitArrangement(str, Enum):
    """How the two results of a split were placed."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"
    CORNERS = "corners"


@dataclass(frozen=True)
class SplitPlacement:
    """Positions of the remaining and subtracted blocks after a split."""

    first: Position
    second: Position
    arrangement: SplitArrangement


def clamp_x(x: float, width: float, canvas: CanvasConfig) -> float:
    max_x = max(canvas.margin, canvas.width - width - canvas.margin)
    return clamp(x, canvas.margin, max_x)


def clamp_y(y: float, height: float, canvas: CanvasConfig) -> float:
    max_y = max(canvas.top_margin, canvas.height - height - canvas.margin)
    return clamp(y, canvas.top_margin, max_y)


def clamp_position(position: Position, size: Size, canvas: CanvasConfig) -> Position:
    """Clamp a top-left position so a block of ``size`` stays on the canvas."""
    return Position(
        clamp_x(position.x, size.width, canvas),
        clamp_y(position.y, size.height, canvas),
    )


def merge_position(a: BoundingBox, b: BoundingBox, size: Size, canvas: CanvasConfig) -> Position:
    """Top-left for a merged block centered on the average of both centers."""
    center_x = (a.center.x + b.center.x) / 2
    center_y = (a.center.y + b.center.y) / 2
    return clamp_position(
        Position(center_x - size.width / 2, center_y - size.height / 2), size, canvas
    )


def indicator_position(a: BoundingBox, b: BoundingBox, offset: float) -> Position:
    """Anchor of the '+' indicator shown while two blocks overlap."""
    return Position((a.center.x + b.center.x) / 2, min(a.y, b.y) - offset)


def spawn_position(drop_point: Position, size: Size, canvas: CanvasConfig) -> Position:
    """Top-left for a block dropped at ``drop_point``.

    The block is centered horizontally on the point with its bottom edge on it.
    """
    return clamp_position(
        Position(drop_point.x - size.width / 2, drop_point.y - size.height), size, canvas
    )


def split_positions(
    anchor: Position,
    first: Size,
    second: Size,
    canvas: CanvasConfig,
    interaction: InteractionConfig,
) -> SplitPlacement:
    """Place the two results of a split near ``anchor``.

    Side by side when both fit across the canvas, stacked when they fit
    vertically, otherwise in opposite corners.

    Args:
        anchor: Position of the block being split.
        first: Size of the remaining block.
        second: Size of the subtracted block.
        canvas: Canvas bounds.
        interaction: Split gap/offset settings.

    Returns:
        SplitPlacement with both clamped positions.
    """
    gap = interaction.split_gap
    fits_horizontally = (
        first.width + second.width + interaction.split_fit_gap
        <= canvas.width - canvas.margin * 2
    )
    fits_vertically = (
        first.height + second.height + interaction.split_fit_gap
        <= canvas.height - canvas.top_margin - canvas.margin
    )

    if fits_horizontally:
        pos1 = clamp_position(anchor.offset(dx=-interaction.split_offset), first, canvas)
        min_x2 = pos1.x + first.width + gap
        pos2 = Position(
            clamp_x(max(min_x2, anchor.x + first.width + gap), second.width, canvas),
            clamp_y(anchor.y, second.height, canvas),
        )
        return SplitPlacement(pos1, pos2, SplitArrangement.HORIZONTAL)

    if fits_vertically:
        pos1 = clamp_position(anchor, first, canvas)
        min_y2 = pos1.y + first.height + gap
        pos2 = Position(
            clamp_x(anchor.x, second.width, canvas),
            clamp_y(
                max(min_y2, anchor.y + first.height + interaction.split_fit_gap),
                second.height,
                canvas,
            ),
        )
        return SplitPlacement(pos1, pos2, SplitArrangement.VERTICAL)

    pos1 = Position(canvas.margin, canvas.top_margin)
    pos2 = clamp_position(
        Position(
            canvas.width - second.width - canvas.margin,
            canvas.height - second.height - canvas.margin,
        ),
        second,
        canvas,
    )
    return SplitPlacement(pos1, pos2, SplitArrangement.CORNERS)
