"""Tests for canvas placement math."""

from __future__ import annotations

from numblocks.core.config.models import CanvasConfig, InteractionConfig
from numblocks.core.geometry.models import BoundingBox, Position, Size
from numblocks.core.interaction.placement import (
    SplitArrangement,
    clamp_position,
    indicator_position,
    merge_position,
    spawn_position,
    split_positions,
)

CANVAS = CanvasConfig()
INTERACTION = InteractionConfig()
SEVEN = Size(48, 348)
THREE = Size(48, 148)


class TestClamp:
    """Keeping blocks inside the canvas margins."""

    def test_inside_is_unchanged(self):
        """Positions already inside the canvas are kept."""
        assert clamp_position(Position(100, 100), THREE, CANVAS) == Position(100, 100)

    def test_respects_margins(self):
        """Clamping honours the side and top margins."""
        assert clamp_position(Position(-50, -50), THREE, CANVAS) == Position(10, 40)
        assert clamp_position(Position(2000, 2000), THREE, CANVAS) == Position(966, 610)

    def test_oversized_block_pinned_top_left(self):
        """Blocks larger than the canvas stick to the top-left margin."""
        huge = Size(5000, 5000)
        assert clamp_position(Position(300, 300), huge, CANVAS) == Position(10, 40)


class TestMergeAndIndicator:
    """Where merged blocks and the merge indicator go."""

    def test_merge_centers_on_average_center(self):
        """The merged block is centered on the average of both centers."""
        a = BoundingBox(100, 100, 48, 148)
        b = BoundingBox(120, 120, 48, 248)
        assert merge_position(a, b, Size(98, 198), CANVAS) == Position(85, 110)

    def test_merge_is_clamped(self):
        """Merge positions are clamped to the canvas."""
        a = BoundingBox(1000, 700, 48, 48)
        b = BoundingBox(1000, 700, 48, 48)
        assert merge_position(a, b, Size(48, 98), CANVAS) == Position(966, 660)

    def test_indicator_above_higher_block(self):
        """The '+' sits above the higher of the two blocks."""
        a = BoundingBox(120, 120, 48, 248)
        b = BoundingBox(100, 100, 48, 148)
        assert indicator_position(a, b, 40) == Position(134, 60)


def test_spawn_position_bottom_centered_on_drop_point():
    """New blocks hang from the drop point by their bottom edge."""
    assert spawn_position(Position(500, 500), THREE, CANVAS) == Position(476, 352)


class TestSplitPositions:
    """Side by side, stacked, or opposite corners."""

    def test_horizontal(self):
        """With room, the parts sit side by side around the anchor."""
        placement = split_positions(Position(100, 100), SEVEN, THREE, CANVAS, INTERACTION)

        assert placement.arrangement is SplitArrangement.HORIZONTAL
        assert placement.first == Position(70, 100)
        assert placement.second == Position(158, 100)

    def test_horizontal_results_do_not_overlap(self):
        """Side-by-side parts keep a gap between them."""
        placement = split_positions(Position(100, 100), SEVEN, THREE, CANVAS, INTERACTION)
        first = BoundingBox.from_position(placement.first, SEVEN)
        second = BoundingBox.from_position(placement.second, THREE)
        assert first.right < second.x

    def test_vertical_on_narrow_canvas(self):
        """A narrow canvas stacks the parts vertically."""
        canvas = CanvasConfig(width=100, height=768)
        placement = split_positions(Position(100, 100), SEVEN, THREE, canvas, INTERACTION)

        assert placement.arrangement is SplitArrangement.VERTICAL
        assert placement.first == Position(42, 100)
        assert placement.second == Position(42, 468)

    def test_corners_when_nothing_fits(self):
        """Without room either way the parts go to opposite corners."""
        canvas = CanvasConfig(width=100, height=300)
        placement = split_positions(Position(100, 100), SEVEN, THREE, canvas, INTERACTION)

        assert placement.arrangement is SplitArrangement.CORNERS
        assert placement.first == Position(10, 40)
        assert placement.second == Position(42, 142)
