"""Tests for bounding-box overlap detection."""

from __future__ import annotations

import itertools

import pytest

from numblocks.core.geometry.collision import box_at, overlaps, point_in_box
from numblocks.core.geometry.models import BoundingBox, Position


class TestOverlaps:
    """Strict rectangle intersection."""

    def test_overlapping_boxes(self):
        """Partially overlapping boxes intersect."""
        assert overlaps(BoundingBox(0, 0, 50, 50), BoundingBox(25, 25, 50, 50))

    def test_contained_box(self):
        """A box inside another overlaps it."""
        assert overlaps(BoundingBox(0, 0, 100, 100), BoundingBox(10, 10, 5, 5))

    def test_separate_boxes(self):
        """Distant boxes do not overlap."""
        assert not overlaps(BoundingBox(0, 0, 50, 50), BoundingBox(200, 200, 50, 50))

    def test_edge_touching_is_not_overlap(self):
        """Sharing an edge is not an overlap."""
        assert not overlaps(BoundingBox(0, 0, 50, 50), BoundingBox(50, 0, 50, 50))
        assert not overlaps(BoundingBox(0, 0, 50, 50), BoundingBox(0, 50, 50, 50))

    def test_overlap_on_one_axis_only(self):
        """Overlap on a single axis is not enough."""
        assert not overlaps(BoundingBox(0, 0, 50, 50), BoundingBox(10, 60, 50, 50))

    def test_symmetric(self):
        """overlaps(a, b) equals overlaps(b, a)."""
        boxes = [
            BoundingBox(x, y, w, h)
            for x, y in itertools.product([0, 25, 50, 100], repeat=2)
            for w, h in [(50, 50), (10, 200)]
        ]
        for a, b in itertools.product(boxes, repeat=2):
            assert overlaps(a, b) == overlaps(b, a)


class TestBoxAt:
    """Boxes derived from value and position."""

    def test_box_uses_block_dimensions(self):
        """The box takes its size from the block layout."""
        assert box_at(3, Position(100, 100)) == BoundingBox(100, 100, 48, 148)

    def test_empty_value_has_zero_box(self):
        """Value 0 has an empty box."""
        box = box_at(0, Position(5, 5))
        assert box.width == 0
        assert box.height == 0

    @pytest.mark.parametrize("value", [1, 4, 12])
    def test_blocks_at_same_position_overlap(self, value):
        """Blocks drawn at the same spot overlap."""
        assert overlaps(box_at(value, Position(0, 0)), box_at(1, Position(0, 0)))


class TestPointInBox:
    """Inclusive point hit testing."""

    def test_inside_and_on_edge(self):
        """Points on the border count as inside."""
        box = BoundingBox(10, 10, 20, 20)
        assert point_in_box(Position(15, 15), box)
        assert point_in_box(Position(10, 30), box)

    def test_outside(self):
        """Points past the right edge are outside."""
        assert not point_in_box(Position(31, 15), BoundingBox(10, 10, 20, 20))
