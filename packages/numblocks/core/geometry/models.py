"""Canvas-space value types.

All geometry is in canvas units with the y axis pointing down, so a
smaller ``y`` is visually higher. Sizes and boxes are always derived from
a block's value and never stored on an entity.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """A point in canvas space."""

    x: float
    y: float

    def offset(self, dx: float = 0.0, dy: float = 0.0) -> Position:
        """Return this position translated by ``(dx, dy)``."""
        return Position(self.x + dx, self.y + dy)


@dataclass(frozen=True)
class Size:
    """Width/height of a laid-out block."""

    width: float
    height: float

    @classmethod
    def zero(cls) -> Size:
        return cls(0.0, 0.0)


@dataclass(frozen=True)
class BoundingBox:
    """Axis-aligned rectangle anchored at its top-left corner."""

    x: float
    y: float
    width: float
    height: float

    @classmethod
    def from_position(cls, position: Position, size: Size) -> BoundingBox:
        return cls(position.x, position.y, size.width, size.height)

    @property
    def center(self) -> Position:
        return Position(self.x + self.width / 2, self.y + self.height / 2)

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height


@dataclass(frozen=True)
class CubeLayout:
    """Result of laying out a value: ordered cube origins plus overall size.

    Attributes:
        value: The laid-out value.
        positions: Top-left origin of every unit cube, in index order.
            Index order is the contract shared with the color assigner.
        size: Bounding size of all cubes.
    """

    value: int
    positions: tuple[Position, ...]
    size: Size

    def __len__(self) -> int:
        return len(self.positions)
