"""Block entity models.

Entities are immutable snapshots. The store replaces an entity with an
updated copy instead of mutating it, so a NumberBlock's value can never
change after creation: changing quantity means removing the block and
creating new ones.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from numblocks.core.config.models import CubeConfig
from numblocks.core.errors import validate_value
from numblocks.core.geometry.collision import box_at
from numblocks.core.geometry.models import BoundingBox, Position, Size


class NumberBlock(BaseModel):
    """A stack of unit cubes representing one integer value.

    Attributes:
        id: Opaque unique identifier.
        value: Non-negative integer represented by the block.
        position: Top-left corner in canvas space.
        is_dragging: Whether the block is currently held.
        created_at: Creation timestamp in milliseconds.
    """

    model_config = ConfigDict(extra="forbid", frozen=True, arbitrary_types_allowed=True)

    id: str = Field(description="Unique block identifier")
    value: int = Field(ge=0, description="Represented quantity")
    position: Position = Field(description="Top-left corner in canvas space")
    is_dragging: bool = Field(default=False, description="Held by an active drag")
    created_at: float = Field(description="Creation time (ms)")

    @field_validator("value", mode="before")
    @classmethod
    def validate_integral(cls, v: object) -> int:
        """Reject bools and floats before pydantic coerces them."""
        return validate_value(v)

    def box(self, cube: CubeConfig | None = None) -> BoundingBox:
        """Bounding box at the committed position, derived from value."""
        return box_at(self.value, self.position, cube)

    def box_at(self, position: Position, cube: CubeConfig | None = None) -> BoundingBox:
        """Bounding box this block would occupy at ``position``."""
        return box_at(self.value, position, cube)


class ZeroBlock(BaseModel):
    """Value-less placeholder for the numeral 0.

    Has no cube geometry; for hit testing it occupies one cube footprint.
    """

    model_config = ConfigDict(extra="forbid", frozen=True, arbitrary_types_allowed=True)

    id: str = Field(description="Unique block identifier")
    position: Position = Field(description="Top-left corner in canvas space")
    is_dragging: bool = Field(default=False, description="Held by an active drag")
    created_at: float = Field(description="Creation time (ms)")

    @property
    def value(self) -> int:
        return 0

    def box(self, cube: CubeConfig | None = None) -> BoundingBox:
        return self.box_at(self.position, cube)

    def box_at(self, position: Position, cube: CubeConfig | None = None) -> BoundingBox:
        edge = (cube or CubeConfig()).size
        return BoundingBox.from_position(position, Size(edge, edge))


Entity = NumberBlock | ZeroBlock


class PendingCombination(BaseModel):
    """Preview of the merge that would happen if the drag ended now.

    Attributes:
        dragging_id: Block being dragged.
        target_id: First block in store order that the dragged block overlaps.
        midpoint: Anchor for the "+" indicator, centered between the two
            blocks horizontally and placed above the higher of them.
    """

    model_config = ConfigDict(extra="forbid", frozen=True, arbitrary_types_allowed=True)

    dragging_id: str
    target_id: str
    midpoint: Position
