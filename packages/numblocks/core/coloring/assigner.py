"""Per-cube fill, outline and face assignment.

Colors are a pure function of ``(value, cube_index)`` and follow the index
order produced by :mod:`numblocks.core.geometry.layout`: the highest
place-value group comes first, units last.

Place groups alternate saturation: units, hundreds, ten-thousands use the
primary color of their digit; tens, thousands, ... use the pale variant.
Every group except units carries an outline in the primary color of its
digit. A 7 is drawn as a rainbow (each unit of its place gets the next
palette slot) and a primary 9 as three gray bands.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
import logging

from numblocks.core.coloring.palette import (
    NINE_GRAY_BANDS,
    StarColor,
    pale_color,
    primary_color,
    rainbow_slot,
)
from numblocks.core.config.models import CubeConfig
from numblocks.core.errors import validate_value
from numblocks.core.geometry.layout import layout
from numblocks.core.geometry.models import Position
from numblocks.core.utils.math import digits

logger = logging.getLogger(__name__)

RAINBOW_DIGIT = 7
BANDED_DIGIT = 9


@dataclass(frozen=True)
class PlaceGroup:
    """A contiguous run of cubes belonging to one place value.

    Attributes:
        exponent: Place as a power of ten (0 = units, 1 = tens, ...).
        digit: Digit at that place (1-9; zero digits have no group).
        start: Index of the first cube of the group.
    """

    exponent: int
    digit: int
    start: int

    @property
    def unit(self) -> int:
        """Cubes per unit of this place (1, 10, 100, ...)."""
        return 10**self.exponent

    @property
    def count(self) -> int:
        return self.digit * self.unit

    @property
    def stop(self) -> int:
        return self.start + self.count

    @property
    def is_pale(self) -> bool:
        return self.exponent % 2 == 1

    @property
    def has_outline(self) -> bool:
        return self.exponent > 0

    def chunk(self, index: int) -> int:
        """Which unit of this place the cube at ``index`` belongs to."""
        return (index - self.start) // self.unit

    def fill(self, index: int) -> str:
        chunk = self.chunk(index)
        if self.digit == RAINBOW_DIGIT:
            slot = rainbow_slot(chunk)
            return pale_color(slot) if self.is_pale else primary_color(slot)
        if self.digit == BANDED_DIGIT and not self.is_pale:
            return NINE_GRAY_BANDS[min(chunk // 3, len(NINE_GRAY_BANDS) - 1)]
        return pale_color(self.digit) if self.is_pale else primary_color(self.digit)

    def outline(self, index: int) -> str | None:
        if not self.has_outline:
            return None
        if self.digit == RAINBOW_DIGIT:
            return primary_color(rainbow_slot(self.chunk(index)))
        return primary_color(self.digit)


class EyeGlyph(str, Enum):
    """How a single eye is drawn."""

    PLAIN = "plain"
    BLUE_STAR = "blue_star"
    RED_STAR = "red_star"


@dataclass(frozen=True)
class FaceStyle:
    """Face decoration for a block.

    Attributes:
        cube_index: Index of the cube carrying the face (topmost, then leftmost).
        eye_count: 1 for the value 1, otherwise 2.
        star: Star color for 5/50 (blue) and 10/100 (red), else None.
        eyes: Glyph per eye, left to right.
    """

    cube_index: int
    eye_count: int
    star: StarColor | None
    eyes: tuple[EyeGlyph, ...]


@dataclass(frozen=True)
class CubeStyle:
    """Everything a renderer needs to draw one cube."""

    index: int
    position: Position
    fill: str
    outline: str | None
    is_face: bool


def place_groups(value: int) -> tuple[PlaceGroup, ...]:
    """Place-value groups of ``value`` in cube index order (highest place first)."""
    value = validate_value(value)
    groups: list[PlaceGroup] = []
    start = 0
    for exponent, digit in reversed(list(enumerate(digits(value)))):
        if digit == 0:
            continue
        group = PlaceGroup(exponent=exponent, digit=digit, start=start)
        groups.append(group)
        start = group.stop
    return tuple(groups)


def _group_for(groups: tuple[PlaceGroup, ...], value: int, index: int) -> PlaceGroup:
    for group in groups:
        if group.start <= index < group.stop:
            return group
    raise IndexError(f"Cube index {index} out of range for value {value}")


def fill_color(value: int, cube_index: int) -> str:
    """Fill color of cube ``cube_index`` of ``value``.

    Raises:
        IndexError: If the index is outside ``[0, value)``.
    """
    return _group_for(place_groups(value), value, cube_index).fill(cube_index)


def outline_color(value: int, cube_index: int) -> str | None:
    """Outline color of cube ``cube_index``, or None for units cubes."""
    return _group_for(place_groups(value), value, cube_index).outline(cube_index)


def color_of(value: int, cube_index: int) -> tuple[str, str | None]:
    """Fill and outline color of one cube.

    Example:
        >>> color_of(12, 0)
        ('#FFFFFF', '#FF0000')
        >>> color_of(12, 11)
        ('#FF8C00', None)
    """
    group = _group_for(place_groups(value), value, cube_index)
    return group.fill(cube_index), group.outline(cube_index)


def star_color(value: int) -> StarColor | None:
    if value in (5, 50):
        return StarColor.BLUE
    if value in (10, 100):
        return StarColor.RED
    return None


def face_index(positions: tuple[Position, ...]) -> int | None:
    """Index of the topmost cube, leftmost on ties; first wins on exact ties."""
    if not positions:
        return None
    return min(range(len(positions)), key=lambda i: (positions[i].y, positions[i].x))


def face_of(value: int, cube: CubeConfig | None = None) -> FaceStyle | None:
    """Face decoration for ``value``; None for an empty block."""
    index = face_index(layout(value, cube).positions)
    if index is None:
        return None

    eye_count = 1 if value == 1 else 2
    star = star_color(value)
    if eye_count == 1:
        eyes: tuple[EyeGlyph, ...] = (EyeGlyph.PLAIN,)
    elif star is StarColor.BLUE:
        # Blue stars only replace the left eye
        eyes = (EyeGlyph.BLUE_STAR, EyeGlyph.PLAIN)
    elif star is StarColor.RED:
        eyes = (EyeGlyph.RED_STAR, EyeGlyph.RED_STAR)
    else:
        eyes = (EyeGlyph.PLAIN, EyeGlyph.PLAIN)

    return FaceStyle(cube_index=index, eye_count=eye_count, star=star, eyes=eyes)


def render_cubes(value: int, cube: CubeConfig | None = None) -> tuple[CubeStyle, ...]:
    """Full per-cube render plan for ``value``."""
    cube_layout = layout(value, cube)
    groups = place_groups(value)
    face = face_index(cube_layout.positions)

    styles: list[CubeStyle] = []
    for group in groups:
        for index in range(group.start, group.stop):
            styles.append(
                CubeStyle(
                    index=index,
                    position=cube_layout.positions[index],
                    fill=group.fill(index),
                    outline=group.outline(index),
                    is_face=index == face,
                )
            )
    return tuple(styles)
