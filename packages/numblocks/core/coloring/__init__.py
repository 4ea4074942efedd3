"""Place-value coloring of laid-out blocks."""

from numblocks.core.coloring.assigner import (
    CubeStyle,
    EyeGlyph,
    FaceStyle,
    PlaceGroup,
    color_of,
    face_of,
    fill_color,
    outline_color,
    place_groups,
    render_cubes,
)
from numblocks.core.coloring.palette import (
    NINE_GRAY_BANDS,
    PALE_COLORS,
    PRIMARY_COLORS,
    StarColor,
    needs_stripe_pattern,
    number_color,
)

__all__ = [
    # Palette
    "NINE_GRAY_BANDS",
    "PALE_COLORS",
    "PRIMARY_COLORS",
    "StarColor",
    "needs_stripe_pattern",
    "number_color",
    # Assignment
    "CubeStyle",
    "EyeGlyph",
    "FaceStyle",
    "PlaceGroup",
    "color_of",
    "face_of",
    "fill_color",
    "outline_color",
    "place_groups",
    "render_cubes",
]
