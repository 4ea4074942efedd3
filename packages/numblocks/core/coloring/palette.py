"""Block color palette.

Each digit 1-10 has a saturated primary color and a pale variant. Pale
colors fill alternate place-value groups (tens, thousands, ...).
"""

from __future__ import annotations

from enum import Enum

PRIMARY_COLORS: dict[int, str] = {
    1: "#FF0000",  # Red
    2: "#FF8C00",  # Orange
    3: "#FFD700",  # Yellow
    4: "#00CC00",  # Green
    5: "#00BFFF",  # Cyan
    6: "#4B0082",  # Indigo
    7: "#8B00FF",  # Violet
    8: "#FF00FF",  # Magenta
    9: "#808080",  # Grey
    10: "#FFFFFF",  # White
}

PALE_COLORS: dict[int, str] = {
    1: "#FFFFFF",  # White, so a pale ten reads as the white 10 block
    2: "#FFD4A8",
    3: "#FFF4B8",
    4: "#B8F0B8",
    5: "#B8E8FF",
    6: "#C4A8D0",
    7: "#D8B8FF",
    8: "#FFB8FF",
    9: "#C8C8C8",
    10: "#FFFFFF",
}

# Bands for a primary 9: bottom third lightest, top third darkest
NINE_GRAY_BANDS: tuple[str, str, str] = ("#D0D0D0", "#A0A0A0", "#606060")

PALETTE_SIZE = len(PRIMARY_COLORS)


class StarColor(str, Enum):
    """Color of the star-shaped eyes on milestone values."""

    BLUE = "blue"
    RED = "red"


def primary_color(index: int) -> str:
    """Primary color for palette slot 1-10."""
    return PRIMARY_COLORS[index]


def pale_color(index: int) -> str:
    """Pale color for palette slot 1-10."""
    return PALE_COLORS[index]


def rainbow_slot(position: int) -> int:
    """Palette slot (1-10) for the ``position``-th unit of a rainbow group."""
    return position % PALETTE_SIZE + 1


def number_color(value: int) -> str:
    """Single representative color for a whole value.

    1-10 use their own slot; larger values use the ones digit, with
    multiples of ten taking slot 10.
    """
    if 1 <= value <= PALETTE_SIZE:
        return PRIMARY_COLORS[value]
    return PRIMARY_COLORS[value % 10 or 10]


def needs_stripe_pattern(value: int) -> bool:
    """Multiples of ten get the striped 10 treatment."""
    return value >= 10 and value % 10 == 0
