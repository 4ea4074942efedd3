"""Shared utilities for numblocks."""

from numblocks.core.utils.math import ceil_div, clamp, digits

__all__ = [
    "ceil_div",
    "clamp",
    "digits",
]
