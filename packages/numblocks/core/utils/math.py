"""Math utilities for common operations."""

from __future__ import annotations

from typing import TypeVar

import numpy as np

Number = TypeVar("Number", int, float, np.number)


def clamp(value: Number, min_val: Number, max_val: Number) -> Number:
    """Clamp value to range [min_val, max_val].

    Args:
        value: Value to clamp
        min_val: Minimum allowed value
        max_val: Maximum allowed value

    Returns:
        Clamped value
    """
    return max(min_val, min(max_val, value))


def ceil_div(numerator: int, denominator: int) -> int:
    """Integer ceiling division for positive denominators."""
    return -(-numerator // denominator)


def digits(value: int) -> list[int]:
    """Base-10 digits of a non-negative integer, lowest place first.

    Example:
        >>> digits(305)
        [5, 0, 3]
    """
    if value == 0:
        return [0]
    result: list[int] = []
    while value > 0:
        value, digit = divmod(value, 10)
        result.append(digit)
    return result
