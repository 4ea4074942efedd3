"""Tests for math utility functions."""

from __future__ import annotations

import pytest

from numblocks.core.utils.math import ceil_div, clamp, digits


def test_clamp_within_range():
    """Test clamping values within range."""
    assert clamp(5, 0, 10) == 5
    assert clamp(0, 0, 10) == 0
    assert clamp(10, 0, 10) == 10


def test_clamp_outside_range():
    """Test clamping values outside range."""
    assert clamp(-5, 0, 10) == 0
    assert clamp(15.5, 0.0, 10.0) == 10.0


def test_clamp_integer_result():
    """Test that clamp preserves integer type when appropriate."""
    assert isinstance(clamp(5, 0, 10), int)


@pytest.mark.parametrize(
    ("numerator", "denominator", "expected"),
    [(0, 3, 0), (1, 3, 1), (3, 3, 1), (4, 3, 2), (73, 7, 11)],
)
def test_ceil_div(numerator, denominator, expected):
    """Test integer ceiling division."""
    assert ceil_div(numerator, denominator) == expected


def test_digits_lowest_place_first():
    """Test digits come back lowest place first."""
    assert digits(305) == [5, 0, 3]
    assert digits(7) == [7]


def test_digits_of_zero():
    """Test zero has a single digit."""
    assert digits(0) == [0]
