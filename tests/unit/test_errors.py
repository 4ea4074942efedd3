"""Tests for shared error types."""

from __future__ import annotations

import numpy as np
import pytest

from numblocks.core.errors import BlockNotFoundError, InvalidValue, validate_value


@pytest.mark.parametrize("value", [0, 1, 42, np.int64(7)])
def test_validate_value_accepts_integers(value):
    """Non-negative integers, numpy ones included, come back as int."""
    assert validate_value(value) == int(value)
    assert type(validate_value(value)) is int


@pytest.mark.parametrize("value", [-1, 1.0, 2.5, True, False, "3", None])
def test_validate_value_rejects(value):
    """Anything but a non-negative integer raises InvalidValue."""
    with pytest.raises(InvalidValue) as exc_info:
        validate_value(value)
    assert exc_info.value.value is value


def test_invalid_value_is_a_value_error():
    """InvalidValue can be caught as ValueError."""
    assert issubclass(InvalidValue, ValueError)


def test_block_not_found_is_a_key_error():
    """BlockNotFoundError can be caught as KeyError."""
    with pytest.raises(KeyError):
        raise BlockNotFoundError("missing")
