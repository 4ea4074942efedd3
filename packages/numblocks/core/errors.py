"""Exception types shared across numblocks components."""

from __future__ import annotations

from typing import Any


class InvalidValue(ValueError):
    """Raised when a block value is negative, boolean or not an integer."""

    def __init__(self, value: Any) -> None:
        super().__init__(f"Block value must be a non-negative integer, got {value!r}")
        self.value = value


class BlockNotFoundError(KeyError):
    """Raised by strict store lookups when an entity id is absent."""

    pass


def validate_value(value: Any) -> int:
    """Return ``value`` as an int, or raise InvalidValue.

    Accepts ints (and numpy integers); rejects bools, floats and negatives.
    """
    if isinstance(value, bool) or not hasattr(value, "__index__"):
        raise InvalidValue(value)
    result = int(value.__index__())
    if result < 0:
        raise InvalidValue(value)
    return result
