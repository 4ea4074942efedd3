"""Deterministic cube layout for block values.

Maps a non-negative integer to an ordered list of unit-cube origins and a
bounding size. Index order is part of the contract: the color assigner
walks the same order, highest place-value group first.

Rules:
- Below 100 a value is a single grid of cubes. 4 is a 2x2 square, 9 a 3x3
  square, 7 and 1-5 a single column, everything else two columns until 30,
  then as many columns as the tens digit.
- From 100 up the highest place value is stripped off and drawn as that
  many place-blocks (a hundred is a 10x10 square, a thousand is ten
  hundred-squares in two rows of five, and so on). The remainder is laid
  out recursively to the right, and both parts are bottom-aligned.

Grids fill row-major from the bottom row up, so index 0 is always in the
lowest row.
"""

from __future__ import annotations

import logging

import numpy as np

from numblocks.core.config.models import CubeConfig
from numblocks.core.errors import validate_value
from numblocks.core.geometry.models import CubeLayout, Position, Size
from numblocks.core.utils.math import ceil_div

logger = logging.getLogger(__name__)

DEFAULT_CUBE = CubeConfig()

CUBE_SIZE = DEFAULT_CUBE.size
CUBE_GAP = DEFAULT_CUBE.gap

# Smallest value drawn with place-blocks instead of a single grid
PLACE_BLOCK_THRESHOLD = 100
# Columns used for the ten sub-blocks that make up a thousand (and above)
PLACE_BLOCK_SUB_COLUMNS = 5


def sub_block_columns(count: int) -> int:
    """Column count for a value below 100."""
    if count == 4:
        return 2
    if count == 7:
        return 1
    if count == 9:
        return 3
    if count <= 5:
        return 1
    if count < 30:
        return 2
    return count // 10


def place_group_columns(count: int) -> int:
    """Column count for ``count`` place-blocks of the same place value.

    1-3 blocks stack in one column, 4-6 use two, 7-9 use three.
    """
    if count >= 7:
        return 3
    if count >= 4:
        return 2
    return 1


def _span(n: int, cube: CubeConfig) -> float:
    """Length covered by ``n`` cubes in a row including inner gaps."""
    if n <= 0:
        return 0.0
    return n * cube.size + (n - 1) * cube.gap


def _grid(count: int, cols: int, cube: CubeConfig) -> tuple[np.ndarray, Size]:
    """Lay ``count`` cubes into ``cols`` columns, bottom row first."""
    if count == 0:
        return np.zeros((0, 2)), Size.zero()
    rows = ceil_div(count, cols)
    row, col = np.divmod(np.arange(count), cols)
    points = np.column_stack((col * cube.step, (rows - 1 - row) * cube.step)).astype(float)
    return points, Size(_span(cols, cube), _span(rows, cube))


def _arrange(
    count: int, cols: int, block: np.ndarray, block_size: Size, cube: CubeConfig
) -> tuple[np.ndarray, Size]:
    """Tile ``count`` copies of a place-block, bottom row first."""
    rows = ceil_div(count, cols)
    spacing_x = block_size.width + cube.gap * 2
    spacing_y = block_size.height + cube.gap * 2

    row, col = np.divmod(np.arange(count), cols)
    offsets = np.column_stack((col * spacing_x, (rows - 1 - row) * spacing_y))
    # Copies are contiguous in index order: all cubes of copy 0, then copy 1...
    points = (offsets[:, np.newaxis, :] + block[np.newaxis, :, :]).reshape(-1, 2)

    size = Size(cols * spacing_x - cube.gap * 2, rows * spacing_y - cube.gap * 2)
    return points, size


def _sub_block(count: int, cube: CubeConfig) -> tuple[np.ndarray, Size]:
    return _grid(count, sub_block_columns(count), cube)


def _place_block(exponent: int, cube: CubeConfig) -> tuple[np.ndarray, Size]:
    """Cubes of a single 10**exponent place-block (exponent >= 2)."""
    if exponent == 2:
        return _grid(100, 10, cube)
    sub, sub_size = _place_block(exponent - 1, cube)
    return _arrange(10, PLACE_BLOCK_SUB_COLUMNS, sub, sub_size, cube)


def _layout(value: int, cube: CubeConfig) -> tuple[np.ndarray, Size]:
    if value < PLACE_BLOCK_THRESHOLD:
        return _sub_block(value, cube)

    exponent = len(str(value)) - 1
    digit, remainder = divmod(value, 10**exponent)

    block, block_size = _place_block(exponent, cube)
    head, head_size = _arrange(digit, place_group_columns(digit), block, block_size, cube)

    if remainder == 0:
        return head, head_size

    tail, tail_size = _layout(remainder, cube)
    height = max(head_size.height, tail_size.height)
    tail_x = head_size.width + cube.gap * 4

    head = head + np.array([0.0, height - head_size.height])
    tail = tail + np.array([tail_x, height - tail_size.height])

    return np.vstack((head, tail)), Size(tail_x + tail_size.width, height)


def layout(value: int, cube: CubeConfig | None = None) -> CubeLayout:
    """Lay out ``value`` as unit cubes.

    Args:
        value: Non-negative integer to lay out.
        cube: Cube geometry (defaults to 48px cubes with a 2px gap).

    Returns:
        CubeLayout with one position per unit of ``value``, in index order.

    Raises:
        InvalidValue: If value is negative or not an integer.

    Example:
        >>> layout(4).positions[0]
        Position(x=0.0, y=50.0)
        >>> layout(4).size
        Size(width=98.0, height=98.0)
    """
    value = validate_value(value)
    cube = cube or DEFAULT_CUBE
    points, size = _layout(value, cube)
    positions = tuple(Position(x, y) for x, y in points.tolist())
    return CubeLayout(value=value, positions=positions, size=size)


def cube_positions(value: int, cube: CubeConfig | None = None) -> tuple[Position, ...]:
    """Ordered cube origins for ``value``."""
    return layout(value, cube).positions


def block_dimensions(value: int, cube: CubeConfig | None = None) -> Size:
    """Bounding size of ``value`` without materializing cube positions."""
    value = validate_value(value)
    return _dimensions(value, cube or DEFAULT_CUBE)


def _place_block_size(exponent: int, cube: CubeConfig) -> Size:
    if exponent == 2:
        return Size(_span(10, cube), _span(10, cube))
    return _group_size(10, PLACE_BLOCK_SUB_COLUMNS, _place_block_size(exponent - 1, cube), cube)


def _group_size(count: int, cols: int, block_size: Size, cube: CubeConfig) -> Size:
    rows = ceil_div(count, cols)
    return Size(
        cols * (block_size.width + cube.gap * 2) - cube.gap * 2,
        rows * (block_size.height + cube.gap * 2) - cube.gap * 2,
    )


def _dimensions(value: int, cube: CubeConfig) -> Size:
    if value == 0:
        return Size.zero()
    if value < PLACE_BLOCK_THRESHOLD:
        cols = sub_block_columns(value)
        return Size(_span(cols, cube), _span(ceil_div(value, cols), cube))

    exponent = len(str(value)) - 1
    digit, remainder = divmod(value, 10**exponent)
    head = _group_size(
        digit, place_group_columns(digit), _place_block_size(exponent, cube), cube
    )
    if remainder == 0:
        return head

    tail = _dimensions(remainder, cube)
    return Size(head.width + cube.gap * 4 + tail.width, max(head.height, tail.height))
