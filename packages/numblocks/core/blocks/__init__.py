"""Block entities and the block store."""

from numblocks.core.blocks.models import Entity, NumberBlock, PendingCombination, ZeroBlock
from numblocks.core.blocks.store import BlockStore, wall_clock_ms
from numblocks.core.errors import BlockNotFoundError, InvalidValue

__all__ = [
    "BlockNotFoundError",
    "BlockStore",
    "Entity",
    "InvalidValue",
    "NumberBlock",
    "PendingCombination",
    "ZeroBlock",
    "wall_clock_ms",
]
