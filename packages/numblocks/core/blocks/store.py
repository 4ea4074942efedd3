"""Authoritative, synchronous store of live block entities.

The store is the single source of truth for the interaction state machine:
every mutation is applied immediately, so a read right after a write always
sees it. Insertion order is preserved and doubles as draw order (later
entities draw on top); multi-entity transitions go through :meth:`replace`
so that no caller can observe a half-applied merge or split.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
import logging
import time
from uuid import uuid4

from numblocks.core.blocks.models import Entity, NumberBlock, ZeroBlock
from numblocks.core.errors import BlockNotFoundError, validate_value
from numblocks.core.geometry.models import Position

logger = logging.getLogger(__name__)

Clock = Callable[[], float]


def wall_clock_ms() -> float:
    """Current wall-clock time in milliseconds."""
    return time.time() * 1000.0


def new_id() -> str:
    return str(uuid4())


class BlockStore:
    """Ordered collection of NumberBlock and ZeroBlock entities.

    Example:
        >>> store = BlockStore()
        >>> block_id = store.create(3, Position(100, 100))
        >>> store.find(block_id).value
        3
        >>> store.remove(block_id)
        >>> store.query()
        []
    """

    def __init__(
        self,
        *,
        clock: Clock | None = None,
        id_factory: Callable[[], str] | None = None,
    ) -> None:
        """Initialize an empty store.

        Args:
            clock: Millisecond clock used for ``created_at`` (wall clock by default).
            id_factory: Id generator (uuid4 strings by default).
        """
        self._clock = clock or wall_clock_ms
        self._new_id = id_factory or new_id
        self._entities: dict[str, Entity] = {}

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    def build(self, value: int, position: Position) -> NumberBlock:
        """Build (but do not insert) a new NumberBlock.

        Raises:
            InvalidValue: If value is negative or not an integer.
        """
        value = validate_value(value)
        return NumberBlock(
            id=self._new_id(),
            value=value,
            position=position,
            created_at=self._clock(),
        )

    def build_zero(self, position: Position) -> ZeroBlock:
        """Build (but do not insert) a new ZeroBlock."""
        return ZeroBlock(id=self._new_id(), position=position, created_at=self._clock())

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def create(self, value: int, position: Position) -> str:
        """Create a block and return its id.

        Raises:
            InvalidValue: If value is negative or not an integer. The store
                is left untouched.
        """
        block = self.build(value, position)
        self._entities[block.id] = block
        logger.debug(f"Created block {block.id} value={block.value} at {position}")
        return block.id

    def create_zero(self, position: Position) -> str:
        """Create a ZeroBlock and return its id."""
        zero = self.build_zero(position)
        self._entities[zero.id] = zero
        logger.debug(f"Created zero block {zero.id} at {position}")
        return zero.id

    def remove(self, entity_id: str) -> None:
        """Remove an entity; absent ids are ignored."""
        if self._entities.pop(entity_id, None) is not None:
            logger.debug(f"Removed {entity_id}")

    def update_position(self, entity_id: str, position: Position) -> None:
        """Move an entity; absent ids are ignored."""
        entity = self._entities.get(entity_id)
        if entity is None:
            return
        self._entities[entity_id] = entity.model_copy(update={"position": position})

    def set_dragging(self, entity_id: str, dragging: bool) -> None:
        """Mark or unmark an entity as held; absent ids are ignored."""
        entity = self._entities.get(entity_id)
        if entity is None:
            return
        self._entities[entity_id] = entity.model_copy(update={"is_dragging": dragging})

    def replace(self, remove_ids: Iterable[str], new_entities: Iterable[Entity]) -> None:
        """Remove ``remove_ids`` and append ``new_entities`` in one step.

        New entities go to the tail, after the surviving ones.
        """
        removed = set(remove_ids)
        added = list(new_entities)
        survivors = {eid: e for eid, e in self._entities.items() if eid not in removed}
        for entity in added:
            survivors[entity.id] = entity
        self._entities = survivors
        logger.debug(f"Replaced {sorted(removed)} with {[e.id for e in added]}")

    def clear(self) -> None:
        """Remove every entity."""
        self._entities.clear()

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def find(self, entity_id: str) -> Entity | None:
        """Entity with ``entity_id``, or None."""
        return self._entities.get(entity_id)

    def find_number(self, entity_id: str) -> NumberBlock | None:
        """NumberBlock with ``entity_id``, or None (also None for zero blocks)."""
        entity = self._entities.get(entity_id)
        return entity if isinstance(entity, NumberBlock) else None

    def get(self, entity_id: str) -> Entity:
        """Entity with ``entity_id``.

        Raises:
            BlockNotFoundError: If the id is absent.
        """
        entity = self._entities.get(entity_id)
        if entity is None:
            raise BlockNotFoundError(entity_id)
        return entity

    def query(self) -> list[NumberBlock]:
        """Live NumberBlocks in store order."""
        return [e for e in self._entities.values() if isinstance(e, NumberBlock)]

    def zero_blocks(self) -> list[ZeroBlock]:
        """Live ZeroBlocks in store order."""
        return [e for e in self._entities.values() if isinstance(e, ZeroBlock)]

    def entities(self) -> list[Entity]:
        """All live entities in store order."""
        return list(self._entities.values())

    def total_value(self) -> int:
        """Sum of all NumberBlock values."""
        return sum(block.value for block in self.query())

    def __contains__(self, entity_id: object) -> bool:
        return entity_id in self._entities

    def __iter__(self) -> Iterator[Entity]:
        return iter(list(self._entities.values()))

    def __len__(self) -> int:
        return len(self._entities)
