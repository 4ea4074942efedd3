"""Interaction state machine: drag, merge, split, duplicate and halve.

Owns the BlockStore and the transient PendingCombination. Input
collaborators drive it with drag lifecycle calls and menu selections;
rendering collaborators read ``store.entities()`` and
``pending_combination``; audio/animation collaborators subscribe to the
SignalBus.

Every transition either commits fully through a single
``BlockStore.replace`` call or leaves the store untouched. Absent ids,
out-of-range amounts and missing overlaps are ordinary negative outcomes
reported through the return value.
"""

from __future__ import annotations

from enum import Enum
import logging

from numblocks.core.blocks.models import NumberBlock, PendingCombination, ZeroBlock
from numblocks.core.blocks.store import BlockStore, Clock, wall_clock_ms
from numblocks.core.config.models import AppConfig
from numblocks.core.geometry.collision import overlaps, point_in_box
from numblocks.core.geometry.layout import block_dimensions
from numblocks.core.geometry.models import BoundingBox, Position
from numblocks.core.interaction.placement import (
    clamp_position,
    indicator_position,
    merge_position,
    spawn_position,
    split_positions,
)
from numblocks.core.interaction.scheduler import DelayedActionScheduler, Throttle
from numblocks.core.interaction.signals import Signal, SignalBus, SignalKind

logger = logging.getLogger(__name__)


class SneezeKind(str, Enum):
    """Delayed split variants triggered by a sneeze cue."""

    ONE = "sneeze1"  # split down to the nearest ten (duplicates a lone 1)
    HALF = "sneeze2"  # split in half (a lone 1 becomes 1 and 0)


def sneeze_amount(value: int) -> int:
    """Amount a ``SneezeKind.ONE`` sneeze takes away from ``value`` (> 1).

    Up to 10 it takes one away; above that it leaves the tens below
    ``value`` and takes the rest, so 25 becomes 20 + 5 and 20 becomes 10 + 10.

    Example:
        >>> [sneeze_amount(v) for v in (2, 10, 11, 20, 25)]
        [1, 1, 1, 10, 5]
    """
    if value <= 10:
        return 1
    tens = (value - 1) // 10 * 10
    return value - tens


class InteractionStateMachine:
    """Orchestrates block transitions on top of a BlockStore.

    Example:
        >>> machine = InteractionStateMachine()
        >>> a = machine.spawn(3, Position(100, 100))
        >>> b = machine.spawn(5, Position(300, 300))
        >>> machine.finalize_combine(b, Position(110, 110)) is not None
        True
        >>> [block.value for block in machine.store.query()]
        [8]
    """

    def __init__(
        self,
        store: BlockStore | None = None,
        *,
        config: AppConfig | None = None,
        clock: Clock | None = None,
        signals: SignalBus | None = None,
        scheduler: DelayedActionScheduler | None = None,
    ) -> None:
        """Initialize the state machine.

        Args:
            store: Block store to drive (a fresh one sharing ``clock`` by default).
            config: App configuration (defaults when omitted).
            clock: Millisecond clock for cooldown, throttle and timers.
            signals: Signal bus for transition announcements.
            scheduler: Delayed-action scheduler for sneeze splits.
        """
        self.config = config or AppConfig()
        self._clock = clock or wall_clock_ms
        self.store = store or BlockStore(clock=self._clock)
        self.signals = signals or SignalBus()
        self.scheduler = scheduler or DelayedActionScheduler(self._clock)
        self._preview_throttle = Throttle(
            self.config.interaction.preview_throttle_ms, self._clock
        )
        self._pending: PendingCombination | None = None

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def pending_combination(self) -> PendingCombination | None:
        """Current merge preview, or None."""
        return self._pending

    def _box(
        self, entity: NumberBlock | ZeroBlock, position: Position | None = None
    ) -> BoundingBox:
        return entity.box_at(position or entity.position, self.config.cube)

    def is_in_cooldown(self, entity_id: str) -> bool:
        """True while the entity is inside its post-creation input cooldown."""
        entity = self.store.find(entity_id)
        if entity is None:
            return False
        return self._clock() - entity.created_at < self.config.interaction.cooldown_ms

    def resize(self, width: float, height: float) -> None:
        """Update the canvas bounds used for clamping."""
        self.config.canvas = self.config.canvas.model_copy(
            update={"width": width, "height": height}
        )
        logger.debug(f"Canvas resized to {width}x{height}")

    # ------------------------------------------------------------------
    # Creation and removal
    # ------------------------------------------------------------------

    def spawn(self, value: int, position: Position) -> str:
        """Create a block at ``position``.

        Raises:
            InvalidValue: If value is negative or not an integer.
        """
        block_id = self.store.create(value, position)
        logger.info(f"Spawned {value} as {block_id}")
        return block_id

    def spawn_at_drop(
        self, value: int, drop_point: Position, drag_start: Position
    ) -> str | None:
        """Spawn from a drag that started at ``drag_start`` and ended at ``drop_point``.

        Short drags (under ``spawn_drag_threshold`` of the canvas height) are
        treated as taps and spawn nothing. The new block sits centered on
        the drop point with its bottom edge on it, clamped to the canvas.

        Returns:
            New block id, or None for a short drag.
        """
        canvas = self.config.canvas
        threshold = canvas.height * self.config.interaction.spawn_drag_threshold
        distance = (
            (drop_point.x - drag_start.x) ** 2 + (drop_point.y - drag_start.y) ** 2
        ) ** 0.5
        if distance <= threshold:
            return None

        size = block_dimensions(value, self.config.cube)
        return self.spawn(value, spawn_position(drop_point, size, canvas))

    def remove(self, entity_id: str) -> None:
        """Delete an entity directly, bypassing merge/split logic."""
        self.scheduler.cancel(entity_id)
        self.store.remove(entity_id)
        if self._pending is not None and entity_id in (
            self._pending.dragging_id,
            self._pending.target_id,
        ):
            self._pending = None

    def drop_on_trash(self, entity_id: str, trash: BoundingBox) -> bool:
        """Remove the entity if its box overlaps the trash target."""
        entity = self.store.find(entity_id)
        if entity is None or not overlaps(self._box(entity), trash):
            return False
        self.remove(entity_id)
        logger.info(f"Trashed {entity_id}")
        return True

    def clear(self) -> None:
        """Remove every entity, pending state and timer."""
        self.scheduler.cancel_all()
        self.store.clear()
        self._pending = None

    # ------------------------------------------------------------------
    # Drag lifecycle
    # ------------------------------------------------------------------

    def on_drag_start(self, entity_id: str) -> bool:
        """Begin dragging; ignored for absent ids and blocks in cooldown."""
        if entity_id not in self.store:
            return False
        if self.is_in_cooldown(entity_id):
            logger.debug(f"Ignoring drag on {entity_id}: in cooldown")
            return False
        self.store.set_dragging(entity_id, True)
        self._preview_throttle.reset()
        return True

    def on_drag(self, entity_id: str, position: Position) -> PendingCombination | None:
        """Move a held entity and refresh the merge preview (throttled)."""
        entity = self.store.find(entity_id)
        if entity is None or not entity.is_dragging:
            return self._pending

        self.store.update_position(entity_id, position)
        if isinstance(entity, NumberBlock) and self._preview_throttle.ready():
            return self.check_overlap(entity_id, position)
        return self._pending

    def on_drag_end(self, entity_id: str, position: Position) -> str | None:
        """Drop a held entity at ``position``.

        NumberBlocks run the merge protocol; ZeroBlocks are absorbed by any
        block they land on. A drop for an entity that is not held (its drag
        start was refused, e.g. during cooldown) is ignored.

        Returns:
            Id of the merged block, or None when nothing merged.
        """
        entity = self.store.find(entity_id)
        if entity is None or not entity.is_dragging:
            self._pending = None
            return None

        self.store.update_position(entity_id, position)
        merged_id: str | None = None
        if isinstance(entity, ZeroBlock):
            self.absorb_zero(entity_id, position)
        else:
            merged_id = self.finalize_combine(entity_id, position)

        self.store.set_dragging(entity_id, False)
        self._pending = None
        return merged_id

    # ------------------------------------------------------------------
    # Merge protocol
    # ------------------------------------------------------------------

    def _first_overlap(self, dragged: NumberBlock, position: Position) -> NumberBlock | None:
        """First other block in store order that the dragged box overlaps."""
        dragged_box = self._box(dragged, position)
        for block in self.store.query():
            if block.id == dragged.id or block.is_dragging:
                continue
            if overlaps(dragged_box, self._box(block)):
                return block
        return None

    def check_overlap(self, dragged_id: str, position: Position) -> PendingCombination | None:
        """Preview the merge at a proposed position without committing anything."""
        dragged = self.store.find_number(dragged_id)
        if dragged is None:
            self._pending = None
            return None

        target = self._first_overlap(dragged, position)
        if target is None:
            self._pending = None
            return None

        self._pending = PendingCombination(
            dragging_id=dragged_id,
            target_id=target.id,
            midpoint=indicator_position(
                self._box(dragged, position),
                self._box(target),
                self.config.interaction.indicator_offset,
            ),
        )
        return self._pending

    def finalize_combine(self, dragged_id: str, position: Position) -> str | None:
        """Merge the dragged block into the first block it overlaps at ``position``.

        The overlap is recomputed here rather than taken from the last preview.

        Returns:
            Id of the merged block, or None when nothing overlapped.
        """
        self._pending = None
        dragged = self.store.find_number(dragged_id)
        if dragged is None:
            return None

        target = self._first_overlap(dragged, position)
        if target is None:
            return None

        value = dragged.value + target.value
        size = block_dimensions(value, self.config.cube)
        merged = self.store.build(
            value,
            merge_position(
                self._box(dragged, position), self._box(target), size, self.config.canvas
            ),
        )
        self.store.replace((dragged.id, target.id), (merged,))
        self.scheduler.cancel(dragged.id)
        self.scheduler.cancel(target.id)

        logger.info(f"Merged {dragged.value} + {target.value} = {value} ({merged.id})")
        self.signals.emit(
            Signal(
                kind=SignalKind.MERGE_COMPLETED,
                consumed_ids=(dragged.id, target.id),
                created_ids=(merged.id,),
                value=value,
            )
        )
        return merged.id

    def absorb_zero(self, zero_id: str, position: Position) -> bool:
        """Remove a ZeroBlock dropped onto any NumberBlock (0 + n = n)."""
        zero = self.store.find(zero_id)
        if not isinstance(zero, ZeroBlock):
            return False

        zero_box = self._box(zero, position)
        target = next(
            (b for b in self.store.query() if overlaps(zero_box, self._box(b))), None
        )
        if target is None:
            return False

        self.store.remove(zero_id)
        logger.info(f"Zero {zero_id} absorbed by {target.id}")
        self.signals.emit(
            Signal(
                kind=SignalKind.MERGE_COMPLETED,
                consumed_ids=(zero_id,),
                value=target.value,
            )
        )
        return True

    # ------------------------------------------------------------------
    # Split protocol
    # ------------------------------------------------------------------

    def subtract_options(self, block_id: str) -> list[int]:
        """Amounts that can be subtracted from a block: 1 .. value-1."""
        block = self.store.find_number(block_id)
        if block is None:
            return []
        return list(range(1, block.value))

    def split(self, block_id: str, amount: int, *, silent: bool = False) -> bool:
        """Split a block into ``value - amount`` and ``amount``.

        Args:
            block_id: Block to split.
            amount: Quantity to take away; must satisfy 0 < amount < value.
            silent: Skip the split-completed signal (caller signals itself).

        Returns:
            True if the split happened.
        """
        block = self.store.find_number(block_id)
        if block is None or isinstance(amount, bool) or not hasattr(amount, "__index__"):
            return False
        amount = amount.__index__()
        if amount <= 0 or amount >= block.value:
            logger.debug(f"Rejected split of {block.value} by {amount}")
            return False

        remaining = block.value - amount
        placement = split_positions(
            block.position,
            block_dimensions(remaining, self.config.cube),
            block_dimensions(amount, self.config.cube),
            self.config.canvas,
            self.config.interaction,
        )
        first = self.store.build(remaining, placement.first)
        second = self.store.build(amount, placement.second)
        self._commit_split(block, (first, second))

        logger.info(
            f"Split {block.value} into {remaining} + {amount} ({placement.arrangement.value})"
        )
        if not silent:
            self.signals.emit(
                Signal(
                    kind=SignalKind.SPLIT_COMPLETED,
                    consumed_ids=(block.id,),
                    created_ids=(first.id, second.id),
                    value=block.value,
                )
            )
        return True

    def duplicate(self, block_id: str, *, silent: bool = False) -> bool:
        """Turn a lone 1 into two adjacent 1s.

        This is the one transition that adds quantity; it only applies to 1.
        """
        block = self.store.find_number(block_id)
        if block is None or block.value != 1:
            return False

        unit = block_dimensions(1, self.config.cube)
        placement = split_positions(
            block.position, unit, unit, self.config.canvas, self.config.interaction
        )
        first = self.store.build(1, placement.first)
        second = self.store.build(1, placement.second)
        self._commit_split(block, (first, second))

        logger.info(f"Duplicated 1 ({block.id}) into {first.id}, {second.id}")
        if not silent:
            self.signals.emit(
                Signal(
                    kind=SignalKind.DUPLICATE_COMPLETED,
                    consumed_ids=(block.id,),
                    created_ids=(first.id, second.id),
                    value=1,
                )
            )
        return True

    def halve(self, block_id: str, *, silent: bool = False) -> bool:
        """Split a block into floor(n/2) and ceil(n/2), in that order.

        A 1 becomes a 1 plus a ZeroBlock; this is the only way a ZeroBlock
        is created.
        """
        block = self.store.find_number(block_id)
        if block is None or block.value < 1:
            return False
        if block.value > 1:
            return self.split(block_id, block.value - block.value // 2, silent=silent)

        unit = block_dimensions(1, self.config.cube)
        placement = split_positions(
            block.position, unit, unit, self.config.canvas, self.config.interaction
        )
        one = self.store.build(1, placement.first)
        zero = self.store.build_zero(clamp_position(placement.second, unit, self.config.canvas))
        self._commit_split(block, (one, zero))

        logger.info(f"Halved 1 ({block.id}) into 1 ({one.id}) and 0 ({zero.id})")
        if not silent:
            self.signals.emit(
                Signal(
                    kind=SignalKind.SPLIT_COMPLETED,
                    consumed_ids=(block.id,),
                    created_ids=(one.id, zero.id),
                    value=1,
                )
            )
        return True

    def _commit_split(
        self, source: NumberBlock, results: tuple[NumberBlock | ZeroBlock, ...]
    ) -> None:
        self.store.replace((source.id,), results)
        self.scheduler.cancel(source.id)
        if self._pending is not None and source.id in (
            self._pending.dragging_id,
            self._pending.target_id,
        ):
            self._pending = None

    # ------------------------------------------------------------------
    # Sneeze (delayed split variants)
    # ------------------------------------------------------------------

    def block_at_point(self, point: Position) -> NumberBlock | None:
        """Topmost block (most recently created) whose box contains ``point``."""
        for block in reversed(self.store.query()):
            if point_in_box(point, self._box(block)):
                return block
        return None

    def on_sneeze(self, block_id: str, kind: SneezeKind) -> bool:
        """Announce a sneeze now and apply its split after ``sneeze_delay_ms``.

        The delayed action looks the block up again when it fires, so a
        block removed or merged in the meantime is simply skipped.
        """
        block = self.store.find_number(block_id)
        if block is None or block.value < 1:
            return False

        self.signals.emit(
            Signal(kind=SignalKind.SNEEZE, consumed_ids=(block_id,), value=block.value)
        )
        self.scheduler.schedule(
            block_id,
            self.config.interaction.sneeze_delay_ms,
            lambda: self._apply_sneeze(block_id, kind),
        )
        return True

    def _apply_sneeze(self, block_id: str, kind: SneezeKind) -> bool:
        block = self.store.find_number(block_id)
        if block is None:
            logger.debug(f"Sneeze target {block_id} is gone")
            return False
        if kind is SneezeKind.HALF:
            return self.halve(block_id, silent=True)
        if block.value == 1:
            return self.duplicate(block_id, silent=True)
        return self.split(block_id, sneeze_amount(block.value), silent=True)

    def tick(self, now: float | None = None) -> int:
        """Run delayed actions that are due. Returns how many ran."""
        return self.scheduler.run_due(now)
