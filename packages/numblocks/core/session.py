"""Playground session - the entry point for rendering and input collaborators.

The session resolves configuration, wires the block store, signal bus,
scheduler and interaction state machine together, and exposes the calls a
UI layer makes: spawn, the drag lifecycle, split requests, removal and the
read-only query surface.
"""

from __future__ import annotations

from collections.abc import Callable
import logging
from pathlib import Path
from uuid import uuid4

from numblocks.core.blocks.models import Entity, NumberBlock, PendingCombination, ZeroBlock
from numblocks.core.blocks.store import BlockStore, Clock, wall_clock_ms
from numblocks.core.coloring.assigner import CubeStyle, FaceStyle, face_of, render_cubes
from numblocks.core.config.loader import load_app_config
from numblocks.core.config.models import AppConfig
from numblocks.core.geometry.models import BoundingBox, Position
from numblocks.core.interaction.machine import InteractionStateMachine, SneezeKind
from numblocks.core.interaction.signals import SignalBus, SignalHandler, SignalKind
from numblocks.core.utils.logging import get_logger

logger = logging.getLogger(__name__)


class PlaygroundSession:
    """One canvas of live number blocks.

    Example:
        >>> session = PlaygroundSession(app_config=AppConfig())
        >>> block_id = session.spawn(10, Position(100, 100))
        >>> session.on_split_request(block_id, 3)
        True
        >>> sorted(block.value for block in session.blocks)
        [3, 7]
    """

    def __init__(
        self,
        *,
        app_config: AppConfig | Path | str | None = None,
        clock: Clock | None = None,
        session_id: str | None = None,
    ) -> None:
        """Initialize session.

        Args:
            app_config: AppConfig instance, path, or None (default path, then defaults)
            clock: Millisecond clock (wall clock by default). Inject a manual
                clock to drive cooldowns and timers deterministically.
            session_id: Optional session ID. If None, generates a new UUID.

        Raises:
            ValidationError: If the config file is invalid
        """
        self.app_config = self._resolve_config(app_config)
        self.session_id = session_id or str(uuid4())
        self.log = get_logger(__name__, session_id=self.session_id)

        self.clock = clock or wall_clock_ms
        self.store = BlockStore(clock=self.clock)
        self.signals = SignalBus()
        self.machine = InteractionStateMachine(
            self.store,
            config=self.app_config,
            clock=self.clock,
            signals=self.signals,
        )

        self.log.debug(
            f"Session initialized: canvas={self.app_config.canvas.width}"
            f"x{self.app_config.canvas.height}"
        )

    @staticmethod
    def _resolve_config(config: AppConfig | Path | str | None) -> AppConfig:
        if isinstance(config, AppConfig):
            return config
        return load_app_config(config)

    # ------------------------------------------------------------------
    # Query surface
    # ------------------------------------------------------------------

    @property
    def blocks(self) -> list[NumberBlock]:
        """Live number blocks, oldest first (later ones draw on top)."""
        return self.store.query()

    @property
    def zero_blocks(self) -> list[ZeroBlock]:
        return self.store.zero_blocks()

    @property
    def entities(self) -> list[Entity]:
        return self.store.entities()

    @property
    def pending_combination(self) -> PendingCombination | None:
        return self.machine.pending_combination

    @property
    def total_value(self) -> int:
        return self.store.total_value()

    def render_plan(self, block_id: str) -> tuple[CubeStyle, ...]:
        """Per-cube styles for a live block (empty for absent ids)."""
        block = self.store.find_number(block_id)
        if block is None:
            return ()
        return render_cubes(block.value, self.app_config.cube)

    def face(self, block_id: str) -> FaceStyle | None:
        block = self.store.find_number(block_id)
        if block is None:
            return None
        return face_of(block.value, self.app_config.cube)

    def subscribe(
        self, handler: SignalHandler, kind: SignalKind | None = None
    ) -> Callable[[], None]:
        """Subscribe to transition signals; returns an unsubscribe callable."""
        return self.signals.subscribe(handler, kind)

    # ------------------------------------------------------------------
    # Input surface
    # ------------------------------------------------------------------

    def spawn(self, value: int, position: Position) -> str:
        return self.machine.spawn(value, position)

    def spawn_at_drop(self, value: int, drop_point: Position, drag_start: Position) -> str | None:
        return self.machine.spawn_at_drop(value, drop_point, drag_start)

    def on_drag_start(self, block_id: str) -> bool:
        return self.machine.on_drag_start(block_id)

    def on_drag(self, block_id: str, position: Position) -> PendingCombination | None:
        return self.machine.on_drag(block_id, position)

    def on_drag_end(self, block_id: str, position: Position) -> str | None:
        return self.machine.on_drag_end(block_id, position)

    def on_split_request(self, block_id: str, amount: int) -> bool:
        return self.machine.split(block_id, amount)

    def on_duplicate(self, block_id: str) -> bool:
        return self.machine.duplicate(block_id)

    def on_halve(self, block_id: str) -> bool:
        return self.machine.halve(block_id)

    def on_sneeze_drop(self, kind: SneezeKind, drop_point: Position) -> bool:
        """Apply a sneeze dropped at ``drop_point`` to the topmost block there."""
        block = self.machine.block_at_point(drop_point)
        if block is None:
            return False
        return self.machine.on_sneeze(block.id, kind)

    def on_remove(self, block_id: str) -> None:
        self.machine.remove(block_id)

    def on_trash_drop(self, block_id: str, trash: BoundingBox) -> bool:
        return self.machine.drop_on_trash(block_id, trash)

    def resize(self, width: float, height: float) -> None:
        self.machine.resize(width, height)

    def clear(self) -> None:
        self.machine.clear()
        self.log.info("Canvas cleared")

    def tick(self, now: float | None = None) -> int:
        """Pump delayed actions; call from the host's frame loop."""
        return self.machine.tick(now)
