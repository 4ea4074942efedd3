"""Fire-and-forget transition signals for audio/animation collaborators."""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum
import logging

from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)


class SignalKind(str, Enum):
    """Transitions announced to subscribers."""

    MERGE_COMPLETED = "merge_completed"
    SPLIT_COMPLETED = "split_completed"
    DUPLICATE_COMPLETED = "duplicate_completed"
    SNEEZE = "sneeze"


class Signal(BaseModel):
    """A committed transition.

    Attributes:
        kind: Which transition happened.
        consumed_ids: Entities removed by the transition.
        created_ids: Entities created by the transition.
        value: Resulting value (merge) or source value (split/duplicate/sneeze).
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: SignalKind
    consumed_ids: tuple[str, ...] = Field(default_factory=tuple)
    created_ids: tuple[str, ...] = Field(default_factory=tuple)
    value: int | None = None


SignalHandler = Callable[[Signal], None]


class SignalBus:
    """Synchronous publish/subscribe for transition signals.

    Handlers run in subscription order on the emitting thread. A failing
    handler is logged and skipped; it never undoes the committed transition.

    Example:
        >>> bus = SignalBus()
        >>> seen = []
        >>> unsubscribe = bus.subscribe(seen.append, SignalKind.MERGE_COMPLETED)
        >>> bus.emit(Signal(kind=SignalKind.MERGE_COMPLETED, value=8))
        >>> seen[0].value
        8
    """

    def __init__(self) -> None:
        self._handlers: list[tuple[SignalKind | None, SignalHandler]] = []

    def subscribe(
        self, handler: SignalHandler, kind: SignalKind | None = None
    ) -> Callable[[], None]:
        """Register ``handler`` for ``kind`` (all kinds when None).

        Returns:
            Callable that removes the subscription.
        """
        entry = (kind, handler)
        self._handlers.append(entry)

        def unsubscribe() -> None:
            if entry in self._handlers:
                self._handlers.remove(entry)

        return unsubscribe

    def emit(self, signal: Signal) -> None:
        """Deliver ``signal`` to every matching handler."""
        logger.debug(f"Signal {signal.kind.value}: {signal.consumed_ids} -> {signal.created_ids}")
        for kind, handler in list(self._handlers):
            if kind is not None and kind != signal.kind:
                continue
            try:
                handler(signal)
            except Exception:
                logger.exception(f"Signal handler failed for {signal.kind.value}")

    def __len__(self) -> int:
        return len(self._handlers)
