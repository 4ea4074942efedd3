"""Clock-driven delayed actions and preview throttling.

Both are pumped by the host's event loop: nothing here starts a thread or
blocks. The host calls :meth:`DelayedActionScheduler.run_due` from its
frame/tick handler.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
import heapq
import itertools
import logging

logger = logging.getLogger(__name__)

Clock = Callable[[], float]
Action = Callable[[], object]


@dataclass(order=True)
class _Timer:
    due_ms: float
    seq: int
    key: str = field(compare=False)
    action: Action = field(compare=False)
    cancelled: bool = field(default=False, compare=False)


class DelayedActionScheduler:
    """Fire-and-forget timers keyed by entity id.

    At most one timer is pending per key; scheduling again for the same key
    supersedes the earlier timer. Actions must tolerate stale ids, since the
    entity may be gone by the time the timer fires.

    Example:
        >>> now = [0.0]
        >>> scheduler = DelayedActionScheduler(clock=lambda: now[0])
        >>> fired = []
        >>> scheduler.schedule("block-1", 500, lambda: fired.append("split"))
        >>> scheduler.run_due()
        0
        >>> now[0] = 500.0
        >>> scheduler.run_due()
        1
    """

    def __init__(self, clock: Clock) -> None:
        self._clock = clock
        self._heap: list[_Timer] = []
        self._by_key: dict[str, _Timer] = {}
        self._seq = itertools.count()

    def schedule(self, key: str, delay_ms: float, action: Action) -> None:
        """Run ``action`` once ``delay_ms`` has elapsed."""
        if self.cancel(key):
            logger.debug(f"Superseded pending timer for {key}")
        timer = _Timer(
            due_ms=self._clock() + max(delay_ms, 0.0),
            seq=next(self._seq),
            key=key,
            action=action,
        )
        heapq.heappush(self._heap, timer)
        self._by_key[key] = timer

    def cancel(self, key: str) -> bool:
        """Cancel the pending timer for ``key``. Returns True if one was pending."""
        timer = self._by_key.pop(key, None)
        if timer is None:
            return False
        timer.cancelled = True
        return True

    def cancel_all(self) -> None:
        for timer in self._by_key.values():
            timer.cancelled = True
        self._by_key.clear()
        self._heap.clear()

    def run_due(self, now: float | None = None) -> int:
        """Run every timer due at ``now`` (clock time by default), oldest first.

        Returns:
            Number of actions run.
        """
        now = self._clock() if now is None else now
        ran = 0
        while self._heap and self._heap[0].due_ms <= now:
            timer = heapq.heappop(self._heap)
            if timer.cancelled:
                continue
            self._by_key.pop(timer.key, None)
            try:
                timer.action()
            except Exception:
                logger.exception(f"Delayed action for {timer.key} failed")
            ran += 1
        return ran

    def pending(self) -> list[str]:
        """Keys with a pending timer."""
        return list(self._by_key)

    def __contains__(self, key: object) -> bool:
        return key in self._by_key


class Throttle:
    """Allows at most one evaluation per ``interval_ms``.

    The first call always passes; :meth:`reset` re-arms it.
    """

    def __init__(self, interval_ms: float, clock: Clock) -> None:
        self._interval_ms = interval_ms
        self._clock = clock
        self._last_ms: float | None = None

    def ready(self) -> bool:
        now = self._clock()
        if self._last_ms is not None and now - self._last_ms < self._interval_ms:
            return False
        self._last_ms = now
        return True

    def reset(self) -> None:
        self._last_ms = None
