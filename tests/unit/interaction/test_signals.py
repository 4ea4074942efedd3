"""Tests for SignalBus."""

from __future__ import annotations

import logging

from numblocks.core.interaction.signals import Signal, SignalBus, SignalKind


def test_handlers_receive_signals_in_subscription_order():
    """Handlers are called in the order they subscribed."""
    bus = SignalBus()
    calls: list[str] = []
    bus.subscribe(lambda s: calls.append("first"))
    bus.subscribe(lambda s: calls.append("second"))

    bus.emit(Signal(kind=SignalKind.SPLIT_COMPLETED))

    assert calls == ["first", "second"]


def test_kind_filter():
    """Filtered handlers only see their signal kind."""
    bus = SignalBus()
    merges: list[Signal] = []
    bus.subscribe(merges.append, SignalKind.MERGE_COMPLETED)

    bus.emit(Signal(kind=SignalKind.SPLIT_COMPLETED))
    bus.emit(Signal(kind=SignalKind.MERGE_COMPLETED, value=8))

    assert [s.value for s in merges] == [8]


def test_unsubscribe():
    """Unsubscribing is idempotent and stops delivery."""
    bus = SignalBus()
    seen: list[Signal] = []
    unsubscribe = bus.subscribe(seen.append)

    unsubscribe()
    unsubscribe()
    bus.emit(Signal(kind=SignalKind.SNEEZE))

    assert seen == []
    assert len(bus) == 0


def test_failing_handler_does_not_stop_others(caplog):
    """A raising handler is logged and later handlers still run."""
    bus = SignalBus()
    seen: list[Signal] = []

    def broken(signal: Signal) -> None:
        raise RuntimeError("speaker unplugged")

    bus.subscribe(broken)
    bus.subscribe(seen.append)

    with caplog.at_level(logging.ERROR):
        bus.emit(Signal(kind=SignalKind.DUPLICATE_COMPLETED))

    assert len(seen) == 1
    assert "Signal handler failed for duplicate_completed" in caplog.text
