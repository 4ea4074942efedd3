"""Shared pytest fixtures for numblocks tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from numblocks.core.blocks.store import BlockStore
from numblocks.core.config.models import AppConfig
from numblocks.core.interaction.machine import InteractionStateMachine
from numblocks.core.interaction.signals import Signal, SignalBus
from numblocks.core.session import PlaygroundSession


class ManualClock:
    """Millisecond clock that only moves when a test advances it."""

    def __init__(self, start: float = 0.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, ms: float) -> None:
        self.now += ms


# ============================================================================
# Path Fixtures
# ============================================================================


@pytest.fixture
def project_root() -> Path:
    """Get project root directory."""
    return Path(__file__).parent.parent


# ============================================================================
# Clock and Config Fixtures
# ============================================================================


@pytest.fixture
def clock() -> ManualClock:
    """Manual clock starting at t=0ms."""
    return ManualClock()


@pytest.fixture
def app_config() -> AppConfig:
    """Default configuration (1024x768 canvas, 48px cubes)."""
    return AppConfig()


# ============================================================================
# Interaction Fixtures
# ============================================================================


@pytest.fixture
def store(clock: ManualClock) -> BlockStore:
    return BlockStore(clock=clock)


@pytest.fixture
def signals() -> SignalBus:
    return SignalBus()


@pytest.fixture
def received(signals: SignalBus) -> list[Signal]:
    """Every signal emitted on the ``signals`` bus, in order."""
    seen: list[Signal] = []
    signals.subscribe(seen.append)
    return seen


@pytest.fixture
def machine(
    store: BlockStore, app_config: AppConfig, clock: ManualClock, signals: SignalBus
) -> InteractionStateMachine:
    """State machine over the shared store, clock and signal bus."""
    return InteractionStateMachine(store, config=app_config, clock=clock, signals=signals)


@pytest.fixture
def session(app_config: AppConfig, clock: ManualClock) -> PlaygroundSession:
    return PlaygroundSession(app_config=app_config, clock=clock, session_id="test-session")
