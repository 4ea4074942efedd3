"""Block interaction: drag/merge/split state machine and its helpers."""

from numblocks.core.interaction.machine import (
    InteractionStateMachine,
    SneezeKind,
    sneeze_amount,
)
from numblocks.core.interaction.placement import (
    SplitArrangement,
    SplitPlacement,
    clamp_position,
    merge_position,
    spawn_position,
    split_positions,
)
from numblocks.core.interaction.scheduler import DelayedActionScheduler, Throttle
from numblocks.core.interaction.signals import Signal, SignalBus, SignalKind

__all__ = [
    "DelayedActionScheduler",
    "InteractionStateMachine",
    "Signal",
    "SignalBus",
    "SignalKind",
    "SneezeKind",
    "SplitArrangement",
    "SplitPlacement",
    "Throttle",
    "clamp_position",
    "merge_position",
    "spawn_position",
    "sneeze_amount",
    "split_positions",
]
