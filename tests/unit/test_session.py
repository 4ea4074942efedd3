"""Unit tests for PlaygroundSession."""

from __future__ import annotations

from pathlib import Path

import yaml

from numblocks.core.config.models import AppConfig
from numblocks.core.geometry.models import BoundingBox, Position
from numblocks.core.interaction.machine import SneezeKind
from numblocks.core.interaction.signals import Signal, SignalKind
from numblocks.core.session import PlaygroundSession


def test_session_loads_config_from_path(tmp_path: Path) -> None:
    """Session should accept a config file path."""
    config_file = tmp_path / "numblocks.yaml"
    config_file.write_text(yaml.safe_dump({"canvas": {"width": 640, "height": 480}}))

    session = PlaygroundSession(app_config=config_file, session_id="s1")

    assert session.app_config.canvas.width == 640
    assert session.session_id == "s1"


def test_session_defaults_without_config_file(tmp_path: Path) -> None:
    """A missing config file falls back to defaults."""
    session = PlaygroundSession(app_config=tmp_path / "absent.yaml")
    assert session.app_config == AppConfig()
    assert session.session_id


def test_split_request(session: PlaygroundSession) -> None:
    """Subtract-menu requests split the block and keep the total."""
    block_id = session.spawn(10, Position(100, 100))

    assert session.on_split_request(block_id, 3)
    assert sorted(block.value for block in session.blocks) == [3, 7]
    assert session.total_value == 10


def test_drag_merge_through_session(session: PlaygroundSession, clock) -> None:
    """Merge signals reach session subscribers."""
    merges: list[Signal] = []
    session.subscribe(merges.append, SignalKind.MERGE_COMPLETED)
    session.spawn(3, Position(100, 100))
    dragged = session.spawn(5, Position(400, 400))
    clock.advance(200)

    session.on_drag_start(dragged)
    assert session.on_drag(dragged, Position(120, 120)) is not None
    assert session.pending_combination is not None
    merged_id = session.on_drag_end(dragged, Position(120, 120))

    assert [block.value for block in session.blocks] == [8]
    assert merges[0].created_ids == (merged_id,)
    assert session.pending_combination is None


def test_unsubscribe_stops_delivery(session: PlaygroundSession) -> None:
    """The callable returned by subscribe detaches the handler."""
    received: list[Signal] = []
    unsubscribe = session.subscribe(received.append)

    one = session.spawn(1, Position(100, 100))
    session.on_duplicate(one)
    assert len(received) == 1

    unsubscribe()
    session.on_duplicate(session.blocks[0].id)
    assert len(received) == 1


def test_render_plan_and_face(session: PlaygroundSession) -> None:
    """Render plans and faces are built for live blocks only."""
    block_id = session.spawn(12, Position(0, 0))

    plan = session.render_plan(block_id)

    assert len(plan) == 12
    assert session.face(block_id).cube_index == 10
    assert session.render_plan("missing") == ()
    assert session.face("missing") is None


def test_duplicate_and_halve(session: PlaygroundSession) -> None:
    """Duplicating then halving a 1 leaves two 1s and a ZeroBlock."""
    one = session.spawn(1, Position(100, 100))
    assert session.on_duplicate(one)

    first = session.blocks[0].id
    assert session.on_halve(first)

    assert [block.value for block in session.blocks] == [1, 1]
    assert len(session.zero_blocks) == 1
    assert len(session.entities) == 3


def test_sneeze_drop_hits_topmost_block(session: PlaygroundSession, clock) -> None:
    """Sneeze drops only schedule when they land on a block."""
    session.spawn(6, Position(100, 100))

    assert session.on_sneeze_drop(SneezeKind.HALF, Position(110, 110))
    assert not session.on_sneeze_drop(SneezeKind.HALF, Position(900, 700))

    clock.advance(500)
    assert session.tick() == 1
    assert [block.value for block in session.blocks] == [3, 3]


def test_remove_trash_and_clear(session: PlaygroundSession) -> None:
    """Remove, trash and clear all empty the playground."""
    a = session.spawn(2, Position(100, 100))
    b = session.spawn(3, Position(950, 600))

    session.on_remove(a)
    assert session.on_trash_drop(b, BoundingBox(900, 700, 100, 60))
    assert session.entities == []

    session.spawn(4, Position(0, 0))
    session.clear()
    assert session.total_value == 0


def test_resize(session: PlaygroundSession) -> None:
    """Resizing the session canvas changes drop clamping."""
    session.resize(300, 300)
    block_id = session.spawn_at_drop(1, Position(900, 900), Position(0, 0))
    assert session.store.find(block_id).position == Position(242, 242)
