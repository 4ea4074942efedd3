"""Test suite for numblocks.

Test Structure:
- unit/: Unit tests for individual components
  - geometry/: Cube layout and collision tests
  - coloring/: Palette and per-cube color assignment tests
  - blocks/: Entity model and BlockStore tests
  - interaction/: State machine, placement, scheduler and signal tests
  - config/, utils/: Configuration loading and logging helpers
- conftest.py: Shared fixtures (manual clock, store, machine, session)
"""
