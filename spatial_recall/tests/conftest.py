"""
Pytest fixtures for Spatial Recall tests.
"""

import random

import pytest

from ..games.die import DieState, create_canonical_die
from ..games.grid import GridState, create_ordered_grid
from ..games.voxel import CubeState, create_ordered_cube
from ..session import PhaseScheduler


class FakeTimer:
    """Stands in for threading.Timer; fires only when told to."""

    def __init__(self, interval, function):
        self.interval = interval
        self.function = function
        self.daemon = False
        self.started = False
        self.cancelled = False

    def start(self):
        self.started = True

    def cancel(self):
        self.cancelled = True

    def fire(self):
        """Run the callback, even if cancelled (a late timer)."""
        self.function()


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source."""
    return random.Random(1234)


@pytest.fixture
def ordered_grid() -> GridState:
    """1..9 in reading order."""
    return create_ordered_grid()


@pytest.fixture
def canonical_die() -> DieState:
    """Top 1, front 2, right 3."""
    return create_canonical_die()


@pytest.fixture
def ordered_cube() -> CubeState:
    """Blocks 1..27, front slice first."""
    return create_ordered_cube()


@pytest.fixture
def timers() -> list[FakeTimer]:
    """Every FakeTimer created by fake_scheduler, in creation order."""
    return []


@pytest.fixture
def timer_factory(timers):
    """threading.Timer stand-in that records every FakeTimer it makes."""

    def factory(interval, function):
        timer = FakeTimer(interval, function)
        timers.append(timer)
        return timer

    return factory


@pytest.fixture
def fake_scheduler(timer_factory) -> PhaseScheduler:
    """Scheduler whose timers never run on their own."""
    return PhaseScheduler(timer_factory=timer_factory)
