"""
Shared fixtures for the backend tests.
"""

import os
import sys
from unittest.mock import Mock

import pytest

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


class FakeClock:
    """Millisecond clock that only moves when sleep() is called."""

    def __init__(self, now: float = 0.0):
        self.now = now
        self.sleeps = []

    def __call__(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += round(seconds * 1000, 6)


@pytest.fixture
def fake_clock():
    return FakeClock()


@pytest.fixture
def last_cell_rng():
    """Random source that always places the item on the last free cell."""
    rng = Mock()
    rng.choice.side_effect = lambda cells: cells[-1]
    return rng


@pytest.fixture
def clock_factory():
    return FakeClock
