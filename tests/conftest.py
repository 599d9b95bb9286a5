"""Pytest configuration and shared fixtures."""

from datetime import UTC, datetime

import pytest

from tests.fixtures import FakeClock

# Mid-second, so "strictly after now" and "at least now" are distinguishable
START = datetime(2030, 1, 1, 0, 0, 0, 250000, tzinfo=UTC)


@pytest.fixture
def start() -> datetime:
    """Return the instant fake clocks start at."""
    return START


@pytest.fixture
def clock() -> FakeClock:
    """Create a fake clock starting at START."""
    return FakeClock(START)
