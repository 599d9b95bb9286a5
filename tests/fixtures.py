"""Test fixtures shared by cursor and trigger tests."""

from __future__ import annotations

import asyncio
from collections.abc import Iterator, Sequence
from datetime import UTC, datetime, timedelta, tzinfo

from cron_next.clock.domain.clock_port import ClockPort
from cron_next.schedule.domain.schedule_port import SchedulePort


class FakeClock(ClockPort):
    """Deterministic clock for testing; sleeping advances simulated time instead of waiting."""

    def __init__(self, start: datetime) -> None:
        """Initialize the clock at a fixed instant.

        Args:
            start: Timezone-aware starting instant
        """
        self.current = start
        self.sleeps: list[float] = []

    def now(self, tz: tzinfo) -> datetime:
        return self.current.astimezone(tz)

    async def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.advance(seconds)
        # Let other tasks run, as a real sleep would
        await asyncio.sleep(0)

    def advance(self, seconds: float) -> None:
        """Move simulated time forward (or backward for negative values)."""
        self.current += timedelta(seconds=seconds)


class StubSchedule(SchedulePort):
    """Schedule over a fixed, finite list of instants."""

    def __init__(self, instants: Sequence[datetime], expression: str = "stub") -> None:
        self._instants = sorted(instants, key=lambda instant: instant.astimezone(UTC))
        self._expression = expression
        self.evaluations = 0

    @property
    def expression(self) -> str:
        return self._expression

    def upcoming(self, after: datetime) -> Iterator[datetime]:
        self.evaluations += 1
        after = after.astimezone(UTC)
        return (instant for instant in self._instants if instant.astimezone(UTC) > after)
