"""
Public iteration API.
Awaits the next occurrence of a cron expression in real time.
"""

import asyncio
import logging
from collections.abc import AsyncGenerator
from datetime import datetime, tzinfo

from cron_next.clock.domain.clock_port import ClockPort
from cron_next.clock.infrastructure.system_clock import SystemClock
from cron_next.clock.infrastructure.zones import resolve_zone
from cron_next.cursor.domain.cursor_state import CursorState
from cron_next.cursor.domain.settings import CronNextSettings
from cron_next.cursor.infrastructure.occurrence_cursor import OccurrenceCursor
from cron_next.cursor.infrastructure.poll_waiter import PollWaiter
from cron_next.schedule.domain.schedule_port import SchedulePort
from cron_next.schedule.infrastructure.croniter_schedule import CroniterSchedule


class CronNext:
    """
    Resolves each time the next occurrence of a cron schedule has arrived.

    Example:
        cron = CronNext("* * * * * ? *", "Asia/Seoul")
        while (occurrence := await cron.next()) is not None:
            print(occurrence)

        # or
        async for occurrence in CronNext("0 */5 * * * ?"):
            run_job(occurrence)
    """

    def __init__(
        self,
        expression: str | SchedulePort,
        timezone: str | tzinfo | None = None,
        *,
        settings: CronNextSettings | None = None,
        clock: ClockPort | None = None,
    ) -> None:
        """
        Compile the expression and arm the first occurrence.

        Args:
            expression: Cron expression, or an already compiled schedule.
            timezone: Zone name or tzinfo the schedule is evaluated in. Defaults to UTC.
            settings: Poll interval and missed-occurrence policy.
            clock: Wall clock to use. Defaults to the system clock.

        Raises:
            ScheduleParseError: If the expression is malformed.
            ValueError: If the timezone is unknown.
        """
        self.settings = settings or CronNextSettings()
        self.zone = resolve_zone(timezone)
        schedule = (
            expression if isinstance(expression, SchedulePort) else CroniterSchedule(expression)
        )
        clock = clock or SystemClock()

        self._cursor = OccurrenceCursor(schedule, self.zone, clock, self.settings.missed_policy)
        self._waiter = PollWaiter(clock, self.settings.poll_interval)
        self._waiting = False

        logging.debug(f"CronNext '{schedule.expression}' armed with {self._cursor.cached_next}")

    @property
    def expression(self) -> str:
        return self._cursor.schedule.expression

    @property
    def state(self) -> CursorState:
        """Current state, including WAITING while next() is suspended."""
        if self._waiting:
            return CursorState.WAITING
        return self._cursor.state

    def peek(self) -> datetime | None:
        """Get the occurrence the next call to next() will wait for, without consuming it."""
        return self._cursor.peek()

    async def next(self) -> datetime | None:
        """
        Wait for the next occurrence.

        Returns:
            The occurrence instant once the wall clock has reached it, or None
            when the schedule has no further matches.

        Raises:
            RuntimeError: If another task is already waiting on this instance.
        """
        if self._waiting:
            raise RuntimeError(f"CronNext '{self.expression}' is already waiting in another task")

        target = self._cursor.take_next()
        if target is None:
            return None

        self._waiting = True
        try:
            return await self._waiter.wait_until(target)
        except asyncio.CancelledError:
            self._cursor.rearm(target)
            raise
        finally:
            self._waiting = False

    async def __aiter__(self) -> AsyncGenerator[datetime, None]:
        while (occurrence := await self.next()) is not None:
            yield occurrence

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}({self.expression!r}, zone={self.zone}, state={self.state})"
        )


def create_cron_next(
    expression: str,
    timezone: str | tzinfo | None = None,
    poll_interval: float | None = None,
    clock: ClockPort | None = None,
) -> CronNext:
    """
    Convenience function to create a CronNext.

    Args:
        expression: Cron expression (e.g., "0 30 3 * * ?").
        timezone: Optional zone name or tzinfo.
        poll_interval: Optional poll interval in seconds.
        clock: Optional clock override.

    Returns:
        CronNext instance.
    """
    settings = None if poll_interval is None else CronNextSettings(poll_interval=poll_interval)
    return CronNext(expression, timezone, settings=settings, clock=clock)
