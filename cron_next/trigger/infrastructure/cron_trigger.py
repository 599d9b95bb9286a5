"""
Cron-based trigger implementation.
Runs a CronNext in a background task and queues a tick event for every fired occurrence.
"""

import asyncio
import contextlib
import logging
from collections.abc import AsyncGenerator
from datetime import UTC, tzinfo

from cron_next.clock.domain.clock_port import ClockPort
from cron_next.clock.infrastructure.system_clock import SystemClock
from cron_next.cursor.domain.settings import CronNextSettings
from cron_next.cursor.infrastructure.cron_next import CronNext
from cron_next.trigger.domain.tick_event import TickEvent


class CronTrigger:
    """
    A trigger that fires based on a cron schedule.

    Ticks are produced by a background task, so a consumer that falls behind
    does not delay the schedule. Whether occurrences missed by a stalled
    producer are delivered late or skipped follows the settings' missed policy.
    Stopping cancels the pending wait; the occurrence it was waiting for is
    handed back to the cursor and fires after the next start().

    Example:
        trigger = CronTrigger("0 30 3 * * ?", timezone="Asia/Seoul")
        await trigger.start()
        async for event in trigger.emit():
            print(event.occurrence, event.lateness)
    """

    def __init__(
        self,
        cron_expression: str,
        timezone: str | tzinfo | None = None,
        *,
        trigger_id: str | None = None,
        settings: CronNextSettings | None = None,
        clock: ClockPort | None = None,
    ) -> None:
        """
        Initialize a cron-based trigger.

        Args:
            cron_expression: Cron expression (e.g., "*/5 * * * * ?" for every 5 seconds).
            timezone: Timezone for cron schedule (e.g., "UTC", "Asia/Seoul").
            trigger_id: Identifier stamped on emitted events. Defaults to the expression.
            settings: Poll interval and missed-occurrence policy.
            clock: Wall clock override.

        Raises:
            ScheduleParseError: If the expression is malformed.
        """
        self.cron_expression = cron_expression
        self.trigger_id = trigger_id or cron_expression
        self._clock = clock or SystemClock()
        self._cron = CronNext(cron_expression, timezone, settings=settings, clock=self._clock)
        self._ticks: asyncio.Queue[TickEvent | None] = asyncio.Queue()
        self._producer: asyncio.Task[None] | None = None

    @property
    def cron(self) -> CronNext:
        return self._cron

    def is_running(self) -> bool:
        """Check if the producer task is alive."""
        return self._producer is not None and not self._producer.done()

    async def start(self) -> None:
        """Start producing ticks. A no-op while already running."""
        if self.is_running():
            logging.warning(f"CronTrigger '{self.trigger_id}' is already running")
            return

        self._ticks = asyncio.Queue()
        self._producer = asyncio.create_task(self._produce())
        logging.info(f"CronTrigger '{self.trigger_id}' started, next at {self._cron.peek()}")

    async def stop(self) -> None:
        """Stop producing ticks and release any consumer blocked in emit()."""
        if self._producer is None:
            return

        producer, self._producer = self._producer, None
        if not producer.done():
            producer.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await producer
            self._ticks.put_nowait(None)
        logging.info(f"CronTrigger '{self.trigger_id}' stopped")

    async def emit(self) -> AsyncGenerator[TickEvent, None]:
        """
        Yield ticks as they are produced.

        Ticks already queued when the trigger stops are still delivered.

        Yields:
            A TickEvent per fired occurrence, until the trigger is stopped or
            its schedule is exhausted.
        """
        while (event := await self._ticks.get()) is not None:
            yield event

    async def _produce(self) -> None:
        async for occurrence in self._cron:
            event = TickEvent(
                trigger_id=self.trigger_id,
                expression=self.cron_expression,
                occurrence=occurrence,
                fired_at=self._clock.now(UTC),
            )
            self._ticks.put_nowait(event)
            logging.debug(f"CronTrigger '{self.trigger_id}' fired: {event}")

        logging.info(f"CronTrigger '{self.trigger_id}' schedule exhausted")
        self._ticks.put_nowait(None)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}({self.cron_expression!r}, "
            f"trigger_id={self.trigger_id!r}, running={self.is_running()})"
        )


def create_cron_trigger(
    cron_expression: str,
    timezone: str | tzinfo | None = None,
    trigger_id: str | None = None,
    poll_interval: float | None = None,
    clock: ClockPort | None = None,
) -> CronTrigger:
    """
    Convenience function to create a cron trigger.

    Args:
        cron_expression: Cron expression (e.g., "0 */5 * * * ?").
        timezone: Optional timezone.
        trigger_id: Optional identifier stamped on emitted events.
        poll_interval: Optional poll interval in seconds.
        clock: Optional clock override.

    Returns:
        CronTrigger instance.
    """
    settings = None if poll_interval is None else CronNextSettings(poll_interval=poll_interval)
    return CronTrigger(
        cron_expression=cron_expression,
        timezone=timezone,
        trigger_id=trigger_id,
        settings=settings,
        clock=clock,
    )
