"""
Poll-wait engine.
Suspends the calling task until the wall clock has reached a target instant.
"""

import logging
from datetime import UTC, datetime

from cron_next.clock.domain.clock_port import ClockPort
from cron_next.cursor.domain.settings import DEFAULT_POLL_INTERVAL


class PollWaiter:
    """
    Waits for a target instant by re-reading the clock every poll interval.

    The sleep is always a full interval, so an occurrence fires between zero
    and one interval (plus loop latency) after its target instant.
    """

    def __init__(self, clock: ClockPort, poll_interval: float = DEFAULT_POLL_INTERVAL) -> None:
        """
        Initialize the waiter.

        Args:
            clock: Wall clock to read and sleep on.
            poll_interval: Seconds between clock checks. Must be positive.

        Raises:
            ValueError: If poll_interval is not positive.
        """
        if poll_interval <= 0:
            raise ValueError(f"poll_interval must be positive, got {poll_interval}")

        self._clock = clock
        self.poll_interval = poll_interval

    async def wait_until(self, target: datetime) -> datetime:
        """
        Suspend until the wall clock has reached the target.

        Args:
            target: Timezone-aware instant to wait for.

        Returns:
            The target instant itself, once now >= target.
        """
        deadline = target.astimezone(UTC)
        polls = 0
        while True:
            now = self._clock.now(UTC)
            if now >= deadline:
                logging.debug(f"Reached {target} after {polls} polls (now={now})")
                return target

            polls += 1
            await self._clock.sleep(self.poll_interval)
