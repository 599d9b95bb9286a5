"""System wall clock backed by datetime and asyncio."""

import asyncio
from datetime import UTC, datetime, tzinfo

from cron_next.clock.domain.clock_port import ClockPort


class SystemClock(ClockPort):
    """Reads the real wall clock and sleeps on the running event loop."""

    def now(self, tz: tzinfo) -> datetime:
        return datetime.now(UTC).astimezone(tz)

    async def sleep(self, seconds: float) -> None:
        await asyncio.sleep(seconds)
