"""Wall-clock access for the poll-wait loop."""

from cron_next.clock.domain import ClockPort
from cron_next.clock.infrastructure import SystemClock, resolve_zone

__all__ = [
    "ClockPort",
    "SystemClock",
    "resolve_zone",
]
