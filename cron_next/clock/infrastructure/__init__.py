"""Infrastructure layer for clocks."""

from cron_next.clock.infrastructure.system_clock import SystemClock
from cron_next.clock.infrastructure.zones import resolve_zone

__all__ = [
    "SystemClock",
    "resolve_zone",
]
