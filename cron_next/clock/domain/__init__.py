"""Domain layer for clocks."""

from cron_next.clock.domain.clock_port import ClockPort

__all__ = [
    "ClockPort",
]
