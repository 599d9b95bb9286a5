"""Domain layer for cron triggers."""

from cron_next.trigger.domain.tick_event import TickEvent

__all__ = [
    "TickEvent",
]
