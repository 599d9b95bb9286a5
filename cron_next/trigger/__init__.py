"""Cron triggers that turn fired occurrences into tick events."""

from cron_next.trigger.domain import TickEvent
from cron_next.trigger.infrastructure import CronTrigger, create_cron_trigger

__all__ = [
    "TickEvent",
    "CronTrigger",
    "create_cron_trigger",
]
