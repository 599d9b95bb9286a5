"""Infrastructure layer for cron triggers."""

from cron_next.trigger.infrastructure.cron_trigger import CronTrigger, create_cron_trigger

__all__ = [
    "CronTrigger",
    "create_cron_trigger",
]
