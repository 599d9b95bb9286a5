"""Infrastructure layer for schedule evaluation."""

from cron_next.schedule.infrastructure.croniter_schedule import CroniterSchedule

__all__ = [
    "CroniterSchedule",
]
