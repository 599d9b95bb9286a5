"""Schedule evaluation for cron expressions."""

from cron_next.schedule.domain import CronNextError, ScheduleParseError, SchedulePort
from cron_next.schedule.infrastructure import CroniterSchedule

__all__ = [
    # Domain
    "SchedulePort",
    "CronNextError",
    "ScheduleParseError",
    # Infrastructure
    "CroniterSchedule",
]
