"""Domain layer for schedule evaluation."""

from cron_next.schedule.domain.errors import CronNextError, ScheduleParseError
from cron_next.schedule.domain.schedule_port import SchedulePort

__all__ = [
    "CronNextError",
    "ScheduleParseError",
    "SchedulePort",
]
