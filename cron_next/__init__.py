"""Await the next firing instant of a cron expression."""

from cron_next.clock import ClockPort, SystemClock
from cron_next.cursor import (
    CronNext,
    CronNextSettings,
    CursorState,
    MissedPolicy,
    OccurrenceCursor,
    PollWaiter,
    create_cron_next,
)
from cron_next.schedule import CronNextError, CroniterSchedule, ScheduleParseError, SchedulePort

__all__ = [
    "CronNext",
    "CronNextSettings",
    "CursorState",
    "MissedPolicy",
    "OccurrenceCursor",
    "PollWaiter",
    "create_cron_next",
    "SchedulePort",
    "CroniterSchedule",
    "CronNextError",
    "ScheduleParseError",
    "ClockPort",
    "SystemClock",
]
