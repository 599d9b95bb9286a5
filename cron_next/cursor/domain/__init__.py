"""Domain layer for occurrence cursors."""

from cron_next.cursor.domain.cursor_state import CursorState
from cron_next.cursor.domain.missed_policy import MissedPolicy
from cron_next.cursor.domain.settings import DEFAULT_POLL_INTERVAL, CronNextSettings

__all__ = [
    "CursorState",
    "MissedPolicy",
    "CronNextSettings",
    "DEFAULT_POLL_INTERVAL",
]
