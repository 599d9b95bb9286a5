"""Occurrence cursors and the poll-wait loop."""

from cron_next.cursor.domain import (
    DEFAULT_POLL_INTERVAL,
    CronNextSettings,
    CursorState,
    MissedPolicy,
)
from cron_next.cursor.infrastructure import (
    CronNext,
    OccurrenceCursor,
    PollWaiter,
    create_cron_next,
)

__all__ = [
    # Domain
    "CursorState",
    "MissedPolicy",
    "CronNextSettings",
    "DEFAULT_POLL_INTERVAL",
    # Infrastructure
    "OccurrenceCursor",
    "PollWaiter",
    "CronNext",
    # Convenience functions
    "create_cron_next",
]
