"""Infrastructure layer for occurrence cursors."""

from cron_next.cursor.infrastructure.cron_next import CronNext, create_cron_next
from cron_next.cursor.infrastructure.occurrence_cursor import OccurrenceCursor
from cron_next.cursor.infrastructure.poll_waiter import PollWaiter

__all__ = [
    "OccurrenceCursor",
    "PollWaiter",
    "CronNext",
    "create_cron_next",
]
