"""
Occurrence cursor implementation.
Tracks which schedule occurrence comes next, caching exactly one instant ahead.
"""

import logging
from datetime import UTC, datetime, tzinfo

from cron_next.clock.domain.clock_port import ClockPort
from cron_next.cursor.domain.cursor_state import CursorState
from cron_next.cursor.domain.missed_policy import MissedPolicy
from cron_next.schedule.domain.schedule_port import SchedulePort


def _absolute(instant: datetime) -> datetime:
    # Same-zone comparisons ignore fold, so the repeated hour of a DST fall-back
    # would compare equal to the first one
    return instant.astimezone(UTC)


class OccurrenceCursor:
    """
    Owns the cached next occurrence of a schedule.

    The cache is computed once at construction and after that only when a
    request finds it empty. A cursor is not safe for concurrent use; give each
    consuming task its own cursor.

    Example:
        cursor = OccurrenceCursor(CroniterSchedule("0 * * * * ?"), UTC, SystemClock())
        cursor.peek()       # first minute boundary after construction
        cursor.take_next()  # same instant, cache is now empty
    """

    def __init__(
        self,
        schedule: SchedulePort,
        zone: tzinfo,
        clock: ClockPort,
        policy: MissedPolicy = MissedPolicy.SKIP,
    ) -> None:
        """
        Create a cursor and arm it with the first occurrence after now.

        Args:
            schedule: Compiled schedule to pull occurrences from.
            zone: Zone the schedule is evaluated in.
            clock: Wall clock used for the "now" lower bound.
            policy: Lower-bound policy for occurrences computed after the first.
        """
        self.schedule = schedule
        self.zone = zone
        self.policy = policy
        self._clock = clock
        self._exhausted = False
        self.last_returned: datetime | None = None
        self._previous_returned: datetime | None = None
        self.cached_next: datetime | None = None
        self.cached_next = self._compute()

    @property
    def state(self) -> CursorState:
        """Current state of the cursor, excluding WAITING which only CronNext observes."""
        if self._exhausted:
            return CursorState.EXHAUSTED
        if self.cached_next is not None:
            return CursorState.ARMED
        return CursorState.IDLE

    def is_exhausted(self) -> bool:
        """Check if the schedule has no further matches."""
        return self._exhausted

    def peek(self) -> datetime | None:
        """
        Get the next occurrence without consuming it.

        Returns:
            The cached occurrence (computing it if the cursor is idle), or None
            if the schedule is exhausted.
        """
        if self.cached_next is None:
            self.cached_next = self._compute()
        return self.cached_next

    def take_next(self) -> datetime | None:
        """
        Consume the next occurrence.

        Returns:
            The cached occurrence if armed, otherwise a freshly computed one.
            None once the schedule is exhausted.
        """
        target = self.cached_next
        self.cached_next = None
        if target is None:
            target = self._compute()
        if target is None:
            return None

        self._previous_returned = self.last_returned
        self.last_returned = target
        return target

    def rearm(self, target: datetime) -> None:
        """
        Hand back an occurrence that was taken but never fired.

        An occurrence cached by peek() after the take lies beyond the target and
        is discarded; it is recomputed once the target has been taken again.

        Args:
            target: The instant most recently returned by take_next.

        Raises:
            ValueError: If target is not the last taken occurrence.
        """
        if self.last_returned is None or _absolute(target) != _absolute(self.last_returned):
            raise ValueError(f"Cannot rearm {target}: it is not the last taken occurrence")

        if self.cached_next is not None:
            logging.debug(
                f"Cursor '{self.schedule.expression}' dropped look-ahead {self.cached_next}"
            )
        self.cached_next = target
        self.last_returned = self._previous_returned
        logging.debug(f"Cursor '{self.schedule.expression}' rearmed with {target}")

    def _lower_bound(self) -> datetime:
        now = self._clock.now(self.zone)
        if self.last_returned is None:
            return now
        if self.policy == MissedPolicy.CATCH_UP:
            return self.last_returned
        # max() keeps the sequence increasing if the wall clock steps backwards
        return max(now, self.last_returned, key=_absolute)

    def _compute(self) -> datetime | None:
        if self._exhausted:
            return None

        after = self._lower_bound()
        occurrence = self.schedule.first_after(after)
        if occurrence is None:
            self._exhausted = True
            logging.info(f"Schedule '{self.schedule.expression}' has no occurrence after {after}")
            return None

        logging.debug(f"Cursor '{self.schedule.expression}' computed {occurrence} after {after}")
        return occurrence
