"""
Croniter-based schedule implementation.
Evaluates six-field (seconds first) cron expressions with an optional year field.
"""

import logging
from collections.abc import Iterator
from datetime import UTC, datetime, timedelta

from croniter import CroniterBadDateError, croniter  # type: ignore[import-untyped]

from cron_next.schedule.domain.errors import ScheduleParseError
from cron_next.schedule.domain.schedule_port import SchedulePort
from cron_next.schedule.utils.year_field import parse_year_field


class CroniterSchedule(SchedulePort):
    """
    A compiled cron schedule backed by croniter.

    Expressions use the form ``second minute hour day-of-month month day-of-week [year]``.
    A ``?`` in any field means "no constraint".

    Example:
        # Every second
        schedule = CroniterSchedule("* * * * * ? *")

        # 03:30:00 every day, only in 2030
        schedule = CroniterSchedule("0 30 3 * * ? 2030")
    """

    def __init__(self, expression: str) -> None:
        """
        Compile a cron expression.

        Args:
            expression: Six or seven field cron expression.

        Raises:
            ScheduleParseError: If the expression is malformed or a field is out of range.
        """
        self._expression = expression
        fields = expression.split()
        if len(fields) not in (6, 7):
            raise ScheduleParseError(expression, f"expected 6 or 7 fields, got {len(fields)}")

        try:
            self._years = parse_year_field(fields[6]) if len(fields) == 7 else None
        except ValueError as e:
            raise ScheduleParseError(expression, str(e)) from e

        self._cron_expression = " ".join("*" if f == "?" else f for f in fields[:6])
        try:
            croniter(self._cron_expression, second_at_beginning=True)
        except Exception as e:
            raise ScheduleParseError(expression, str(e)) from e

    @property
    def expression(self) -> str:
        """The source expression this schedule was compiled from."""
        return self._expression

    def upcoming(self, after: datetime) -> Iterator[datetime]:
        """
        Iterate over matching instants strictly after a reference instant.

        Args:
            after: Timezone-aware reference instant. Matches are evaluated in its zone.

        Returns:
            A lazy, strictly increasing iterator of timezone-aware instants.

        Raises:
            ValueError: If the reference instant is naive.
        """
        if after.tzinfo is None:
            raise ValueError("reference instant must be timezone-aware")
        return self._iterate(after)

    def _iterate(self, after: datetime) -> Iterator[datetime]:
        base = after
        last = after
        while True:
            itr = croniter(self._cron_expression, base, second_at_beginning=True)
            while True:
                try:
                    occurrence: datetime = itr.get_next(datetime)
                except CroniterBadDateError:
                    logging.debug(f"Schedule '{self._expression}' has no match after {base}")
                    return

                # croniter can repeat wall times across a DST fold. Compare absolute
                # instants, since same-zone comparison ignores fold
                if occurrence.astimezone(UTC) <= last.astimezone(UTC):
                    continue

                if self._years is None or occurrence.year in self._years:
                    last = occurrence
                    yield occurrence
                    continue

                later = [year for year in self._years if year > occurrence.year]
                if not later:
                    logging.debug(f"Schedule '{self._expression}' exhausted its year field")
                    return

                # Restart the evaluation just before the next allowed year
                base = max(
                    datetime(later[0], 1, 1, tzinfo=after.tzinfo) - timedelta(seconds=1),
                    last,
                    key=lambda instant: instant.astimezone(UTC),
                )
                break

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._expression!r})"
