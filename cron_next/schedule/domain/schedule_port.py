"""
Schedule port definition.
Defines the interface the occurrence cursor uses to evaluate a compiled cron expression.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterator
from datetime import datetime


class SchedulePort(ABC):
    """
    Abstract port for a compiled cron schedule.
    Implementations are immutable once constructed and must raise
    ScheduleParseError from their constructor for malformed expressions.
    """

    @property
    @abstractmethod
    def expression(self) -> str:
        """The source expression this schedule was compiled from."""
        raise NotImplementedError

    @abstractmethod
    def upcoming(self, after: datetime) -> Iterator[datetime]:
        """
        Iterate over matching instants strictly after a reference instant.

        Args:
            after: Timezone-aware reference instant. Matches are evaluated in its zone.

        Returns:
            A lazy, strictly increasing iterator of timezone-aware instants.
            The iterator ends when the schedule has no further matches.
        """
        raise NotImplementedError

    def first_after(self, after: datetime) -> datetime | None:
        """
        Get the earliest match strictly after a reference instant.

        Args:
            after: Timezone-aware reference instant.

        Returns:
            The first match, or None if the schedule is exhausted.
        """
        return next(self.upcoming(after), None)
