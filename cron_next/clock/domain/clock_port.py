"""
Clock port definition.
Defines the wall-clock reads and cooperative sleeps used by the poll-wait loop.
"""

from abc import ABC, abstractmethod
from datetime import datetime, tzinfo


class ClockPort(ABC):
    """
    Abstract port for a wall clock.
    Reads are assumed infallible; sleeping suspends only the calling task.
    """

    @abstractmethod
    def now(self, tz: tzinfo) -> datetime:
        """
        Read the current wall-clock time.

        Args:
            tz: Zone the returned instant is expressed in.

        Returns:
            Timezone-aware current instant with full sub-second resolution.
        """
        raise NotImplementedError

    @abstractmethod
    async def sleep(self, seconds: float) -> None:
        """
        Suspend the calling task.

        Args:
            seconds: Duration to sleep for.
        """
        raise NotImplementedError
