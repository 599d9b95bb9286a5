"""Occurrence cursor state enumeration."""

from enum import StrEnum, auto


class CursorState(StrEnum):
    """Represents where a cursor is in its fire cycle.

    Attributes:
        IDLE: No occurrence is cached; the next request computes one
        ARMED: An occurrence is cached and not yet consumed
        WAITING: An occurrence was consumed and the poll loop is waiting for it
        EXHAUSTED: The schedule has no further matches
    """

    IDLE = auto()
    ARMED = auto()
    WAITING = auto()
    EXHAUSTED = auto()

    def is_terminal(self) -> bool:
        """Check if this state is terminal.

        Returns:
            True only if state is EXHAUSTED
        """
        return self == CursorState.EXHAUSTED
