"""Policy for occurrences that fall between two requests."""

from enum import StrEnum, auto


class MissedPolicy(StrEnum):
    """How a cursor picks the lower bound for a fresh occurrence.

    Attributes:
        SKIP: Resume from the current time; matches that passed while the
            consumer was busy are dropped
        CATCH_UP: Resume from the last returned occurrence; late matches are
            delivered immediately, one per request
    """

    SKIP = auto()
    CATCH_UP = auto()
