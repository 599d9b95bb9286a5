"""Error types raised by the schedule evaluator."""


class CronNextError(Exception):
    """Base class for all errors raised by cron_next."""


class ScheduleParseError(CronNextError, ValueError):
    """
    Raised when a cron expression cannot be compiled.

    Attributes:
        expression: The expression that failed to compile.
        reason: Human readable description of the problem.
    """

    def __init__(self, expression: str, reason: str) -> None:
        super().__init__(f"Invalid cron expression '{expression}': {reason}")
        self.expression = expression
        self.reason = reason
