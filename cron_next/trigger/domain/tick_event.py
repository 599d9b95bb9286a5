"""Tick event emitted by cron triggers."""

import uuid
from datetime import UTC, datetime, timedelta

import uuid6
from pydantic import BaseModel, Field


class TickEvent(BaseModel):
    """
    Emitted by a trigger each time one of its occurrences fires.
    It automatically provides a unique event ID and the delivery timestamp.
    """

    event_id: uuid.UUID = Field(description="The unique event ID", default_factory=uuid6.uuid7)
    trigger_id: str = Field(
        default="",
        description="Identifier of the trigger that fired",
        examples=["daily_report"],
    )
    expression: str = Field(
        description="The cron expression that produced the occurrence",
        examples=["0 30 3 * * ?"],
    )
    occurrence: datetime = Field(description="The scheduled instant that fired")
    fired_at: datetime = Field(
        description="Wall-clock time at which the occurrence was delivered",
        default_factory=lambda: datetime.now(UTC),
    )

    @property
    def lateness(self) -> timedelta:
        """How long after its scheduled instant the occurrence was delivered."""
        return self.fired_at - self.occurrence

    def __str__(self) -> str:
        return (
            f"{self.__class__.__name__}(id={self.event_id}, trigger={self.trigger_id}, "
            f"occurrence={self.occurrence.isoformat()})"
        )

    def __repr__(self) -> str:
        return self.__str__()
