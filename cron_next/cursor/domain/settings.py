"""Configuration for CronNext instances."""

from pydantic import BaseModel, ConfigDict, Field

from cron_next.cursor.domain.missed_policy import MissedPolicy

DEFAULT_POLL_INTERVAL = 1.0


class CronNextSettings(BaseModel):
    """
    Tunables for a CronNext instance.
    Frozen so the poll interval cannot change during a cursor's lifetime.
    """

    model_config = ConfigDict(frozen=True)

    poll_interval: float = Field(
        default=DEFAULT_POLL_INTERVAL,
        gt=0,
        description="Seconds between wall-clock checks while waiting for an occurrence",
        examples=[1.0, 0.25],
    )
    missed_policy: MissedPolicy = Field(
        default=MissedPolicy.SKIP,
        description="Whether occurrences missed between requests are skipped or caught up",
    )
