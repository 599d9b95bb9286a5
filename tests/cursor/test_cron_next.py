"""Tests for the public CronNext iteration API."""

import asyncio
import contextlib
from datetime import UTC, datetime, timedelta
from zoneinfo import ZoneInfo

import pytest
from pydantic import ValidationError

from cron_next import (
    CronNext,
    CronNextSettings,
    CursorState,
    MissedPolicy,
    ScheduleParseError,
    create_cron_next,
)
from cron_next.clock import SystemClock
from tests.fixtures import FakeClock, StubSchedule


@pytest.mark.asyncio
class TestCronNextIteration:
    """Test cases for next() and async iteration."""

    async def test_every_second_three_times(self, clock: FakeClock) -> None:
        """Test three consecutive fires of an every-second schedule under a simulated clock."""
        cron = CronNext("* * * * * ? *", UTC, clock=clock)

        occurrences = []
        for _ in range(3):
            occurrence = await cron.next()
            assert occurrence is not None
            assert occurrence <= clock.now(UTC)
            occurrences.append(occurrence)

        assert occurrences == [
            datetime(2030, 1, 1, 0, 0, 1, tzinfo=UTC),
            datetime(2030, 1, 1, 0, 0, 2, tzinfo=UTC),
            datetime(2030, 1, 1, 0, 0, 3, tzinfo=UTC),
        ]
        assert clock.sleeps == [1.0, 1.0, 1.0]

    async def test_first_occurrence_after_construction(
        self, clock: FakeClock, start: datetime
    ) -> None:
        """Test that the first occurrence is strictly after the construction instant."""
        cron = CronNext("*/10 * * * * ?", clock=clock)

        occurrence = await cron.next()

        assert occurrence is not None
        assert occurrence > start

    async def test_resolution_within_one_poll_interval(self, clock: FakeClock) -> None:
        """Test the poll-latency bound with a custom interval."""
        settings = CronNextSettings(poll_interval=0.25)
        cron = CronNext("0 * * * * ?", UTC, settings=settings, clock=clock)

        occurrence = await cron.next()

        assert occurrence == datetime(2030, 1, 1, 0, 1, tzinfo=UTC)
        assert occurrence <= clock.current < occurrence + timedelta(seconds=0.25)
        assert set(clock.sleeps) == {0.25}

    async def test_occurrences_in_configured_zone(self, clock: FakeClock) -> None:
        """Test that occurrences are expressed in the configured zone."""
        settings = CronNextSettings(poll_interval=60)
        cron = CronNext("0 0 9 * * ?", "Asia/Seoul", settings=settings, clock=clock)

        occurrence = await cron.next()

        # The clock starts just after 09:00 in Seoul, so the first match is the next day
        assert occurrence is not None
        assert occurrence.tzinfo == ZoneInfo("Asia/Seoul")
        assert occurrence.hour == 9
        assert occurrence.astimezone(UTC) == datetime(2030, 1, 2, 0, 0, tzinfo=UTC)

    async def test_exhausted_schedule_returns_none(self, clock: FakeClock) -> None:
        """Test that a schedule with no future date resolves None on the first call."""
        cron = CronNext("0 0 0 1 1 ? 2000", clock=clock)

        assert await cron.next() is None
        assert cron.state == CursorState.EXHAUSTED
        assert await cron.next() is None
        assert clock.sleeps == []

    @pytest.mark.parametrize(
        "expression",
        [
            "0 0 0 30 2 ?",
            "0 0 0 31 4 ?",
            "0 0 0 29 2 ? 2031",
        ],
    )
    async def test_impossible_date_returns_none(self, clock: FakeClock, expression: str) -> None:
        """Test that a day-of-month/month pair that never occurs resolves None at once."""
        cron = CronNext(expression, clock=clock)

        assert await cron.next() is None
        assert cron.state == CursorState.EXHAUSTED
        assert clock.sleeps == []

    async def test_async_for_stops_at_exhaustion(self, clock: FakeClock, start: datetime) -> None:
        """Test that async iteration ends when the schedule runs out."""
        instants = [start + timedelta(seconds=s) for s in (1, 2, 5)]
        cron = CronNext(StubSchedule(instants), clock=clock)

        collected = [occurrence async for occurrence in cron]

        assert collected == instants
        assert cron.state == CursorState.EXHAUSTED

    async def test_strictly_increasing(self, clock: FakeClock) -> None:
        """Test that successive results strictly increase."""
        cron = CronNext("*/3 * * * * ?", clock=clock)
        occurrences = [await cron.next() for _ in range(5)]

        assert None not in occurrences
        assert occurrences == sorted(set(occurrences))  # type: ignore[type-var]

    async def test_missed_occurrence_is_not_skipped_by_late_wakeup(self, clock: FakeClock) -> None:
        """Test that a poll tick landing well past the target still returns that target."""
        settings = CronNextSettings(poll_interval=5.0)
        cron = CronNext("* * * * * ? *", settings=settings, clock=clock)

        assert await cron.next() == datetime(2030, 1, 1, 0, 0, 1, tzinfo=UTC)


@pytest.mark.asyncio
class TestCronNextMissedPolicy:
    """Test missed-occurrence policies through the public API."""

    async def test_skip_resumes_from_now(self, clock: FakeClock) -> None:
        """Test that SKIP ignores occurrences that passed while the caller was busy."""
        cron = CronNext("* * * * * ? *", clock=clock)
        await cron.next()

        clock.advance(30)

        assert await cron.next() == datetime(2030, 1, 1, 0, 0, 32, tzinfo=UTC)

    async def test_catch_up_delivers_late_occurrences_immediately(self, clock: FakeClock) -> None:
        """Test that CATCH_UP returns each missed occurrence without sleeping."""
        settings = CronNextSettings(missed_policy=MissedPolicy.CATCH_UP)
        cron = CronNext("* * * * * ? *", settings=settings, clock=clock)
        await cron.next()
        clock.advance(30)
        sleeps_before = len(clock.sleeps)

        caught_up = [await cron.next() for _ in range(3)]

        assert caught_up == [
            datetime(2030, 1, 1, 0, 0, 2, tzinfo=UTC),
            datetime(2030, 1, 1, 0, 0, 3, tzinfo=UTC),
            datetime(2030, 1, 1, 0, 0, 4, tzinfo=UTC),
        ]
        assert len(clock.sleeps) == sleeps_before


@pytest.mark.asyncio
class TestCronNextLifecycle:
    """Test construction, state and cancellation."""

    async def test_parse_error_on_construction(self) -> None:
        """Test that a malformed expression fails construction."""
        with pytest.raises(ScheduleParseError):
            CronNext("99 * * * * ?")

    async def test_unknown_timezone(self) -> None:
        """Test that an unknown zone name fails construction."""
        with pytest.raises(ValueError, match="Unknown timezone"):
            CronNext("* * * * * ?", "Not/AZone")

    async def test_default_zone_is_utc(self) -> None:
        """Test that omitting the zone evaluates in UTC."""
        assert CronNext("* * * * * ?").zone == UTC

    async def test_state_transitions(self, clock: FakeClock) -> None:
        """Test ARMED -> WAITING -> IDLE -> ARMED."""
        cron = CronNext("0 0 * * * ?", clock=clock, settings=CronNextSettings(poll_interval=60))
        assert cron.state == CursorState.ARMED

        task = asyncio.create_task(cron.next())
        await asyncio.sleep(0)
        assert cron.state == CursorState.WAITING

        await task
        assert cron.state == CursorState.IDLE

        cron.peek()
        assert cron.state == CursorState.ARMED

    async def test_concurrent_next_rejected(self, clock: FakeClock) -> None:
        """Test that a second task cannot wait on the same instance."""
        cron = CronNext("0 0 * * * ?", clock=clock)
        task = asyncio.create_task(cron.next())
        await asyncio.sleep(0)

        with pytest.raises(RuntimeError, match="already waiting"):
            await cron.next()

        task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await task

    async def test_cancelled_wait_keeps_target(self, clock: FakeClock) -> None:
        """Test that cancelling a wait does not lose the occurrence."""
        cron = CronNext("0 0 * * * ?", clock=clock)
        target = cron.peek()

        task = asyncio.create_task(cron.next())
        await asyncio.sleep(0)
        task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await task

        assert task.cancelled()
        assert cron.state == CursorState.ARMED
        assert cron.peek() == target
        assert await cron.next() == target

    async def test_cancel_after_peek_while_waiting(self, clock: FakeClock) -> None:
        """Test that a peek during the wait does not break cancellation."""
        cron = CronNext("0 0 * * * ?", clock=clock)
        target = cron.peek()

        task = asyncio.create_task(cron.next())
        await asyncio.sleep(0)
        look_ahead = cron.peek()
        assert look_ahead == datetime(2030, 1, 1, 2, tzinfo=UTC)

        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task

        assert cron.state == CursorState.ARMED
        assert cron.peek() == target
        assert await cron.next() == target
        assert await cron.next() == look_ahead

    async def test_create_cron_next(self, clock: FakeClock) -> None:
        """Test the convenience constructor."""
        cron = create_cron_next("* * * * * ?", "UTC", poll_interval=0.5, clock=clock)

        assert cron.settings.poll_interval == 0.5
        assert await cron.next() == datetime(2030, 1, 1, 0, 0, 1, tzinfo=UTC)

    @pytest.mark.slow
    async def test_real_clock(self) -> None:
        """Test two fires of an every-second schedule against the real clock."""
        clock = SystemClock()
        cron = CronNext("* * * * * ? *", settings=CronNextSettings(poll_interval=0.05))

        first = await cron.next()
        assert first is not None
        assert first <= clock.now(UTC)
        second = await cron.next()
        assert second is not None
        assert second <= clock.now(UTC)

        assert second - first == timedelta(seconds=1)


class TestCronNextSettings:
    """Test cases for CronNextSettings."""

    def test_defaults(self) -> None:
        """Test default settings."""
        settings = CronNextSettings()

        assert settings.poll_interval == 1.0
        assert settings.missed_policy == MissedPolicy.SKIP

    @pytest.mark.parametrize("interval", [0, -0.5])
    def test_non_positive_interval_rejected(self, interval: float) -> None:
        """Test that the poll interval must be positive."""
        with pytest.raises(ValidationError):
            CronNextSettings(poll_interval=interval)

    def test_frozen(self) -> None:
        """Test that settings are immutable."""
        settings = CronNextSettings()
        with pytest.raises(ValidationError):
            settings.poll_interval = 2.0  # type: ignore[misc]

    def test_policy_from_string(self) -> None:
        """Test that the policy accepts its string value."""
        settings = CronNextSettings(missed_policy="catch_up")  # type: ignore[arg-type]

        assert settings.missed_policy == MissedPolicy.CATCH_UP
