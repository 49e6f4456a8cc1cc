from __future__ import annotations

import logging
import threading
import time
from datetime import datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest

from nutritrack.infrastructure.scheduler import (
    DailyJob,
    IntervalJob,
    NotificationScheduler,
)

UTC = timezone.utc


@pytest.mark.parametrize(
    "now, expected",
    [
        (datetime(2024, 5, 14, 7, 59, tzinfo=UTC), datetime(2024, 5, 14, 8, 0, tzinfo=UTC)),
        (datetime(2024, 5, 14, 8, 0, 1, tzinfo=UTC), datetime(2024, 5, 15, 8, 0, tzinfo=UTC)),
        (datetime(2024, 12, 31, 23, 0, tzinfo=UTC), datetime(2025, 1, 1, 8, 0, tzinfo=UTC)),
    ],
)
def test_daily_job_fires_at_next_slot(now, expected) -> None:
    trigger = DailyJob("daily", 8, 0, lambda: None).trigger(UTC)

    assert trigger.get_next_fire_time(None, now) == expected


def test_daily_job_uses_application_timezone() -> None:
    berlin = ZoneInfo("Europe/Berlin")
    trigger = DailyJob("daily", 8, 30, lambda: None).trigger(berlin)

    fire = trigger.get_next_fire_time(None, datetime(2024, 5, 14, 9, 0, tzinfo=berlin))

    assert fire.replace(tzinfo=None) == datetime(2024, 5, 15, 8, 30)
    assert fire.utcoffset() == timedelta(hours=2)


def test_interval_job_waits_one_interval_before_first_run() -> None:
    before = datetime.now(UTC)
    trigger = IntervalJob("interval", timedelta(minutes=30), lambda: None).trigger(UTC)

    first = trigger.get_next_fire_time(None, before)

    assert trigger.interval == timedelta(minutes=30)
    assert first >= before + timedelta(minutes=30)


def _wait_for(event: threading.Event, scheduler: NotificationScheduler) -> None:
    try:
        assert event.wait(timeout=5)
    finally:
        scheduler.shutdown()


def test_interval_job_runs_until_shutdown() -> None:
    calls: list[int] = []
    ran_twice = threading.Event()

    def _job() -> None:
        calls.append(1)
        if len(calls) >= 2:
            ran_twice.set()

    scheduler = NotificationScheduler(
        [IntervalJob("tick", timedelta(milliseconds=50), _job)], timezone=UTC
    )
    scheduler.start()
    assert scheduler.running

    _wait_for(ran_twice, scheduler)

    assert not scheduler.running
    count = len(calls)
    time.sleep(0.2)
    assert len(calls) == count


def test_failing_job_keeps_firing(caplog) -> None:
    attempts: list[int] = []
    done = threading.Event()

    def _job() -> None:
        attempts.append(1)
        if len(attempts) >= 3:
            done.set()
        raise RuntimeError("scan failed")

    scheduler = NotificationScheduler(
        [IntervalJob("flaky", timedelta(milliseconds=50), _job)], timezone=UTC
    )

    with caplog.at_level(logging.ERROR, logger="nutritrack.infrastructure.scheduler"):
        scheduler.start()
        _wait_for(done, scheduler)

    assert len(attempts) >= 3
    assert "Scheduled job flaky failed" in caplog.text


def test_start_registers_every_job_once() -> None:
    scheduler = NotificationScheduler(
        [
            DailyJob("daily", 8, 0, lambda: None),
            IntervalJob("hourly", timedelta(hours=1), lambda: None),
        ],
        timezone=UTC,
    )
    scheduler.start()
    try:
        scheduler.start()
        next_runs = scheduler.next_run_times()
    finally:
        scheduler.shutdown()

    assert sorted(next_runs) == ["daily", "hourly"]
    assert all(run is not None for run in next_runs.values())
    assert scheduler.next_run_times() == {}


def test_run_once_logs_errors(caplog) -> None:
    def _boom() -> None:
        raise ValueError("nope")

    scheduler = NotificationScheduler([], timezone=UTC)

    with caplog.at_level(logging.ERROR, logger="nutritrack.infrastructure.scheduler"):
        scheduler.run_once(IntervalJob("boom", timedelta(seconds=1), _boom))

    assert "Scheduled job boom failed" in caplog.text


def test_shutdown_without_start_is_harmless() -> None:
    scheduler = NotificationScheduler([], timezone=UTC)

    scheduler.shutdown()

    assert scheduler.jobs == []
    assert not scheduler.running
