"""Background reminder jobs driven by APScheduler."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timedelta, tzinfo
from functools import partial

from apscheduler.schedulers.background import BackgroundScheduler
from apscheduler.triggers.cron import CronTrigger
from apscheduler.triggers.interval import IntervalTrigger

logger = logging.getLogger(__name__)

JobFunc = Callable[[], object]


@dataclass(frozen=True)
class DailyJob:
    """Run ``func`` every day at ``hour:minute`` application time."""

    name: str
    hour: int
    minute: int
    func: JobFunc

    def trigger(self, timezone: tzinfo) -> CronTrigger:
        return CronTrigger(hour=self.hour, minute=self.minute, timezone=timezone)


@dataclass(frozen=True)
class IntervalJob:
    """Run ``func`` every ``interval``; the first run happens one interval after start."""

    name: str
    interval: timedelta
    func: JobFunc

    def trigger(self, timezone: tzinfo) -> IntervalTrigger:
        return IntervalTrigger(seconds=self.interval.total_seconds(), timezone=timezone)


Job = DailyJob | IntervalJob


class NotificationScheduler:
    """Register the reminder jobs on a :class:`BackgroundScheduler`.

    Runs never overlap (``max_instances=1``) and missed runs collapse into a
    single one (``coalesce=True``).
    """

    def __init__(self, jobs: list[Job], timezone: tzinfo) -> None:
        self._jobs = list(jobs)
        self._timezone = timezone
        self._scheduler: BackgroundScheduler | None = None

    @property
    def jobs(self) -> list[Job]:
        return list(self._jobs)

    @property
    def running(self) -> bool:
        return self._scheduler is not None and self._scheduler.running

    def start(self) -> None:
        if self.running:
            logger.info("Scheduler already running, skipping initialization")
            return

        scheduler = BackgroundScheduler(timezone=self._timezone)
        for job in self._jobs:
            scheduler.add_job(
                partial(self.run_once, job),
                trigger=job.trigger(self._timezone),
                id=job.name,
                name=job.name,
                replace_existing=True,
                max_instances=1,
                coalesce=True,
            )
        scheduler.start()
        self._scheduler = scheduler
        logger.info("Scheduler started with %s jobs", len(self._jobs))

    def shutdown(self, wait: bool = True) -> None:
        """Stop firing jobs; with ``wait`` block until running ones finish."""

        if self._scheduler is None:
            return
        if self._scheduler.running:
            self._scheduler.shutdown(wait=wait)
        self._scheduler = None
        logger.info("Scheduler stopped")

    def next_run_times(self) -> dict[str, datetime | None]:
        if self._scheduler is None:
            return {}
        return {job.id: job.next_run_time for job in self._scheduler.get_jobs()}

    def run_once(self, job: Job) -> None:
        """Execute ``job``; failures are logged, never raised."""

        logger.info("Running scheduled job %s", job.name)
        try:
            job.func()
        except Exception:
            logger.exception("Scheduled job %s failed", job.name)


__all__ = [
    "DailyJob",
    "IntervalJob",
    "Job",
    "NotificationScheduler",
]
