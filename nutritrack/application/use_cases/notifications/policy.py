"""Tunable rules shared by notification evaluators and reminder scans."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime, timedelta, tzinfo

from nutritrack.config import Settings
from nutritrack.utils import now_naive_in_timezone, resolve_timezone

Clock = Callable[[], datetime]


@dataclass(frozen=True)
class NotificationPolicy:
    """Cooldown window, thresholds and the clock used to timestamp alerts.

    ``clock`` returns naive wall-clock datetimes in the application timezone,
    which is also how timestamps are stored.
    """

    timezone: tzinfo
    cooldown: timedelta = timedelta(hours=24)
    near_completion_ratio: float = 0.8
    same_day_lookahead: timedelta = timedelta(hours=3)
    overdue_after: timedelta = timedelta(days=3)
    clock: Clock | None = field(default=None, compare=False)

    @classmethod
    def from_settings(cls, settings: Settings, *, clock: Clock | None = None) -> "NotificationPolicy":
        return cls(
            timezone=resolve_timezone(settings.app_timezone),
            cooldown=timedelta(hours=settings.notification_cooldown_hours),
            near_completion_ratio=settings.near_completion_ratio,
            same_day_lookahead=timedelta(hours=settings.same_day_lookahead_hours),
            overdue_after=timedelta(days=settings.overdue_goal_days),
            clock=clock,
        )

    def now(self) -> datetime:
        if self.clock is not None:
            return self.clock()
        return now_naive_in_timezone(self.timezone)


def fixed_clock(moment: datetime) -> Clock:
    """Return a clock frozen at ``moment``."""

    return lambda: moment


__all__ = ["Clock", "NotificationPolicy", "fixed_clock"]
