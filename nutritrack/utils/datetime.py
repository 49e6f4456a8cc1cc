"""Helpers for working with timezone-aware datetimes."""

from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone, tzinfo
from typing import Final

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

_DEFAULT_TIMEZONE: Final[str] = "UTC"
_OFFSET_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"^(?:UTC|GMT)(?P<sign>[+-])(?P<hours>\d{1,2})(?::?(?P<minutes>\d{2}))?$",
    re.IGNORECASE,
)


def resolve_timezone(tz_name: str | None) -> tzinfo:
    """Resolve ``tz_name`` into a ``tzinfo`` instance.

    Accepts IANA names (``Europe/Madrid``) and fixed offsets such as
    ``UTC+05:30``. Unknown values fall back to UTC.
    """

    name = (tz_name or "").strip() or _DEFAULT_TIMEZONE
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        match = _OFFSET_PATTERN.match(name)
        if match:
            sign = -1 if match.group("sign") == "-" else 1
            hours = int(match.group("hours"))
            minutes = int(match.group("minutes") or 0)
            offset = timedelta(hours=hours, minutes=minutes)
            return timezone(sign * offset)
    return ZoneInfo(_DEFAULT_TIMEZONE)


def now_in_timezone(tz: tzinfo) -> datetime:
    """Return the current time localized to ``tz``."""

    return datetime.now(tz=tz)


def now_naive_in_timezone(tz: tzinfo) -> datetime:
    """Return the current wall-clock time in ``tz`` without ``tzinfo``."""

    return now_in_timezone(tz).replace(tzinfo=None)


def ensure_naive_in_timezone(value: datetime | None, tz: tzinfo) -> datetime | None:
    """Return ``value`` localized to ``tz`` but without ``tzinfo``.

    The store keeps naive local timestamps so that date arithmetic in queries
    (``today``, ``tomorrow``) matches what the user sees on the clock.
    """

    if value is None:
        return None
    if value.tzinfo is None:
        return value
    return value.astimezone(tz).replace(tzinfo=None)


__all__ = [
    "ensure_naive_in_timezone",
    "now_in_timezone",
    "now_naive_in_timezone",
    "resolve_timezone",
]
