"""Parsing and validation helpers for workout use cases."""

from datetime import date, datetime, time

DATE_FORMAT = "%Y-%m-%d"
_TIME_FORMATS = ("%H:%M", "%H:%M:%S")


def parse_workout_date(raw: str) -> date:
    try:
        return datetime.strptime((raw or "").strip(), DATE_FORMAT).date()
    except ValueError as exc:
        raise ValueError("date must be in YYYY-MM-DD format") from exc


def parse_start_time(raw: str | None) -> time | None:
    """Parse ``HH:MM`` or ``HH:MM:SS``; blank values mean no start time."""

    if raw is None or not raw.strip():
        return None
    for fmt in _TIME_FORMATS:
        try:
            return datetime.strptime(raw.strip(), fmt).time()
        except ValueError:
            continue
    raise ValueError("start_time must be in HH:MM format")


def validate_workout_fields(name: str, duration_minutes: int, calories_burned: int) -> str:
    cleaned = (name or "").strip()
    if not cleaned or duration_minutes < 0 or calories_burned < 0:
        raise ValueError("Invalid workout data")
    return cleaned
