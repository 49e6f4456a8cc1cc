"""Normalization of ``limit``/``offset`` query parameters."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_LIMIT = 10
MAX_LIMIT = 50


@dataclass(frozen=True)
class Page:
    limit: int
    offset: int


def _parse_int(raw: int | str | None) -> int | None:
    if raw is None:
        return None
    if isinstance(raw, int):
        return raw
    try:
        return int(str(raw).strip())
    except ValueError:
        return None


def clamp_pagination(limit: int | str | None, offset: int | str | None) -> Page:
    """Return a page whose limit is within ``(0, MAX_LIMIT]`` and offset ``>= 0``.

    Missing, unparsable or non-positive limits become ``DEFAULT_LIMIT``; limits
    above ``MAX_LIMIT`` are capped. Negative or unparsable offsets become ``0``.
    """

    parsed_limit = _parse_int(limit)
    if parsed_limit is None or parsed_limit <= 0:
        parsed_limit = DEFAULT_LIMIT
    elif parsed_limit > MAX_LIMIT:
        parsed_limit = MAX_LIMIT

    parsed_offset = _parse_int(offset)
    if parsed_offset is None or parsed_offset < 0:
        parsed_offset = 0

    return Page(limit=parsed_limit, offset=parsed_offset)


def parse_bool_filter(raw: str | None) -> bool | None:
    """Interpret ``"true"``/``"false"`` query values; anything else means no filter."""

    if raw is None:
        return None
    normalized = raw.strip().lower()
    if normalized == "true":
        return True
    if normalized == "false":
        return False
    return None


__all__ = ["DEFAULT_LIMIT", "MAX_LIMIT", "Page", "clamp_pagination", "parse_bool_filter"]
