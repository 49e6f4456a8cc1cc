"""Utility helpers for reusable functionality."""

from .datetime import (
    ensure_naive_in_timezone,
    now_in_timezone,
    now_naive_in_timezone,
    resolve_timezone,
)
from .pagination import (
    DEFAULT_LIMIT,
    MAX_LIMIT,
    Page,
    clamp_pagination,
    parse_bool_filter,
)

__all__ = [
    "DEFAULT_LIMIT",
    "MAX_LIMIT",
    "Page",
    "clamp_pagination",
    "ensure_naive_in_timezone",
    "now_in_timezone",
    "now_naive_in_timezone",
    "parse_bool_filter",
    "resolve_timezone",
]
