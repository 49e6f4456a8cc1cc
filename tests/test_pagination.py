import pytest

from nutritrack.utils.pagination import (
    DEFAULT_LIMIT,
    MAX_LIMIT,
    clamp_pagination,
    parse_bool_filter,
)


@pytest.mark.parametrize(
    "limit, offset, expected",
    [
        (None, None, (DEFAULT_LIMIT, 0)),
        (5, 2, (5, 2)),
        (0, 0, (DEFAULT_LIMIT, 0)),
        (-3, -1, (DEFAULT_LIMIT, 0)),
        (MAX_LIMIT, 0, (MAX_LIMIT, 0)),
        (MAX_LIMIT + 1, 0, (MAX_LIMIT, 0)),
        ("abc", "xyz", (DEFAULT_LIMIT, 0)),
        (" 7 ", "3", (7, 3)),
        ("", "", (DEFAULT_LIMIT, 0)),
    ],
)
def test_clamp_pagination(limit, offset, expected) -> None:
    page = clamp_pagination(limit, offset)

    assert (page.limit, page.offset) == expected


@pytest.mark.parametrize(
    "raw, expected",
    [("true", True), ("FALSE", False), (" True ", True), ("yes", None), (None, None)],
)
def test_parse_bool_filter(raw, expected) -> None:
    assert parse_bool_filter(raw) is expected
