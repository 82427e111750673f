"""Tests for moment-style date formatting."""

from __future__ import annotations

import datetime as dt
import typing as typ

import pytest

from blog_pages.errors import PageContextError
from blog_pages.helpers import date, format_date, now

if typ.TYPE_CHECKING:
    from blog_pages.pages import Page

    PageFactory = typ.Callable[..., Page]

STAMP = dt.datetime(2019, 3, 7, 14, 5, 9, 120000, tzinfo=dt.UTC)


def test_default_format_is_iso_with_milliseconds() -> None:
    """The default pattern renders ISO-8601 with milliseconds and offset."""
    assert format_date(STAMP) == "2019-03-07T14:05:09.120+00:00"


@pytest.mark.parametrize(
    ("pattern", "expected"),
    [
        ("YYYY-MM-DD", "2019-03-07"),
        ("D MMMM YYYY", "7 March 2019"),
        ("MMM Do, YY", "Mar 7th, 19"),
        ("dddd [the] Do", "Thursday the 7th"),
        ("h:mm a", "2:05 pm"),
        ("hh:mm:ss A", "02:05:09 PM"),
        ("HH:mm ZZ", "14:05 +0000"),
        ("X", "1551967509"),
    ],
)
def test_custom_patterns(pattern: str, expected: str) -> None:
    """User-supplied patterns use the same token vocabulary."""
    assert format_date(STAMP, pattern) == expected


def test_values_are_normalised_to_utc() -> None:
    """Aware timestamps in other zones are converted to UTC."""
    local = dt.datetime(2020, 1, 1, 1, 30, tzinfo=dt.timezone(dt.timedelta(hours=2)))

    assert format_date(local, "YYYY-MM-DD HH:mm Z") == "2019-12-31 23:30 +00:00"


def test_strings_and_dates_are_accepted() -> None:
    """ISO strings and bare dates are parsed before formatting."""
    assert format_date("2021-06-01T10:00:00Z", "HH:mm") == "10:00"
    assert format_date(dt.date(2021, 6, 1), "YYYY-MM-DD HH:mm") == "2021-06-01 00:00"


def test_unparseable_string_raises() -> None:
    """Strings that are not timestamps are rejected."""
    with pytest.raises(ValueError, match="timestamp"):
        format_date("yesterday")


@pytest.mark.parametrize(
    ("day", "suffix"),
    [(1, "1st"), (2, "2nd"), (3, "3rd"), (4, "4th"), (11, "11th"), (12, "12th"),
     (13, "13th"), (21, "21st"), (22, "22nd"), (23, "23rd"), (31, "31st")],
)
def test_ordinal_days(day: int, suffix: str) -> None:
    """Ordinal day suffixes follow English rules, including the teens."""
    assert format_date(dt.date(2019, 1, day), "Do") == suffix


def test_page_date_helper(make_page: PageFactory) -> None:
    """The date helper formats the page's own date."""
    page = make_page(collection=["posts"], date="2018-11-05T08:00:00Z")

    assert date(page, "D MMMM YYYY") == "5 November 2018"


def test_page_without_date_is_a_contract_violation(make_page: PageFactory) -> None:
    """Formatting a missing page date raises instead of printing nothing."""
    page = make_page(collection=["posts"])

    with pytest.raises(PageContextError) as excinfo:
        date(page)

    assert excinfo.value.field == "date"


def test_now_uses_the_supplied_clock() -> None:
    """The clock hook pins the current instant."""
    assert now("YYYY", clock=lambda: STAMP) == "2019"
