"""Date formatting with moment-style format tokens.

Layouts written for the blog use tokens such as ``YYYY-MM-DD`` or
``MMMM D, YYYY``; :func:`format_date` implements that vocabulary on top of
:mod:`datetime`. Text wrapped in square brackets is emitted literally.

Example
-------
>>> import datetime as dt
>>> stamp = dt.datetime(2019, 3, 7, 14, 5, 9, 120000, tzinfo=dt.UTC)
>>> format_date(stamp)
'2019-03-07T14:05:09.120+00:00'
>>> format_date(stamp, "MMMM Do, YYYY [at] h:mm A")
'March 7th, 2019 at 2:05 PM'
"""

from __future__ import annotations

import datetime as dt
import re
import typing as typ

from blog_pages._constants import DEFAULT_DATE_FORMAT
from blog_pages.config.helpers import _parse_timestamp
from blog_pages.errors import PageContextError

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from blog_pages.pages.models import Page

TOKEN_PATTERN = re.compile(
    r"\[([^\]]*)\]|YYYY|YY|MMMM|MMM|MM|M|Do|DD|D|dddd|ddd|HH|H|hh|h|mm|m|ss|s"
    r"|SSS|SS|S|A|a|ZZ|Z|X|x"
)
MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)
WEEKDAY_NAMES = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)


def _ordinal(day: int) -> str:
    if 11 <= day % 100 <= 13:
        return f"{day}th"
    suffix = {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")
    return f"{day}{suffix}"


def _hour12(stamp: dt.datetime) -> int:
    return stamp.hour % 12 or 12


def _offset(stamp: dt.datetime, separator: str) -> str:
    offset = stamp.utcoffset() or dt.timedelta()
    sign = "-" if offset < dt.timedelta() else "+"
    minutes = abs(int(offset.total_seconds())) // 60
    return f"{sign}{minutes // 60:02d}{separator}{minutes % 60:02d}"


_FORMATTERS: dict[str, cabc.Callable[[dt.datetime], str]] = {
    "YYYY": lambda d: f"{d.year:04d}",
    "YY": lambda d: f"{d.year % 100:02d}",
    "MMMM": lambda d: MONTH_NAMES[d.month - 1],
    "MMM": lambda d: MONTH_NAMES[d.month - 1][:3],
    "MM": lambda d: f"{d.month:02d}",
    "M": lambda d: str(d.month),
    "Do": lambda d: _ordinal(d.day),
    "DD": lambda d: f"{d.day:02d}",
    "D": lambda d: str(d.day),
    "dddd": lambda d: WEEKDAY_NAMES[d.weekday()],
    "ddd": lambda d: WEEKDAY_NAMES[d.weekday()][:3],
    "HH": lambda d: f"{d.hour:02d}",
    "H": lambda d: str(d.hour),
    "hh": lambda d: f"{_hour12(d):02d}",
    "h": lambda d: str(_hour12(d)),
    "mm": lambda d: f"{d.minute:02d}",
    "m": lambda d: str(d.minute),
    "ss": lambda d: f"{d.second:02d}",
    "s": lambda d: str(d.second),
    "SSS": lambda d: f"{d.microsecond // 1000:03d}",
    "SS": lambda d: f"{d.microsecond // 10000:02d}",
    "S": lambda d: str(d.microsecond // 100000),
    "A": lambda d: "AM" if d.hour < 12 else "PM",
    "a": lambda d: "am" if d.hour < 12 else "pm",
    "ZZ": lambda d: _offset(d, ""),
    "Z": lambda d: _offset(d, ":"),
    "X": lambda d: str(int(d.timestamp())),
    "x": lambda d: str(int(d.timestamp() * 1000)),
}


def format_date(
    value: dt.datetime | dt.date | str, pattern: str | None = None
) -> str:
    """Format ``value`` in UTC using moment-style ``pattern`` tokens.

    Parameters
    ----------
    value : datetime, date, or str
        Timestamp to format. Naive values are treated as UTC and ISO-8601
        strings are parsed.
    pattern : str, optional
        Format pattern; defaults to ``YYYY-MM-DDTHH:mm:ss.SSSZ``.

    Raises
    ------
    ValueError
        If ``value`` is a string that is not an ISO-8601 timestamp.
    """
    stamp = _parse_timestamp(value)
    if stamp is None:
        msg = f"Cannot interpret {value!r} as a timestamp."
        raise ValueError(msg)

    def _repl(match: re.Match[str]) -> str:
        literal = match.group(1)
        if literal is not None:
            return literal
        return _FORMATTERS[match.group(0)](stamp)

    return TOKEN_PATTERN.sub(_repl, pattern or DEFAULT_DATE_FORMAT)


def date(page: Page, pattern: str | None = None) -> str:
    """Format the page's ``date`` field."""
    if page.date is None:
        raise PageContextError(page.path, "date")
    return format_date(page.date, pattern)


def now(
    pattern: str | None = None,
    *,
    clock: cabc.Callable[[], dt.datetime] | None = None,
) -> str:
    """Format the current instant; ``clock`` lets callers pin the time."""
    current = clock() if clock else dt.datetime.now(dt.UTC)
    return format_date(current, pattern)


__all__ = ["date", "format_date", "now"]
