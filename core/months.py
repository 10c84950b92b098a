"""Calendar month keys (``YYYY-MM``) and their labels."""

from __future__ import annotations

import re
from datetime import date

from core.models import MonthKey

__all__ = [
    "InvalidMonthKeyError",
    "month_key_of",
    "parse_month_key",
    "previous_month_key",
    "next_month_key",
    "month_label",
    "current_month_key",
]

_MONTH_KEY = re.compile(r"^(\d{4})-(0[1-9]|1[0-2])$")
MONTH_NAMES: tuple[str, ...] = (
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


class InvalidMonthKeyError(ValueError):
    """Raised when a string is not a ``YYYY-MM`` month key."""


def month_key_of(value: date) -> MonthKey:
    """Return the ``YYYY-MM`` key of a calendar date.

    Datetimes and pandas timestamps are accepted and reduced to their calendar
    year and month; no timezone conversion happens.
    """

    return f"{value.year:04d}-{value.month:02d}"


def parse_month_key(key: str) -> tuple[int, int]:
    match = _MONTH_KEY.match(key) if isinstance(key, str) else None
    if match is None:
        raise InvalidMonthKeyError(f"Invalid month key: {key!r} (expected YYYY-MM)")
    return int(match.group(1)), int(match.group(2))


def _format_key(year: int, month: int) -> MonthKey:
    return f"{year:04d}-{month:02d}"


def previous_month_key(key: MonthKey) -> MonthKey:
    year, month = parse_month_key(key)
    if month == 1:
        return _format_key(year - 1, 12)
    return _format_key(year, month - 1)


def next_month_key(key: MonthKey) -> MonthKey:
    year, month = parse_month_key(key)
    if month == 12:
        return _format_key(year + 1, 1)
    return _format_key(year, month + 1)


def month_label(key: MonthKey) -> str:
    """Return a display label such as ``"April 2024"``."""

    year, month = parse_month_key(key)
    return f"{MONTH_NAMES[month - 1]} {year}"


def current_month_key(today: date) -> MonthKey:
    return month_key_of(today)
