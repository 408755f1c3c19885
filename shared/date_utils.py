"""
Date and time helpers for assertions that depend on the current instant.

The schedule screen renders today's date in a long English form
("Schedule for Tuesday, December 30, 2025"), and its calendar caption as
"December 2025".  These helpers produce the same strings from the local
clock so scenarios keep passing no matter which day they run on.

Every function takes an optional ``now`` so calendar edge cases (leap
days, month and year rollovers) can be pinned in unit tests.  English
name tables are used instead of ``strftime("%A")`` because the latter
follows the process locale.
"""

from __future__ import annotations

from datetime import date, datetime

WEEKDAY_NAMES = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
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


def _resolve(now: date | None) -> date:
    return now if now is not None else datetime.now()


def formatted_date(now: date | None = None) -> str:
    """
    Return the current date as "Weekday, Month Day, Year".

    Example: ``"Tuesday, December 30, 2025"``.  The day is not zero padded.
    """
    today = _resolve(now)
    weekday = WEEKDAY_NAMES[today.weekday()]
    month = MONTH_NAMES[today.month - 1]
    return f"{weekday}, {month} {today.day}, {today.year}"


def current_day_of_month(now: date | None = None) -> int:
    """Return the day of the month (1-31)."""
    return _resolve(now).day


def current_month_name(now: date | None = None) -> str:
    """Return the full English month name, e.g. ``"December"``."""
    return MONTH_NAMES[_resolve(now).month - 1]


def current_year(now: date | None = None) -> int:
    return _resolve(now).year


def month_year(now: date | None = None) -> str:
    """Return the calendar caption for the month, e.g. ``"December 2025"``."""
    return f"{current_month_name(now)} {current_year(now)}"


def shift_month(now: date | None, months: int) -> date:
    """
    Return the first day of the month ``months`` away from ``now``.

    Args:
        now: Reference date (defaults to today).
        months: Offset in months; negative values go backwards.

    Returns:
        A ``date`` pinned to day 1 of the target month.
    """
    today = _resolve(now)
    index = today.year * 12 + (today.month - 1) + months
    return date(index // 12, index % 12 + 1, 1)


def format_clock_time(hour: int, minute: int) -> str:
    """Return a zero-padded ``"HH:MM"`` string."""
    return f"{hour:02d}:{minute:02d}"


def current_clock_time(now: datetime | None = None) -> str:
    current = now if now is not None else datetime.now()
    return format_clock_time(current.hour, current.minute)


def header_contains_date(header: str | None, expected: str) -> bool:
    """
    Check that a rendered header contains the expected date string.

    Containment rather than equality, since the header carries a prefix
    such as ``"Schedule for "``.
    """
    if not header:
        return False
    return expected in " ".join(header.split())
