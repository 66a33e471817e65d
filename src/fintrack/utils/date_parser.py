"""Date parsing utilities."""

from datetime import date, timedelta
from typing import Optional
from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta

PERIODS = ("this-month", "this-year", "this-week", "last-month", "last-year", "last-week")


def _start_of_week(day: date) -> date:
    return day - timedelta(days=day.weekday())


def parse_date(date_str: str, today: Optional[date] = None) -> date:
    """Parse a date string into a date object.

    Supports absolute dates ("2025-10-11", "October 11, 2025") and a few
    relative forms: "today", "yesterday", "tomorrow", and "last/this/next"
    followed by "week", "month" or "year", which resolve to the first day of
    that period.

    Args:
        date_str: Date string in various formats
        today: Reference date for relative forms (defaults to today)

    Returns:
        Date object

    Raises:
        ValueError: If date string cannot be parsed
    """
    text = date_str.strip().lower()
    today = today or date.today()

    relative_days = {"today": 0, "yesterday": -1, "tomorrow": 1}
    if text in relative_days:
        return today + timedelta(days=relative_days[text])

    words = text.split()
    if len(words) == 2 and words[0] in ("last", "this", "next"):
        offset = {"last": -1, "this": 0, "next": 1}[words[0]]
        unit = words[1]
        if unit == "week":
            return _start_of_week(today) + timedelta(weeks=offset)
        if unit == "month":
            return today.replace(day=1) + relativedelta(months=offset)
        if unit == "year":
            return today.replace(month=1, day=1) + relativedelta(years=offset)

    try:
        return date_parser.parse(text).date()
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")


def get_date_range(period: str, today: Optional[date] = None) -> tuple[date, date]:
    """Get start and end dates for a named period.

    "this-*" periods run from the start of the period up to today; "last-*"
    periods cover the whole previous week, month or year.

    Args:
        period: One of PERIODS
        today: Reference date (defaults to today)

    Returns:
        Tuple of (start_date, end_date)

    Raises:
        ValueError: If period string is not recognized
    """
    period = period.strip().lower()
    today = today or date.today()

    if period == "this-week":
        return _start_of_week(today), today
    if period == "this-month":
        return today.replace(day=1), today
    if period == "this-year":
        return today.replace(month=1, day=1), today
    if period == "last-week":
        start = _start_of_week(today) - timedelta(weeks=1)
        return start, start + timedelta(days=6)
    if period == "last-month":
        end = today.replace(day=1) - timedelta(days=1)
        return end.replace(day=1), end
    if period == "last-year":
        return date(today.year - 1, 1, 1), date(today.year - 1, 12, 31)

    raise ValueError(f"Unknown period: '{period}'. Supported periods: {', '.join(PERIODS)}")
