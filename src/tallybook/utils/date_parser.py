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

    Accepts absolute dates ("2024-03-01", "March 1, 2024") and the relative
    words "today", "yesterday", "this month", "last month", "this year",
    "last year", "this week" and "last week" (which resolve to the first
    day of that period).

    Raises:
        ValueError: If date string cannot be parsed
    """
    text = date_str.strip().lower()
    today = today or date.today()

    relative = {
        "today": today,
        "yesterday": today - timedelta(days=1),
        "this month": today.replace(day=1),
        "last month": (today - relativedelta(months=1)).replace(day=1),
        "this year": today.replace(month=1, day=1),
        "last year": today.replace(month=1, day=1) - relativedelta(years=1),
        "this week": _start_of_week(today),
        "last week": _start_of_week(today) - timedelta(days=7),
    }
    if text in relative:
        return relative[text]

    try:
        return date_parser.parse(text).date()
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}") from e


def get_date_range(period: str, today: Optional[date] = None) -> tuple[date, date]:
    """Get start and end dates for a named period.

    "this-*" periods end today; "last-*" periods cover the whole previous
    month, year or Monday-to-Sunday week.

    Raises:
        ValueError: If period string is not recognized
    """
    period = period.strip().lower()
    today = today or date.today()

    if period == "this-month":
        return today.replace(day=1), today
    if period == "this-year":
        return today.replace(month=1, day=1), today
    if period == "this-week":
        return _start_of_week(today), today
    if period == "last-month":
        first_of_month = today.replace(day=1)
        return first_of_month - relativedelta(months=1), first_of_month - timedelta(days=1)
    if period == "last-year":
        first_of_year = today.replace(month=1, day=1)
        return first_of_year - relativedelta(years=1), first_of_year - timedelta(days=1)
    if period == "last-week":
        start = _start_of_week(today) - timedelta(days=7)
        return start, start + timedelta(days=6)

    raise ValueError(f"Unknown period: '{period}'. Supported periods: {', '.join(PERIODS)}")
