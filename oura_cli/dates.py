"""Date token parsing and trend windows."""

import re
from datetime import date, datetime, timedelta
from typing import Optional

from oura_cli.errors import InvalidDateError
from oura_cli.models import DateRange

DATE_FORMAT = "%Y-%m-%d"
DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}")


def parse_date(date_str: str) -> date:
    """Parse date string in YYYY-MM-DD format."""
    if not DATE_PATTERN.fullmatch(date_str):
        raise InvalidDateError(date_str)
    try:
        return datetime.strptime(date_str, DATE_FORMAT).date()
    except ValueError:
        raise InvalidDateError(date_str) from None


def resolve_date(token: Optional[str], *, today: Optional[date] = None) -> date:
    """
    Resolve a user-supplied date token.

    Args:
        token: "today", "yesterday" (any case), YYYY-MM-DD, or None for today
        today: Reference date (defaults to the local current date)

    Returns:
        The calendar date the token refers to
    """
    today = today or date.today()
    if token is None or token.lower() == "today":
        return today
    if token.lower() == "yesterday":
        return today - timedelta(days=1)
    return parse_date(token)


def trailing_window(days: int, *, today: Optional[date] = None) -> DateRange:
    """Inclusive range of the last `days` days ending today (empty for 0)."""
    if days < 0:
        raise ValueError(f"Window length must not be negative: {days}")
    today = today or date.today()
    return DateRange(start=today - timedelta(days=days - 1), end=today)
