"""
Calendar helpers for prediction horizons and synthetic record dates.
"""

from datetime import date, timedelta
from typing import Callable, Optional

Today = Callable[[], date]


def system_today() -> date:
    """Wall-clock calendar date."""
    return date.today()


def horizon_date(days: int, today: Optional[Today] = None) -> date:
    """
    Date `days` after today.

    Args:
        days: Number of days ahead
        today: Optional provider of the current date

    Returns:
        Target calendar date
    """
    current = (today or system_today)()
    return current + timedelta(days=days)


def years_back(reference: date, years: int) -> date:
    """Same calendar day `years` before reference, Feb 29 falling back to Feb 28."""
    try:
        return reference.replace(year=reference.year - years)
    except ValueError:
        return reference.replace(year=reference.year - years, day=28)


def days_between(start: date, end: date) -> int:
    """Whole days from start to end (negative when end precedes start)."""
    return (end - start).days


def iter_days(start: date, end: date):
    """Yield each date from start to end inclusive."""
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)
