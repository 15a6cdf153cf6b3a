"""Date manipulation utilities"""

from datetime import date, datetime, timedelta
from typing import Union


def as_date(value: Union[date, datetime]) -> date:
    """Drop the time component if present"""
    return value.date() if isinstance(value, datetime) else value


def days_ago(from_date: date, days: int) -> date:
    """Calendar date `days` before from_date"""
    return from_date - timedelta(days=days)


def same_month(a: date, b: date) -> bool:
    """True when both dates fall in the same calendar month of the same year"""
    return a.year == b.year and a.month == b.month
