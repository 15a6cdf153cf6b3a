"""Time window evaluation - turns a requested period into a date predicate"""

from datetime import date, datetime
from typing import Callable

from voice_gateway.domain.models import PeriodKind, TimePeriod
from voice_gateway.utils.date_utils import as_date, days_ago, same_month

DatePredicate = Callable[[date], bool]


def time_window(period: TimePeriod, now: datetime) -> DatePredicate:
    """
    Build a predicate over a record date for the requested period.

    Windows:
    - day: same calendar day as now
    - week: the 7 calendar days ending today, today included
    - month: current calendar month and year
    - specific_month: the named month in any year
    - year: current calendar year
    - all: no filter
    """
    today = as_date(now)

    if period.kind == PeriodKind.DAY:
        return lambda d: as_date(d) == today

    if period.kind == PeriodKind.WEEK:
        week_start = days_ago(today, 6)
        return lambda d: week_start <= as_date(d) <= today

    if period.kind == PeriodKind.SPECIFIC_MONTH and period.month is not None:
        target_month = period.month + 1
        return lambda d: d.month == target_month

    if period.kind in (PeriodKind.MONTH, PeriodKind.SPECIFIC_MONTH):
        return lambda d: same_month(as_date(d), today)

    if period.kind == PeriodKind.YEAR:
        return lambda d: d.year == today.year

    return lambda d: True
