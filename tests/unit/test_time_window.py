"""Unit tests for time window predicates"""

from datetime import date
from voice_gateway.domain.models import PeriodKind, TimePeriod
from voice_gateway.domain.time_window import time_window


def test_day_window(now):
    in_window = time_window(TimePeriod(PeriodKind.DAY), now)
    assert in_window(date(2025, 3, 15))
    assert not in_window(date(2025, 3, 14))
    assert not in_window(date(2024, 3, 15))


def test_week_window_covers_seven_days(now):
    in_window = time_window(TimePeriod(PeriodKind.WEEK), now)
    assert in_window(date(2025, 3, 9))  # six days back, first day of the week
    assert in_window(date(2025, 3, 15))
    assert not in_window(date(2025, 3, 8))
    assert not in_window(date(2025, 3, 16))


def test_current_month_window(now):
    in_window = time_window(TimePeriod(PeriodKind.MONTH), now)
    assert in_window(date(2025, 3, 1))
    assert in_window(date(2025, 3, 31))
    assert not in_window(date(2024, 3, 15))
    assert not in_window(date(2025, 4, 1))


def test_specific_month_matches_any_year(now):
    in_window = time_window(TimePeriod(PeriodKind.SPECIFIC_MONTH, month=0), now)
    assert in_window(date(2025, 1, 10))
    assert in_window(date(2019, 1, 31))
    assert not in_window(date(2025, 2, 1))


def test_year_window(now):
    in_window = time_window(TimePeriod(PeriodKind.YEAR), now)
    assert in_window(date(2025, 12, 31))
    assert not in_window(date(2024, 12, 31))


def test_all_window_accepts_everything(now):
    in_window = time_window(TimePeriod(PeriodKind.ALL), now)
    assert in_window(date(1999, 1, 1))
    assert in_window(date(2099, 1, 1))
