"""
caljal.engines.calendar
-----------------------
Calendar math derived from the conversion core: leap rules, month lengths,
weekdays, month grids and a linear day axis.

Weekday indices in this module follow the Persian week:
0=Saturday, 1=Sunday, ..., 6=Friday.
"""

from __future__ import annotations

from typing import Optional, Tuple

from ..core.time import Clock, SystemClock, from_jdn, read_clock, sunday_weekday, to_jdn
from ..core.types import CalendarDate, MonthGrid
from .conversion import (
    JALALI_CYCLE_YEARS,
    JALALI_YEAR_OFFSET,
    gregorian_to_jalali,
    jalali_to_gregorian,
)

JALALI_FULL_WEEK_DAYS = ("شنبه", "یکشنبه", "دوشنبه", "سه‌شنبه", "چهارشنبه", "پنجشنبه", "جمعه")


# ---------------------------------------------------------
# Leap rules and month lengths
# ---------------------------------------------------------

def is_jalali_leap(year: int) -> bool:
    """
    Leap test matching the conversion core's 33-year cycle: cycle offsets
    0, 4, ..., 28 are leap, offset 32 is not.
    """
    pos = (year + JALALI_YEAR_OFFSET) % JALALI_CYCLE_YEARS
    return pos % 4 == 0 and pos != JALALI_CYCLE_YEARS - 1

def is_jalali_leap_2820(year: int) -> bool:
    """2820-year cyclical rule (Birashk). Floored modulo, so years < 474 extrapolate."""
    return (((((year - 474) % 2820) + 474 + 38) * 682) % 2816) < 682

def is_gregorian_leap(year: int) -> bool:
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0

def days_in_jalali_month(year: int, month: int) -> int:
    """31 for months 1-6, 30 for 7-11, 29/30 for Esfand; 0 for an invalid month."""
    if 1 <= month < 7:
        return 31
    if 7 <= month < 12:
        return 30
    if month == 12:
        return 30 if is_jalali_leap(year) else 29
    return 0

def days_in_jalali_year(year: int) -> int:
    return 366 if is_jalali_leap(year) else 365

_GREGORIAN_MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

def days_in_gregorian_month(year: int, month: int) -> int:
    if not 1 <= month <= 12:
        return 0
    if month == 2 and is_gregorian_leap(year):
        return 29
    return _GREGORIAN_MONTH_DAYS[month - 1]


# ---------------------------------------------------------
# Linear day axis
# ---------------------------------------------------------

def gregorian_day_number(year: int, month: int, day: int) -> int:
    return to_jdn(year, month, day)

def jalali_day_number(year: int, month: int, day: int) -> int:
    """Julian Day Number of a Jalali date; use it to order or subtract dates."""
    return to_jdn(*jalali_to_gregorian(year, month, day))

def jalali_from_day_number(jdn: int) -> CalendarDate:
    return CalendarDate(*gregorian_to_jalali(*from_jdn(jdn)))

def add_jalali_days(d: CalendarDate, n: int) -> CalendarDate:
    return jalali_from_day_number(jalali_day_number(d.year, d.month, d.day) + n)


# ---------------------------------------------------------
# Weekdays and month grid
# ---------------------------------------------------------

def jalali_weekday_index(year: int, month: int, day: int) -> int:
    """Persian weekday index (0=Saturday..6=Friday)."""
    return (sunday_weekday(jalali_day_number(year, month, day)) + 1) % 7

def get_jalali_day_of_week(d: CalendarDate) -> str:
    return JALALI_FULL_WEEK_DAYS[jalali_weekday_index(d.year, d.month, d.day)]

def get_jalali_month_grid(year: int, month: int) -> MonthGrid:
    return MonthGrid(
        year=year,
        month=month,
        days_in_month=days_in_jalali_month(year, month),
        start_day_of_week=jalali_weekday_index(year, month, 1),
    )


# ---------------------------------------------------------
# Navigation and the current date
# ---------------------------------------------------------

def prev_jalali_month(year: int, month: int) -> Tuple[int, int]:
    if month == 1:
        return year - 1, 12
    return year, month - 1

def next_jalali_month(year: int, month: int) -> Tuple[int, int]:
    if month == 12:
        return year + 1, 1
    return year, month + 1

def get_today_jalali(clock: Optional[Clock] = None) -> CalendarDate:
    """Today's Jalali date according to ``clock`` (host wall clock by default)."""
    today = read_clock(clock if clock is not None else SystemClock())
    return CalendarDate(*gregorian_to_jalali(today.year, today.month, today.day))
