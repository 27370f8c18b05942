from __future__ import annotations

from datetime import date
from typing import Optional, Union

from .core.errors import InvalidDateError
from .core.time import Clock
from .core.types import CalendarDate, DayInfo, MonthGrid
from .engines.calendar import (
    JALALI_FULL_WEEK_DAYS,
    get_jalali_month_grid,
    get_today_jalali,
    is_jalali_leap,
    jalali_weekday_index,
)
from .engines.conversion import gregorian_to_jalali, jalali_to_gregorian
from .engines.validation import validate_gregorian, validate_jalali


def to_jalali(d: Union[date, CalendarDate]) -> CalendarDate:
    """Gregorian ``date`` (or Gregorian ``CalendarDate``) -> Jalali ``CalendarDate``."""
    if isinstance(d, date):
        return CalendarDate(*gregorian_to_jalali(d.year, d.month, d.day))
    validate_gregorian(d.year, d.month, d.day)
    return CalendarDate(*gregorian_to_jalali(d.year, d.month, d.day))

def to_gregorian(j: CalendarDate) -> date:
    """Jalali ``CalendarDate`` -> ``datetime.date``; years outside 1..9999 are rejected."""
    validate_jalali(j.year, j.month, j.day)
    gy, gm, gd = jalali_to_gregorian(j.year, j.month, j.day)
    try:
        return date(gy, gm, gd)
    except ValueError as e:
        raise InvalidDateError(f"{j} maps to {gy}-{gm}-{gd}, outside datetime.date range") from e

def day_info(d: date) -> DayInfo:
    j = to_jalali(d)
    idx = jalali_weekday_index(j.year, j.month, j.day)
    return DayInfo(
        gregorian=d,
        jalali=j,
        weekday_index=idx,
        weekday_name=JALALI_FULL_WEEK_DAYS[idx],
        is_leap_year=is_jalali_leap(j.year),
    )

def month_grid(year: int, month: int) -> MonthGrid:
    if not 1 <= month <= 12:
        raise InvalidDateError(f"Jalali month must be in 1..12, got {month}")
    return get_jalali_month_grid(year, month)

def today(clock: Optional[Clock] = None) -> DayInfo:
    j = get_today_jalali(clock)
    return day_info(to_gregorian(j))
