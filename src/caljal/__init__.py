"""caljal public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

from .api import (
    to_jalali,
    to_gregorian,
    day_info,
    month_grid,
    today,
)
from .core.errors import CaljalError, InvalidDateError, ClockError
from .core.time import Clock, SystemClock, FixedClock
from .core.types import CalendarDate, MonthGrid, DayInfo
from .engines.conversion import gregorian_to_jalali, jalali_to_gregorian
from .engines.calendar import (
    is_jalali_leap,
    is_jalali_leap_2820,
    is_gregorian_leap,
    days_in_jalali_month,
    days_in_jalali_year,
    days_in_gregorian_month,
    jalali_weekday_index,
    get_jalali_day_of_week,
    get_jalali_month_grid,
    get_today_jalali,
    prev_jalali_month,
    next_jalali_month,
    jalali_day_number,
    gregorian_day_number,
    jalali_from_day_number,
    add_jalali_days,
)
from .engines.validation import (
    ConversionResult,
    validate_jalali,
    validate_gregorian,
    checked_jalali_to_gregorian,
    checked_gregorian_to_jalali,
)
from .formatting import (
    JALALI_MONTHS,
    JALALI_WEEK_DAYS,
    JALALI_FULL_WEEK_DAYS,
    to_persian_digits,
    from_persian_digits,
    format_jalali_date,
    format_jalali_date_with_day,
    format_time,
)
from .wire import parse_iso_date, format_iso_date, iso_to_jalali, jalali_to_iso

__all__ = [
    "to_jalali",
    "to_gregorian",
    "day_info",
    "month_grid",
    "today",
    "CaljalError",
    "InvalidDateError",
    "ClockError",
    "Clock",
    "SystemClock",
    "FixedClock",
    "CalendarDate",
    "MonthGrid",
    "DayInfo",
    "gregorian_to_jalali",
    "jalali_to_gregorian",
    "is_jalali_leap",
    "is_jalali_leap_2820",
    "is_gregorian_leap",
    "days_in_jalali_month",
    "days_in_jalali_year",
    "days_in_gregorian_month",
    "jalali_weekday_index",
    "get_jalali_day_of_week",
    "get_jalali_month_grid",
    "get_today_jalali",
    "prev_jalali_month",
    "next_jalali_month",
    "jalali_day_number",
    "gregorian_day_number",
    "jalali_from_day_number",
    "add_jalali_days",
    "ConversionResult",
    "validate_jalali",
    "validate_gregorian",
    "checked_jalali_to_gregorian",
    "checked_gregorian_to_jalali",
    "JALALI_MONTHS",
    "JALALI_WEEK_DAYS",
    "JALALI_FULL_WEEK_DAYS",
    "to_persian_digits",
    "from_persian_digits",
    "format_jalali_date",
    "format_jalali_date_with_day",
    "format_time",
    "parse_iso_date",
    "format_iso_date",
    "iso_to_jalali",
    "jalali_to_iso",
]
