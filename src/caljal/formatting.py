"""Persian display helpers: digits, date strings and name tables."""
from __future__ import annotations

from typing import Optional, Union

from .core.types import CalendarDate
from .engines.calendar import JALALI_FULL_WEEK_DAYS, get_jalali_day_of_week

JALALI_MONTHS = (
    "فروردین", "اردیبهشت", "خرداد", "تیر", "مرداد", "شهریور",
    "مهر", "آبان", "آذر", "دی", "بهمن", "اسفند",
)
JALALI_WEEK_DAYS = ("ش", "ی", "د", "س", "چ", "پ", "ج")

__all__ = [
    "JALALI_MONTHS",
    "JALALI_WEEK_DAYS",
    "JALALI_FULL_WEEK_DAYS",
    "to_persian_digits",
    "from_persian_digits",
    "format_jalali_date",
    "format_jalali_date_with_day",
    "format_time",
]

_TO_PERSIAN = str.maketrans("0123456789", "۰۱۲۳۴۵۶۷۸۹")
_FROM_PERSIAN = str.maketrans("۰۱۲۳۴۵۶۷۸۹٠١٢٣٤٥٦٧٨٩", "01234567890123456789")


def to_persian_digits(value: Union[int, str]) -> str:
    return str(value).translate(_TO_PERSIAN)

def from_persian_digits(text: str) -> str:
    """Map Persian and Arabic-Indic digits back to ASCII; other characters pass through."""
    return text.translate(_FROM_PERSIAN)


def format_jalali_date(d: Optional[CalendarDate]) -> str:
    """``YYYY/MM/DD`` in Persian digits; empty string for ``None``."""
    if d is None:
        return ""
    return to_persian_digits(f"{d.year}/{d.month:02d}/{d.day:02d}")

def format_jalali_date_with_day(d: CalendarDate) -> str:
    """e.g. ``چهارشنبه، ۱ فروردین ۱۴۰۳``"""
    day_name = get_jalali_day_of_week(d)
    return f"{day_name}، {to_persian_digits(d.day)} {JALALI_MONTHS[d.month - 1]} {to_persian_digits(d.year)}"

def format_time(time: str) -> str:
    if not time:
        return ""
    hour, minute = time.split(":")[:2]
    return f"{to_persian_digits(hour)}:{to_persian_digits(minute)}"
