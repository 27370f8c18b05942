"""Gregorian ``YYYY-MM-DD`` strings (storage/transport form) <-> Jalali dates."""
from __future__ import annotations

import re
from typing import Tuple

from .core.errors import InvalidDateError
from .core.types import CalendarDate
from .engines.conversion import gregorian_to_jalali, jalali_to_gregorian
from .engines.validation import validate_gregorian

_ISO_RE = re.compile(r"^(-?\d{4,})-(\d{2})-(\d{2})$")


def parse_iso_date(text: str) -> Tuple[int, int, int]:
    m = _ISO_RE.match(text.strip()) if isinstance(text, str) else None
    if m is None:
        raise InvalidDateError(f"Expected YYYY-MM-DD, got {text!r}")
    y, mo, d = (int(g) for g in m.groups())
    validate_gregorian(y, mo, d)
    return (y, mo, d)

def format_iso_date(year: int, month: int, day: int) -> str:
    sign = "-" if year < 0 else ""
    return f"{sign}{abs(year):04d}-{month:02d}-{day:02d}"

def iso_to_jalali(text: str) -> CalendarDate:
    return CalendarDate(*gregorian_to_jalali(*parse_iso_date(text)))

def jalali_to_iso(d: CalendarDate) -> str:
    return format_iso_date(*jalali_to_gregorian(d.year, d.month, d.day))
