"""
caljal.engines.validation
-------------------------
Precondition checks kept outside the conversion core. The core accepts any
integer triple; callers that receive untrusted input go through here.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from ..core.errors import InvalidDateError
from ..core.types import CalendarDate
from .calendar import days_in_gregorian_month, days_in_jalali_month
from .conversion import gregorian_to_jalali, jalali_to_gregorian

logger = logging.getLogger(__name__)


def _check(kind: str, y: int, m: int, d: int, month_days: Callable[[int, int], int]) -> None:
    for name, value in (("year", y), ("month", m), ("day", d)):
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidDateError(f"{kind} {name} must be an int, got {value!r}")
    if not 1 <= m <= 12:
        raise InvalidDateError(f"{kind} month must be in 1..12, got {m}")
    last = month_days(y, m)
    if not 1 <= d <= last:
        raise InvalidDateError(f"{kind} day must be in 1..{last} for {y}-{m:02d}, got {d}")

def validate_jalali(year: int, month: int, day: int) -> CalendarDate:
    _check("Jalali", year, month, day, days_in_jalali_month)
    return CalendarDate(year, month, day)

def validate_gregorian(year: int, month: int, day: int) -> CalendarDate:
    _check("Gregorian", year, month, day, days_in_gregorian_month)
    return CalendarDate(year, month, day)


@dataclass(frozen=True)
class ConversionResult:
    """Tagged outcome of a checked conversion: either ``value`` or ``error`` is set."""
    ok: bool
    value: Optional[CalendarDate] = None
    error: Optional[str] = None

    def unwrap(self) -> CalendarDate:
        if not self.ok or self.value is None:
            raise InvalidDateError(self.error or "conversion failed")
        return self.value

def checked_jalali_to_gregorian(year: int, month: int, day: int) -> ConversionResult:
    try:
        validate_jalali(year, month, day)
    except InvalidDateError as e:
        logger.debug("rejected Jalali input %r: %s", (year, month, day), e)
        return ConversionResult(ok=False, error=str(e))
    return ConversionResult(ok=True, value=CalendarDate(*jalali_to_gregorian(year, month, day)))

def checked_gregorian_to_jalali(year: int, month: int, day: int) -> ConversionResult:
    try:
        validate_gregorian(year, month, day)
    except InvalidDateError as e:
        logger.debug("rejected Gregorian input %r: %s", (year, month, day), e)
        return ConversionResult(ok=False, error=str(e))
    return ConversionResult(ok=True, value=CalendarDate(*gregorian_to_jalali(year, month, day)))
