from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from typing import Protocol, Tuple

from .errors import ClockError


def to_jdn(y: int, m: int, day: int) -> int:
    """Convert a proleptic Gregorian triple to Julian Day Number (JDN)."""
    a = (14 - m) // 12
    y2 = y + 4800 - a
    m2 = m + 12 * a - 3
    return day + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - y2 // 100 + y2 // 400 - 32045

def from_jdn(jdn: int) -> Tuple[int, int, int]:
    """Fliegel-Van Flandern inverse of to_jdn (Gregorian)."""
    a = jdn + 32044
    b = (4 * a + 3) // 146097
    c = a - (146097 * b) // 4
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + (m // 10)
    return (year, month, day)

def sunday_weekday(jdn: int) -> int:
    """Gregorian weekday index, 0=Sunday..6=Saturday. JDN 0 is a Monday."""
    return (jdn + 1) % 7


class Clock(Protocol):
    def today(self) -> date: ...

class SystemClock:
    """Host wall clock (local date)."""

    def today(self) -> date:
        return date.today()

@dataclass(frozen=True)
class FixedClock:
    """Always reports the same date; for tests and reproducible runs."""
    fixed: date

    def today(self) -> date:
        return self.fixed


def read_clock(clock: Clock) -> date:
    d = clock.today()
    if not isinstance(d, date):
        raise ClockError(f"Clock {clock!r} returned {type(d).__name__}, expected datetime.date")
    return d
