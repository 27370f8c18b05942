from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from typing import List, Optional, Tuple

@dataclass(frozen=True)
class CalendarDate:
    """Year/month/day triple; used for both Gregorian and Jalali dates."""
    year: int
    month: int
    day: int

    def as_tuple(self) -> Tuple[int, int, int]:
        return (self.year, self.month, self.day)

@dataclass(frozen=True)
class MonthGrid:
    """Layout metadata for a Jalali month in a 7-column (Saturday-first) grid."""
    year: int
    month: int
    days_in_month: int
    start_day_of_week: int  # 0=Saturday..6=Friday

    def weeks(self) -> List[List[Optional[int]]]:
        """Rows of 7 cells: leading blanks, day numbers, trailing blanks."""
        cells: List[Optional[int]] = [None] * self.start_day_of_week
        cells.extend(range(1, self.days_in_month + 1))
        while len(cells) % 7:
            cells.append(None)
        return [cells[i:i + 7] for i in range(0, len(cells), 7)]

@dataclass(frozen=True)
class DayInfo:
    gregorian: date
    jalali: CalendarDate
    weekday_index: int  # 0=Saturday..6=Friday
    weekday_name: str
    is_leap_year: bool
