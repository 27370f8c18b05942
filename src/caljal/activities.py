"""
caljal.activities
-----------------
Time-boxed activity records keyed by Jalali date: wire translation,
duration math, date-range filtering, ordering and daily progress summaries.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Literal, Optional

from .core.types import CalendarDate
from .engines.calendar import jalali_day_number
from .formatting import format_jalali_date
from .wire import iso_to_jalali, jalali_to_iso

logger = logging.getLogger(__name__)

_HHMM_RE = re.compile(r"^(\d{1,2}):(\d{2})")


@dataclass(frozen=True)
class Activity:
    id: int
    user_id: int
    name: str
    date: CalendarDate  # Jalali
    start_time: str     # "HH:MM"
    end_time: str       # "HH:MM"
    progress: Optional[int] = None

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "Activity":
        """Build from a storage record whose ``activity_date`` is Gregorian ISO."""
        progress = record.get("progress")
        return cls(
            id=int(record["id"]),
            user_id=int(record["user_id"]),
            name=record["name"],
            date=iso_to_jalali(record["activity_date"]),
            start_time=str(record["start_time"])[:5],
            end_time=str(record["end_time"])[:5],
            progress=int(progress) if progress is not None else None,
        )

    def to_record(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "user_id": self.user_id,
            "name": self.name,
            "activity_date": jalali_to_iso(self.date),
            "start_time": self.start_time,
            "end_time": self.end_time,
            "progress": self.progress,
        }

    @property
    def day_number(self) -> int:
        return jalali_day_number(self.date.year, self.date.month, self.date.day)


@dataclass(frozen=True)
class DailySummary:
    date: CalendarDate
    date_string: str
    average_progress: float
    activity_count: int


def _minutes(hhmm: str) -> Optional[int]:
    m = _HHMM_RE.match(hhmm or "")
    if m is None:
        return None
    h, mi = int(m.group(1)), int(m.group(2))
    if h > 23 or mi > 59:
        return None
    return 60 * h + mi

def activity_hours(activity: Activity) -> float:
    """Duration in hours; 0 for missing or malformed times, or end <= start."""
    start, end = _minutes(activity.start_time), _minutes(activity.end_time)
    if start is None or end is None:
        logger.debug("activity %s has unusable times %r-%r", activity.id, activity.start_time, activity.end_time)
        return 0.0
    if end <= start:
        return 0.0
    return (end - start) / 60

def total_hours(activities: Iterable[Activity]) -> float:
    return sum(activity_hours(a) for a in activities)


def filter_by_range(
    activities: Iterable[Activity],
    start: Optional[CalendarDate] = None,
    end: Optional[CalendarDate] = None,
) -> List[Activity]:
    """Keep activities whose Jalali date lies in [start, end]; a ``None`` bound is open."""
    lo = jalali_day_number(start.year, start.month, start.day) if start is not None else None
    hi = jalali_day_number(end.year, end.month, end.day) if end is not None else None
    out = []
    for a in activities:
        n = a.day_number
        if lo is not None and n < lo:
            continue
        if hi is not None and n > hi:
            continue
        out.append(a)
    return out

def activities_on(activities: Iterable[Activity], d: CalendarDate) -> List[Activity]:
    return [a for a in activities if a.date == d]

def sort_newest_first(activities: Iterable[Activity]) -> List[Activity]:
    return sorted(activities, key=lambda a: (a.day_number, a.id), reverse=True)

def recent_activities(activities: Iterable[Activity], limit: int = 5) -> List[Activity]:
    return sort_newest_first(activities)[:limit]


def daily_progress(
    activities: Iterable[Activity],
    start: Optional[CalendarDate] = None,
    end: Optional[CalendarDate] = None,
    *,
    key: Literal["date", "average_progress", "activity_count"] = "date",
    descending: bool = True,
) -> List[DailySummary]:
    """Average reported progress per Jalali day, over activities that carry a progress value."""
    reported = [a for a in activities if a.progress is not None]
    groups: Dict[CalendarDate, List[int]] = {}
    for a in filter_by_range(reported, start, end):
        groups.setdefault(a.date, []).append(a.progress)

    summaries = [
        DailySummary(
            date=d,
            date_string=format_jalali_date(d),
            average_progress=sum(values) / len(values),
            activity_count=len(values),
        )
        for d, values in groups.items()
    ]
    if key == "date":
        sort_key = lambda s: jalali_day_number(s.date.year, s.date.month, s.date.day)
    elif key in ("average_progress", "activity_count"):
        sort_key = lambda s: getattr(s, key)
    else:
        raise ValueError(f"Unknown sort key '{key}'")
    summaries.sort(key=sort_key, reverse=descending)
    return summaries
