# tests/test_calendar.py

import random
from datetime import date

import pytest

from caljal.core.errors import ClockError
from caljal.core.time import FixedClock, from_jdn, sunday_weekday, to_jdn
from caljal.core.types import CalendarDate, MonthGrid
from caljal.engines import calendar as cal
from caljal.engines.conversion import gregorian_to_jalali, jalali_to_gregorian


def test_jdn_date_roundtrip():
    random.seed(42)
    # Constrain to year 1 - 9999 to compare against datetime
    for _ in range(10000):
        jdn_in = random.randint(1721426, 5373484)
        y, m, d = from_jdn(jdn_in)
        assert to_jdn(y, m, d) == jdn_in
        assert date(y, m, d).toordinal() + 1721425 == jdn_in

def test_known_epochs():
    assert to_jdn(2000, 1, 1) == 2451545
    assert cal.jalali_day_number(1403, 1, 1) == 2460390
    # 2000-01-01 was a Saturday
    assert sunday_weekday(2451545) == 6


def test_leap_fixed_points():
    assert cal.is_jalali_leap(1403) is True
    assert cal.days_in_jalali_month(1403, 12) == 30
    assert cal.is_jalali_leap(1404) is False
    assert cal.days_in_jalali_month(1404, 12) == 29

def test_leap_cycle_pattern():
    leaps = [y for y in range(1370, 1412) if cal.is_jalali_leap(y)]
    assert leaps == [1370, 1375, 1379, 1383, 1387, 1391, 1395, 1399, 1403, 1408]

def test_leap_consistent_with_month_length_and_conversion():
    for y in range(1, 3001):
        leap = cal.is_jalali_leap(y)
        assert (cal.days_in_jalali_month(y, 12) == 30) is leap
        assert cal.days_in_jalali_year(y) == (366 if leap else 365)
        span = cal.jalali_day_number(y + 1, 1, 1) - cal.jalali_day_number(y, 1, 1)
        assert span == cal.days_in_jalali_year(y)
        # Esfand 30 only survives the round trip in a leap year
        back = gregorian_to_jalali(*jalali_to_gregorian(y, 12, 30))
        assert (back == (y, 12, 30)) is leap

def test_2820_year_rule_values():
    assert cal.is_jalali_leap_2820(1399) is True
    assert cal.is_jalali_leap_2820(1403) is False
    assert cal.is_jalali_leap_2820(1404) is True
    assert cal.is_jalali_leap_2820(1408) is True
    # 683 leap years per 2820-year cycle
    assert sum(cal.is_jalali_leap_2820(y) for y in range(475, 475 + 2820)) == 683

def test_days_in_jalali_month():
    assert [cal.days_in_jalali_month(1402, m) for m in range(1, 13)] == [31] * 6 + [30] * 5 + [29]
    assert cal.days_in_jalali_month(1402, 0) == 0
    assert cal.days_in_jalali_month(1402, 13) == 0

def test_gregorian_month_lengths():
    assert cal.days_in_gregorian_month(2024, 2) == 29
    assert cal.days_in_gregorian_month(1900, 2) == 28
    assert cal.days_in_gregorian_month(2000, 2) == 29
    assert cal.days_in_gregorian_month(2023, 4) == 30
    assert cal.days_in_gregorian_month(2023, 13) == 0
    assert cal.is_gregorian_leap(1600) and not cal.is_gregorian_leap(1700)


def test_day_of_week_nowruz_1403():
    assert cal.get_jalali_day_of_week(CalendarDate(1403, 1, 1)) == "چهارشنبه"
    assert cal.jalali_weekday_index(1403, 1, 1) == 4

def test_weekday_matches_datetime():
    random.seed(11)
    for _ in range(2000):
        y = random.randint(1300, 1500)
        m = random.randint(1, 12)
        d = random.randint(1, cal.days_in_jalali_month(y, m))
        g = date(*jalali_to_gregorian(y, m, d))
        # datetime: Monday=0; Persian week: Saturday=0
        assert cal.jalali_weekday_index(y, m, d) == (g.weekday() + 2) % 7

def test_weekday_names_table():
    assert cal.JALALI_FULL_WEEK_DAYS[0] == "شنبه"
    assert cal.JALALI_FULL_WEEK_DAYS[6] == "جمعه"
    # 1378/10/11 is 2000-01-01, a Saturday
    assert cal.get_jalali_day_of_week(CalendarDate(1378, 10, 11)) == "شنبه"


def test_month_grid_farvardin_1403():
    grid = cal.get_jalali_month_grid(1403, 1)
    assert grid == MonthGrid(year=1403, month=1, days_in_month=31, start_day_of_week=4)
    weeks = grid.weeks()
    assert len(weeks) == 5
    assert weeks[0] == [None, None, None, None, 1, 2, 3]
    assert weeks[-1] == [25, 26, 27, 28, 29, 30, 31]

def test_month_grid_layout_properties():
    for y in (1402, 1403, 1404):
        for m in range(1, 13):
            grid = cal.get_jalali_month_grid(y, m)
            cells = [c for w in grid.weeks() for c in w]
            assert all(len(w) == 7 for w in grid.weeks())
            assert cells[:grid.start_day_of_week] == [None] * grid.start_day_of_week
            assert [c for c in cells if c is not None] == list(range(1, grid.days_in_month + 1))
            # next month starts where this one ends
            ny, nm = cal.next_jalali_month(y, m)
            nxt = cal.get_jalali_month_grid(ny, nm)
            assert nxt.start_day_of_week == (grid.start_day_of_week + grid.days_in_month) % 7


def test_month_navigation():
    assert cal.next_jalali_month(1403, 12) == (1404, 1)
    assert cal.next_jalali_month(1403, 6) == (1403, 7)
    assert cal.prev_jalali_month(1403, 1) == (1402, 12)
    assert cal.prev_jalali_month(1403, 7) == (1403, 6)

def test_day_number_axis():
    a = cal.jalali_day_number(1402, 12, 29)
    b = cal.jalali_day_number(1403, 1, 1)
    assert b - a == 1
    assert cal.jalali_from_day_number(b) == CalendarDate(1403, 1, 1)
    assert cal.add_jalali_days(CalendarDate(1403, 12, 30), 1) == CalendarDate(1404, 1, 1)
    assert cal.add_jalali_days(CalendarDate(1404, 12, 29), 1) == CalendarDate(1405, 1, 1)
    assert cal.add_jalali_days(CalendarDate(1403, 1, 1), -1) == CalendarDate(1402, 12, 29)
    assert cal.gregorian_day_number(2024, 3, 20) == b


def test_today_uses_injected_clock():
    clock = FixedClock(date(2024, 3, 20))
    assert cal.get_today_jalali(clock) == CalendarDate(1403, 1, 1)
    assert cal.get_today_jalali(FixedClock(date(2025, 3, 20))) == CalendarDate(1403, 12, 30)

def test_today_default_clock_is_host_date():
    t = date.today()
    j = cal.get_today_jalali()
    # guard against a midnight rollover between the two reads
    assert j in {
        CalendarDate(*gregorian_to_jalali(t.year, t.month, t.day)),
        CalendarDate(*gregorian_to_jalali(*from_jdn(to_jdn(t.year, t.month, t.day) + 1))),
    }

def test_bad_clock_raises():
    class Broken:
        def today(self):
            return "2024-03-20"

    with pytest.raises(ClockError):
        cal.get_today_jalali(Broken())
