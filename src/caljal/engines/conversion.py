"""
caljal.engines.conversion
-------------------------
Exact integer mapping between proleptic Gregorian and Jalali (solar Hijri)
year/month/day triples.

Both directions go through an absolute day count. The Jalali side uses the
arithmetic 33-year cycle (8 leap years per cycle, at cycle offsets
0, 4, ..., 28); the Gregorian side uses the 400/100/4/1-year cycles.

Epoch constants
~~~~~~~~~~~~~~~
Jalali year ``jy`` is counted internally as ``J = jy + 1595`` so that
``J = 0`` starts a 33-year cycle. Gregorian day counts start at
0000-01-01 (proleptic, year 0 is leap).

Gregorian -> Jalali adds 355666 to the 1-based Gregorian day count, which
yields the 0-based day count from the first day of J = 0.
Jalali -> Gregorian subtracts 355668 from a count that includes the 1-based
Jalali day, which yields the 0-based Gregorian day count. The two constants
differ by the two 1-based/0-based switches.
"""

from __future__ import annotations

from typing import Tuple

Triple = Tuple[int, int, int]

GREGORIAN_EPOCH_DAYS = 355666
JALALI_EPOCH_DAYS = 355668
JALALI_YEAR_OFFSET = 1595

JALALI_CYCLE_YEARS = 33
JALALI_CYCLE_LEAP_DAYS = 8
JALALI_33_YEAR_CYCLE_DAYS = 12053   # 33 * 365 + 8
FOUR_YEAR_CYCLE_DAYS = 1461         # 4 * 365 + 1
GREGORIAN_400_YEAR_CYCLE_DAYS = 146097
GREGORIAN_CENTURY_DAYS = 36524

# Day offset of month m (1-based) inside a Jalali year.
JALALI_FIRST_HALF_DAYS = 186        # 6 * 31

# Days before month m (index m-1) in a common Gregorian year.
_GREGORIAN_CUMULATIVE = (0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)


def _gregorian_leap(gy: int) -> bool:
    return (gy % 4 == 0 and gy % 100 != 0) or gy % 400 == 0


def _jalali_month_offset(jm: int) -> int:
    if jm < 7:
        return (jm - 1) * 31
    return (jm - 7) * 30 + JALALI_FIRST_HALF_DAYS


def gregorian_to_jalali(gy: int, gm: int, gd: int) -> Triple:
    """Gregorian (y, m, d) -> Jalali (y, m, d). Total; inputs are not validated."""
    # Feb 29 is counted from March onwards, hence the shifted year.
    gy2 = gy + 1 if gm > 2 else gy
    days = (
        GREGORIAN_EPOCH_DAYS
        + 365 * gy
        + (gy2 + 3) // 4
        - (gy2 + 99) // 100
        + (gy2 + 399) // 400
        + gd
        + _GREGORIAN_CUMULATIVE[gm - 1]
    )

    cycles, days = divmod(days, JALALI_33_YEAR_CYCLE_DAYS)
    jy = -JALALI_YEAR_OFFSET + JALALI_CYCLE_YEARS * cycles
    quads, days = divmod(days, FOUR_YEAR_CYCLE_DAYS)
    jy += 4 * quads
    # first year of each 4-year block is the 366-day one
    if days > 365:
        jy += (days - 1) // 365
        days = (days - 1) % 365

    if days < JALALI_FIRST_HALF_DAYS:
        jm = 1 + days // 31
        jd = 1 + days % 31
    else:
        jm = 7 + (days - JALALI_FIRST_HALF_DAYS) // 30
        jd = 1 + (days - JALALI_FIRST_HALF_DAYS) % 30
    return (jy, jm, jd)


def jalali_to_gregorian(jy: int, jm: int, jd: int) -> Triple:
    """Jalali (y, m, d) -> Gregorian (y, m, d). Total; inputs are not validated."""
    J = jy + JALALI_YEAR_OFFSET
    cycles, pos = divmod(J, JALALI_CYCLE_YEARS)
    days = (
        -JALALI_EPOCH_DAYS
        + 365 * J
        + cycles * JALALI_CYCLE_LEAP_DAYS
        + (pos + 3) // 4
        + jd
        + _jalali_month_offset(jm)
    )

    eras, days = divmod(days, GREGORIAN_400_YEAR_CYCLE_DAYS)
    gy = 400 * eras
    if days > GREGORIAN_CENTURY_DAYS:
        # the first century of an era carries the extra (400-divisible) leap day
        days -= 1
        centuries, days = divmod(days, GREGORIAN_CENTURY_DAYS)
        gy += 100 * centuries
        if days >= 365:
            days += 1
    quads, days = divmod(days, FOUR_YEAR_CYCLE_DAYS)
    gy += 4 * quads
    if days > 365:
        gy += (days - 1) // 365
        days = (days - 1) % 365

    gd = days + 1
    month_lengths = (0, 31, 29 if _gregorian_leap(gy) else 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
    gm = 0
    while gm < 13 and gd > month_lengths[gm]:
        gd -= month_lengths[gm]
        gm += 1
    return (gy, gm, gd)
