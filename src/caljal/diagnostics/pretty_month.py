from __future__ import annotations

import argparse
from typing import List, Optional

from caljal.core.types import CalendarDate, MonthGrid
from caljal.engines.calendar import get_jalali_month_grid, get_today_jalali
from caljal.engines.conversion import jalali_to_gregorian
from caljal.formatting import JALALI_MONTHS, JALALI_WEEK_DAYS, to_persian_digits


def dow_header(w: int = 6) -> str:
    return " ".join(d.ljust(w) for d in JALALI_WEEK_DAYS)


def cell(top: str, bot: str, w: int = 6) -> tuple[str, str]:
    return (top[:w].ljust(w), bot[:w].ljust(w))


def render(grid: MonthGrid, *, persian_digits: bool = False) -> List[str]:
    """Two text lines per week: Jalali day on top, Gregorian MM-DD below."""
    header = dow_header()
    lines = [header, "-" * len(header)]
    for week in grid.weeks():
        cells = []
        for day in week:
            if day is None:
                cells.append(cell("", ""))
                continue
            _, gm, gd = jalali_to_gregorian(grid.year, grid.month, day)
            top = f"{day:2d}"
            if persian_digits:
                top = to_persian_digits(top)
            cells.append(cell(top, f"{gm:02d}-{gd:02d}"))
        lines.append(" ".join(c[0] for c in cells))
        lines.append(" ".join(c[1] for c in cells))
    return lines


def main(argv: Optional[list[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Print a Jalali month grid with paired Gregorian dates.")
    p.add_argument("--month", nargs=2, type=int, metavar=("Y", "M"),
                   help="Jalali month to print: Y M (e.g. 1403 1). Default: current month.")
    p.add_argument("--persian-digits", action="store_true", help="Show Jalali day numbers in Persian digits.")
    args = p.parse_args(argv)

    if args.month:
        Y, M = args.month
    else:
        t: CalendarDate = get_today_jalali()
        Y, M = t.year, t.month
    if not 1 <= M <= 12:
        raise SystemExit("month must be in 1..12")

    grid = get_jalali_month_grid(Y, M)
    gy, gm, gd = jalali_to_gregorian(Y, M, 1)
    print(f"{JALALI_MONTHS[M - 1]} {Y}   (starts {gy}-{gm:02d}-{gd:02d}, {grid.days_in_month} days)")
    for line in render(grid, persian_digits=args.persian_digits):
        print(line)
    print()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
