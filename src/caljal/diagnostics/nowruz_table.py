from __future__ import annotations

import argparse

from caljal.engines.calendar import (
    JALALI_FULL_WEEK_DAYS,
    days_in_jalali_year,
    jalali_weekday_index,
)
from caljal.engines.conversion import jalali_to_gregorian
from caljal.wire import format_iso_date


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Print Nowruz (1 Farvardin) Gregorian dates for a range of Jalali years.")
    p.add_argument("--from-year", type=int, default=1395)
    p.add_argument("--to-year", type=int, default=1415)
    p.add_argument(
        "--dates",
        choices=("mmdd", "iso"),
        default="iso",
        help="Display format of the Gregorian date (default: iso).",
    )
    args = p.parse_args(argv)

    Y0, Y1 = args.from_year, args.to_year
    if Y1 < Y0:
        raise SystemExit("--to-year must be >= --from-year")

    headers = ["Year", "Nowruz", "Weekday", "Days"]
    colw = [5, 11, 10, 4]
    line = "  ".join(h.ljust(w) for h, w in zip(headers, colw))
    print(line)
    print("-" * len(line))

    for Y in range(Y0, Y1 + 1):
        gy, gm, gd = jalali_to_gregorian(Y, 1, 1)
        shown = format_iso_date(gy, gm, gd) if args.dates == "iso" else f"{gm:02d}-{gd:02d}"
        wd = JALALI_FULL_WEEK_DAYS[jalali_weekday_index(Y, 1, 1)]
        row = [str(Y), shown, wd, str(days_in_jalali_year(Y))]
        print("  ".join(c.ljust(w) for c, w in zip(row, colw)))

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
