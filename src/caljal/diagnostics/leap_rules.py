#!/usr/bin/env python3
from __future__ import annotations

import argparse
from typing import List, Optional, Tuple

from caljal.engines.calendar import is_jalali_leap, is_jalali_leap_2820
from caljal.engines.conversion import jalali_to_gregorian


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "caljal[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib
        matplotlib.use("Agg")
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "caljal[diagnostics]"') from e


def disagreements(start_year: int, end_year: int) -> List[Tuple[int, bool, bool]]:
    """Years where the 33-year rule and the 2820-year rule differ: (year, rule33, rule2820)."""
    out = []
    for Y in range(start_year, end_year + 1):
        a, b = is_jalali_leap(Y), is_jalali_leap_2820(Y)
        if a != b:
            out.append((Y, a, b))
    return out


def plot(start_year: int, end_year: int, out_path: str, title: str) -> None:
    np = _need_numpy()
    plt = _need_matplotlib()

    years = np.arange(start_year, end_year + 1, dtype=int)
    rule33 = np.array([is_jalali_leap(int(y)) for y in years], dtype=bool)
    rule2820 = np.array([is_jalali_leap_2820(int(y)) for y in years], dtype=bool)
    diff = rule33 != rule2820

    fig, ax = plt.subplots(figsize=(16, 2.8))
    ax.scatter(years[rule33], np.full(rule33.sum(), 1.0), s=18, marker="o", c="0.15", label="33-year cycle")
    ax.scatter(years[rule2820], np.full(rule2820.sum(), 0.0), s=18, marker="s", c="0.55", label="2820-year rule")
    if diff.any():
        for y in years[diff]:
            ax.axvline(int(y), color="tab:red", lw=0.6, alpha=0.6, zorder=0)

    ax.set_yticks([0.0, 1.0])
    ax.set_yticklabels(["2820", "33"])
    ax.set_ylim(-0.5, 1.5)
    ax.set_xlim(start_year - 0.5, end_year + 0.5)
    ax.set_xlabel("Jalali year")
    ax.tick_params(axis="y", length=0)
    ax.set_title(title)
    ax.legend(loc="center left", bbox_to_anchor=(1.01, 0.5), frameon=False)
    fig.tight_layout()
    fig.savefig(out_path, dpi=200)
    print(f"Saved: {out_path}")


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(
        description="Compare the 33-year leap cycle used for conversion with the 2820-year rule."
    )
    p.add_argument("--start-year", type=int, default=1300)
    p.add_argument("--end-year", type=int, default=1500)
    p.add_argument("--plot", metavar="OUT", default=None, help="Also save a leap-year strip plot (PNG).")
    p.add_argument("--title", default="Jalali leap years: 33-year cycle vs 2820-year rule")
    args = p.parse_args(argv)

    if args.end_year < args.start_year:
        raise SystemExit("--end-year must be >= --start-year")

    rows = disagreements(args.start_year, args.end_year)
    print(f"Years {args.start_year}..{args.end_year}: {len(rows)} disagreement(s)")
    if rows:
        print("Year   33-cycle  2820-rule  Esfand 30 -> Gregorian")
        for Y, a, b in rows:
            gy, gm, gd = jalali_to_gregorian(Y, 12, 30)
            print(f"{Y:<6} {str(a):<9} {str(b):<10} {gy}-{gm:02d}-{gd:02d}")

    if args.plot:
        plot(args.start_year, args.end_year, args.plot, args.title)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
