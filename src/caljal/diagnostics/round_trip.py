from __future__ import annotations

import argparse
import random
from typing import List, Tuple

from caljal.core.time import from_jdn, to_jdn
from caljal.engines.calendar import days_in_jalali_month, jalali_day_number
from caljal.engines.conversion import gregorian_to_jalali, jalali_to_gregorian

Triple = Tuple[int, int, int]


def gregorian_roundtrip(start_jdn: int, end_jdn: int, *, max_failures: int) -> List[Triple]:
    """Walk every day in [start_jdn, end_jdn]; also checks the Jalali side is strictly day-by-day."""
    failures: List[Triple] = []
    prev_j = None
    for jdn in range(start_jdn, end_jdn + 1):
        g = from_jdn(jdn)
        j = gregorian_to_jalali(*g)
        back = jalali_to_gregorian(*j)
        step_ok = prev_j is None or jalali_day_number(*j) == jalali_day_number(*prev_j) + 1
        if back != g or not step_ok:
            failures.append(g)
            print(f"FAIL gregorian {g} -> jalali {j} -> {back}  (step_ok={step_ok})")
            if len(failures) >= max_failures:
                break
        prev_j = j
    return failures

def jalali_roundtrip_random(N: int, start_year: int, end_year: int, seed: int, *, max_failures: int) -> List[Triple]:
    random.seed(seed)
    failures: List[Triple] = []
    for _ in range(N):
        y = random.randint(start_year, end_year)
        m = random.randint(1, 12)
        d = random.randint(1, days_in_jalali_month(y, m))
        g = jalali_to_gregorian(y, m, d)
        back = gregorian_to_jalali(*g)
        if back != (y, m, d):
            failures.append((y, m, d))
            print(f"FAIL jalali {(y, m, d)} -> gregorian {g} -> {back}")
            if len(failures) >= max_failures:
                break
    return failures


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Round-trip checks: gregorian <-> jalali.")
    p.add_argument("--start", type=int, default=1, help="First Gregorian year for the day-by-day walk.")
    p.add_argument("--end", type=int, default=3000, help="Last Gregorian year for the day-by-day walk.")
    p.add_argument("--N", type=int, default=20000, help="Random Jalali trials.")
    p.add_argument("--jalali-start", type=int, default=1, help="First Jalali year for random trials.")
    p.add_argument("--jalali-end", type=int, default=3000, help="Last Jalali year for random trials.")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures per check.")
    args = p.parse_args(argv)

    if args.end < args.start:
        raise SystemExit("--end must be >= --start")

    g_fail = gregorian_roundtrip(
        to_jdn(args.start, 1, 1), to_jdn(args.end, 12, 31), max_failures=args.max_failures
    )
    print(f"gregorian {args.start}..{args.end}: failures={len(g_fail)}")

    j_fail = jalali_roundtrip_random(
        args.N, args.jalali_start, args.jalali_end, args.seed, max_failures=args.max_failures
    )
    print(f"jalali random N={args.N} years {args.jalali_start}..{args.jalali_end}: failures={len(j_fail)}")

    return 1 if (g_fail or j_fail) else 0


if __name__ == "__main__":
    raise SystemExit(main())
