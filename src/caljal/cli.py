from __future__ import annotations

import argparse
import importlib
import inspect
import logging
import re
import sys

from caljal.core.errors import CaljalError

logger = logging.getLogger(__name__)

_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def _print_day(info, *, persian: bool) -> None:
    import caljal

    j = info.jalali
    if persian:
        print(caljal.format_jalali_date(j))
        print(caljal.format_jalali_date_with_day(j))
    else:
        print(f"gregorian : {info.gregorian.isoformat()}")
        print(f"jalali    : {j.year}/{j.month:02d}/{j.day:02d}")
        print(f"weekday   : {info.weekday_name} ({info.weekday_index})")
        print(f"leap year : {info.is_leap_year}")


def cmd_day(argv: list[str]) -> int:
    import caljal

    p = argparse.ArgumentParser(prog="caljal day", description="Gregorian -> Jalali day info")
    p.add_argument("date", help="YYYY-MM-DD")
    p.add_argument("--persian", action="store_true", help="Print Persian-digit formatted strings only")
    args = p.parse_args(argv)

    from datetime import date
    y, m, d = caljal.parse_iso_date(args.date)
    _print_day(caljal.day_info(date(y, m, d)), persian=args.persian)
    return 0

def cmd_to_gregorian(argv: list[str]) -> int:
    import caljal

    p = argparse.ArgumentParser(prog="caljal to-gregorian", description="Jalali -> Gregorian date")
    p.add_argument("year", type=int)
    p.add_argument("month", type=int)
    p.add_argument("day", type=int)
    args = p.parse_args(argv)

    res = caljal.checked_jalali_to_gregorian(args.year, args.month, args.day)
    if not res.ok:
        raise SystemExit(res.error)
    print(caljal.format_iso_date(*res.unwrap().as_tuple()))
    return 0

def cmd_today(argv: list[str]) -> int:
    import caljal

    p = argparse.ArgumentParser(prog="caljal today", description="Today's Jalali date (host clock)")
    p.add_argument("--persian", action="store_true", help="Print Persian-digit formatted strings only")
    args = p.parse_args(argv)

    _print_day(caljal.today(), persian=args.persian)
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # Shortcut: `caljal YYYY-MM-DD ...`
    if argv and _DATE_RE.match(argv[0]):
        argv = ["day"] + list(argv)

    p = argparse.ArgumentParser(prog="caljal", description="Jalali (Persian) calendar toolkit CLI.")
    p.add_argument("--log-level", default="WARNING", help="Logging level (default: WARNING)")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("day", help="Gregorian -> Jalali day info", add_help=False)
    sub.add_parser("to-gregorian", help="Jalali -> Gregorian date", add_help=False)
    sub.add_parser("today", help="Today's Jalali date", add_help=False)
    sub.add_parser("month", help="Print a Jalali month grid", add_help=False)
    sub.add_parser("nowruz", help="Print Nowruz dates for a range of years", add_help=False)

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument(
        "tool",
        choices=["round-trip", "leap-rules"],
        help="Which diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)

    from caljal.logging_setup import setup_logging
    try:
        setup_logging(level=args.log_level)
    except ValueError as e:
        raise SystemExit(str(e)) from e
    logger.debug("command %s args %r", args.cmd, rest)

    try:
        if args.cmd == "day":
            return cmd_day(rest)

        if args.cmd == "to-gregorian":
            return cmd_to_gregorian(rest)

        if args.cmd == "today":
            return cmd_today(rest)

        if args.cmd == "month":
            return _run_module_main("caljal.diagnostics.pretty_month", rest)

        if args.cmd == "nowruz":
            return _run_module_main("caljal.diagnostics.nowruz_table", rest)

        if args.cmd == "diag":
            tool_map = {
                "round-trip": "caljal.diagnostics.round_trip",
                "leap-rules": "caljal.diagnostics.leap_rules",
            }
            return _run_module_main(tool_map[args.tool], rest)
    except CaljalError as e:
        raise SystemExit(f"caljal: {e}") from e

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
