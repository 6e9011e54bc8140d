from __future__ import annotations

import argparse
import sys
import re
import importlib
import inspect

from calcal.core.time import parse_ymd


_DATE_RE = re.compile(r"^-?\d{1,4}-\d{2}-\d{2}$")


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


def _fail(msg: str) -> int:
    print(f"calcal: error: {msg}", file=sys.stderr)
    return 2


def cmd_convert(argv: list[str]) -> int:
    import calcal

    p = argparse.ArgumentParser(prog="calcal convert", description="Gregorian date (or RD) -> every other calendar")
    p.add_argument("date", nargs="?", help="YYYY-MM-DD (proleptic Gregorian)")
    p.add_argument("--rd", type=int, default=None, help="absolute day number instead of a date")
    p.add_argument("--to", action="append", default=[], help="calendar name (repeatable; default: all)")
    args = p.parse_args(argv)

    if (args.date is None) == (args.rd is None):
        return _fail("give exactly one of DATE or --rd")

    try:
        rd = args.rd if args.rd is not None else calcal.to_rd(parse_ymd(args.date))
        info = calcal.day_info(rd, calendars=tuple(args.to))
    except (ValueError, KeyError) as e:
        return _fail(e.args[0] if e.args else str(e))

    print(f"RD {info['rd']} ({info['weekday']})")
    width = max(len(name) for name in info["calendars"])
    for name, row in info["calendars"].items():
        text = row["text"] if "text" in row else f"-- {row['error']}"
        print(f"  {name:<{width}}  {text}")
    return 0


def cmd_holidays(argv: list[str]) -> int:
    import calcal

    p = argparse.ArgumentParser(prog="calcal holidays", description="Holidays of a Gregorian year")
    p.add_argument("year", type=int)
    p.add_argument("--name", action="append", default=[], help="holiday name (repeatable; default: all)")
    args = p.parse_args(argv)

    try:
        table = calcal.holidays(args.year, tuple(args.name))
    except (ValueError, KeyError) as e:
        return _fail(e.args[0] if e.args else str(e))

    width = max(len(name) for name in table)
    for name, rds in table.items():
        dates = ", ".join(calcal.format_date(calcal.from_rd(rd, "gregorian")) for rd in rds) or "-"
        print(f"{name:<{width}}  {dates}")
    return 0


def cmd_json(argv: list[str]) -> int:
    import calcal

    p = argparse.ArgumentParser(prog="calcal json", description="Calendar date components -> JSON record")
    p.add_argument("calendar", help="calendar name, e.g. hebrew")
    p.add_argument("components", nargs="+", type=int)
    p.add_argument("--indent", type=int, default=None)
    args = p.parse_args(argv)

    try:
        eng = calcal.get_calendar(args.calendar)
        d = eng.from_components(args.components)
        print(calcal.record_to_json(eng.to_record(d), indent=args.indent))
    except (ValueError, KeyError) as e:
        return _fail(e.args[0] if e.args else str(e))
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # Shorthand: `calcal YYYY-MM-DD ...`
    if argv and _DATE_RE.match(argv[0]):
        return cmd_convert(argv)

    p = argparse.ArgumentParser(prog="calcal", description="Calendrical calculations CLI.")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("convert", help="Gregorian date (or RD) -> other calendars", add_help=False)
    sub.add_parser("holidays", help="Holidays of a Gregorian year", add_help=False)
    sub.add_parser("json", help="Encode a calendar date as a JSON record", add_help=False)
    sub.add_parser("calendars", help="List the registered calendars")

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument(
        "tool",
        choices=["round-trip", "leap-years", "new-years", "hindu-leap-months"],
        help="Which diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)

    if args.cmd == "convert":
        return cmd_convert(rest)

    if args.cmd == "holidays":
        return cmd_holidays(rest)

    if args.cmd == "json":
        return cmd_json(rest)

    if args.cmd == "calendars":
        import calcal

        for name in calcal.list_calendars():
            info = calcal.calendar_info(name)
            kind = "cyclic" if info["cyclic"] else f"epoch RD {info['epoch']}"
            print(f"{name:<16} {info['date_type']:<20} {kind}")
        return 0

    if args.cmd == "diag":
        tool_map = {
            "round-trip": "calcal.diagnostics.round_trip",
            "leap-years": "calcal.diagnostics.leap_years",
            "new-years": "calcal.diagnostics.new_years_table",
            "hindu-leap-months": "calcal.diagnostics.hindu_leap_months",
        }
        return _run_module_main(tool_map[args.tool], rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
