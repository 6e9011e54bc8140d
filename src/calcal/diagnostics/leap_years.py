from __future__ import annotations

import argparse
from typing import Callable, List, Tuple

import calcal
from calcal.engines.french import is_french_leap_year
from calcal.engines.gregorian import gregorian_year_bounds, is_gregorian_leap_year
from calcal.engines.hebrew import is_hebrew_leap_year
from calcal.engines.islamic import is_islamic_leap_year
from calcal.engines.julian import is_julian_leap_year

# (column title, calendar name, leap predicate on that calendar's own year)
COLUMNS: List[Tuple[str, str, Callable[[int], bool]]] = [
    ("Gregorian", "gregorian", is_gregorian_leap_year),
    ("Julian", "julian", is_julian_leap_year),
    ("Hebrew", "hebrew", is_hebrew_leap_year),
    ("Islamic", "islamic", is_islamic_leap_year),
    ("French", "french", is_french_leap_year),
]


def cell(calendar: str, leap: Callable[[int], bool], rd: int) -> str:
    """Year in progress on day rd, starred when it is a leap year."""
    try:
        y = calcal.from_rd(rd, calendar).year
    except calcal.OutOfDomainError:
        return "-"
    return f"{y}{'*' if leap(y) else ''}"


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Leap-year table: the year of each calendar in progress on Gregorian Jan 1 (* = leap)."
    )
    p.add_argument("--from-year", type=int, default=2000)
    p.add_argument("--to-year", type=int, default=2030)
    args = p.parse_args(argv)

    Y0, Y1 = args.from_year, args.to_year
    if Y1 < Y0:
        raise SystemExit("--to-year must be >= --from-year")

    headers = [title for title, _, _ in COLUMNS]
    colw = [max(9, len(h)) for h in headers]
    line = "  ".join(h.ljust(w) for h, w in zip(headers, colw))
    print(line)
    print("-" * len(line))

    for Y in range(Y0, Y1 + 1):
        jan1, _ = gregorian_year_bounds(Y)
        row = [cell(cal, leap, jan1).ljust(w) for (_, cal, leap), w in zip(COLUMNS, colw)]
        print("  ".join(row))

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
