from __future__ import annotations

import argparse
from typing import Callable, List, Tuple

import calcal
from calcal.core.types import FrenchDate, IslamicDate, OldHinduSolarDate
from calcal.engines.gregorian import gregorian_year_bounds
from calcal.engines.hebrew import hebrew_new_year
from calcal.holidays.standard import islamic_dates_in_gregorian_year


def _hebrew(Y: int) -> List[int]:
    return [hebrew_new_year(Y + 3761)]


def _islamic(Y: int) -> List[int]:
    return islamic_dates_in_gregorian_year(1, 1, Y)


def _in_year(Y: int, candidates: List[int]) -> List[int]:
    jan1, dec31 = gregorian_year_bounds(Y)
    return [rd for rd in candidates if jan1 <= rd <= dec31]


def _french(Y: int) -> List[int]:
    # 1 Vendemiaire of year y falls in Gregorian year 1791 + y
    y = Y - 1791
    return [calcal.to_rd(FrenchDate(y, 1, 1))] if y >= 1 else []


def _hindu_solar(Y: int) -> List[int]:
    # Mesha 1 falls in April; Kali Yuga year = Gregorian year + 3101
    y = Y + 3101
    return _in_year(Y, [calcal.to_rd(OldHinduSolarDate(y + k, 1, 1)) for k in (-1, 0)])


DEFAULT_CALENDARS: List[Tuple[str, Callable[[int], List[int]]]] = [
    ("Hebrew", _hebrew),
    ("Islamic", _islamic),
    ("French", _french),
    ("Hindu solar", _hindu_solar),
]


def fmt(rd: int, style: str) -> str:
    d = calcal.from_rd(rd, "gregorian")
    return f"{d.month:02d}-{d.day:02d}" if style == "mmdd" else f"{d.year:04d}-{d.month:02d}-{d.day:02d}"


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print New Year date table (Gregorian dates) for several calendars."
    )
    p.add_argument("--from-year", type=int, default=2000)
    p.add_argument("--to-year", type=int, default=2030)
    p.add_argument(
        "--dates",
        choices=("mmdd", "iso"),
        default="mmdd",
        help="Display format in table columns (default: mmdd).",
    )
    args = p.parse_args(argv)

    Y0, Y1 = args.from_year, args.to_year
    if Y1 < Y0:
        raise SystemExit("--to-year must be >= --from-year")

    headers = ["Year"] + [name for name, _ in DEFAULT_CALENDARS]
    colw = [5] + [max(11, len(h)) for h in headers[1:]]
    line = "  ".join(h.ljust(w) for h, w in zip(headers, colw))
    print(line)
    print("-" * len(line))

    for Y in range(Y0, Y1 + 1):
        row = [str(Y).ljust(colw[0])]
        for (_, fn), w in zip(DEFAULT_CALENDARS, colw[1:]):
            rds = fn(Y)
            text = ",".join(fmt(rd, args.dates) for rd in rds) if rds else "-"
            row.append(text.ljust(w))
        print("  ".join(row))

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
