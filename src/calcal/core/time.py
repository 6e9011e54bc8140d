from __future__ import annotations

from .types import GregorianDate


def day_of_week(rd: int) -> int:
    """0=Sunday .. 6=Saturday (RD 0 was a Sunday)."""
    return rd % 7


def parse_ymd(s: str) -> GregorianDate:
    """YYYY-MM-DD (proleptic Gregorian); a leading '-' gives a negative year."""
    neg = s.startswith("-")
    y, m, d = map(int, s[1:].split("-") if neg else s.split("-"))
    return GregorianDate(-y if neg else y, m, d)
