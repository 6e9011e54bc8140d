"""
calcal.engines.julian
---------------------
Julian calendar. Julian 1-01-01 is RD -1 (two days before Gregorian 1-01-01).
"""

from __future__ import annotations

from calcal.core.arith import mod, sum_while
from calcal.core.types import JulianDate
from calcal.engines.gregorian import DAYS_IN_MONTH, FEBRUARY, JANUARY

JULIAN_EPOCH = -1


def is_julian_leap_year(year: int) -> bool:
    return mod(year, 4) == 0


def last_day_of_julian_month(month: int, year: int) -> int:
    if month == FEBRUARY and is_julian_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month - 1]


def rd_from_julian(d: JulianDate) -> int:
    year = d.year
    return (
        d.day
        + sum_while(lambda m: last_day_of_julian_month(m, year), 1, lambda m: m < d.month)
        + 365 * (year - 1)
        + (year - 1) // 4
        - 2
    )


def julian_from_rd(rd: int) -> JulianDate:
    approx = (rd + 2) // 366
    year = approx + sum_while(
        lambda y: 1,
        approx,
        lambda y: rd >= rd_from_julian(JulianDate(y + 1, JANUARY, 1)),
    )
    month = 1 + sum_while(
        lambda m: 1,
        1,
        lambda m: rd > rd_from_julian(JulianDate(year, m, last_day_of_julian_month(m, year))),
    )
    day = rd - (rd_from_julian(JulianDate(year, month, 1)) - 1)
    return JulianDate(year, month, day)
