"""
calcal.engines.gregorian
------------------------
Gregorian and ISO week-date calendars, plus the weekday helpers that the
ISO calendar and the holiday functions are built on.

Absolute dates count days with Gregorian 1-01-01 = RD 1.
"""

from __future__ import annotations

from typing import Tuple

from calcal.core.arith import amod, mod, sum_while
from calcal.core.types import GregorianDate, IsoDate

JANUARY, FEBRUARY, MARCH, APRIL, MAY, JUNE = 1, 2, 3, 4, 5, 6
JULY, AUGUST, SEPTEMBER, OCTOBER, NOVEMBER, DECEMBER = 7, 8, 9, 10, 11, 12

SUNDAY, MONDAY, TUESDAY, WEDNESDAY, THURSDAY, FRIDAY, SATURDAY = range(7)

DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_gregorian_leap_year(year: int) -> bool:
    return mod(year, 4) == 0 and mod(year, 400) not in (100, 200, 300)


def last_day_of_gregorian_month(month: int, year: int) -> int:
    if month == FEBRUARY and is_gregorian_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month - 1]


def rd_from_gregorian(d: GregorianDate) -> int:
    year = d.year
    return (
        d.day
        + sum_while(lambda m: last_day_of_gregorian_month(m, year), 1, lambda m: m < d.month)
        + 365 * (year - 1)
        + (year - 1) // 4
        - (year - 1) // 100
        + (year - 1) // 400
    )


def gregorian_from_rd(rd: int) -> GregorianDate:
    # 400/100/4/1-year cycle decomposition of the days before rd
    d0 = rd - 1
    n400, d1 = divmod(d0, 146097)
    n100, d2 = divmod(d1, 36524)
    n4, d3 = divmod(d2, 1461)
    n1 = d3 // 365
    year = 400 * n400 + 100 * n100 + 4 * n4 + n1
    if not (n100 == 4 or n1 == 4):
        year += 1

    month = 1 + sum_while(
        lambda m: 1,
        1,
        lambda m: rd > rd_from_gregorian(GregorianDate(year, m, last_day_of_gregorian_month(m, year))),
    )
    day = rd - (rd_from_gregorian(GregorianDate(year, month, 1)) - 1)
    return GregorianDate(year, month, day)


def gregorian_year_bounds(year: int) -> Tuple[int, int]:
    """(RD of Jan 1, RD of Dec 31) for a Gregorian year."""
    return (
        rd_from_gregorian(GregorianDate(year, JANUARY, 1)),
        rd_from_gregorian(GregorianDate(year, DECEMBER, 31)),
    )


# ---------------------------------------------------------
# Weekdays
# ---------------------------------------------------------

def k_day_on_or_before(rd: int, k: int) -> int:
    """RD of weekday k (0=Sunday) in the seven-day window ending on rd."""
    return rd - mod(rd - k, 7)


def k_day_on_or_after(rd: int, k: int) -> int:
    return k_day_on_or_before(rd + 6, k)


def k_day_nearest(rd: int, k: int) -> int:
    return k_day_on_or_before(rd + 3, k)


def k_day_before(rd: int, k: int) -> int:
    return k_day_on_or_before(rd - 1, k)


def k_day_after(rd: int, k: int) -> int:
    return k_day_on_or_before(rd + 7, k)


def nth_k_day(n: int, k: int, month: int, year: int) -> int:
    """
    RD of the n-th weekday k in a Gregorian month.
    n > 0 counts from the start of the month, n < 0 from its end (-1 = last).
    """
    if n > 0:
        return k_day_on_or_before(rd_from_gregorian(GregorianDate(year, month, 7)), k) + 7 * (n - 1)
    last = rd_from_gregorian(GregorianDate(year, month, last_day_of_gregorian_month(month, year)))
    return k_day_on_or_before(last, k) + 7 * (n + 1)


# ---------------------------------------------------------
# ISO week date
# ---------------------------------------------------------

def rd_from_iso(d: IsoDate) -> int:
    # week 1 starts on the Monday on or before January 4
    return (
        k_day_on_or_before(rd_from_gregorian(GregorianDate(d.year, JANUARY, 4)), MONDAY)
        + 7 * (d.week - 1)
        + (d.day - 1)
    )


def iso_from_rd(rd: int) -> IsoDate:
    approx = gregorian_from_rd(rd - 3).year
    year = approx + 1 if rd >= rd_from_iso(IsoDate(approx + 1, 1, 1)) else approx
    week = 1 + (rd - rd_from_iso(IsoDate(year, 1, 1))) // 7
    day = amod(rd, 7)
    return IsoDate(year, week, day)


def iso_weeks_in_year(year: int) -> int:
    return (rd_from_iso(IsoDate(year + 1, 1, 1)) - rd_from_iso(IsoDate(year, 1, 1))) // 7
