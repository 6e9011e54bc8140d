"""
calcal.engines.hebrew
---------------------
Arithmetic Hebrew calendar.

Months are numbered from Nisan (1) while the year number changes at Tishri
(7), so both conversion directions treat months 1..6 as belonging to the
second half of the civil year. Year lengths follow from the molad of Tishri
and the postponement rules in `hebrew_calendar_elapsed_days`; the lengths of
Heshvan and Kislev are then read off the year length.
"""

from __future__ import annotations

from functools import lru_cache

from calcal.core.arith import mod, sum_while
from calcal.core.types import HebrewDate

NISAN, IYYAR, SIVAN, TAMMUZ, AV, ELUL = 1, 2, 3, 4, 5, 6
TISHRI, HESHVAN, KISLEV, TEVETH, SHEVAT, ADAR, ADAR_II = 7, 8, 9, 10, 11, 12, 13

# Offset between the elapsed-day count of hebrew_calendar_elapsed_days and RD
HEBREW_DAYS_BEFORE_RD_ZERO = 1373429

# RD of Tishri 1, AM 1
HEBREW_EPOCH = -1373427

# Time of day in parts (1080 per hour)
_MIDDAY = 19440                 # 18h after the 6pm day start
_TUESDAY_COMMON_CUTOFF = 9924   # 9h 204p
_MONDAY_LEAP_CUTOFF = 16789     # 15h 589p


def is_hebrew_leap_year(year: int) -> bool:
    return mod(1 + 7 * year, 19) < 7


def last_month_of_hebrew_year(year: int) -> int:
    return ADAR_II if is_hebrew_leap_year(year) else ADAR


@lru_cache(maxsize=4096)
def hebrew_calendar_elapsed_days(year: int) -> int:
    """
    Days from the Sunday prior to the start of the Hebrew calendar to
    Rosh HaShanah of `year`: the molad of Tishri plus postponements.
    """
    months_elapsed = (
        235 * ((year - 1) // 19)
        + 12 * mod(year - 1, 19)
        + (7 * mod(year - 1, 19) + 1) // 19
    )
    parts_elapsed = 204 + 793 * mod(months_elapsed, 1080)
    hours_elapsed = (
        5
        + 12 * months_elapsed
        + 793 * (months_elapsed // 1080)
        + parts_elapsed // 1080
    )
    day = 1 + 29 * months_elapsed + hours_elapsed // 24
    parts = 1080 * mod(hours_elapsed, 24) + mod(parts_elapsed, 1080)

    if (
        parts >= _MIDDAY
        or (mod(day, 7) == 2 and parts >= _TUESDAY_COMMON_CUTOFF and not is_hebrew_leap_year(year))
        or (mod(day, 7) == 1 and parts >= _MONDAY_LEAP_CUTOFF and is_hebrew_leap_year(year - 1))
    ):
        alternative_day = day + 1
    else:
        alternative_day = day

    # Rosh HaShanah never falls on Sunday, Wednesday or Friday
    if mod(alternative_day, 7) in (0, 3, 5):
        return alternative_day + 1
    return alternative_day


def days_in_hebrew_year(year: int) -> int:
    return hebrew_calendar_elapsed_days(year + 1) - hebrew_calendar_elapsed_days(year)


def long_heshvan(year: int) -> bool:
    return mod(days_in_hebrew_year(year), 10) == 5


def short_kislev(year: int) -> bool:
    return mod(days_in_hebrew_year(year), 10) == 3


def last_day_of_hebrew_month(month: int, year: int) -> int:
    if (
        month in (IYYAR, TAMMUZ, ELUL, TEVETH, ADAR_II)
        or (month == ADAR and not is_hebrew_leap_year(year))
        or (month == HESHVAN and not long_heshvan(year))
        or (month == KISLEV and short_kislev(year))
    ):
        return 29
    return 30


def rd_from_hebrew(d: HebrewDate) -> int:
    year, month = d.year, d.month

    def month_days(m: int) -> int:
        return last_day_of_hebrew_month(m, year)

    if month < TISHRI:
        # Tishri..end of year, then Nisan..month-1
        before = (
            sum_while(month_days, TISHRI, lambda m: m <= last_month_of_hebrew_year(year))
            + sum_while(month_days, NISAN, lambda m: m < month)
        )
    else:
        before = sum_while(month_days, TISHRI, lambda m: m < month)

    return d.day + before + hebrew_calendar_elapsed_days(year) - HEBREW_DAYS_BEFORE_RD_ZERO


def hebrew_from_rd(rd: int) -> HebrewDate:
    approx = (rd + HEBREW_DAYS_BEFORE_RD_ZERO) // 366
    year = approx + sum_while(
        lambda y: 1,
        approx,
        lambda y: rd >= rd_from_hebrew(HebrewDate(y + 1, TISHRI, 1)),
    )
    start = TISHRI if rd < rd_from_hebrew(HebrewDate(year, NISAN, 1)) else NISAN
    month = start + sum_while(
        lambda m: 1,
        start,
        lambda m: rd > rd_from_hebrew(HebrewDate(year, m, last_day_of_hebrew_month(m, year))),
    )
    day = rd - (rd_from_hebrew(HebrewDate(year, month, 1)) - 1)
    return HebrewDate(year, month, day)


def hebrew_new_year(year: int) -> int:
    """RD of Rosh HaShanah (Tishri 1) of a Hebrew year."""
    return rd_from_hebrew(HebrewDate(year, TISHRI, 1))
