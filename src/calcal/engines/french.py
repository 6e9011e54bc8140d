"""
calcal.engines.french
---------------------
French Revolutionary calendar: twelve 30-day months followed by five or six
complementary days (month 13). Year 1 began on 1792-09-22 (RD 654415).
"""

from __future__ import annotations

from calcal.core.arith import mod, sum_while
from calcal.core.errors import OutOfDomainError
from calcal.core.types import FrenchDate

FRENCH_EPOCH = 654415

VENDEMIAIRE, BRUMAIRE, FRIMAIRE, NIVOSE, PLUVIOSE, VENTOSE = 1, 2, 3, 4, 5, 6
GERMINAL, FLOREAL, PRAIRIAL, MESSIDOR, THERMIDOR, FRUCTIDOR = 7, 8, 9, 10, 11, 12
SANSCULOTTIDES = 13

# Leap years up to year 20 are listed explicitly (3, 7 and 11 were observed
# while the calendar was in use); the 4/100/400/4000 rule applies afterwards.
_HISTORICAL_LEAP_YEARS = (3, 7, 11)
_DECREED_LEAP_YEARS = (15, 20)


def is_french_leap_year(year: int) -> bool:
    return (
        year in _HISTORICAL_LEAP_YEARS
        or year in _DECREED_LEAP_YEARS
        or (
            year > 20
            and mod(year, 4) == 0
            and mod(year, 400) not in (100, 200, 300)
            and mod(year, 4000) != 0
        )
    )


def last_day_of_french_month(month: int, year: int) -> int:
    if month < SANSCULOTTIDES:
        return 30
    return 6 if is_french_leap_year(year) else 5


def rd_from_french(d: FrenchDate) -> int:
    year = d.year
    if year < 20:
        leap_days = year // 4
    else:
        leap_days = (
            (year - 1) // 4
            - (year - 1) // 100
            + (year - 1) // 400
            - (year - 1) // 4000
        )
    return FRENCH_EPOCH - 1 + 365 * (year - 1) + leap_days + 30 * (d.month - 1) + d.day


def french_from_rd(rd: int) -> FrenchDate:
    if rd < FRENCH_EPOCH:
        raise OutOfDomainError(f"RD {rd} precedes the French Revolutionary epoch (RD {FRENCH_EPOCH})")
    approx = (rd - (FRENCH_EPOCH - 1)) // 366
    year = approx + sum_while(
        lambda y: 1,
        approx,
        lambda y: rd >= rd_from_french(FrenchDate(y + 1, VENDEMIAIRE, 1)),
    )
    month = 1 + sum_while(
        lambda m: 1,
        1,
        lambda m: rd > rd_from_french(FrenchDate(year, m, last_day_of_french_month(m, year))),
    )
    day = rd - (rd_from_french(FrenchDate(year, month, 1)) - 1)
    return FrenchDate(year, month, day)
