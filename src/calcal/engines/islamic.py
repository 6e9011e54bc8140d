"""
calcal.engines.islamic
----------------------
Arithmetic (tabular) Islamic calendar: 12 lunar months alternating 30/29
days, with a leap day appended to month 12 in 11 years of every 30.
"""

from __future__ import annotations

from calcal.core.arith import mod, sum_while
from calcal.core.errors import OutOfDomainError
from calcal.core.types import IslamicDate

# RD of 1 Muharram AH 1 (Julian 622-07-16)
ISLAMIC_EPOCH = 227015

MUHARRAM, SAFAR, RABI_I, RABI_II, JUMADA_I, JUMADA_II = 1, 2, 3, 4, 5, 6
RAJAB, SHABAN, RAMADAN, SHAWWAL, DHU_AL_QADA, DHU_AL_HIJJAH = 7, 8, 9, 10, 11, 12


def is_islamic_leap_year(year: int) -> bool:
    return mod(14 + 11 * year, 30) < 11


def last_day_of_islamic_month(month: int, year: int) -> int:
    if mod(month, 2) == 1 or (month == DHU_AL_HIJJAH and is_islamic_leap_year(year)):
        return 30
    return 29


def days_in_islamic_year(year: int) -> int:
    return 355 if is_islamic_leap_year(year) else 354


def rd_from_islamic(d: IslamicDate) -> int:
    return (
        d.day
        + 29 * (d.month - 1)
        + d.month // 2
        + (d.year - 1) * 354
        + (3 + 11 * d.year) // 30
        + ISLAMIC_EPOCH - 1
    )


def islamic_from_rd(rd: int) -> IslamicDate:
    if rd < ISLAMIC_EPOCH:
        raise OutOfDomainError(f"RD {rd} precedes the Islamic epoch (RD {ISLAMIC_EPOCH})")
    approx = (rd - (ISLAMIC_EPOCH - 1)) // 355
    year = approx + sum_while(
        lambda y: 1,
        approx,
        lambda y: rd >= rd_from_islamic(IslamicDate(y + 1, MUHARRAM, 1)),
    )
    month = 1 + sum_while(
        lambda m: 1,
        1,
        lambda m: rd > rd_from_islamic(IslamicDate(year, m, last_day_of_islamic_month(m, year))),
    )
    day = rd - (rd_from_islamic(IslamicDate(year, month, 1)) - 1)
    return IslamicDate(year, month, day)
