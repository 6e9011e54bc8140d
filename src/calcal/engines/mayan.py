"""
calcal.engines.mayan
--------------------
Mayan long count (an absolute mixed-radix day count) and the two cyclic
calendars, the 365-day haab and the 260-day tzolkin.

The haab and tzolkin only name a position within their cycle, so they can be
computed from an RD but not inverted; `mayan_haab_tzolkin_on_or_before`
recovers the latest RD matching a (haab, tzolkin) pair within the 18980-day
calendar round, when such a pair exists at all.
"""

from __future__ import annotations

from calcal.core.arith import amod, mod
from calcal.core.errors import NoSolutionError
from calcal.core.types import MayanHaabDate, MayanLongCount, MayanTzolkinDate

# Goodman-Martinez-Thompson correlation: long count 0.0.0.0.0 = RD -1137142
MAYAN_DAYS_BEFORE_RD_ZERO = 1137142
# Spinden correlation would be 1232041.

BAKTUN, KATUN, TUN, UINAL = 144000, 7200, 360, 20

HAAB_YEAR = 365
TZOLKIN_YEAR = 260
CALENDAR_ROUND = 18980

POP, UO, ZIP, ZOTZ, TZEC, XUL, YAXKIN, MOL, CHEN = 1, 2, 3, 4, 5, 6, 7, 8, 9
YAX, ZAC, CEH, MAC, KANKIN, MUAN, PAX, KAYAB, CUMKU, UAYEB = 10, 11, 12, 13, 14, 15, 16, 17, 18, 19

IMIX, IK, AKBAL, KAN, CHICCHAN, CIMI, MANIK, LAMAT, MULUC, OC = range(1, 11)
CHUEN, EB, BEN, IX, MEN, CIB, CABAN, ETZNAB, CAUAC, AHAU = range(11, 21)

MAYAN_HAAB_AT_EPOCH = MayanHaabDate(8, CUMKU)
MAYAN_TZOLKIN_AT_EPOCH = MayanTzolkinDate(4, AHAU)


# ---------------------------------------------------------
# Long count
# ---------------------------------------------------------

def rd_from_mayan_long_count(d: MayanLongCount) -> int:
    return (
        d.baktun * BAKTUN
        + d.katun * KATUN
        + d.tun * TUN
        + d.uinal * UINAL
        + d.kin
        - MAYAN_DAYS_BEFORE_RD_ZERO
    )


def mayan_long_count_from_rd(rd: int) -> MayanLongCount:
    long_count = rd + MAYAN_DAYS_BEFORE_RD_ZERO
    baktun, day_of_baktun = divmod(long_count, BAKTUN)
    katun, day_of_katun = divmod(day_of_baktun, KATUN)
    tun, day_of_tun = divmod(day_of_katun, TUN)
    uinal, kin = divmod(day_of_tun, UINAL)
    return MayanLongCount(baktun, katun, tun, uinal, kin)


# ---------------------------------------------------------
# Haab
# ---------------------------------------------------------

def _haab_ordinal(h: MayanHaabDate) -> int:
    return h.day + 20 * (h.month - 1)


def mayan_haab_from_rd(rd: int) -> MayanHaabDate:
    long_count = rd + MAYAN_DAYS_BEFORE_RD_ZERO
    day_of_haab = mod(long_count + _haab_ordinal(MAYAN_HAAB_AT_EPOCH), HAAB_YEAR)
    return MayanHaabDate(day=mod(day_of_haab, 20), month=day_of_haab // 20 + 1)


def mayan_haab_difference(h1: MayanHaabDate, h2: MayanHaabDate) -> int:
    """Days from h1 forward to the next h2, in 0..364."""
    return mod(20 * (h2.month - h1.month) + (h2.day - h1.day), HAAB_YEAR)


def mayan_haab_on_or_before(haab: MayanHaabDate, rd: int) -> int:
    """RD of the latest day on or before rd that falls on the given haab date."""
    return rd - mod(rd - mayan_haab_difference(mayan_haab_from_rd(0), haab), HAAB_YEAR)


# ---------------------------------------------------------
# Tzolkin
# ---------------------------------------------------------

def mayan_tzolkin_from_rd(rd: int) -> MayanTzolkinDate:
    long_count = rd + MAYAN_DAYS_BEFORE_RD_ZERO
    return MayanTzolkinDate(
        number=amod(long_count + MAYAN_TZOLKIN_AT_EPOCH.number, 13),
        name=amod(long_count + MAYAN_TZOLKIN_AT_EPOCH.name, 20),
    )


def mayan_tzolkin_difference(t1: MayanTzolkinDate, t2: MayanTzolkinDate) -> int:
    """
    Days from t1 forward to the next t2, in 0..259.
    Chinese remainder over the 13-number and 20-name subcycles (13 * 17 = 1 mod 20).
    """
    number_difference = t2.number - t1.number
    name_difference = t2.name - t1.name
    return mod(number_difference + 13 * mod(3 * (number_difference - name_difference), 20), TZOLKIN_YEAR)


def mayan_tzolkin_on_or_before(tzolkin: MayanTzolkinDate, rd: int) -> int:
    return rd - mod(rd - mayan_tzolkin_difference(mayan_tzolkin_from_rd(0), tzolkin), TZOLKIN_YEAR)


# ---------------------------------------------------------
# Calendar round
# ---------------------------------------------------------

def mayan_haab_tzolkin_on_or_before(haab: MayanHaabDate, tzolkin: MayanTzolkinDate, rd: int) -> int:
    """
    RD of the latest day on or before rd that is both `haab` and `tzolkin`.

    Only a fifth of all (haab, tzolkin) pairs ever coincide; for the rest
    NoSolutionError is raised.
    """
    haab_difference = mayan_haab_difference(mayan_haab_from_rd(0), haab)
    tzolkin_difference = mayan_tzolkin_difference(mayan_tzolkin_from_rd(0), tzolkin)
    difference = tzolkin_difference - haab_difference
    if mod(difference, 5) != 0:
        raise NoSolutionError(f"haab {haab} and tzolkin {tzolkin} never fall on the same day")
    return rd - mod(rd - (haab_difference + HAAB_YEAR * difference), CALENDAR_ROUND)
