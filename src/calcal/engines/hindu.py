"""
calcal.engines.hindu
--------------------
Old Hindu (Arya Siddhanta) solar and lunar calendars.

Both are driven by mean motions with exact rational periods. Time `t` is
measured in days (and fractions of a day) since the Kali Yuga epoch, which
lies HINDU_EPOCH_OFFSET days before RD 0; a civil day is identified with
its mean sunrise, a quarter day after the epoch-aligned midnight.

Every quantity here is a Fraction; floating point would drift by whole days
over the ~5000 elapsed years.
"""

from __future__ import annotations

from fractions import Fraction

from calcal.core.arith import RatT, amod, floor_frac, modr, quotient, sum_while
from calcal.core.errors import NoSolutionError
from calcal.core.types import OldHinduLunarDate, OldHinduSolarDate

# Kali Yuga epoch: RD -1132959 (Julian -3101-02-18)
HINDU_EPOCH_OFFSET = 1132959
HINDU_EPOCH = -HINDU_EPOCH_OFFSET

SUNRISE = Fraction(1, 4)

SOLAR_SIDEREAL_YEAR = 365 + Fraction(279457, 1080000)
SOLAR_MONTH = SOLAR_SIDEREAL_YEAR / 12
LUNAR_SIDEREAL_MONTH = 27 + Fraction(4644439, 14438334)
LUNAR_SYNODIC_MONTH = 29 + Fraction(7087771, 13358334)

MESHA, VRSHABHA, MITHUNA, KARKA, SIMHA, KANYA = 1, 2, 3, 4, 5, 6
TULA, VRISCHIKA, DHANUS, MAKARA, KUMBHA, MINA = 7, 8, 9, 10, 11, 12

CHAITRA, VAISAKHA, JYAISHTHA, ASHADHA, SRAVANA, BHADRAPADA = 1, 2, 3, 4, 5, 6
ASVINA, KARTTIKA, MARGASIRA, PAUSHA, MAGHA, PHALGUNA = 7, 8, 9, 10, 11, 12


def hindu_day_count(rd: int) -> int:
    """Elapsed days since the Kali Yuga epoch."""
    return rd + HINDU_EPOCH_OFFSET


# ---------------------------------------------------------
# Mean astronomy
# ---------------------------------------------------------

def solar_longitude(t: RatT) -> Fraction:
    """Mean sidereal longitude of the sun, in degrees [0, 360)."""
    return modr(Fraction(t) / SOLAR_SIDEREAL_YEAR, 1) * 360


def zodiac(t: RatT) -> int:
    """Zodiacal sign 1..12 occupied by the mean sun."""
    return quotient(solar_longitude(t), 30) + 1


def lunar_longitude(t: RatT) -> Fraction:
    """Mean sidereal longitude of the moon, in degrees [0, 360)."""
    return modr(Fraction(t) / LUNAR_SIDEREAL_MONTH, 1) * 360


def lunar_phase(t: RatT) -> int:
    """Lunar day (tithi) 1..30: the moon-sun elongation in 12-degree steps."""
    return 1 + quotient(modr(lunar_longitude(t) - solar_longitude(t), 360), 12)


def new_moon(t: RatT) -> Fraction:
    """Moment of the last mean new moon at or before t."""
    return Fraction(t) - modr(t, LUNAR_SYNODIC_MONTH)


# ---------------------------------------------------------
# Solar calendar
# ---------------------------------------------------------

def old_hindu_solar_from_rd(rd: int) -> OldHinduSolarDate:
    hdate = hindu_day_count(rd) + SUNRISE
    year = quotient(hdate, SOLAR_SIDEREAL_YEAR)
    month = zodiac(hdate)
    day = floor_frac(modr(hdate, SOLAR_MONTH)) + 1
    return OldHinduSolarDate(year, month, day)


def rd_from_old_hindu_solar(d: OldHinduSolarDate) -> int:
    return floor_frac(
        d.year * SOLAR_SIDEREAL_YEAR
        + (d.month - 1) * SOLAR_MONTH
        + d.day
        - SUNRISE
        - HINDU_EPOCH_OFFSET
    )


# ---------------------------------------------------------
# Lunar calendar
# ---------------------------------------------------------

def old_hindu_lunar_from_rd(rd: int) -> OldHinduLunarDate:
    sunrise = hindu_day_count(rd) + SUNRISE
    last_new_moon = new_moon(sunrise)
    next_new_moon = last_new_moon + LUNAR_SYNODIC_MONTH
    # A lunar month during which the sun stays in one sign is intercalary
    # and takes the name of the month that follows it.
    leap_month = zodiac(last_new_moon) == zodiac(next_new_moon)
    month = amod(zodiac(last_new_moon) + 1, 12)
    day = lunar_phase(sunrise)
    next_month = next_new_moon + (LUNAR_SYNODIC_MONTH if leap_month else 0)
    year = quotient(next_month, SOLAR_SIDEREAL_YEAR)
    return OldHinduLunarDate(year, month, leap_month, day)


def old_hindu_lunar_precedes(d1: OldHinduLunarDate, d2: OldHinduLunarDate) -> bool:
    """Strict order on lunar dates; a leap month precedes its namesake."""
    if d1.year != d2.year:
        return d1.year < d2.year
    if d1.month != d2.month:
        return d1.month < d2.month
    if d1.leap_month != d2.leap_month:
        return d1.leap_month
    return d1.day < d2.day


def rd_from_old_hindu_lunar(d: OldHinduLunarDate) -> int:
    """
    Invert old_hindu_lunar_from_rd by scanning forward from a lower estimate.

    Lunar days are shorter than civil days, so some tithis never contain a
    sunrise; for such (expunged) dates NoSolutionError is raised.
    """
    approx = (
        floor_frac(d.year * SOLAR_SIDEREAL_YEAR)
        + floor_frac((d.month - 2) * LUNAR_SYNODIC_MONTH)
        - HINDU_EPOCH_OFFSET
    )
    rd = approx + sum_while(
        lambda i: 1,
        approx,
        lambda i: old_hindu_lunar_precedes(old_hindu_lunar_from_rd(i), d),
    )
    if old_hindu_lunar_from_rd(rd) != d:
        raise NoSolutionError(f"{d} does not occur: no sunrise falls in that lunar day")
    return rd
