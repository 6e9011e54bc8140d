"""
calcal.holidays.standard
------------------------
Holidays as absolute dates, for a given Gregorian year unless noted.
Everything here is layered on the forward converters of the engines.
"""

from __future__ import annotations

from typing import List

from calcal.core.arith import mod
from calcal.core.types import GregorianDate, HebrewDate, IslamicDate, JulianDate
from calcal.engines.gregorian import (
    APRIL,
    DECEMBER,
    JULY,
    MARCH,
    MAY,
    MONDAY,
    NOVEMBER,
    SATURDAY,
    SEPTEMBER,
    SUNDAY,
    gregorian_year_bounds,
    k_day_on_or_before,
    nth_k_day,
    rd_from_gregorian,
)
from calcal.engines.hebrew import (
    AV,
    KISLEV,
    NISAN,
    SHEVAT,
    TEVETH,
    TISHRI,
    ADAR_II,
    HESHVAN,
    ADAR,
    is_hebrew_leap_year,
    last_month_of_hebrew_year,
    long_heshvan,
    rd_from_hebrew,
    short_kislev,
)
from calcal.engines.islamic import ISLAMIC_EPOCH, RABI_I, islamic_from_rd, rd_from_islamic
from calcal.engines.julian import julian_from_rd, rd_from_julian

from .registry import register_holiday

# Gregorian year + offset = Hebrew year of the spring / autumn holidays
_HEBREW_SPRING_OFFSET = 3760
_HEBREW_AUTUMN_OFFSET = 3761


# ============================================================
# Secular (US)
# ============================================================

def independence_day(year: int) -> int:
    return rd_from_gregorian(GregorianDate(year, JULY, 4))


def labor_day(year: int) -> int:
    """First Monday in September."""
    return nth_k_day(1, MONDAY, SEPTEMBER, year)


def memorial_day(year: int) -> int:
    """Last Monday in May."""
    return nth_k_day(-1, MONDAY, MAY, year)


def daylight_savings_start(year: int) -> int:
    """Second Sunday in March (US rule since 2007)."""
    return nth_k_day(2, SUNDAY, MARCH, year)


def daylight_savings_end(year: int) -> int:
    """First Sunday in November (US rule since 2007)."""
    return nth_k_day(1, SUNDAY, NOVEMBER, year)


# ============================================================
# Christian
# ============================================================

def christmas(year: int) -> int:
    return rd_from_gregorian(GregorianDate(year, DECEMBER, 25))


def advent(year: int) -> int:
    """Sunday closest to November 30."""
    return k_day_on_or_before(rd_from_gregorian(GregorianDate(year, DECEMBER, 3)), SUNDAY)


def epiphany(year: int) -> int:
    return christmas(year) + 12


def eastern_orthodox_christmas(year: int) -> List[int]:
    """Julian December 25 falling in the Gregorian year: zero or one date (two in far future)."""
    jan1, dec31 = gregorian_year_bounds(year)
    y = julian_from_rd(jan1).year
    candidates = (
        rd_from_julian(JulianDate(y, DECEMBER, 25)),
        rd_from_julian(JulianDate(y + 1, DECEMBER, 25)),
    )
    return [c for c in candidates if jan1 <= c <= dec31]


def nicaean_rule_easter(year: int) -> int:
    """Orthodox Easter of a Julian year (which is also the Gregorian year, for Easter)."""
    shifted_epact = mod(14 + 11 * mod(year, 19), 30)
    paschal_moon = rd_from_julian(JulianDate(year, APRIL, 19)) - shifted_epact
    return k_day_on_or_before(paschal_moon + 7, SUNDAY)


def easter(year: int) -> int:
    century = year // 100 + 1
    shifted_epact = mod(
        14 + 11 * mod(year, 19) - (3 * century) // 4 + (5 + 8 * century) // 25 + 30 * century,
        30,
    )
    if shifted_epact == 0 or (shifted_epact == 1 and 10 < mod(year, 19)):
        adjusted_epact = shifted_epact + 1
    else:
        adjusted_epact = shifted_epact
    paschal_moon = rd_from_gregorian(GregorianDate(year, APRIL, 19)) - adjusted_epact
    return k_day_on_or_before(paschal_moon + 7, SUNDAY)


def pentecost(year: int) -> int:
    return easter(year) + 49


# ============================================================
# Islamic
# ============================================================

def islamic_dates_in_gregorian_year(month: int, day: int, year: int) -> List[int]:
    """All occurrences of Islamic (month, day) in a Gregorian year (none before AH 1, else one or two)."""
    jan1, dec31 = gregorian_year_bounds(year)
    y = islamic_from_rd(max(jan1, ISLAMIC_EPOCH)).year
    candidates = [rd_from_islamic(IslamicDate(y + k, month, day)) for k in range(3)]
    return [c for c in candidates if jan1 <= c <= dec31]


def mulad_al_nabi(year: int) -> List[int]:
    return islamic_dates_in_gregorian_year(RABI_I, 12, year)


# ============================================================
# Jewish
# ============================================================

def yom_kippur(year: int) -> int:
    return rd_from_hebrew(HebrewDate(year + _HEBREW_AUTUMN_OFFSET, TISHRI, 10))


def passover(year: int) -> int:
    return rd_from_hebrew(HebrewDate(year + _HEBREW_SPRING_OFFSET, NISAN, 15))


def purim(year: int) -> int:
    hy = year + _HEBREW_SPRING_OFFSET
    return rd_from_hebrew(HebrewDate(hy, last_month_of_hebrew_year(hy), 14))


def ta_anit_esther(year: int) -> int:
    """Fast of Esther: the day before Purim, moved back to Thursday when Purim is a Sunday."""
    purim_date = purim(year)
    if mod(purim_date, 7) == SUNDAY:
        return purim_date - 3
    return purim_date - 1


def tisha_b_av(year: int) -> int:
    ninth_of_av = rd_from_hebrew(HebrewDate(year + _HEBREW_SPRING_OFFSET, AV, 9))
    if mod(ninth_of_av, 7) == SATURDAY:
        return ninth_of_av + 1
    return ninth_of_av


def hebrew_birthday(birthdate: HebrewDate, hebrew_year: int) -> int:
    """Anniversary of a Hebrew birth date in a given Hebrew year."""
    if birthdate.month == last_month_of_hebrew_year(birthdate.year):
        # born in Adar (or Adar II): celebrated in the last month of the year
        return rd_from_hebrew(HebrewDate(hebrew_year, last_month_of_hebrew_year(hebrew_year), birthdate.day))
    return rd_from_hebrew(HebrewDate(hebrew_year, birthdate.month, birthdate.day))


def yahrzeit(death_date: HebrewDate, hebrew_year: int) -> int:
    """Anniversary of a Hebrew death date in a given Hebrew year."""
    y, m, d = death_date.year, death_date.month, death_date.day
    if m == HESHVAN and d == 30 and not long_heshvan(y + 1):
        return rd_from_hebrew(HebrewDate(hebrew_year, KISLEV, 1))
    if m == KISLEV and d == 30 and short_kislev(y + 1):
        return rd_from_hebrew(HebrewDate(hebrew_year, TEVETH, 1))
    if m == ADAR_II:
        return rd_from_hebrew(HebrewDate(hebrew_year, last_month_of_hebrew_year(hebrew_year), d))
    if m == ADAR and d == 30 and not is_hebrew_leap_year(y):
        return rd_from_hebrew(HebrewDate(hebrew_year, SHEVAT, 30))
    return rd_from_hebrew(HebrewDate(hebrew_year, m, d))


for _name, _fn in (
    ("independence_day", independence_day),
    ("labor_day", labor_day),
    ("memorial_day", memorial_day),
    ("daylight_savings_start", daylight_savings_start),
    ("daylight_savings_end", daylight_savings_end),
    ("christmas", christmas),
    ("advent", advent),
    ("epiphany", epiphany),
    ("eastern_orthodox_christmas", eastern_orthodox_christmas),
    ("nicaean_rule_easter", nicaean_rule_easter),
    ("easter", easter),
    ("pentecost", pentecost),
    ("mulad_al_nabi", mulad_al_nabi),
    ("yom_kippur", yom_kippur),
    ("passover", passover),
    ("purim", purim),
    ("ta_anit_esther", ta_anit_esther),
    ("tisha_b_av", tisha_b_av),
):
    register_holiday(_name, _fn)
