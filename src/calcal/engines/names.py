"""
calcal.engines.names
--------------------
Month and day-name tables, and the human-readable rendering of each date type.
"""

from __future__ import annotations

from typing import Tuple

from calcal.core.types import (
    FrenchDate,
    GregorianDate,
    HebrewDate,
    IslamicDate,
    IsoDate,
    JulianDate,
    MayanHaabDate,
    MayanLongCount,
    MayanTzolkinDate,
    OldHinduLunarDate,
    OldHinduSolarDate,
)
from calcal.engines.hebrew import ADAR, ADAR_II, is_hebrew_leap_year

GREGORIAN_MONTHS: Tuple[str, ...] = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)

WEEKDAYS: Tuple[str, ...] = (
    "Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday",
)

ISLAMIC_MONTHS: Tuple[str, ...] = (
    "Muharram", "Safar", "Rabi I", "Rabi II", "Jumada I", "Jumada II",
    "Rajab", "Sha'ban", "Ramadan", "Shawwal", "Dhu al-Qada", "Dhu al-Hijjah",
)

HEBREW_MONTHS: Tuple[str, ...] = (
    "Nisan", "Iyyar", "Sivan", "Tammuz", "Av", "Elul",
    "Tishri", "Heshvan", "Kislev", "Teveth", "Shevat", "Adar", "Adar II",
)

MAYAN_HAAB_MONTHS: Tuple[str, ...] = (
    "Pop", "Uo", "Zip", "Zotz", "Tzec", "Xul", "Yaxkin", "Mol", "Chen", "Yax",
    "Zac", "Ceh", "Mac", "Kankin", "Muan", "Pax", "Kayab", "Cumku", "Uayeb",
)

MAYAN_TZOLKIN_NAMES: Tuple[str, ...] = (
    "Imix", "Ik", "Akbal", "Kan", "Chicchan", "Cimi", "Manik", "Lamat", "Muluc", "Oc",
    "Chuen", "Eb", "Ben", "Ix", "Men", "Cib", "Caban", "Etznab", "Cauac", "Ahau",
)

FRENCH_MONTHS: Tuple[str, ...] = (
    "Vendémiaire", "Brumaire", "Frimaire", "Nivôse", "Pluviôse", "Ventôse",
    "Germinal", "Floréal", "Prairial", "Messidor", "Thermidor", "Fructidor",
    "jour complémentaire",
)

HINDU_SOLAR_MONTHS: Tuple[str, ...] = (
    "Mesha", "Vrshabha", "Mithuna", "Karka", "Simha", "Kanya",
    "Tula", "Vrischika", "Dhanus", "Makara", "Kumbha", "Mina",
)

HINDU_LUNAR_MONTHS: Tuple[str, ...] = (
    "Chaitra", "Vaisakha", "Jyaishtha", "Ashadha", "Sravana", "Bhadrapada",
    "Asvina", "Kartika", "Margasira", "Pausha", "Magha", "Phalguna",
)


def _name(table: Tuple[str, ...], n: int) -> str:
    # out-of-range components still render, as the bare number
    if 1 <= n <= len(table):
        return table[n - 1]
    return str(n)


def hebrew_month_name(month: int, year: int) -> str:
    if is_hebrew_leap_year(year):
        if month == ADAR:
            return "Adar I"
        if month == ADAR_II:
            return "Adar II"
    return _name(HEBREW_MONTHS, month)


def format_gregorian(d: GregorianDate) -> str:
    return f"{d.day} {_name(GREGORIAN_MONTHS, d.month)} {d.year}"


def format_julian(d: JulianDate) -> str:
    return f"{d.day} {_name(GREGORIAN_MONTHS, d.month)} {d.year}"


def format_iso(d: IsoDate) -> str:
    return f"{d.year}-W{d.week:02d}-{d.day}"


def format_islamic(d: IslamicDate) -> str:
    return f"{d.day} {_name(ISLAMIC_MONTHS, d.month)} {d.year}"


def format_hebrew(d: HebrewDate) -> str:
    return f"{d.day} {hebrew_month_name(d.month, d.year)} {d.year}"


def format_mayan_long_count(d: MayanLongCount) -> str:
    return ".".join(str(c) for c in d.components())


def format_mayan_haab(d: MayanHaabDate) -> str:
    return f"{d.day} {_name(MAYAN_HAAB_MONTHS, d.month)}"


def format_mayan_tzolkin(d: MayanTzolkinDate) -> str:
    return f"{d.number} {_name(MAYAN_TZOLKIN_NAMES, d.name)}"


def format_french(d: FrenchDate) -> str:
    return f"{d.day} {_name(FRENCH_MONTHS, d.month)} an {d.year}"


def format_old_hindu_solar(d: OldHinduSolarDate) -> str:
    return f"{d.day} {_name(HINDU_SOLAR_MONTHS, d.month)} {d.year}"


def format_old_hindu_lunar(d: OldHinduLunarDate) -> str:
    prefix = "Adhika " if d.leap_month else ""
    return f"{d.day} {prefix}{_name(HINDU_LUNAR_MONTHS, d.month)} {d.year}"
