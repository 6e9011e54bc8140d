from __future__ import annotations

from typing import Dict

from ..core.types import (
    Calendar,
    CalendarSpec,
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
from . import french, gregorian, hebrew, hindu, islamic, julian, mayan, names


# ============================================================
# SOLAR / ARITHMETIC CALENDARS
# ============================================================

GREGORIAN = CalendarSpec(
    calendar=Calendar.GREGORIAN,
    date_type=GregorianDate,
    from_rd=gregorian.gregorian_from_rd,
    to_rd=gregorian.rd_from_gregorian,
    component_names=("year", "month", "day"),
    month_names=names.GREGORIAN_MONTHS,
    formatter=names.format_gregorian,
    epoch=1,
    meta={"leap_rule": "4/100/400"},
)

ISO = CalendarSpec(
    calendar=Calendar.ISO,
    date_type=IsoDate,
    from_rd=gregorian.iso_from_rd,
    to_rd=gregorian.rd_from_iso,
    component_names=("year", "week", "day"),
    month_names=(),
    formatter=names.format_iso,
    epoch=1,
    meta={"week_start": "Monday"},
)

JULIAN = CalendarSpec(
    calendar=Calendar.JULIAN,
    date_type=JulianDate,
    from_rd=julian.julian_from_rd,
    to_rd=julian.rd_from_julian,
    component_names=("year", "month", "day"),
    month_names=names.GREGORIAN_MONTHS,
    formatter=names.format_julian,
    epoch=julian.JULIAN_EPOCH,
    meta={"leap_rule": "4"},
)

FRENCH = CalendarSpec(
    calendar=Calendar.FRENCH,
    date_type=FrenchDate,
    from_rd=french.french_from_rd,
    to_rd=french.rd_from_french,
    component_names=("year", "month", "day"),
    month_names=names.FRENCH_MONTHS,
    formatter=names.format_french,
    epoch=french.FRENCH_EPOCH,
    meta={"leap_rule": "listed to year 20, then 4/100/400/4000", "guarded": True},
)


# ============================================================
# LUNAR / LUNISOLAR CALENDARS
# ============================================================

ISLAMIC = CalendarSpec(
    calendar=Calendar.ISLAMIC,
    date_type=IslamicDate,
    from_rd=islamic.islamic_from_rd,
    to_rd=islamic.rd_from_islamic,
    component_names=("year", "month", "day"),
    month_names=names.ISLAMIC_MONTHS,
    formatter=names.format_islamic,
    epoch=islamic.ISLAMIC_EPOCH,
    meta={"leap_rule": "11 in 30", "guarded": True},
)

HEBREW = CalendarSpec(
    calendar=Calendar.HEBREW,
    date_type=HebrewDate,
    from_rd=hebrew.hebrew_from_rd,
    to_rd=hebrew.rd_from_hebrew,
    component_names=("year", "month", "day"),
    month_names=names.HEBREW_MONTHS,
    formatter=names.format_hebrew,
    epoch=hebrew.HEBREW_EPOCH,
    meta={"leap_rule": "7 in 19"},
)


# ============================================================
# MAYAN CALENDARS
# ============================================================

MAYAN_LONG_COUNT = CalendarSpec(
    calendar=Calendar.MAYAN_LONG_COUNT,
    date_type=MayanLongCount,
    from_rd=mayan.mayan_long_count_from_rd,
    to_rd=mayan.rd_from_mayan_long_count,
    component_names=("baktun", "katun", "tun", "uinal", "kin"),
    month_names=(),
    formatter=names.format_mayan_long_count,
    epoch=-mayan.MAYAN_DAYS_BEFORE_RD_ZERO,
    meta={"correlation": "Goodman-Martinez-Thompson"},
)

MAYAN_HAAB = CalendarSpec(
    calendar=Calendar.MAYAN_HAAB,
    date_type=MayanHaabDate,
    from_rd=mayan.mayan_haab_from_rd,
    to_rd=None,
    component_names=("day", "month"),
    month_names=names.MAYAN_HAAB_MONTHS,
    formatter=names.format_mayan_haab,
    meta={"cycle": mayan.HAAB_YEAR},
)

MAYAN_TZOLKIN = CalendarSpec(
    calendar=Calendar.MAYAN_TZOLKIN,
    date_type=MayanTzolkinDate,
    from_rd=mayan.mayan_tzolkin_from_rd,
    to_rd=None,
    component_names=("number", "name"),
    month_names=names.MAYAN_TZOLKIN_NAMES,
    formatter=names.format_mayan_tzolkin,
    meta={"cycle": mayan.TZOLKIN_YEAR},
)


# ============================================================
# OLD HINDU CALENDARS
# ============================================================

OLD_HINDU_SOLAR = CalendarSpec(
    calendar=Calendar.OLD_HINDU_SOLAR,
    date_type=OldHinduSolarDate,
    from_rd=hindu.old_hindu_solar_from_rd,
    to_rd=hindu.rd_from_old_hindu_solar,
    component_names=("year", "month", "day"),
    month_names=names.HINDU_SOLAR_MONTHS,
    formatter=names.format_old_hindu_solar,
    epoch=hindu.HINDU_EPOCH,
    meta={"numeric": "rational", "sidereal_year": str(hindu.SOLAR_SIDEREAL_YEAR)},
)

OLD_HINDU_LUNAR = CalendarSpec(
    calendar=Calendar.OLD_HINDU_LUNAR,
    date_type=OldHinduLunarDate,
    from_rd=hindu.old_hindu_lunar_from_rd,
    to_rd=hindu.rd_from_old_hindu_lunar,
    component_names=("year", "month", "leapMonth", "day"),
    month_names=names.HINDU_LUNAR_MONTHS,
    formatter=names.format_old_hindu_lunar,
    epoch=hindu.HINDU_EPOCH,
    meta={"numeric": "rational", "synodic_month": str(hindu.LUNAR_SYNODIC_MONTH)},
)


ALL_SPECS: Dict[Calendar, CalendarSpec] = {
    spec.calendar: spec
    for spec in (
        GREGORIAN, ISO, JULIAN, ISLAMIC, HEBREW,
        MAYAN_LONG_COUNT, MAYAN_HAAB, MAYAN_TZOLKIN,
        FRENCH, OLD_HINDU_SOLAR, OLD_HINDU_LUNAR,
    )
}

_missing = set(Calendar) - set(ALL_SPECS)
if _missing:
    raise RuntimeError(f"No CalendarSpec for {sorted(c.value for c in _missing)}")
