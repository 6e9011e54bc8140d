# tests/test_api.py

import random
from datetime import date

import pytest

import calcal
from calcal import (
    Calendar,
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
from calcal.core.errors import (
    CalendarError,
    NotInvertibleError,
    OutOfDomainError,
    UnknownCalendarError,
)
from calcal.engines.factory import make_engine
from calcal.engines.specs import ALL_SPECS

RD = date(1945, 11, 12).toordinal()

def test_registry_lists_every_calendar():
    assert calcal.list_calendars() == sorted(c.value for c in Calendar)
    assert set(ALL_SPECS) == set(Calendar)

def test_calendar_info():
    info = calcal.calendar_info("hebrew")
    assert info["name"] == "hebrew"
    assert info["date_type"] == "HebrewDate"
    assert info["cyclic"] is False
    assert calcal.calendar_info(Calendar.MAYAN_HAAB)["cyclic"] is True

def test_from_rd_every_calendar():
    assert calcal.from_rd(RD, "gregorian") == GregorianDate(1945, 11, 12)
    assert calcal.from_rd(RD, "julian") == JulianDate(1945, 10, 30)
    assert calcal.from_rd(RD, "iso") == IsoDate(1945, 46, 1)
    assert calcal.from_rd(RD, "islamic") == IslamicDate(1364, 12, 6)
    assert calcal.from_rd(RD, "hebrew") == HebrewDate(5706, 9, 7)
    assert calcal.from_rd(RD, "mayanLongCount") == MayanLongCount(12, 16, 11, 16, 9)
    assert calcal.from_rd(RD, Calendar.MAYAN_HAAB) == MayanHaabDate(7, 11)
    assert calcal.from_rd(RD, Calendar.MAYAN_TZOLKIN) == MayanTzolkinDate(11, 9)
    assert isinstance(calcal.from_rd(RD, "french"), FrenchDate)
    assert isinstance(calcal.from_rd(RD, "oldHinduSolar"), OldHinduSolarDate)
    assert isinstance(calcal.from_rd(RD, "oldHinduLunar"), OldHinduLunarDate)
    assert calcal.convert(RD, "islamic") == calcal.from_rd(RD, "islamic")

def test_to_rd_dispatches_on_type():
    random.seed(42)
    invertible = [c for c in calcal.list_calendars() if not calcal.calendar_info(c)["cyclic"]]
    for _ in range(100):
        rd = random.randint(700000, 760000)
        for cal in invertible:
            assert calcal.to_rd(calcal.from_rd(rd, cal)) == rd

def test_convert_date():
    assert calcal.convert_date(GregorianDate(1945, 11, 12), "islamic") == IslamicDate(1364, 12, 6)
    assert calcal.convert_date(JulianDate(2021, 12, 25), Calendar.GREGORIAN) == GregorianDate(2022, 1, 7)

def test_unknown_calendar():
    with pytest.raises(UnknownCalendarError, match="Available"):
        calcal.from_rd(1, "klingon")
    with pytest.raises(KeyError):
        calcal.calendar_info("klingon")

def test_cyclic_calendars_not_invertible():
    with pytest.raises(NotInvertibleError):
        calcal.to_rd(MayanHaabDate(0, 1))
    with pytest.raises(NotInvertibleError):
        calcal.to_rd(MayanTzolkinDate(1, 1))

def test_not_a_date():
    with pytest.raises(TypeError):
        calcal.to_rd((2022, 6, 15))

def test_engine_rejects_wrong_type():
    eng = calcal.get_calendar("hebrew")
    with pytest.raises(TypeError):
        eng.to_rd(GregorianDate(2022, 6, 15))

def test_out_of_domain_is_calendar_error():
    with pytest.raises(OutOfDomainError):
        calcal.from_rd(1, "islamic")
    assert issubclass(OutOfDomainError, CalendarError)

def test_format_date():
    assert calcal.format_date(GregorianDate(2022, 6, 15)) == "15 June 2022"
    assert calcal.format_date(IsoDate(2022, 24, 3)) == "2022-W24-3"
    assert calcal.format_date(HebrewDate(5782, 12, 1)) == "1 Adar I 5782"
    assert calcal.format_date(HebrewDate(5783, 12, 1)) == "1 Adar 5783"
    assert calcal.format_date(MayanLongCount(13, 0, 0, 0, 0)) == "13.0.0.0.0"
    assert calcal.format_date(MayanHaabDate(3, 14)) == "3 Kankin"
    assert calcal.format_date(MayanTzolkinDate(4, 20)) == "4 Ahau"
    assert calcal.format_date(FrenchDate(8, 2, 18)) == "18 Brumaire an 8"
    assert calcal.format_date(OldHinduLunarDate(5000, 5, True, 3)) == "3 Adhika Sravana 5000"

def test_day_info():
    info = calcal.day_info(100)
    assert info["rd"] == 100
    assert "error" in info["calendars"]["islamic"]
    assert "error" in info["calendars"]["french"]
    assert info["calendars"]["gregorian"]["date"] == GregorianDate(1, 4, 10)
    assert info["calendars"]["gregorian"]["text"] == "10 April 1"

def test_day_info_selected():
    info = calcal.day_info(738321, calendars=("hebrew", Calendar.ISLAMIC))
    assert list(info["calendars"]) == ["hebrew", "islamic"]
    assert info["weekday"] == "Wednesday"

def test_register_calendar():
    eng = make_engine(ALL_SPECS[Calendar.JULIAN])
    with pytest.raises(KeyError):
        calcal.register_calendar("julian", eng)
    calcal.register_calendar("julian-alias", eng)
    try:
        assert calcal.from_rd(RD, "julian-alias") == JulianDate(1945, 10, 30)
    finally:
        calcal.api._reg()._engines.pop("julian-alias")

def test_make_engine_type_check():
    with pytest.raises(TypeError):
        make_engine("julian")
