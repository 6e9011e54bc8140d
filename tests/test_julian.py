# tests/test_julian.py

import random
from datetime import date

from calcal.core.types import JulianDate
from calcal.engines.julian import is_julian_leap_year, julian_from_rd, last_day_of_julian_month, rd_from_julian

def test_epoch():
    assert rd_from_julian(JulianDate(1, 1, 1)) == -1
    assert julian_from_rd(-1) == JulianDate(1, 1, 1)

def test_gregorian_reform():
    # Julian 1582-10-04 was followed by Gregorian 1582-10-15
    assert rd_from_julian(JulianDate(1582, 10, 4)) + 1 == date(1582, 10, 15).toordinal()

def test_modern_offset():
    assert rd_from_julian(JulianDate(2021, 12, 25)) == date(2022, 1, 7).toordinal()

def test_leap_rule():
    assert is_julian_leap_year(1900)
    assert not is_julian_leap_year(1901)
    assert last_day_of_julian_month(2, 1900) == 29

def test_roundtrip():
    random.seed(42)
    for _ in range(3000):
        rd = random.randint(-5000, 900000)
        assert rd_from_julian(julian_from_rd(rd)) == rd

def test_monotone():
    prev = rd_from_julian(JulianDate(1999, 12, 31))
    for m in range(1, 13):
        for d in range(1, last_day_of_julian_month(m, 2000) + 1):
            rd = rd_from_julian(JulianDate(2000, m, d))
            assert rd == prev + 1
            prev = rd
