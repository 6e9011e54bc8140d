# tests/test_hindu.py

import random
from dataclasses import replace
from fractions import Fraction

import pytest

from calcal.core.errors import NoSolutionError
from calcal.core.types import OldHinduLunarDate, OldHinduSolarDate
from calcal.engines.hindu import (
    HINDU_EPOCH,
    LUNAR_SYNODIC_MONTH,
    SOLAR_SIDEREAL_YEAR,
    hindu_day_count,
    lunar_phase,
    new_moon,
    old_hindu_lunar_from_rd,
    old_hindu_lunar_precedes,
    old_hindu_solar_from_rd,
    rd_from_old_hindu_lunar,
    rd_from_old_hindu_solar,
    solar_longitude,
    zodiac,
)

def test_constants_are_exact():
    assert isinstance(SOLAR_SIDEREAL_YEAR, Fraction)
    assert SOLAR_SIDEREAL_YEAR == Fraction(394479457, 1080000)
    assert float(LUNAR_SYNODIC_MONTH) == pytest.approx(29.5306, abs=1e-4)

def test_epoch():
    assert hindu_day_count(HINDU_EPOCH) == 0
    assert zodiac(0) == 1
    assert solar_longitude(0) == 0

def test_solar_rd_zero():
    assert old_hindu_solar_from_rd(0) == OldHinduSolarDate(3101, 10, 18)
    assert rd_from_old_hindu_solar(OldHinduSolarDate(3101, 10, 18)) == 0

def test_solar_roundtrip():
    random.seed(42)
    for _ in range(1000):
        rd = random.randint(0, 800000)
        assert rd_from_old_hindu_solar(old_hindu_solar_from_rd(rd)) == rd

def test_new_moon_phase():
    t = Fraction(1234567, 3)
    nm = new_moon(t)
    assert nm <= t < nm + LUNAR_SYNODIC_MONTH
    assert 1 <= lunar_phase(t) <= 30

def test_lunar_roundtrip():
    random.seed(42)
    for _ in range(150):
        rd = random.randint(700000, 760000)
        assert rd_from_old_hindu_lunar(old_hindu_lunar_from_rd(rd)) == rd

def test_lunar_days_strictly_increase():
    prev = old_hindu_lunar_from_rd(738000)
    for rd in range(738001, 738400):
        cur = old_hindu_lunar_from_rd(rd)
        assert old_hindu_lunar_precedes(prev, cur)
        assert not old_hindu_lunar_precedes(cur, prev)
        prev = cur

def test_expunged_lunar_day():
    # a lunar day shorter than a civil day sometimes contains no sunrise
    found = 0
    prev = old_hindu_lunar_from_rd(738000)
    for rd in range(738001, 738400):
        cur = old_hindu_lunar_from_rd(rd)
        same_month = (cur.year, cur.month, cur.leap_month) == (prev.year, prev.month, prev.leap_month)
        if same_month and cur.day == prev.day + 2:
            with pytest.raises(NoSolutionError):
                rd_from_old_hindu_lunar(replace(prev, day=prev.day + 1))
            found += 1
        prev = cur
    assert found > 0

def test_leap_month_occurs():
    leap = [old_hindu_lunar_from_rd(rd) for rd in range(730000, 731500, 15)]
    assert any(d.leap_month for d in leap)

def test_precedes_leap_month_first():
    a = OldHinduLunarDate(5000, 5, True, 10)
    b = OldHinduLunarDate(5000, 5, False, 1)
    assert old_hindu_lunar_precedes(a, b)
    assert not old_hindu_lunar_precedes(b, a)
    assert not old_hindu_lunar_precedes(a, a)

def test_solar_consecutive_days():
    start = rd_from_old_hindu_solar(OldHinduSolarDate(5122, 11, 1))
    prev = old_hindu_solar_from_rd(start)
    for rd in range(start + 1, start + 500):
        s = old_hindu_solar_from_rd(rd)
        assert rd_from_old_hindu_solar(s) == rd
        if s.day != 1:
            assert (s.year, s.month, s.day) == (prev.year, prev.month, prev.day + 1)
        else:
            assert prev.day in (29, 30, 31, 32)
            assert (s.year, s.month) in ((prev.year, prev.month + 1), (prev.year + 1, 1))
        prev = s
