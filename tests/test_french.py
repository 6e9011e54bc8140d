# tests/test_french.py

import random
from datetime import date

import pytest

from calcal.core.errors import OutOfDomainError
from calcal.core.types import FrenchDate
from calcal.engines.french import (
    BRUMAIRE,
    FRENCH_EPOCH,
    SANSCULOTTIDES,
    french_from_rd,
    is_french_leap_year,
    last_day_of_french_month,
    rd_from_french,
)

def test_epoch():
    assert FRENCH_EPOCH == date(1792, 9, 22).toordinal()
    assert rd_from_french(FrenchDate(1, 1, 1)) == FRENCH_EPOCH
    assert french_from_rd(FRENCH_EPOCH) == FrenchDate(1, 1, 1)

def test_before_epoch():
    with pytest.raises(OutOfDomainError):
        french_from_rd(FRENCH_EPOCH - 1)

def test_eighteenth_brumaire():
    rd = date(1799, 11, 9).toordinal()
    assert rd == 657019
    assert french_from_rd(rd) == FrenchDate(8, BRUMAIRE, 18)

@pytest.mark.parametrize("year,leap", [
    (3, True), (4, False), (7, True), (11, True), (15, True), (16, False),
    (20, True), (24, True), (100, False), (120, True), (400, True), (4000, False),
])
def test_leap_years(year, leap):
    assert is_french_leap_year(year) is leap

def test_complementary_days():
    assert last_day_of_french_month(SANSCULOTTIDES, 3) == 6
    assert last_day_of_french_month(SANSCULOTTIDES, 4) == 5
    assert last_day_of_french_month(1, 4) == 30

def test_year_lengths_follow_leap_rule():
    for y in range(1, 200):
        length = rd_from_french(FrenchDate(y + 1, 1, 1)) - rd_from_french(FrenchDate(y, 1, 1))
        assert length == (366 if is_french_leap_year(y) else 365)

def test_roundtrip():
    random.seed(42)
    for _ in range(3000):
        rd = random.randint(FRENCH_EPOCH, 1200000)
        assert rd_from_french(french_from_rd(rd)) == rd

def test_consecutive_days():
    # spans year 3 (leap) and year 4
    start = rd_from_french(FrenchDate(3, 1, 1))
    prev = french_from_rd(start)
    for rd in range(start + 1, start + 800):
        f = french_from_rd(rd)
        assert rd_from_french(f) == rd
        if f.day != 1:
            assert (f.year, f.month, f.day) == (prev.year, prev.month, prev.day + 1)
        else:
            assert prev.day == last_day_of_french_month(prev.month, prev.year)
            assert (f.year, f.month) in ((prev.year, prev.month + 1), (prev.year + 1, 1))
        prev = f
