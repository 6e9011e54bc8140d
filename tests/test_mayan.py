# tests/test_mayan.py

import random
from datetime import date

import pytest

from calcal.core.errors import NoSolutionError
from calcal.core.types import MayanHaabDate, MayanLongCount, MayanTzolkinDate
from calcal.engines.mayan import (
    AHAU,
    CALENDAR_ROUND,
    CUMKU,
    HAAB_YEAR,
    KANKIN,
    TZOLKIN_YEAR,
    UAYEB,
    mayan_haab_difference,
    mayan_haab_from_rd,
    mayan_haab_on_or_before,
    mayan_haab_tzolkin_on_or_before,
    mayan_long_count_from_rd,
    mayan_tzolkin_difference,
    mayan_tzolkin_from_rd,
    mayan_tzolkin_on_or_before,
    rd_from_mayan_long_count,
)

END_OF_BAKTUN_13 = date(2012, 12, 21).toordinal()

def test_long_count_epoch():
    assert rd_from_mayan_long_count(MayanLongCount(0, 0, 0, 0, 0)) == -1137142
    assert mayan_long_count_from_rd(-1137142) == MayanLongCount(0, 0, 0, 0, 0)

def test_baktun_13():
    assert rd_from_mayan_long_count(MayanLongCount(13, 0, 0, 0, 0)) == END_OF_BAKTUN_13 == 734858
    assert mayan_haab_from_rd(END_OF_BAKTUN_13) == MayanHaabDate(3, KANKIN)
    assert mayan_tzolkin_from_rd(END_OF_BAKTUN_13) == MayanTzolkinDate(4, AHAU)

def test_calendars_at_epoch():
    assert mayan_haab_from_rd(-1137142) == MayanHaabDate(8, CUMKU)
    assert mayan_tzolkin_from_rd(-1137142) == MayanTzolkinDate(4, AHAU)

def test_long_count_roundtrip():
    random.seed(42)
    for _ in range(3000):
        rd = random.randint(-1137142, 2000000)
        assert rd_from_mayan_long_count(mayan_long_count_from_rd(rd)) == rd

def test_periodicity():
    random.seed(1)
    for _ in range(500):
        rd = random.randint(-100000, 1000000)
        assert mayan_haab_from_rd(rd) == mayan_haab_from_rd(rd + HAAB_YEAR)
        assert mayan_tzolkin_from_rd(rd) == mayan_tzolkin_from_rd(rd + TZOLKIN_YEAR)
        assert mayan_haab_from_rd(rd) != mayan_haab_from_rd(rd + 1)
        assert mayan_tzolkin_from_rd(rd) != mayan_tzolkin_from_rd(rd + 1)

def test_uayeb_has_five_days():
    days = {mayan_haab_from_rd(rd) for rd in range(0, HAAB_YEAR)}
    uayeb = sorted(h.day for h in days if h.month == UAYEB)
    assert uayeb == [0, 1, 2, 3, 4]
    assert len(days) == HAAB_YEAR

def test_differences():
    random.seed(3)
    for _ in range(300):
        a, b = random.randint(0, 100000), random.randint(0, 100000)
        assert mayan_haab_difference(mayan_haab_from_rd(a), mayan_haab_from_rd(b)) == (b - a) % HAAB_YEAR
        assert mayan_tzolkin_difference(mayan_tzolkin_from_rd(a), mayan_tzolkin_from_rd(b)) == (b - a) % TZOLKIN_YEAR

def test_on_or_before():
    rd = END_OF_BAKTUN_13
    assert mayan_haab_on_or_before(MayanHaabDate(3, KANKIN), rd) == rd
    assert mayan_haab_on_or_before(MayanHaabDate(3, KANKIN), rd - 1) == rd - HAAB_YEAR
    assert mayan_tzolkin_on_or_before(MayanTzolkinDate(4, AHAU), rd + 259) == rd
    assert mayan_haab_tzolkin_on_or_before(MayanHaabDate(3, KANKIN), MayanTzolkinDate(4, AHAU), rd + 100) == rd
    assert mayan_haab_tzolkin_on_or_before(
        MayanHaabDate(3, KANKIN), MayanTzolkinDate(4, AHAU), rd - 1
    ) == rd - CALENDAR_ROUND

def test_calendar_round_search():
    random.seed(5)
    for _ in range(200):
        target = random.randint(0, 800000)
        h, t = mayan_haab_from_rd(target), mayan_tzolkin_from_rd(target)
        found = mayan_haab_tzolkin_on_or_before(h, t, target + random.randint(0, CALENDAR_ROUND - 1))
        assert found == target

def test_impossible_combination():
    # 4 Ahau can only fall on haab days 3, 8, 13 or 18
    with pytest.raises(NoSolutionError):
        mayan_haab_tzolkin_on_or_before(MayanHaabDate(4, KANKIN), MayanTzolkinDate(4, AHAU), END_OF_BAKTUN_13)
