# tests/test_diagnostics.py

from calcal.diagnostics import hindu_leap_months, leap_years, new_years_table, round_trip

def test_round_trip_passes(capsys):
    rv = round_trip.main(["--calendars", "gregorian,hebrew,french", "--N", "50", "--seed", "1"])
    assert rv == 0
    assert "All round-trip tests passed." in capsys.readouterr().out

def test_leap_years_table(capsys):
    assert leap_years.main(["--from-year", "2000", "--to-year", "2001"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0].split()[0] == "Gregorian"
    assert out[2].startswith("2000*")
    assert out[3].startswith("2001 ")

def test_new_years_table(capsys):
    assert new_years_table.main(["--from-year", "2022", "--to-year", "2022", "--dates", "iso"]) == 0
    out = capsys.readouterr().out
    assert "2022-09-26" in out

def test_new_years_table_around_the_hijra(capsys):
    assert new_years_table.main(["--from-year", "620", "--to-year", "623", "--dates", "iso"]) == 0
    assert "0622-07-19" in capsys.readouterr().out

def test_hindu_leap_month_list(capsys):
    assert hindu_leap_months.main(["--start-year", "2000", "--end-year", "2004", "--list"]) == 0
    assert "Adhika" in capsys.readouterr().out
