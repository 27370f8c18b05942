# tests/test_cli.py

import pytest

from caljal.cli import main


def test_day(capsys):
    assert main(["day", "2024-03-20"]) == 0
    out = capsys.readouterr().out
    assert "1403/01/01" in out
    assert "چهارشنبه" in out

def test_bare_date_shortcut(capsys):
    assert main(["2024-03-20", "--persian"]) == 0
    out = capsys.readouterr().out
    assert "۱۴۰۳/۰۱/۰۱" in out

def test_day_rejects_bad_date():
    with pytest.raises(SystemExit):
        main(["day", "2023-02-29"])

def test_to_gregorian(capsys):
    assert main(["to-gregorian", "1403", "1", "1"]) == 0
    assert capsys.readouterr().out.strip() == "2024-03-20"

def test_to_gregorian_invalid():
    with pytest.raises(SystemExit):
        main(["to-gregorian", "1404", "12", "30"])

def test_today(capsys):
    assert main(["today"]) == 0
    assert "jalali" in capsys.readouterr().out

def test_month(capsys):
    assert main(["month", "--month", "1403", "1"]) == 0
    out = capsys.readouterr().out
    assert "فروردین 1403" in out
    assert "03-20" in out

def test_nowruz(capsys):
    assert main(["nowruz", "--from-year", "1403", "--to-year", "1404"]) == 0
    out = capsys.readouterr().out
    assert "2024-03-20" in out
    assert "2025-03-21" in out

def test_diag_round_trip(capsys):
    assert main(["diag", "round-trip", "--start", "2020", "--end", "2030", "--N", "500"]) == 0
    assert "failures=0" in capsys.readouterr().out

def test_diag_leap_rules(capsys):
    assert main(["diag", "leap-rules", "--start-year", "1400", "--end-year", "1410"]) == 0
    out = capsys.readouterr().out
    assert "1403" in out
    assert "1404" in out
