# tests/test_cli.py

import sys

import pytest

from calsys import cli


def test_to_jd(capsys):
    assert cli.main(["to-jd", "gregorian", "2000", "1", "1"]) == 0
    assert capsys.readouterr().out.strip() == "2451545"


def test_from_jd_with_attributes(capsys):
    assert cli.main(["from-jd", "2451545", "--calendar", "jewish", "--attr", "month_name", "--attr", "weekday"]) == 0
    out = capsys.readouterr().out
    assert out.splitlines()[0] == "jewish:5760-04-23"
    assert "month_name: Tevet" in out
    assert "day_name: Saturday" in out


def test_convert(capsys):
    assert cli.main(["convert", "1582", "10", "15", "--from", "gregorian", "--to", "julian"]) == 0
    assert capsys.readouterr().out.strip() == "julian:1582-10-05"


def test_list(capsys):
    assert cli.main(["list"]) == 0
    out = capsys.readouterr().out
    for name in ("gregorian", "julian", "jewish", "french", "arabic", "persian", "coptic"):
        assert name in out


def test_invalid_date_exit_code(capsys):
    assert cli.main(["to-jd", "gregorian", "2023", "2", "29"]) == 2
    assert "error" in capsys.readouterr().err


def test_unknown_calendar_exit_code(capsys):
    assert cli.main(["from-jd", "2451545", "--calendar", "mayan"]) == 2
    assert "mayan" in capsys.readouterr().err


def test_month_grid(capsys):
    assert cli.main(["month", "gregorian", "2000", "2"]) == 0
    out = capsys.readouterr().out
    assert "February 2000" in out
    assert "29" in out


def test_missing_subcommand():
    with pytest.raises(SystemExit):
        cli.main([])


def test_diag_without_numpy_exit_code(monkeypatch, capsys):
    monkeypatch.setitem(sys.modules, "numpy", None)
    assert cli.main(["diag", "round-trip", "--N", "10"]) == 2
    err = capsys.readouterr().err
    assert err.startswith("calsys: error:")
    assert "numpy" in err


def test_diag_without_matplotlib_exit_code(monkeypatch, capsys):
    pytest.importorskip("numpy")
    monkeypatch.setitem(sys.modules, "matplotlib", None)
    monkeypatch.setitem(sys.modules, "matplotlib.pyplot", None)
    assert cli.main(["diag", "leap-years"]) == 2
    assert "matplotlib" in capsys.readouterr().err
