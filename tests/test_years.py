import io
import sys

import pytest

from retos.years import checked_year, main, shift_year, solve


def run_main(monkeypatch, capsys, data, argv=()):
    monkeypatch.setattr(sys, "stdin", io.StringIO(data))
    code = main(list(argv))
    return code, capsys.readouterr().out


@pytest.mark.parametrize("year", [-3000, -44, -1])
def test_negative_years_unchanged(year):
    assert shift_year(year) == year


def test_year_one_becomes_zero():
    assert shift_year(1) == 0


@pytest.mark.parametrize("year", [2, 476, 1492, 3000])
def test_positive_years_move_back_one(year):
    assert shift_year(year) + 1 == year


@pytest.mark.parametrize("year", [0, 3001, -3001])
def test_checked_year_rejects(year):
    with pytest.raises(ValueError):
        checked_year(year)


def test_checked_year_accepts_bounds():
    assert checked_year(-3000) == -3000
    assert checked_year(3000) == shift_year(3000)


def test_solve_matches_shift_year():
    years = [-10, 1, 2024, -3000]
    text = f"{len(years)}\n" + "\n".join(map(str, years)) + "\n"
    assert solve(text).splitlines() == [str(shift_year(y)) for y in years]


def test_solve_pinned():
    assert solve("1\n2024\n") == "2023\n"


def test_solve_missing_year():
    with pytest.raises(ValueError, match="año"):
        solve("2\n5\n")


def test_solve_bad_count():
    with pytest.raises(ValueError, match="casos"):
        solve("abc")


def test_main_batch(monkeypatch, capsys):
    data = "2\n-5\n10\n"
    code, out = run_main(monkeypatch, capsys, data)
    assert code == 0
    assert out == solve(data)


def test_main_reports_error(monkeypatch, capsys):
    code, out = run_main(monkeypatch, capsys, "")
    assert code == 1
    assert "casos" in out


def test_main_interactive(monkeypatch, capsys):
    code, out = run_main(monkeypatch, capsys, "0\nfoo\n-3000\n", ["--interactive"])
    assert code == 0
    assert "Intenta de nuevo" in out
    assert "número válido" in out
    assert out.rstrip().endswith("el año es: -3000")


def test_main_interactive_eof(monkeypatch, capsys):
    code, _ = run_main(monkeypatch, capsys, "", ["--interactive"])
    assert code == 1