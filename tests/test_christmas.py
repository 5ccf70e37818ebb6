import io

import pytest

from retos.christmas import is_christmas, main, solve


@pytest.mark.parametrize(
    "day,month,expected",
    [(25, 12, True), (24, 12, False), (25, 11, False), (12, 25, False), (1, 1, False)],
)
def test_is_christmas(day, month, expected):
    assert is_christmas(day, month) is expected


def test_solve():
    assert solve("3\n25 12\n1 1\n25 12\n") == "SI\nNO\nSI\n"


def test_solve_truncated():
    with pytest.raises(ValueError):
        solve("2\n25 12\n")


@pytest.mark.parametrize(
    "data,code,out",
    [("2\n24 12\n25 12\n", 0, "NO\nSI\n"), ("1\n25\n", 1, "")],
)
def test_main_exit_code_and_output(monkeypatch, capsys, data, code, out):
    monkeypatch.setattr("sys.stdin", io.StringIO(data))
    assert main([]) == code
    assert capsys.readouterr().out == out