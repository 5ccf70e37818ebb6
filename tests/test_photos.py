import io

import pytest

from retos.photos import main, solve, take_photos


@pytest.mark.parametrize(
    "names,expected",
    [
        (["Mafalda", "Felipe", "Manolito"], (1, 0)),
        (["Felipe", "Manolito", "Susanita", "Guille"], (0, 4)),
        (["Mafalda", "Pepe", "Felipe"], (0, 2)),
        (["Mafalda", "Mafalda", "Felipe", "Manolito"], (1, 1)),
        (["Felipe", "Guille"], (0, 2)),
    ],
)
def test_take_photos(names, expected):
    assert take_photos(names) == expected


def test_people_conserved():
    names = ["Mafalda", "Felipe", "Felipe", "Manolito", "Mafalda", "Susanita",
             "Guille", "Libertad", "Mafalda", "Miguelito"]
    photos, left = take_photos(names)
    assert left + 3 * photos <= len(names)
    assert photos >= 1


def test_solve_several_queues():
    text = "3 Mafalda Felipe Manolito\n2 Felipe Guille\n0\n"
    assert solve(text) == "1 0\n0 2\n"


def test_solve_stops_at_zero():
    assert solve("0\n3 Mafalda Felipe Manolito\n") == ""


def test_main_prints_result(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3 Mafalda Felipe Guille\n0\n"))
    assert main([]) == 0
    assert capsys.readouterr().out == "1 0\n"