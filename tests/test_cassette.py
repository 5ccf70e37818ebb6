import io
import sys

import pytest

from retos.cassette import best_score, main, solve


def test_no_songs_scores_nothing():
    assert best_score(30, []) == 0


def test_song_too_long_is_left_out():
    assert best_score(5, [(6, 100)]) == 0


def test_everything_fits_on_one_side():
    songs = [(2, 7), (3, 4), (1, 9)]
    assert best_score(10, songs) == sum(points for _, points in songs)


def test_one_full_song_per_side():
    songs = [(10, 3), (10, 8), (10, 5)]
    assert best_score(10, songs) == 8 + 5


def test_order_does_not_matter():
    songs = [(4, 6), (3, 5), (5, 9), (2, 2), (6, 10)]
    assert best_score(8, songs) == best_score(8, list(reversed(songs)))


def test_more_capacity_never_hurts():
    songs = [(4, 6), (3, 5), (5, 9), (2, 2), (6, 10)]
    scores = [best_score(capacity, songs) for capacity in range(12)]
    assert scores == sorted(scores)


def test_result_bounded_by_total_score():
    songs = [(4, 6), (3, 5), (5, 9)]
    assert best_score(3, songs) <= sum(points for _, points in songs)


def test_negative_capacity_raises():
    with pytest.raises(ValueError):
        best_score(-1, [(1, 1)])


def test_solve_matches_function():
    text = "3\n10\n10 3\n10 8\n10 5\n0\n"
    assert solve(text) == f"{best_score(10, [(10, 3), (10, 8), (10, 5)])}\n"


def test_solve_truncated_input_raises():
    with pytest.raises(ValueError):
        solve("2 10\n1 1\n")


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("1 5\n5 4\n0\n"))
    assert main([]) == 0
    assert capsys.readouterr().out == f"{best_score(5, [(5, 4)])}\n"