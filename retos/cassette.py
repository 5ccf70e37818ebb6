"""Choose songs for both sides of a cassette to maximise their score."""

import sys

from retos.kilometre import _counts, _next_int, _run_cli


def best_score(capacity, songs):
    """Return the best total score of songs fitted onto two sides of ``capacity``.

    ``songs`` holds (duration, score) pairs; each song goes on one side or none.
    """
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    table = [[0] * (capacity + 1) for _ in range(capacity + 1)]
    for duration, points in songs:
        if duration < 0:
            raise ValueError("song duration must not be negative")
        for first in range(capacity, -1, -1):
            row = table[first]
            above = table[first - duration] if first >= duration else None
            for second in range(capacity, -1, -1):
                best = row[second]
                if above is not None:
                    best = max(best, above[second] + points)
                if second >= duration:
                    best = max(best, row[second - duration] + points)
                row[second] = best
    return max(max(row) for row in table)


def _read_case(tokens, count):
    capacity = _next_int(tokens)
    songs = [(_next_int(tokens), _next_int(tokens)) for _ in range(count)]
    return best_score(capacity, songs)


def solve(text):
    """Process cases until a zero song count; return one best score per line."""
    tokens = iter(text.split())
    return "".join(f"{_read_case(tokens, count)}\n" for count in _counts(tokens))


def main(argv=None):
    return _run_cli(solve, "Best two-sided cassette selection.", argv)


if __name__ == "__main__":
    sys.exit(main())