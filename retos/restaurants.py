"""Count how many restaurants can close while the whole street stays covered."""

import sys

from retos.kilometre import _next_int, _run_cli


def closable_restaurants(street_length, restaurants):
    """Return how many of the (position, radius) restaurants can close.

    Each restaurant covers [position - radius, position + radius]; the street
    [0, street_length] must stay covered. Return None when it cannot be.
    """
    restaurants = list(restaurants)
    intervals = sorted(
        ((position - radius, position + radius) for position, radius in restaurants),
        key=lambda span: (span[0], -span[1]),
    )
    spans = iter(intervals)
    pending = next(spans, None)
    covered = 0
    needed = 0
    while covered < street_length:
        reach = covered
        while pending is not None and pending[0] <= covered:
            reach = max(reach, pending[1])
            pending = next(spans, None)
        if reach == covered:
            return None
        covered = reach
        needed += 1
    return len(restaurants) - needed


def _streets(tokens):
    """Yield (street length, restaurants) cases until the input ends."""
    while True:
        try:
            length, count = int(next(tokens)), int(next(tokens))
        except (StopIteration, ValueError):
            return
        yield length, [(_next_int(tokens), _next_int(tokens)) for _ in range(count)]


def solve(text):
    """Process streets until the input ends; one count, or -1, per line."""
    answers = []
    for length, restaurants in _streets(iter(text.split())):
        result = closable_restaurants(length, restaurants)
        answers.append(f"{-1 if result is None else result}\n")
    return "".join(answers)


def main(argv=None):
    return _run_cli(solve, "Restaurants that can close.", argv)


if __name__ == "__main__":
    sys.exit(main())