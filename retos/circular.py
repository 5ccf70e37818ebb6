"""Best gain over a cycle of daily gains and losses."""

import sys

from retos.kilometre import _run_cli


def best_circular_gain(values):
    """Return the best gain over the cycle of values.

    It is the larger of the best running gain that never goes below zero and
    the total with the lowest prefix removed and the highest prefix added.
    """
    items = iter(values)
    try:
        first = next(items)
    except StopIteration:
        raise ValueError("at least one value is needed") from None
    best = first
    running = max(first, 0)
    highest = lowest = total = first
    for value in items:
        running += value
        total += value
        highest = max(highest, total)
        lowest = min(lowest, total)
        running = max(running, 0)
        best = max(running, best)
    return max(best, total - lowest + highest)


def _read_int(tokens):
    try:
        return int(next(tokens))
    except (StopIteration, ValueError):
        return None


def solve(text):
    """Process cycles until a zero length or unreadable input; one result per line."""
    tokens = iter(text.split())
    results = []
    while length := _read_int(tokens):
        values = []
        for _ in range(length):
            value = _read_int(tokens)
            if value is None:
                break
            values.append(value)
        if not values:
            break
        results.append(f"{best_circular_gain(values)}\n")
    return "".join(results)


def main(argv=None):
    return _run_cli(solve, "Best gain over a cycle.", argv)


if __name__ == "__main__":
    sys.exit(main())