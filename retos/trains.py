"""Count couples formed by matching wagons in a train."""

import sys

from retos.kilometre import _run_cli

SEPARATOR = "@"
_OPENERS = frozenset("Hh")
_PARTNERS = {"M": "H", "m": "h"}


def count_pairs(train):
    """Return how many M/H and m/h pairs match, stack-wise, between separators."""
    pending = []
    pairs = 0
    for wagon in train:
        if wagon == SEPARATOR:
            pending.clear()
        elif wagon in _OPENERS:
            pending.append(wagon)
        elif wagon in _PARTNERS:
            if pending and pending[-1] == _PARTNERS[wagon]:
                pending.pop()
                pairs += 1
            else:
                pending.append(wagon)
    return pairs


def solve(text):
    """Return the pair count of every whitespace-separated train, one per line."""
    return "".join(f"{count_pairs(train)}\n" for train in text.split())


def main(argv=None):
    return _run_cli(solve, "Count matching wagon pairs.", argv)


if __name__ == "__main__":
    sys.exit(main())