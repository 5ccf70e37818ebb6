"""Race two people emptying water from pools with leaky trays."""

import argparse
import enum
import sys
from dataclasses import dataclass


class Winner(enum.Enum):
    """Who finishes first."""

    MINE = "YO"
    NEIGHBOUR = "VECINO"
    TIE = "EMPATE"


@dataclass(frozen=True)
class Outcome:
    """The winner of a race and the trips the winner needed."""

    winner: Winner
    trips: int

    def __str__(self):
        return f"{self.winner.value} {self.trips}"


def trips_needed(water, tray, loss):
    """Return the trips to move ``water`` litres, or None if it can never be done.

    The first trip carries a full tray; every later one carries the tray less
    what is lost.
    """
    if water <= 0:
        return 0
    remaining = water - tray
    if remaining <= 0:
        return 1
    net = tray - loss
    if net <= 0:
        return None
    return 1 + -(-remaining // net)


def race(mine, neighbour):
    """Compare two (water, tray, loss) triples and return the Outcome."""
    my_trips = trips_needed(*mine)
    their_trips = trips_needed(*neighbour)
    if my_trips is None and their_trips is None:
        raise ValueError("neither pool can ever be finished")
    if their_trips is None or (my_trips is not None and my_trips < their_trips):
        return Outcome(Winner.MINE, my_trips)
    if my_trips is None or their_trips < my_trips:
        return Outcome(Winner.NEIGHBOUR, their_trips)
    return Outcome(Winner.TIE, my_trips)


def solve(text):
    """Process races of six numbers until six zeros; one outcome per line."""
    tokens = text.split()
    lines = []
    for offset in range(0, len(tokens), 6):
        chunk = tokens[offset:offset + 6]
        if len(chunk) < 6:
            raise ValueError("unexpected end of input")
        numbers = [int(token) for token in chunk]
        if not any(numbers):
            break
        lines.append(f"{race(numbers[:3], numbers[3:])}\n")
    return "".join(lines)


def main(argv=None):
    argparse.ArgumentParser(description="Who empties the pool first.").parse_args(argv)
    try:
        sys.stdout.write(solve(sys.stdin.read()))
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())