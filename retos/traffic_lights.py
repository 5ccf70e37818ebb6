"""Find the shortest whole-second trip along an avenue of traffic lights."""

import sys
from dataclasses import dataclass
from fractions import Fraction
from itertools import accumulate

from retos.kilometre import _next_int, _run_cli

IMPOSSIBLE = "IMPOSIBLE"
MIN_SPEED_TENTHS = 1
MARGIN = Fraction(1, 100)


@dataclass(frozen=True)
class Light:
    """A light ``distance`` metres after the previous one, red first then green."""

    distance: int
    red: int
    green: int

    @property
    def cycle(self):
        """Seconds of a full red and green cycle."""
        return self.red + self.green


def _too_slow(total, arrival):
    # The speed total / arrival would fall below the minimum of 0.1.
    return total * 10 < arrival * MIN_SPEED_TENTHS


def _passes(arrival, earlier, total):
    """True when, arriving at the end at ``arrival``, no earlier light is met on red."""
    for position, light in earlier:
        moment = Fraction(arrival * position, total) % light.cycle
        if MARGIN < moment < light.red - MARGIN:
            return False
    return True


def travel_time(max_speed, lights):
    """Return the shortest trip time in seconds, or None when no speed works.

    The car keeps one speed, no faster than ``max_speed`` and no slower than
    0.1, reaches the last light just as it turns red or green, and meets no
    earlier light on red.
    """
    lights = list(lights)
    if not lights:
        raise ValueError("at least one light is needed")
    if max_speed <= 0:
        raise ValueError("the speed limit must be positive")
    if any(light.green == 0 for light in lights):
        return None
    positions = list(zip(accumulate(light.distance for light in lights), lights))
    total = positions[-1][0]
    if total == 0:
        return 0
    last = lights[-1]
    earlier = positions[:-1]

    cycles = total // max_speed // last.cycle
    if total != cycles * last.cycle * max_speed:
        if total < last.red * max_speed:
            arrival = cycles * last.cycle + last.red
            if _too_slow(total, arrival):
                return None
            if _passes(arrival, earlier, total):
                return arrival
        cycles += 1

    while True:
        start = cycles * last.cycle
        for arrival in (start, start + last.red):
            if _too_slow(total, arrival):
                return None
            if _passes(arrival, earlier, total):
                return arrival
        cycles += 1


def _headers(tokens):
    """Yield (light count, speed limit) pairs until "0 0" or unreadable input."""
    while True:
        try:
            count, max_speed = int(next(tokens)), int(next(tokens))
        except (StopIteration, ValueError):
            return
        if count == 0 and max_speed == 0:
            return
        yield count, max_speed


def solve(text):
    """Process avenues until "0 0"; return one time or IMPOSIBLE per line."""
    tokens = iter(text.split())
    answers = []
    for count, max_speed in _headers(tokens):
        lights = [
            Light(_next_int(tokens), _next_int(tokens), _next_int(tokens))
            for _ in range(count)
        ]
        result = travel_time(max_speed, lights)
        answers.append(f"{IMPOSSIBLE if result is None else result}\n")
    return "".join(answers)


def main(argv=None):
    return _run_cli(solve, "Shortest trip through traffic lights.", argv)


if __name__ == "__main__":
    sys.exit(main())