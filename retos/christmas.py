"""Tell whether given dates are Christmas Day."""

import sys

from retos.kilometre import _next_int, _run_cli

CHRISTMAS_DAY = 25
CHRISTMAS_MONTH = 12


def is_christmas(day, month):
    """True when the date is the 25th of December."""
    return day == CHRISTMAS_DAY and month == CHRISTMAS_MONTH


def solve(text):
    """Read a count and that many day/month pairs; answer SI or NO for each."""
    tokens = iter(text.split())
    count = _next_int(tokens)
    return "".join(
        "SI\n" if is_christmas(_next_int(tokens), _next_int(tokens)) else "NO\n"
        for _ in range(count)
    )


def main(argv=None):
    return _run_cli(solve, "Is the date Christmas Day?", argv)


if __name__ == "__main__":
    sys.exit(main())