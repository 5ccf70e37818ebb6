"""Check whether a table area is plausible for a number of guests."""

import argparse
import sys

MAX_LENGTH = 120
MIN_LENGTH = 90
MAX_WIDTH = 90
MIN_WIDTH = 45

MAX_AREA = MAX_LENGTH * MAX_WIDTH
MIN_AREA = MIN_LENGTH * MIN_WIDTH


def fits_estimate(area, guests):
    """True when the area lies between the least and greatest space for the guests."""
    return guests * MIN_AREA <= area <= guests * MAX_AREA


def _next_int(tokens):
    try:
        return int(next(tokens))
    except StopIteration:
        raise ValueError("unexpected end of input") from None


def solve(text):
    """Read a count and that many area/guest pairs; answer SI or NO for each."""
    tokens = iter(text.split())
    count = _next_int(tokens)
    lines = []
    for _ in range(count):
        area = _next_int(tokens)
        guests = _next_int(tokens)
        lines.append("SI\n" if fits_estimate(area, guests) else "NO\n")
    return "".join(lines)


def main(argv=None):
    argparse.ArgumentParser(description="Check table area estimates.").parse_args(argv)
    try:
        sys.stdout.write(solve(sys.stdin.read()))
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())