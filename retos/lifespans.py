"""Count the years two lifespans have in common."""

import sys

from retos.kilometre import _next_int, _run_cli


def overlap_years(birth_a, death_a, birth_b, death_b):
    """Return how many years, counted inclusively, both lives share."""
    if death_a >= birth_b and death_b >= birth_a:
        return min(death_a, death_b) - max(birth_a, birth_b) + 1
    return 0


def solve(text):
    """Read a count and that many lifespan pairs; return the shared years of each."""
    tokens = iter(text.split())
    count = _next_int(tokens)
    return "".join(
        f"{overlap_years(*(_next_int(tokens) for _ in range(4)))}\n"
        for _ in range(count)
    )


def main(argv=None):
    return _run_cli(solve, "Shared years of two lifespans.", argv)


if __name__ == "__main__":
    sys.exit(main())