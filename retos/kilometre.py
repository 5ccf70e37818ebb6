"""Find the fastest kilometre inside a run timed per hectometre."""

import argparse
import sys

WINDOW = 10


def best_kilometre(times):
    """Return (start hectometre, seconds) of the fastest ten-hectometre stretch.

    On a tie the later stretch wins.
    """
    times = list(times)
    if len(times) < WINDOW:
        raise ValueError(f"at least {WINDOW} hectometre times are needed")
    current = best = sum(times[:WINDOW])
    start = 0
    for offset, (leaving, entering) in enumerate(zip(times, times[WINDOW:]), start=1):
        current += entering - leaving
        if current <= best:
            best, start = current, offset
    return start, best


def format_result(start, seconds):
    """Render the stretch in metres and its time as minutes:seconds."""
    minutes, rest = divmod(seconds, 60)
    return f"{start * 100}-{(start + WINDOW) * 100} {minutes}:{rest:02d}"


def _next_token(tokens):
    """Return the next token, raising ValueError at the end of input."""
    try:
        return next(tokens)
    except StopIteration:
        raise ValueError("unexpected end of input") from None


def _next_int(tokens):
    """Return the next token as an integer, raising ValueError at the end of input."""
    return int(_next_token(tokens))


def _counts(tokens):
    """Yield case sizes read from ``tokens`` until a zero or the end of input."""
    for header in tokens:
        count = int(header)
        if count == 0:
            return
        yield count


def _run_cli(solve_text, description, argv):
    """Parse ``argv``, answer standard input with ``solve_text`` and print the result."""
    argparse.ArgumentParser(description=description).parse_args(argv)
    try:
        sys.stdout.write(solve_text(sys.stdin.read()))
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


def solve(text):
    """Process runs until a zero length; return one result line per run."""
    tokens = iter(text.split())
    return "".join(
        format_result(*best_kilometre([_next_int(tokens) for _ in range(count)])) + "\n"
        for count in _counts(tokens)
    )


def main(argv=None):
    return _run_cli(solve, "Fastest kilometre of each run.", argv)


if __name__ == "__main__":
    sys.exit(main())