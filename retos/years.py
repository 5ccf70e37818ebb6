"""Shift historical years onto a calendar that includes a year zero."""

import argparse
import sys

LOWEST_YEAR = -3000
HIGHEST_YEAR = 3000

CASES_ERROR = "Error al leer el número de casos."
YEAR_ERROR = "Error al leer el año."

PROMPT = "Introduce un número entre -3000 y 3000, distinto de 0: "
OUT_OF_RANGE = "Número fuera del rango permitido. Intenta de nuevo."
NOT_A_NUMBER = "Error. Por favor, introduce un número válido."
ANSWER = "En un calendario que incluye el 0, el año es: {}"


def shift_year(year):
    """Return the year on a calendar with a year zero: positive years move back one."""
    return year - 1 if year > 0 else year


def checked_year(year):
    """Shift a year that must lie in the accepted range and not be zero."""
    if year == 0 or not LOWEST_YEAR <= year <= HIGHEST_YEAR:
        raise ValueError(OUT_OF_RANGE)
    return shift_year(year)


def _as_int(token, message):
    try:
        return int(token)
    except (TypeError, ValueError):
        raise ValueError(message) from None


def solve(text):
    """Read a case count followed by that many years; return one shifted year per line."""
    tokens = iter(text.split())
    count = _as_int(next(tokens, None), CASES_ERROR)
    years = [_as_int(next(tokens, None), YEAR_ERROR) for _ in range(count)]
    return "".join(f"{shift_year(year)}\n" for year in years)


def _interactive(source, out):
    while True:
        out.write(PROMPT)
        out.flush()
        line = source.readline()
        if not line:
            return 1
        try:
            year = int(line.strip())
        except ValueError:
            out.write(NOT_A_NUMBER + "\n")
            continue
        try:
            shifted = checked_year(year)
        except ValueError:
            out.write(OUT_OF_RANGE + "\n")
            continue
        out.write(ANSWER.format(shifted) + "\n")
        return 0


def main(argv=None):
    parser = argparse.ArgumentParser(description="Shift years onto a calendar with a year zero.")
    parser.add_argument(
        "--interactive",
        action="store_true",
        help="ask for a single year until a valid one is given",
    )
    args = parser.parse_args(argv)
    if args.interactive:
        return _interactive(sys.stdin, sys.stdout)
    try:
        sys.stdout.write(solve(sys.stdin.read()))
    except ValueError as exc:
        print(exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())