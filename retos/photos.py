"""Count group photos taken as characters arrive at a photo stand."""

import sys

from retos.kilometre import _counts, _run_cli

MAFALDA = "Mafalda"
CHARACTERS = (MAFALDA, "Felipe", "Manolito", "Susanita", "Miguelito", "Libertad", "Guille")
MINIMUM_GROUP = 3


def take_photos(names):
    """Return (photos taken, people left without a photo) for an arrival order.

    After each arrival a photo is taken when Mafalda is waiting and at least
    three different characters are present; one of each present character
    takes part. Unknown names are not counted.
    """
    waiting = dict.fromkeys(CHARACTERS, 0)
    photos = 0
    for name in names:
        if name in waiting:
            waiting[name] += 1
        present = [character for character, count in waiting.items() if count]
        if waiting[MAFALDA] and len(present) >= MINIMUM_GROUP:
            photos += 1
            for character in present:
                waiting[character] -= 1
    return photos, sum(waiting.values())


def solve(text):
    """Process queues until a zero count; return one result line per queue."""
    tokens = iter(text.split())
    return "".join(
        "{} {}\n".format(*take_photos([next(tokens, "") for _ in range(count)]))
        for count in _counts(tokens)
    )


def main(argv=None):
    return _run_cli(solve, "Count group photos.", argv)


if __name__ == "__main__":
    sys.exit(main())