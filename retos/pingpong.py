"""Score a ping-pong rally from the sounds it makes."""

import sys

from retos.kilometre import _counts, _run_cli

TURN = "PIC"
MISS = "PONG!"


def score(sounds):
    """Return (left points, right points) for a sequence of sounds.

    The ball starts towards the right; each PIC reverses it, and a PONG!
    scores for the player the ball is moving away from.
    """
    left = right = 0
    towards_right = True
    for sound in sounds:
        if sound == TURN:
            towards_right = not towards_right
        elif sound == MISS:
            if towards_right:
                left += 1
            else:
                right += 1
    return left, right


def solve(text):
    """Process games until a zero count; return one score line per game."""
    tokens = iter(text.split())
    return "".join(
        "{} {}\n".format(*score([next(tokens, "") for _ in range(count)]))
        for count in _counts(tokens)
    )


def main(argv=None):
    return _run_cli(solve, "Score ping-pong rallies.", argv)


if __name__ == "__main__":
    sys.exit(main())