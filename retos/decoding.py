"""Count the ways a digit message can be split into known symbols."""

import sys

from retos.kilometre import _counts, _next_token, _run_cli

MOD = 1_000_000_007
DIGITS = frozenset("0123456789")


def _check_digits(text, what):
    if not set(text) <= DIGITS:
        raise ValueError(f"{what} must contain only digits: {text!r}")


class _Node:
    __slots__ = ("children", "terminal")

    def __init__(self):
        self.children = {}
        self.terminal = False


class SymbolTrie:
    """A prefix tree of digit symbols."""

    def __init__(self, symbols=()):
        self._root = _Node()
        for symbol in symbols:
            self.insert(symbol)

    def insert(self, symbol):
        """Add a symbol made of digits."""
        _check_digits(symbol, "symbol")
        node = self._root
        for digit in symbol:
            node = node.children.setdefault(digit, _Node())
        node.terminal = True

    def matches(self, message, start):
        """Yield every end index at which a symbol starting at ``start`` ends."""
        node = self._root
        for index in range(start, len(message)):
            node = node.children.get(message[index])
            if node is None:
                return
            if node.terminal:
                yield index + 1


def count_decodings(symbols, message):
    """Return the number of ways, modulo 1000000007, to read the message.

    A zero digit is skipped and carries the count of the position before it.
    """
    _check_digits(message, "message")
    trie = SymbolTrie(symbols)
    ways = [0] * (len(message) + 1)
    ways[0] = 1
    for start, digit in enumerate(message):
        if digit == "0":
            ways[start + 1] = ways[start]
            continue
        for end in trie.matches(message, start):
            ways[end] = (ways[end] + ways[start]) % MOD
    return ways[-1]


def solve(text):
    """Process cases until a zero symbol count; return one count per line."""
    tokens = iter(text.split())
    return "".join(
        f"{count_decodings([_next_token(tokens) for _ in range(count)], _next_token(tokens))}\n"
        for count in _counts(tokens)
    )


def main(argv=None):
    return _run_cli(solve, "Count decodings of digit messages.", argv)


if __name__ == "__main__":
    sys.exit(main())