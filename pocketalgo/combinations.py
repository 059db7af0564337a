"""Binomial coefficients computed from Pascal's triangle."""

from __future__ import annotations

import sys
from typing import Sequence


def combinations(n: int, m: int) -> int:
    """Return the number of ways to choose ``m`` items out of ``n``.

    Each row of Pascal's triangle is built from the one above it, so every
    entry is the sum of the two entries over it.
    """
    if n < 0 or not 0 <= m <= n:
        raise ValueError(f"need 0 <= m <= n, got n={n}, m={m}")
    row = [1]
    for _ in range(n):
        row = [left + right for left, right in zip([0, *row], [*row, 0])]
    return row[m]


def main(argv: Sequence[str] | None = None) -> int:
    """Print C(n, m) for two numbers given as arguments or on standard input."""
    args = list(sys.argv[1:] if argv is None else argv)
    tokens = args if len(args) >= 2 else sys.stdin.read().split()
    try:
        n, m = int(tokens[0]), int(tokens[1])
        value = combinations(n, m)
    except (IndexError, ValueError) as exc:
        print(f"Expected two numbers n and m with 0 <= m <= n: {exc}", file=sys.stderr)
        return 1
    print(value)
    return 0


if __name__ == "__main__":
    sys.exit(main())