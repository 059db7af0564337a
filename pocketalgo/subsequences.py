"""Test whether one string can be obtained from another by deleting characters."""

from __future__ import annotations

import sys
from typing import Sequence


def is_subsequence(text: str, subsequence: str) -> bool:
    """Return whether ``subsequence`` appears in ``text`` in order, not necessarily adjacent."""
    remaining = iter(text)
    return all(ch in remaining for ch in subsequence)


def main(argv: Sequence[str] | None = None) -> int:
    """Print 1 or 0 for two strings given as arguments or on standard input."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) == 2:
        text, subsequence = args
    else:
        tokens = sys.stdin.read().split()
        text, subsequence = (tokens + ["", ""])[:2]
    print(int(is_subsequence(text, subsequence)))
    return 0


if __name__ == "__main__":
    sys.exit(main())