"""The djb2 string hash, reduced to a non-negative 31-bit value."""

from __future__ import annotations

import sys
from typing import Sequence

HASH_SEED = 5381
HASH_MULTIPLIER = 33
HASH_MASK = 0x7FFFFFFF
_WORD = 0xFFFFFFFF


def hash_code(text: str) -> int:
    """Hash the UTF-8 bytes of ``text``, each read as a signed char."""
    value = HASH_SEED
    for byte in text.encode("utf-8"):
        signed = byte - 256 if byte >= 128 else byte
        value = (HASH_MULTIPLIER * value + signed) & _WORD
    return value & HASH_MASK


def main(argv: Sequence[str] | None = None) -> int:
    """Ask for a name and print its hash code."""
    sys.stdout.write("Please enter your name: ")
    sys.stdout.flush()
    name = sys.stdin.readline().rstrip("\n")
    sys.stdout.write(f"The hash code for your name is {hash_code(name)}.\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())