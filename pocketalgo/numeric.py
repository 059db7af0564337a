"""Conversions between integers and their decimal strings, digit by digit."""

from __future__ import annotations

from functools import reduce

_DIGITS = "0123456789"


def int_to_string(n: int) -> str:
    """Return the decimal representation of ``n``."""
    if n < 0:
        return "-" + int_to_string(-n)
    digits = []
    while True:
        n, digit = divmod(n, 10)
        digits.append(_DIGITS[digit])
        if n == 0:
            break
    return "".join(reversed(digits))


def string_to_int(text: str) -> int:
    """Parse a decimal string with optional leading minus signs.

    The empty string reads as zero.
    """
    if text.startswith("-"):
        return -string_to_int(text[1:])
    for ch in text:
        if ch not in _DIGITS:
            raise ValueError(f"not a decimal digit: {ch!r} in {text!r}")
    return reduce(lambda value, ch: value * 10 + _DIGITS.index(ch), text, 0)