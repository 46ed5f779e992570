"""Conversions between decimal text and 32-bit signed integers."""

from __future__ import annotations

from itertools import takewhile

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_LEADING_SPACE = " \t\n\v\f\r"
_DIGITS = frozenset("0123456789")


def _wrap32(value: int) -> int:
    return (value - INT_MIN) % 2**32 + INT_MIN


def atoi(text: str) -> int:
    """Read the leading decimal number of ``text``.

    Leading whitespace is skipped, then one optional ``+`` (unless it is
    directly followed by ``-``) and one optional ``-``. Digits are read up
    to the first other character; a NUL ends the text. Nothing readable
    gives 0. The result wraps around like a 32-bit signed integer.
    """
    text = text.split("\0", 1)[0].lstrip(_LEADING_SPACE)
    if text.startswith("+") and not text.startswith("+-"):
        text = text[1:]
    sign = 1
    if text.startswith("-"):
        sign = -1
        text = text[1:]
    digits = "".join(takewhile(_DIGITS.__contains__, text))
    value = int(digits) if digits else 0
    return _wrap32(sign * value)


def itoa(n: int) -> str:
    """Write a 32-bit signed integer in decimal."""
    if not isinstance(n, int):
        raise TypeError(f"expected an integer, got {type(n).__name__}")
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    return str(int(n))