"""A small printf supporting the conversions %c %s %p %d %i %u %x %X and %%.

Integer arguments behave like C ``int`` and ``unsigned int``: they wrap
around to 32 bits. Pointer arguments wrap around to 64 bits. An unknown
conversion writes nothing and uses no argument.
"""

from __future__ import annotations

import operator
import sys
from typing import Any, Callable, Iterator, Optional, TextIO

from .numbers import INT_MAX

_MASK32 = 2**32 - 1
_MASK64 = 2**64 - 1


def _cut_at_nul(text: str) -> str:
    return text.split("\0", 1)[0]


def format_hex(n: int, upper: bool = False) -> str:
    """Write ``n`` as an unsigned 32-bit hexadecimal number without prefix."""
    value = operator.index(n) & _MASK32
    return format(value, "X" if upper else "x")


def format_address(n: Optional[int]) -> str:
    """Write a 64-bit address in lowercase hexadecimal with a ``0x`` prefix.

    None stands for the null address.
    """
    value = 0 if n is None else operator.index(n) & _MASK64
    return "0x" + format(value, "x")


def format_unsigned(n: int) -> str:
    """Write ``n`` as an unsigned 32-bit decimal number."""
    return str(operator.index(n) & _MASK32)


def format_signed(n: int) -> str:
    """Write ``n`` as a signed 32-bit decimal number."""
    value = operator.index(n) & _MASK32
    if value > INT_MAX:
        value -= 2**32
    return str(value)


def _format_char(arg: Any) -> str:
    if isinstance(arg, str):
        if len(arg) != 1:
            raise ValueError(f"%c needs a single character, got {arg!r}")
        return arg
    return chr(operator.index(arg) & 0xFF)


def _format_string(arg: Any) -> str:
    if arg is None:
        return "(null)"
    if not isinstance(arg, str):
        raise TypeError(f"%s needs a string, got {type(arg).__name__}")
    return _cut_at_nul(arg)


_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "c": _format_char,
    "s": _format_string,
    "p": format_address,
    "d": format_signed,
    "i": format_signed,
    "u": format_unsigned,
    "x": lambda arg: format_hex(arg, False),
    "X": lambda arg: format_hex(arg, True),
}


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    converter = _CONVERSIONS.get(spec)
    if converter is None:
        return ""
    try:
        arg = next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for conversion %{spec}") from None
    return converter(arg)


def render(fmt: str, *args: Any) -> str:
    """Return the text ``printf`` would write for ``fmt`` and ``args``."""
    remaining = iter(args)
    chars = iter(_cut_at_nul(fmt))
    pieces = []
    for ch in chars:
        if ch == "%":
            pieces.append(_convert(next(chars, ""), remaining))
        else:
            pieces.append(ch)
    return "".join(pieces)


def printf(fmt: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write the formatted text and return the number of characters written."""
    text = render(fmt, *args)
    (sys.stdout if stream is None else stream).write(text)
    return len(text)