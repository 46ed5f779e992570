"""String helpers working on Python ``str`` values.

Searches return indexes instead of pointers and ``None`` where nothing is
found. Functions that fill a fixed-size destination return the resulting
text together with the length the full operation would have produced.
"""

from __future__ import annotations

import operator
from typing import Callable, MutableSequence, Optional, Tuple, TypeVar, Union

CharLike = Union[str, int]
T = TypeVar("T")


def _char_code(c: CharLike) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, int):
        return c & 0xFF
    raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")


def _size(value: int, name: str) -> int:
    value = operator.index(value)
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the first ``c`` in ``s``.

    Searching for the NUL character gives ``len(s)``, the position of the
    terminator. Returns None when ``c`` does not occur.
    """
    code = _char_code(c)
    if code == 0:
        return len(s)
    position = s.find(chr(code))
    return position if position >= 0 else None


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the last ``c`` in ``s``.

    Searching for the NUL character gives ``len(s)``. Returns None when
    ``c`` does not occur.
    """
    code = _char_code(c)
    if code == 0:
        return len(s)
    position = s.rfind(chr(code))
    return position if position >= 0 else None


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters, stopping at the end of either string.

    Returns the difference of the character codes at the first mismatch,
    with the end of a string counting as code 0, or 0 when they agree.
    """
    n = _size(n, "n")
    for i in range(n):
        a = ord(s1[i]) if i < len(s1) else 0
        b = ord(s2[i]) if i < len(s2) else 0
        if a != b or a == 0:
            return a - b
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Find ``needle`` lying wholly within the first ``length`` characters.

    An empty needle is found at 0. Returns None when there is no match.
    """
    length = _size(length, "length")
    if len(needle) > len(haystack):
        return None
    if not needle:
        return 0
    position = haystack.find(needle, 0, length)
    return position if position >= 0 else None


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a destination holding ``size`` slots including the terminator.

    Returns the text that fits and the full length of ``src``, which shows
    whether the copy was cut short.
    """
    size = _size(size, "size")
    copied = src[: size - 1] if size else ""
    return copied, len(src)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` within ``size`` slots including the terminator.

    Returns the resulting text and the length the full result would have.
    When ``size`` does not exceed ``len(dst)`` nothing is appended and the
    length returned is ``len(src) + size``.
    """
    size = _size(size, "size")
    if size <= len(dst):
        return dst, len(src) + size
    return dst + src[: size - len(dst) - 1], len(dst) + len(src)


def substr(s: str, start: int, length: int) -> str:
    """Return up to ``length`` characters of ``s`` from ``start``.

    A start at or past the end gives an empty string.
    """
    start = _size(start, "start")
    length = _size(length, "length")
    if start >= len(s):
        return ""
    return s[start : start + length]


def strjoin(s1: str, s2: str) -> str:
    """Return ``s1`` followed by ``s2``."""
    if not isinstance(s1, str) or not isinstance(s2, str):
        raise TypeError("strjoin needs two strings")
    return s1 + s2


def strtrim(s: str, charset: str) -> str:
    """Strip every leading and trailing character found in ``charset``."""
    if not isinstance(s, str) or not isinstance(charset, str):
        raise TypeError("strtrim needs two strings")
    return s.strip(charset)


def split(s: str, sep: CharLike) -> list[str]:
    """Split ``s`` on ``sep``, dropping the empty pieces."""
    if not isinstance(s, str):
        raise TypeError("split needs a string")
    separator = chr(_char_code(sep))
    return [word for word in s.split(separator) if word]


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for every character."""
    if not isinstance(s, str):
        raise TypeError("strmapi needs a string")
    return "".join(func(i, ch) for i, ch in enumerate(s))


def striteri(s: MutableSequence[T], func: Callable[[int, T], Optional[T]]) -> None:
    """Call ``func(index, item)`` on every item of a mutable sequence.

    A value returned by ``func`` replaces the item in place; None leaves it.
    """
    if isinstance(s, (str, bytes)):
        raise TypeError("striteri needs a mutable sequence such as a list or bytearray")
    for i, item in enumerate(s):
        replacement = func(i, item)
        if replacement is not None:
            s[i] = replacement