"""Byte-buffer helpers working on ``bytes``, ``bytearray`` and ``memoryview``.

Functions that change a buffer do so in place and need a mutable one.
A length that runs past the end of a buffer raises ``IndexError``; a
negative length raises ``ValueError``.
"""

from __future__ import annotations

import operator
from typing import Optional, Union

SIZE_MAX = 2**64 - 1

Buffer = Union[bytes, bytearray, memoryview]
MutableBuffer = Union[bytearray, memoryview]


def _length(length: int) -> int:
    length = operator.index(length)
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    return length


def _check_span(buffer: Buffer, length: int, name: str, offset: int = 0) -> None:
    if offset < 0:
        raise ValueError(f"{name} offset must not be negative, got {offset}")
    if offset + length > len(buffer):
        raise IndexError(
            f"{name} holds {len(buffer)} bytes, {offset + length} requested"
        )


def bzero(buffer: MutableBuffer, length: int) -> None:
    """Set the first ``length`` bytes of ``buffer`` to zero."""
    length = _length(length)
    _check_span(buffer, length, "buffer")
    buffer[:length] = bytes(length)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes."""
    count = operator.index(count)
    size = operator.index(size)
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if count == SIZE_MAX or size == SIZE_MAX:
        raise MemoryError("allocation size is too large")
    return bytearray(count * size)


def memchr(data: Buffer, value: int, length: int) -> Optional[int]:
    """Return the index of the first byte equal to ``value`` within ``length`` bytes.

    ``value`` is taken modulo 256. When searching for 0 and nothing is
    found, a zero byte sitting just past the searched span is reported.
    Returns None when nothing matches.
    """
    length = _length(length)
    _check_span(data, length, "data")
    if length == 0:
        return None
    position = bytes(data[:length]).find(value & 0xFF)
    if position >= 0:
        return position
    if value == 0 and len(data) > length and data[length] == 0:
        return length
    return None


def memcmp(first: Buffer, second: Buffer, length: int) -> int:
    """Compare ``length`` bytes and return the difference at the first mismatch."""
    length = _length(length)
    _check_span(first, length, "first")
    _check_span(second, length, "second")
    for a, b in zip(bytes(first[:length]), bytes(second[:length])):
        if a != b:
            return a - b
    return 0


def memcpy(
    dest: Optional[MutableBuffer], src: Optional[Buffer], length: int
) -> Optional[MutableBuffer]:
    """Copy ``length`` bytes of ``src`` to the start of ``dest`` and return ``dest``.

    With neither buffer given, nothing happens and None is returned.
    """
    if dest is None and src is None:
        return None
    if dest is None or src is None:
        raise TypeError("memcpy needs both a destination and a source")
    length = _length(length)
    _check_span(dest, length, "dest")
    _check_span(src, length, "src")
    dest[:length] = bytes(src[:length])
    return dest


def memmove(buffer: MutableBuffer, dest: int, src: int, length: int) -> MutableBuffer:
    """Copy ``length`` bytes from offset ``src`` to offset ``dest`` of one buffer.

    The spans may overlap; the result is as if the source were copied out
    first. Returns ``buffer``.
    """
    length = _length(length)
    dest = operator.index(dest)
    src = operator.index(src)
    _check_span(buffer, length, "dest", dest)
    _check_span(buffer, length, "src", src)
    if dest != src:
        buffer[dest : dest + length] = bytes(buffer[src : src + length])
    return buffer


def memset(buffer: MutableBuffer, value: int, length: int) -> MutableBuffer:
    """Fill the first ``length`` bytes with ``value`` modulo 256 and return ``buffer``."""
    length = _length(length)
    _check_span(buffer, length, "buffer")
    buffer[:length] = bytes([value & 0xFF]) * length
    return buffer