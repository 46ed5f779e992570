"""Reading a stream one line at a time, keeping unread data per stream.

A :class:`LineReader` reads fixed-size chunks from any object with a
``read(size)`` method, text or binary. It hands back one line per call,
newline included, and holds whatever was read past that line until the
next call for the same stream. Several streams can be read in turn
without their data getting mixed.
"""

from __future__ import annotations

import operator
from typing import Any, AnyStr, Dict, Iterator, List, Optional, Protocol

BUFFER_SIZE = 42


class Readable(Protocol):
    def read(self, size: int = ...) -> Any: ...


class LineReader:
    """Line-by-line reader with separate leftover data for every stream."""

    def __init__(self, buffer_size: int = BUFFER_SIZE) -> None:
        buffer_size = operator.index(buffer_size)
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self.buffer_size = buffer_size
        self._pending: Dict[Readable, Any] = {}

    def _split_off(self, stream: Readable, data: AnyStr) -> Optional[AnyStr]:
        """Return the line that ends within ``data`` and keep the rest, if any."""
        if isinstance(data, (bytes, bytearray)):
            position = data.find(b"\n")
        else:
            position = data.find("\n")
        if position < 0:
            return None
        rest = data[position + 1 :]
        if rest:
            self._pending[stream] = rest
        return data[: position + 1]

    def read_line(self, stream: Readable) -> Optional[AnyStr]:
        """Return the next line of ``stream`` with its newline, or None at the end.

        The last line is returned without a newline when the stream does not
        end with one. If reading fails, the data held for the stream is
        discarded and the error propagates.
        """
        pending = self._pending.pop(stream, None)
        parts: List[Any] = []
        if pending:
            line = self._split_off(stream, pending)
            if line is not None:
                return line
            parts.append(pending)
        while True:
            chunk = stream.read(self.buffer_size)
            if not chunk:
                if not parts:
                    return None
                return parts[0][:0].join(parts)
            line = self._split_off(stream, chunk)
            if line is not None:
                parts.append(line)
                return chunk[:0].join(parts)
            parts.append(chunk)

    def lines(self, stream: Readable) -> Iterator[AnyStr]:
        """Yield every remaining line of ``stream``."""
        while True:
            line = self.read_line(stream)
            if line is None:
                return
            yield line

    def forget(self, stream: Readable) -> None:
        """Drop any data held back for ``stream``."""
        self._pending.pop(stream, None)