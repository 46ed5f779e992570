# ftlib

A small library of text, memory and number helpers. They follow the classic
C-library behaviour, quirks included, and are written in plain Python with no
dependencies outside the standard library.

## Modules

- `ftlib.chars`: ASCII character classification and case conversion:
  `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `to_upper`,
  `to_lower`. Each takes a one-character string or an integer code;
  `to_upper` and `to_lower` return the same kind of value they were given.
- `ftlib.numbers`: `atoi(text)` reads the leading decimal number of a string,
  wrapping like a 32-bit signed integer; `itoa(n)` writes a 32-bit signed
  integer as decimal text and raises `OverflowError` outside that range.
- `ftlib.memory`: helpers on `bytes`, `bytearray` and `memoryview`: `bzero`,
  `calloc`, `memchr`, `memcmp`, `memcpy`, `memmove`, `memset`. Functions that
  change a buffer do so in place; a span past the end of a buffer raises
  `IndexError`.
- `ftlib.strings`: `strchr`, `strrchr`, `strncmp`, `strnstr`, `strlcpy`,
  `strlcat`, `substr`, `strjoin`, `strtrim`, `split`, `strmapi`, `striteri`.
  Searches return indexes, or `None` when nothing is found; `strlcpy` and
  `strlcat` return the resulting text together with the full length.
- `ftlib.output`: `put_char`, `put_str`, `put_endl` and `put_nbr` write to a
  given text stream, or to standard output when none is given.
- `ftlib.printf`: a small formatter for `%c %s %p %d %i %u %x %X %%`.
  `render` returns the text and `printf` writes it to a stream (standard
  output by default) and returns the number of characters written. The
  helpers `format_hex`, `format_address`, `format_unsigned` and
  `format_signed` are also available.
- `ftlib.line_reader`: `LineReader` reads one line at a time, newline
  included, from any object with a `read(size)` method, text or binary. It
  keeps separate leftover data for each stream; `lines` yields the remaining
  lines and `forget` drops what is held for a stream.

## Example

```python
import io

from ftlib.numbers import atoi, itoa
from ftlib.strings import split, strtrim
from ftlib.printf import render
from ftlib.line_reader import LineReader

atoi("   -42abc")               # -42
itoa(-2147483648)               # "-2147483648"
split("  a b  c ", " ")         # ["a", "b", "c"]
strtrim("xxhixx", "x")          # "hi"
render("%d items, %x", 3, 255)  # "3 items, ff"

reader = LineReader()
stream = io.StringIO("first\nsecond\n")
reader.read_line(stream)        # "first\n"
list(reader.lines(stream))      # ["second\n"]
```

## What it does not do

This is a library only: it has no command-line tool, and `printf` supports
none of the flags, widths or precisions of a full formatter.

## Tests

The test suite uses pytest, which the `test` extra installs.