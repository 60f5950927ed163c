# ftkit

Small helpers that follow the classic C library rules, written for Python.
They cover ASCII character classification, byte-buffer operations, string
searching and trimming, integer parsing and formatting, a singly linked list,
a minimal `printf` and a buffered line reader.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `ftkit.chars`: `isalpha`, `isdigit`, `isalnum`, `isascii`, `isprint`,
  `toupper` and `tolower`. Each accepts an integer code or a one-character
  string; only ASCII counts. The case conversions return the same kind of
  value they were given.
- `ftkit.memory`: `memset`, `bzero`, `memcpy`, `memmove`, `memchr`, `memcmp`
  and `calloc`. The writing functions modify a `bytearray` in place and
  return it; `memmove` copies between two offsets of one buffer; `memchr`
  returns an index or `None`; `calloc` returns a zero-filled `bytearray` and
  raises `OverflowError` when `count * size` would not fit in 64 bits.
- `ftkit.output`: `put_char`, `put_str`, `put_endl` and `put_nbr` write to a
  text stream, standard output by default. `None` strings write nothing.
- `ftkit.strings`: `strlen`, `strlcpy`, `strlcat`, `strchr`, `strrchr`,
  `strnstr`, `strncmp`, `strdup`, `substr`, `strjoin` and `strtrim`.
  Searches return an index or `None`. `strlcpy` and `strlcat` return a pair:
  the text that fits in the destination size and the length that was
  attempted.
- `ftkit.convert`: `atoi` (values are clamped the way a C `long` would clamp,
  then truncated to 32 bits), `itoa`, `split`, `strmapi` and `striteri`
  (which calls a function on each element of a mutable sequence and replaces
  the element with any non-`None` result).
- `ftkit.linked_list`: `LinkedList`, with `push_front`, `push_back`, `last`,
  `clear`, `for_each`, `map`, `len()` and iteration.
- `ftkit.printf`: `sprintf` and `printf`, which accept the conversions
  `%c %s %p %d %i %u %x %X`. Any other character after `%` is written as it
  is, and a lone `%` at the end is written literally. A missing argument
  raises `TypeError`. `printf` returns the number of characters it wrote.
- `ftkit.line_reader`: `LineReader` reads a binary or text stream in
  fixed-size chunks (42 by default) and returns one line at a time, newline
  included, or `None` at the end of input. It can also be iterated.

## Examples

```python
from ftkit.printf import sprintf
from ftkit.convert import atoi, itoa, split
from ftkit.strings import strlcpy
from ftkit.linked_list import LinkedList
from ftkit.line_reader import LineReader
import io

sprintf("%d items, %x%%", 42, 255)   # '42 items, ff%'
atoi("  -42abc")                     # -42
itoa(-2147483648)                    # '-2147483648'
split("  a  b c ", " ")              # ['a', 'b', 'c']
strlcpy("hello", 3)                  # ('he', 5)

items = LinkedList([1, 2, 3])
items.push_front(0)
list(items.map(lambda x: x * 10, None))   # [0, 10, 20, 30]

reader = LineReader(io.BytesIO(b"one\ntwo"), 42)
list(reader)                         # [b'one\n', b'two']
```

## What it does not do

ftkit is a library only. It has no command-line program, reads no map or
data files of its own and draws nothing on screen.