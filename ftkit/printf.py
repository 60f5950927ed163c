"""Formatted output with a small set of conversions.

Supported conversions are %c, %s, %p, %d, %i, %u, %x and %X. Any other
character after '%' is written as is, so "%%" gives "%". A lone '%' at the
end of the format is written literally.
"""

from __future__ import annotations

import sys
from typing import Any, Callable, Dict, Iterator, Optional, TextIO

from ftkit.convert import itoa

_UINT_MASK = (1 << 32) - 1
_POINTER_MASK = (1 << 64) - 1


def _as_int32(value: Any) -> int:
    value = int(value) & _UINT_MASK
    if value >= 1 << 31:
        value -= 1 << 32
    return value


def _as_uint32(value: Any) -> int:
    return int(value) & _UINT_MASK


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(int(value) & 0xFF)


def _string(value: Optional[str]) -> str:
    return "(null)" if value is None else str(value)


def _pointer(value: Any) -> str:
    address = 0 if value is None else int(value) & _POINTER_MASK
    return "0x" + format(address, "x")


_CONVERSIONS: Dict[str, Callable[[Any], str]] = {
    "c": _char,
    "s": _string,
    "p": _pointer,
    "d": lambda v: itoa(_as_int32(v)),
    "i": lambda v: itoa(_as_int32(v)),
    "u": lambda v: str(_as_uint32(v)),
    "x": lambda v: format(_as_uint32(v), "x"),
    "X": lambda v: format(_as_uint32(v), "X"),
}


def _render(fmt: str, args: tuple) -> Iterator[str]:
    remaining = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            yield ch
            continue
        spec = next(chars, None)
        if spec is None:
            yield "%"
            return
        convert = _CONVERSIONS.get(spec)
        if convert is None:
            yield spec
            continue
        try:
            value = next(remaining)
        except StopIteration:
            raise TypeError(f"not enough arguments for format %{spec}") from None
        yield convert(value)


def sprintf(fmt: str, *args: Any) -> str:
    """Return fmt with each conversion replaced by the next argument."""
    return "".join(_render(fmt, args))


def printf(fmt: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write the formatted text to stream (standard output by default).

    Returns the number of characters written.
    """
    text = sprintf(fmt, *args)
    (sys.stdout if stream is None else stream).write(text)
    return len(text)