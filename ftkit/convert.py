"""Conversions between text and integers, plus splitting and per-character mapping."""

from __future__ import annotations

import re
from typing import Callable, List, MutableSequence, Optional

_INT_BITS = 32
_LONG_MAX = 2**63 - 1
_LONG_MIN = -(2**63)
_LEADING = re.compile(r"[\t\n\v\f\r ]*([+-]?)([0-9]*)")


def _wrap_int32(value: int) -> int:
    value &= (1 << _INT_BITS) - 1
    if value >= 1 << (_INT_BITS - 1):
        value -= 1 << _INT_BITS
    return value


def atoi(s: str) -> int:
    """Parse a leading decimal integer the way the C library does.

    Leading whitespace is skipped, one optional sign is accepted and digits
    are read until the first non-digit. A value beyond the range of a
    64-bit long saturates, and the result is narrowed to a 32-bit int.
    Text without digits gives 0.
    """
    match = _LEADING.match(s)
    sign, digits = match.group(1), match.group(2)
    if not digits:
        return 0
    value = -int(digits) if sign == "-" else int(digits)
    value = max(_LONG_MIN, min(_LONG_MAX, value))
    return _wrap_int32(value)


def itoa(n: int) -> str:
    """Decimal representation of n, with a leading '-' when negative."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an integer, got {type(n).__name__}")
    return str(n)


def split(s: Optional[str], sep: str) -> Optional[List[str]]:
    """The non-empty pieces of s between occurrences of sep.

    Runs of separators count as one and separators at either end are
    dropped. None gives None.
    """
    if len(sep) != 1:
        raise ValueError(f"expected a single separator character, got {sep!r}")
    if s is None:
        return None
    return [piece for piece in s.split(sep) if piece]


def strmapi(s: Optional[str], f: Callable[[int, str], str]) -> Optional[str]:
    """A new string made of f(index, character) for each character of s."""
    if s is None:
        return None
    return "".join(f(index, ch) for index, ch in enumerate(s))


def striteri(
    chars: Optional[MutableSequence[str]],
    f: Optional[Callable[[int, str], Optional[str]]],
) -> None:
    """Call f(index, character) for each element of chars, in place.

    Whatever f returns, other than None, replaces the element.
    """
    if chars is None or f is None:
        return
    for index, ch in enumerate(list(chars)):
        replacement = f(index, ch)
        if replacement is not None:
            chars[index] = replacement