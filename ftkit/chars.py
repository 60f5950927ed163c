"""ASCII character classification and case conversion.

Every function takes either an integer character code or a one-character
string. The conversion functions hand back a value of the kind they were
given.
"""

from __future__ import annotations

from typing import Union

Char = Union[int, str]


def _code(c: Char) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return int(c)


def _same_kind(original: Char, code: int) -> Char:
    return chr(code) if isinstance(original, str) else code


def isalpha(c: Char) -> bool:
    """True for an ASCII letter."""
    code = _code(c)
    return 65 <= code <= 90 or 97 <= code <= 122


def isdigit(c: Char) -> bool:
    """True for an ASCII decimal digit."""
    return 48 <= _code(c) <= 57


def isalnum(c: Char) -> bool:
    """True for an ASCII letter or digit."""
    return isalpha(c) or isdigit(c)


def isascii(c: Char) -> bool:
    """True for a code in the range 0-127."""
    return 0 <= _code(c) <= 127


def isprint(c: Char) -> bool:
    """True for a printable ASCII character, space included."""
    return 32 <= _code(c) <= 126


def toupper(c: Char) -> Char:
    """Map an ASCII lower-case letter to upper case; anything else is returned as is."""
    code = _code(c)
    if 97 <= code <= 122:
        code -= 32
    return _same_kind(c, code)


def tolower(c: Char) -> Char:
    """Map an ASCII upper-case letter to lower case; anything else is returned as is."""
    code = _code(c)
    if 65 <= code <= 90:
        code += 32
    return _same_kind(c, code)