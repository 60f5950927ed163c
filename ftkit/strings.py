"""String helpers with C-library semantics: bounded copies, searches and trims.

Positions are returned as indices into the string, with None where nothing
is found. Functions that write into a fixed-size destination return the new
text together with the length they would have liked to produce.
"""

from __future__ import annotations

from itertools import chain, islice, repeat
from typing import Optional, Tuple, Union

Char = Union[int, str]


def _char(c: Char) -> str:
    """The character a search looks for; integers are narrowed to one byte."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(int(c) & 0xFF)


def _non_negative(value: int, name: str) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative")


def strlen(s: str) -> int:
    """Number of characters in s."""
    return len(s)


def strlcpy(src: str, dstsize: int) -> Tuple[str, int]:
    """Copy src into a destination of dstsize slots, one kept for the terminator.

    Returns the text that fits and the full length of src, so truncation
    shows as a second value that is not less than dstsize.
    """
    _non_negative(dstsize, "dstsize")
    if dstsize == 0:
        return "", len(src)
    return src[:dstsize - 1], len(src)


def strlcat(dst: str, src: str, dstsize: int) -> Tuple[str, int]:
    """Append src to dst within a destination of dstsize slots.

    Returns the resulting text and the length that was attempted. When dst
    already fills dstsize, dst is returned unchanged with dstsize + len(src).
    """
    _non_negative(dstsize, "dstsize")
    if dstsize <= len(dst):
        return dst, dstsize + len(src)
    room = dstsize - 1 - len(dst)
    return dst + src[:room], len(dst) + len(src)


def strchr(s: str, c: Char) -> Optional[int]:
    """Index of the first occurrence of c in s.

    Searching for the NUL character gives the index just past the end.
    """
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: Char) -> Optional[int]:
    """Index of the last occurrence of c in s.

    Searching for the NUL character gives the index just past the end.
    """
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of needle lying wholly within the first length characters of haystack.

    An empty needle is found at index 0.
    """
    _non_negative(length, "length")
    if not needle:
        return 0
    if length == 0:
        return None
    index = haystack.find(needle, 0, min(length, len(haystack)))
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most n characters; the end of a string compares as code 0.

    Returns the difference of the first differing codes, or 0.
    """
    _non_negative(n, "n")
    codes1 = islice(chain(map(ord, s1), repeat(0)), n)
    codes2 = islice(chain(map(ord, s2), repeat(0)), n)
    for a, b in zip(codes1, codes2):
        if a != b or a == 0:
            return a - b
    return 0


def strdup(s: str) -> str:
    """An independent copy of s."""
    if not isinstance(s, str):
        raise TypeError(f"expected a string, got {type(s).__name__}")
    return "".join(s)


def substr(s: str, start: int, length: int) -> str:
    """Up to length characters of s beginning at start; empty past the end."""
    _non_negative(start, "start")
    _non_negative(length, "length")
    if len(s) <= start:
        return ""
    return s[start:start + length]


def strjoin(s1: Optional[str], s2: Optional[str]) -> Optional[str]:
    """s1 followed by s2, or None when either is missing."""
    if s1 is None or s2 is None:
        return None
    return s1 + s2


def strtrim(s: Optional[str], charset: str) -> Optional[str]:
    """s with every leading and trailing character found in charset removed."""
    if s is None:
        return None
    return s.strip(charset)