"""Byte-buffer operations over bytearray-like objects."""

from __future__ import annotations

from typing import Optional

SIZE_MAX = 2**64 - 1


def _check_length(buf, n: int, what: str = "buffer") -> None:
    if n < 0:
        raise ValueError("length must not be negative")
    if n > len(buf):
        raise ValueError(f"{what} holds {len(buf)} bytes, {n} requested")


def memset(buf: bytearray, c: int, n: int) -> bytearray:
    """Fill the first n bytes of buf with the low byte of c and return buf."""
    _check_length(buf, n)
    buf[:n] = bytes([c & 0xFF]) * n
    return buf


def bzero(buf: bytearray, n: int) -> bytearray:
    """Zero the first n bytes of buf and return buf."""
    return memset(buf, 0, n)


def memcpy(dst: Optional[bytearray], src, n: int) -> Optional[bytearray]:
    """Copy n bytes from src to the start of dst and return dst.

    When both are None, None is returned.
    """
    if dst is None and src is None:
        return None
    _check_length(src, n, "source")
    _check_length(dst, n, "destination")
    dst[:n] = bytes(src[:n])
    return dst


def memmove(buf: bytearray, dst: int, src: int, n: int) -> bytearray:
    """Copy n bytes within buf from offset src to offset dst, overlap allowed."""
    if dst < 0 or src < 0 or n < 0:
        raise ValueError("offsets and length must not be negative")
    if src + n > len(buf) or dst + n > len(buf):
        raise ValueError("range lies outside the buffer")
    buf[dst:dst + n] = bytes(buf[src:src + n])
    return buf


def memchr(s, c: int, n: int) -> Optional[int]:
    """Index of the first byte equal to the low byte of c among the first n, or None."""
    _check_length(s, n)
    index = bytes(s[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(s1, s2, n: int) -> int:
    """Difference of the first differing bytes within n, or 0 when they agree."""
    _check_length(s1, n)
    _check_length(s2, n)
    for a, b in zip(s1[:n], s2[:n]):
        if a != b:
            return a - b
    return 0


def calloc(count: int, size: int) -> bytearray:
    """A zero-filled buffer of count * size bytes.

    Raises OverflowError when the product does not fit in a 64-bit size.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if count and size > SIZE_MAX // count:
        raise OverflowError("count * size overflows")
    return bytearray(count * size)