import pytest

from ftkit.memory import SIZE_MAX, bzero, calloc, memchr, memcmp, memcpy, memmove, memset


def test_memset_fills_prefix():
    buf = bytearray(b"Hello, World!")
    result = memset(buf, ord("a"), 5)
    assert result is buf
    assert buf[:5] == b"a" * 5
    assert buf[5:] == b", World!"


def test_memset_uses_low_byte():
    buf = bytearray(4)
    memset(buf, 0x141, 4)
    assert buf == bytes([0x41]) * 4


def test_memset_too_long():
    with pytest.raises(ValueError):
        memset(bytearray(2), 0, 3)


def test_bzero_clears_prefix():
    buf = bytearray(b"abcdef")
    bzero(buf, 3)
    assert buf == bytes(3) + b"def"


def test_memcpy_copies():
    src = b"Hello, World!"
    dst = bytearray(20)
    assert memcpy(dst, src, 13) is dst
    assert dst[:13] == src
    assert dst[13:] == bytes(7)


def test_memcpy_both_none():
    assert memcpy(None, None, 5) is None


def test_memmove_forward_overlap():
    buf = bytearray(b"abcdefgh")
    original = bytes(buf)
    memmove(buf, 2, 0, 5)
    assert buf[2:7] == original[0:5]
    assert buf[:2] == original[:2]


def test_memmove_backward_overlap():
    buf = bytearray(b"abcdefgh")
    original = bytes(buf)
    memmove(buf, 0, 2, 5)
    assert buf[0:5] == original[2:7]
    assert buf[5:] == original[5:]


def test_memmove_out_of_range():
    with pytest.raises(ValueError):
        memmove(bytearray(4), 2, 0, 3)


def test_memchr_finds_first():
    data = b"hello world"
    index = memchr(data, ord("o"), len(data))
    assert data[index] == ord("o")
    assert ord("o") not in data[:index]


def test_memchr_limited_by_n():
    assert memchr(b"hello world", ord("w"), 5) is None
    assert memchr(b"abc", ord("a") + 256, 3) == 0


def test_memcmp_equal_and_sign():
    a = b"Hello aaaWorld"
    b = b"Heaos df World"
    assert memcmp(a, a, len(a)) == 0
    assert memcmp(a, b, 2) == 0
    assert memcmp(a, b, 5) > 0
    assert memcmp(a, b, 5) == -memcmp(b, a, 5)


def test_memcmp_unsigned_bytes():
    assert memcmp(b"\xff", b"\x00", 1) > 0


def test_calloc_zeroed():
    buf = calloc(3, 4)
    assert len(buf) == 12
    assert not any(buf)


def test_calloc_overflow():
    with pytest.raises(OverflowError):
        calloc(SIZE_MAX // 10 + 1, 10)


def test_calloc_zero_count():
    assert calloc(0, 10) == bytearray()