import string

import pytest

from ftkit.chars import isalnum, isalpha, isascii, isdigit, isprint, tolower, toupper

ASCII = range(128)


def test_isalpha_matches_ascii_letters():
    for code in range(-5, 300):
        assert isalpha(code) == (0 <= code < 128 and chr(code) in string.ascii_letters)


def test_isdigit_matches_ascii_digits():
    for code in range(-5, 300):
        assert isdigit(code) == (0 <= code < 128 and chr(code) in string.digits)


def test_isalnum_is_union_of_alpha_and_digit():
    for code in range(-5, 300):
        assert isalnum(code) == (isalpha(code) or isdigit(code))


def test_isascii_bounds():
    assert isascii(0)
    assert isascii(127)
    assert not isascii(128)
    assert not isascii(-1)


def test_isprint_matches_printable_without_controls():
    printable = set(string.printable) - set("\t\n\r\x0b\x0c")
    for code in ASCII:
        assert isprint(code) == (chr(code) in printable)
    assert not isprint(127)


def test_accepts_strings():
    assert isalpha("q")
    assert not isalpha("5")
    assert isdigit("5")
    assert isprint(" ")


def test_rejects_multi_character_strings():
    with pytest.raises(ValueError):
        isalpha("ab")
    with pytest.raises(ValueError):
        toupper("")


def test_toupper_matches_ascii_upper():
    for code in ASCII:
        assert toupper(chr(code)) == chr(code).upper() if chr(code) in string.ascii_letters else True
        if chr(code) not in string.ascii_lowercase:
            assert toupper(code) == code


def test_tolower_matches_ascii_lower():
    for ch in string.ascii_uppercase:
        assert tolower(ch) == ch.lower()
    for ch in string.digits + string.punctuation:
        assert tolower(ch) == ch


def test_case_round_trip():
    for ch in string.ascii_lowercase:
        assert tolower(toupper(ch)) == ch
    for ch in string.ascii_uppercase:
        assert toupper(tolower(ch)) == ch


def test_conversion_keeps_kind():
    assert toupper(ord("a")) == ord("A")
    assert tolower("Z") == "z"
    assert toupper(300) == 300