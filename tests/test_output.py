import io

import pytest

from ftkit.output import put_char, put_endl, put_nbr, put_str


def test_put_char():
    stream = io.StringIO()
    put_char("c", stream)
    assert stream.getvalue() == "c"


def test_put_char_rejects_strings():
    with pytest.raises(ValueError):
        put_char("ab", io.StringIO())


def test_put_str():
    text = "Hello, World!"
    stream = io.StringIO()
    put_str(text, stream)
    assert stream.getvalue() == text


def test_put_str_none_writes_nothing():
    stream = io.StringIO()
    put_str(None, stream)
    assert stream.getvalue() == ""


def test_put_endl_appends_newline():
    text = "Hello, World!"
    stream = io.StringIO()
    put_endl(text, stream)
    assert stream.getvalue() == text + "\n"

    empty = io.StringIO()
    put_endl(None, empty)
    assert empty.getvalue() == ""


@pytest.mark.parametrize("n", [0, 42, -7, 2147483647, -2147483648])
def test_put_nbr_matches_decimal(n):
    stream = io.StringIO()
    put_nbr(n, stream)
    assert stream.getvalue() == str(n)


def test_put_nbr_int_min():
    stream = io.StringIO()
    put_nbr(-2147483648, stream)
    assert stream.getvalue() == "-2147483648"


def test_default_stream_is_stdout(capsys):
    put_str("abc")
    put_nbr(42)
    assert capsys.readouterr().out == "abc42"