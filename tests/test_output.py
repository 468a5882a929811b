import io

import pytest

from fractol.output import put_char, put_endl, put_nbr, put_str


def test_put_char_writes_character():
    out = io.StringIO()
    put_char("x", out)
    put_char("y", out)
    assert out.getvalue() == "xy"


def test_put_char_rejects_long_string():
    with pytest.raises(ValueError):
        put_char("ab", io.StringIO())


def test_put_str_writes_text():
    out = io.StringIO()
    put_str("error\n", out)
    assert out.getvalue() == "error\n"


def test_put_str_none_writes_nothing():
    out = io.StringIO()
    put_str(None, out)
    assert out.getvalue() == ""


def test_put_endl_appends_newline():
    out = io.StringIO()
    put_endl("hello", out)
    assert out.getvalue() == "hello\n"


def test_put_endl_none_writes_only_newline():
    out = io.StringIO()
    put_endl(None, out)
    assert out.getvalue() == "\n"


@pytest.mark.parametrize("n", [0, 5, 10, -7, 2147483647, -2147483648])
def test_put_nbr_round_trip(n):
    out = io.StringIO()
    put_nbr(n, out)
    assert int(out.getvalue()) == n


def test_put_nbr_min_int_text():
    out = io.StringIO()
    put_nbr(-2147483648, out)
    assert out.getvalue() == "-2147483648"


def test_put_nbr_rejects_float():
    with pytest.raises(TypeError):
        put_nbr(1.0, io.StringIO())