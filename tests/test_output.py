import io

import pytest

from minishell.output import put_char, put_endl, put_nbr, put_str


def test_put_char():
    buf = io.StringIO()
    put_char("z", buf)
    assert buf.getvalue() == "z"


def test_put_char_rejects_longer_string():
    with pytest.raises(ValueError):
        put_char("ab", io.StringIO())


def test_put_str():
    buf = io.StringIO()
    put_str("hello world", buf)
    assert buf.getvalue() == "hello world"


def test_put_str_empty():
    buf = io.StringIO()
    put_str("", buf)
    assert buf.getvalue() == ""


def test_put_str_rejects_none():
    with pytest.raises(TypeError):
        put_str(None, io.StringIO())


def test_put_endl_adds_newline():
    buf = io.StringIO()
    put_endl("line", buf)
    out = buf.getvalue()
    assert out.endswith("\n")
    assert out[:-1] == "line"


@pytest.mark.parametrize("n", [0, 7, 42, -5, 2147483647, -1234])
def test_put_nbr_round_trip(n):
    buf = io.StringIO()
    put_nbr(n, buf)
    assert int(buf.getvalue()) == n


def test_put_nbr_int_min():
    buf = io.StringIO()
    put_nbr(-2147483648, buf)
    assert buf.getvalue() == "-2147483648"


def test_put_nbr_rejects_non_int():
    with pytest.raises(TypeError):
        put_nbr("12", io.StringIO())


def test_writes_accumulate_on_stream():
    buf = io.StringIO()
    put_str("ab", buf)
    put_char("c", buf)
    put_nbr(9, buf)
    put_endl("", buf)
    assert buf.getvalue() == "abc9\n"


def test_defaults_to_stdout(capsys):
    put_str("out")
    assert capsys.readouterr().out == "out"