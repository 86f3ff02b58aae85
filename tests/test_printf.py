import io

import pytest

from minishell.numbers import itoa
from minishell.printf import format_string, printf


def test_plain_text_passes_through():
    assert format_string("hello world") == "hello world"


def test_percent_escape():
    assert format_string("100%%") == "100%"


def test_null_string():
    assert format_string("%s", None) == "(null)"


def test_null_pointer():
    assert format_string("%p", None) == "(nil)"
    assert format_string("%p", 0) == "(nil)"


def test_pointer_is_prefixed_hex():
    out = format_string("%p", 255)
    assert out.startswith("0x")
    assert int(out[2:], 16) == 255
    assert out[2:] == out[2:].lower()


def test_char_from_str_and_int():
    assert format_string("%c", "A") == "A"
    assert format_string("%c", 65) == chr(65)


@pytest.mark.parametrize("n", [0, 7, -7, 2147483647, -2147483648])
def test_decimal_matches_itoa(n):
    assert format_string("%d", n) == itoa(n)
    assert format_string("%i", n) == itoa(n)


def test_decimal_int_min():
    assert format_string("%d", -2147483648) == "-2147483648"


@pytest.mark.parametrize("n", [0, 1, 255, 4096, 123456789])
def test_hex_round_trip(n):
    lower = format_string("%x", n)
    upper = format_string("%X", n)
    assert int(lower, 16) == n
    assert int(upper, 16) == n
    assert lower == lower.lower()
    assert upper == upper.upper()


def test_unsigned_wraps_negative():
    assert int(format_string("%u", -1)) == 2 ** 32 - 1
    assert int(format_string("%x", -1), 16) == int(format_string("%u", -1))


def test_unknown_conversion_drops_letter():
    assert format_string("a%zb") == "a%b"


def test_trailing_percent():
    assert format_string("x%") == "x%"


def test_concatenation_invariant():
    assert format_string("%s%d", "ab", 3) == format_string("%s", "ab") + format_string("%d", 3)


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        format_string("%d")


def test_wrong_argument_type_raises():
    with pytest.raises(TypeError):
        format_string("%d", "5")
    with pytest.raises(TypeError):
        format_string("%s", 5)


def test_printf_writes_and_counts():
    stream = io.StringIO()
    count = printf("%s=%d%%", "key", 12, stream=stream)
    written = stream.getvalue()
    assert written == format_string("%s=%d%%", "key", 12)
    assert count == len(written)


def test_printf_counts_nul_char():
    stream = io.StringIO()
    assert printf("%c", 0, stream=stream) == 1
    assert stream.getvalue() == "\0"