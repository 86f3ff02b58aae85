"""Conversions between decimal text and 32-bit signed integers."""

from __future__ import annotations

INT_MIN = -2147483648
INT_MAX = 2147483647

_SPACES = frozenset("\t\n\v\f\r ")


def _wrap_int32(value: int) -> int:
    """Reduce value to the range of a 32-bit signed integer, wrapping around."""
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value > INT_MAX else value


def atoi(text: str) -> int:
    """Parse a leading decimal integer from text.

    Leading whitespace is skipped. A single '-' makes the number negative. A '+'
    is skipped unless a '-' follows it, in which case nothing is parsed and the
    result is 0. Parsing stops at the first non-digit. The result wraps to the
    range of a 32-bit signed integer.
    """
    if not isinstance(text, str):
        raise TypeError(f"expected str, got {type(text).__name__}")
    end = text.find("\0")
    if end >= 0:
        text = text[:end]
    rest = text.lstrip("".join(_SPACES))
    sign = 1
    if rest.startswith("+") and not rest.startswith("+-"):
        rest = rest[1:]
    if rest.startswith("-"):
        sign = -1
        rest = rest[1:]
    result = 0
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        result = _wrap_int32(result * 10 + (ord(ch) - ord("0")))
    return _wrap_int32(result * sign)


def itoa(n: int) -> str:
    """Render a 32-bit signed integer in decimal."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected int, got {type(n).__name__}")
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    return str(n)