"""A small printf supporting %c %s %p %d %i %u %x %X and %%."""

from __future__ import annotations

from typing import Any, Iterator, Optional, TextIO

from minishell.numbers import itoa
from minishell.output import put_str

_UINT_MASK = 0xFFFFFFFF
_ULONG_MASK = 0xFFFFFFFFFFFFFFFF


def _as_int(value: Any, spec: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"%{spec} expects an int, got {type(value).__name__}")
    return value


def _int32(value: int) -> int:
    value &= _UINT_MASK
    return value - 0x100000000 if value > 0x7FFFFFFF else value


def _convert_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError(f"%c expects a single character, got {value!r}")
        return value
    return chr(_as_int(value, "c") & 0xFF)


def _convert_str(value: Any) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"%s expects a str, got {type(value).__name__}")
    return value


def _convert_ptr(value: Any) -> str:
    if value is None:
        return "(nil)"
    address = _as_int(value, "p") & _ULONG_MASK
    if address == 0:
        return "(nil)"
    return f"0x{address:x}"


def _pieces(fmt: str, args: tuple) -> Iterator[str]:
    remaining = iter(args)

    def take(spec: str) -> Any:
        try:
            return next(remaining)
        except StopIteration:
            raise TypeError(f"not enough arguments for %{spec}") from None

    chars = iter(fmt)
    for ch in chars:
        if ch == "\0":
            return
        if ch != "%":
            yield ch
            continue
        spec = next(chars, "")
        if spec in ("", "\0"):
            yield "%"
            return
        if spec == "%":
            yield "%"
        elif spec == "c":
            yield _convert_char(take(spec))
        elif spec == "s":
            yield _convert_str(take(spec))
        elif spec == "p":
            yield _convert_ptr(take(spec))
        elif spec in ("d", "i"):
            yield itoa(_int32(_as_int(take(spec), spec)))
        elif spec == "u":
            yield str(_as_int(take(spec), spec) & _UINT_MASK)
        elif spec == "x":
            yield f"{_as_int(take(spec), spec) & _UINT_MASK:x}"
        elif spec == "X":
            yield f"{_as_int(take(spec), spec) & _UINT_MASK:X}"
        else:
            # An unknown conversion prints a bare '%' and drops its letter.
            yield "%"


def format_string(fmt: str, *args: Any) -> str:
    """Expand fmt with args and return the resulting text."""
    if not isinstance(fmt, str):
        raise TypeError(f"format must be str, got {type(fmt).__name__}")
    return "".join(_pieces(fmt, args))


def printf(fmt: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write fmt expanded with args to stream (stdout by default); return characters written."""
    text = format_string(fmt, *args)
    put_str(text, stream)
    return len(text)