"""String helpers with C-string semantics: splitting, searching, trimming, slicing."""

from __future__ import annotations

from typing import Callable, List, Optional, Union

CharLike = Union[str, int]


def _char(c: CharLike) -> str:
    """Normalise a one-character string or an int (taken as a byte) to a character."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, int):
        return chr(c & 0xFF)
    raise TypeError(f"expected str or int, got {type(c).__name__}")


def _cstr(text: str) -> str:
    """The part of text before its first NUL, as a C string would see it."""
    end = text.find("\0")
    return text if end < 0 else text[:end]


def _non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


def split(text: str, delimiter: CharLike) -> List[str]:
    """Split text on delimiter, dropping empty pieces."""
    sep = _char(delimiter)
    return [word for word in _cstr(text).split(sep) if word]


def find_char(text: str, char: CharLike) -> Optional[int]:
    """Index of the first occurrence of char, or None.

    Searching for NUL finds the terminator, at index len(text).
    """
    target = _char(char)
    text = _cstr(text)
    if target == "\0":
        return len(text)
    index = text.find(target)
    return None if index < 0 else index


def rfind_char(text: str, char: CharLike) -> Optional[int]:
    """Index of the last occurrence of char, or None.

    Searching for NUL finds the terminator, at index len(text).
    """
    target = _char(char)
    text = _cstr(text)
    if target == "\0":
        return len(text)
    index = text.rfind(target)
    return None if index < 0 else index


def map_indexed(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from func(index, char) applied to every character."""
    return "".join(func(i, ch) for i, ch in enumerate(_cstr(text)))


def compare_n(s1: str, s2: str, n: int) -> int:
    """Compare at most n characters; return the difference of the first mismatch, else 0."""
    _non_negative("n", n)
    a, b = _cstr(s1), _cstr(s2)
    for i in range(n):
        x = ord(a[i]) if i < len(a) else 0
        y = ord(b[i]) if i < len(b) else 0
        if x == 0 and y == 0:
            break
        if x != y:
            return x - y
    return 0


def find_bounded(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of needle lying wholly within the first length characters of haystack.

    An empty needle is found at index 0.
    """
    _non_negative("length", length)
    needle = _cstr(needle)
    if not needle:
        return 0
    index = _cstr(haystack)[:length].find(needle)
    return None if index < 0 else index


def trim(text: str, charset: Optional[str]) -> str:
    """Remove characters in charset from both ends of text."""
    text = _cstr(text)
    if not text or charset is None:
        return text
    charset = _cstr(charset)
    return text.strip(charset) if charset else text


def substring(text: str, start: int, length: int) -> str:
    """Up to length characters of text from start; empty when start is past the end."""
    _non_negative("start", start)
    _non_negative("length", length)
    text = _cstr(text)
    if start >= len(text):
        return ""
    return text[start:start + length]