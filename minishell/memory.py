"""Byte-buffer operations on bytearrays, including bounded C-string copies."""

from __future__ import annotations

from typing import Optional, Union

Buffer = Union[bytes, bytearray, memoryview]


def _check(buf: Buffer, length: int, offset: int = 0) -> None:
    if length < 0 or offset < 0:
        raise ValueError("length and offset must be non-negative")
    if offset + length > len(buf):
        raise IndexError("range exceeds buffer size")


def _cstrlen(buf: Buffer) -> int:
    """Length of a NUL-terminated string held in buf (whole buffer if no NUL)."""
    data = bytes(buf)
    end = data.find(0)
    return len(data) if end < 0 else end


def memset(buf: bytearray, value: int, length: int) -> bytearray:
    """Fill the first length bytes of buf with value (taken modulo 256)."""
    _check(buf, length)
    buf[:length] = bytes([value & 0xFF]) * length
    return buf


def bzero(buf: bytearray, length: int) -> None:
    """Zero the first length bytes of buf."""
    memset(buf, 0, length)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of count * size bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must be non-negative")
    return bytearray(count * size)


def memchr(buf: Buffer, value: int, length: int) -> Optional[int]:
    """Index of the first byte equal to value within the first length bytes, or None."""
    _check(buf, length)
    index = bytes(buf[:length]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(a: Buffer, b: Buffer, length: int) -> int:
    """Difference of the first differing bytes in the first length bytes; 0 if equal."""
    _check(a, length)
    _check(b, length)
    for x, y in zip(a[:length], b[:length]):
        if x != y:
            return x - y
    return 0


def memcpy(dst: bytearray, src: Buffer, length: int) -> bytearray:
    """Copy length bytes from src into the start of dst."""
    _check(dst, length)
    _check(src, length)
    dst[:length] = bytes(src[:length])
    return dst


def memmove(buf: bytearray, dst: int, src: int, length: int) -> bytearray:
    """Copy length bytes within buf from offset src to offset dst; overlap is safe."""
    _check(buf, length, dst)
    _check(buf, length, src)
    buf[dst:dst + length] = bytes(buf[src:src + length])
    return buf


def strlcpy(dst: bytearray, src: Buffer, size: int) -> int:
    """Copy the C string src into dst, writing at most size bytes including the NUL.

    Returns the length of src.
    """
    _check(dst, size)
    src_len = _cstrlen(src)
    if size > 0:
        count = min(src_len, size - 1)
        dst[:count] = bytes(src[:count])
        dst[count] = 0
    return src_len


def strlcat(dst: bytearray, src: Buffer, size: int) -> int:
    """Append the C string src to the C string in dst, keeping the total within size.

    Returns the length the concatenation would have had, limited by size for dst.
    """
    _check(dst, size)
    src_len = _cstrlen(src)
    dst_len = min(_cstrlen(dst), size)
    if dst_len == size:
        return size + src_len
    if src_len < size - dst_len:
        dst[dst_len:dst_len + src_len] = bytes(src[:src_len])
        dst[dst_len + src_len] = 0
    else:
        count = size - dst_len - 1
        dst[dst_len:dst_len + count] = bytes(src[:count])
        dst[size - 1] = 0
    return dst_len + src_len