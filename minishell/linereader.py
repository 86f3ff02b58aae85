"""Read a stream line by line through a fixed-size read buffer."""

from __future__ import annotations

import os
from typing import Any, Callable, Iterator, Optional, Union

BUFFER_SIZE = 42

Chunk = Union[str, bytes]


class LineReader:
    """Pull lines, newline included, from a file descriptor or a readable object.

    Data is fetched buffer_size units at a time until a newline turns up or the
    source reports end of input. Whatever follows the newline is kept for the
    next call. At end of input the remaining text is returned without a newline,
    and after that read_line returns None.
    """

    def __init__(self, source: Any, buffer_size: int = BUFFER_SIZE) -> None:
        if isinstance(buffer_size, bool) or not isinstance(buffer_size, int):
            raise TypeError(f"buffer_size must be int, got {type(buffer_size).__name__}")
        if buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")
        self.buffer_size = buffer_size
        self._read = self._reader_for(source)
        self._buffer: Optional[Chunk] = None
        self._marker: Chunk = "\n"

    @staticmethod
    def _reader_for(source: Any) -> Callable[[int], Chunk]:
        if isinstance(source, bool):
            raise TypeError("source must be a file descriptor or a readable object")
        if isinstance(source, int):
            if source < 0:
                raise ValueError(f"invalid file descriptor {source}")
            return lambda size: os.read(source, size)
        read = getattr(source, "read", None)
        if not callable(read):
            raise TypeError("source must be a file descriptor or a readable object")
        return read

    def _fill(self) -> None:
        """Read until the buffer holds a newline or the source is exhausted."""
        while self._buffer is None or self._marker not in self._buffer:
            chunk = self._read(self.buffer_size)
            if not chunk:
                return
            if isinstance(chunk, bytearray):
                chunk = bytes(chunk)
            if self._buffer is None:
                self._marker = b"\n" if isinstance(chunk, bytes) else "\n"
                self._buffer = chunk
            else:
                self._buffer = self._buffer + chunk

    def read_line(self) -> Optional[Chunk]:
        """Return the next line, newline included, or None at end of input."""
        self._fill()
        buffer = self._buffer
        if not buffer:
            self._buffer = None
            return None
        end = buffer.find(self._marker)
        if end < 0:
            self._buffer = None
            return buffer
        line, rest = buffer[: end + 1], buffer[end + 1 :]
        self._buffer = rest or None
        return line

    def __iter__(self) -> Iterator[Chunk]:
        while (line := self.read_line()) is not None:
            yield line