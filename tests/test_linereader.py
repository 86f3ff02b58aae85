import io
import os

import pytest

from minishell.linereader import BUFFER_SIZE, LineReader


def test_default_buffer_size():
    reader = LineReader(io.StringIO(""))
    assert reader.buffer_size == BUFFER_SIZE == 42


def test_reads_text_lines_with_newlines():
    reader = LineReader(io.StringIO("first\nsecond\nthird"))
    assert reader.read_line() == "first\n"
    assert reader.read_line() == "second\n"
    assert reader.read_line() == "third"
    assert reader.read_line() is None


def test_reads_bytes():
    reader = LineReader(io.BytesIO(b"abc\ndef\n"), 2)
    assert list(reader) == [b"abc\n", b"def\n"]


def test_empty_source_gives_none_repeatedly():
    reader = LineReader(io.StringIO(""))
    assert reader.read_line() is None
    assert reader.read_line() is None


def test_blank_lines_are_kept():
    reader = LineReader(io.StringIO("\n\nx\n"), 1)
    assert list(reader) == ["\n", "\n", "x\n"]


@pytest.mark.parametrize("size", [1, 2, 3, 5, 15, 42, 1000])
def test_lines_rejoin_to_input(size):
    data = "alpha\nbeta gamma\n\ndelta\nlast without newline"
    lines = list(LineReader(io.StringIO(data), size))
    assert "".join(lines) == data
    assert all(line.endswith("\n") for line in lines[:-1])
    assert lines[-1] == "last without newline"


def test_file_descriptor_source():
    read_fd, write_fd = os.pipe()
    try:
        os.write(write_fd, b"one\ntwo\n")
        os.close(write_fd)
        reader = LineReader(read_fd, 3)
        assert list(reader) == [b"one\n", b"two\n"]
    finally:
        os.close(read_fd)


def test_non_positive_buffer_size_rejected():
    with pytest.raises(ValueError):
        LineReader(io.StringIO("x"), 0)
    with pytest.raises(ValueError):
        LineReader(io.StringIO("x"), -3)


def test_negative_descriptor_rejected():
    with pytest.raises(ValueError):
        LineReader(-1)


def test_unreadable_source_rejected():
    with pytest.raises(TypeError):
        LineReader(object())


def test_read_error_propagates():
    class Broken:
        def read(self, size):
            raise OSError("boom")

    reader = LineReader(Broken())
    with pytest.raises(OSError):
        reader.read_line()