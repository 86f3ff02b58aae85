"""A small interactive tokenizing shell and the string, memory, list, line-reading and formatting helpers behind it."""

__version__ = "0.1.0"

__all__ = [
    "chars",
    "linereader",
    "lists",
    "memory",
    "numbers",
    "output",
    "printf",
    "shell",
    "strings",
]