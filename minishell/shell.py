"""Interactive prompt loop that reads command lines and splits them into tokens."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Sequence, TextIO

from minishell.strings import split

PROMPT = "\033[35mminishell\033[32m$ \033[0m"


@dataclass
class Command:
    """One command of a pipeline."""

    args: List[str] = field(default_factory=list)
    infile: Optional[str] = None
    outfile: Optional[str] = None
    # None until a '>' (False) or '>>' (True) redirection is seen.
    append: Optional[bool] = None
    next: Optional["Command"] = None


def parse_and_execute(line: str, command: Command) -> Command:
    """Split line on spaces into the command's arguments."""
    command.args = split(line, " ")
    return command


def format_tokens(tokens: Sequence[str]) -> str:
    """Render tokens one per line, numbered from 1."""
    return "".join(f"Token[ {i} ]: {token}\n" for i, token in enumerate(tokens, 1))


def repl(
    read: Callable[[str], Optional[str]],
    output: Optional[TextIO] = None,
) -> List[str]:
    """Prompt for lines until read returns None or raises EOFError.

    Each line is recorded in the returned history, tokenised and its tokens
    printed. At end of input "exit" is printed.
    """
    out = sys.stdout if output is None else output
    command = Command()
    history: List[str] = []
    while True:
        try:
            line = read(PROMPT)
        except EOFError:
            line = None
        if line is None:
            out.write("exit\n")
            break
        history.append(line)
        parse_and_execute(line, command)
        out.write(format_tokens(command.args))
        command.args = []
    return history


def _read_input(prompt: str) -> Optional[str]:
    try:
        return input(prompt)
    except EOFError:
        return None


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the interactive loop on the terminal."""
    try:
        import readline  # noqa: F401  (line editing and history for input())
    except ImportError:
        pass
    repl(_read_input, sys.stdout)
    return 0