# minishell

A small interactive shell. Each line you type is split on spaces into
tokens, and the tokens are echoed back numbered from 1. End the session
with Ctrl+D, which prints `exit`.

## Installing

```
pip install .
```

## Running

```
minishell
```

A session looks like this:

```
minishell$ grep main  file.c
Token[ 1 ]: grep
Token[ 2 ]: main
Token[ 3 ]: file.c
minishell$ exit
```

Runs of spaces count as a single separator, and leading or trailing spaces
produce no tokens. Where Python's `readline` module is available, the
prompt has line editing and recall of earlier lines.

## What it does not do

The shell only tokenizes. It does not run commands, and it gives no special
meaning to quotes, `|`, `<`, `>`, `>>` or `$`: they are ordinary characters
inside tokens. `minishell.shell.Command` has `infile`, `outfile`, `append`
and `next` fields for redirections and pipelines, but nothing fills them in.
There are no built-in commands and no environment handling.

## Using the shell from Python

- `parse_and_execute(line, command)` sets `command.args` to the space-split
  tokens of `line` and returns the `Command`.
- `format_tokens(tokens)` returns the `Token[ n ]: ...` lines as one string.
- `repl(read, output=None)` calls `read(prompt)` until it returns `None` or
  raises `EOFError`, writes the tokens of each line to `output` (stdout by
  default), writes `exit` at the end, and returns the list of lines read.
- `main(argv=None)` runs `repl` on the terminal.

```python
import io
from minishell.shell import repl

lines = iter(["echo hi", None])
out = io.StringIO()
history = repl(lambda prompt: next(lines), out)
# history == ["echo hi"]
# out.getvalue() == "Token[ 1 ]: echo\nToken[ 2 ]: hi\nexit\n"
```

## Library

The package also includes the helpers the shell is built on:

- `minishell.chars`: ASCII classification and case conversion (`is_alpha`,
  `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `to_upper`, `to_lower`),
  taking a one-character string or an integer code.
- `minishell.memory`: buffer operations on `bytearray` (`memset`, `bzero`,
  `calloc`, `memchr`, `memcmp`, `memcpy`, `memmove`) and the bounded
  NUL-terminated copies `strlcpy` and `strlcat`.
- `minishell.strings`: `split`, `find_char`, `rfind_char`, `map_indexed`,
  `compare_n`, `find_bounded`, `trim`, `substring`. Text after a NUL
  character is ignored, as in a C string.
- `minishell.lists`: `LinkedList`, a singly linked list of `Node`s, with
  `add_front`, `add_back`, `last`, `for_each`, `map`, `clear`, `len()` and
  iteration.
- `minishell.output`: `put_char`, `put_str`, `put_endl`, `put_nbr`, writing
  to a text stream (stdout by default).
- `minishell.numbers`: `atoi` and `itoa`, working with 32-bit signed
  integers.
- `minishell.printf`: `format_string` and `printf`, supporting
  `%c %s %p %d %i %u %x %X %%`. An unknown conversion prints `%` and drops
  its letter; `printf` returns the number of characters written.
- `minishell.linereader`: `LineReader`, which reads lines (newline included)
  from a file descriptor or any object with a `read` method, text or binary,
  fetching `buffer_size` units at a time (42 by default).

```python
import io
from minishell.linereader import LineReader
from minishell.printf import format_string
from minishell.strings import split

split("ls  -la /tmp", " ")               # ['ls', '-la', '/tmp']
format_string("%d items, %x", 42, 255)   # '42 items, ff'
list(LineReader(io.StringIO("a\nb")))    # ['a\n', 'b']
```

## Tests

```
pip install ".[test]"
pytest
```