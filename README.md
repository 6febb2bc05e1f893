# minishell

A small interactive shell with bash-style builtins: `echo`, `cd`, `pwd`,
`export`, `unset`, `env` and `exit`. It keeps its own environment table,
prints `export` listings in `declare -x` form, and handles Ctrl-C and Ctrl-\
at the prompt.

## Installation

```
pip install .
```

## Running the shell

```
minishell
```

The shell starts with a copy of the process environment, shows a
`minishell> ` prompt and reads one line at a time. Each line is split on
whitespace; the first word names the builtin to run. The session ends with
`exit [N]`, or with Ctrl-D, which prints `exit`.

At the prompt, Ctrl-C prints a new line and a fresh prompt and sets the last
exit status to 1; Ctrl-\ is ignored.

## What it does not do

The shell only runs its own builtins. It does not start other programs: any
other command prints `minishell: <name>: command not found` and sets the
status to 127. There is no quoting, variable expansion, pipes, redirection or
command history file.

## Using it as a library

The pieces work on their own as well:

```python
import io

from minishell.environment import Environment
from minishell.builtins import builtin_echo, parse_exit_code

env = Environment.from_entries(["HOME=/home/user", "PATH=/usr/bin:/bin"])
env.assign("EDITOR=vim")
print(env.get("EDITOR"))          # vim
print(env.export_lines())         # declare -x lines in alphabetical order

out = io.StringIO()
builtin_echo(["echo", "-n", "hello", "world"], out)
print(repr(out.getvalue()))       # 'hello world'

print(parse_exit_code(" -42 "))   # -42
```

`Environment.assign` raises `ValueError` for a name that is not a valid
identifier; `parse_exit_code` raises `ValueError` for text that is not a
signed 64-bit integer. `builtin_exit` raises `SystemExit` with the status
reduced modulo 256 (so `exit 300` leaves with 44), or returns 1 when given
too many arguments.

Other modules:

- `minishell.shell` – `run_loop(lines, stdout, state)` runs the prompt loop
  over any iterable of lines and returns the exit status; `main()` is the
  command.
- `minishell.signals` – `ShellState`, `handle_interactive`, `handle_child`
  and `install_handlers`.
- `minishell.text` – `split`, `substr`, `find_char`, `strncmp` and a buffered
  `LineReader` that yields newline-terminated lines from a stream.
- `minishell.numbers` – `atoi`, `atol`, `is_digit`, `is_operator`,
  `nearest_sqrt`, `format_hex`, `format_int`, `format_unsigned` and
  `format_pointer`, with 32- and 64-bit integer wrap-around.

## Running the tests

```
pip install ".[test]"
pytest
```