"""Built-in commands: echo, cd, pwd, exit, export, unset and env."""

from __future__ import annotations

import os
from collections.abc import MutableMapping, Sequence
from typing import TextIO

from minishell.environment import Environment
from minishell.text import strncmp

_TRIM = " \f\r\n\t\v"
_DIGITS = frozenset("0123456789")
_LLONG_MAX = (1 << 63) - 1
_LLONG_MIN = -(1 << 63)
_PROTECTED = frozenset({"_", "?"})


def builtin_echo(args: Sequence[str], stdout: TextIO) -> int:
    """Print the arguments separated by spaces; a leading ``-n`` drops the newline."""
    words = list(args[1:])
    newline = True
    if words and strncmp(words[0], "-n", 2) == 0:
        newline = False
        words = words[1:]
    stdout.write(" ".join(words))
    if newline:
        stdout.write("\n")
    return 0


def builtin_cd(
    args: Sequence[str], environ: MutableMapping[str, str], stderr: TextIO
) -> int:
    """Change directory to the argument or to ``HOME``, updating ``PWD`` and ``OLDPWD``."""
    if len(args) > 2:
        stderr.write("minishell: cd: too many arguments\n")
        return 1
    target = args[1] if len(args) == 2 else environ.get("HOME")
    if target is not None:
        try:
            os.chdir(target)
        except OSError as exc:
            stderr.write(f"minishell: cd: {exc.strerror}\n")
            return 1
    previous = environ.get("PWD")
    if previous is not None:
        environ["OLDPWD"] = previous
    try:
        environ["PWD"] = os.getcwd()
    except OSError as exc:
        stderr.write(f"getcwd: {exc.strerror}\n")
    return 0


def builtin_pwd(
    environ: MutableMapping[str, str], stdout: TextIO, stderr: TextIO
) -> int:
    """Print the working directory, falling back to ``PWD`` when it cannot be read."""
    try:
        cwd = os.getcwd()
    except OSError as exc:
        fallback = environ.get("PWD")
        if fallback is None:
            stderr.write(f"pwd: {exc.strerror}\n")
            return 1
        cwd = fallback
    stdout.write(cwd + "\n")
    return 0


def parse_exit_code(text: str) -> int:
    """Parse an ``exit`` argument as a signed 64-bit integer.

    Surrounding whitespace is ignored. Raises ValueError when the text is not
    a number or does not fit in a signed 64-bit integer.
    """
    trimmed = text.strip(_TRIM)
    sign = -1 if trimmed[:1] == "-" else 1
    digits = trimmed[1:] if trimmed[:1] in ("+", "-") else trimmed
    if not digits or not set(digits) <= _DIGITS:
        raise ValueError(f"{text}: numeric argument required")
    value = sign * int(digits)
    if not _LLONG_MIN <= value <= _LLONG_MAX:
        raise ValueError(f"{text}: numeric argument required")
    return value


def builtin_exit(args: Sequence[str], stdout: TextIO) -> int:
    """Leave the shell by raising SystemExit with the status taken from the argument.

    With more than one argument nothing is left: an error is printed and 1
    is returned.
    """
    if len(args) <= 1:
        raise SystemExit(0)
    try:
        code = parse_exit_code(args[1])
    except ValueError:
        stdout.write("exit\n")
        stdout.write(f"minishell: exit: {args[1]}: numeric argument required\n")
        raise SystemExit(2) from None
    if len(args) > 2:
        stdout.write("exit\n")
        stdout.write("minishell: exit: too many arguments\n")
        return 1
    raise SystemExit(code % 256)


def builtin_export(
    args: Sequence[str], environment: Environment, stdout: TextIO
) -> int:
    """List variables as ``declare -x`` lines, or assign each ``NAME[=VALUE]`` argument."""
    if len(args) < 2:
        for line in environment.export_lines():
            stdout.write(line + "\n")
        return 0
    status = 0
    for entry in args[1:]:
        try:
            environment.assign(entry)
        except ValueError as exc:
            stdout.write(f"minishell: export: {exc}\n")
            status = 1
    return status


def builtin_unset(args: Sequence[str], environment: Environment) -> int:
    """Remove each named variable; ``_`` and ``?`` are left alone."""
    for name in args[1:]:
        if name not in _PROTECTED:
            environment.unset(name)
    return 0


def builtin_env(args: Sequence[str], environment: Environment, stdout: TextIO) -> int:
    """Print ``NAME=VALUE`` for every variable with a value; arguments are refused."""
    if len(args) > 1:
        stdout.write("minishell: env: Args not allowed\n")
        return 1
    for line in environment.env_lines():
        stdout.write(line + "\n")
    return 0