"""The interactive read-and-run loop of the shell."""

from __future__ import annotations

import argparse
import os
import signal
import sys
from collections.abc import Iterable, Iterator, MutableMapping
from typing import TextIO

from minishell.builtins import (
    builtin_cd,
    builtin_echo,
    builtin_env,
    builtin_exit,
    builtin_export,
    builtin_pwd,
    builtin_unset,
)
from minishell.environment import Environment
from minishell.signals import PROMPT, ShellState, install_handlers

_NOT_FOUND = 127


class _EnvironmentMapping(MutableMapping[str, str]):
    """A mapping view of an Environment for commands that read and set variables."""

    def __init__(self, environment: Environment) -> None:
        self._environment = environment

    def __getitem__(self, key: str) -> str:
        value = self._environment.get(key)
        if value is None:
            raise KeyError(key)
        return value

    def __setitem__(self, key: str, value: str) -> None:
        self._environment.set(key, value)

    def __delitem__(self, key: str) -> None:
        if not self._environment.unset(key):
            raise KeyError(key)

    def __iter__(self) -> Iterator[str]:
        return (var.name for var in self._environment if var.value is not None)

    def __len__(self) -> int:
        return sum(1 for _ in self)


def _run_command(words: list[str], state: ShellState, stdout: TextIO) -> int:
    environ = _EnvironmentMapping(state.environment)
    command = words[0]
    if command == "echo":
        return builtin_echo(words, stdout)
    if command == "cd":
        return builtin_cd(words, environ, sys.stderr)
    if command == "pwd":
        return builtin_pwd(environ, stdout, sys.stderr)
    if command == "export":
        return builtin_export(words, state.environment, stdout)
    if command == "unset":
        return builtin_unset(words, state.environment)
    if command == "env":
        return builtin_env(words, state.environment, stdout)
    if command == "exit":
        return builtin_exit(words, stdout)
    sys.stderr.write(f"minishell: {command}: command not found\n")
    return _NOT_FOUND


def run_loop(
    lines: Iterable[str],
    stdout: TextIO | None = None,
    state: ShellState | None = None,
) -> int:
    """Prompt for and run each line until input ends or ``exit``; return the exit status."""
    stdout = sys.stdout if stdout is None else stdout
    state = ShellState() if state is None else state
    source = iter(lines)
    while True:
        stdout.write(PROMPT)
        stdout.flush()
        line = next(source, None)
        if line is None:
            stdout.write("exit\n")
            return state.last_exit_status
        line = line.rstrip("\n")
        if not line:
            continue
        state.history.append(line)
        words = line.split()
        if not words:
            continue
        try:
            state.last_exit_status = _run_command(words, state, stdout)
        except SystemExit as exc:
            state.last_exit_status = exc.code if isinstance(exc.code, int) else 0
            return state.last_exit_status


def main(argv: list[str] | None = None) -> int:
    """Run the shell on standard input with the process environment."""
    parser = argparse.ArgumentParser(prog="minishell", description="A small interactive shell.")
    parser.parse_args(argv)
    state = ShellState(
        environment=Environment.from_entries(f"{key}={value}" for key, value in os.environ.items())
    )
    previous = install_handlers(state, is_child=False)
    try:
        return run_loop(iter(sys.stdin.readline, ""), sys.stdout, state)
    finally:
        for signum, handler in previous.items():
            if handler is not None:
                signal.signal(signum, handler)


if __name__ == "__main__":
    raise SystemExit(main())