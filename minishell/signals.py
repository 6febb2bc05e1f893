"""Signal handling for the interactive shell and for running commands."""

from __future__ import annotations

import signal
import sys
from dataclasses import dataclass, field
from typing import Any, Callable, TextIO

from minishell.environment import Environment

PROMPT = "minishell> "

_SIGQUIT = getattr(signal, "SIGQUIT", None)
_HANDLED = tuple(
    getattr(signal, name)
    for name in ("SIGINT", "SIGQUIT", "SIGTERM")
    if hasattr(signal, name)
)


@dataclass
class ShellState:
    """Mutable state shared by the shell loop and its signal handlers."""

    last_exit_status: int = 0
    environment: Environment = field(default_factory=Environment)
    history: list[str] = field(default_factory=list)


def handle_interactive(signum: int, state: ShellState, stdout: TextIO | None = None) -> None:
    """Handle a signal at the prompt: Ctrl-C starts a fresh prompt, Ctrl-\\ does nothing."""
    stdout = sys.stdout if stdout is None else stdout
    if signum == signal.SIGINT:
        stdout.write("\n" + PROMPT)
        state.last_exit_status = 1


def handle_child(signum: int, state: ShellState, stdout: TextIO | None = None) -> None:
    """Record the status of a command stopped by Ctrl-C (130) or Ctrl-\\ (131)."""
    stdout = sys.stdout if stdout is None else stdout
    if signum == signal.SIGINT:
        state.last_exit_status = 130
    elif _SIGQUIT is not None and signum == _SIGQUIT:
        stdout.write("Quit: 3\n")
        state.last_exit_status = 131


def install_handlers(state: ShellState, is_child: bool = False) -> dict[int, Any]:
    """Install handlers for SIGINT, SIGQUIT and SIGTERM; return the previous handlers."""
    handle: Callable[[int, ShellState, TextIO | None], None] = (
        handle_child if is_child else handle_interactive
    )

    def _dispatch(signum: int, frame: object) -> None:
        handle(signum, state, sys.stdout)
        sys.stdout.flush()

    return {signum: signal.signal(signum, _dispatch) for signum in _HANDLED}