import io
import signal

from minishell.signals import (
    PROMPT,
    ShellState,
    handle_child,
    handle_interactive,
    install_handlers,
)


def _restore(previous):
    for signum, handler in previous.items():
        if handler is not None:
            signal.signal(signum, handler)


def test_interactive_sigint_sets_status_and_reprompts():
    state = ShellState()
    out = io.StringIO()
    handle_interactive(signal.SIGINT, state, out)
    assert state.last_exit_status == 1
    assert out.getvalue() == "\n" + PROMPT


def test_interactive_sigquit_is_silent():
    state = ShellState(last_exit_status=5)
    out = io.StringIO()
    handle_interactive(signal.SIGQUIT, state, out)
    assert state.last_exit_status == 5
    assert out.getvalue() == ""


def test_child_sigint_status():
    state = ShellState()
    out = io.StringIO()
    handle_child(signal.SIGINT, state, out)
    assert state.last_exit_status == 130
    assert out.getvalue() == ""


def test_child_sigquit_prints_quit():
    state = ShellState()
    out = io.StringIO()
    handle_child(signal.SIGQUIT, state, out)
    assert state.last_exit_status == 131
    assert out.getvalue() == "Quit: 3\n"


def test_child_ignores_sigterm():
    state = ShellState(last_exit_status=7)
    out = io.StringIO()
    handle_child(signal.SIGTERM, state, out)
    assert state.last_exit_status == 7
    assert out.getvalue() == ""


def test_install_child_handlers_route_to_state():
    state = ShellState()
    previous = install_handlers(state, is_child=True)
    try:
        assert signal.SIGINT in previous
        handler = signal.getsignal(signal.SIGINT)
        handler(signal.SIGINT, None)
        assert state.last_exit_status == 130
    finally:
        _restore(previous)


def test_install_interactive_handlers_route_to_state(capsys):
    state = ShellState()
    previous = install_handlers(state, is_child=False)
    try:
        handler = signal.getsignal(signal.SIGINT)
        handler(signal.SIGINT, None)
        assert state.last_exit_status == 1
        assert capsys.readouterr().out == "\n" + PROMPT
    finally:
        _restore(previous)


def test_install_returns_previous_handlers():
    state = ShellState()
    before = signal.getsignal(signal.SIGINT)
    previous = install_handlers(state)
    try:
        assert previous[signal.SIGINT] == before
    finally:
        _restore(previous)
    assert signal.getsignal(signal.SIGINT) == before