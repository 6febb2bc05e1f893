"""String helpers and a buffered line reader."""

from __future__ import annotations

from itertools import islice, zip_longest
from typing import IO, AnyStr, Generic, Iterator

BUFFER_SIZE = 1024


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the single character ``sep``, dropping empty words."""
    if not sep:
        return [text] if text else []
    return [word for word in text.split(sep) if word]


def substr(text: str, start: int, length: int) -> str:
    """Return up to ``length`` characters of ``text`` from ``start``.

    A start at or past the end gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start:start + length]


def find_char(text: str | None, char: str) -> int | None:
    """Return the index of the first ``char`` in ``text``, or None.

    An empty ``char`` matches the end of the string.
    """
    if text is None:
        return None
    if not char:
        return len(text)
    index = text.find(char[0])
    return None if index < 0 else index


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most ``n`` characters; return the code point difference."""
    pairs = zip_longest(first, second, fillvalue="\0")
    for left, right in islice(pairs, max(n, 0)):
        if left != right:
            return ord(left) - ord(right)
    return 0


class LineReader(Generic[AnyStr]):
    """Read newline-terminated lines from a stream, chunk by chunk."""

    def __init__(self, stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: AnyStr | None = None

    def _newline_index(self) -> int:
        """Index of the first newline in the pending data, or -1."""
        pending = self._pending
        if not pending:
            return -1
        newline = "\n" if isinstance(pending, str) else b"\n"
        return pending.find(newline)  # type: ignore[arg-type]

    def read_line(self) -> AnyStr | None:
        """Return the next line with its newline, the final partial line, or None at end."""
        while self._newline_index() < 0:
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                break
            self._pending = chunk if self._pending is None else self._pending + chunk
        pending = self._pending
        if not pending:
            self._pending = None
            return None
        index = self._newline_index()
        if index < 0:
            self._pending = None
            return pending
        line, rest = pending[:index + 1], pending[index + 1:]
        self._pending = rest or None
        return line

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.read_line()) is not None:
            yield line