"""Shell environment variables kept in insertion order."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator

from minishell.numbers import is_digit


@dataclass
class Variable:
    """One environment variable; ``value`` is None when it has no value."""

    name: str
    value: str | None = None
    order: int = 0


def parse_entry(entry: str) -> tuple[str, str | None]:
    """Split ``NAME=VALUE`` at the first ``=``.

    Without an ``=`` the whole entry is the name and the value is None.
    """
    name, sep, value = entry.partition("=")
    return name, (value if sep else None)


def _is_alpha(char: str) -> bool:
    return ("a" <= char <= "z") or ("A" <= char <= "Z")


def is_valid_identifier(name: str | None) -> bool:
    """Return True if ``name`` starts with a letter or ``_`` and holds only letters, digits and ``_``."""
    if not name:
        return False
    if not (_is_alpha(name[0]) or name[0] == "_"):
        return False
    return all(_is_alpha(char) or is_digit(char) or char == "_" for char in name)


class Environment:
    """An ordered collection of environment variables."""

    def __init__(self) -> None:
        self._variables: dict[str, Variable] = {}

    @classmethod
    def from_entries(cls, entries: Iterable[str]) -> "Environment":
        """Build an environment from ``NAME=VALUE`` strings such as a process environment."""
        environment = cls()
        for entry in entries:
            name, value = parse_entry(entry)
            environment.set(name, value)
        return environment

    def set(self, name: str, value: str | None) -> None:
        """Set ``name`` to ``value``, keeping its place if it already exists."""
        existing = self._variables.get(name)
        if existing is not None:
            existing.value = value
        else:
            self._variables[name] = Variable(name, value)

    def assign(self, entry: str) -> None:
        """Apply an ``export``-style ``NAME[=VALUE]`` argument.

        Raises ValueError if the name is not a valid identifier.
        """
        name, value = parse_entry(entry)
        if not is_valid_identifier(name):
            raise ValueError(f"`{name}': not a valid identifier")
        self.set(name, value)

    def unset(self, name: str) -> bool:
        """Remove ``name``; return True if it was present."""
        return self._variables.pop(name, None) is not None

    def get(self, name: str) -> str | None:
        """Return the value of ``name``, or None if it is absent or has no value."""
        variable = self._variables.get(name)
        return None if variable is None else variable.value

    def __contains__(self, name: object) -> bool:
        return name in self._variables

    def __len__(self) -> int:
        return len(self._variables)

    def __iter__(self) -> Iterator[Variable]:
        return iter(list(self._variables.values()))

    def sort_order(self) -> list[Variable]:
        """Number every variable by its alphabetical rank and return them in that order."""
        variables = list(self._variables.values())
        for variable in variables:
            variable.order = sum(other.name < variable.name for other in variables)
        return sorted(variables, key=lambda variable: variable.order)

    def env_lines(self) -> list[str]:
        """Return ``NAME=VALUE`` lines for every variable that has a value."""
        return [
            f"{variable.name}={variable.value}"
            for variable in self._variables.values()
            if variable.value is not None
        ]

    def export_lines(self) -> list[str]:
        """Return ``declare -x`` lines in alphabetical order, leaving out ``_``."""
        lines = []
        for variable in self.sort_order():
            if variable.name == "_":
                continue
            if variable.value is not None:
                lines.append(f'declare -x {variable.name}="{variable.value}"')
            else:
                lines.append(f"declare -x {variable.name}")
        return lines