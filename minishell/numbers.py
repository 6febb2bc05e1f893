"""Number parsing and formatting helpers with C integer semantics."""

from __future__ import annotations

import math

_WHITESPACE = " \t\n\v\f\r"
_DIGITS = "0123456789"
_OPERATORS = "-+*/%"


def _wrap(value: int, bits: int) -> int:
    """Reduce ``value`` to a signed two's-complement integer of ``bits`` bits."""
    modulus = 1 << bits
    value %= modulus
    if value >= modulus >> 1:
        value -= modulus
    return value


def _parse_signed(text: str) -> int:
    """Parse leading whitespace, one optional sign and a run of digits."""
    stripped = text.lstrip(_WHITESPACE)
    negative = False
    if stripped[:1] in ("-", "+"):
        negative = stripped[0] == "-"
        stripped = stripped[1:]
    digits = []
    for char in stripped:
        if char not in _DIGITS:
            break
        digits.append(char)
    value = int("".join(digits)) if digits else 0
    return -value if negative else value


def atoi(text: str) -> int:
    """Parse an integer prefix of ``text`` into a 32-bit signed int.

    Leading whitespace and one sign are accepted; parsing stops at the first
    non-digit. Values outside the 32-bit range wrap around.
    """
    return _wrap(_parse_signed(text), 32)


def atol(text: str) -> int:
    """Parse like :func:`atoi`; the long result is narrowed to a 32-bit int."""
    return _wrap(_wrap(_parse_signed(text), 64), 32)


def is_digit(char: str) -> bool:
    """Return True if ``char`` is an ASCII decimal digit."""
    return len(char) == 1 and char in _DIGITS


def is_operator(char: str) -> bool:
    """Return True if ``char`` is one of ``- + * / %``."""
    return len(char) == 1 and char in _OPERATORS


def nearest_sqrt(number: int) -> int:
    """Return the largest ``i`` with ``i * i < number``, or 1 below 4."""
    if number < 4:
        return 1
    return math.isqrt(number - 1)


def format_hex(number: int, upper: bool = False) -> str:
    """Format an unsigned 64-bit value in hexadecimal without leading zeros."""
    value = number % (1 << 64)
    return f"{value:X}" if upper else f"{value:x}"


def format_int(number: int) -> str:
    """Format a 32-bit signed int in decimal."""
    return str(_wrap(number, 32))


def format_unsigned(number: int) -> str:
    """Format a 32-bit unsigned int in decimal."""
    return str(number % (1 << 32))


def format_pointer(address: int | None) -> str:
    """Format an address as ``0x`` plus lowercase hex, or ``(nil)`` for null."""
    if not address:
        return "(nil)"
    return "0x" + format_hex(address)