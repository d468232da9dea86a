"""Character helpers.

A character is a ``str`` of length exactly 1. Python has no separate
char type, so parameters documented as characters are checked here.
"""

from __future__ import annotations

from typing import Any


def require_char(value: Any, name: str = "char") -> str:
    """Return *value* if it is a single-character string.

    Raises:
        TypeError: *value* is not a ``str``.
        ValueError: *value* does not have length 1.
    """
    if not isinstance(value, str):
        msg = f"{name} must be a str, got {type(value).__name__}"
        raise TypeError(msg)
    if len(value) != 1:
        msg = f"{name} must be a single character, got {value!r}"
        raise ValueError(msg)
    return value


def simple_upper(char: str) -> str:
    """Uppercase *char* without changing its length.

    Examples:
        >>> simple_upper("a")
        'A'
        >>> simple_upper("ß")
        'ß'
    """
    mapped = char.upper()
    return mapped if len(mapped) == 1 else char


def simple_lower(char: str) -> str:
    """Lowercase *char* without changing its length."""
    mapped = char.lower()
    return mapped if len(mapped) == 1 else char
