"""String and integer conversion helpers."""

from __future__ import annotations

from typing import Optional

_WHITESPACE = " \t\n\v\f\r"
_DIGITS = "0123456789"


def _wrap_int32(value: int) -> int:
    return ((value + 2**31) % 2**32) - 2**31


def atoi(text: Optional[str]) -> int:
    """Parse a leading integer the way C atoi does.

    Leading whitespace is skipped, a single '+' or '-' is accepted, then
    decimal digits are read until the first non-digit. Text without digits
    gives 0, as does None. The result wraps to a 32-bit signed int.
    """
    if text is None:
        return 0
    rest = text.lstrip(_WHITESPACE)
    negative = False
    if rest[:1] in ("+", "-"):
        negative = rest[0] == "-"
        rest = rest[1:]
    value = 0
    for ch in rest:
        if ch not in _DIGITS:
            break
        value = value * 10 + _DIGITS.index(ch)
    return _wrap_int32(-value if negative else value)


def itoa(n: int) -> str:
    """Return the decimal text of an integer, with a leading '-' if negative."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {n!r}")
    return f"{n:d}"


def split(text: str, sep: str) -> list[str]:
    """Split text on a single separator character, dropping empty words."""
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return [word for word in text.split(sep) if word]