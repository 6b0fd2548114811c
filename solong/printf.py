"""A small printf supporting %c %s %p %d %i %u %x %X and %%."""

from __future__ import annotations

import sys
from typing import Any, Callable, Iterator

_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF


def _signed32(value: int) -> int:
    value &= _MASK32
    return value - 0x100000000 if value & 0x80000000 else value


def _as_int(value: Any, spec: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"%{spec} expects an int, got {value!r}")
    return value


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError(f"%c expects a single character, got {value!r}")
        return value
    return chr(_as_int(value, "c") & 0xFF)


def _string(value: Any) -> str:
    return "(null)" if value is None else str(value)


def _pointer(value: Any) -> str:
    if value is None or value == 0:
        return "(nil)"
    address = value if isinstance(value, int) and not isinstance(value, bool) else id(value)
    return f"0x{address & _MASK64:x}"


def _signed(value: Any) -> str:
    return str(_signed32(_as_int(value, "d")))


def _unsigned(value: Any) -> str:
    return str(_as_int(value, "u") & _MASK32)


def _hex_lower(value: Any) -> str:
    return f"{_as_int(value, 'x') & _MASK32:x}"


def _hex_upper(value: Any) -> str:
    return f"{_as_int(value, 'X') & _MASK32:X}"


_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "c": _char,
    "s": _string,
    "p": _pointer,
    "d": _signed,
    "i": _signed,
    "u": _unsigned,
    "x": _hex_lower,
    "X": _hex_upper,
}


def _take(args: Iterator[Any], spec: str) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None


def format_text(fmt: str, *args: Any) -> str:
    """Return the text printf would write for fmt and args.

    Unknown conversions and a lone trailing '%' produce nothing and use
    no argument. Raises TypeError when arguments run out or have the
    wrong type.
    """
    pieces: list[str] = []
    remaining = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, "")
        if spec == "%":
            pieces.append("%")
        elif spec in _CONVERSIONS:
            pieces.append(_CONVERSIONS[spec](_take(remaining, spec)))
    return "".join(pieces)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output; return its length."""
    text = format_text(fmt, *args)
    sys.stdout.write(text)
    sys.stdout.flush()
    return len(text)