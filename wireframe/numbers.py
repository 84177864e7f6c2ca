"""Conversions between decimal text and 32-bit integers."""

from __future__ import annotations

from typing import Optional

_INT_BITS = 32
_WHITESPACE = frozenset(" \t\n\v\f\r")


def _wrap_int32(value: int) -> int:
    """Reduce a Python int to the range of a signed 32-bit integer."""
    mask = (1 << _INT_BITS) - 1
    value &= mask
    if value >= 1 << (_INT_BITS - 1):
        value -= 1 << _INT_BITS
    return value


def atoi(text: Optional[str]) -> int:
    """Parse a leading decimal integer, ignoring what follows it.

    Leading whitespace is skipped, a single '+' or '-' is honoured, and
    digits are read until the first non-digit. ``None`` and text without
    digits yield 0. The result wraps like a 32-bit signed int.
    """
    if text is None:
        return 0
    stripped = text.lstrip("".join(_WHITESPACE))
    sign = 1
    if stripped[:1] == "+":
        stripped = stripped[1:]
    elif stripped[:1] == "-":
        sign = -1
        stripped = stripped[1:]
    result = 0
    for ch in stripped:
        if not "0" <= ch <= "9":
            break
        result = result * 10 + (ord(ch) - ord("0"))
    return _wrap_int32(sign * result)


def itoa(n: int) -> str:
    """Render an integer, taken as a 32-bit signed int, in decimal."""
    return str(_wrap_int32(n))