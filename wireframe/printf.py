"""A small printf supporting the c, s, p, d, i, u, x, X and % conversions."""

from __future__ import annotations

import sys
from typing import Any, Iterator, Optional, TextIO

from wireframe.numbers import itoa

_UINT_MASK = 0xFFFFFFFF
_POINTER_MASK = 0xFFFFFFFFFFFFFFFF
_NULL_STRING = "(null)"
_MISSING = object()


class FormatError(ValueError):
    """Raised for an unknown conversion or an argument that does not fit it."""


def _require_int(value: Any, spec: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise FormatError(f"%{spec} expects an int, got {type(value).__name__}")
    return value


def format_hex(n: int, upper: bool = False) -> str:
    """Render ``n``, taken as a 32-bit unsigned int, in hexadecimal."""
    text = format(n & _UINT_MASK, "x")
    return text.upper() if upper else text


def format_pointer(address: Optional[int]) -> str:
    """Render an address as ``0x`` followed by lower-case hex digits."""
    value = 0 if address is None else address
    return "0x" + format(value & _POINTER_MASK, "x")


def _convert_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise FormatError(f"%c expects a single character, got {value!r}")
        return value
    return chr(_require_int(value, "c") & 0xFF)


def _convert_str(value: Any) -> str:
    if value is None:
        return _NULL_STRING
    if not isinstance(value, str):
        raise FormatError(f"%s expects a str, got {type(value).__name__}")
    return value


def _convert_pointer(value: Any) -> str:
    if value is None:
        return format_pointer(None)
    return format_pointer(_require_int(value, "p"))


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    converters = {
        "c": _convert_char,
        "s": _convert_str,
        "p": _convert_pointer,
        "d": lambda v: itoa(_require_int(v, "d")),
        "i": lambda v: itoa(_require_int(v, "i")),
        "u": lambda v: str(_require_int(v, "u") & _UINT_MASK),
        "x": lambda v: format_hex(_require_int(v, "x")),
        "X": lambda v: format_hex(_require_int(v, "X"), upper=True),
    }
    converter = converters.get(spec)
    if converter is None:
        raise FormatError(f"unknown conversion %{spec}")
    value = next(args, _MISSING)
    if value is _MISSING:
        raise FormatError(f"not enough arguments for %{spec}")
    return converter(value)


def format_string(fmt: Optional[str], *args: Any) -> str:
    """Expand ``fmt`` with ``args``; a lone trailing '%' is kept as it is."""
    if not fmt:
        return ""
    pieces = []
    remaining = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            pieces.append("%")
        else:
            pieces.append(_convert(spec, remaining))
    return "".join(pieces)


def printf(fmt: Optional[str], *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write the expansion of ``fmt`` and return the number of characters written."""
    if not fmt:
        return 0
    text = format_string(fmt, *args)
    (sys.stdout if stream is None else stream).write(text)
    return len(text)