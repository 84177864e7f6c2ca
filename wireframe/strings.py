"""String helpers with bounded copy, search and split semantics."""

from __future__ import annotations

from typing import Callable, List, MutableSequence, Optional, Tuple, Union

CharLike = Union[int, str]


def _char(ch: CharLike) -> str:
    """Normalise a one-character string or a byte code to a one-character string."""
    if isinstance(ch, str):
        if len(ch) != 1:
            raise ValueError(f"expected a single character, got {ch!r}")
        return ch
    if isinstance(ch, bool) or not isinstance(ch, int):
        raise TypeError(f"expected int or single-character str, got {type(ch).__name__}")
    return chr(ch & 0xFF)


def _check_size(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def split(text: str, sep: CharLike) -> List[str]:
    """Split on ``sep``, dropping the empty pieces that runs of it leave."""
    separator = _char(sep)
    if separator == "\0":
        return [text] if text else []
    return [piece for piece in text.split(separator) if piece]


def strchr(text: str, ch: CharLike) -> Optional[int]:
    """Index of the first ``ch`` in ``text``, or None.

    Searching for the NUL character finds the end of the string.
    """
    target = _char(ch)
    if target == "\0":
        return len(text)
    index = text.find(target)
    return None if index < 0 else index


def strrchr(text: str, ch: CharLike) -> Optional[int]:
    """Index of the last ``ch`` in ``text``, or None.

    Searching for the NUL character finds the end of the string.
    """
    target = _char(ch)
    if target == "\0":
        return len(text)
    index = text.rfind(target)
    return None if index < 0 else index


def strjoin(first: Optional[str], second: str) -> Optional[str]:
    """Concatenate two strings; a missing first string yields None."""
    if first is None:
        return None
    return first + second


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters.

    Returns the copied text, truncated to leave room for the terminator,
    and the full length of ``src``.
    """
    _check_size("size", size)
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def strlcat(dest: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dest`` within a buffer of ``size`` characters.

    Returns the resulting text and the length the full result would have
    had, as bounded by ``size`` when ``dest`` already fills the buffer.
    """
    _check_size("size", size)
    if size == 0:
        return dest, len(src)
    room = max(0, size - 1 - len(dest))
    result = dest + src[:room]
    if len(dest) >= size:
        return result, len(src) + size
    return result, len(src) + len(dest)


def strncmp(a: str, b: str, size: int) -> int:
    """Compare at most ``size`` characters; the sign tells the ordering."""
    _check_size("size", size)
    if size == 0:
        return 0
    padded_a = a[:size].ljust(size, "\0")
    padded_b = b[:size].ljust(size, "\0")
    for x, y in zip(padded_a, padded_b):
        if x != y:
            return ord(x) - ord(y)
        if x == "\0":
            break
    return 0


def strnstr(haystack: str, needle: str, size: int) -> Optional[int]:
    """Index of ``needle`` lying wholly within the first ``size`` characters, or None."""
    _check_size("size", size)
    if not needle:
        return 0
    index = haystack[:size].find(needle)
    return None if index < 0 else index


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``text``."""
    if not charset:
        return text
    return text.strip(charset)


def substr(text: Optional[str], start: int, length: int) -> Optional[str]:
    """Up to ``length`` characters of ``text`` from ``start``; empty past the end."""
    if text is None:
        return None
    _check_size("start", start)
    _check_size("length", length)
    if start >= len(text):
        return ""
    return text[start : start + length]


def strmapi(
    text: Optional[str], func: Optional[Callable[[int, str], str]]
) -> Optional[str]:
    """Build a new string from ``func(index, char)`` for every character."""
    if text is None or func is None:
        return None
    return "".join(func(index, ch) for index, ch in enumerate(text))


def striteri(
    chars: Optional[MutableSequence[str]],
    func: Optional[Callable[[int, MutableSequence[str]], None]],
) -> Optional[MutableSequence[str]]:
    """Call ``func(index, chars)`` for every position; ``func`` may edit ``chars`` in place."""
    if chars is None or func is None:
        return chars
    for index in range(len(chars)):
        func(index, chars)
    return chars