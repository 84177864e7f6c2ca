"""Byte-buffer operations on bytearrays."""

from __future__ import annotations

from typing import Optional, Union

Buffer = Union[bytes, bytearray, memoryview]


def _check_size(size: int, *buffers: Buffer) -> None:
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    for buf in buffers:
        if size > len(buf):
            raise ValueError(f"size {size} exceeds buffer length {len(buf)}")


def memset(buf: bytearray, value: int, size: int) -> bytearray:
    """Fill the first ``size`` bytes with ``value`` truncated to a byte."""
    _check_size(size, buf)
    buf[:size] = bytes([value & 0xFF]) * size
    return buf


def bzero(buf: bytearray, size: int) -> bytearray:
    """Zero the first ``size`` bytes."""
    return memset(buf, 0, size)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memchr(buf: Buffer, value: int, size: int) -> Optional[int]:
    """Return the index of the first byte equal to ``value`` within ``size`` bytes, or None."""
    _check_size(size, buf)
    index = bytes(buf[:size]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(a: Buffer, b: Buffer, size: int) -> int:
    """Compare ``size`` bytes; return the difference of the first unequal pair, or 0."""
    _check_size(size, a, b)
    for x, y in zip(a[:size], b[:size]):
        if x != y:
            return x - y
    return 0


def memcpy(dest: bytearray, src: Buffer, size: int) -> bytearray:
    """Copy ``size`` bytes from ``src`` to the start of ``dest``."""
    _check_size(size, dest, src)
    dest[:size] = src[:size]
    return dest


def memmove(buf: bytearray, dest: int, src: int, size: int) -> bytearray:
    """Copy ``size`` bytes inside ``buf`` from offset ``src`` to ``dest``; overlap is safe."""
    if min(dest, src, size) < 0:
        raise ValueError("offsets and size must not be negative")
    if max(dest, src) + size > len(buf):
        raise ValueError("move runs past the end of the buffer")
    if dest == src or size == 0:
        return buf
    buf[dest:dest + size] = bytes(buf[src:src + size])
    return buf