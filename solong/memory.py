"""Byte-buffer helpers: filling, copying, searching and comparing."""

from __future__ import annotations

import sys
from typing import Optional, Union

BytesLike = Union[bytes, bytearray, memoryview]

SIZE_MAX = sys.maxsize * 2 + 1


def _check_span(length: int, start: int, n: int, what: str) -> None:
    if n < 0 or start < 0:
        raise ValueError(f"{what}: negative offset or size")
    if start + n > length:
        raise IndexError(f"{what}: {n} bytes at offset {start} exceed a buffer of {length}")


def memset(buf: bytearray, value: int, size: int) -> bytearray:
    """Fill the first size bytes of buf with value (taken modulo 256); return buf."""
    _check_span(len(buf), 0, size, "memset")
    buf[:size] = bytes([value & 0xFF]) * size
    return buf


def bzero(buf: bytearray, n: int) -> None:
    """Set the first n bytes of buf to zero."""
    memset(buf, 0, n)


def memcpy(dst: bytearray, src: BytesLike, n: int) -> bytearray:
    """Copy the first n bytes of src into the start of dst; return dst."""
    _check_span(len(dst), 0, n, "memcpy")
    _check_span(len(src), 0, n, "memcpy")
    dst[:n] = bytes(src[:n])
    return dst


def memmove(buf: bytearray, dst: int, src: int, n: int) -> bytearray:
    """Copy n bytes inside buf from offset src to offset dst.

    The ranges may overlap; the result is as if the source bytes were
    copied out first. Returns buf.
    """
    _check_span(len(buf), dst, n, "memmove")
    _check_span(len(buf), src, n, "memmove")
    buf[dst:dst + n] = bytes(buf[src:src + n])
    return buf


def memchr(data: BytesLike, c: int, n: int) -> Optional[int]:
    """Return the offset of the first byte equal to c within the first n bytes, or None."""
    _check_span(len(data), 0, n, "memchr")
    index = bytes(data[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(a: BytesLike, b: BytesLike, n: int) -> int:
    """Compare the first n bytes of a and b.

    Returns the difference of the first pair of bytes that differ, or 0.
    """
    _check_span(len(a), 0, n, "memcmp")
    _check_span(len(b), 0, n, "memcmp")
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0


def calloc(nb: int, size: int) -> bytearray:
    """Return a zeroed buffer of nb * size bytes.

    Raises OverflowError when the product would not fit in a size_t.
    """
    if nb < 0 or size < 0:
        raise ValueError("calloc: negative count or size")
    if size != 0 and nb > SIZE_MAX // size:
        raise OverflowError(f"calloc: {nb} * {size} overflows")
    return bytearray(nb * size)