"""Byte-buffer helpers: fill, allocate, search, compare, copy and move."""

from __future__ import annotations

from typing import Optional

SIZE_MAX = 2**64 - 1


def _check_length(n: int, *buffers) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"byte count {n} exceeds buffer length {len(buf)}")


def memset(buf: bytearray, c: int, n: int) -> bytearray:
    """Set the first n bytes of buf to the low byte of c and return buf."""
    _check_length(n, buf)
    buf[:n] = bytes([c & 0xFF]) * n
    return buf


def bzero(buf: bytearray, n: int) -> None:
    """Set the first n bytes of buf to zero."""
    memset(buf, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zeroed buffer of count * size bytes.

    A request for zero bytes yields a one-byte buffer. A product that
    would not fit in a 64-bit size raises OverflowError.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if size and count > SIZE_MAX // size:
        raise OverflowError("requested allocation size overflows")
    if count == 0 or size == 0:
        count, size = 1, 1
    return bytearray(count * size)


def memchr(buf, c: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to c within n bytes, or None."""
    _check_length(n, buf)
    index = bytes(buf[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(s1, s2, n: int) -> int:
    """Compare n bytes; return the difference of the first unequal pair, or 0."""
    _check_length(n, s1, s2)
    for a, b in zip(bytes(s1[:n]), bytes(s2[:n])):
        if a != b:
            return a - b
    return 0


def memcpy(dest: bytearray, src, n: int) -> bytearray:
    """Copy n bytes from src into the start of dest and return dest."""
    if n == 0 or dest is src:
        return dest
    _check_length(n, dest, src)
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buf: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Move n bytes within buf from offset src to offset dest.

    Overlapping regions are handled correctly. Returns buf.
    """
    if dest < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    _check_length(n, buf[dest:], buf[src:])
    if dest != src:
        buf[dest:dest + n] = bytes(buf[src:src + n])
    return buf