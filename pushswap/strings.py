"""String helpers: conversion, splitting, searching, joining and comparison.

Positions are returned as indices into the string, or None where nothing
is found. Integer conversion follows 32-bit two's-complement semantics.
"""

from __future__ import annotations

from itertools import zip_longest
from typing import List, Optional, Union

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
LONG_MAX = 2**63 - 1
LONG_MIN = -(2**63)

_WHITESPACE = " \t\n\v\f\r"

Char = Union[int, str]


def _to_int32(value: int) -> int:
    """Reduce an integer to the signed 32-bit range by wrapping."""
    value &= 0xFFFFFFFF
    return value - 2**32 if value > INT_MAX else value


def _target(c: Char) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(int(c) & 0xFF)


def atoi(text: str) -> int:
    """Parse a leading decimal integer, returning a 32-bit signed result.

    Leading whitespace and one optional sign are accepted; parsing stops at
    the first non-digit. Values that overflow a 64-bit long saturate to
    that limit before being narrowed to 32 bits.
    """
    stripped = text.lstrip(_WHITESPACE)
    sign = 1
    if stripped[:1] in ("-", "+"):
        if stripped[0] == "-":
            sign = -1
        stripped = stripped[1:]
    value = 0
    for ch in stripped:
        if not "0" <= ch <= "9":
            break
        digit = ord(ch) - ord("0")
        if value > (LONG_MAX - digit) // 10:
            return _to_int32(LONG_MAX if sign == 1 else LONG_MIN)
        value = value * 10 + digit
    return _to_int32(sign * value)


def itoa(n: int) -> str:
    """Return the decimal text of a 32-bit signed integer."""
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} is outside the 32-bit signed range")
    return str(n)


def split(text: str, sep: str) -> List[str]:
    """Split text on a single separator character, dropping empty pieces."""
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return [piece for piece in text.split(sep) if piece]


def strchr(text: str, c: Char) -> Optional[int]:
    """Return the index of the first occurrence of c.

    Searching for the NUL character yields the position just past the end.
    """
    target = _target(c)
    index = text.find(target)
    if index >= 0:
        return index
    if target == "\0" and (not isinstance(c, int) or c == 0):
        return len(text)
    return None


def strrchr(text: str, c: Char) -> Optional[int]:
    """Return the index of the last occurrence of c.

    Searching for the NUL character yields the position just past the end.
    """
    target = _target(c)
    if target == "\0":
        return len(text)
    index = text.rfind(target)
    return None if index < 0 else index


def strdup(text: str) -> str:
    """Return a copy of text."""
    if text is None:
        raise TypeError("cannot duplicate None")
    return str(text)


def strjoin(s1: Optional[str], s2: Optional[str]) -> str:
    """Concatenate two strings; a missing side yields a copy of the other."""
    if s1 is None:
        return strdup(s2)
    if s2 is None:
        return strdup(s1)
    return s1 + s2


def strlen(text: str) -> int:
    """Return the number of characters in text."""
    return len(text)


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most n characters.

    Returns the code-point difference of the first unequal pair, or 0.
    A shorter string compares as if followed by NUL.
    """
    for a, b in zip_longest(s1[:n], s2[:n], fillvalue="\0"):
        if a != b:
            return ord(a) - ord(b)
    return 0


def strnstr(haystack: str, needle: str, n: int) -> Optional[int]:
    """Find needle entirely within the first n characters of haystack.

    An empty needle is found at position 0.
    """
    if not needle:
        return 0
    index = haystack.find(needle, 0, max(n, 0))
    return None if index < 0 else index