"""ASCII character classification and case conversion.

Every function accepts either an integer code point or a one-character
string. Only the ASCII ranges are recognised, regardless of locale.
"""

from __future__ import annotations

from typing import Union

Char = Union[int, str]


def _code(c: Char) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return int(c)


def isdigit(c: Char) -> bool:
    """Return True for the characters '0' to '9'."""
    return ord("0") <= _code(c) <= ord("9")


def isalpha(c: Char) -> bool:
    """Return True for ASCII letters."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def isalnum(c: Char) -> bool:
    """Return True for ASCII letters and digits."""
    return isalpha(c) or isdigit(c)


def isascii(c: Char) -> bool:
    """Return True for code points 0 to 127."""
    return 0 <= _code(c) <= 127


def isprint(c: Char) -> bool:
    """Return True for printable ASCII, space through tilde."""
    return ord(" ") <= _code(c) <= ord("~")


def _convert(c: Char, low: str, high: str, shift: int) -> Char:
    code = _code(c)
    if ord(low) <= code <= ord(high):
        code += shift
    return chr(code) if isinstance(c, str) else code


def tolower(c: Char) -> Char:
    """Map an uppercase ASCII letter to lowercase; leave anything else alone."""
    return _convert(c, "A", "Z", 32)


def toupper(c: Char) -> Char:
    """Map a lowercase ASCII letter to uppercase; leave anything else alone."""
    return _convert(c, "a", "z", -32)