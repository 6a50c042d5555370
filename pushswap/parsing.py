"""Validation of command-line numbers and their reduction to ranks."""

from __future__ import annotations

from bisect import bisect_left
from typing import List, Sequence

from pushswap.charclass import isdigit
from pushswap.strings import atoi, split

INT_MAX = 2**31 - 1
INT_MIN = -(2**31)

_WHITESPACE = " \t\n\v\f\r"


class InputError(ValueError):
    """The arguments are not a valid list of distinct 32-bit integers."""

    def __init__(self, message: str = "Error") -> None:
        super().__init__(message)


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


def is_outside_int_range(text: str) -> bool:
    """Return True when the number in text does not fit a 32-bit int.

    Leading whitespace and one sign are skipped; every remaining character
    is treated as a digit.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = "+"
    if rest[:1] in ("-", "+"):
        sign, rest = rest[0], rest[1:]
    limit = INT_MAX if sign == "+" else -INT_MIN
    value = 0
    for ch in rest:
        digit = ord(ch) - ord("0")
        if value > _trunc_div(limit - digit, 10):
            return True
        value = value * 10 + digit
    return False


def check_duplicate(values: Sequence[int]) -> bool:
    """Return True when any value appears more than once."""
    return len(set(values)) != len(values)


def format_input(args: Sequence[str]) -> List[str]:
    """Split every argument on spaces and return all tokens.

    A token holding anything other than digits and '-' raises InputError.
    """
    tokens: List[str] = []
    for arg in args:
        pieces = split(arg, " ")
        for piece in pieces:
            if any(not isdigit(ch) and ch != "-" for ch in piece):
                raise InputError()
        tokens.extend(pieces)
    return tokens


def check_input(args: Sequence[str]) -> List[str]:
    """Return the validated tokens of the arguments.

    No arguments at all yields an empty list. Arguments without any token,
    or a token outside the 32-bit range, raise InputError.
    """
    if not args:
        return []
    tokens = format_input(args)
    if not tokens:
        raise InputError()
    if any(is_outside_int_range(token) for token in tokens):
        raise InputError()
    return tokens


def coordinate_compression(tokens: Sequence[str]) -> List[int]:
    """Replace each number by its rank among all the numbers, from 0.

    Equal numbers receive equal ranks.
    """
    values = [atoi(token) for token in tokens]
    ordered = sorted(values)
    return [bisect_left(ordered, value) for value in values]