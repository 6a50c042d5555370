"""Write characters, strings and integers to a text stream."""

from __future__ import annotations

from typing import Optional, TextIO, Union

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


def putchar_fd(c: Union[int, str], stream: Optional[TextIO]) -> None:
    """Write one character, given as a code or a one-character string."""
    if stream is None:
        return
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        stream.write(c)
    else:
        stream.write(chr(int(c) & 0xFF))


def putstr_fd(text: Optional[str], stream: Optional[TextIO]) -> None:
    """Write text; a missing text or stream writes nothing."""
    if text is None or stream is None:
        return
    stream.write(text)


def putendl_fd(text: Optional[str], stream: Optional[TextIO]) -> None:
    """Write text followed by a newline."""
    putstr_fd(text, stream)
    putchar_fd("\n", stream)


def putnbr_fd(n: int, stream: Optional[TextIO]) -> None:
    """Write the decimal text of a 32-bit signed integer."""
    if not _INT_MIN <= n <= _INT_MAX:
        raise OverflowError(f"{n} is outside the 32-bit signed range")
    putstr_fd(str(n), stream)