"""A small formatter for the conversions c, s, p, d, i, u, x, X and %."""

from __future__ import annotations

import sys
from typing import Any, Iterator, Optional

_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF


def _signed32(value: int) -> int:
    value &= _MASK32
    return value - 2**32 if value > 2**31 - 1 else value


def format_signed(nb: int) -> str:
    """Return the decimal text of nb taken as a 32-bit signed integer."""
    return str(_signed32(int(nb)))


def format_unsigned(nb: int) -> str:
    """Return the decimal text of nb taken as a 32-bit unsigned integer."""
    return str(int(nb) & _MASK32)


def format_hex(nb: int, upper: bool) -> str:
    """Return nb, taken as 32-bit unsigned, in hexadecimal without prefix."""
    return format(int(nb) & _MASK32, "X" if upper else "x")


def format_pointer(ptr: Optional[int]) -> str:
    """Return an address as lowercase hexadecimal with a 0x prefix."""
    value = 0 if ptr is None else int(ptr) & _MASK64
    return "0x" + format(value, "x")


def _next_arg(values: Iterator[Any], spec: str) -> Any:
    try:
        return next(values)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None


def _format_char(arg: Any) -> str:
    if isinstance(arg, str):
        if len(arg) != 1:
            raise TypeError(f"%c needs a single character, got {arg!r}")
        return arg
    if isinstance(arg, int):
        return chr(arg & 0xFF)
    raise TypeError(f"%c needs a character or an integer, got {arg!r}")


def _format_string(arg: Any) -> str:
    if arg is None:
        return "(null)"
    if not isinstance(arg, str):
        raise TypeError(f"%s needs a string, got {arg!r}")
    return arg


def _require_int(arg: Any, spec: str) -> int:
    if not isinstance(arg, int):
        raise TypeError(f"%{spec} needs an integer, got {arg!r}")
    return arg


def _convert(spec: str, values: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec == "c":
        return _format_char(_next_arg(values, spec))
    if spec == "s":
        return _format_string(_next_arg(values, spec))
    if spec == "p":
        arg = _next_arg(values, spec)
        return format_pointer(None if arg is None else _require_int(arg, spec))
    if spec in ("d", "i"):
        return format_signed(_require_int(_next_arg(values, spec), spec))
    if spec == "u":
        return format_unsigned(_require_int(_next_arg(values, spec), spec))
    if spec in ("x", "X"):
        return format_hex(_require_int(_next_arg(values, spec), spec), spec == "X")
    # Unknown conversions produce nothing and consume no argument.
    return ""


def render(fmt: str, *args: Any) -> str:
    """Expand fmt with args and return the resulting text."""
    values = iter(args)
    chars = iter(fmt)
    pieces = []
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        pieces.append(_convert(spec, values))
    return "".join(pieces)


def printf(fmt: str, *args: Any) -> int:
    """Write the expansion of fmt to standard output; return its length."""
    text = render(fmt, *args)
    sys.stdout.write(text)
    return len(text)