"""String editing helpers: bounded copy and concatenation, trimming,
slicing and per-character mapping."""

from __future__ import annotations

from typing import Callable, Optional, Tuple


def _require_text(text: Optional[str], name: str = "text") -> str:
    if text is None:
        raise TypeError(f"{name} must be a string, not None")
    return text


def striteri(text: str, f: Callable[[int, str], Optional[str]]) -> str:
    """Call f(index, char) for every character and return the edited string.

    When f returns a character it replaces the one at that index; when it
    returns None the character is kept as it was.
    """
    text = _require_text(text)
    if f is None:
        raise TypeError("f must be callable, not None")
    edited = []
    for index, ch in enumerate(text):
        replacement = f(index, ch)
        edited.append(ch if replacement is None else replacement)
    return "".join(edited)


def strlcat(dest: str, src: str, size: int) -> Tuple[str, int]:
    """Append src to dest within a buffer of size characters, terminator included.

    Returns the resulting string and the length the full concatenation
    would have had: len(dest) + len(src), or size + len(src) when dest
    already fills the buffer.
    """
    dest = _require_text(dest, "dest")
    src = _require_text(src, "src")
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    if size == 0:
        return dest, len(src)
    dest_len = len(dest)
    room = size - min(dest_len, size)
    result = dest + src[: room - 1] if room > 0 else dest
    if size <= dest_len:
        return result, size + len(src)
    return result, dest_len + len(src)


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy src into a buffer of size characters, terminator included.

    Returns the copied text, truncated to size - 1 characters, and the
    full length of src.
    """
    src = _require_text(src, "src")
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    return src[: max(size - 1, 0)], len(src)


def strmapi(text: str, f: Callable[[int, str], str]) -> str:
    """Return a new string built from f(index, char) for every character."""
    text = _require_text(text)
    if f is None:
        raise TypeError("f must be callable, not None")
    return "".join(f(index, ch) for index, ch in enumerate(text))


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in charset from both ends of text."""
    text = _require_text(text)
    charset = _require_text(charset, "charset")
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most length characters of text beginning at start.

    A start beyond the end of text, or a zero length, yields "".
    """
    text = _require_text(text)
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(text) or length == 0:
        return ""
    return text[start:start + length]