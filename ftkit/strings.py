"""String helpers with the semantics of the classic C string routines.

Positions are returned as indexes into the string (or ``None`` when
nothing is found) instead of pointers, and functions that fill a caller's
buffer in C return the resulting string instead.
"""

from __future__ import annotations

from itertools import zip_longest
from typing import Callable

__all__ = [
    "split",
    "strchr",
    "strrchr",
    "strnstr",
    "strncmp",
    "strjoin",
    "strtrim",
    "substr",
    "strmapi",
    "strlcpy",
    "strlcat",
    "tolower",
    "toupper",
]

_NUL = "\0"


def _check_char(c: str) -> None:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")


def _check_size(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def split(s: str, sep: str) -> list[str]:
    """Split ``s`` on every run of ``sep``, dropping empty pieces."""
    _check_char(sep)
    return [word for word in s.split(sep) if word]


def strchr(s: str, c: str) -> int | None:
    """Index of the first ``c`` in ``s``; the terminator matches at ``len(s)``."""
    _check_char(c)
    index = s.find(c)
    if index >= 0:
        return index
    return len(s) if c == _NUL else None


def strrchr(s: str, c: str) -> int | None:
    """Index of the last ``c`` in ``s``; the terminator matches at ``len(s)``."""
    _check_char(c)
    if c == _NUL:
        return len(s)
    index = s.rfind(c)
    return index if index >= 0 else None


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Index of ``needle`` lying wholly within the first ``length`` characters."""
    _check_size("length", length)
    if not needle:
        return 0
    index = haystack.find(needle, 0, length)
    return index if index >= 0 else None


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters; return the code-point difference."""
    _check_size("n", n)
    for a, b in zip_longest(s1[:n], s2[:n], fillvalue=_NUL):
        if a != b:
            return ord(a) - ord(b)
        if a == _NUL:
            break
    return 0


def strjoin(s1: str | None, s2: str | None) -> str | None:
    """Concatenate two strings; a missing side yields the other one."""
    if s1 is None:
        return s2
    if s2 is None:
        return s1
    return s1 + s2


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``s``."""
    return s.strip(charset)


def substr(s: str | None, start: int, length: int) -> str:
    """Up to ``length`` characters of ``s`` from ``start``; empty past the end."""
    _check_size("start", start)
    _check_size("length", length)
    if s is None or start > len(s):
        return ""
    return s[start:start + length]


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Build a string from ``func(index, char)`` applied to each character."""
    return "".join(func(index, char) for index, char in enumerate(s))


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy into a buffer of ``size``; return the copy and ``len(src)``."""
    _check_size("size", size)
    if size == 0:
        return "", len(src)
    return src[:size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size``.

    Returns the resulting string and the length the full result would
    have had (``len(src) + min(size, len(dst))``).
    """
    _check_size("size", size)
    dst_len = len(dst)
    if size <= dst_len:
        return dst, len(src) + size
    room = size - dst_len
    # Nothing is appended when the free room equals the current length.
    if room != dst_len:
        dst = dst + src[:room - 1]
    return dst, len(src) + dst_len


def tolower(c: str) -> str:
    """Lower-case an ASCII capital letter; other characters pass through."""
    _check_char(c)
    return chr(ord(c) + 32) if "A" <= c <= "Z" else c


def toupper(c: str) -> str:
    """Upper-case an ASCII small letter; other characters pass through."""
    _check_char(c)
    return chr(ord(c) - 32) if "a" <= c <= "z" else c