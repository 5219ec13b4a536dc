"""String searching, slicing, comparison and bounded copying."""

from __future__ import annotations

from typing import Callable, Optional, Tuple, Union

Char = Union[str, int]


def _char(c: Char) -> str:
    """Return ``c`` as a one-character string; integers are truncated to a byte."""
    if isinstance(c, bool):
        raise TypeError("expected a one-character string or an int, not bool")
    if isinstance(c, int):
        return chr(c & 0xFF)
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)} characters")
        return c
    raise TypeError(f"expected a one-character string or an int, not {type(c).__name__}")


def _check_count(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def split(s: str, sep: Char) -> list[str]:
    """Split ``s`` on the character ``sep``, dropping empty pieces."""
    return [piece for piece in s.split(_char(sep)) if piece]


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``s``."""
    return s.strip(charset)


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` beginning at ``start``.

    A start past the end of ``s`` gives an empty string.
    """
    _check_count("start", start)
    _check_count("length", length)
    if start > len(s):
        return ""
    return s[start:start + length]


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Find ``needle`` wholly inside the first ``length`` characters of ``haystack``.

    Returns the index of the first match, 0 for an empty needle, or None.
    """
    _check_count("length", length)
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters; return the code difference at the first mismatch.

    The end of a string compares as code 0, and comparison stops there.
    """
    _check_count("n", n)
    for i in range(n):
        a = ord(s1[i]) if i < len(s1) else 0
        b = ord(s2[i]) if i < len(s2) else 0
        if a != b or a == 0:
            return a - b
    return 0


def memcmp(b1: bytes, b2: bytes, n: int) -> int:
    """Compare the first ``n`` bytes; return the difference at the first mismatch."""
    _check_count("n", n)
    if n > len(b1) or n > len(b2):
        raise ValueError(f"cannot compare {n} bytes of buffers of {len(b1)} and {len(b2)} bytes")
    for a, b in zip(b1[:n], b2[:n]):
        if a != b:
            return a - b
    return 0


def strchr(s: str, c: Char) -> Optional[int]:
    """Index of the first ``c`` in ``s``; a NUL character matches at ``len(s)``."""
    ch = _char(c)
    if ch == "\0" and ch not in s:
        return len(s)
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: Char) -> Optional[int]:
    """Index of the last ``c`` in ``s``; a NUL character matches at ``len(s)``."""
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters including the terminator.

    Returns the copied text and the full length of ``src``. With ``size`` 0
    nothing is copied.
    """
    _check_count("size", size)
    if size == 0:
        return "", len(src)
    return src[:size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` in a buffer of ``size`` characters including the terminator.

    Returns the resulting text and the length the full result would have had.
    When ``size`` does not exceed ``len(dst)``, ``dst`` is returned unchanged
    with ``size + len(src)``.
    """
    _check_count("size", size)
    if size <= len(dst):
        return dst, size + len(src)
    room = size - 1 - len(dst)
    return dst + src[:room], len(dst) + len(src)


def map_indexed(s: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` applied to every character."""
    return "".join(func(i, ch) for i, ch in enumerate(s))