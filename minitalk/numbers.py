"""Conversions between decimal text and fixed-width integers."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

_WHITESPACE = frozenset("\t\n\v\f\r ")
_DIGITS = "0123456789"


def _wrap(value: int, bits: int) -> int:
    """Reduce ``value`` to a signed two's-complement integer of ``bits`` bits."""
    modulus = 1 << bits
    value %= modulus
    return value - modulus if value >= modulus // 2 else value


def _parse(text: str, bits: int) -> int:
    rest = text.lstrip("".join(_WHITESPACE))
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    value = 0
    for ch in rest:
        if ch not in _DIGITS:
            break
        value = value * 10 + (ord(ch) - ord("0"))
    return _wrap(sign * value, bits)


def atoi(text: str) -> int:
    """Parse a leading decimal integer as a 32-bit signed value.

    Leading whitespace and one optional sign are skipped; parsing stops at
    the first non-digit. Text without digits gives 0. Values outside the
    32-bit range wrap around.
    """
    return _parse(text, 32)


def atol(text: str) -> int:
    """Parse a leading decimal integer as a 64-bit signed value."""
    return _parse(text, 64)


def itoa(n: int) -> str:
    """Return the decimal text of ``n`` taken as a 32-bit signed integer."""
    return str(_wrap(n, 32))


def put_number(n: int, stream: Optional[TextIO] = None) -> None:
    """Write the decimal text of ``n`` (32-bit signed) to ``stream``, stdout by default."""
    target = sys.stdout if stream is None else stream
    target.write(itoa(n))