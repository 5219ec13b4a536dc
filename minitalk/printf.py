"""A small printf supporting the %c %s %d %i %u %x %X %p and %% conversions.

Integers follow C widths: %d and %i take a 32-bit signed value, %u, %x
and %X a 32-bit unsigned one, and %p a 64-bit address. Out-of-range
values wrap around. An unknown conversion character is dropped without
consuming an argument, and a lone ``%`` at the end of the format ends it.
"""

from __future__ import annotations

import sys
from typing import Any, Callable, Iterable, Iterator, Optional, TextIO

from minitalk.numbers import itoa

_LOWER_DIGITS = "0123456789abcdef"
_UPPER_DIGITS = "0123456789ABCDEF"
_UINT_MASK = 0xFFFFFFFF
_ULONG_MASK = 0xFFFFFFFFFFFFFFFF


def _require_int(value: Any, conversion: str) -> int:
    if not isinstance(value, int):
        raise TypeError(f"%{conversion} needs an int, not {type(value).__name__}")
    return value


def _base16(num: int, digits: str) -> str:
    """Render a non-negative integer in hexadecimal with the given digit set."""
    if num == 0:
        return digits[0]
    out = []
    while num:
        num, rest = divmod(num, 16)
        out.append(digits[rest])
    return "".join(reversed(out))


def to_hex(num: int, upper: bool = False) -> str:
    """Hexadecimal text of ``num`` taken as a 32-bit unsigned integer."""
    value = _require_int(num, "X" if upper else "x") & _UINT_MASK
    return _base16(value, _UPPER_DIGITS if upper else _LOWER_DIGITS)


def pointer_repr(address: Optional[int]) -> str:
    """Text of an address: ``(nil)`` for zero or None, otherwise ``0x`` and lower-case hex."""
    if address is None:
        return "(nil)"
    value = _require_int(address, "p") & _ULONG_MASK
    if value == 0:
        return "(nil)"
    return "0x" + _base16(value, _LOWER_DIGITS)


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c needs a single character, got {len(value)} characters")
        return value
    return chr(_require_int(value, "c") & 0xFF)


def _string(value: Any) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"%s needs a str or None, not {type(value).__name__}")
    return value


def _signed(value: Any) -> str:
    return itoa(_require_int(value, "d"))


def _unsigned(value: Any) -> str:
    return str(_require_int(value, "u") & _UINT_MASK)


_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "c": _char,
    "s": _string,
    "d": _signed,
    "i": _signed,
    "u": _unsigned,
    "x": lambda value: to_hex(value, upper=False),
    "X": lambda value: to_hex(value, upper=True),
    "p": pointer_repr,
}


def _render(fmt: str, args: Iterable[Any]) -> Iterator[str]:
    values = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            yield ch
            continue
        spec = next(chars, None)
        if spec is None:
            return
        if spec == "%":
            yield "%"
            continue
        convert = _CONVERSIONS.get(spec)
        if convert is None:
            continue
        try:
            value = next(values)
        except StopIteration:
            raise TypeError("not enough arguments for format string") from None
        yield convert(value)


def format_string(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions filled in from ``args``."""
    return "".join(_render(fmt, args))


def printf(fmt: str, *args: Any, file: Optional[TextIO] = None) -> int:
    """Write the formatted text to ``file`` (stdout by default); return the characters written."""
    text = format_string(fmt, *args)
    target = sys.stdout if file is None else file
    target.write(text)
    return len(text)