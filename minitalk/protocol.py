"""The bit-serial message format: one bit per signal, most significant bit first.

A message is the bytes of its text followed by a zero byte that marks
its end. A zero bit is carried by SIGUSR1 and a one bit by SIGUSR2.
"""

from __future__ import annotations

from typing import Iterator, Optional, Tuple, Union

BITS_PER_BYTE = 8
TERMINATOR = 0


def encode_byte(value: int) -> Tuple[int, ...]:
    """Return the eight bits of ``value``, most significant first."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an int, not {type(value).__name__}")
    if not 0 <= value <= 0xFF:
        raise ValueError(f"byte value out of range: {value}")
    return tuple((value >> shift) & 1 for shift in reversed(range(BITS_PER_BYTE)))


def _payload(text: Union[str, bytes]) -> bytes:
    data = text.encode("utf-8") if isinstance(text, str) else bytes(text)
    if TERMINATOR in data:
        raise ValueError("message must not contain a NUL byte")
    return data


def _bits(data: bytes) -> Iterator[int]:
    for value in data:
        yield from encode_byte(value)
    yield from encode_byte(TERMINATOR)


def encode_message(text: Union[str, bytes]) -> Tuple[int, ...]:
    """Return every bit of ``text`` and its terminating zero byte, in sending order.

    Strings are sent as UTF-8.
    """
    return tuple(_bits(_payload(text)))


class ByteAssembler:
    """Collect bits, most significant first, into whole bytes."""

    def __init__(self) -> None:
        self.value = 0
        self.count = 0

    def feed(self, bit: int) -> Optional[int]:
        """Add one bit; return the byte once eight have arrived, else None."""
        if isinstance(bit, bool):
            bit = int(bit)
        if bit not in (0, 1):
            raise ValueError(f"bit must be 0 or 1, got {bit!r}")
        self.value = ((self.value << 1) | bit) & 0xFF
        self.count += 1
        if self.count < BITS_PER_BYTE:
            return None
        completed = self.value
        self.reset()
        return completed

    def reset(self) -> None:
        """Discard any partly received byte."""
        self.value = 0
        self.count = 0