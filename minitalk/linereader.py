"""Reading a stream one line at a time through a fixed-size read buffer."""

from __future__ import annotations

from typing import Any, AnyStr, Generic, Iterator, Optional, Protocol


class _Readable(Protocol[AnyStr]):
    def read(self, size: int, /) -> AnyStr: ...


class LineReader(Generic[AnyStr]):
    """Return successive lines of ``stream``, each with its newline kept.

    The stream is read ``buffer_size`` units at a time. Text read past a
    line's end is kept for the next call. Works with both text and
    binary streams; lines come back as the type the stream produces.
    """

    def __init__(self, stream: _Readable[AnyStr], buffer_size: int = 10) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: Optional[AnyStr] = None
        self._eol: Any = None

    def _fill(self) -> AnyStr:
        """Read until the pending data holds a newline or the stream ends."""
        pending = self._pending
        while pending is None or self._eol not in pending:
            try:
                chunk = self._stream.read(self._buffer_size)
            except OSError:
                self._pending = None
                raise
            if pending is None:
                pending = chunk[:0]
                self._eol = "\n" if isinstance(chunk, str) else b"\n"
            if not chunk:
                break
            pending += chunk
        return pending

    def next_line(self) -> Optional[AnyStr]:
        """Return the next line, or None once the stream is exhausted."""
        pending = self._fill()
        if not pending:
            self._pending = pending
            return None
        index = pending.find(self._eol)
        if index < 0:
            self._pending = pending[:0]
            return pending
        self._pending = pending[index + 1:]
        return pending[:index + 1]

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.next_line()) is not None:
            yield line