"""Receiving side: rebuild messages from a stream of user signals.

Each SIGUSR1 carries a zero bit and each SIGUSR2 a one bit, most
significant bit first. Complete bytes are written to the output as they
arrive. A zero byte ends a message: a newline is written and the sender
is acknowledged with SIGUSR1.
"""

from __future__ import annotations

import argparse
import os
import signal
import sys
from typing import BinaryIO, Callable, Optional, Sequence

from minitalk.printf import format_string
from minitalk.protocol import TERMINATOR, ByteAssembler


def _send_ack(pid: int) -> None:
    os.kill(pid, signal.SIGUSR1)


class Server:
    """Decode signals into bytes written to ``output``.

    ``acknowledge`` is called with the sender's pid when a message ends;
    by default it sends SIGUSR1 to that process.
    """

    def __init__(
        self,
        output: Optional[BinaryIO] = None,
        acknowledge: Optional[Callable[[int], None]] = None,
    ) -> None:
        self.output = sys.stdout.buffer if output is None else output
        self.acknowledge = _send_ack if acknowledge is None else acknowledge
        self._assembler = ByteAssembler()
        self._client_pid = 0

    def _write(self, data: bytes) -> None:
        self.output.write(data)
        self.output.flush()

    def handle(self, signum: int, sender_pid: int) -> None:
        """Take one signal from ``sender_pid`` as one bit of the message."""
        if signum == signal.SIGUSR2:
            bit = 1
        elif signum == signal.SIGUSR1:
            bit = 0
        else:
            raise ValueError(f"unexpected signal: {signum}")
        self._client_pid = sender_pid
        byte = self._assembler.feed(bit)
        if byte is None:
            return
        if byte == TERMINATOR:
            self._write(b"\n")
            if self._client_pid != 0:
                self.acknowledge(self._client_pid)
            self._client_pid = 0
        else:
            self._write(bytes((byte,)))

    def serve(self) -> None:
        """Announce this process's pid and handle signals until interrupted."""
        signals = {signal.SIGUSR1, signal.SIGUSR2}
        previous = signal.pthread_sigmask(signal.SIG_BLOCK, signals)
        try:
            banner = format_string("Server ON\nServer PID: %d\n", os.getpid())
            self._write(banner.encode("ascii"))
            while True:
                info = signal.sigwaitinfo(signals)
                self.handle(info.si_signo, info.si_pid)
        except KeyboardInterrupt:
            pass
        finally:
            signal.pthread_sigmask(signal.SIG_SETMASK, previous)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the server in the foreground."""
    parser = argparse.ArgumentParser(
        prog="minitalk-server",
        description="Print messages sent bit by bit with SIGUSR1 and SIGUSR2.",
    )
    parser.parse_args(argv)
    Server().serve()
    return 0


if __name__ == "__main__":
    sys.exit(main())