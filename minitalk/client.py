"""Sending side: transmit a message to a server one bit per signal."""

from __future__ import annotations

import os
import signal
import sys
import time
from typing import Callable, Optional, Sequence, Union

from minitalk.numbers import atoi
from minitalk.protocol import encode_message

DEFAULT_DELAY = 0.0005


def send_message(
    pid: int,
    text: Union[str, bytes],
    delay: float = DEFAULT_DELAY,
    kill: Optional[Callable[[int, int], None]] = None,
) -> bool:
    """Send ``text`` and its terminating zero byte to ``pid``.

    A one bit is sent as SIGUSR2 and a zero bit as SIGUSR1, each followed
    by a pause of ``delay`` seconds. Returns True if the server
    acknowledged the message with SIGUSR1 before sending finished.
    """
    if pid <= 0:
        raise ValueError(f"pid must be positive, got {pid}")
    send = os.kill if kill is None else kill
    bits = encode_message(text)
    received = False

    def on_ack(signum, frame):
        nonlocal received
        received = True

    previous = signal.signal(signal.SIGUSR1, on_ack)
    try:
        for bit in bits:
            send(pid, signal.SIGUSR2 if bit else signal.SIGUSR1)
            if delay:
                time.sleep(delay)
    finally:
        signal.signal(signal.SIGUSR1, signal.SIG_DFL if previous is None else previous)
    return received


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Send the message in ``argv[1]`` to the server whose pid is ``argv[0]``."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 2:
        return 1
    pid = atoi(args[0])
    # A reply arriving after sending has finished must not end the process.
    signal.signal(signal.SIGUSR1, signal.SIG_IGN)
    try:
        acknowledged = send_message(pid, args[1])
    except ValueError as exc:
        sys.stderr.write(f"client: {exc}\n")
        return 1
    if acknowledged:
        sys.stdout.write("Mensagem recebida!\n")
    else:
        sys.stdout.write("Erro: Sem resposta do servidor.\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())