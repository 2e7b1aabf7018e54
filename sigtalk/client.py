"""Sends a message to a server process one bit per signal."""

from __future__ import annotations

import os
import signal
import sys
from typing import List, Optional, Sequence

from .cformat import cprint
from .protocol import (
    ACK_SIGNAL,
    DONE_SIGNAL,
    ONE_SIGNAL,
    ZERO_SIGNAL,
    Message,
    encode_message,
    parse_pid,
)

USAGE = "Usage : client <PID> <message>\n"
CONFIRMATION = "Message successfully received by the server, exiting...\n"


def _swallow(signum, frame) -> None:
    """Absorb a stray acknowledgement that arrives after sending stops."""


def send_message(pid: int, message: Message) -> bool:
    """Send message to pid, waiting for an acknowledgement after every bit.

    Returns True when the server confirms that the whole message arrived.
    """
    if pid <= 0:
        raise ValueError("Invalid PID")
    bits = encode_message(message)
    watched = {ACK_SIGNAL, DONE_SIGNAL}
    previous_handlers = {signum: signal.signal(signum, _swallow) for signum in watched}
    previous_mask = signal.pthread_sigmask(signal.SIG_BLOCK, watched)
    try:
        for bit in bits:
            os.kill(pid, ONE_SIGNAL if bit else ZERO_SIGNAL)
            if signal.sigwait(watched) == DONE_SIGNAL:
                return True
        # The confirmation is sent before the last acknowledgement, so it
        # is already pending when the final acknowledgement is taken.
        if DONE_SIGNAL in signal.sigpending():
            signal.sigwait({DONE_SIGNAL})
            return True
        return False
    finally:
        signal.pthread_sigmask(signal.SIG_SETMASK, previous_mask)
        for signum, handler in previous_handlers.items():
            signal.signal(signum, handler if handler is not None else signal.SIG_DFL)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command-line entry point: client <PID> <message>."""
    args: List[str] = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 2:
        sys.stderr.write(USAGE)
        return 1
    try:
        pid = parse_pid(args[0])
    except ValueError:
        sys.stderr.write("Invalid PID\n")
        return 1
    try:
        confirmed = send_message(pid, args[1])
    except OSError as exc:
        sys.stderr.write(f"{exc}\n")
        return 1
    if confirmed:
        cprint(CONFIRMATION)
    return 0


if __name__ == "__main__":
    sys.exit(main())