"""Receives signal-encoded messages and prints each one on its own line."""

from __future__ import annotations

import contextlib
import os
import signal
import sys
from typing import Optional, Sequence, TextIO

from .cformat import cformat
from .protocol import ACK_SIGNAL, DONE_SIGNAL, ONE_SIGNAL, ZERO_SIGNAL, Receiver


class Server:
    """Decodes bits from signals and writes every finished message to out."""

    def __init__(self, out: Optional[TextIO] = None) -> None:
        self.out = out if out is not None else sys.stdout
        self._receiver = Receiver()

    def _send(self, pid: int, signum: int) -> None:
        # A client that has already gone away is not an error for the server.
        with contextlib.suppress(ProcessLookupError):
            os.kill(pid, signum)

    def handle(self, signum: int, sender_pid: int) -> Optional[bytes]:
        """Take one bit-carrying signal from sender_pid and acknowledge it.

        Returns the message when this signal completed one, else None.
        """
        message = self._receiver.feed_bit(signum == ONE_SIGNAL)
        if message is not None:
            self.out.write(cformat("%s\n", message))
            self.out.flush()
            self._send(sender_pid, DONE_SIGNAL)
        self._send(sender_pid, ACK_SIGNAL)
        return message

    def serve_forever(self) -> None:
        """Announce the process id, then handle incoming signals until interrupted."""
        self.out.write(cformat("server PID : %d\n", os.getpid()))
        self.out.flush()
        watched = {ZERO_SIGNAL, ONE_SIGNAL}
        previous_mask = signal.pthread_sigmask(signal.SIG_BLOCK, watched)
        try:
            while True:
                info = signal.sigwaitinfo(watched)
                self.handle(info.si_signo, info.si_pid)
        finally:
            signal.pthread_sigmask(signal.SIG_SETMASK, previous_mask)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command-line entry point; runs until interrupted."""
    server = Server()
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        # The exit status is the interrupting signal's number.
        return int(signal.SIGINT)
    return 0


if __name__ == "__main__":
    sys.exit(main())