"""Bit-level wire format for messages carried by two user signals.

Each byte goes out most significant bit first. A 0 bit is sent as SIGUSR1
and a 1 bit as SIGUSR2. A message ends with a NUL byte. The receiver
acknowledges every bit with SIGUSR1. Once a whole message has arrived, it
also sends SIGUSR2.
"""

from __future__ import annotations

import signal
from typing import Iterator, List, Optional, Union

from .transform import atoi

ZERO_SIGNAL = signal.SIGUSR1
ONE_SIGNAL = signal.SIGUSR2
ACK_SIGNAL = signal.SIGUSR1
DONE_SIGNAL = signal.SIGUSR2

Message = Union[str, bytes, bytearray]


def encode_byte(value: int) -> List[int]:
    """Return the eight bits of value, most significant first."""
    if not 0 <= value <= 0xFF:
        raise ValueError(f"byte value out of range: {value}")
    return [(value >> shift) & 1 for shift in range(7, -1, -1)]


def encode_message(data: Message) -> Iterator[int]:
    """Return the bits of data followed by a terminating NUL byte.

    Text is encoded as UTF-8. Data that holds a NUL byte cannot be sent
    and raises ValueError.
    """
    payload = data.encode("utf-8") if isinstance(data, str) else bytes(data)
    if 0 in payload:
        raise ValueError("message must not contain NUL bytes")
    return (bit for byte in payload + b"\0" for bit in encode_byte(byte))


def parse_pid(text: str) -> int:
    """Read a process id the way the command line gives it; it must be positive."""
    pid = atoi(text)
    if pid <= 0:
        raise ValueError("Invalid PID")
    return pid


class Receiver:
    """Rebuilds messages from a stream of bits."""

    def __init__(self) -> None:
        self._buffer = bytearray()
        self._current = 0
        self._count = 0

    def feed_bit(self, bit: object) -> Optional[bytes]:
        """Take one bit; return the message once its terminator completes."""
        self._current = (self._current << 1) | (1 if bit else 0)
        self._count += 1
        if self._count < 8:
            return None
        byte = self._current
        self._current = 0
        self._count = 0
        if byte == 0:
            message = bytes(self._buffer)
            self._buffer.clear()
            return message
        self._buffer.append(byte)
        return None