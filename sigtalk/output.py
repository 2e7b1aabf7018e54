"""Writing characters, strings and numbers to raw file descriptors."""

from __future__ import annotations

import os
from typing import Optional, Union


def _write_all(fd: int, data: bytes) -> int:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]
    return len(data)


def putchar_fd(c: Union[str, int], fd: int) -> int:
    """Write one character to fd and return the number of bytes written."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        data = c.encode("utf-8")
    else:
        data = bytes([c & 0xFF])
    return _write_all(fd, data)


def putstr_fd(s: Optional[str], fd: int) -> int:
    """Write s to fd; None writes nothing. Returns the number of bytes written."""
    if s is None:
        return 0
    return _write_all(fd, s.encode("utf-8"))


def putendl_fd(s: Optional[str], fd: int) -> int:
    """Write s and a newline to fd; None writes nothing at all."""
    if s is None:
        return 0
    return _write_all(fd, s.encode("utf-8") + b"\n")


def putnbr_fd(n: int, fd: int) -> int:
    """Write the decimal text of n to fd."""
    return _write_all(fd, str(int(n)).encode("ascii"))