"""Byte-buffer primitives working on bytearrays and other byte-like objects."""

from __future__ import annotations

from typing import Optional, Union

Buffer = Union[bytearray, memoryview]
ByteData = Union[bytes, bytearray, memoryview]


def _check_count(n: int, *buffers: ByteData) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"byte count {n} exceeds buffer length {len(buf)}")


def bzero(buf: Buffer, n: int) -> None:
    """Set the first n bytes of buf to zero."""
    _check_count(n, buf)
    buf[:n] = bytes(n)


def memset(buf: Buffer, value: int, n: int) -> Buffer:
    """Fill the first n bytes of buf with the low byte of value and return buf."""
    _check_count(n, buf)
    buf[:n] = bytes([value & 0xFF]) * n
    return buf


def memcpy(dst: Buffer, src: ByteData, n: int) -> Buffer:
    """Copy n bytes from src to the start of dst and return dst."""
    _check_count(n, dst, src)
    dst[:n] = bytes(memoryview(src)[:n])
    return dst


def memmove(buf: Buffer, dest: int, src: int, n: int) -> Buffer:
    """Copy n bytes inside buf from offset src to offset dest, overlap allowed."""
    if dest < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    if max(dest, src) + n > len(buf):
        raise ValueError("move runs past the end of the buffer")
    if n and dest != src:
        buf[dest:dest + n] = bytes(buf[src:src + n])
    return buf


def memchr(data: ByteData, value: int, n: int) -> Optional[int]:
    """Return the offset of the first byte equal to value within n bytes, or None."""
    _check_count(n, data)
    index = bytes(memoryview(data)[:n]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(a: ByteData, b: ByteData, n: int) -> int:
    """Compare n bytes; return the difference of the first unequal pair, else 0."""
    _check_count(n, a, b)
    for x, y in zip(bytes(memoryview(a)[:n]), bytes(memoryview(b)[:n])):
        if x != y:
            return x - y
    return 0


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of count elements of size bytes each."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)