"""A small printf: %c %s %p %d %i %u %x %X and %%.

An unknown conversion character produces no output and consumes no
argument. A lone ``%`` at the very end of the format is copied as is.
"""

from __future__ import annotations

import re
import sys
from typing import Any, Iterator

_DIRECTIVE = re.compile(r"%(.)", re.DOTALL)
_UINT_MASK = 0xFFFFFFFF
_PTR_MASK = 0xFFFFFFFFFFFFFFFF


def _as_int32(value: int) -> int:
    value = int(value) & _UINT_MASK
    return value - (1 << 32) if value & 0x80000000 else value


def _as_uint32(value: int) -> int:
    return int(value) & _UINT_MASK


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(int(value) & 0xFF)


def _string(value: Any) -> str:
    if value is None:
        return "(null)"
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors="replace")
    return str(value)


def _pointer(value: Any) -> str:
    if not value:
        return "(nil)"
    return f"0x{int(value) & _PTR_MASK:x}"


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec not in "cspdiuxX":
        return ""
    try:
        value = next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None
    if spec == "c":
        return _char(value)
    if spec == "s":
        return _string(value)
    if spec == "p":
        return _pointer(value)
    if spec in "di":
        return str(_as_int32(value))
    if spec == "u":
        return str(_as_uint32(value))
    return format(_as_uint32(value), spec)


def cformat(fmt: str, *args: Any) -> str:
    """Return fmt with its conversions replaced by the given arguments."""
    remaining = iter(args)
    return _DIRECTIVE.sub(lambda match: _convert(match.group(1), remaining), fmt)


def cprint(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output; return its length."""
    text = cformat(fmt, *args)
    sys.stdout.write(text)
    sys.stdout.flush()
    return len(text)