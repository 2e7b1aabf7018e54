"""NUL-terminated string inspection, search and bounded copying.

Strings may be ``str`` or byte-like objects. Like C strings, they end at the
first NUL character, and anything after it is ignored. The bounded copy
functions write into a ``bytearray`` that plays the part of a fixed-size
destination buffer.
"""

from __future__ import annotations

import operator
from typing import List, Optional, Union

Text = Union[str, bytes, bytearray, memoryview]
CharLike = Union[int, str, bytes]


def _terminated(s: Text) -> Union[str, bytes, bytearray]:
    """Return s cut at its first NUL character."""
    if isinstance(s, memoryview):
        s = s.tobytes()
    end = s.find("\0") if isinstance(s, str) else s.find(0)
    return s if end < 0 else s[:end]


def _codes(s: Text) -> List[int]:
    t = _terminated(s)
    return [ord(ch) for ch in t] if isinstance(t, str) else list(t)


def _char_code(c: CharLike) -> int:
    if isinstance(c, (str, bytes)):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    # An integer is narrowed to a char, as the C cast does.
    return operator.index(c) & 0xFF


def _as_bytes(src: Text) -> bytes:
    t = _terminated(src)
    return t.encode("utf-8") if isinstance(t, str) else bytes(t)


def _check_buffer(dst: bytearray, size: int) -> None:
    if size < 0:
        raise ValueError(f"buffer size must not be negative, got {size}")
    if size > len(dst):
        raise ValueError(f"buffer size {size} exceeds buffer length {len(dst)}")


def strlen(s: Text) -> int:
    """Return the number of characters before the first NUL."""
    return len(_terminated(s))


def strchr(s: Text, c: CharLike) -> Optional[int]:
    """Return the index of the first occurrence of c, or None.

    Searching for NUL finds the terminator, at index ``strlen(s)``.
    """
    codes = _codes(s)
    target = _char_code(c)
    if target == 0:
        return len(codes)
    try:
        return codes.index(target)
    except ValueError:
        return None


def strrchr(s: Text, c: CharLike) -> Optional[int]:
    """Return the index of the last occurrence of c, or None.

    Searching for NUL finds the terminator, at index ``strlen(s)``.
    """
    codes = _codes(s)
    target = _char_code(c)
    if target == 0:
        return len(codes)
    for index in reversed(range(len(codes))):
        if codes[index] == target:
            return index
    return None


def strncmp(a: Text, b: Text, n: int) -> int:
    """Compare at most n characters; return the difference at the first mismatch."""
    if n < 0:
        raise ValueError(f"count must not be negative, got {n}")
    left, right = _codes(a), _codes(b)
    for i in range(n):
        x = left[i] if i < len(left) else 0
        y = right[i] if i < len(right) else 0
        if x != y or x == 0:
            return x - y
    return 0


def strnstr(haystack: Text, needle: Text, n: int) -> Optional[int]:
    """Return where needle first lies wholly within the first n characters.

    An empty needle matches at index 0; no match gives None.
    """
    if n < 0:
        raise ValueError(f"count must not be negative, got {n}")
    target = _terminated(needle)
    if not target:
        return 0
    index = _terminated(haystack)[:n].find(target)
    return None if index < 0 else index


def strlcpy(dst: bytearray, src: Text, size: int) -> int:
    """Copy src into dst, writing at most size bytes including the NUL.

    Returns the length of src, so a result >= size means truncation.
    """
    _check_buffer(dst, size)
    data = _as_bytes(src)
    if size > 0:
        part = data[:size - 1]
        dst[:len(part)] = part
        dst[len(part)] = 0
    return len(data)


def strlcat(dst: bytearray, src: Text, size: int) -> int:
    """Append src to the string in dst, keeping the total within size bytes.

    Returns the length the full result would have had: the length of src
    plus the smaller of size and the initial length of dst.
    """
    _check_buffer(dst, size)
    data = _as_bytes(src)
    start = strlen(dst)
    part = data[:max(0, size - start - 1)]
    end = start + len(part)
    dst[start:end] = part
    if end < size:
        dst[end] = 0
    return len(data) + min(size, start)


def strdup(s: Text) -> Union[str, bytes, bytearray]:
    """Return a fresh copy of the string up to its first NUL."""
    return _terminated(s)[:]