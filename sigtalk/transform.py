"""String conversion, splitting, slicing and per-character mapping."""

from __future__ import annotations

from typing import Callable, List, MutableSequence, Optional, TypeVar

_WHITESPACE = " \n\r\v\f\t"

T = TypeVar("T")


def atoi(text: str) -> int:
    """Parse a leading decimal integer, as the C library function does.

    Leading whitespace is skipped, then one optional sign, then as many
    digits as follow. Anything after the digits is ignored. No digits at
    all gives 0.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] == "-":
        sign = -1
        rest = rest[1:]
    elif rest[:1] == "+":
        rest = rest[1:]
    value = 0
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        value = value * 10 + (ord(ch) - ord("0"))
    return sign * value


def itoa(n: int) -> str:
    """Return the decimal text of n."""
    return str(int(n))


def split(text: str, sep: str) -> List[str]:
    """Split text on the character sep, dropping empty pieces."""
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return [word for word in text.split(sep) if word]


def substr(text: str, start: int, length: int) -> str:
    """Return at most length characters of text beginning at start.

    A start at or past the end gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start:start + length]


def strjoin(a: str, b: str) -> str:
    """Return a followed by b."""
    return a + b


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in charset from both ends of text."""
    if not charset:
        return text
    return text.strip(charset)


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from func(index, char) applied to every character."""
    return "".join(func(index, ch) for index, ch in enumerate(text))


def striteri(chars: MutableSequence[T], func: Callable[[int, T], Optional[T]]) -> None:
    """Apply func(index, item) to every item of chars, in place.

    Whatever func returns replaces the item; returning None leaves it as is.
    """
    for index, item in enumerate(list(chars)):
        result = func(index, item)
        if result is not None:
            chars[index] = result