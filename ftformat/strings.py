"""String utilities: parsing, conversion, splitting, trimming, searching and bounded copies."""

from __future__ import annotations

from itertools import zip_longest
from typing import Callable, MutableSequence, Optional, Tuple, Union

from ftformat.chars import is_digit

CharLike = Union[int, str]

_LONG_MAX = 2**63 - 1
_WHITESPACE = " \t\n\v\f\r"


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 2**32 if value >= 2**31 else value


def _as_char(c: CharLike) -> str:
    """Turn a one-character string or an integer code (truncated to a byte) into a character."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return chr(c & 0xFF)


def _check_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative: {value}")


def atoi(text: str) -> int:
    """Parse a leading decimal integer, C style.

    Leading whitespace is skipped, one optional sign is accepted, and parsing
    stops at the first non-digit. On overflow of the long range the result is
    -1 for a positive number and 0 for a negative one; otherwise the value is
    truncated to a 32-bit signed integer.
    """
    stripped = text.lstrip(_WHITESPACE)
    sign = 1
    if stripped[:1] in ("-", "+"):
        if stripped[0] == "-":
            sign = -1
        stripped = stripped[1:]
    result = 0
    for ch in stripped:
        if not is_digit(ch):
            break
        if result > (_LONG_MAX - (ord(ch) + ord("0"))) // 10:
            return 0 if sign < 0 else -1
        result = result * 10 + (ord(ch) - ord("0"))
    return _to_int32(result * sign)


def itoa(n: int) -> str:
    """Return the decimal representation of ``n``."""
    return str(n)


def split(text: Optional[str], sep: str) -> list[str]:
    """Split ``text`` on ``sep``, dropping the empty pieces between repeated separators."""
    if text is None:
        return []
    sep = _as_char(sep)
    return [word for word in text.split(sep) if word]


def strtrim(text: Optional[str], charset: Optional[str]) -> Optional[str]:
    """Remove every leading and trailing character that appears in ``charset``.

    Returns None when either argument is None.
    """
    if text is None or charset is None:
        return None
    if not charset:
        return text
    return text.strip(charset)


def substr(text: Optional[str], start: int, length: int) -> Optional[str]:
    """Return at most ``length`` characters of ``text`` beginning at ``start``.

    A start past the end gives the empty string; a None text gives None.
    """
    if text is None:
        return None
    _check_non_negative("start", start)
    _check_non_negative("length", length)
    if start >= len(text):
        return ""
    return text[start:start + length]


def strjoin(first: Optional[str], second: Optional[str]) -> Optional[str]:
    """Concatenate two strings; a missing one is treated as absent, both missing gives None."""
    if first is None and second is None:
        return None
    if first is None:
        return second
    if second is None:
        return first
    return first + second


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Find ``needle`` wholly within the first ``length`` characters of ``haystack``.

    Returns the index of the match, 0 for an empty needle, or None.
    """
    _check_non_negative("length", length)
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def strchr(text: str, c: CharLike) -> Optional[int]:
    """Index of the first occurrence of ``c``; the terminator ``'\\0'`` is found at ``len(text)``."""
    ch = _as_char(c)
    if ch == "\0":
        return len(text)
    index = text.find(ch)
    return None if index < 0 else index


def strrchr(text: str, c: CharLike) -> Optional[int]:
    """Index of the last occurrence of ``c``; the terminator ``'\\0'`` is found at ``len(text)``."""
    ch = _as_char(c)
    if ch == "\0":
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns the code difference of the first unequal pair (the end of a string
    counting as code 0), or 0 when they agree.
    """
    _check_non_negative("n", n)
    for a, b in zip_longest(first[:n], second[:n], fillvalue="\0"):
        if a != b:
            return ord(a) - ord(b)
    return 0


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters including the terminator.

    Returns the copied text (at most ``size - 1`` characters, empty when
    ``size`` is 0) and the full length of ``src``.
    """
    _check_non_negative("size", size)
    copied = src[:size - 1] if size > 0 else ""
    return copied, len(src)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` inside a buffer of ``size`` characters including the terminator.

    Returns the resulting text and the length that was attempted: ``len(src)``
    when ``size`` is 0, ``size + len(src)`` when ``dst`` already fills the
    buffer, and ``len(dst) + len(src)`` otherwise.
    """
    _check_non_negative("size", size)
    if size == 0:
        return dst, len(src)
    if size <= len(dst):
        return dst, size + len(src)
    room = size - 1 - len(dst)
    return dst + src[:room], len(dst) + len(src)


def strmapi(text: Optional[str], func: Optional[Callable[[int, str], str]]) -> Optional[str]:
    """Build a new string from ``func(index, char)`` for every character; None if either is missing."""
    if text is None or func is None:
        return None
    return "".join(func(index, ch) for index, ch in enumerate(text))


def striteri(
    chars: Optional[MutableSequence[str]],
    func: Optional[Callable[[int, str], str]],
) -> None:
    """Replace each element of ``chars`` in place with ``func(index, char)``."""
    if chars is None or func is None:
        return
    for index, ch in enumerate(list(chars)):
        chars[index] = func(index, ch)