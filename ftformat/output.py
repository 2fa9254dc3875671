"""Writing characters, strings and integers to a text stream."""

from __future__ import annotations

import sys
from typing import Optional, TextIO


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(c: str, stream: Optional[TextIO] = None) -> int:
    """Write one character to ``stream`` (standard output by default); return 1."""
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _target(stream).write(c)
    return 1


def put_str(text: Optional[str], stream: Optional[TextIO] = None) -> int:
    """Write ``text``; ``None`` writes nothing. Return the number of characters written."""
    if text is None:
        return 0
    _target(stream).write(text)
    return len(text)


def put_endl(text: Optional[str], stream: Optional[TextIO] = None) -> int:
    """Write ``text`` followed by a newline; return the number of characters written."""
    return put_str(text, stream) + put_char("\n", stream)


def put_nbr(n: int, stream: Optional[TextIO] = None) -> int:
    """Write the decimal form of ``n``; return the number of characters written."""
    return put_str(str(n), stream)