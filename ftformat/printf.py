"""A small printf: the conversions c, s, p, d, i, u, x, X and %%."""

from __future__ import annotations

import sys
from typing import Any, Callable, Dict, Iterator, Optional, TextIO

from ftformat.conversions import (
    format_char,
    format_hex,
    format_int,
    format_ptr,
    format_str,
    format_unsigned,
)


class FormatError(ValueError):
    """Raised for a missing format, an unknown conversion or a missing argument."""


_CONVERTERS: Dict[str, Callable[[Any], str]] = {
    "c": format_char,
    "s": format_str,
    "p": format_ptr,
    "d": format_int,
    "i": format_int,
    "u": format_unsigned,
    "x": format_hex,
    "X": lambda n: format_hex(n, True),
}


def _pieces(fmt: Optional[str], args: tuple) -> Iterator[str]:
    """Yield the output of ``fmt`` piece by piece, raising where it is invalid."""
    if fmt is None:
        raise FormatError("format string is missing")
    remaining = iter(args)
    chars = iter(fmt)
    literal = []
    for ch in chars:
        if ch != "%":
            literal.append(ch)
            continue
        if literal:
            yield "".join(literal)
            literal = []
        spec = next(chars, "")
        if not spec:
            raise FormatError("format string ends with a lone '%'")
        if spec == "%":
            yield "%"
            continue
        converter = _CONVERTERS.get(spec)
        if converter is None:
            raise FormatError(f"unknown conversion '%{spec}'")
        try:
            value = next(remaining)
        except StopIteration:
            raise FormatError(f"missing argument for '%{spec}'") from None
        yield converter(value)
    if literal:
        yield "".join(literal)


def format_string(fmt: Optional[str], *args: Any) -> str:
    """Return ``fmt`` with its conversions replaced by the formatted ``args``."""
    return "".join(_pieces(fmt, args))


def printf(fmt: Optional[str], *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write the formatted text to ``stream`` (standard output by default).

    Returns the number of characters written. Text preceding an invalid
    conversion is written before :class:`FormatError` is raised.
    """
    out = sys.stdout if stream is None else stream
    count = 0
    for piece in _pieces(fmt, args):
        out.write(piece)
        count += len(piece)
    return count