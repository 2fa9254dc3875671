"""Text forms of the values the formatter's conversions accept."""

from __future__ import annotations

from typing import Optional, Union

CharLike = Union[int, str]

_UINT32_MASK = 0xFFFFFFFF
_POINTER_MASK = 2**64 - 1


def _to_int32(value: int) -> int:
    value &= _UINT32_MASK
    return value - 2**32 if value >= 2**31 else value


def _require_int(value: object, what: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{what} expects an int, got {type(value).__name__}")
    return value


def format_char(c: CharLike) -> str:
    """Return ``c`` as one character; an integer code is truncated to a byte."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(_require_int(c, "character conversion") & 0xFF)


def format_str(text: Optional[str]) -> str:
    """Return ``text`` itself, or ``(null)`` when it is missing."""
    if text is None:
        return "(null)"
    if not isinstance(text, str):
        raise TypeError(f"string conversion expects a str, got {type(text).__name__}")
    return text


def format_ptr(address: Optional[int]) -> str:
    """Return an address as ``0x`` and lower-case hex, or ``(nil)`` for a null address."""
    if address is None:
        return "(nil)"
    value = _require_int(address, "pointer conversion") & _POINTER_MASK
    if value == 0:
        return "(nil)"
    return f"0x{value:x}"


def format_int(n: int) -> str:
    """Return ``n`` as a signed 32-bit decimal integer."""
    return str(_to_int32(_require_int(n, "integer conversion")))


def format_unsigned(n: int) -> str:
    """Return ``n`` as an unsigned 32-bit decimal integer."""
    return str(_require_int(n, "unsigned conversion") & _UINT32_MASK)


def format_hex(n: int, upper: bool = False) -> str:
    """Return ``n`` as an unsigned 32-bit hexadecimal integer, without prefix."""
    value = _require_int(n, "hexadecimal conversion") & _UINT32_MASK
    return f"{value:X}" if upper else f"{value:x}"