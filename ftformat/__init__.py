"""A printf-style formatter with character, string, memory, output and linked-list helpers."""

__version__ = "0.1.0"

__all__ = [
    "chars",
    "cli",
    "conversions",
    "linked_list",
    "memory",
    "output",
    "printf",
    "strings",
]