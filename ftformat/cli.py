"""Command that prints the formatter's output next to the reference formatting."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence, TextIO

from ftformat.printf import FormatError, printf

_COMPARED = (" %% ",)
_INVALID = ("hello %h hello", "%h", "% % % ", "%%%")


def _run_ours(fmt: str, out: TextIO) -> None:
    out.write("FT_PRINTF\n")
    try:
        count = printf(fmt, stream=out)
    except FormatError:
        count = -1
    out.write(f"\nreturn = {count}")


def _run_reference(fmt: str, out: TextIO) -> None:
    out.write("\n\nPRINTF\n")
    text = fmt % ()
    out.write(text)
    out.write(f"\nreturn = {len(text)}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the demonstration, or format each given string with no arguments."""
    parser = argparse.ArgumentParser(
        description="Show what the formatter prints and returns for format strings."
    )
    parser.add_argument("formats", nargs="*", help="format strings to try")
    options = parser.parse_args(argv)
    out = sys.stdout

    if options.formats:
        for fmt in options.formats:
            _run_ours(fmt, out)
            out.write("\n\n")
        return 0

    out.write("%%\n\n")
    for fmt in _COMPARED:
        _run_ours(fmt, out)
        _run_reference(fmt, out)
        out.write("\n\n")

    out.write("WRONG %...\n\n")
    for fmt in _INVALID:
        _run_ours(fmt, out)
        out.write("\n\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())