# ftformat

A compact printf-style formatter together with a set of small, predictable
helpers for characters, strings, byte buffers, text output and singly linked
lists.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Formatting

`ftformat.printf.format_string(fmt, *args)` builds a string from a format and
its arguments. The conversions understood are:

| Spec | Meaning                                                   |
|------|-----------------------------------------------------------|
| `%c` | one character (a one-character str, or an int code)       |
| `%s` | a string; `None` prints as `(null)`                       |
| `%p` | an address as `0x` and lower hex; `None` or 0 is `(nil)`  |
| `%d` | a signed 32-bit integer                                   |
| `%i` | same as `%d`                                              |
| `%u` | an unsigned 32-bit integer                                |
| `%x` | an unsigned 32-bit integer in lower-case hex              |
| `%X` | an unsigned 32-bit integer in upper-case hex              |
| `%%` | a literal percent sign                                    |

Integers wider than 32 bits are wrapped, as a C `int` or `unsigned int`
would be: `format_string("%d", 2**31)` gives `'-2147483648'`.

`ftformat.printf.FormatError` (a `ValueError`) is raised when the format is
`None`, when a `%` is followed by any other character or ends the format,
and when there are fewer arguments than conversions.

```python
from ftformat.printf import format_string, printf

format_string("%s has %d items (%x)", "box", 42, 255)
# 'box has 42 items (ff)'

count = printf("%c%c%c\n", "a", "b", "c")   # writes to stdout, returns 4
```

`printf(fmt, *args, stream=None)` writes to `stream` (standard output by
default) and returns the number of characters written. Text that comes
before an invalid conversion is written before `FormatError` is raised.

Each conversion is also available on its own in `ftformat.conversions`:
`format_char`, `format_str`, `format_ptr`, `format_int`, `format_unsigned`
and `format_hex(n, upper=False)`.

## Helpers

- `ftformat.chars`: `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`,
  `is_print`, `to_upper`, `to_lower`. Each takes an int code or a
  one-character string; the case functions return the same kind they get.
- `ftformat.strings`: `atoi`, `itoa`, `split`, `strtrim`, `substr`,
  `strjoin`, `strnstr`, `strchr`, `strrchr`, `strncmp`, `strlcpy`,
  `strlcat`, `strmapi`, `striteri`. Searches return an index or `None`;
  `strlcpy` and `strlcat` return the resulting text together with the
  length that was attempted.
- `ftformat.memory`: `memset`, `bzero`, `memcpy`, `memmove`, `memchr`,
  `memcmp`, `calloc`, working on `bytearray` buffers. `memmove` copies
  between two offsets of one buffer, overlapping or not; `memchr` returns an
  index or `None`; `calloc` raises `MemoryError` on size overflow.
- `ftformat.output`: `put_char`, `put_str`, `put_endl`, `put_nbr`, writing
  to any text stream (standard output by default) and returning the number
  of characters written.
- `ftformat.linked_list`: `Node` and `LinkedList`, with `push_front`,
  `push_back`, `last`, `clear`, `for_each`, `map`, `len()` and iteration
  over the contents.

```python
from ftformat.strings import atoi, itoa, split
from ftformat.linked_list import LinkedList

split("  hello  world ", " ")   # ['hello', 'world']
itoa(-2147483648)               # '-2147483648'
atoi("  -42abc")                # -42

items = LinkedList([1, 2, 3])
doubled = items.map(lambda x: x * 2)
list(doubled)                   # [2, 4, 6]
```

## Command line

```
ftformat
ftformat "100%% sure" "bad %h"
```

With no arguments the command runs a short demonstration: a format holding
a literal percent sign, printed by the formatter and by Python's own `%`
operator, followed by several malformed formats. For each it shows the text
printed and the value returned, `-1` when the format is rejected.

Given format strings as arguments, it formats each of them with no
arguments in the same way.

## What it does not do

The formatter knows only the conversions listed above. It has no flags,
field widths, precision or length modifiers, and no floating-point
conversions.