import io

import pytest

from ftformat.printf import FormatError, format_string, printf


@pytest.mark.parametrize(
    "fmt, args",
    [
        ("print this", ()),
        ("o", ()),
        ("%c%c%c%c", ("c", "h", "a", "r")),
        ("%s", ("coucou",)),
        ("%d", (0,)),
        ("%d", (-42,)),
        ("%i", (2147483647,)),
        ("%u", (0,)),
        ("%x", (0,)),
        ("%x", (100,)),
        ("%X", (100,)),
        (" %% ", ()),
        ("a %d b %s c", (7, "mid")),
    ],
)
def test_format_string_agrees_with_percent_operator(fmt, args):
    assert format_string(fmt, *args) == fmt % args


def test_null_string_conversion():
    assert format_string("%s", None) == "(null)"


def test_null_pointer_conversion():
    assert format_string("%p", None) == "(nil)"


def test_pointer_conversion_round_trip():
    text = format_string("%p", 0x1234ABCD)
    assert text.startswith("0x")
    assert int(text[2:], 16) == 0x1234ABCD


def test_int_min():
    assert format_string("%d", -2147483648) == "-2147483648"


def test_unsigned_max_from_negative():
    assert format_string("%u", -1) == "4294967295"


@pytest.mark.parametrize("fmt", ["hello %h hello", "%h", "% % % ", "%%%", "%"])
def test_invalid_formats_raise(fmt):
    with pytest.raises(FormatError):
        format_string(fmt)


def test_missing_format_raises():
    with pytest.raises(FormatError):
        format_string(None)


def test_missing_argument_raises():
    with pytest.raises(FormatError):
        format_string("%d and %d", 1)


def test_extra_arguments_ignored():
    assert format_string("%d", 5, 6) == format_string("%d", 5)


def test_printf_writes_and_counts():
    stream = io.StringIO()
    count = printf("%s=%x", "key", 255, stream=stream)
    assert stream.getvalue() == format_string("%s=%x", "key", 255)
    assert count == len(stream.getvalue())


def test_printf_partial_output_before_error():
    stream = io.StringIO()
    with pytest.raises(FormatError):
        printf("hello %h hello", stream=stream)
    assert stream.getvalue() == "hello "


def test_printf_defaults_to_stdout(capsys):
    count = printf("%c%s", "x", "yz")
    assert capsys.readouterr().out == "xyz"
    assert count == len("xyz")


def test_format_error_is_value_error():
    with pytest.raises(ValueError):
        format_string("%q")