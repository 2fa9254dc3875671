import string

import pytest

from ftformat.chars import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    to_lower,
    to_upper,
)


@pytest.mark.parametrize("ch", list(string.ascii_letters))
def test_letters_are_alpha_and_alnum(ch):
    assert is_alpha(ch) is True
    assert is_alnum(ch) is True
    assert is_digit(ch) is False


@pytest.mark.parametrize("ch", list(string.digits))
def test_digits(ch):
    assert is_digit(ch) is True
    assert is_alnum(ch) is True
    assert is_alpha(ch) is False


def test_alpha_matches_ascii_letter_set_over_byte_range():
    letters = {ord(ch) for ch in string.ascii_letters}
    assert {code for code in range(256) if is_alpha(code)} == letters


def test_alnum_is_union_of_alpha_and_digit():
    for code in range(-5, 300):
        assert is_alnum(code) == (is_alpha(code) or is_digit(code))


def test_ascii_bounds():
    assert is_ascii(0) is True
    assert is_ascii(127) is True
    assert is_ascii(128) is False
    assert is_ascii(-1) is False


def test_print_bounds():
    assert is_print(" ") is True
    assert is_print("~") is True
    assert is_print(31) is False
    assert is_print(127) is False
    assert sum(1 for code in range(256) if is_print(code)) == len(
        [c for c in string.printable if c not in "\t\n\r\x0b\x0c"]
    )


def test_upper_and_lower_round_trip():
    for lower, upper in zip(string.ascii_lowercase, string.ascii_uppercase):
        assert to_upper(lower) == upper
        assert to_lower(upper) == lower
        assert to_lower(to_upper(lower)) == lower


def test_case_conversion_keeps_int_type():
    assert to_upper(ord("a")) == ord("A")
    assert to_lower(ord("Z")) == ord("z")


@pytest.mark.parametrize("ch", list(string.digits + string.punctuation + " "))
def test_non_letters_unchanged(ch):
    assert to_upper(ch) == ch
    assert to_lower(ch) == ch


def test_rejects_multi_character_string():
    with pytest.raises(ValueError):
        is_alpha("ab")


def test_rejects_other_types():
    with pytest.raises(TypeError):
        is_digit(1.5)