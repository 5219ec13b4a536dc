import string

import pytest

from minitalk.ctype import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    is_space,
    to_lower,
    to_upper,
)


@pytest.mark.parametrize("ch", list(string.ascii_letters))
def test_letters_are_alpha_and_not_digits(ch):
    assert is_alpha(ch)
    assert not is_digit(ch)


@pytest.mark.parametrize("ch", list(string.digits))
def test_digits_are_digit_and_not_alpha(ch):
    assert is_digit(ch)
    assert not is_alpha(ch)


def test_punctuation_is_neither_alpha_nor_digit():
    assert not any(is_alpha(ch) or is_digit(ch) for ch in string.punctuation)


def test_alnum_is_union_of_alpha_and_digit():
    for code in range(-5, 300):
        assert is_alnum(code) == (is_alpha(code) or is_digit(code))


def test_is_ascii_bounds():
    assert all(is_ascii(code) for code in range(128))
    assert not is_ascii(128)
    assert not is_ascii(-1)
    assert not is_ascii("é")


def test_is_print():
    visible = string.ascii_letters + string.digits + string.punctuation + " "
    assert all(is_print(ch) for ch in visible)
    assert not any(is_print(ch) for ch in "\t\n\r\x00\x7f")


def test_is_space_only_space_tab_newline():
    assert all(is_space(ch) for ch in " \t\n")
    assert not any(is_space(ch) for ch in "\r\v\fa0")


def test_case_conversion_of_letters():
    for lower, upper in zip(string.ascii_lowercase, string.ascii_uppercase):
        assert to_upper(lower) == upper
        assert to_lower(upper) == lower
        assert to_upper(upper) == upper
        assert to_lower(lower) == lower


def test_case_conversion_leaves_others_alone():
    for ch in string.digits + string.punctuation + " \n":
        assert to_upper(ch) == ch
        assert to_lower(ch) == ch


def test_case_conversion_keeps_int_kind():
    assert to_upper(ord("q")) == ord("Q")
    assert to_lower(ord("Q")) == ord("q")


def test_multi_character_string_rejected():
    with pytest.raises(ValueError):
        is_alpha("ab")
    with pytest.raises(ValueError):
        to_upper("")


def test_wrong_type_rejected():
    with pytest.raises(TypeError):
        is_digit(1.5)
    with pytest.raises(TypeError):
        to_lower(None)