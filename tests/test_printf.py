import io

import pytest

from minitalk.printf import format_string, pointer_repr, printf, to_hex

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
UINT_MAX = 2**32 - 1


def test_to_hex_zero():
    assert to_hex(0) == "0"
    assert to_hex(0, upper=True) == "0"


@pytest.mark.parametrize("n", [1, 15, 16, 42, 255, 4096, 123456789, UINT_MAX])
def test_to_hex_round_trip(n):
    text = to_hex(n)
    assert int(text, 16) == n
    assert to_hex(n, upper=True) == text.upper()
    assert text == text.lower()


def test_to_hex_negative_wraps_to_unsigned():
    assert to_hex(-1) == "ffffffff"
    assert to_hex(-1, upper=True) == "FFFFFFFF"


def test_to_hex_wraps_above_32_bits():
    assert to_hex(2**32) == "0"
    assert to_hex(2**32 + 42) == to_hex(42)


def test_to_hex_rejects_non_int():
    with pytest.raises(TypeError):
        to_hex("42")


def test_pointer_repr_null():
    assert pointer_repr(0) == "(nil)"
    assert pointer_repr(None) == "(nil)"


@pytest.mark.parametrize("address", [1, 255, 0x7FFE1234ABCD, 2**64 - 1])
def test_pointer_repr_round_trip(address):
    text = pointer_repr(address)
    assert text.startswith("0x")
    assert int(text[2:], 16) == address
    assert text == text.lower()


def test_format_characters():
    assert format_string("Character: %c\n", "A") == "Character: A\n"
    assert format_string("Character: %c\n", ord("A")) == "Character: A\n"
    assert format_string("Null character: %c\n", "\0") == "Null character: \0\n"


def test_format_strings():
    assert format_string("Empty string: %s\n", "") == "Empty string: \n"
    assert format_string("Null string: %s\n", None) == "Null string: (null)\n"
    assert format_string("Regular string: %s\n", "Hello, World!") == "Regular string: Hello, World!\n"


def test_format_pointers():
    assert format_string("No pointer: %p\n", None) == "No pointer: (nil)\n"
    assert format_string("Valid pointer: %p\n", 0xDEAD) == f"Valid pointer: {pointer_repr(0xDEAD)}\n"


@pytest.mark.parametrize("n", [42, -42, 0, INT_MAX, INT_MIN])
def test_format_signed_integers(n):
    assert format_string("%d", n) == str(n)
    assert format_string("%i", n) == str(n)


def test_format_int_min():
    assert format_string("Minimum integer: %d\n", INT_MIN) == "Minimum integer: -2147483648\n"


def test_format_signed_wraps():
    assert format_string("%d", INT_MAX + 1) == str(INT_MIN)


@pytest.mark.parametrize("n", [0, 42, UINT_MAX])
def test_format_unsigned(n):
    assert format_string("%u", n) == str(n)


def test_format_negative_unsigned_wraps():
    assert int(format_string("%u", -42)) == 2**32 - 42
    assert format_string("%u", -1) == str(UINT_MAX)


def test_format_hex():
    assert format_string("Positive hex: %x\n", 42) == "Positive hex: 2a\n"
    assert format_string("%X", 42) == format_string("%x", 42).upper()
    assert format_string("%x", -1) == format_string("%x", UINT_MAX)
    assert format_string("%x", 0) == "0"


def test_format_percent_signs():
    assert format_string("Percent sign: %%\n") == "Percent sign: %\n"
    assert format_string("Multiple percent signs: %% %% %%\n") == "Multiple percent signs: % % %\n"


def test_format_mixed_types():
    result = format_string("Mixed types: %d %s %c %x %p\n", 42, "Hello", "A", 255, 4096)
    assert result == f"Mixed types: 42 Hello A {to_hex(255)} {pointer_repr(4096)}\n"


def test_unknown_conversion_is_dropped_without_consuming():
    assert format_string("a%qb") == "ab"
    assert format_string("%q%d", 7) == "7"


def test_trailing_percent_ends_format():
    assert format_string("abc%") == "abc"


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        format_string("%d %d", 1)


def test_wrong_argument_types_raise():
    with pytest.raises(TypeError):
        format_string("%s", 5)
    with pytest.raises(TypeError):
        format_string("%d", "5")
    with pytest.raises(ValueError):
        format_string("%c", "ab")


def test_extra_arguments_are_ignored():
    assert format_string("%d", 1, 2, 3) == "1"


def test_printf_writes_and_counts():
    out = io.StringIO()
    count = printf("Server PID: %d\n", 1234, file=out)
    assert out.getvalue() == "Server PID: 1234\n"
    assert count == len(out.getvalue())


def test_printf_counts_null_character():
    out = io.StringIO()
    count = printf("%c", "\0", file=out)
    assert count == 1
    assert out.getvalue() == "\0"


def test_printf_defaults_to_stdout(capsys):
    count = printf("Server ON\n")
    captured = capsys.readouterr()
    assert captured.out == "Server ON\n"
    assert count == len("Server ON\n")