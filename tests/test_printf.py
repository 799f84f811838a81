import pytest

from gold_digger.printf import (
    DECIMAL,
    HEX_LOWER,
    HEX_UPPER,
    format_string,
    printf,
    to_base,
    )


@pytest.mark.parametrize("number", [0, 1, 9, 10, 255, 4096, 123456789])
def test_to_base_matches_builtin_formats(number):
    assert to_base(number, DECIMAL) == str(number)
    assert to_base(number, HEX_LOWER) == format(number, "x")
    assert to_base(number, HEX_UPPER) == format(number, "X")


@pytest.mark.parametrize("number", [0, 5, 77, 1023])
def test_to_base_round_trip_binary(number):
    assert int(to_base(number, "01"), 2) == number


def test_to_base_rejects_negative():
    with pytest.raises(ValueError):
        to_base(-1, DECIMAL)


def test_to_base_rejects_short_alphabet():
    with pytest.raises(ValueError):
        to_base(3, "0")


@pytest.mark.parametrize("value", [0, 42, -7, 2147483647, -2147483648])
def test_decimal_conversions(value):
    assert format_string("%d", value) == str(value)
    assert format_string("%i", value) == str(value)


def test_decimal_wraps_to_int32():
    assert format_string("%d", 2**31) == str(-(2**31))


def test_unsigned_and_hex_wrap_to_uint32():
    assert format_string("%u", -1) == str(2**32 - 1)
    assert format_string("%x", -1) == format(2**32 - 1, "x")
    assert format_string("%X", 255) == format(255, "X")


def test_pointer_conversion():
    assert format_string("%p", 0) == "0x0"
    assert format_string("%p", 0xDEADBEEF) == "0x" + format(0xDEADBEEF, "x")


def test_string_and_char_conversions():
    assert format_string("%s-%c", "gold", "x") == "gold-x"
    assert format_string("%c", ord("Z")) == "Z"
    assert format_string("%s", None) == "(null)"


def test_percent_literal_and_spaces():
    assert format_string("100%%") == "100%"
    assert format_string("%   d", 5) == str(5)


def test_trailing_percent_ends_output():
    assert format_string("abc%") == "abc"
    assert format_string("abc%   ") == "abc"


def test_unknown_conversion_prints_nothing():
    assert format_string("a%qb") == "ab"
    assert format_string("a%qb%d", 3) == "ab" + str(3)


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        format_string("%d %d", 1)


def test_printf_writes_and_counts(capsys):
    count = printf("%d\n", 12)
    out = capsys.readouterr().out
    assert out == format_string("%d\n", 12)
    assert count == len(out)


def test_printf_error_message(capsys):
    message = "Error\nThe file named '.BER' was not found!"
    count = printf(message)
    assert capsys.readouterr().out == message
    assert count == len(message)