import pytest
from hypothesis import given, strategies as st

from miniprintf.integers import (
    format_alt_hex,
    format_alt_octal,
    format_binary,
    format_hex,
    format_int,
    format_long_hex,
    format_long_int,
    format_long_octal,
    format_long_unsigned,
    format_octal,
    format_plus_int,
    format_pointer,
    format_short_hex,
    format_short_int,
    format_short_octal,
    format_short_unsigned,
    format_space_int,
    format_unsigned,
)

INT32 = st.integers(min_value=-(2**31), max_value=2**31 - 1)
ANY = st.integers(min_value=-(2**70), max_value=2**70)


@pytest.mark.parametrize(
    "func",
    [
        format_binary,
        format_octal,
        format_long_octal,
        format_short_octal,
        format_hex,
        format_long_hex,
        format_short_hex,
        format_alt_octal,
        format_alt_hex,
        format_int,
        format_unsigned,
    ],
)
def test_zero_is_a_single_digit(func):
    assert func(0) == "0"


def test_binary_of_example_value():
    result = format_binary(98)
    assert result.startswith("1")
    assert int(result, 2) == 98


@given(INT32)
def test_int_matches_value_in_range(value):
    assert format_int(value) == str(value)


def test_int_wraps_at_32_bits():
    assert format_int(2**31) == str(-(2**31))
    assert format_int(-(2**31)) == str(-(2**31))


def test_long_int_wraps_at_64_bits():
    assert format_long_int(2**63) == str(-(2**63))
    assert format_long_int(2**40) == str(2**40)


def test_short_int_wraps_at_16_bits():
    assert format_short_int(2**15) == str(-(2**15))
    assert format_short_int(2**16 + 7) == str(7)


@given(ANY)
def test_unsigned_variants_are_modular(value):
    assert int(format_unsigned(value)) == value % 2**32
    assert int(format_long_unsigned(value)) == value % 2**64
    assert int(format_short_unsigned(value)) == value % 2**16


@given(ANY)
def test_binary_round_trip(value):
    result = format_binary(value)
    assert int(result, 2) == value % 2**32
    assert result == "0" or result[0] == "1"


@given(ANY)
def test_octal_variants_round_trip(value):
    assert int(format_octal(value), 8) == value % 2**32
    assert int(format_long_octal(value), 8) == value % 2**64
    assert int(format_short_octal(value), 8) == value % 2**16


@given(ANY)
def test_hex_variants_round_trip(value):
    for func, bits in (
        (format_hex, 32),
        (format_long_hex, 64),
        (format_short_hex, 16),
    ):
        lower = func(value)
        assert int(lower, 16) == value % 2**bits
        assert lower == "0" or lower[0] != "0"
        assert func(value, True) == lower.upper()


@pytest.mark.parametrize(
    "func, length", [(format_short_hex, 4), (format_hex, 8), (format_long_hex, 16)]
)
def test_negative_hex_fills_the_width(func, length):
    result = func(-1)
    assert len(result) == length
    assert set(result) == {"f"}


def test_negative_octal_has_full_width():
    assert len(format_octal(-1)) == 11
    assert len(format_long_octal(-1)) == 22
    assert len(format_short_octal(-1)) == 6


@given(INT32.filter(lambda v: v != 0))
def test_alt_forms_add_prefix(value):
    assert format_alt_octal(value) == "0" + format_octal(value)
    assert format_alt_hex(value) == "0x" + format_hex(value)
    assert format_alt_hex(value, True) == "0X" + format_hex(value, True)


def test_plus_int_signs_zero():
    assert format_plus_int(0) == "+0"


@given(INT32)
def test_plus_and_space_ints(value):
    plain = format_int(value)
    if value < 0:
        assert format_plus_int(value) == plain
        assert format_space_int(value) == plain
    else:
        assert format_plus_int(value) == "+" + plain
        assert format_space_int(value) == " " + plain


@pytest.mark.parametrize("address", [None, 0, 2**64])
def test_null_pointer(address):
    assert format_pointer(address) == "(nil)"


@given(st.integers(min_value=-(2**63), max_value=2**63 - 1).filter(lambda v: v != 0))
def test_pointer_is_prefixed_long_hex(address):
    assert format_pointer(address) == "0x" + format_long_hex(address)


@pytest.mark.parametrize(
    "func", [format_int, format_hex, format_octal, format_pointer, format_binary]
)
def test_non_integers_are_rejected(func):
    with pytest.raises(TypeError):
        func(1.5)