"""Fixed-width binary, hexadecimal and octal digit strings."""

import operator

_BINARY_DIGITS = frozenset("01")


def twos_complement(value, width):
    """Return ``value`` as exactly ``width`` bits in two's complement.

    Values outside the range of the width wrap around, as they would in a
    fixed-size machine integer.
    """
    value = operator.index(value)
    width = operator.index(width)
    if width <= 0:
        raise ValueError(f"bit width must be positive, got {width}")
    return format(value & ((1 << width) - 1), f"0{width}b")


def _check_bits(bits):
    if not bits:
        raise ValueError("bit string is empty")
    if not set(bits) <= _BINARY_DIGITS:
        raise ValueError(f"not a bit string: {bits!r}")


def bits_to_hex(bits, upper=False):
    """Convert a bit string whose length is a multiple of four to hex digits.

    The result has one digit per four bits, leading zeros included.
    """
    _check_bits(bits)
    if len(bits) % 4:
        raise ValueError(f"bit string length {len(bits)} is not a multiple of 4")
    kind = "X" if upper else "x"
    return format(int(bits, 2), f"0{len(bits) // 4}{kind}")


def bits_to_octal(bits):
    """Convert a bit string to octal digits, grouping three bits from the right.

    Any bits left over at the top form the leading digit, so 16 bits give 6
    digits, 32 bits give 11 and 64 bits give 22.
    """
    _check_bits(bits)
    width = -(-len(bits) // 3)
    return format(int(bits, 2), f"0{width}o")