"""Integer conversions for the supported format specifiers.

Each function takes a Python integer, treats it as the machine integer of
the matching size (``int`` is 32 bits, ``long`` 64 and ``short`` 16) and
returns the text the conversion produces.
"""

import operator

from miniprintf.digits import bits_to_hex, bits_to_octal, twos_complement

INT_BITS = 32
LONG_BITS = 64
SHORT_BITS = 16


def _signed(value, bits):
    value = operator.index(value) & ((1 << bits) - 1)
    if value >> (bits - 1):
        return value - (1 << bits)
    return value


def _unsigned(value, bits):
    return operator.index(value) & ((1 << bits) - 1)


def _significant(digits):
    return digits.lstrip("0") or "0"


def _binary_digits(value, bits):
    return _significant(twos_complement(value, bits))


def _hex_digits(value, bits, upper):
    return _significant(bits_to_hex(twos_complement(value, bits), upper))


def _octal_digits(value, bits):
    return _significant(bits_to_octal(twos_complement(value, bits)))


def format_int(value):
    """Signed decimal of a 32-bit int (``%d``, ``%i``)."""
    return str(_signed(value, INT_BITS))


def format_long_int(value):
    """Signed decimal of a 64-bit long (``%ld``, ``%li``)."""
    return str(_signed(value, LONG_BITS))


def format_short_int(value):
    """Signed decimal of a 16-bit short (``%hd``, ``%hi``)."""
    return str(_signed(value, SHORT_BITS))


def format_unsigned(value):
    """Unsigned decimal of a 32-bit int (``%u``)."""
    return str(_unsigned(value, INT_BITS))


def format_long_unsigned(value):
    """Unsigned decimal of a 64-bit long (``%lu``)."""
    return str(_unsigned(value, LONG_BITS))


def format_short_unsigned(value):
    """Unsigned decimal of a 16-bit short (``%hu``)."""
    return str(_unsigned(value, SHORT_BITS))


def format_binary(value):
    """Binary digits of a 32-bit int in two's complement (``%b``)."""
    return _binary_digits(value, INT_BITS)


def format_octal(value):
    """Octal digits of a 32-bit int (``%o``)."""
    return _octal_digits(value, INT_BITS)


def format_long_octal(value):
    """Octal digits of a 64-bit long (``%lo``)."""
    return _octal_digits(value, LONG_BITS)


def format_short_octal(value):
    """Octal digits of a 16-bit short (``%ho``)."""
    return _octal_digits(value, SHORT_BITS)


def format_hex(value, upper=False):
    """Hexadecimal digits of a 32-bit int (``%x``, ``%X``)."""
    return _hex_digits(value, INT_BITS, upper)


def format_long_hex(value, upper=False):
    """Hexadecimal digits of a 64-bit long (``%lx``, ``%lX``)."""
    return _hex_digits(value, LONG_BITS, upper)


def format_short_hex(value, upper=False):
    """Hexadecimal digits of a 16-bit short (``%hx``, ``%hX``)."""
    return _hex_digits(value, SHORT_BITS, upper)


def format_alt_octal(value):
    """Octal with a leading zero unless the value is zero (``%#o``)."""
    digits = format_octal(value)
    return digits if digits == "0" else "0" + digits


def format_alt_hex(value, upper=False):
    """Hexadecimal with a ``0x``/``0X`` prefix unless zero (``%#x``, ``%#X``)."""
    digits = format_hex(value, upper)
    if digits == "0":
        return digits
    return ("0X" if upper else "0x") + digits


def format_plus_int(value):
    """Signed decimal that always carries a sign (``%+d``, ``%+i``)."""
    number = _signed(value, INT_BITS)
    return str(number) if number < 0 else "+" + str(number)


def format_space_int(value):
    """Signed decimal with a space in place of a plus sign (``% d``, ``% i``)."""
    number = _signed(value, INT_BITS)
    return str(number) if number < 0 else " " + str(number)


def format_pointer(address):
    """Address as ``0x`` and hexadecimal digits, or ``(nil)`` for a null (``%p``)."""
    if address is None or _unsigned(address, LONG_BITS) == 0:
        return "(nil)"
    return "0x" + _hex_digits(address, LONG_BITS, False)