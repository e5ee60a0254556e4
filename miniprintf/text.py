"""Character and string conversions for the supported format specifiers."""

import operator

_PLAIN = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"
_ROTATED = "NOPQRSTUVWXYZABCDEFGHIJKLMnopqrstuvwxyzabcdefghijklm"
_ROT13_TABLE = str.maketrans(_PLAIN, _ROTATED)


def _require_text(value, conversion):
    if not isinstance(value, str):
        raise TypeError(
            f"%{conversion} expects a string or None, got {type(value).__name__}"
        )
    return value


def format_char(value):
    """Single character (``%c``).

    A one-character string is used as it is; an integer is truncated to a
    byte, as a C ``char`` would be.
    """
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(operator.index(value) & 0xFF)


def format_string(value):
    """The string itself, or ``(null)`` for None (``%s``)."""
    if value is None:
        return "(null)"
    return _require_text(value, "s")


def format_escaped(value):
    """String with non-printable bytes shown as ``\\xHH`` (``%S``).

    Text is encoded as UTF-8 first; every byte below 32 or from 127 upwards
    is written as a backslash, ``x`` and two upper-case hex digits.
    """
    if value is None:
        raise TypeError("%S expects a string, got None")
    data = value.encode("utf-8") if isinstance(value, str) else bytes(value)
    return "".join(
        chr(byte) if 32 <= byte < 127 else f"\\x{byte:02X}" for byte in data
    )


def format_reversed(value):
    """The string backwards, or ``(llun)`` for None (``%r``)."""
    if value is None:
        return "(llun)"
    return _require_text(value, "r")[::-1]


def format_rot13(value):
    """The string with ASCII letters rotated by 13, or ``(avyy)`` for None (``%R``)."""
    if value is None:
        return "(avyy)"
    return _require_text(value, "R").translate(_ROT13_TABLE)


def format_percent():
    """A literal percent sign (``%%``)."""
    return "%"