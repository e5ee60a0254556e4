"""The table of conversion specifiers and lookup in a format string."""

from dataclasses import dataclass
from functools import partial
from typing import Callable, Optional

from miniprintf import integers, text


@dataclass(frozen=True)
class Specifier:
    """A conversion: the characters after ``%`` and the function that renders it."""

    token: str
    convert: Callable[..., str]
    takes_argument: bool = True


def _upper(function):
    return partial(function, upper=True)


_PERCENT = Specifier("%", text.format_percent, takes_argument=False)
_LONE_LENGTH = Specifier("l", text.format_percent, takes_argument=False)
_LONE_SHORT = Specifier("h", text.format_percent, takes_argument=False)
_SPACE_PERCENT = Specifier(" %", text.format_percent, takes_argument=False)

# Order matters: the first entry that matches wins.
SPECIFIERS = (
    Specifier("c", text.format_char),
    Specifier("s", text.format_string),
    Specifier("i", integers.format_int),
    Specifier("d", integers.format_int),
    Specifier("b", integers.format_binary),
    Specifier("u", integers.format_unsigned),
    Specifier("o", integers.format_octal),
    Specifier("x", integers.format_hex),
    Specifier("X", _upper(integers.format_hex)),
    Specifier("S", text.format_escaped),
    Specifier("p", integers.format_pointer),
    Specifier("li", integers.format_long_int),
    Specifier("ld", integers.format_long_int),
    Specifier("lu", integers.format_long_unsigned),
    Specifier("lo", integers.format_long_octal),
    Specifier("lx", integers.format_long_hex),
    Specifier("lX", _upper(integers.format_long_hex)),
    Specifier("hi", integers.format_short_int),
    Specifier("hd", integers.format_short_int),
    Specifier("hu", integers.format_short_unsigned),
    Specifier("ho", integers.format_short_octal),
    Specifier("hx", integers.format_short_hex),
    Specifier("hX", _upper(integers.format_short_hex)),
    Specifier("#o", integers.format_alt_octal),
    Specifier("#x", integers.format_alt_hex),
    Specifier("#X", _upper(integers.format_alt_hex)),
    Specifier("#i", integers.format_int),
    Specifier("#d", integers.format_int),
    Specifier("#u", integers.format_unsigned),
    Specifier("+i", integers.format_plus_int),
    Specifier("+d", integers.format_plus_int),
    Specifier("+u", integers.format_unsigned),
    Specifier("+o", integers.format_octal),
    Specifier("+x", integers.format_hex),
    Specifier("+X", _upper(integers.format_hex)),
    Specifier(" i", integers.format_space_int),
    Specifier(" d", integers.format_space_int),
    Specifier(" u", integers.format_unsigned),
    Specifier(" o", integers.format_octal),
    Specifier(" x", integers.format_hex),
    Specifier(" X", _upper(integers.format_hex)),
    Specifier("R", text.format_rot13),
    Specifier("r", text.format_reversed),
    _PERCENT,
    _LONE_LENGTH,
    _LONE_SHORT,
    Specifier(" +i", integers.format_plus_int),
    Specifier(" +d", integers.format_plus_int),
    Specifier("+ i", integers.format_plus_int),
    Specifier("+ d", integers.format_plus_int),
    _SPACE_PERCENT,
)


def find_specifier(fmt, index) -> Optional[Specifier]:
    """Return the first specifier whose token starts at ``fmt[index]``, or None."""
    for specifier in SPECIFIERS:
        if fmt.startswith(specifier.token, index):
            return specifier
    return None


def specifier_length(fmt, index):
    """Number of characters of the specifier starting at ``fmt[index]``; 0 if none."""
    specifier = find_specifier(fmt, index)
    return len(specifier.token) if specifier else 0