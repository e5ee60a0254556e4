# miniprintf

A small printf-style formatter with a fixed set of conversions. It has the
usual integer and string conversions. It also has binary output, ROT13,
reversed strings and a string form that escapes bytes that cannot be printed.

## Installation

```
pip install .
```

For the test suite:

```
pip install .[test]
pytest
```

## Usage

```python
from miniprintf.formatter import sprintf, printf

sprintf("%b", 98)            # '1100010'
sprintf("%d items", -42)     # '-42 items'
sprintf("%#x", 255)          # '0xff'
sprintf("%R", "Hello")       # 'Uryyb'
sprintf("%r", "abc")         # 'cba'
sprintf("%S", "a\nb")        # 'a\\x0Ab'

printf("%s and %c\n", "text", "z")  # writes to stdout, returns 11
```

`sprintf(fmt, *args)` returns the formatted string. `printf(fmt, *args,
file=None)` writes it to `file`, which is standard output by default, and
returns the number of characters written.

Each specifier that takes an argument uses the next positional argument.

### Errors

`miniprintf.formatter.FormatError`, a subclass of `ValueError`, is raised in
these cases:

- the format is a lone `%`;
- the format ends with a `%`;
- the format ends with `% `;
- there are not enough arguments for the specifiers.

When a format ends with a `%`, the text built up to that point is kept in the
error's `output` attribute. `printf` writes that text before it raises.

A format of `None` raises `TypeError`. So does a non-string value given to
`%s`, `%r` or `%R`, and `None` given to `%S`.

### Conversions

Integer arguments are taken as fixed-size machine integers and wrap around:
`int` is 32 bits, `long` (`l`) is 64 bits and `short` (`h`) is 16 bits.
Negative values are shown in two's complement by the binary, octal, hex and
unsigned conversions.

| Specifier | Output |
|-----------|--------|
| `%c` | a one-character string, or an integer taken as a byte |
| `%s` | string (`(null)` for `None`) |
| `%S` | UTF-8 bytes, with bytes below 32 or from 127 up shown as `\xHH` |
| `%r` | reversed string (`(llun)` for `None`) |
| `%R` | ROT13 of ASCII letters (`(avyy)` for `None`) |
| `%d`, `%i` | signed int; `%ld`/`%li` long, `%hd`/`%hi` short |
| `%u` | unsigned int; `%lu` long, `%hu` short |
| `%b` | binary |
| `%o` | octal; `%lo` long, `%ho` short |
| `%x`, `%X` | hexadecimal; `%lx`/`%lX` long, `%hx`/`%hX` short |
| `%#o`, `%#x`, `%#X` | octal or hex with a `0` / `0x` / `0X` prefix, except for zero |
| `%+d`, `%+i`, `% +d`, `%+ d` | signed int that always has a sign |
| `% d`, `% i` | signed int with a space in place of `+` |
| `%p` | address as `0x` and hex digits (`(nil)` for `None` or 0) |
| `%%`, `% %` | a percent sign |

Some flags are accepted and have no effect: `%#d`, `%#i`, `%#u`, and `+` or
a space before `u`, `o`, `x` or `X`. A lone `%l` or `%h` writes a percent
sign. A `%` followed by anything else is written out as is.

### Helper modules

The conversions can also be called on their own:

- `miniprintf.integers`: `format_int`, `format_long_int`, `format_short_int`,
  `format_unsigned`, `format_long_unsigned`, `format_short_unsigned`,
  `format_binary`, `format_octal`, `format_long_octal`, `format_short_octal`,
  `format_hex`, `format_long_hex`, `format_short_hex`, `format_alt_octal`,
  `format_alt_hex`, `format_plus_int`, `format_space_int`, `format_pointer`.
  The hex functions take an `upper` flag, for example `format_hex(255, True)`
  gives `'FF'`.
- `miniprintf.text`: `format_char`, `format_string`, `format_escaped`,
  `format_reversed`, `format_rot13`, `format_percent`.
- `miniprintf.digits`: `twos_complement(value, width)`, `bits_to_hex(bits,
  upper)` and `bits_to_octal(bits)`. For example `twos_complement(-1, 8)`
  gives `'11111111'`.
- `miniprintf.specifiers`: the `Specifier` table, `find_specifier(fmt, index)`
  and `specifier_length(fmt, index)`.

### Command line

```
miniprintf
```

This prints `98` in binary (`1100010`) followed by a newline. The command takes
no arguments.

## What it does not do

There are no field widths, precisions, padding or floating-point conversions.
Only the specifiers listed above are recognised.