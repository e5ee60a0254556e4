"""Formatting a string against a list of arguments, and printing it."""

import sys

from miniprintf.specifiers import find_specifier


class FormatError(ValueError):
    """The format string cannot be rendered.

    ``output`` holds the text produced before the error that is still
    written out by :func:`printf`.
    """

    def __init__(self, message, output=""):
        super().__init__(message)
        self.output = output


def _render(fmt, args):
    if fmt is None:
        raise TypeError("format must be a string, not None")
    if fmt == "%":
        raise FormatError("format is a lone '%'")
    pending = iter(args)
    pieces = []
    index = 0
    while index < len(fmt):
        char = fmt[index]
        if char != "%":
            pieces.append(char)
            index += 1
            continue
        start = index + 1
        if start == len(fmt):
            raise FormatError("format ends with a lone '%'", "".join(pieces))
        spec = find_specifier(fmt, start)
        if spec is None:
            if fmt[start:] == " ":
                raise FormatError("format ends with '% '")
            pieces.append("%")
            index = start
            continue
        if spec.takes_argument:
            try:
                value = next(pending)
            except StopIteration:
                raise FormatError(f"missing argument for %{spec.token}") from None
            pieces.append(spec.convert(value))
        else:
            pieces.append(spec.convert())
        index = start + len(spec.token)
    return "".join(pieces)


def sprintf(fmt, *args):
    """Return ``fmt`` with each specifier replaced by the next argument."""
    return _render(fmt, args)


def printf(fmt, *args, file=None):
    """Write the formatted text to ``file`` (standard output by default).

    Returns the number of characters written.
    """
    stream = sys.stdout if file is None else file
    try:
        rendered = _render(fmt, args)
    except FormatError as error:
        if error.output:
            stream.write(error.output)
        raise
    stream.write(rendered)
    return len(rendered)


def main(argv=None):
    """Print 98 in binary followed by a newline."""
    printf("%b\n", 98)
    return 0