"""A small printf-style formatter with a fixed set of conversions."""

__version__ = "0.1.0"
__all__ = ["digits", "integers", "text", "specifiers", "formatter"]