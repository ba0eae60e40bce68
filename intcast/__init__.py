"""Conversions between fixed-width integer types: casts, offset shifts, digits and parsing."""

__version__ = "0.1.0"

__all__ = ["by_add", "casts", "digits", "errors", "extra", "int_str", "try_by_add", "types"]