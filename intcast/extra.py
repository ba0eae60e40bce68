"""Digit counts and remainder checks for numbers."""

from __future__ import annotations

import operator


def integer_len(value: int) -> int:
    """Number of decimal digits of ``value``, ignoring its sign; zero has one."""
    number = abs(operator.index(value))
    count = 0
    while number:
        number //= 10
        count += 1
    return count or 1


def no_rem(value: float, divisor: float) -> bool:
    """True if ``divisor`` divides ``value`` exactly.

    Raises ZeroDivisionError if ``divisor`` is zero.
    """
    return value % divisor == 0


def is_rem(value: float, divisor: float) -> bool:
    """True if dividing ``value`` by ``divisor`` leaves a remainder.

    Raises ZeroDivisionError if ``divisor`` is zero.
    """
    return value % divisor != 0