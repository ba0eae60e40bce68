"""Conversion of strings, integers and booleans into a fixed-width integer type."""

from __future__ import annotations

import operator

from .errors import IntErrorKind, ParseIntError, TryFromIntError, TryFromIntStrErr
from .types import IntType

_DIGITS = frozenset("0123456789")


def parse_int(text: str, target: IntType | str) -> int:
    """Parse decimal ``text`` as an integer of type ``target``.

    An optional leading ``+`` is accepted, and ``-`` for signed types.
    Raises ParseIntError for empty text, stray characters, or values that
    do not fit in ``target``; the first problem met from the left wins.
    """
    kind = IntType(target)
    if not text:
        raise ParseIntError(IntErrorKind.EMPTY)
    if text in ("+", "-"):
        raise ParseIntError(IntErrorKind.INVALID_DIGIT)
    negative = False
    digits = text
    if text[0] == "+":
        digits = text[1:]
    elif text[0] == "-" and kind.signed():
        negative = True
        digits = text[1:]

    low, high = kind.min_value(), kind.max_value()
    result = 0
    for char in digits:
        if char not in _DIGITS:
            raise ParseIntError(IntErrorKind.INVALID_DIGIT)
        digit = ord(char) - ord("0")
        if negative:
            result = result * 10 - digit
            if result < low:
                raise ParseIntError(IntErrorKind.NEG_OVERFLOW)
        else:
            result = result * 10 + digit
            if result > high:
                raise ParseIntError(IntErrorKind.POS_OVERFLOW)
    return result


def try_from_int_str(
    target: IntType | str,
    value: str | bool | int,
    source: IntType | str | None = None,
) -> int:
    """Convert a string, a bool or an integer into ``target``.

    Strings are parsed as decimal text, booleans become 0 or 1. Integers may
    name their ``source`` type, in which case they must fit in it (else
    TryFromIntError). Failures to parse or to fit in ``target`` raise
    TryFromIntStrErr.
    """
    dest = IntType(target)
    if isinstance(value, (bool, str)):
        if source is not None:
            raise TypeError("a source type applies only to integer values")
        if isinstance(value, bool):
            return int(value)
        try:
            return parse_int(value, dest)
        except ParseIntError as err:
            raise TryFromIntStrErr(err) from err

    number = operator.index(value)
    if source is not None:
        IntType(source).check(number)
    try:
        return dest.check(number)
    except TryFromIntError as err:
        raise TryFromIntStrErr(err) from err