"""Conversion of the trailing decimal digits of an integer into a narrower type."""

from __future__ import annotations

from .types import IntType

_MODULI: dict[IntType, int] = {
    IntType.I8: 10**3,
    IntType.U8: 10**3,
    IntType.I16: 10**5,
    IntType.U16: 10**5,
    IntType.I32: 10**10,
    IntType.U32: 10**10,
    IntType.I64: 10**19,
    IntType.ISIZE: 10**19,
    IntType.U64: 10**20,
    IntType.USIZE: 10**20,
}


def digit_modulus(target: IntType | str) -> int:
    """Power of ten whose remainder is kept when converting into ``target``.

    Raises ValueError for 128-bit targets, which have no digit conversion.
    """
    kind = IntType(target)
    try:
        return _MODULI[kind]
    except KeyError:
        raise ValueError(f"no digit conversion into type {kind}") from None


def from_digits(target: IntType | str, value: int, source: IntType | str) -> int:
    """Keep the trailing digits of ``value`` that ``target`` can take.

    The remainder of ``value`` by the target's digit modulus keeps the sign
    of ``value``. Raises ValueError when the modulus does not fit in
    ``source``, and TryFromIntError when ``value`` does not fit in ``source``
    or the remainder does not fit in ``target``.
    """
    dest, src = IntType(target), IntType(source)
    modulus = digit_modulus(dest)
    if not src.contains(modulus):
        raise ValueError(f"no digit conversion from {src} into {dest}")
    src.check(value)
    remainder = abs(value) % modulus
    return dest.check(-remainder if value < 0 else remainder)