"""Conversions that shift a value across the signed/unsigned boundary.

A signed value moves to an unsigned type by adding the magnitude of the
source type's minimum, an unsigned value moves to a signed type by
subtracting it, so that minimum maps to minimum and maximum to maximum.
Values of the same signedness are carried over unchanged. The target must
be at least as wide as the source.
"""

from __future__ import annotations

from .types import IntType


def _kind(int_type: IntType | str) -> IntType:
    return IntType(int_type)


def _offset(source: IntType, target: IntType) -> int:
    """Amount added to a ``source`` value to land in ``target``."""
    if source.signed() == target.signed():
        return 0
    half = 1 << (source.bits() - 1)
    return half if source.signed() else -half


def from_by_add(target: IntType | str, value: int, source: IntType | str) -> int:
    """Convert ``value`` of type ``source`` to ``target`` by shifting its range.

    Raises ValueError when ``target`` is narrower than ``source`` and
    TryFromIntError when ``value`` does not fit in ``source``.
    """
    dest, src = _kind(target), _kind(source)
    if dest.bits() < src.bits():
        raise ValueError(f"no conversion by add from {src} to {dest}")
    src.check(value)
    return value + _offset(src, dest)


def into_by_add(value: int, source: IntType | str, target: IntType | str) -> int:
    """Convert ``value`` of type ``source`` into ``target`` by shifting its range.

    Raises ValueError when ``target`` is narrower than ``source`` and
    TryFromIntError when ``value`` does not fit in ``source``.
    """
    return from_by_add(target, value, source)