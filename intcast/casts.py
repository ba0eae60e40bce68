"""Wrapping casts between fixed-width integer types."""

from __future__ import annotations

from .types import IntType


def _kind(int_type: IntType | str) -> IntType:
    return IntType(int_type)


def from_as(target: IntType | str, value: int, source: IntType | str) -> int:
    """Convert ``value`` of type ``source`` to ``target``, wrapping on overflow.

    Raises TryFromIntError if ``value`` does not fit in ``source``.
    """
    dest, src = _kind(target), _kind(source)
    src.check(value)
    return dest.wrap(value)


def into_as(value: int, source: IntType | str, target: IntType | str) -> int:
    """Convert ``value`` of type ``source`` into ``target``, wrapping on overflow.

    Raises TryFromIntError if ``value`` does not fit in ``source``.
    """
    return from_as(target, value, source)


def overflow_count(value: int, source: IntType | str, target: IntType | str) -> tuple[int, int]:
    """Cast ``value`` to ``target`` and report how far it overflowed.

    Returns the value exactly and zero when it fits in ``target``. Otherwise
    returns the wrapped value together with ``value`` shifted right by the
    width of ``target``. Raises ValueError when that shift is not narrower
    than ``source``.
    """
    src, dest = _kind(source), _kind(target)
    src.check(value)
    if dest.contains(value):
        return value, 0
    shift = dest.bits()
    if shift >= src.bits():
        raise ValueError(f"shift by {shift} bits overflows type {src}")
    return dest.wrap(value), value >> shift