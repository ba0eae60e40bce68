"""Checked conversions that shift a value across the signed/unsigned boundary.

Values of the same signedness are carried over unchanged when they fit in
the target. Across the boundary a signed value is raised, and an unsigned
value lowered, by half the range of the narrower of the two types, so that
minimum maps to minimum and maximum to maximum. A value that does not land
inside the target type is rejected with a ConvertErrors.
"""

from __future__ import annotations

from .errors import ConvertErrors, MultiErrors
from .types import IntType


def _kind(int_type: IntType | str) -> IntType:
    return IntType(int_type)


def _offset(source: IntType, target: IntType) -> int:
    """Amount added to a ``source`` value to land in ``target``."""
    if source.signed() == target.signed():
        return 0
    half = 1 << (min(source.bits(), target.bits()) - 1)
    return half if source.signed() else -half


def _convert(target: IntType | str, value: int, source: IntType | str, failure: MultiErrors) -> int:
    dest, src = _kind(target), _kind(source)
    src.check(value)
    result = value + _offset(src, dest)
    if not dest.contains(result):
        raise ConvertErrors(failure)
    return result


def try_from_by_add(target: IntType | str, value: int, source: IntType | str) -> int:
    """Convert ``value`` of type ``source`` to ``target`` by shifting its range.

    Raises TryFromIntError when ``value`` does not fit in ``source`` and
    ConvertErrors (kind TRY_FROM_BY_ADD) when the result falls outside ``target``.
    """
    return _convert(target, value, source, MultiErrors.TRY_FROM_BY_ADD)


def try_into_by_add(value: int, source: IntType | str, target: IntType | str) -> int:
    """Convert ``value`` of type ``source`` into ``target`` by shifting its range.

    Raises TryFromIntError when ``value`` does not fit in ``source`` and
    ConvertErrors (kind TRY_INTO_BY_ADD) when the result falls outside ``target``.
    """
    return _convert(target, value, source, MultiErrors.TRY_INTO_BY_ADD)