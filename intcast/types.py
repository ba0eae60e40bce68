"""Fixed-width integer types, their widths and their bounds."""

from __future__ import annotations

from enum import Enum

from .errors import TryFromIntError

_POINTER_WIDTH = 64


class IntType(Enum):
    """A fixed-width integer type, named as in ``i8`` or ``u128``."""

    I8 = "i8"
    I16 = "i16"
    I32 = "i32"
    I64 = "i64"
    ISIZE = "isize"
    I128 = "i128"
    U8 = "u8"
    U16 = "u16"
    U32 = "u32"
    U64 = "u64"
    USIZE = "usize"
    U128 = "u128"

    def __str__(self) -> str:
        return self.value

    def bits(self) -> int:
        """Width of the type in bits; pointer-sized types are 64 bits wide."""
        width = self.value[1:]
        return _POINTER_WIDTH if width == "size" else int(width)

    def signed(self) -> bool:
        """True for two's-complement signed types."""
        return self.value.startswith("i")

    def min_value(self) -> int:
        """Smallest value the type can hold."""
        return -(1 << (self.bits() - 1)) if self.signed() else 0

    def max_value(self) -> int:
        """Largest value the type can hold."""
        magnitude_bits = self.bits() - 1 if self.signed() else self.bits()
        return (1 << magnitude_bits) - 1

    def contains(self, value: int) -> bool:
        """True if ``value`` lies within the bounds of the type."""
        return self.min_value() <= value <= self.max_value()

    def check(self, value: int) -> int:
        """Return ``value`` unchanged, or raise TryFromIntError if it does not fit."""
        if not self.contains(value):
            raise TryFromIntError()
        return value

    def wrap(self, value: int) -> int:
        """Truncate ``value`` to the type's width, two's-complement style."""
        width = self.bits()
        result = value & ((1 << width) - 1)
        if self.signed() and result >= 1 << (width - 1):
            result -= 1 << width
        return result


def _as_type(int_type: IntType | str) -> IntType:
    return IntType(int_type)


def tbits(int_type: IntType | str) -> int:
    """Width in bits of the given type."""
    return _as_type(int_type).bits()


def sbits(value: int, int_type: IntType | str) -> int:
    """Width in bits of a value held in the given type."""
    kind = _as_type(int_type)
    kind.check(value)
    return kind.bits()


def to_min(for_type: IntType | str, target: IntType | str) -> int:
    """Lower bound of ``for_type`` expressed in ``target``.

    Signed types give their minimum to any signed type wide enough to hold
    it; unsigned types only to themselves.
    """
    source, dest = _as_type(for_type), _as_type(target)
    if source.signed():
        supported = dest.signed() and dest.contains(source.min_value())
    else:
        supported = dest is source
    if not supported:
        raise ValueError(f"no lower bound of {source} for type {dest}")
    return source.min_value()


def to_max(for_type: IntType | str, target: IntType | str) -> int:
    """Upper bound of ``for_type`` expressed in any type able to hold it."""
    source, dest = _as_type(for_type), _as_type(target)
    if not dest.contains(source.max_value()):
        raise ValueError(f"no upper bound of {source} for type {dest}")
    return source.max_value()


def to_zero(int_type: IntType | str) -> int:
    """Zero of the given type."""
    _as_type(int_type)
    return 0


def type_info(int_type: IntType | str) -> str:
    """Name of the given type."""
    return _as_type(int_type).value