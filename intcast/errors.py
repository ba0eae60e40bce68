"""Errors raised by the integer conversions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

_RANGE_MESSAGE = "out of range integral type conversion attempted"
_BY_ADD_MESSAGE = "an attempt to convert an integral type outside the valid range"


class IntErrorKind(Enum):
    """Why parsing an integer from text failed; the value is the message."""

    EMPTY = "cannot parse integer from empty string"
    INVALID_DIGIT = "invalid digit found in string"
    POS_OVERFLOW = "number too large to fit in target type"
    NEG_OVERFLOW = "number too small to fit in target type"
    ZERO = "number would be zero for non-zero type"


class ParseIntError(ValueError):
    """Text could not be parsed as an integer of the requested type."""

    def __init__(self, kind: IntErrorKind | str) -> None:
        self.kind = IntErrorKind(kind)
        super().__init__(self.kind.value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParseIntError):
            return NotImplemented
        return self.kind is other.kind

    def __hash__(self) -> int:
        return hash((ParseIntError, self.kind))


class TryFromIntError(OverflowError):
    """An integer did not fit into the requested type."""

    def __init__(self, *_: object) -> None:
        super().__init__(_RANGE_MESSAGE)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TryFromIntError):
            return NotImplemented
        return True

    def __hash__(self) -> int:
        return hash(TryFromIntError)


@dataclass(frozen=True)
class IntStrError:
    """The underlying failure of a conversion from an integer or a string."""

    error: ParseIntError | TryFromIntError

    def __post_init__(self) -> None:
        if not isinstance(self.error, (ParseIntError, TryFromIntError)):
            raise TypeError(f"unsupported error: {self.error!r}")

    @property
    def is_parse_error(self) -> bool:
        """True when the input was a string that failed to parse."""
        return isinstance(self.error, ParseIntError)

    @property
    def is_range_error(self) -> bool:
        """True when the input was an integer out of range."""
        return isinstance(self.error, TryFromIntError)

    def __str__(self) -> str:
        return str(self.error)


class TryFromIntStrErr(ValueError):
    """A conversion from an integer, a string or a bool failed."""

    def __init__(self, error: IntStrError | ParseIntError | TryFromIntError) -> None:
        self.int_str_error = error if isinstance(error, IntStrError) else IntStrError(error)
        super().__init__(str(self.int_str_error))

    def multi_err(self) -> IntStrError:
        """The underlying parse or range error."""
        return self.int_str_error

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TryFromIntStrErr):
            return NotImplemented
        return self.int_str_error == other.int_str_error

    def __hash__(self) -> int:
        return hash((TryFromIntStrErr, self.int_str_error))


class TryTupToArrErr(ValueError):
    """A tuple element could not be converted; carries its position."""

    def __init__(self, source: TryFromIntStrErr, position: int) -> None:
        if not isinstance(source, TryFromIntStrErr):
            raise TypeError(f"unsupported error: {source!r}")
        self.source = source
        self.position = position
        super().__init__(f"{source}, position {position}")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TryTupToArrErr):
            return NotImplemented
        return self.source == other.source and self.position == other.position

    def __hash__(self) -> int:
        return hash((TryTupToArrErr, self.source, self.position))


class MultiErrors(Enum):
    """The kinds of failure a ConvertErrors can carry."""

    TRY_TUP_TO_ARR = auto()
    TRY_FROM_INT_STR = auto()
    TRY_FROM_INT = auto()
    PARSE_INT = auto()
    TRY_FROM_BY_ADD = auto()
    TRY_INTO_BY_ADD = auto()


_KIND_OF_ERROR: tuple[tuple[type[Exception], MultiErrors], ...] = (
    (TryTupToArrErr, MultiErrors.TRY_TUP_TO_ARR),
    (TryFromIntStrErr, MultiErrors.TRY_FROM_INT_STR),
    (TryFromIntError, MultiErrors.TRY_FROM_INT),
    (ParseIntError, MultiErrors.PARSE_INT),
)

_BARE_KINDS = frozenset({MultiErrors.TRY_FROM_BY_ADD, MultiErrors.TRY_INTO_BY_ADD})

ConvertSource = TryTupToArrErr | TryFromIntStrErr | TryFromIntError | ParseIntError | MultiErrors


class ConvertErrors(ValueError):
    """Any of the conversion failures, gathered under one exception."""

    def __init__(self, source: ConvertSource) -> None:
        if isinstance(source, MultiErrors):
            if source not in _BARE_KINDS:
                raise TypeError(f"{source.name} needs the error it stands for")
        elif not any(isinstance(source, cls) for cls, _ in _KIND_OF_ERROR):
            raise TypeError(f"unsupported error: {source!r}")
        self.source = source
        super().__init__(self._message())

    def kind(self) -> MultiErrors:
        """Which kind of failure this is."""
        if isinstance(self.source, MultiErrors):
            return self.source
        return next(kind for cls, kind in _KIND_OF_ERROR if isinstance(self.source, cls))

    def _message(self) -> str:
        if isinstance(self.source, MultiErrors):
            return _BY_ADD_MESSAGE
        return str(self.source)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ConvertErrors):
            return NotImplemented
        return self.source == other.source

    def __hash__(self) -> int:
        return hash((ConvertErrors, self.source))