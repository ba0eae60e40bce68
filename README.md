# intcast

Conversions between fixed-width integer types in pure Python.

Python integers have no fixed width. `intcast` works with twelve machine
integer types: `i8`, `i16`, `i32`, `i64`, `isize`, `i128` and their unsigned
counterparts `u8` … `u128`, `usize`. The pointer-sized types `isize` and
`usize` are 64 bits wide. Wherever a function takes a type, it accepts an
`IntType` member or its name as a string (`"u8"`).

The package offers these conversions:

- **Wrapping casts** (`intcast.casts`): keep the low bits and reinterpret them
  as the target type.
- **Offset shifts** (`intcast.by_add`): move a value between a signed and an
  unsigned type of at least the same width. The minimum of one type maps to the
  minimum of the other.
- **Checked offset shifts** (`intcast.try_by_add`): the same shift, also into
  narrower types. A value that does not land inside the target raises
  `ConvertErrors`.
- **Digit truncation** (`intcast.digits`): keep the trailing decimal digits
  that suit the target type.
- **Integer, bool or string conversion** (`intcast.int_str`): parse decimal
  strings and range-check integers.

## Installation

```
pip install intcast
```

## Integer types

```python
from intcast.types import IntType, sbits, tbits, to_max, to_min, to_zero, type_info

IntType.U8.bits()          # 8
IntType.I16.min_value()    # -32768
IntType.U16.max_value()    # 65535
IntType.U8.contains(300)   # False
IntType.U8.wrap(258)       # 2
IntType.I8.check(200)      # raises TryFromIntError

tbits(IntType.I128)              # 128
sbits(127, "i8")                 # 8
to_max(IntType.U8, IntType.I16)  # 255
to_min(IntType.I8, IntType.I64)  # -128
to_zero("u32")                   # 0
type_info(IntType.USIZE)         # "usize"
```

`to_min` gives the minimum of a signed type to any signed type that can hold
it, and the minimum of an unsigned type only to that same type. `to_max` gives
the maximum to any type that can hold it. Other combinations raise
`ValueError`.

## Wrapping casts

```python
from intcast.casts import from_as, into_as, overflow_count
from intcast.types import IntType

from_as(IntType.U8, -128, IntType.I8)    # 128
into_as(612, IntType.U16, IntType.U8)    # 100

# A value that fits comes back unchanged with zero; otherwise the wrapped value
# and the value shifted right by the width of the target.
overflow_count(2**32 - 1, IntType.U32, IntType.U16)   # (65535, 65535)
```

The value must fit in its source type, or `TryFromIntError` is raised.

## Offset shifts

```python
from intcast.by_add import from_by_add, into_by_add
from intcast.try_by_add import try_from_by_add, try_into_by_add
from intcast.types import IntType

from_by_add(IntType.U8, -128, IntType.I8)       # 0
into_by_add(127, IntType.I8, IntType.U8)        # 255

try_from_by_add(IntType.U8, 127, IntType.I16)   # 255
try_into_by_add(128, IntType.I16, IntType.U8)   # raises ConvertErrors
```

`from_by_add` and `into_by_add` raise `ValueError` when the target is narrower
than the source. The checked forms raise `ConvertErrors` whose `kind()` is
`MultiErrors.TRY_FROM_BY_ADD` or `MultiErrors.TRY_INTO_BY_ADD`.

## Digits and strings

```python
from intcast.digits import digit_modulus, from_digits
from intcast.int_str import parse_int, try_from_int_str
from intcast.types import IntType

digit_modulus(IntType.U16)                              # 100000
from_digits(IntType.U16, 10_000_965_535, IntType.I64)   # 65535
from_digits(IntType.U8, 10_000_000_256, IntType.U64)    # raises TryFromIntError

parse_int("-2023", IntType.I16)                    # -2023
parse_int("300", IntType.U8)                       # raises ParseIntError
try_from_int_str(IntType.U8, True)                 # 1
try_from_int_str(IntType.U32, "2023")              # 2023
try_from_int_str(IntType.U16, 1975, IntType.U128)  # 1975
```

The remainder that `from_digits` keeps carries the sign of the value.
128-bit targets have no digit modulus. `parse_int` accepts a leading `+`, and a
leading `-` for signed types. Its error messages are those of `IntErrorKind`,
such as `"invalid digit found in string"`. `try_from_int_str` wraps parse and
range failures in `TryFromIntStrErr`.

## Errors

All errors live in `intcast.errors`:

- `ParseIntError`: text could not be parsed. It has a `kind` from
  `IntErrorKind`.
- `TryFromIntError`: an integer did not fit. The message is
  `"out of range integral type conversion attempted"`.
- `TryFromIntStrErr`: wraps either of the two above. `multi_err()` returns the
  `IntStrError` that holds it.
- `TryTupToArrErr`: a `TryFromIntStrErr` together with the `position` of the
  element that failed.
- `ConvertErrors`: wraps any of the above, or a bare `MultiErrors` member for
  the offset-shift failures. `kind()` tells which `MultiErrors` member applies.

## Other helpers

```python
from intcast.extra import integer_len, is_rem, no_rem

integer_len(2**128 - 1)   # 39
integer_len(-128)         # 3
integer_len(0)            # 1
no_rem(10, 2)             # True
is_rem(10.0, 3.0)         # True
```

## What the package does not do

The package has no function that converts a whole tuple of mixed values into a
list of one integer type. `TryTupToArrErr` is provided for code that does this
element by element and wants to report the failing position. There is no
command-line interface.

## Running the tests

```
pip install -e .[test]
pytest
```