import pytest

from intcast.errors import (
    ConvertErrors,
    IntErrorKind,
    MultiErrors,
    ParseIntError,
    TryFromIntError,
    TryFromIntStrErr,
)
from intcast.int_str import parse_int, try_from_int_str
from intcast.types import IntType

SIGNED = ["i8", "i16", "i32", "i64", "isize", "i128"]
UNSIGNED = ["u8", "u16", "u32", "u64", "usize", "u128"]
ALL = SIGNED + UNSIGNED
RANGE_MESSAGE = "out of range integral type conversion attempted"


@pytest.mark.parametrize("kind", ALL)
def test_same_type_bounds(kind):
    t = IntType(kind)
    assert try_from_int_str(kind, t.min_value(), kind) == t.min_value()
    assert try_from_int_str(kind, t.max_value(), kind) == t.max_value()


WIDER = {
    "i8": ["i16", "i32", "i64", "isize", "i128"],
    "i16": ["i32", "i64", "isize", "i128"],
    "i32": ["i64", "isize", "i128"],
    "i64": ["isize", "i128"],
    "isize": ["i64", "i128"],
    "u8": ["u16", "u32", "u64", "usize", "u128", "i16", "i32", "i64", "isize", "i128"],
    "u16": ["u32", "u64", "usize", "u128", "i32", "i64", "isize", "i128"],
    "u32": ["u64", "usize", "u128", "i64", "isize", "i128"],
    "u64": ["usize", "u128", "i128"],
    "usize": ["u64", "u128", "i128"],
}


@pytest.mark.parametrize(
    "source, target", [(s, t) for s, targets in WIDER.items() for t in targets]
)
def test_widening_keeps_bounds(source, target):
    t = IntType(source)
    assert try_from_int_str(target, t.min_value(), source) == t.min_value()
    assert try_from_int_str(target, t.max_value(), source) == t.max_value()


SIGNED_TO_UNSIGNED = {
    "i8": ["u8", "u16", "u32", "u64", "usize", "u128"],
    "i16": ["u16", "u32", "u64", "usize", "u128"],
    "i32": ["u32", "u64", "usize", "u128"],
    "i64": ["u64", "usize", "u128"],
    "isize": ["u64", "usize", "u128"],
    "i128": ["u128"],
}


@pytest.mark.parametrize(
    "source, target",
    [(s, t) for s, targets in SIGNED_TO_UNSIGNED.items() for t in targets],
)
def test_signed_nonnegative_into_unsigned(source, target):
    t = IntType(source)
    assert try_from_int_str(target, 0, source) == 0
    assert try_from_int_str(target, t.max_value(), source) == t.max_value()


NARROWER = {
    "i8": ["i16", "i32", "i64", "isize", "i128", "u8", "u16", "u32", "u64", "usize", "u128"],
    "i16": ["i32", "i64", "isize", "i128", "u16", "u32", "u64", "usize", "u128"],
    "i32": ["i64", "isize", "i128", "u32", "u64", "usize", "u128"],
    "i64": ["i128", "u64", "usize", "u128"],
    "isize": ["i128", "u64", "usize", "u128"],
    "i128": ["u128"],
    "u8": ["u16", "u32", "u64", "usize", "u128", "i16", "i32", "i64", "isize", "i128"],
    "u16": ["u32", "u64", "usize", "u128", "i32", "i64", "isize", "i128"],
    "u32": ["u64", "usize", "u128", "i64", "isize", "i128"],
    "u64": ["u128", "i128"],
    "usize": ["u128", "i128"],
}


@pytest.mark.parametrize(
    "target, source", [(t, s) for t, sources in NARROWER.items() for s in sources]
)
def test_narrowing_at_target_bounds(target, source):
    t = IntType(target)
    low = t.min_value() if IntType(source).signed() else 0
    assert try_from_int_str(target, low, source) == low
    assert try_from_int_str(target, t.max_value(), source) == t.max_value()


@pytest.mark.parametrize(
    "target, source", [(t, s) for t, sources in NARROWER.items() for s in sources]
)
def test_narrowing_past_max_fails(target, source):
    value = IntType(target).max_value() + 1
    with pytest.raises(TryFromIntStrErr) as info:
        try_from_int_str(target, value, source)
    assert str(info.value) == RANGE_MESSAGE
    assert info.value.multi_err().is_range_error
    assert info.value.multi_err().error == TryFromIntError()


@pytest.mark.parametrize("target", ["u8", "u16", "u32", "u64", "usize", "u128"])
def test_negative_into_unsigned_fails(target):
    with pytest.raises(TryFromIntStrErr):
        try_from_int_str(target, -1, "i128")


STR_BOUNDS = [
    ("-128", "127", -128, 127, SIGNED, UNSIGNED),
    ("0", "255", 0, 255, ["i16", "i32", "i64", "isize", "i128"] + UNSIGNED, []),
    ("-32768", "32767", -32768, 32767, SIGNED[1:], UNSIGNED[1:]),
    ("0", "65535", 0, 65535, ["u16", "i32", "u32", "i64", "u64", "isize", "usize", "i128", "u128"], []),
    ("-2147483648", "2147483647", -2147483648, 2147483647, SIGNED[2:], UNSIGNED[2:]),
    ("0", "4294967295", 0, 4294967295, ["i64", "u64", "isize", "usize", "i128", "u128"], []),
    (
        "-9223372036854775808",
        "9223372036854775807",
        -9223372036854775808,
        9223372036854775807,
        ["i64", "isize", "i128"],
        ["u64", "usize", "u128"],
    ),
    ("0", "18446744073709551615", 0, 18446744073709551615, ["u64", "usize", "i128", "u128"], []),
    (
        "-170141183460469231731687303715884105728",
        "170141183460469231731687303715884105727",
        -170141183460469231731687303715884105728,
        170141183460469231731687303715884105727,
        ["i128"],
        ["u128"],
    ),
    (
        "0",
        "340282366920938463463374607431768211455",
        0,
        340282366920938463463374607431768211455,
        ["u128"],
        [],
    ),
]


@pytest.mark.parametrize(
    "min_text, max_text, low, high, target",
    [(a, b, lo, hi, t) for a, b, lo, hi, full, _ in STR_BOUNDS for t in full],
)
def test_str_bounds(min_text, max_text, low, high, target):
    assert try_from_int_str(target, min_text) == low
    assert try_from_int_str(target, max_text) == high


@pytest.mark.parametrize(
    "max_text, high, target",
    [(b, hi, t) for _, b, _, hi, _, nonneg in STR_BOUNDS for t in nonneg],
)
def test_str_nonnegative(max_text, high, target):
    assert try_from_int_str(target, "0") == 0
    assert try_from_int_str(target, max_text) == high


TOO_LARGE = "340282366920938463463374607431768211456"


@pytest.mark.parametrize("target", ALL)
def test_str_too_large(target):
    with pytest.raises(TryFromIntStrErr) as info:
        try_from_int_str(target, TOO_LARGE)
    assert str(info.value) == "number too large to fit in target type"
    assert info.value.multi_err().error == ParseIntError(IntErrorKind.POS_OVERFLOW)


@pytest.mark.parametrize("target", SIGNED)
def test_str_too_small_signed(target):
    with pytest.raises(TryFromIntStrErr) as info:
        try_from_int_str(target, "-" + TOO_LARGE)
    assert str(info.value) == "number too small to fit in target type"


@pytest.mark.parametrize("target", UNSIGNED)
def test_str_minus_unsigned_is_invalid(target):
    with pytest.raises(TryFromIntStrErr) as info:
        try_from_int_str(target, "-" + TOO_LARGE)
    assert str(info.value) == "invalid digit found in string"


@pytest.mark.parametrize("target", ALL)
def test_str_empty(target):
    with pytest.raises(TryFromIntStrErr) as info:
        try_from_int_str(target, "")
    assert str(info.value) == "cannot parse integer from empty string"
    assert info.value.multi_err().is_parse_error


@pytest.mark.parametrize("target", ALL)
def test_str_not_a_number(target):
    with pytest.raises(TryFromIntStrErr) as info:
        try_from_int_str(target, "rust")
    assert str(info.value) == "invalid digit found in string"


@pytest.mark.parametrize("target", ALL)
def test_bool(target):
    assert try_from_int_str(target, False) == 0
    assert try_from_int_str(target, True) == 1


def test_documented_examples():
    assert try_from_int_str("u32", "20032023") == 20032023
    assert try_from_int_str("usize", 18446744073709551615, "i128") == 18446744073709551615
    assert try_from_int_str("u32", "2023") == 2023
    assert try_from_int_str("i16", "-2023") == -2023
    assert try_from_int_str("u16", 1975, "u128") == 1975
    with pytest.raises(TryFromIntStrErr) as info:
        try_from_int_str("u64", 340282366920938463463374607431768211455, "u128")
    assert str(info.value) == RANGE_MESSAGE


def test_parse_int_sign_handling():
    assert parse_int("+42", "u8") == 42
    assert parse_int("-0", "i8") == 0
    for text in ("+", "-", "-0"):
        with pytest.raises(ParseIntError) as info:
            parse_int(text, "u8")
        assert info.value.kind is IntErrorKind.INVALID_DIGIT
    with pytest.raises(ParseIntError) as info:
        parse_int("-", "i8")
    assert info.value.kind is IntErrorKind.INVALID_DIGIT


def test_parse_int_first_error_wins():
    with pytest.raises(ParseIntError) as info:
        parse_int("999a", "u8")
    assert info.value.kind is IntErrorKind.POS_OVERFLOW
    with pytest.raises(ParseIntError) as info:
        parse_int("9a99", "u8")
    assert info.value.kind is IntErrorKind.INVALID_DIGIT


def test_example_messages():
    with pytest.raises(ParseIntError) as info:
        parse_int("-156", "i8")
    assert str(info.value) == "number too small to fit in target type"
    with pytest.raises(TryFromIntStrErr) as err_info:
        try_from_int_str("u8", "333")
    wrapped = ConvertErrors(err_info.value)
    assert wrapped.kind() is MultiErrors.TRY_FROM_INT_STR
    assert str(wrapped) == "number too large to fit in target type"


def test_source_must_hold_value():
    with pytest.raises(TryFromIntError):
        try_from_int_str("i32", 300, "u8")


def test_source_rejected_for_text():
    with pytest.raises(TypeError):
        try_from_int_str("i32", "5", "u8")