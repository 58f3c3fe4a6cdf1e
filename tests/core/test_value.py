"""Tests for field values and timestamps."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from influxline import Boolean, Float, Integer, String, Timestamp, UInteger, to_value


def test_variant_encodings():
    assert String("Julius").encode() == '"Julius"'
    assert Integer(123456).encode() == "123456i"
    assert UInteger(5).encode() == "5u"
    assert Float(23.43234543).encode() == "23.43234543"
    assert Boolean(True).encode() == "true"
    assert Boolean(False).encode() == "false"


def test_string_value_escapes_quotes():
    assert String('Hello world :D"').encode() == '"Hello world :D\\""'


def test_string_value_keeps_spaces_and_commas():
    assert String("a, b=c").encode() == '"a, b=c"'


def test_integer_bounds():
    assert Integer(-9223372036854775806).encode() == "-9223372036854775806i"
    assert Integer(2**63 - 1).encode() == "9223372036854775807i"
    with pytest.raises(ValueError):
        Integer(2**63)


def test_uinteger_bounds():
    assert UInteger(2**64 - 1).encode() == "18446744073709551615u"
    with pytest.raises(ValueError):
        UInteger(-1)


def test_integer_rejects_bool():
    with pytest.raises(TypeError):
        Integer(True)


def test_float_accepts_int_and_keeps_float_text():
    assert Float(1).encode() == "1.0"
    assert Float(1).value == 1.0


def test_values_are_immutable():
    value = Integer(1)
    with pytest.raises(AttributeError):
        value.value = 2  # type: ignore[misc]


@pytest.mark.parametrize(
    ("native", "expected"),
    [
        ("x", String("x")),
        (True, Boolean(True)),
        (3, Integer(3)),
        (2.5, Float(2.5)),
        (UInteger(7), UInteger(7)),
    ],
)
def test_to_value_coercion(native, expected):
    assert to_value(native) == expected


def test_to_value_rejects_unknown_types():
    with pytest.raises(TypeError, match="Cannot use list"):
        to_value([1, 2])


@given(st.floats(allow_nan=False, allow_infinity=False))
def test_float_text_round_trips(x):
    assert float(Float(x).encode()) == x


@given(st.integers(min_value=-(2**63), max_value=2**63 - 1))
def test_integer_text_is_digits_plus_suffix(n):
    text = Integer(n).encode()
    assert text.endswith("i")
    assert int(text[:-1]) == n


def test_timestamp_variants():
    assert Timestamp(1556896326).encode() == "1556896326"
    assert Timestamp("321321321").encode() == "321321321"
    assert Timestamp("321321321").is_text
    assert not Timestamp(1).is_text


def test_timestamp_of_passes_through_and_coerces():
    ts = Timestamp(5)
    assert Timestamp.of(ts) is ts
    assert Timestamp.of(5) == ts
    assert Timestamp.of("5") == Timestamp("5")


def test_timestamp_rejects_floats():
    with pytest.raises(TypeError):
        Timestamp(1.5)  # type: ignore[arg-type]


def test_float_rejects_ints_beyond_float_range():
    with pytest.raises(ValueError, match="64-bit float range"):
        Float(10**400)
