from datetime import date, datetime

import numpy as np
import pytest
from hypothesis import given
from hypothesis import strategies as st

from rec_map.coercion import coerce, coerce_field, needs_conversion, truncate_integer
from rec_map.errors import AbsentValueError, CoercionError
from rec_map.holder import Holder
from rec_map.shapes import Kind, describe_type
from rec_map.shapes.kinds import INTEGER_BITS


def test_signed_integers_truncate_with_wrap_around() -> None:
    assert coerce(300, Kind.INT8) == 44
    assert coerce(200, Kind.INT8) == -56
    assert coerce(-129, Kind.INT8) == 127
    assert coerce(40_000, Kind.INT16) == 40_000 - 65_536
    assert type(coerce(5, Kind.INT32)) is np.int32


def test_unsigned_integers_truncate_with_wrap_around() -> None:
    assert coerce(-1, Kind.UINT8) == 255
    assert coerce(2**64 + 5, Kind.UINT64) == 5
    assert type(coerce(5, Kind.UINT16)) is np.uint16

    pointer = coerce(-1, Kind.UINTPTR)
    assert type(pointer) is int
    assert pointer == 2 ** INTEGER_BITS[Kind.UINTPTR] - 1


def test_integer_coercion_honours_declared_python_type() -> None:
    value = coerce(np.int8(8), Kind.INT64, int)
    assert value == 8
    assert type(value) is int


def test_float_and_complex_conversions() -> None:
    narrowed = coerce(1.5, Kind.FLOAT32)
    assert type(narrowed) is np.float32
    assert narrowed == 1.5
    assert np.isinf(coerce(1e300, Kind.FLOAT32))
    assert coerce(3, Kind.FLOAT64, float) == 3.0

    phase = coerce(1 + 2j, Kind.COMPLEX64)
    assert type(phase) is np.complex64
    assert phase == 1 + 2j
    assert type(coerce(np.complex64(1j), Kind.COMPLEX128, complex)) is complex


def test_text_and_boolean_copy_as_is() -> None:
    assert coerce("Test1", Kind.TEXT) == "Test1"
    assert coerce(Holder("Value"), Kind.TEXT) == "Value"
    assert coerce(True, Kind.BOOL) is True
    assert coerce(np.bool_(False), Kind.BOOL, np.bool_) == np.bool_(False)


def test_map_coercion_reinterprets_without_copying() -> None:
    meta = {"a": 1, "b": [2]}
    assert coerce(meta, Kind.MAP) is meta

    with pytest.raises(CoercionError, match="cannot coerce dict to map"):
        _ = coerce({1: "one"}, Kind.MAP)
    with pytest.raises(CoercionError, match="cannot coerce list to map"):
        _ = coerce([("a", 1)], Kind.MAP)


def test_irreconcilable_values_raise_coercion_error() -> None:
    with pytest.raises(CoercionError, match="cannot coerce str to int8 for field 'Level'"):
        _ = coerce("12", Kind.INT8, field="Level")
    with pytest.raises(CoercionError):
        _ = coerce(True, Kind.INT8)
    with pytest.raises(CoercionError):
        _ = coerce(1.5, Kind.INT32)
    with pytest.raises(CoercionError):
        _ = coerce(1j, Kind.FLOAT64)
    with pytest.raises(CoercionError):
        _ = coerce(1, Kind.TEXT)
    with pytest.raises(CoercionError):
        _ = coerce(1, Kind.BOOL)
    with pytest.raises(TypeError):
        _ = coerce(date(2024, 1, 1), Kind.OBJECT, datetime)


def test_opaque_values_pass_through() -> None:
    stamp = datetime(2024, 1, 1, 12, 0)
    assert coerce(stamp, Kind.OBJECT, datetime) is stamp
    assert coerce(stamp, Kind.DYNAMIC) is stamp


def test_absent_value_cannot_be_coerced() -> None:
    with pytest.raises(AbsentValueError):
        _ = coerce(None, Kind.TEXT)


def test_coerce_field_boxes_only_boxed_destinations() -> None:
    boxed = coerce_field(8, describe_type(Holder[np.int8] | None))
    assert isinstance(boxed, Holder)
    assert type(boxed.value) is np.int8

    inline = coerce_field(8, describe_type(np.int8 | None))
    assert type(inline) is np.int8


def test_needs_conversion_compares_runtime_type() -> None:
    assert needs_conversion(8, describe_type(np.int8)) is True
    assert needs_conversion(np.int8(8), describe_type(np.int8)) is False
    assert needs_conversion("x", describe_type(str)) is False
    assert needs_conversion({"a": 1}, describe_type(dict[str, int])) is False


@given(value=st.integers(min_value=-(2**80), max_value=2**80), bits=st.sampled_from([8, 16, 32, 64]))
def test_truncate_integer_is_congruent_and_in_range(value: int, bits: int) -> None:
    signed = truncate_integer(value, bits, signed=True)
    unsigned = truncate_integer(value, bits, signed=False)

    assert -(2 ** (bits - 1)) <= signed < 2 ** (bits - 1)
    assert 0 <= unsigned < 2**bits
    assert (signed - value) % 2**bits == 0
    assert (unsigned - value) % 2**bits == 0
