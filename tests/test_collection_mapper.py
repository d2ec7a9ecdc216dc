from dataclasses import dataclass, field
from typing import Any

import numpy as np
import pytest

from rec_map.errors import AbsentValueError, CoercionError, UnsupportedShapeError
from rec_map.holder import Holder
from rec_map.mapping import RecordMapper
from rec_map.mapping.collection import is_sequence, map_sequence
from rec_map.shapes import describe_type


@dataclass
class Address:
    Address: str = ""
    Code: Holder[str] | None = None


@dataclass
class Address2:
    Address: str = ""
    Code: Holder[str] | None = None


@dataclass
class Person:
    Name: str = ""
    Array: list[str] = field(default_factory=list)
    Tags: list[Holder[str]] = field(default_factory=list)
    Levels: list[np.int8] = field(default_factory=list)
    Addresses: list[Address] = field(default_factory=list)
    Addresses2: Holder[list[Address]] | None = None


@dataclass
class PersonDest:
    Name: str = ""
    Array: list[str] = field(default_factory=list)
    Tags: list[str] = field(default_factory=list)
    Levels: list[np.int8] = field(default_factory=list)
    Addresses: list[Address2] = field(default_factory=list)
    Addresses2: Holder[list[Address2]] | None = None


def _copy_record(item: Any, target: Any) -> None:
    RecordMapper().map_record(item, target)


def test_map_sequence_preserves_length_and_order() -> None:
    source = [Address(Address="a"), Address(Address="b"), Address(Address="c")]
    mapped = map_sequence(source, describe_type(Address2), _copy_record)

    assert [item.Address for item in mapped] == ["a", "b", "c"]
    assert all(type(item) is Address2 for item in mapped)


def test_map_sequence_boxes_elements_for_optional_element_types() -> None:
    mapped = map_sequence([Address(Address="a"), None], describe_type(Holder[Address2] | None), _copy_record)

    assert mapped == [Holder(Address2(Address="a")), None]


def test_map_sequence_copies_and_coerces_scalar_elements() -> None:
    source = [1, 300, np.int8(5)]
    mapped = map_sequence(source, describe_type(np.int8), _copy_record)

    assert mapped == [1, 44, 5]
    assert all(type(item) is np.int8 for item in mapped)
    assert mapped is not source


def test_map_sequence_reads_holder_elements_and_rejects_absent_ones() -> None:
    assert map_sequence([Holder("a"), "b"], describe_type(str), _copy_record) == ["a", "b"]

    with pytest.raises(AbsentValueError):
        _ = map_sequence(["a", None], describe_type(str), _copy_record)
    with pytest.raises(CoercionError):
        _ = map_sequence(["a"], describe_type(int), _copy_record)


def test_map_sequence_dynamic_elements_pass_through() -> None:
    marker = object()
    assert map_sequence([marker, Holder(2)], describe_type(Any), _copy_record) == [marker, 2]


def test_map_sequence_dynamic_elements_keep_absent_items() -> None:
    mapped = map_sequence([None, Holder(2), Holder(None), "x"], describe_type(Any), _copy_record)

    assert mapped == [None, 2, None, "x"]


def test_map_sequence_rejects_non_sequences() -> None:
    with pytest.raises(UnsupportedShapeError, match="source must be a sequence, got str"):
        _ = map_sequence("abc", describe_type(str), _copy_record)


def test_is_sequence_excludes_text() -> None:
    assert is_sequence([1])
    assert is_sequence((1,))
    assert not is_sequence("abc")
    assert not is_sequence(b"abc")
    assert not is_sequence({"a": 1})


def test_sequence_fields_inside_records() -> None:
    source = Person(
        Name="Mehrdad",
        Array=["test"],
        Tags=[Holder("x"), Holder("y")],
        Levels=[8, 300],  # type: ignore[list-item]
        Addresses=[Address(Address="TEST")],
        Addresses2=Holder([Address(Address="TEST2", Code=Holder("42"))]),
    )
    dest = PersonDest()
    RecordMapper().map_record(source, dest)

    assert dest.Name == "Mehrdad"
    assert dest.Array == ["test"]
    assert dest.Array is not source.Array
    assert dest.Tags == ["x", "y"]
    assert dest.Levels == [8, 44]
    assert dest.Addresses == [Address2(Address="TEST")]
    assert dest.Addresses2 == Holder([Address2(Address="TEST2", Code=Holder("42"))])
    assert dest.Addresses2.value[0].Code is not source.Addresses2.value[0].Code  # type: ignore[union-attr]


def test_absent_optional_sequence_field_is_skipped() -> None:
    dest = PersonDest(Addresses2=Holder([Address2(Address="keep")]))
    RecordMapper().map_record(Person(), dest)

    assert dest.Addresses2 == Holder([Address2(Address="keep")])
    assert dest.Addresses == []


@dataclass
class Bag:
    Items: list[Any] = field(default_factory=list)


def test_dynamic_sequence_field_with_absent_items() -> None:
    dest = Bag()
    RecordMapper().map_record(Bag(Items=[1, None, "x"]), dest)

    assert dest.Items == [1, None, "x"]
