"""Sequence mapping: one destination element per source element, in order."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, Any

from rec_map.coercion import coerce, needs_conversion
from rec_map.errors import UnsupportedShapeError
from rec_map.holder import Holder, read
from rec_map.shapes import Kind, new_record


if TYPE_CHECKING:
    from rec_map.shapes import TypeDescriptor


MapRecord = Callable[[Any, Any], None]


def is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def _map_element(item: Any, element: TypeDescriptor, map_record: MapRecord) -> Any:
    if item is None and element.optional:
        return None

    if element.kind is Kind.RECORD and element.record_type is not None:
        target = new_record(element.record_type)
        map_record(item, target)
        return element.wrap(target)

    if element.kind is Kind.DYNAMIC:
        raw = item.value if isinstance(item, Holder) else item
        return None if raw is None else element.wrap(raw)

    raw = read(item)
    if needs_conversion(raw, element):
        raw = coerce(raw, element.kind, element.scalar_type)
    return element.wrap(raw)


def map_sequence(source: Any, element: TypeDescriptor, map_record: MapRecord) -> list[Any]:
    """Build a new list holding one mapped element per item of ``source``.

    Record elements are allocated zeroed and filled through ``map_record``;
    scalar elements are read through their holder and coerced when their type
    differs from the destination element type.
    """
    source = read(source)
    if not is_sequence(source):
        msg = f"source must be a sequence, got {type(source).__name__}"
        raise UnsupportedShapeError(msg, type(source))

    mapped: list[Any] = [None] * len(source)
    for index, item in enumerate(source):
        mapped[index] = _map_element(item, element, map_record)
    return mapped
