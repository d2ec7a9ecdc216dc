"""Field-by-field mapping of one record into another."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rec_map.coercion import coerce_field, needs_conversion
from rec_map.errors import RecursionDepthError, UnsupportedShapeError
from rec_map.holder import Holder, read
from rec_map.logging_config import get_logger
from rec_map.shapes import Kind, new_record, resolve_field, shape_of

from .collection import is_sequence, map_sequence


if TYPE_CHECKING:
    from rec_map.shapes import FieldDescriptor, RecordShape, TypeDescriptor


_logger = get_logger("mapping.record")


def compatible(source: TypeDescriptor, destination: TypeDescriptor) -> bool:
    """Return True when two field types match after stripping optionality.

    Sequences and maps also need compatible element (value) types; record
    elements of different declared types still match.
    """
    if destination.kind is Kind.DYNAMIC:
        return True
    if source.kind is not destination.kind:
        return False
    if source.kind is Kind.OBJECT:
        return source.scalar_type is destination.scalar_type
    if source.kind in (Kind.SEQUENCE, Kind.MAP):
        if source.element is None or destination.element is None:
            return True
        return compatible(source.element, destination.element)
    return True


def describe_destination(destination: Any) -> RecordShape:
    """Return the shape of ``destination`` after checking it can be written."""
    shape = shape_of(destination, "destination")
    if shape.frozen:
        msg = f"destination {shape.record_type.__name__} is frozen"
        raise UnsupportedShapeError(msg, shape.record_type)
    return shape


class RecordMapper:
    """Copy matching fields from a source record into a destination record.

    Parameters
    ----------
    case_insensitive
        Fall back to a lowercased name match when no exact match exists.
    max_depth
        Maximum nested record depth, or None for no limit.
    """

    def __init__(self, *, case_insensitive: bool = True, max_depth: int | None = None) -> None:
        super().__init__()
        self.case_insensitive = case_insensitive
        self.max_depth = max_depth

    def map_record(self, source: Any, destination: Any, *, nested: bool = False, depth: int = 0) -> None:
        """Fill ``destination`` in place from ``source``.

        ``nested`` is True for sub-records reached through a field; only a
        top-level call rejects a sequence source.
        """
        if not nested and is_sequence(source):
            msg = "source is a sequence; use map_many to map sequences"
            raise UnsupportedShapeError(msg, type(source))
        if self.max_depth is not None and depth > self.max_depth:
            raise RecursionDepthError(depth, self.max_depth)

        if isinstance(source, Holder):
            source = read(source)
        source_shape = shape_of(source, "source")
        destination_shape = describe_destination(destination)

        source_names = source_shape.names
        for target in destination_shape.fields:
            matched = resolve_field(target.name, source_names, case_insensitive=self.case_insensitive)
            if matched is None:
                _logger.debug(
                    "field skipped",
                    extra={
                        "field": target.name,
                        "reason": "unmatched",
                        "record_type": destination_shape.record_type.__name__,
                    },
                )
                continue
            if not target.writable:
                _logger.debug("field skipped", extra={"field": target.name, "reason": "unwritable"})
                continue
            self._map_field(source, source_shape.field(matched), destination, target, depth)

    def _map_field(
        self,
        source: Any,
        origin: FieldDescriptor,
        destination: Any,
        target: FieldDescriptor,
        depth: int,
    ) -> None:
        value = getattr(source, origin.name)

        if compatible(origin.type, target.type):
            if value is None and origin.optional:
                _logger.debug("field skipped", extra={"field": target.name, "reason": "absent"})
                return
            if target.kind is Kind.RECORD:
                self._assign_record(value, destination, target, depth)
            elif target.kind is Kind.SEQUENCE:
                self._assign_sequence(value, destination, target, depth)
            else:
                self._assign_scalar(value, destination, target)
            return

        if target.kind is Kind.RECORD:
            # Same-shaped records under a different declared type.
            if value is None:
                _logger.debug("field skipped", extra={"field": target.name, "reason": "absent"})
                return
            self._assign_record(value, destination, target, depth)
            return

        _logger.debug(
            "field skipped",
            extra={
                "field": target.name,
                "reason": "incompatible",
                "source_kind": str(origin.kind),
                "destination_kind": str(target.kind),
            },
        )

    def _assign_record(self, value: Any, destination: Any, target: FieldDescriptor, depth: int) -> None:
        record_type = target.type.record_type
        if record_type is None:
            msg = f"field {target.name!r} has no record type"
            raise UnsupportedShapeError(msg)
        sub_record = new_record(record_type)
        self.map_record(value, sub_record, nested=True, depth=depth + 1)
        setattr(destination, target.name, target.type.wrap(sub_record))

    def _assign_sequence(self, value: Any, destination: Any, target: FieldDescriptor, depth: int) -> None:
        element = target.type.element
        if element is None:
            msg = f"field {target.name!r} has no element type"
            raise UnsupportedShapeError(msg)

        def map_element(item: Any, sub_record: Any) -> None:
            self.map_record(item, sub_record, nested=False, depth=depth + 1)

        items = map_sequence(read(value, target.name), element, map_element)
        setattr(destination, target.name, target.type.wrap(items))

    def _assign_scalar(self, value: Any, destination: Any, target: FieldDescriptor) -> None:
        if target.kind is Kind.DYNAMIC:
            raw = value.value if isinstance(value, Holder) else value
            if raw is not None:
                setattr(destination, target.name, target.type.wrap(raw))
            return

        if target.optional:
            setattr(destination, target.name, coerce_field(value, target.type, field=target.name))
            return

        raw = read(value, target.name)
        if needs_conversion(raw, target.type):
            raw = coerce_field(raw, target.type, field=target.name)
        setattr(destination, target.name, raw)
