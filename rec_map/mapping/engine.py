"""Public entry points: map one record or a sequence of records."""

from __future__ import annotations

from typing import Any, TypeVar

from rec_map.errors import UnsupportedShapeError
from rec_map.shapes import Kind, describe_type, new_record

from .collection import is_sequence, map_sequence
from .record import RecordMapper


_D = TypeVar("_D")


class Mapper:
    """Configurable mapping engine.

    Parameters
    ----------
    case_insensitive
        Match destination fields to source fields ignoring case when no exact
        name match exists.
    max_depth
        Raise :class:`~rec_map.errors.RecursionDepthError` once nested records
        go deeper than this. None leaves recursion unbounded, so cyclic
        record graphs end in Python's own ``RecursionError``.
    """

    def __init__(self, *, case_insensitive: bool = True, max_depth: int | None = None) -> None:
        super().__init__()
        if max_depth is not None and max_depth < 1:
            msg = "max_depth must be a positive integer"
            raise ValueError(msg)
        self._records = RecordMapper(case_insensitive=case_insensitive, max_depth=max_depth)

    @property
    def case_insensitive(self) -> bool:
        return self._records.case_insensitive

    @property
    def max_depth(self) -> int | None:
        return self._records.max_depth

    def map_one(self, source: Any, destination: Any) -> None:
        """Copy matching fields of ``source`` into the record ``destination``."""
        if is_sequence(destination):
            msg = "destination is a sequence; use map_many to map sequences"
            raise UnsupportedShapeError(msg, type(destination))
        self._records.map_record(source, destination, nested=False)

    def map_many(self, source: Any, destination: list[Any], record_type: Any) -> None:
        """Replace the contents of ``destination`` with one mapped record per source item.

        ``record_type`` is the destination element type, a dataclass or an
        optional holder of one. The new list is built completely before it is
        swapped into ``destination``.
        """
        if not is_sequence(source):
            msg = f"source must be a sequence, got {type(source).__name__}"
            raise UnsupportedShapeError(msg, type(source))
        if not isinstance(destination, list):
            msg = f"destination must be a list, got {type(destination).__name__}"
            raise UnsupportedShapeError(msg, type(destination))
        element = describe_type(record_type)
        if element.kind is not Kind.RECORD:
            msg = f"record_type must be a record type, got {record_type!r}"
            raise UnsupportedShapeError(msg)

        def map_element(item: Any, sub_record: Any) -> None:
            self._records.map_record(item, sub_record, nested=False)

        destination[:] = map_sequence(source, element, map_element)

    def convert(self, source: Any, record_type: type[_D]) -> _D:
        """Return a new zero-initialised ``record_type`` filled from ``source``."""
        destination = new_record(record_type)
        self.map_one(source, destination)
        return destination


_default_mapper = Mapper()


def map_one(source: Any, destination: Any) -> None:
    """Copy matching fields of ``source`` into ``destination`` using the default engine."""
    _default_mapper.map_one(source, destination)


def map_many(source: Any, destination: list[Any], record_type: Any) -> None:
    """Map a sequence of records into ``destination`` using the default engine."""
    _default_mapper.map_many(source, destination, record_type)
