"""Field and record descriptors derived from dataclass annotations.

Descriptors are computed once per record class and cached, so repeated
mapping calls between the same pair of shapes only walk the field tables.
"""

from __future__ import annotations

import dataclasses
import functools
from collections.abc import Mapping, MutableMapping, MutableSequence, Sequence
from dataclasses import dataclass
from types import NoneType, UnionType
from typing import Any, Union, get_args, get_origin, get_type_hints

from rec_map.errors import UnsupportedShapeError
from rec_map.holder import Holder

from .kinds import SCALAR_ANNOTATIONS, Kind


_MAP_ORIGINS = (dict, Mapping, MutableMapping)
_SEQUENCE_ORIGINS = (list, tuple, Sequence, MutableSequence)


@dataclass(frozen=True, slots=True)
class TypeDescriptor:
    """Classified view of one annotation.

    ``optional`` means ``None`` is a legal (absent) value. ``boxed`` means a
    present value is stored inside a :class:`~rec_map.holder.Holder` rather
    than inline. ``element`` describes sequence elements and map values.
    """

    kind: Kind
    optional: bool = False
    boxed: bool = False
    scalar_type: Any = None
    record_type: type | None = None
    element: TypeDescriptor | None = None

    def wrap(self, value: Any) -> Any:
        """Return ``value`` in the representation this descriptor stores."""
        if self.boxed:
            return Holder(value)
        return value


@dataclass(frozen=True, slots=True)
class FieldDescriptor:
    """A named field of a record together with its classified type."""

    name: str
    type: TypeDescriptor
    writable: bool = True
    init: bool = True
    has_default: bool = False

    @property
    def kind(self) -> Kind:
        return self.type.kind

    @property
    def optional(self) -> bool:
        return self.type.optional


@dataclass(frozen=True, slots=True)
class RecordShape:
    """Ordered field table of a record class."""

    record_type: type
    fields: tuple[FieldDescriptor, ...]
    frozen: bool = False

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(descriptor.name for descriptor in self.fields)

    def field(self, name: str) -> FieldDescriptor:
        for descriptor in self.fields:
            if descriptor.name == name:
                return descriptor
        msg = f"{self.record_type.__name__} has no field {name!r}"
        raise KeyError(msg)


def is_record_type(annotation: Any) -> bool:
    return isinstance(annotation, type) and dataclasses.is_dataclass(annotation)


def is_record(value: Any) -> bool:
    return dataclasses.is_dataclass(value) and not isinstance(value, type)


def _strip_optional(annotation: Any) -> tuple[bool, bool, Any]:
    """Split one level of optionality off ``annotation``.

    Returns ``(optional, boxed, inner)``.
    """
    if annotation is Holder:
        return True, True, Any
    origin = get_origin(annotation)
    if origin is Holder:
        return True, True, get_args(annotation)[0]
    if origin not in (Union, UnionType):
        return False, False, annotation

    members = get_args(annotation)
    present = [member for member in members if member is not NoneType]
    if len(present) == len(members):
        return False, False, annotation
    if len(present) != 1:
        return True, False, Any

    inner = present[0]
    if inner is Holder:
        return True, True, Any
    if get_origin(inner) is Holder:
        return True, True, get_args(inner)[0]
    return True, False, inner


def _element_annotation(origin: Any, args: tuple[Any, ...]) -> Any:
    if not args:
        return Any
    if origin is tuple and not (len(args) == 2 and args[1] is Ellipsis):
        return Any
    return args[0]


def describe_type(annotation: Any) -> TypeDescriptor:
    """Classify ``annotation`` into a :class:`TypeDescriptor`."""
    optional, boxed, inner = _strip_optional(annotation)

    if inner is Any or inner is object:
        return TypeDescriptor(Kind.DYNAMIC, optional, boxed)

    try:
        scalar = SCALAR_ANNOTATIONS.get(inner)
    except TypeError:
        scalar = None
    if scalar is not None:
        kind, scalar_type = scalar
        return TypeDescriptor(kind, optional, boxed, scalar_type=scalar_type)

    if is_record_type(inner):
        return TypeDescriptor(Kind.RECORD, optional, boxed, record_type=inner)

    origin = get_origin(inner)
    if inner in _MAP_ORIGINS or origin in _MAP_ORIGINS:
        args = get_args(inner)
        values = describe_type(args[1] if len(args) == 2 else Any)
        return TypeDescriptor(Kind.MAP, optional, boxed, element=values)
    if inner in _SEQUENCE_ORIGINS or origin in _SEQUENCE_ORIGINS:
        element = describe_type(_element_annotation(origin, get_args(inner)))
        return TypeDescriptor(Kind.SEQUENCE, optional, boxed, element=element)

    if origin is None and isinstance(inner, type):
        return TypeDescriptor(Kind.OBJECT, optional, boxed, scalar_type=inner)
    return TypeDescriptor(Kind.DYNAMIC, optional, boxed)


@functools.cache
def describe_record(record_type: type) -> RecordShape:
    """Return the cached field table of a dataclass type."""
    if not is_record_type(record_type):
        msg = f"not a record type: {record_type!r}"
        raise UnsupportedShapeError(msg, record_type)
    try:
        hints = get_type_hints(record_type)
    except NameError as exc:
        msg = f"cannot resolve annotations of {record_type.__name__}: {exc}"
        raise UnsupportedShapeError(msg, record_type) from exc

    fields = tuple(
        FieldDescriptor(
            name=field.name,
            type=describe_type(hints.get(field.name, Any)),
            writable=not field.name.startswith("_"),
            init=field.init,
            has_default=(
                field.default is not dataclasses.MISSING or field.default_factory is not dataclasses.MISSING
            ),
        )
        for field in dataclasses.fields(record_type)
    )
    params = getattr(record_type, "__dataclass_params__", None)
    return RecordShape(record_type=record_type, fields=fields, frozen=bool(params and params.frozen))


def shape_of(value: Any, role: str) -> RecordShape:
    """Return the shape of a record instance, failing for anything else."""
    if not is_record(value):
        msg = f"{role} must be a record instance, got {type(value).__name__}"
        raise UnsupportedShapeError(msg, type(value))
    return describe_record(type(value))
