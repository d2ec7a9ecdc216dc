"""Record shape introspection: kinds, descriptors and field resolution."""

from .descriptors import (
    FieldDescriptor,
    RecordShape,
    TypeDescriptor,
    describe_record,
    describe_type,
    is_record,
    is_record_type,
    shape_of,
)
from .kinds import Kind, UIntPtr
from .resolver import resolve_field
from .zero import new_record, zero_value


__all__ = [
    "FieldDescriptor",
    "Kind",
    "RecordShape",
    "TypeDescriptor",
    "UIntPtr",
    "describe_record",
    "describe_type",
    "is_record",
    "is_record_type",
    "new_record",
    "resolve_field",
    "shape_of",
    "zero_value",
]
