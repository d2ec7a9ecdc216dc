"""Zero values and zero-initialised record allocation."""

from __future__ import annotations

from typing import Any

from .descriptors import TypeDescriptor, describe_record
from .kinds import SCALAR_KINDS, Kind


def zero_value(descriptor: TypeDescriptor) -> Any:
    """Return the zero value stored in a freshly allocated field of this type."""
    if descriptor.optional:
        return None
    kind = descriptor.kind
    if kind is Kind.RECORD and descriptor.record_type is not None:
        return new_record(descriptor.record_type)
    if kind is Kind.SEQUENCE:
        return []
    if kind is Kind.MAP:
        return {}
    if kind is Kind.TEXT:
        return ""
    if kind in SCALAR_KINDS and descriptor.scalar_type is not None:
        return descriptor.scalar_type(0)
    return None


def new_record(record_type: type) -> Any:
    """Allocate an instance of ``record_type`` with every required field zeroed.

    Fields that declare a default keep it. Self-referential records with a
    non-optional field of their own type recurse without bound.
    """
    shape = describe_record(record_type)
    kwargs = {
        descriptor.name: zero_value(descriptor.type)
        for descriptor in shape.fields
        if descriptor.init and not descriptor.has_default
    }
    return record_type(**kwargs)
