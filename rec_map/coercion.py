"""Scalar coercion between elemental kinds.

Integer conversions truncate to the destination width using two's-complement
wrap-around, never saturation. Float and complex narrowing performs no
overflow check.
"""

from __future__ import annotations

import numbers
from typing import TYPE_CHECKING, Any

import numpy as np

from rec_map.errors import CoercionError
from rec_map.holder import read
from rec_map.shapes.descriptors import is_record
from rec_map.shapes.kinds import (
    CANONICAL_TYPES,
    COMPLEX_KINDS,
    FLOAT_KINDS,
    INTEGER_BITS,
    INTEGER_KINDS,
    SCALAR_KINDS,
    SIGNED_KINDS,
    Kind,
)


if TYPE_CHECKING:
    from rec_map.shapes.descriptors import TypeDescriptor


def truncate_integer(value: int, bits: int, *, signed: bool) -> int:
    """Wrap ``value`` into a ``bits``-wide two's-complement integer."""
    value &= (1 << bits) - 1
    if signed and value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def _is_boolean(value: Any) -> bool:
    return isinstance(value, (bool, np.bool_))


def _read_integer(value: Any, kind: Kind, field: str | None) -> int:
    if _is_boolean(value) or not isinstance(value, numbers.Integral):
        raise CoercionError(value, kind, field)
    return int(value)


def _read_float(value: Any, kind: Kind, field: str | None) -> float:
    if _is_boolean(value) or not isinstance(value, numbers.Real):
        raise CoercionError(value, kind, field)
    return float(value)


def _read_complex(value: Any, kind: Kind, field: str | None) -> complex:
    if _is_boolean(value) or not isinstance(value, numbers.Complex):
        raise CoercionError(value, kind, field)
    return complex(value)


def coerce(value: Any, kind: Kind, scalar_type: Any = None, *, field: str | None = None) -> Any:
    """Convert ``value`` into ``kind``, producing an instance of ``scalar_type``.

    ``value`` may be wrapped in a holder; one level is read through. When
    ``scalar_type`` is None the canonical numpy type of ``kind`` is produced.

    Raises
    ------
    AbsentValueError
        When ``value`` is absent.
    CoercionError
        When ``value`` is not of the broad category ``kind`` requires.
    """
    raw = read(value, field)
    target = scalar_type if scalar_type is not None else CANONICAL_TYPES.get(kind)

    if kind is Kind.TEXT:
        if not isinstance(raw, str):
            raise CoercionError(raw, kind, field)
        return raw

    if kind is Kind.BOOL:
        if not _is_boolean(raw):
            raise CoercionError(raw, kind, field)
        return target(raw)

    if kind in INTEGER_KINDS:
        number = truncate_integer(
            _read_integer(raw, kind, field), INTEGER_BITS[kind], signed=kind in SIGNED_KINDS
        )
        return target(number)

    if kind in FLOAT_KINDS:
        number = _read_float(raw, kind, field)
        with np.errstate(over="ignore"):
            return target(number)

    if kind in COMPLEX_KINDS:
        number = _read_complex(raw, kind, field)
        with np.errstate(over="ignore"):
            return target(number)

    if kind is Kind.MAP:
        if type(raw) is not dict or not all(isinstance(key, str) for key in raw):
            raise CoercionError(raw, kind, field)
        return raw

    return _assign_as_is(raw, kind, scalar_type, field)


def _assign_as_is(raw: Any, kind: Kind, scalar_type: Any, field: str | None) -> Any:
    """Pass a non-scalar value through, failing when its shape cannot fit."""
    if kind is Kind.OBJECT and scalar_type is not None and not isinstance(raw, scalar_type):
        raise CoercionError(raw, kind, field)
    if kind is Kind.RECORD and not is_record(raw):
        raise CoercionError(raw, kind, field)
    if kind is Kind.SEQUENCE and not isinstance(raw, (list, tuple)):
        raise CoercionError(raw, kind, field)
    return raw


def needs_conversion(value: Any, descriptor: TypeDescriptor) -> bool:
    """Return True when ``value`` is not already the descriptor's scalar type."""
    return (
        descriptor.kind in SCALAR_KINDS
        and descriptor.scalar_type is not None
        and type(value) is not descriptor.scalar_type
    )


def coerce_field(value: Any, descriptor: TypeDescriptor, *, field: str | None = None) -> Any:
    """Coerce ``value`` for a destination field, boxing it in a new holder when required."""
    return descriptor.wrap(coerce(value, descriptor.kind, descriptor.scalar_type, field=field))
