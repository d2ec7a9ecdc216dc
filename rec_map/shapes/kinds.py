"""Closed classification of field value shapes."""

from __future__ import annotations

from enum import Enum
from typing import Any, NewType

import numpy as np


UIntPtr = NewType("UIntPtr", int)
"""Marker for pointer-width unsigned integer fields."""


class Kind(Enum):
    """Elemental kind of a field after optionality has been stripped."""

    TEXT = "text"
    BOOL = "bool"
    INT8 = "int8"
    INT16 = "int16"
    INT32 = "int32"
    INT64 = "int64"
    UINT8 = "uint8"
    UINT16 = "uint16"
    UINT32 = "uint32"
    UINT64 = "uint64"
    UINTPTR = "uintptr"
    FLOAT32 = "float32"
    FLOAT64 = "float64"
    COMPLEX64 = "complex64"
    COMPLEX128 = "complex128"
    MAP = "map"
    RECORD = "record"
    SEQUENCE = "sequence"
    DYNAMIC = "dynamic"
    OBJECT = "object"

    def __str__(self) -> str:
        return self.value


SIGNED_KINDS = frozenset({Kind.INT8, Kind.INT16, Kind.INT32, Kind.INT64})
UNSIGNED_KINDS = frozenset({Kind.UINT8, Kind.UINT16, Kind.UINT32, Kind.UINT64, Kind.UINTPTR})
INTEGER_KINDS = SIGNED_KINDS | UNSIGNED_KINDS
FLOAT_KINDS = frozenset({Kind.FLOAT32, Kind.FLOAT64})
COMPLEX_KINDS = frozenset({Kind.COMPLEX64, Kind.COMPLEX128})
NUMERIC_KINDS = INTEGER_KINDS | FLOAT_KINDS | COMPLEX_KINDS
SCALAR_KINDS = NUMERIC_KINDS | {Kind.TEXT, Kind.BOOL}

INTEGER_BITS: dict[Kind, int] = {
    Kind.INT8: 8,
    Kind.INT16: 16,
    Kind.INT32: 32,
    Kind.INT64: 64,
    Kind.UINT8: 8,
    Kind.UINT16: 16,
    Kind.UINT32: 32,
    Kind.UINT64: 64,
    Kind.UINTPTR: np.dtype(np.uintp).itemsize * 8,
}

# Python type produced for a kind when the declared type is unknown.
CANONICAL_TYPES: dict[Kind, Any] = {
    Kind.TEXT: str,
    Kind.BOOL: bool,
    Kind.INT8: np.int8,
    Kind.INT16: np.int16,
    Kind.INT32: np.int32,
    Kind.INT64: np.int64,
    Kind.UINT8: np.uint8,
    Kind.UINT16: np.uint16,
    Kind.UINT32: np.uint32,
    Kind.UINT64: np.uint64,
    Kind.UINTPTR: int,
    Kind.FLOAT32: np.float32,
    Kind.FLOAT64: np.float64,
    Kind.COMPLEX64: np.complex64,
    Kind.COMPLEX128: np.complex128,
}

SCALAR_ANNOTATIONS: dict[Any, tuple[Kind, Any]] = {
    str: (Kind.TEXT, str),
    bool: (Kind.BOOL, bool),
    np.bool_: (Kind.BOOL, np.bool_),
    int: (Kind.INT64, int),
    np.int8: (Kind.INT8, np.int8),
    np.int16: (Kind.INT16, np.int16),
    np.int32: (Kind.INT32, np.int32),
    np.int64: (Kind.INT64, np.int64),
    np.uint8: (Kind.UINT8, np.uint8),
    np.uint16: (Kind.UINT16, np.uint16),
    np.uint32: (Kind.UINT32, np.uint32),
    np.uint64: (Kind.UINT64, np.uint64),
    UIntPtr: (Kind.UINTPTR, int),
    float: (Kind.FLOAT64, float),
    np.float32: (Kind.FLOAT32, np.float32),
    np.float64: (Kind.FLOAT64, np.float64),
    complex: (Kind.COMPLEX128, complex),
    np.complex64: (Kind.COMPLEX64, np.complex64),
    np.complex128: (Kind.COMPLEX128, np.complex128),
}
