"""Typed exceptions raised by the mapping engine.

Every fault carries a machine-readable ``code`` plus the structured data that
caused it. The engine never catches these: a failed call leaves the
destination partially populated.
"""

from __future__ import annotations

from typing import Any


class MappingError(Exception):
    """Base class for all mapping faults."""

    code: str = "MAPPING_ERROR"


class AbsentValueError(MappingError):
    """A concrete value was required but the source optional was absent."""

    code = "ABSENT_VALUE"

    def __init__(self, field: str | None = None) -> None:
        self.field = field
        where = f" for field {field!r}" if field else ""
        msg = f"cannot read through an absent optional{where}"
        super().__init__(msg)


class UnsupportedShapeError(MappingError):
    """A source or destination could not be classified as the expected shape."""

    code = "UNSUPPORTED_SHAPE"

    def __init__(self, message: str, value_type: type | None = None) -> None:
        self.value_type = value_type
        super().__init__(message)


class CoercionError(MappingError, TypeError):
    """A value could not be converted into the destination kind."""

    code = "COERCION_FAILED"

    def __init__(self, value: Any, kind: Any, field: str | None = None) -> None:
        self.value_type = type(value)
        self.kind = kind
        self.field = field
        where = f" for field {field!r}" if field else ""
        msg = f"cannot coerce {type(value).__name__} to {kind!s}{where}"
        super().__init__(msg)


class RecursionDepthError(MappingError):
    """Nested record depth exceeded the configured ``max_depth``."""

    code = "RECURSION_DEPTH_EXCEEDED"

    def __init__(self, depth: int, limit: int) -> None:
        self.depth = depth
        self.limit = limit
        msg = f"record nesting depth {depth} exceeds max_depth={limit}"
        super().__init__(msg)
