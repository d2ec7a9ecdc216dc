"""rec-map - copy fields between differently shaped dataclass records"""

from ._version import version as __version__
from .coercion import coerce
from .errors import AbsentValueError, CoercionError, MappingError, RecursionDepthError, UnsupportedShapeError
from .holder import Holder, to_optional
from .logging_config import configure_logging, get_logger
from .mapping import Mapper, map_many, map_one
from .shapes import (
    FieldDescriptor,
    Kind,
    RecordShape,
    TypeDescriptor,
    UIntPtr,
    describe_record,
    describe_type,
    new_record,
    resolve_field,
)


__all__ = [
    "AbsentValueError",
    "CoercionError",
    "FieldDescriptor",
    "Holder",
    "Kind",
    "Mapper",
    "MappingError",
    "RecordShape",
    "RecursionDepthError",
    "TypeDescriptor",
    "UIntPtr",
    "UnsupportedShapeError",
    "__version__",
    "coerce",
    "configure_logging",
    "describe_record",
    "describe_type",
    "get_logger",
    "map_many",
    "map_one",
    "new_record",
    "resolve_field",
    "to_optional",
]
