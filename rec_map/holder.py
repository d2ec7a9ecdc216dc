"""Optional holder: a nilable box around a single value."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from rec_map.errors import AbsentValueError


_T = TypeVar("_T")


@dataclass(slots=True)
class Holder(Generic[_T]):
    """Box around a present value.

    An absent optional is represented by ``None`` in the field itself, never by
    an empty holder.
    """

    value: _T


def to_optional(value: _T) -> Holder[_T]:
    """Allocate a new holder containing ``value``."""
    return Holder(value)


def read(value: Any, field: str | None = None) -> Any:
    """Return ``value`` with one level of holder removed.

    Raises
    ------
    AbsentValueError
        When there is nothing to read, i.e. the value (or the holder's
        content) is ``None``.
    """
    if isinstance(value, Holder):
        value = value.value
    if value is None:
        raise AbsentValueError(field)
    return value
