"""Match a destination field name to its source counterpart."""

from __future__ import annotations

from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from collections.abc import Sequence


def resolve_field(name: str, candidates: Sequence[str], *, case_insensitive: bool = True) -> str | None:
    """Return the source field name matching ``name``, or None.

    An exact match wins. Otherwise the first candidate whose lowercased form
    equals ``name.lower()`` is returned, so collisions resolve in declaration
    order. Only simple lowercasing applies, so ``"Straße"`` does not match
    ``"STRASSE"``.
    """
    if name in candidates:
        return name
    if not case_insensitive:
        return None

    folded = name.lower()
    for candidate in candidates:
        if candidate.lower() == folded:
            return candidate
    return None
