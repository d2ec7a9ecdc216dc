"""Record and sequence mapping engine."""

from .collection import is_sequence, map_sequence
from .engine import Mapper, map_many, map_one
from .record import RecordMapper, compatible


__all__ = ["Mapper", "RecordMapper", "compatible", "is_sequence", "map_many", "map_one", "map_sequence"]
