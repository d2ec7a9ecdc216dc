"""Map a list of records, normalising 8-bit levels and optionality on the way.

Levels arrive as plain Python ints; the mapper wraps them into ``np.int8``.
"""

from dataclasses import dataclass

import numpy as np

from rec_map import Holder, Mapper, configure_logging, to_optional


@dataclass
class Reading:
    SensorID: str = ""
    Level: np.int8 = np.int8(0)
    Note: Holder[str] | None = None


@dataclass
class CompactReading:
    SensorId: str = ""
    Level: Holder[np.int8] | None = None
    Note: str = ""


def main() -> None:
    """Copy readings into a compact form with 8-bit levels."""
    configure_logging(level="DEBUG")
    readings = [
        Reading(SensorID="a-1", Level=12),
        Reading(SensorID="a-2", Level=300, Note=to_optional("clipped")),
    ]

    compact: list[CompactReading] = []
    Mapper(max_depth=4).map_many(readings, compact, CompactReading)

    for row in compact:
        level = None if row.Level is None else row.Level.value
        print(row.SensorId, level, repr(row.Note))


if __name__ == "__main__":
    main()
