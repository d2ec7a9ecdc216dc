"""Interface for ``python -m rec_map``."""

from __future__ import annotations

from argparse import ArgumentParser
from dataclasses import dataclass, field
from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from collections.abc import Sequence

from ._version import version
from .holder import Holder, to_optional
from .logging_config import configure_logging
from .mapping import map_many, map_one


__all__ = ["main"]


@dataclass
class Payload:
    Name: str = ""


@dataclass
class SourceRecord:
    FieldA: str = ""
    FieldB: int = 0
    FieldC: Holder[str] | None = None
    Object: Payload = field(default_factory=Payload)


@dataclass
class DestRecord:
    FieldA: Holder[str] | None = None
    FieldB: int = 0
    FieldC: str = ""
    Object: Holder[Payload] | None = None


def _demo() -> None:
    single = DestRecord()
    map_one(SourceRecord(FieldA="Test1", FieldB=123, Object=Payload(Name="NilMapper")), single)
    print(single)

    many: list[DestRecord] = []
    map_many(
        [
            SourceRecord(FieldA="Test1", FieldB=123),
            SourceRecord(FieldA="Test2", FieldB=456, FieldC=to_optional("Value")),
        ],
        many,
        DestRecord,
    )
    for record in many:
        print(record)


def main(args: Sequence[str] | None = None) -> None:
    """Argument parser for the CLI."""
    parser = ArgumentParser(prog="rec_map")
    _ = parser.add_argument("-v", "--version", action="version", version=version)
    _ = parser.add_argument("--demo", action="store_true", help="map a few example records and print them")
    _ = parser.add_argument("--log-level", default=None, help="emit JSON logs at this level, e.g. DEBUG")
    options = parser.parse_args(args)

    if options.log_level:
        configure_logging(level=options.log_level.upper())
    if options.demo:
        _demo()


if __name__ == "__main__":
    main()
