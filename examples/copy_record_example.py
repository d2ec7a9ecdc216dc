"""Map one record into a differently shaped record."""

from dataclasses import dataclass, field

from rec_map import Holder, map_one


@dataclass
class Payload:
    Name: str = ""


@dataclass
class SourceStruct:
    FieldA: str = ""
    FieldB: int = 0
    FieldC: Holder[str] | None = None
    Object: Payload = field(default_factory=Payload)


@dataclass
class DestStruct:
    FieldA: Holder[str] | None = None
    FieldB: int = 0
    FieldC: str = ""
    Object: Holder[Payload] | None = None


def main() -> None:
    """Copy a record whose optional text field is absent."""
    src = SourceStruct(FieldA="Test1", FieldB=123, FieldC=None, Object=Payload(Name="NilMapper"))
    dest = DestStruct()
    map_one(src, dest)

    assert dest.FieldA is not None
    assert dest.Object is not None
    print("FieldA:", dest.FieldA.value)
    print("FieldB:", dest.FieldB)
    print("FieldC:", repr(dest.FieldC))
    print("Object.Name:", dest.Object.value.Name)


if __name__ == "__main__":
    main()
