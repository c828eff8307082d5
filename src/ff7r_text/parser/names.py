"""Name table and FName resolution shared by the header and record parsers.

A .uasset file declares a list of names once. Elsewhere (the export table,
the .uexp line metadata) names are stored as an FName: an int32 index into
that list followed by an int32 instance number. A non-zero instance number
is decremented and appended with an underscore, so with names
["Foo", "Bar"], index 1 / instance 2 renders as "Bar_1" and index 0 /
instance 0 renders as "Foo".
"""

from collections.abc import Iterator, Sequence

from ff7r_text.errors import InvalidReference
from ff7r_text.parser.binary_reader import BinaryReader
from ff7r_text.parser.options import DEFAULT_OPTIONS, ParseOptions


# Per-entry hash metadata following each name; read and discarded.
_NAME_HASH_SIZE = 4


class NameTable(Sequence[str]):
    """Immutable, ordered list of names declared by a header file."""

    __slots__ = ("_names",)

    def __init__(self, names=()) -> None:
        self._names: tuple[str, ...] = tuple(names)

    def __getitem__(self, index):
        return self._names[index]

    def __len__(self) -> int:
        return len(self._names)

    def __iter__(self) -> Iterator[str]:
        return iter(self._names)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, NameTable):
            return self._names == other._names
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._names)

    def __repr__(self) -> str:
        return f"NameTable({list(self._names)!r})"

    def resolve(self, index: int, instance: int = 0, *, instance_suffix: bool = True) -> str:
        """Render an FName. Negative or too-large indices are rejected."""
        if index < 0 or index >= len(self._names):
            raise InvalidReference(index, len(self._names))
        name = self._names[index]
        if instance_suffix and instance > 0:
            return f"{name}_{instance - 1}"
        return name


def read_name_table(reader: BinaryReader, count: int) -> NameTable:
    """Read `count` names at the reader's current position."""
    names: list[str] = []
    for _ in range(count):
        names.append(reader.fstring())
        reader.skip(_NAME_HASH_SIZE)
    return NameTable(names)


def read_fname(
    reader: BinaryReader,
    names: NameTable,
    options: ParseOptions = DEFAULT_OPTIONS,
) -> str:
    """Read an FName (index + instance) and resolve it against `names`.

    With options.instance_suffix disabled the instance word is still
    consumed but ignored.
    """
    index = reader.int32()
    instance = reader.int32()
    return names.resolve(index, instance, instance_suffix=options.instance_suffix)
