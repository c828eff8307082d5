"""Pair a .uasset header file with its .uexp record file and read both.

The .uexp lines reference names declared in the .uasset, so the header is
always read first and its name table handed to the record parser.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

from ff7r_text.errors import InvalidInput
from ff7r_text.models.records import TextRecord
from ff7r_text.parser.header_parser import HeaderFile, parse_header
from ff7r_text.parser.options import DEFAULT_OPTIONS, ParseOptions
from ff7r_text.parser.record_parser import parse_records


logger = logging.getLogger(__name__)

HEADER_SUFFIX = ".uasset"
RECORD_SUFFIX = ".uexp"

Loader = Callable[[Path], bytes]


def _read_bytes(path: Path) -> bytes:
    return path.read_bytes()


def _replace_suffix(filename: str, old: str, new: str) -> str:
    return filename[: -len(old)] + new


@dataclass(slots=True, frozen=True)
class PackagePair:
    """The two filenames of one package, sharing a stem."""
    header_path: Path
    record_path: Path

    @classmethod
    def from_filename(cls, filename: str | Path) -> "PackagePair":
        """Build the pair from either file. The suffix match ignores case.

        Raises:
            InvalidInput: The filename ends with neither .uasset nor .uexp.
        """
        name = str(filename)
        lowered = name.lower()
        if lowered.endswith(HEADER_SUFFIX):
            header = name
            record = _replace_suffix(name, HEADER_SUFFIX, RECORD_SUFFIX)
        elif lowered.endswith(RECORD_SUFFIX):
            record = name
            header = _replace_suffix(name, RECORD_SUFFIX, HEADER_SUFFIX)
        else:
            raise InvalidInput(name)
        return cls(header_path=Path(header), record_path=Path(record))

    @property
    def name(self) -> str:
        return self.header_path.stem

    def read(
        self,
        loader: Loader | None = None,
        options: ParseOptions | None = None,
    ) -> "Package":
        """Load and parse the header, then the records against its names."""
        loader = loader or _read_bytes
        options = options or DEFAULT_OPTIONS

        logger.debug("Reading %s", self.header_path)
        header = parse_header(loader(self.header_path), options)

        logger.debug("Reading %s", self.record_path)
        records = parse_records(loader(self.record_path), header.names, options)

        return Package(pair=self, header=header, records=records)


@dataclass(slots=True)
class Package:
    """A fully parsed package pair."""
    pair: PackagePair
    header: HeaderFile
    records: list[TextRecord] = field(default_factory=list)


def read_package(
    filename: str | Path,
    loader: Loader | None = None,
    options: ParseOptions | None = None,
) -> Package:
    return PackagePair.from_filename(filename).read(loader, options)
