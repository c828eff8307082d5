"""Parse the line stream of a .uexp file.

The file starts with 13 bytes we don't understand, then:
  line count               uint32
  per line:
    id                     FString
    text                   FString
    meta count             uint32
    meta pairs             (FName key, FString value) * meta count

Keys are FNames resolved against the paired .uasset name table. For most
lines there is a single ACTOR pair; US/Resident_TxtRes carries extra pairs
such as ARTICLE, PLURAL and SINGULAR. A repeated key keeps the last value.
"""

import logging
from collections.abc import Iterator
from pathlib import Path

from ff7r_text.models.records import TextRecord
from ff7r_text.parser.binary_reader import BinaryReader
from ff7r_text.parser.names import NameTable, read_fname
from ff7r_text.parser.options import DEFAULT_OPTIONS, ParseOptions


logger = logging.getLogger(__name__)


def _read_record(
    reader: BinaryReader, names: NameTable, options: ParseOptions
) -> TextRecord:
    line_id = reader.fstring()
    text = reader.fstring()
    meta_count = reader.uint32()
    attributes: dict[str, str] = {}
    for _ in range(meta_count):
        key = read_fname(reader, names, options)
        attributes[key] = reader.fstring()
    return TextRecord(id=line_id, text=text, attributes=attributes)


def iter_records(
    data: bytes,
    names: NameTable,
    options: ParseOptions | None = None,
) -> Iterator[TextRecord]:
    """Yield every line of a .uexp file in file order, unfiltered."""
    options = options or DEFAULT_OPTIONS
    reader = BinaryReader(data)
    reader.seek(options.record_stream_offset)
    count = reader.uint32()
    logger.debug("Reading %d lines", count)
    for _ in range(count):
        yield _read_record(reader, names, options)


def parse_records(
    data: bytes,
    names: NameTable,
    options: ParseOptions | None = None,
) -> list[TextRecord]:
    """Parse all lines. A malformed line aborts the whole file."""
    return list(iter_records(data, names, options))


def read_record_file(
    path: Path,
    names: NameTable,
    options: ParseOptions | None = None,
) -> list[TextRecord]:
    return parse_records(Path(path).read_bytes(), names, options)
