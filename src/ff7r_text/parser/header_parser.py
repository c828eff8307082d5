"""Parse the .uasset header file of an FF7R text package.

Only the fields needed to reach the name table and export table are kept
meaningful; everything else is read to keep the cursor aligned and to
validate that the file is the one engine build we know how to read.

Layout (all little-endian):
  tag                      uint32, always 0x9E2A83C1
  legacy version           int32, -4 for UE4 packages
  UE3 version              int32, only present when legacy version != -4
  file version             int32, low 16 bits must be 0
  licensee version         int32, low 16 bits must be 0
  custom versions count    int32, only when legacy version <= -2; must be 0
  headers size             int32
  package group            FString
  package flags            uint32
  names count / offset     int32 / int32
  gatherable text count / offset
  exports count / offset
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path

from ff7r_text.errors import (
    InvalidFormat,
    UnsupportedFeature,
    UnsupportedSize,
    UnsupportedVersion,
)
from ff7r_text.models.records import ExportDescriptor
from ff7r_text.parser.binary_reader import BinaryReader
from ff7r_text.parser.names import NameTable, read_fname, read_name_table
from ff7r_text.parser.options import DEFAULT_OPTIONS, ParseOptions


logger = logging.getLogger(__name__)

PACKAGE_TAG = 0x9E2A83C1
UE4_LEGACY_VERSION = -4
MAX_SAFE_INTEGER = 2**53 - 1
_GUID_SIZE = 16


@dataclass(slots=True)
class HeaderFile:
    """A parsed .uasset file: summary fields, name table and exports."""
    tag: int
    legacy_version: int
    ue3_version: int | None
    file_version: int
    licensee_version: int
    custom_versions_count: int
    headers_size: int
    package_group: str
    package_flags: int
    names_count: int
    names_offset: int
    gatherable_text_data_count: int
    gatherable_text_data_offset: int
    exports_count: int
    exports_offset: int
    names: NameTable = field(default_factory=NameTable)
    exports: list[ExportDescriptor] = field(default_factory=list)


def _check_safe_size(field_name: str, value: int) -> int:
    if value < 0 or value > MAX_SAFE_INTEGER:
        raise UnsupportedSize(field_name, value)
    return value


def _read_export(
    reader: BinaryReader, names: NameTable, options: ParseOptions
) -> ExportDescriptor:
    """Read one export table entry. The field order is fixed."""
    class_index = reader.int32()
    super_index = reader.int32()
    template_index = reader.int32()
    package_index = reader.int32()
    object_name = read_fname(reader, names, options)
    object_flags = reader.uint32()
    serial_size = reader.int64()
    serial_offset = reader.int64()
    is_forced_export = reader.boolean()
    is_not_for_client = reader.boolean()
    is_not_for_server = reader.boolean()
    guid = reader.bytes(_GUID_SIZE)
    package_flags = reader.uint32()
    is_not_for_editor_game = reader.boolean()
    is_asset = reader.boolean()

    return ExportDescriptor(
        class_index=class_index,
        super_index=super_index,
        template_index=template_index,
        package_index=package_index,
        object_name=object_name,
        object_flags=object_flags,
        serial_size=_check_safe_size("size", serial_size),
        serial_offset=_check_safe_size("offset", serial_offset),
        is_forced_export=is_forced_export,
        is_not_for_client=is_not_for_client,
        is_not_for_server=is_not_for_server,
        guid=guid,
        package_flags=package_flags,
        is_not_for_editor_game=is_not_for_editor_game,
        is_asset=is_asset,
    )


def _read_summary(reader: BinaryReader, options: ParseOptions) -> HeaderFile:
    tag = reader.uint32()
    if tag != PACKAGE_TAG:
        raise InvalidFormat(tag)

    legacy_version = reader.int32()
    ue3_version = None
    if legacy_version != UE4_LEGACY_VERSION:
        ue3_version = reader.int32()

    version = reader.int32()
    licensee_version = reader.int32() & 0xFFFF
    file_version = version & 0xFFFF
    # Only the one known build (all zero) is supported.
    if version & 0xFFFF != 0:
        raise UnsupportedVersion("version", version)
    if licensee_version != 0:
        raise UnsupportedVersion("licensee version", licensee_version)
    if file_version != 0:
        raise UnsupportedVersion("file version", file_version)

    custom_versions_count = 0
    if legacy_version <= -2:
        custom_versions_count = reader.int32()
        if custom_versions_count != 0:
            raise UnsupportedFeature("custom versions count", custom_versions_count)

    headers_size = reader.int32()
    package_group = reader.fstring()
    package_flags = reader.uint32()

    names_count = reader.int32()
    names_offset = reader.int32()

    gatherable_text_data_count = reader.int32()
    gatherable_text_data_offset = reader.int32()

    exports_count = reader.int32()
    exports_offset = reader.int32()

    # FF7R text files only ever have one export.
    if options.strict_exports and exports_count != 1:
        raise UnsupportedFeature("number of exports", exports_count)

    return HeaderFile(
        tag=tag,
        legacy_version=legacy_version,
        ue3_version=ue3_version,
        file_version=file_version,
        licensee_version=licensee_version,
        custom_versions_count=custom_versions_count,
        headers_size=headers_size,
        package_group=package_group,
        package_flags=package_flags,
        names_count=names_count,
        names_offset=names_offset,
        gatherable_text_data_count=gatherable_text_data_count,
        gatherable_text_data_offset=gatherable_text_data_offset,
        exports_count=exports_count,
        exports_offset=exports_offset,
    )


def parse_header(data: bytes, options: ParseOptions | None = None) -> HeaderFile:
    """Parse a complete .uasset file from memory.

    Raises:
        InvalidFormat: The magic tag is wrong (checked before anything else).
        UnsupportedVersion: Any version check fails.
        UnsupportedFeature: Custom versions present, or export count != 1
            in strict mode.
        UnsupportedSize: An export size/offset exceeds 2**53 - 1.
        InvalidReference: An export's object name index is out of range.
        TruncatedData: The file ends early.
    """
    options = options or DEFAULT_OPTIONS
    reader = BinaryReader(data)
    header = _read_summary(reader, options)

    reader.seek(header.names_offset)
    header.names = read_name_table(reader, header.names_count)

    reader.seek(header.exports_offset)
    header.exports = [
        _read_export(reader, header.names, options)
        for _ in range(header.exports_count)
    ]

    logger.debug(
        "Parsed header: %d names, %d exports",
        len(header.names), len(header.exports),
    )
    return header


def read_header_file(path: Path, options: ParseOptions | None = None) -> HeaderFile:
    return parse_header(Path(path).read_bytes(), options)
