"""Extract dialogue lines from FF7R .uasset/.uexp text packages."""

from ff7r_text.models.records import ExportDescriptor, TextRecord
from ff7r_text.parser import (
    HeaderFile,
    NameTable,
    Package,
    PackagePair,
    ParseOptions,
    parse_header,
    parse_records,
    read_package,
)

__all__ = [
    "ExportDescriptor",
    "HeaderFile",
    "NameTable",
    "Package",
    "PackagePair",
    "ParseOptions",
    "TextRecord",
    "parse_header",
    "parse_records",
    "read_package",
]
