"""Binary parsers for FF7R .uasset/.uexp text packages."""

from ff7r_text.parser.header_parser import HeaderFile, parse_header, read_header_file
from ff7r_text.parser.names import NameTable
from ff7r_text.parser.options import ParseOptions
from ff7r_text.parser.package import Package, PackagePair, read_package
from ff7r_text.parser.record_parser import iter_records, parse_records

__all__ = [
    "HeaderFile",
    "NameTable",
    "Package",
    "PackagePair",
    "ParseOptions",
    "iter_records",
    "parse_header",
    "parse_records",
    "read_header_file",
    "read_package",
]
