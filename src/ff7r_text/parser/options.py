"""Configuration knobs for the package parsers.

Defaults match the FF7R text packages: a single export per header and FName
instance numbers rendered as name suffixes. Both variants have been seen in
the wild, so each can be relaxed.
"""

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class ParseOptions:
    """Tuneable parsing behaviour that isn't stored in the files themselves."""

    strict_exports: bool = True       # Header must declare exactly one export
    instance_suffix: bool = True      # FName instance N > 0 renders as name_{N-1}
    record_stream_offset: int = 0x0D  # Line count position in the .uexp file


DEFAULT_OPTIONS = ParseOptions()
