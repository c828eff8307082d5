"""CSV output for parsed text lines.

Only lines with a speaker (ACTOR attribute) and some text are written. Every
field is wrapped in double quotes and inner double quotes are doubled, so
quotes and line breaks survive inside a field:

    Who are you calling "buster", buster?
    → "Who are you calling ""buster"", buster?"
"""

from collections.abc import Iterable
from pathlib import Path

from ff7r_text.models.records import TextRecord


CSV_HEADER = "ID,Speaker,Text"


def quote(text: str) -> str:
    return '"' + text.replace('"', '""') + '"'


def should_emit(record: TextRecord) -> bool:
    return bool(record.actor) and record.text != ""


def format_row(record: TextRecord) -> str:
    return ",".join((quote(record.id), quote(record.actor), quote(record.text)))


class CsvSink:
    """Writes one region's CSV file. Use as a context manager."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)
        self.rows_written = 0
        self._file = None

    def __enter__(self) -> "CsvSink":
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self._file = self.path.open("w", encoding="utf-8", newline="")
        self._file.write(CSV_HEADER + "\n")
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self._file.close()
        self._file = None

    def write_records(self, records: Iterable[TextRecord]) -> int:
        """Write the emit-able records; returns how many rows were written."""
        if self._file is None:
            raise RuntimeError("CsvSink is not open")
        written = 0
        for record in records:
            if not should_emit(record):
                continue
            self._file.write(format_row(record) + "\n")
            written += 1
        self.rows_written += written
        return written
