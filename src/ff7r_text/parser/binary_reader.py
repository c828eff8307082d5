"""Low-level binary reader with typed little-endian reads and a moving cursor."""

import struct
from pathlib import Path

from ff7r_text.errors import TruncatedData


class BinaryReader:
    """Wraps a bytes buffer with typed reads and a moving cursor.

    Parsers own their reader exclusively: each header or record parse creates
    one, walks it forward, and drops it when done. seek() is only used to jump
    to table offsets.
    """

    __slots__ = ("_data", "_pos")

    def __init__(self, data: bytes) -> None:
        self._data = data
        self._pos = 0

    @classmethod
    def from_file(cls, path: Path) -> "BinaryReader":
        """Load the whole file into memory; the cursor starts at 0."""
        return cls(Path(path).read_bytes())

    @property
    def position(self) -> int:
        return self._pos

    @property
    def remaining(self) -> int:
        return len(self._data) - self._pos

    def _read(self, size: int) -> bytes:
        if size < 0 or self._pos + size > len(self._data):
            raise TruncatedData(self._pos, size, len(self._data))
        chunk = self._data[self._pos : self._pos + size]
        self._pos += size
        return chunk

    def uint8(self) -> int:
        return self._read(1)[0]

    def boolean(self) -> bool:
        return self.uint8() != 0

    def int16(self) -> int:
        return struct.unpack_from("<h", self._read(2))[0]

    def int32(self) -> int:
        return struct.unpack_from("<i", self._read(4))[0]

    def uint32(self) -> int:
        return struct.unpack_from("<I", self._read(4))[0]

    def int64(self) -> int:
        return struct.unpack_from("<q", self._read(8))[0]

    def uint64(self) -> int:
        return struct.unpack_from("<Q", self._read(8))[0]

    def bytes(self, size: int) -> bytes:
        return self._read(size)

    def skip(self, size: int) -> None:
        self._read(size)

    def fstring(self) -> str:
        """Read a length-prefixed string.

        The signed int32 length counts characters including the closing NUL:
          0   → empty string, nothing else consumed
          > 0 → that many single-byte characters
          < 0 → abs(length) UTF-16LE characters (2 bytes each)
        Exactly one trailing NUL is stripped.
        """
        length = self.int32()
        if length == 0:
            return ""
        if length > 0:
            value = self._read(length).decode("utf-8", errors="replace")
        else:
            value = self._read(-length * 2).decode("utf-16-le", errors="replace")
        if value.endswith("\x00"):
            value = value[:-1]
        return value

    def seek(self, offset: int) -> None:
        """Seek to an absolute position within the buffer."""
        if offset < 0 or offset > len(self._data):
            raise TruncatedData(offset, 0, len(self._data))
        self._pos = offset
