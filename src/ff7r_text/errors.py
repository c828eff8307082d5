"""Errors raised while reading .uasset/.uexp package pairs.

Every error is fatal for the file (or pair) being parsed. They all derive
from ValueError so callers that only care about "bad input" can catch that.
"""


class PackageError(ValueError):
    """Base class for all package parsing errors."""


class TruncatedData(PackageError):
    """A read or seek went past the end of the buffer."""

    def __init__(self, offset: int, size: int, end: int) -> None:
        self.offset = offset
        self.size = size
        self.end = end
        super().__init__(
            f"Read of {size} bytes at offset {offset} "
            f"would exceed boundary at {end}"
        )


class InvalidFormat(PackageError):
    """The header file does not start with the package magic tag."""

    def __init__(self, tag: int) -> None:
        self.tag = tag
        super().__init__(f"Invalid tag {tag:#010x}")


class UnsupportedVersion(PackageError):
    def __init__(self, field: str, value: int) -> None:
        self.field = field
        self.value = value
        super().__init__(f"Invalid {field} {value}")


class UnsupportedFeature(PackageError):
    def __init__(self, feature: str, value: int) -> None:
        self.feature = feature
        self.value = value
        super().__init__(f"Unsupported {feature}: {value}")


class UnsupportedSize(PackageError):
    """An export's 64-bit size or offset is too large to handle."""

    def __init__(self, field: str, value: int) -> None:
        self.field = field
        self.value = value
        super().__init__(f"Unsupported export {field} {value}")


class InvalidReference(PackageError):
    """A name index points outside the header's name table."""

    def __init__(self, index: int, count: int) -> None:
        self.index = index
        self.count = count
        super().__init__(f"Name index {index} out of range for {count} names")


class InvalidInput(PackageError):
    def __init__(self, filename: str) -> None:
        self.filename = filename
        super().__init__(
            f"Filename must end with .uasset or .uexp but got {filename}"
        )
