"""
Custom exceptions for the design-pattern demos.

Hierarchy:
    DemoError
    ├── ResourceUnavailable   Data source could not be opened; reader is unusable.
    ├── MalformedRecord       Strict dialect rejected a record (bad quoting).
    └── AlignmentError        Record field count doesn't match header count.
"""


class DemoError(Exception):
    """Base class for all demo errors."""


class ResourceUnavailable(DemoError):
    """
    Raised when a data source cannot be opened for reading.

    Args:
        message: Human-readable description of the failure.
        source_path: Path of the file that could not be opened.
    """

    def __init__(self, message: str, source_path: str | None = None) -> None:
        super().__init__(message)
        self.source_path = source_path

    def __str__(self) -> str:
        base = super().__str__()
        if self.source_path:
            return f"{base} | source={self.source_path}"
        return base


class MalformedRecord(DemoError):
    """
    Raised when a record cannot be parsed (e.g. an unterminated quote).

    Args:
        message: Human-readable description.
        source_path: Path of the file being read.
        line_number: 1-based physical line where the parser gave up.
    """

    def __init__(
        self,
        message: str,
        source_path: str | None = None,
        line_number: int | None = None,
    ) -> None:
        super().__init__(message)
        self.source_path = source_path
        self.line_number = line_number

    def __str__(self) -> str:
        base = super().__str__()
        parts = []
        if self.source_path:
            parts.append(f"source={self.source_path}")
        if self.line_number is not None:
            parts.append(f"line={self.line_number}")
        if parts:
            return f"{base} | {' '.join(parts)}"
        return base


class AlignmentError(DemoError):
    """
    Raised when a record has a different number of fields than the header.

    Args:
        message: Human-readable description.
        row_number: 0-based record key where the misalignment was detected.
        expected: Number of fields expected (from header).
        got: Number of fields actually found in the record.
    """

    def __init__(
        self,
        message: str,
        row_number: int | None = None,
        expected: int | None = None,
        got: int | None = None,
    ) -> None:
        super().__init__(message)
        self.row_number = row_number
        self.expected = expected
        self.got = got

    def __str__(self) -> str:
        base = super().__str__()
        parts = []
        if self.row_number is not None:
            parts.append(f"row={self.row_number}")
        if self.expected is not None:
            parts.append(f"expected={self.expected}")
        if self.got is not None:
            parts.append(f"got={self.got}")
        if parts:
            return f"{base} | {' '.join(parts)}"
        return base
