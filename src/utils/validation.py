"""
Validation helpers for delimited-text records.

All functions raise on failure rather than returning a boolean — callers
are expected to let exceptions propagate to whoever owns the reader.
"""

from __future__ import annotations

from src.configs.csv_dialect import QUOTE_CHAR
from src.configs.exceptions import AlignmentError


def validate_delimiter(delimiter: str) -> None:
    """
    Assert that ``delimiter`` is usable as a CSV field separator.

    Raises:
        ValueError: If ``delimiter`` is not exactly one character, or is the
                    quote character or a line break.
    """
    if not isinstance(delimiter, str) or len(delimiter) != 1:
        raise ValueError(
            f"Delimiter must be a single character, got {delimiter!r}."
        )
    if delimiter == QUOTE_CHAR or delimiter in "\r\n":
        raise ValueError(f"Delimiter {delimiter!r} is reserved by the CSV format.")


def validate_row_alignment(
    row: list[str],
    expected_field_count: int,
    row_number: int,
) -> None:
    """
    Assert that a record has exactly the expected number of fields.

    Args:
        row:                  The parsed record.
        expected_field_count: Number of fields in the header record.
        row_number:           Record key for error reporting.

    Raises:
        AlignmentError: If ``len(row) != expected_field_count``.
    """
    actual = len(row)
    if actual != expected_field_count:
        raise AlignmentError(
            f"Row {row_number} has {actual} fields, expected {expected_field_count}.",
            row_number=row_number,
            expected=expected_field_count,
            got=actual,
        )
