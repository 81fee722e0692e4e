"""
CSV record iterator implementing ``RecordCursor``.

Handles:
- UTF-8 with or without BOM (``utf-8-sig``).
- Windows CRLF and Unix LF line endings, and line breaks inside quoted
  fields (``newline=''``).
- Any single-character delimiter; quotes escaped by doubling.
- Strict dialect — raises ``MalformedRecord`` on bad quoting.
- Arbitrary bytes: undecodable input passes through as surrogates by
  default, or raises ``MalformedRecord`` with ``errors="strict"``.

Lifecycle:
    construct (file opened) → rewind → advance ... → valid() is False
    (file closed) → done. The handle is released exactly once, either by
    the first ``valid()`` call that sees the end of data or by ``close()``.
"""

from __future__ import annotations

import csv
import logging
from pathlib import Path

from src.configs.csv_dialect import DIALECT_NAME, register_dialect
from src.configs.exceptions import MalformedRecord, ResourceUnavailable
from src.iterator.base import Record, RecordCursor
from src.utils.validation import validate_delimiter

logger = logging.getLogger(__name__)

# Marks "no more records"; never handed to callers.
_END = object()


class SequentialRecordReader(RecordCursor):
    """
    Forward-only, single-pass reader over a delimited text file.

    The file is opened on construction, but no record is loaded until
    ``rewind()`` is called.

    Args:
        path: Path to the delimited text file.
        delimiter: Single-character field separator.
        encoding: Text encoding of the file.
        errors: Decode error policy. The default ``surrogateescape`` lets any
                byte through; undecodable bytes come back as lone surrogates
                (``"caf\\udce9"``) and re-encode to the original bytes.
                With ``strict`` they raise ``MalformedRecord`` instead.

    Raises:
        ResourceUnavailable: If the file cannot be opened.
        ValueError: If ``delimiter`` is not a usable single character.
    """

    def __init__(
        self,
        path: Path | str,
        delimiter: str = ",",
        encoding: str = "utf-8-sig",
        errors: str = "surrogateescape",
    ) -> None:
        validate_delimiter(delimiter)
        self.path = Path(path)
        self.delimiter = delimiter
        self._row_counter = 0
        self._current: Record | object | None = None
        self._reader = None

        register_dialect()
        try:
            self._file = open(
                self.path, encoding=encoding, errors=errors, newline=""
            )
        except OSError as e:
            raise ResourceUnavailable(
                f"The file {self.path} cannot be read: {e}",
                source_path=str(self.path),
            ) from e
        logger.debug("Opened %s (delimiter=%r)", self.path, delimiter)

    # ── RecordCursor interface ───────────────────────────────────────────

    def rewind(self) -> None:
        """
        Seek back to the start of the file and load the first record.

        Does nothing once the file has been closed; the reader then stays
        exhausted.

        Raises:
            MalformedRecord: If the first record cannot be parsed.
        """
        if self._file is None:
            logger.debug("rewind() on closed reader for %s ignored", self.path)
            return

        self._file.seek(0)
        self._reader = csv.reader(
            self._file, dialect=DIALECT_NAME, delimiter=self.delimiter
        )
        self._row_counter = 0
        self._current = None
        self._current = self._read_record()

    def current(self) -> Record:
        """Return a copy of the current record, or ``[]`` if there is none."""
        if self._current is None or self._current is _END:
            return []
        return list(self._current)

    def key(self) -> int:
        """Return the number of advances since the last rewind."""
        return self._row_counter

    def advance(self) -> None:
        """
        Load the next record and increment the row counter.

        No-op once the file has been closed.

        Raises:
            MalformedRecord: If the next record cannot be parsed.
        """
        if self._file is None:
            return
        if self._reader is None:
            self._reader = csv.reader(
                self._file, dialect=DIALECT_NAME, delimiter=self.delimiter
            )
        self._current = self._read_record()
        self._row_counter += 1

    def valid(self) -> bool:
        """
        Report whether the current position holds a record.

        On the first call after the end of data has been reached the file
        is closed as a side effect, so a plain ``for`` loop releases it
        without an explicit ``close()``.
        """
        if self._current is _END:
            self.close()
            return False
        return self._file is not None

    def close(self) -> None:
        """Close the underlying file handle. Safe to call more than once."""
        if self._file is not None:
            self._file.close()
            self._file = None
            self._reader = None
            logger.debug("Closed %s after %d record(s)", self.path, self._row_counter)

    # ── helpers ──────────────────────────────────────────────────────────

    @property
    def closed(self) -> bool:
        """True once the file handle has been released."""
        return self._file is None

    def _read_record(self) -> Record | object:
        try:
            return next(self._reader)
        except StopIteration:
            return _END
        except csv.Error as e:
            raise MalformedRecord(
                f"Malformed record in {self.path}: {e}",
                source_path=str(self.path),
                line_number=self._reader.line_num,
            ) from e
        except UnicodeDecodeError as e:
            raise MalformedRecord(
                f"Undecodable bytes in {self.path}: {e}",
                source_path=str(self.path),
                line_number=self._reader.line_num + 1,
            ) from e

    def __repr__(self) -> str:
        state = "closed" if self.closed else "open"
        return (
            f"{type(self).__name__}({str(self.path)!r}, "
            f"delimiter={self.delimiter!r}, key={self._row_counter}, {state})"
        )
