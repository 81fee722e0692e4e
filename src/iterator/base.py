"""
Abstract base class for all record cursors.

A cursor is the explicit form of the "iterate over me" contract: the
driver in ``src.iterator.driver`` consumes nothing but these operations,
so it works the same for a CSV file, an in-memory list, or any future
ordered source.

Protocol (what ``for_each`` does):
    cursor.rewind()
    while cursor.valid():
        use(cursor.key(), cursor.current())
        cursor.advance()

Usage:
    with SequentialRecordReader(path) as reader:
        for key, record in reader:
            process(key, record)
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterator

Record = list[str]


class RecordCursor(ABC):
    """
    Interface for forward-only record cursors.

    Subclasses must implement ``rewind``, ``current``, ``key``, ``advance``,
    ``valid`` and ``close``. Python iteration and context manager support
    are provided by this base class.
    """

    @abstractmethod
    def rewind(self) -> None:
        """Reset to the first record and load it."""

    @abstractmethod
    def current(self) -> Record:
        """Return the loaded record, or an empty record if there is none."""

    @abstractmethod
    def key(self) -> int:
        """Return the 0-based index of the current record since the last rewind."""

    @abstractmethod
    def advance(self) -> None:
        """Load the next record and bump the index."""

    @abstractmethod
    def valid(self) -> bool:
        """Return True while the current position holds a record."""

    @abstractmethod
    def close(self) -> None:
        """Release any open resources. Safe to call more than once."""

    # ── iteration ────────────────────────────────────────────────────────

    def __iter__(self) -> Iterator[tuple[int, Record]]:
        from src.iterator.driver import for_each

        return for_each(self)

    # ── context manager ──────────────────────────────────────────────────

    def __enter__(self) -> "RecordCursor":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
        return None


class ListCursor(RecordCursor):
    """
    In-memory cursor over a list of records.

    Args:
        records: Records to walk, in order. The list is copied.
    """

    def __init__(self, records: list[Record]) -> None:
        self._records = [list(r) for r in records]
        self._position = 0
        self._closed = False

    def rewind(self) -> None:
        self._position = 0

    def current(self) -> Record:
        if self._position < len(self._records):
            return list(self._records[self._position])
        return []

    def key(self) -> int:
        return self._position

    def advance(self) -> None:
        if not self._closed:
            self._position += 1

    def valid(self) -> bool:
        return not self._closed and self._position < len(self._records)

    def close(self) -> None:
        self._closed = True
