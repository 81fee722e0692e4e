"""
Generic "for each" driver over any ``RecordCursor``.

``for_each`` is the only place the rewind / valid / current / advance
protocol is spelled out; everything else (``for key, rec in cursor``,
``records_as_dicts``) goes through it.

Usage::

    for key, record in for_each(ListCursor([["a"], ["b"]])):
        print(key, record)          # 0 ['a'] / 1 ['b']

    for row in records_as_dicts(reader):
        # row == {"name": "Tom", "age": "3", ...}
        pass
"""

from __future__ import annotations

from typing import Iterator

from src.iterator.base import Record, RecordCursor
from src.utils.validation import validate_row_alignment


def for_each(cursor: RecordCursor) -> Iterator[tuple[int, Record]]:
    """
    Drive ``cursor`` from the start to exhaustion.

    Yields:
        ``(key, record)`` pairs in order.
    """
    cursor.rewind()
    while cursor.valid():
        yield cursor.key(), cursor.current()
        cursor.advance()


def records_as_dicts(
    cursor: RecordCursor,
    strict: bool = True,
) -> Iterator[dict[str, str]]:
    """
    Treat the first record as a header and map every later record onto it.

    Args:
        cursor: Any record cursor; it is rewound first.
        strict: If True, a record whose width differs from the header raises.
                If False, short records are padded with ``""`` and extra
                fields are dropped.

    Raises:
        AlignmentError: In strict mode, on the first misaligned record.
    """
    headers: list[str] | None = None
    for key, record in for_each(cursor):
        if headers is None:
            headers = [h.strip() for h in record]
            continue
        if strict:
            validate_row_alignment(record, len(headers), key)
        padded = record + [""] * (len(headers) - len(record))
        yield dict(zip(headers, padded))
