"""
Generic driver: test_driver.py

Covers:
  - for_each runs rewind / valid / current / advance on any RecordCursor
  - for_each restarts from the beginning each time it is called
  - iter(cursor) goes through for_each
  - records_as_dicts maps records onto the header record
  - strict mode raises AlignmentError with row / expected / got
  - lenient mode pads short records and drops extra fields
  - validate_row_alignment / validate_delimiter helpers
"""

from __future__ import annotations

from pathlib import Path

import pytest

from src.configs.exceptions import AlignmentError
from src.iterator.base import ListCursor, RecordCursor
from src.iterator.csv_iterator import SequentialRecordReader
from src.iterator.driver import for_each, records_as_dicts
from src.utils.validation import validate_delimiter, validate_row_alignment


# ============================================================================
# Helpers
# ============================================================================

class RecordingCursor(ListCursor):
    """ListCursor that logs every protocol call."""

    def __init__(self, records):
        super().__init__(records)
        self.calls: list[str] = []

    def rewind(self):
        self.calls.append("rewind")
        super().rewind()

    def valid(self):
        self.calls.append("valid")
        return super().valid()

    def key(self):
        self.calls.append("key")
        return super().key()

    def current(self):
        self.calls.append("current")
        return super().current()

    def advance(self):
        self.calls.append("advance")
        super().advance()


def write_text(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8", newline="")
    return path


# ============================================================================
# for_each
# ============================================================================

class TestForEach:
    def test_list_cursor_pairs(self):
        cursor = ListCursor([["a"], ["b", "c"]])
        assert list(for_each(cursor)) == [(0, ["a"]), (1, ["b", "c"])]

    def test_protocol_order(self):
        cursor = RecordingCursor([["only"]])
        list(for_each(cursor))
        assert cursor.calls == ["rewind", "valid", "key", "current", "advance", "valid"]

    def test_empty_cursor(self):
        cursor = RecordingCursor([])
        assert list(for_each(cursor)) == []
        assert cursor.calls == ["rewind", "valid"]

    def test_restarts_each_call(self):
        cursor = ListCursor([["x"], ["y"]])
        first = list(for_each(cursor))
        second = list(for_each(cursor))
        assert first == second

    def test_iter_uses_driver(self):
        cursor = RecordingCursor([["x"]])
        assert list(cursor) == [(0, ["x"])]
        assert cursor.calls[0] == "rewind"

    def test_list_cursor_is_record_cursor(self):
        assert isinstance(ListCursor([]), RecordCursor)

    def test_list_cursor_close_stops_iteration(self):
        cursor = ListCursor([["a"], ["b"]])
        seen = []
        for key, record in cursor:
            seen.append(record)
            cursor.close()
        assert seen == [["a"]]

    def test_list_cursor_context_manager(self):
        with ListCursor([["a"]]) as cursor:
            pass
        assert cursor.valid() is False

    def test_abstract_cursor_cannot_instantiate(self):
        with pytest.raises(TypeError):
            RecordCursor()


# ============================================================================
# records_as_dicts
# ============================================================================

class TestRecordsAsDicts:
    def test_maps_onto_header(self):
        cursor = ListCursor([["name", "age"], ["Tom", "3"], ["Kit", "1"]])
        assert list(records_as_dicts(cursor)) == [
            {"name": "Tom", "age": "3"},
            {"name": "Kit", "age": "1"},
        ]

    def test_header_whitespace_stripped(self):
        cursor = ListCursor([[" name ", "age"], ["Tom", "3"]])
        assert list(records_as_dicts(cursor)) == [{"name": "Tom", "age": "3"}]

    def test_header_only(self):
        assert list(records_as_dicts(ListCursor([["a", "b"]]))) == []

    def test_empty_source(self):
        assert list(records_as_dicts(ListCursor([]))) == []

    def test_strict_misalignment_raises(self):
        cursor = ListCursor([["a", "b"], ["1", "2"], ["3"]])
        rows = records_as_dicts(cursor)
        assert next(rows) == {"a": "1", "b": "2"}
        with pytest.raises(AlignmentError) as exc_info:
            next(rows)
        e = exc_info.value
        assert e.row_number == 2
        assert e.expected == 2
        assert e.got == 1

    def test_lenient_pads_and_truncates(self):
        cursor = ListCursor([["a", "b"], ["1"], ["2", "3", "4"]])
        assert list(records_as_dicts(cursor, strict=False)) == [
            {"a": "1", "b": ""},
            {"a": "2", "b": "3"},
        ]

    def test_over_csv_reader(self, tmp_path):
        path = write_text(tmp_path / "cats.csv", "Name,Age\nSteve,3\nSiri,2\n")
        reader = SequentialRecordReader(path)
        assert list(records_as_dicts(reader)) == [
            {"Name": "Steve", "Age": "3"},
            {"Name": "Siri", "Age": "2"},
        ]
        assert reader.closed is True


# ============================================================================
# Validation helpers
# ============================================================================

class TestValidation:
    def test_row_alignment_passes(self):
        validate_row_alignment(["a", "b", "c"], expected_field_count=3, row_number=1)

    def test_row_alignment_too_many_raises(self):
        with pytest.raises(AlignmentError):
            validate_row_alignment(["a", "b", "c", "d"], expected_field_count=3, row_number=1)

    @pytest.mark.parametrize("ok", [",", ";", "\t", "|", " "])
    def test_delimiter_accepted(self, ok):
        validate_delimiter(ok)

    @pytest.mark.parametrize("bad", ["", "ab", '"', "\r", "\n", None])
    def test_delimiter_rejected(self, bad):
        with pytest.raises(ValueError):
            validate_delimiter(bad)
