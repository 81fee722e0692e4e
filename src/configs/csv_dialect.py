"""
CSV dialect configuration for the record iterator.

Registers a strict dialect (``demo_strict``) that:
- Raises on malformed quoting rather than guessing where a field ends.
- Uses double-quote quoting, escaped by doubling (``""``).
- Keeps leading whitespace in fields exactly as written.

The delimiter is not fixed by the dialect; readers pass it as a format
parameter so one registered dialect serves every delimiter:

    import csv
    from src.configs.csv_dialect import register_dialect, DIALECT_NAME

    register_dialect()
    reader = csv.reader(f, dialect=DIALECT_NAME, delimiter=";")

Open files with ``encoding='utf-8-sig'`` and ``newline=''`` so a BOM is
dropped and line breaks inside quoted fields reach the parser intact.
"""

from __future__ import annotations

import csv

DIALECT_NAME: str = "demo_strict"
QUOTE_CHAR: str = '"'


class DemoStrictDialect(csv.excel):
    """
    Strict CSV dialect for the record iterator.

    Inherits from ``csv.excel`` (comma-delimited, double-quote) and
    enables strict mode so malformed records raise ``csv.Error``.
    """

    strict: bool = True
    skipinitialspace: bool = False


def register_dialect() -> None:
    """
    Register the ``demo_strict`` dialect with the ``csv`` module.

    Safe to call multiple times.
    """
    if DIALECT_NAME not in csv.list_dialects():
        csv.register_dialect(DIALECT_NAME, DemoStrictDialect)

