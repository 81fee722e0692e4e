"""
Demo configuration.

All tuneable defaults live here. Import from this module everywhere —
never hardcode the sample path or delimiter inline.

Usage:
    from src.configs.config import DemoConfig
    cfg = DemoConfig()                      # defaults / environment
    cfg = DemoConfig(delimiter=";")

Environment overrides can be loaded via .env / os.environ before
constructing the config object; this module does not load .env itself
(``demos.py`` does).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path


DEFAULT_DELIMITER: str = ","
"""Field delimiter used when neither the CLI nor the environment sets one."""

DEFAULT_SOURCE: Path = Path(__file__).resolve().parents[2] / "data" / "cats.csv"
"""Sample data source shipped with the repository."""


@dataclass(slots=True)
class DemoConfig:
    """
    Runtime configuration for the demos.

    Attributes:
        source: CSV file read by the iterator demo.
        delimiter: Single-character field delimiter for ``source``.
        encoding: Text encoding of ``source``. ``utf-8-sig`` drops a BOM.
        decode_errors: Codec error policy for ``source``; ``surrogateescape``
            keeps undecodable bytes, ``strict`` rejects them.
        log_level: Root log level name used when ``--verbose`` is not given.
    """

    source: Path = field(
        default_factory=lambda: Path(os.environ.get("DEMO_SOURCE", str(DEFAULT_SOURCE)))
    )
    delimiter: str = field(
        default_factory=lambda: os.environ.get("DEMO_DELIMITER", DEFAULT_DELIMITER)
    )
    encoding: str = field(
        default_factory=lambda: os.environ.get("DEMO_ENCODING", "utf-8-sig")
    )
    decode_errors: str = field(
        default_factory=lambda: os.environ.get("DEMO_DECODE_ERRORS", "surrogateescape")
    )
    log_level: str = field(
        default_factory=lambda: os.environ.get("LOG_LEVEL", "INFO").upper()
    )
