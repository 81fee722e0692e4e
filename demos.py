"""
Design-pattern demos CLI.

Runs one of the four pattern demonstrations and prints its output.

Environment variables read (a ``.env`` file in the working directory is
loaded first, if present):
    DEMO_SOURCE     Optional: CSV file for the iterator demo
    DEMO_DELIMITER  Optional: field delimiter for DEMO_SOURCE (``\\t`` for tab)
    DEMO_ENCODING   Optional: text encoding for DEMO_SOURCE
    DEMO_DECODE_ERRORS  Optional: ``surrogateescape`` (default) or ``strict``
    LOG_LEVEL       Optional: log level when --verbose is not given

Commands:
    iterator          Walk a CSV file record by record.
    abstract-factory  Build matching Windows / Mac widget families.
    builder           Assemble pizzas step by step.
    factory-method    Let logistics subclasses pick their transport.
    all               Run every demo in turn.

Usage examples:
    python demos.py iterator --source data/cats.csv
    python demos.py iterator --source data/cats.tsv --delimiter '\\t' --headers
    python demos.py -v all

Exit codes:
    0  Success
    1  Data source could not be opened or parsed
    2  Configuration / argument error
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from src.configs.config import DemoConfig
from src.configs.exceptions import DemoError
from src.creational import abstract_factory, builder, factory_method
from src.iterator.csv_iterator import SequentialRecordReader
from src.iterator.driver import records_as_dicts

logger = logging.getLogger("demos")


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

def _setup_logging(verbose: bool, config: DemoConfig) -> None:
    level = logging.DEBUG if verbose else getattr(logging, config.log_level, logging.INFO)
    logging.basicConfig(
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        level=level,
        stream=sys.stderr,
    )


# ---------------------------------------------------------------------------
# Config — CLI flag > environment > DemoConfig default
# ---------------------------------------------------------------------------

def _unescape_delimiter(raw: str) -> str:
    """Accept ``\\t`` / ``tab`` as spellings of the tab character."""
    if raw in ("\\t", "tab", "TAB"):
        return "\t"
    return raw


def _build_config(args: argparse.Namespace) -> DemoConfig:
    config = DemoConfig()
    source = getattr(args, "source", None)
    delimiter = getattr(args, "delimiter", None)
    if source:
        config.source = Path(source)
    if delimiter is not None:
        config.delimiter = delimiter
    config.delimiter = _unescape_delimiter(config.delimiter)
    return config


# ---------------------------------------------------------------------------
# Subcommand handlers
# ---------------------------------------------------------------------------

def _print_lines(lines: list[str]) -> None:
    for line in lines:
        print(line)


def _cmd_iterator(args: argparse.Namespace, config: DemoConfig) -> int:
    try:
        reader = SequentialRecordReader(
            config.source, delimiter=config.delimiter, encoding=config.encoding,
            errors=config.decode_errors,
        )
    except ValueError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2
    except DemoError as e:
        print(f"✗ {e}", file=sys.stderr)
        return 1

    count = 0
    try:
        with reader:
            if getattr(args, "headers", False):
                for count, row in enumerate(records_as_dicts(reader), start=1):
                    print(row)
            else:
                for key, record in reader:
                    print(f"{key}: {record}")
                    count = key + 1
    except DemoError as e:
        print(f"✗ {e}", file=sys.stderr)
        return 1

    logger.info("Read %d record(s) from %s", count, config.source)
    return 0


def _cmd_abstract_factory(args: argparse.Namespace, config: DemoConfig) -> int:
    _print_lines(abstract_factory.run_demo())
    return 0


def _cmd_builder(args: argparse.Namespace, config: DemoConfig) -> int:
    _print_lines(builder.run_demo())
    return 0


def _cmd_factory_method(args: argparse.Namespace, config: DemoConfig) -> int:
    _print_lines(factory_method.run_demo())
    return 0


def _cmd_all(args: argparse.Namespace, config: DemoConfig) -> int:
    exit_code = 0
    for title, handler in [
        ("Abstract Factory", _cmd_abstract_factory),
        ("Builder", _cmd_builder),
        ("Factory Method", _cmd_factory_method),
        ("Iterator", _cmd_iterator),
    ]:
        print(f"── {title} " + "─" * (50 - len(title)))
        exit_code = max(exit_code, handler(args, config))
        print()
    return exit_code


HANDLERS = {
    "iterator": _cmd_iterator,
    "abstract-factory": _cmd_abstract_factory,
    "builder": _cmd_builder,
    "factory-method": _cmd_factory_method,
    "all": _cmd_all,
}


# ---------------------------------------------------------------------------
# Argument parser (importable for tests)
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="demos",
        description="Classic design patterns, one runnable demo each",
        epilog="DEMO_SOURCE / DEMO_DELIMITER may also be set in the environment or a .env file.",
    )
    parser.add_argument("--verbose", "-v", action="store_true")

    sub = parser.add_subparsers(dest="command", required=True)

    def _source_args(p):
        p.add_argument("--source", default=None, help="CSV file to iterate")
        p.add_argument("--delimiter", default=None, help="Single-character field delimiter")

    p_iter = sub.add_parser("iterator", help="Walk a CSV file record by record")
    _source_args(p_iter)
    p_iter.add_argument(
        "--headers", action="store_true",
        help="Treat the first record as a header and print dicts",
    )

    sub.add_parser("abstract-factory", help="Abstract Factory demo")
    sub.add_parser("builder", help="Builder demo")
    sub.add_parser("factory-method", help="Factory Method demo")

    p_all = sub.add_parser("all", help="Run every demo")
    _source_args(p_all)

    return parser


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    parser = _build_parser()
    args = parser.parse_args(argv)
    config = _build_config(args)
    _setup_logging(args.verbose, config)
    return HANDLERS[args.command](args, config)


if __name__ == "__main__":
    sys.exit(main())
