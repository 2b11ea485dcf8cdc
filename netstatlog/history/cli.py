"""CLI entry point for showing logged samples, standalone-capable."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from loguru import logger
from tabulate import tabulate

from netstatlog.collect.sink import format_record
from netstatlog.config import DEFAULT_ENV_FILE, load_log_file
from netstatlog.exceptions import NetstatLogError
from netstatlog.history.reader import read_records
from netstatlog.models import StatRecord

OUTPUT_FORMATS = ("table", "csv", "json")


def parse_args(args: list[str] | None = None) -> argparse.Namespace:
    """Build argparse parser for the history view."""
    parser = argparse.ArgumentParser(
        description="Show byte counters recorded in the CSV log.",
    )
    parser.add_argument(
        "-l",
        "--log-file",
        help="CSV log file (default: LOG_FILE from env file/environment)",
    )
    parser.add_argument(
        "-e",
        "--env-file",
        default=DEFAULT_ENV_FILE,
        help=f"Env file with LOG_FILE (default: {DEFAULT_ENV_FILE})",
    )
    parser.add_argument(
        "-n",
        "--last",
        type=int,
        default=0,
        help="Only show the last N records (default: all)",
    )
    parser.add_argument(
        "--format",
        choices=OUTPUT_FORMATS,
        default="table",
        help="Output format (default: table)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Verbose logging",
    )
    return parser.parse_args(args)


def render(records: list[StatRecord], fmt: str = "table") -> str:
    """Render records as a table, the logged CSV lines, or JSON."""
    if fmt == "csv":
        return "".join(format_record(r) for r in records).rstrip("\n")
    if fmt == "json":
        return json.dumps([r.model_dump(mode="json") for r in records], indent=2)
    rows = [[r.date.isoformat(), r.in_bytes, r.out_bytes, r.total_bytes] for r in records]
    return tabulate(
        rows,
        headers=["date", "in bytes", "out bytes", "total bytes"],
        tablefmt="simple",
        intfmt=",",
    )


def _resolve_log_file(parsed: argparse.Namespace) -> Path:
    if parsed.log_file:
        return Path(parsed.log_file)
    return load_log_file(parsed.env_file)


def main(args: list[str] | None = None) -> None:
    """Main entry point for history CLI."""
    parsed = parse_args(args)

    logger.enable("netstatlog")
    if not parsed.verbose:
        logger.remove()
        logger.add(sys.stderr, level="INFO")

    try:
        log_file = _resolve_log_file(parsed)
    except NetstatLogError as e:
        logger.error(str(e))
        sys.exit(1)

    try:
        records = read_records(log_file)
    except OSError as e:
        logger.error(f"Unable to read log: {e}")
        sys.exit(1)

    if parsed.last > 0:
        records = records[-parsed.last :]

    print(render(records, parsed.format))
