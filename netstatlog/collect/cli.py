"""CLI entry point for taking one sample, standalone-capable.

Intended to be run from cron, e.g.:

  */5 * * * *  netstatlog sample -e /etc/netstatlog/.env
"""

from __future__ import annotations

import argparse
import sys

from loguru import logger

from netstatlog.collect.parser import parse_stat
from netstatlog.collect.sink import append_record
from netstatlog.collect.source import get_stat
from netstatlog.config import DEFAULT_ENV_FILE, NetstatLogConfig, load_config
from netstatlog.exceptions import NetstatLogError
from netstatlog.models import StatRecord


def parse_args(args: list[str] | None = None) -> argparse.Namespace:
    """Build argparse parser for sampling."""
    parser = argparse.ArgumentParser(
        description="Sample interface byte counters via netstat and append them to a CSV log.",
    )
    parser.add_argument(
        "-i",
        "--interface",
        help="Network interface (default: INTERFACE from env file/environment)",
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
        help=f"Env file with INTERFACE/LOG_FILE (default: {DEFAULT_ENV_FILE})",
    )
    parser.add_argument(
        "--error-log",
        help="Also append error messages to this file (default: ERROR_LOG_FILE)",
    )
    parser.add_argument(
        "--timeout",
        type=int,
        help="netstat pipeline timeout in seconds (default: 30)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Verbose logging",
    )
    return parser.parse_args(args)


def run_sample(config: NetstatLogConfig) -> StatRecord | None:
    """Take one sample: netstat -> parse -> append.

    Returns the written record, or ``None`` after logging exactly one error
    message when any stage fails. Nothing is appended for a failed sample.
    """
    try:
        raw = get_stat(config.interface, timeout=config.timeout)
        record = parse_stat(raw)
        append_record(record, config.log_file)
    except NetstatLogError as e:
        logger.error(str(e))
        return None
    return record


def main(args: list[str] | None = None) -> None:
    """Main entry point for sample CLI."""
    parsed = parse_args(args)

    logger.enable("netstatlog")
    if not parsed.verbose:
        logger.remove()
        logger.add(sys.stderr, level="INFO")

    try:
        config = load_config(
            parsed.env_file,
            overrides={
                "interface": parsed.interface,
                "log_file": parsed.log_file,
                "error_log_file": parsed.error_log,
                "timeout": parsed.timeout,
            },
        )
    except NetstatLogError as e:
        logger.error(str(e))
        sys.exit(1)

    if config.error_log_file is not None:
        logger.add(config.error_log_file, level="ERROR", encoding="utf-8")

    record = run_sample(config)
    if record is None:
        sys.exit(1)
