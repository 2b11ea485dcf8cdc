"""Record sink: CSV rendering and append-only persistence."""

from __future__ import annotations

from pathlib import Path

from loguru import logger

from netstatlog.exceptions import RecordSinkError
from netstatlog.models import StatRecord


def format_record(record: StatRecord) -> str:
    """Render ``date,in_bytes,out_bytes,total_bytes`` plus newline (no header, no quoting)."""
    return f"{record.date.isoformat()},{record.in_bytes},{record.out_bytes},{record.total_bytes}\n"


def append_record(record: StatRecord, log_file: str | Path) -> None:
    """Append one formatted record to ``log_file``, creating the file if needed."""
    line = format_record(record)
    try:
        with open(log_file, "a", encoding="utf-8") as f:
            f.write(line)
    except OSError as e:
        raise RecordSinkError(f"Unable to write log: {e}") from e
    logger.info(f"Appended {line.rstrip()} to {log_file}")
