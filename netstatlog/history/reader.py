"""Read back the CSV log written by :func:`netstatlog.collect.sink.append_record`."""

from __future__ import annotations

import datetime
import re
from pathlib import Path

from loguru import logger

from netstatlog.exceptions import LogFormatError
from netstatlog.models import StatRecord

# Exactly what format_record writes: no signs, spaces, underscores or non-ASCII digits.
_DATE_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
_COUNTER_RE = re.compile(r"[0-9]+")


def parse_log_line(line: str, line_number: int | None = None) -> StatRecord:
    """Parse one ``date,in,out,total`` line, checking the stored total."""
    fields = line.rstrip("\n").split(",")
    if len(fields) != 4:
        raise LogFormatError(f"Expected 4 fields, got {len(fields)}: {line.rstrip()!r}", line_number)

    date_s, in_s, out_s, total_s = fields
    if not _DATE_RE.fullmatch(date_s) or not all(_COUNTER_RE.fullmatch(s) for s in (in_s, out_s, total_s)):
        raise LogFormatError(f"Malformed field in {line.rstrip()!r}", line_number)
    try:
        date = datetime.date.fromisoformat(date_s)
    except ValueError as e:
        raise LogFormatError(f"Malformed field in {line.rstrip()!r}: {e}", line_number) from e
    in_bytes, out_bytes, total_bytes = int(in_s), int(out_s), int(total_s)

    if total_bytes != in_bytes + out_bytes:
        raise LogFormatError(
            f"Total {total_bytes} does not equal {in_bytes} + {out_bytes}",
            line_number,
        )

    return StatRecord(date=date, in_bytes=in_bytes, out_bytes=out_bytes)


def read_records(log_file: str | Path) -> list[StatRecord]:
    """Return every valid record in ``log_file``; malformed lines are skipped with a warning."""
    records: list[StatRecord] = []
    with open(log_file, encoding="utf-8") as f:
        for idx, line in enumerate(f, start=1):
            if not line.strip():
                continue
            try:
                records.append(parse_log_line(line, line_number=idx))
            except LogFormatError as e:
                logger.warning(f"{log_file}:{idx}: skipping line ({e})")
    logger.debug(f"Read {len(records)} records from {log_file}")
    return records
