"""Read-back of the persisted byte-counter log."""

from netstatlog.history.reader import parse_log_line, read_records

__all__ = [
    "parse_log_line",
    "read_records",
]
