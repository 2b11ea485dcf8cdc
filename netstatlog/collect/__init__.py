"""One sample of an interface's byte counters: source, parser and sink."""

from netstatlog.collect.parser import parse_stat
from netstatlog.collect.sink import append_record, format_record
from netstatlog.collect.source import get_stat

__all__ = [
    "get_stat",
    "parse_stat",
    "format_record",
    "append_record",
]
