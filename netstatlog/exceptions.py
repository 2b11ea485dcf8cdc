"""Exception hierarchy for netstatlog."""


class NetstatLogError(Exception):
    """Base exception for all netstatlog errors."""


class ConfigError(NetstatLogError):
    """Configuration is missing or invalid."""


class StatSourceError(NetstatLogError):
    """The statistics pipeline could not produce output."""


class StatParseError(NetstatLogError):
    """Raw statistics text could not be turned into a record."""


class NoStatisticsAvailable(StatParseError):
    """Raw statistics text contained no usable line."""


class UnexpectedFormat(StatParseError):
    """First line did not end with the in/out byte counter pair."""


class RecordSinkError(NetstatLogError):
    """Appending a record to the log file failed."""


class LogFormatError(NetstatLogError):
    """A persisted log line is not a valid record."""

    def __init__(self, message: str, line_number: int | None = None):
        self.line_number = line_number
        super().__init__(message)
