"""Tests for netstatlog exception hierarchy."""

import pytest

from netstatlog.exceptions import (
    ConfigError,
    LogFormatError,
    NetstatLogError,
    NoStatisticsAvailable,
    RecordSinkError,
    StatParseError,
    StatSourceError,
    UnexpectedFormat,
)


class TestExceptionHierarchy:
    """Test exception inheritance and structure."""

    def test_base_inherits_from_exception(self):
        """NetstatLogError should inherit from Exception."""
        assert issubclass(NetstatLogError, Exception)
        assert str(NetstatLogError("test")) == "test"

    @pytest.mark.parametrize(
        "exc_type",
        [ConfigError, StatSourceError, StatParseError, RecordSinkError, LogFormatError],
    )
    def test_direct_subclasses(self, exc_type):
        """Every error type should be a NetstatLogError."""
        assert issubclass(exc_type, NetstatLogError)
        exc = exc_type("failed")
        assert str(exc) == "failed"

    def test_parse_failures_are_stat_parse_errors(self):
        """Both parse failures share StatParseError."""
        assert issubclass(NoStatisticsAvailable, StatParseError)
        assert issubclass(UnexpectedFormat, StatParseError)
        assert not issubclass(NoStatisticsAvailable, UnexpectedFormat)


class TestLogFormatError:
    """Test LogFormatError specific functionality."""

    def test_with_line_number(self):
        """LogFormatError should store line_number."""
        exc = LogFormatError("bad line", line_number=12)
        assert exc.line_number == 12
        assert str(exc) == "bad line"

    def test_without_line_number(self):
        """LogFormatError should allow line_number=None."""
        exc = LogFormatError("bad line")
        assert exc.line_number is None
