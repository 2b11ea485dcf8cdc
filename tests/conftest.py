"""Shared fixtures for the netstatlog test suite."""

from __future__ import annotations

import datetime
from unittest.mock import MagicMock

import pytest

from netstatlog.models import StatRecord

# ── collect fixtures ──────────────────────────────────────────────────


@pytest.fixture()
def sample_record():
    """Factory fixture returning a StatRecord with customizable fields."""

    def _make(**kwargs):
        defaults = {
            "date": datetime.date(2024, 1, 5),
            "in_bytes": 10,
            "out_bytes": 20,
        }
        defaults.update(kwargs)
        return StatRecord(**defaults)

    return _make


@pytest.fixture()
def mock_pipeline():
    """Factory fixture returning (netstat_proc, grep_proc) Popen mocks."""

    def _make(output: str = "", grep_rc: int = 0, netstat_rc: int = 0):
        netstat_proc = MagicMock()
        netstat_proc.returncode = netstat_rc
        netstat_proc.wait.return_value = netstat_rc
        grep_proc = MagicMock()
        grep_proc.returncode = grep_rc
        grep_proc.communicate.return_value = (output, None)
        return netstat_proc, grep_proc

    return _make


# ── config fixtures ───────────────────────────────────────────────────


@pytest.fixture()
def clean_env(monkeypatch):
    """Remove configuration variables from the process environment."""
    for key in ("INTERFACE", "LOG_FILE", "ERROR_LOG_FILE", "NETSTAT_TIMEOUT"):
        monkeypatch.delenv(key, raising=False)
    return monkeypatch
