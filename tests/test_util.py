"""Tests for netstatlog/_util.py"""

from pathlib import Path

from netstatlog._util import _resolve_path, _validate_interface_name


class TestValidateInterfaceName:
    """Tests for _validate_interface_name function."""

    def test_valid_interface_names(self):
        """Test valid interface names."""
        assert _validate_interface_name("eth0") is True
        assert _validate_interface_name("em0") is True
        assert _validate_interface_name("lo0") is True
        assert _validate_interface_name("vlan.10") is True
        assert _validate_interface_name("wg-home_1") is True

    def test_invalid_interface_names(self):
        """Test invalid interface names."""
        assert _validate_interface_name("; rm -rf /") is False
        assert _validate_interface_name("../etc") is False
        assert _validate_interface_name("") is False
        assert _validate_interface_name("eth 0") is False
        assert _validate_interface_name("em0|cat") is False


class TestResolvePath:
    """Tests for _resolve_path function."""

    def test_absolute_path_unchanged(self):
        """Test absolute paths are returned as-is."""
        assert _resolve_path("/var/log/netstat.csv", Path("/etc")) == Path("/var/log/netstat.csv")

    def test_relative_path_anchored(self):
        """Test relative paths are joined to the base directory."""
        assert _resolve_path("logs/netstat.csv", Path("/opt/app")) == Path("/opt/app/logs/netstat.csv")

    def test_home_is_expanded(self, monkeypatch):
        """Test ~ is expanded before anchoring."""
        monkeypatch.setenv("HOME", "/home/alice")

        assert _resolve_path("~/netstat.csv", Path("/opt/app")) == Path("/home/alice/netstat.csv")
