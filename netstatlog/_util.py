"""Shared helper functions."""

from __future__ import annotations

import re
from pathlib import Path


def _validate_interface_name(name: str) -> bool:
    """Validate interface name to prevent injection."""
    return bool(re.match(r"^[a-zA-Z0-9._-]+$", name))


def _resolve_path(value: str | Path, base_dir: Path) -> Path:
    """Return ``value`` as an absolute path, anchoring relative ones at ``base_dir``."""
    path = Path(value).expanduser()
    if path.is_absolute():
        return path
    return base_dir / path
