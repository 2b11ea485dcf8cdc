"""Startup configuration, read once from a ``.env`` file and the environment.

Recognised keys:

  INTERFACE        network interface to sample (e.g. ``em0``)
  LOG_FILE         CSV log receiving one line per successful sample
  ERROR_LOG_FILE   optional file that additionally receives error messages
  NETSTAT_TIMEOUT  seconds before the netstat pipeline is killed (default: 30)

Relative paths are resolved against the directory of the ``.env`` file.
Values from the process environment take precedence over the file, explicit
overrides (CLI flags) take precedence over both.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Mapping, Optional

from dotenv import dotenv_values
from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from netstatlog._util import _resolve_path, _validate_interface_name
from netstatlog.exceptions import ConfigError

DEFAULT_ENV_FILE = ".env"
DEFAULT_TIMEOUT = 30

_ENV_KEYS = {
    "INTERFACE": "interface",
    "LOG_FILE": "log_file",
    "ERROR_LOG_FILE": "error_log_file",
    "NETSTAT_TIMEOUT": "timeout",
}
_REQUIRED_FIELDS = ("interface", "log_file")
_PATH_FIELDS = ("log_file", "error_log_file")


class NetstatLogConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    interface: str
    log_file: Path
    error_log_file: Optional[Path] = None
    timeout: int = Field(default=DEFAULT_TIMEOUT, gt=0)

    @field_validator("interface")
    @classmethod
    def _check_interface(cls, value: str) -> str:
        if not _validate_interface_name(value):
            raise ValueError(f"invalid interface name: {value!r}")
        return value


def _read_env_file(env_file: Path) -> dict[str, str]:
    if not env_file.is_file():
        logger.debug(f"No env file at {env_file}, using process environment only")
        return {}
    logger.debug(f"Reading configuration from {env_file}")
    return {k: v for k, v in dotenv_values(env_file).items() if v is not None}


def _collect_fields(
    env_file: str | Path | None,
    overrides: Mapping[str, Any] | None,
    environ: Mapping[str, str] | None,
) -> dict[str, Any]:
    """Merge env file, environment and overrides into field-name keyed values."""
    environ = os.environ if environ is None else environ

    values: dict[str, str] = {}
    if env_file is not None:
        env_path = Path(env_file).expanduser().resolve()
        base_dir = env_path.parent
        values.update(_read_env_file(env_path))
    else:
        base_dir = Path.cwd()

    for key in _ENV_KEYS:
        if environ.get(key):
            values[key] = environ[key]

    fields: dict[str, Any] = {_ENV_KEYS[k]: v for k, v in values.items() if k in _ENV_KEYS and v != ""}
    for name in _PATH_FIELDS:
        if name in fields:
            fields[name] = _resolve_path(fields[name], base_dir)

    # command line paths are relative to the working directory
    for name, value in (overrides or {}).items():
        if value is None:
            continue
        fields[name] = _resolve_path(value, Path.cwd()) if name in _PATH_FIELDS else value

    return fields


def _require(fields: Mapping[str, Any], names: tuple[str, ...]) -> None:
    missing = [key for key, name in _ENV_KEYS.items() if name in names and name not in fields]
    if missing:
        raise ConfigError(f"Missing required configuration: {', '.join(missing)}")


def load_config(
    env_file: str | Path | None = DEFAULT_ENV_FILE,
    overrides: Mapping[str, Any] | None = None,
    environ: Mapping[str, str] | None = None,
) -> NetstatLogConfig:
    """Build the configuration from ``env_file``, the environment and ``overrides``.

    ``overrides`` uses field names (``interface``, ``log_file``, ...);
    ``None`` values are ignored so argparse namespaces can be passed through.
    """
    fields = _collect_fields(env_file, overrides, environ)
    _require(fields, _REQUIRED_FIELDS)

    try:
        return NetstatLogConfig(**fields)
    except ValidationError as e:
        errors = "; ".join(f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors())
        raise ConfigError(f"Invalid configuration: {errors}") from e


def load_log_file(
    env_file: str | Path | None = DEFAULT_ENV_FILE,
    environ: Mapping[str, str] | None = None,
) -> Path:
    """Resolve only ``LOG_FILE``, for readers that do not sample an interface."""
    fields = _collect_fields(env_file, None, environ)
    _require(fields, ("log_file",))
    return fields["log_file"]
