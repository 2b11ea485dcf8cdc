"""Statistics source: run ``netstat -I <iface> -b | grep <iface>``."""

from __future__ import annotations

import subprocess
import time

from loguru import logger

from netstatlog._util import _validate_interface_name
from netstatlog.exceptions import StatSourceError

DEFAULT_TIMEOUT = 30


def build_netstat_cmd(interface: str) -> list[str]:
    """netstat for a single interface (-I), counters in bytes (-b)."""
    return ["netstat", "-I", interface, "-b"]


def build_filter_cmd(interface: str) -> list[str]:
    """grep drops the header row, keeping the interface's own lines."""
    return ["grep", interface]


def _kill(proc: subprocess.Popen) -> None:  # type: ignore[type-arg]
    proc.kill()
    proc.wait()


def get_stat(interface: str, timeout: int = DEFAULT_TIMEOUT) -> str:
    """Run the netstat pipeline for ``interface`` and return its complete output.

    netstat's stdout is connected directly to grep's stdin; the filtered
    output is only returned once both processes have terminated. An empty
    string means grep found no matching line. Bytes that are not valid UTF-8
    are replaced rather than failing the sample.
    """
    if not _validate_interface_name(interface):
        raise StatSourceError(f"Invalid interface name: {interface!r}")

    netstat_cmd = build_netstat_cmd(interface)
    filter_cmd = build_filter_cmd(interface)
    logger.debug(f"Running {' '.join(netstat_cmd)} | {' '.join(filter_cmd)} (timeout={timeout}s)")

    deadline = time.monotonic() + timeout
    try:
        netstat_proc = subprocess.Popen(netstat_cmd, stdout=subprocess.PIPE, stderr=subprocess.DEVNULL)
    except FileNotFoundError as e:
        raise StatSourceError(f"{netstat_cmd[0]} not found in PATH") from e
    except OSError as e:
        raise StatSourceError(f"Unable to run {netstat_cmd[0]}: {e}") from e

    try:
        filter_proc = subprocess.Popen(
            filter_cmd,
            stdin=netstat_proc.stdout,
            stdout=subprocess.PIPE,
            encoding="utf-8",
            errors="replace",
        )
    except FileNotFoundError as e:
        _kill(netstat_proc)
        raise StatSourceError(f"{filter_cmd[0]} not found in PATH") from e
    except OSError as e:
        _kill(netstat_proc)
        raise StatSourceError(f"Unable to run {filter_cmd[0]}: {e}") from e

    # netstat gets SIGPIPE if grep exits first
    netstat_proc.stdout.close()  # type: ignore[union-attr]

    # one deadline covers the whole pipeline
    try:
        output, _ = filter_proc.communicate(timeout=max(deadline - time.monotonic(), 0))
        netstat_proc.wait(timeout=max(deadline - time.monotonic(), 0))
    except subprocess.TimeoutExpired as e:
        _kill(filter_proc)
        _kill(netstat_proc)
        raise StatSourceError(f"netstat pipeline timed out after {timeout}s") from e

    if filter_proc.returncode < 0:
        raise StatSourceError(f"{filter_cmd[0]} killed with signal {-filter_proc.returncode}.")
    if filter_proc.returncode > 1:
        raise StatSourceError(f"{filter_cmd[0]} failed with exit status {filter_proc.returncode}.")
    if netstat_proc.returncode != 0:
        logger.warning(f"{netstat_cmd[0]} exited with status {netstat_proc.returncode}")

    logger.debug(f"Collected {len(output)} characters of netstat output")
    return output
