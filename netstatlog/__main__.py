"""Orchestrator CLI: dispatches to sub-CLIs.

Sub-commands:
  sample   Sample interface byte counters once and append them to the CSV log
  history  Show records from the CSV log

Examples:
  netstatlog sample -i em0 -l /var/log/netstat.csv

  netstatlog sample -e /etc/netstatlog/.env --error-log /var/log/netstat-error.log

  netstatlog history -l /var/log/netstat.csv -n 30
"""

from __future__ import annotations

import os
import sys

from tabulate import tabulate

from netstatlog import __version__, configure_logging
from netstatlog import glogger

COMMANDS = {
    # name: (module, description, show startup banner)
    "sample": ("netstatlog.collect.cli", "Sample interface byte counters once", False),
    "history": ("netstatlog.history.cli", "Show logged byte counters", True),
}


def _print_usage() -> None:
    print("usage: netstatlog <command> [options]\n")
    print("Available commands:")
    for cmd, (_, desc, _) in COMMANDS.items():
        print(f"  {cmd:10s}  {desc}")
    print("\nRun 'netstatlog <command> --help' for command-specific options.")


def _print_startup_banner(command: str) -> None:
    rows = [
        ["netstatlog", __version__],
        ["command", command],
        ["python", sys.version.split()[0]],
    ]
    rows.extend([var, os.environ[var]] for var in ("INTERFACE", "LOG_FILE") if os.environ.get(var))

    table = tabulate(rows, tablefmt="rounded_outline")
    glogger.opt(raw=True).info("\n{}\n", table)


def main() -> None:
    """Main entry point: dispatch to sub-CLI."""
    configure_logging()

    if len(sys.argv) < 2 or sys.argv[1] in ("-h", "--help"):
        _print_usage()
        sys.exit(0 if len(sys.argv) >= 2 else 1)

    command = sys.argv[1]
    if command not in COMMANDS:
        print(f"netstatlog: unknown command '{command}'\n", file=sys.stderr)
        _print_usage()
        sys.exit(1)

    module_path, _, show_banner = COMMANDS[command]
    # sample runs from cron, which mails any stderr output
    if show_banner:
        _print_startup_banner(command)

    # Import and call the sub-CLI's main(), passing remaining args
    from importlib import import_module

    module = import_module(module_path)
    module.main(sys.argv[2:])


if __name__ == "__main__":
    main()
