#!/usr/bin/env python3
"""PktProbe command line entry point"""

import os

import typer

from pktprobe.cli.commands import lookup_command, selftest_command, show_command
from pktprobe.common.enums import LogLevel
from pktprobe.infrastructure.logging import get_logger, set_log_level

app = typer.Typer(
    help="PktProbe - UDP probe payload templates",
    add_completion=False,
    no_args_is_help=True,
)

logger = get_logger("cli")

# PKTPROBE_LOG_LEVEL overrides the configured console level, e.g.
# PKTPROBE_LOG_LEVEL=DEBUG pktprobe show -t nmap-payloads
env_log_level = os.environ.get("PKTPROBE_LOG_LEVEL", "").upper()
if env_log_level in LogLevel.__members__:
    set_log_level(LogLevel[env_log_level])
    logger.debug(f"Log level set to {env_log_level} via PKTPROBE_LOG_LEVEL environment variable")

app.command("show", help="Load payloads and print the merged registry")(show_command)
app.command("lookup", help="Print the payload used for one destination port")(lookup_command)
app.command("selftest", help="Run the template decoder self-test")(selftest_command)

if __name__ == "__main__":
    app()
