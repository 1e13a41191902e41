# topmark:header:start
#
#   project      : TellConf
#   file         : version.py
#   file_relpath : src/tellconf/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TellConf ``version`` command.

Prints the TellConf version as installed in the active Python environment.
"""

from __future__ import annotations

import logging

import click

from tellconf.cli.cmd_common import get_console, get_effective_verbosity
from tellconf.constants import TELLCONF_VERSION


@click.command(
    name="version",
    help="Show the current version of TellConf.",
)
@click.pass_context
def version_command(ctx: click.Context) -> None:
    """Show the current version of TellConf."""
    console = get_console(ctx)
    if get_effective_verbosity(ctx) <= logging.INFO:
        console.print(f"TellConf version: {console.styled(TELLCONF_VERSION, bold=True)}")
    else:
        console.print(TELLCONF_VERSION)
