# topmark:header:start
#
#   project      : TellConf
#   file         : check.py
#   file_relpath : src/tellconf/cli/commands/check.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TellConf ``check`` command.

Parses each file and reports whether it is valid. Every file is checked even
after a failure; the exit code is that of the first failure.

Examples:
  Validate a gateway configuration:

    $ tellconf check /etc/tellstick.conf

  Validate content piped on STDIN:

    $ cat tellstick.conf | tellconf check -
"""

from __future__ import annotations

import logging

import click

from tellconf.cli.cmd_common import (
    build_config,
    display_name,
    get_console,
    get_effective_verbosity,
    parse_input,
    read_input,
)
from tellconf.cli.errors import TellconfError
from tellconf.cli.exit_codes import ExitCode
from tellconf.cli.options import CONTEXT_SETTINGS
from tellconf.constants import CONTROLLER_BLOCK, DEVICES_KEY
from tellconf.core.diagnostics import DiagnosticLog


@click.command(
    name="check",
    help="Check that configuration files parse.",
    context_settings=CONTEXT_SETTINGS,
)
@click.argument("paths", nargs=-1, required=True, type=str)
@click.option(
    "--encoding",
    default=None,
    help="Text encoding of the input files (default: from settings, else utf-8).",
)
@click.pass_context
def check_command(ctx: click.Context, paths: tuple[str, ...], encoding: str | None) -> None:
    """Check that configuration files parse.

    Args:
        ctx (click.Context): Current Click context.
        paths (tuple[str, ...]): Files to check (``-`` for STDIN).
        encoding (str | None): Text encoding override.
    """
    console = get_console(ctx)
    encoding = encoding or build_config(ctx).encoding
    vlevel: int = get_effective_verbosity(ctx)
    exit_code: ExitCode = ExitCode.SUCCESS

    for path in paths:
        name: str = display_name(path)
        diagnostics = DiagnosticLog()
        try:
            document = parse_input(
                read_input(path, encoding=encoding), path=path, diagnostics=diagnostics
            )
        except TellconfError as exc:
            console.error(exc.format_message())
            if exit_code == ExitCode.SUCCESS:
                exit_code = ExitCode(exc.exit_code)
            continue

        if vlevel <= logging.WARNING:
            for diag in diagnostics:
                console.warn(f"{name}: [{diag.level.value}] {diag}")
            summary = "ok"
            if vlevel <= logging.INFO:
                summary += (
                    f" ({len(document[DEVICES_KEY])} device(s), "
                    f"controller: {'yes' if CONTROLLER_BLOCK in document else 'no'})"
                )
            console.print(f"{name}: {console.styled(summary, fg='green')}")

    ctx.exit(int(exit_code))
