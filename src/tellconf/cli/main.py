# topmark:header:start
#
#   project      : TellConf
#   file         : main.py
#   file_relpath : src/tellconf/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TellConf command line interface.

Group-level options are initialized once and placed into ``ctx.obj``;
subcommands read the console, verbosity and config options from there.
"""

from __future__ import annotations

import click

from tellconf.cli.commands.check import check_command
from tellconf.cli.commands.dump import dump_command
from tellconf.cli.commands.format import format_command
from tellconf.cli.commands.version import version_command
from tellconf.cli.console import ClickConsole
from tellconf.cli.options import (
    ColorMode,
    common_color_options,
    common_config_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from tellconf.config.logging import get_logger, resolve_env_log_level, setup_logging

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
    config_paths: tuple[str, ...],
    no_config: bool,
) -> None:
    """Initialize shared state (verbosity, color, config sources) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
        config_paths (tuple[str, ...]): Extra settings files from ``--config``.
        no_config (bool): Whether to skip settings discovery in the working directory.
    """
    ctx.ensure_object(dict)

    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    # Internal logging is configured via the environment only
    level_env = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    effective_color_mode = ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    enable_color = resolve_color_mode(cli_mode=effective_color_mode)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)
    ctx.obj["config_paths"] = config_paths
    ctx.obj["no_config"] = no_config

    logger.debug(
        "CLI state: verbosity=%s, color=%s, config_paths=%s, no_config=%s",
        ctx.obj["verbosity_level"],
        enable_color,
        config_paths,
        no_config,
    )


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="TellConf: read, check and normalize device/controller configuration files.",
)
@common_verbose_options
@common_color_options
@common_config_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
    config_paths: tuple[str, ...],
    no_config: bool,
) -> None:
    """Entry point for the TellConf CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
        config_paths=config_paths,
        no_config=no_config,
    )

    if ctx.invoked_subcommand is None:
        console = ctx.obj["console"]
        console.print("Hint: use 'tellconf check PATH' to validate a configuration file.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(check_command)

cli.add_command(dump_command)

cli.add_command(format_command)

if __name__ == "__main__":
    cli()
