# topmark:header:start
#
#   project      : TellConf
#   file         : dump.py
#   file_relpath : src/tellconf/cli/commands/dump.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TellConf ``dump`` command.

Parses a configuration file and prints the resulting document as normalized
configuration text, JSON, or TOML.
"""

from __future__ import annotations

import click

from tellconf.cli.cmd_common import build_config, get_console, parse_input, read_input
from tellconf.cli.options import CONTEXT_SETTINGS, EnumChoiceParam
from tellconf.formats import OutputFormat, render_as


@click.command(
    name="dump",
    help="Print the parsed document of a configuration file.",
    context_settings=CONTEXT_SETTINGS,
    epilog="""\
Examples:

  # Show the normalized configuration
  tellconf dump tellstick.conf

  # Show the parsed document as JSON
  tellconf dump --format json tellstick.conf
""",
)
@click.argument("path", type=str)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=OutputFormat.CONF.value,
    show_default=True,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
)
@click.pass_context
def dump_command(ctx: click.Context, path: str, output_format: OutputFormat) -> None:
    """Print the parsed document of a configuration file.

    Args:
        ctx (click.Context): Current Click context.
        path (str): File to read (``-`` for STDIN).
        output_format (OutputFormat): Rendering of the parsed document.
    """
    console = get_console(ctx)
    config = build_config(ctx)
    document = parse_input(read_input(path, encoding=config.encoding), path=path)
    text: str = render_as(document, output_format, indent=config.indent)
    console.print(text, nl=not text.endswith("\n"))
