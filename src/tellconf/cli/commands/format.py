# topmark:header:start
#
#   project      : TellConf
#   file         : format.py
#   file_relpath : src/tellconf/cli/commands/format.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TellConf ``format`` command.

Rewrites configuration files in normalized form (``render(parse(text))``).
Performs a dry run by default and writes files only with ``--apply``.
Normalizing drops comments; a warning is shown for files that have any.

Input modes:
  • **Paths mode (default)**: one or more PATHS.
  • **Content on STDIN**: a single ``-`` as PATH; the formatted text is
    written to STDOUT.

Examples:
  Preview which files would change:

    $ tellconf format --diff tellstick.conf

  Apply changes in place:

    $ tellconf format --apply tellstick.conf
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
from tellconf.cli.errors import TellconfError, TellconfIOError, TellconfUsageError
from tellconf.cli.exit_codes import ExitCode
from tellconf.cli.options import CONTEXT_SETTINGS
from tellconf.config.logging import get_logger
from tellconf.constants import COMMENT_PREFIX, STDIN_PATH
from tellconf.core.render import render
from tellconf.files import write_conf_text
from tellconf.utils.diff import render_patch, unified_diff

logger = get_logger(__name__)


def _count_comment_lines(text: str) -> int:
    return sum(1 for line in text.splitlines() if line.strip().startswith(COMMENT_PREFIX))


@click.command(
    name="format",
    help="Normalize the layout of configuration files.",
    context_settings=CONTEXT_SETTINGS,
)
@click.argument("paths", nargs=-1, required=True, type=str)
@click.option(
    "--apply", "apply_changes", is_flag=True, help="Write changes to files (off by default)."
)
@click.option("--diff", "show_diff", is_flag=True, help="Show unified diffs.")
@click.pass_context
def format_command(
    ctx: click.Context,
    paths: tuple[str, ...],
    apply_changes: bool,
    show_diff: bool,
) -> None:
    """Normalize the layout of configuration files.

    Args:
        ctx (click.Context): Current Click context.
        paths (tuple[str, ...]): Files to format (``-`` for STDIN).
        apply_changes (bool): Write the normalized content back.
        show_diff (bool): Print a unified diff for files that change.
    """
    console = get_console(ctx)
    config = build_config(ctx)
    vlevel: int = get_effective_verbosity(ctx)

    if STDIN_PATH in paths and len(paths) > 1:
        raise TellconfUsageError("'-' (STDIN) must be the only PATH.")

    exit_code: ExitCode = ExitCode.SUCCESS
    would_change: int = 0

    for path in paths:
        name: str = display_name(path)
        try:
            original: str = read_input(path, encoding=config.encoding)
            formatted: str = render(parse_input(original, path=path), indent=config.indent)
        except TellconfError as exc:
            console.error(exc.format_message())
            if exit_code == ExitCode.SUCCESS:
                exit_code = ExitCode(exc.exit_code)
            continue

        if config.final_newline and formatted:
            formatted += "\n"

        if path == STDIN_PATH:
            console.print(formatted, nl=False)
            continue

        if formatted == original:
            if vlevel <= logging.INFO:
                console.print(f"{name}: unchanged")
            continue

        would_change += 1
        n_comments: int = _count_comment_lines(original)
        if n_comments and vlevel <= logging.WARNING:
            console.warn(f"{name}: {n_comments} comment line(s) will be dropped")
        if show_diff:
            patch: list[str] = unified_diff(original, formatted, path=name)
            color: bool = bool(ctx.obj.get("color_enabled", False))
            console.print(render_patch(patch, color=color), nl=False)

        if apply_changes:
            try:
                write_conf_text(
                    path, formatted, encoding=config.encoding, final_newline=config.final_newline
                )
            except (OSError, UnicodeError) as exc:
                err = TellconfIOError(f"{name}: cannot write file: {exc}")
                console.error(err.format_message())
                if exit_code == ExitCode.SUCCESS:
                    exit_code = ExitCode(err.exit_code)
                continue
            logger.info("Formatted %s", path)
            if vlevel <= logging.WARNING:
                console.print(f"{name}: {console.styled('formatted', fg='green')}")
        elif vlevel <= logging.WARNING:
            console.print(f"{name}: {console.styled('would reformat', fg='yellow')}")

    if exit_code == ExitCode.SUCCESS and would_change and not apply_changes:
        exit_code = ExitCode.WOULD_CHANGE
    ctx.exit(int(exit_code))
