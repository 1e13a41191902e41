# topmark:header:start
#
#   project      : TellConf
#   file         : options.py
#   file_relpath : src/tellconf/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities.

This module centralizes reusable options (verbosity, color, config files) and
their resolution logic, so commands and the group can stay thin.
"""

from __future__ import annotations

import logging
import os
import sys
from enum import Enum
from typing import Callable, ParamSpec, TypeVar, cast

import click

from tellconf.cli.errors import TellconfUsageError
from tellconf.config.logging import TRACE_LEVEL

P = ParamSpec("P")
R = TypeVar("R")
E = TypeVar("E", bound=Enum)

CONTEXT_SETTINGS = {
    "help_option_names": ["-h", "--help"],
}


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the program-output level from the ``-v``/``-q`` counts.

    Args:
        verbose_count: Number of times ``-v`` was passed.
        quiet_count: Number of times ``-q`` was passed.

    Returns:
        A logging-style level: TRACE (-vvv), DEBUG (-vv), INFO (-v),
        ERROR (-q) or WARNING (default).

    Raises:
        TellconfUsageError: If both verbose and quiet flags are used.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise TellconfUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")

    if verbose_count >= 3:
        return TRACE_LEVEL
    if verbose_count == 2:
        return logging.DEBUG
    if verbose_count == 1:
        return logging.INFO
    if quiet_count >= 1:
        return logging.ERROR
    return logging.WARNING


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add counting ``-v/--verbose`` and ``-q/--quiet`` options to a command."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Repeat for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress non-error output.",
    )(f)
    return f


class ColorMode(str, Enum):
    """User intent for colorized terminal output."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(
    *,
    cli_mode: ColorMode | str | None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Honors ``--color``/``--no-color``, then the ``FORCE_COLOR`` and ``NO_COLOR``
    environment variables, and finally whether stdout is a TTY.

    Args:
        cli_mode: Explicit color mode from CLI options (auto, always, never).
        stdout_isatty: Whether stdout is a TTY; if None, auto-detected.

    Returns:
        True if color output should be enabled, False otherwise.
    """
    if cli_mode == ColorMode.ALWAYS:
        return True
    if cli_mode == ColorMode.NEVER:
        return False
    force_color = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False
    if stdout_isatty is None:
        isatty = getattr(sys.stdout, "isatty", None)
        stdout_isatty = bool(isatty()) if callable(isatty) else False
    return stdout_isatty


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--color`` and ``--no-color`` options to a command."""
    f = click.option(
        "--color",
        "color_mode",
        type=click.Choice([m.value for m in ColorMode]),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def common_config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--config`` and ``--no-config`` options to a command."""
    f = click.option(
        "--config",
        "config_paths",
        type=click.Path(dir_okay=False),
        multiple=True,
        help="Additional TellConf settings file (TOML); may be repeated.",
    )(f)
    f = click.option(
        "--no-config",
        "no_config",
        is_flag=True,
        help="Ignore pyproject.toml and tellconf.toml in the working directory.",
    )(f)
    return f


class EnumChoiceParam(click.ParamType):
    """A Click parameter type that converts a string to a member of a given Enum."""

    def __init__(self, enum_cls: type[Enum]) -> None:
        self.enum_cls = enum_cls
        self.name = enum_cls.__name__.lower()
        self.choices: list[str] = [cast("str", e.value) for e in enum_cls]

    def convert(
        self,
        value: object,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> Enum:
        """Convert a string (case-insensitively) to a member of the Enum."""
        if isinstance(value, self.enum_cls):
            return value
        lookup: dict[str, Enum] = {cast("str", e.value).lower(): e for e in self.enum_cls}
        key = str(value).lower()
        if key in lookup:
            return lookup[key]
        self.fail(
            f"Invalid value '{value}'. Must be one of: {', '.join(self.choices)}",
            param,
            ctx,
        )
