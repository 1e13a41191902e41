# topmark:header:start
#
#   project      : TellConf
#   file         : cmd_common.py
#   file_relpath : src/tellconf/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Helpers shared by TellConf CLI commands.

These translate library failures (``OSError``, ``UnicodeError``,
`TellconfParseError`, `ConfigLoadError`) into `TellconfError` subclasses that
carry the right exit code.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import click

from tellconf.cli.errors import (
    TellconfConfigError,
    TellconfFileNotFoundError,
    TellconfIOError,
    TellconfParseFailure,
)
from tellconf.config.loaders import ConfigLoadError
from tellconf.config.logging import get_logger
from tellconf.config.model import load_config
from tellconf.constants import STDIN_PATH
from tellconf.core.errors import TellconfParseError
from tellconf.core.parser import parse
from tellconf.files import read_conf_text

if TYPE_CHECKING:
    from tellconf.cli.console import ConsoleLike
    from tellconf.config.logging import TellconfLogger
    from tellconf.config.model import Config
    from tellconf.core.diagnostics import DiagnosticLog
    from tellconf.core.types import ConfDocument

logger: TellconfLogger = get_logger(__name__)


def get_console(ctx: click.Context) -> ConsoleLike:
    """Return the console stored on the Click context by the group callback."""
    ctx.ensure_object(dict)
    return ctx.obj["console"]


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output level resolved from ``-v``/``-q`` (default WARNING)."""
    return int(ctx.obj.get("verbosity_level", logging.WARNING))


def build_config(ctx: click.Context) -> Config:
    """Resolve the effective `Config` from the options stored on the context.

    Configuration warnings are shown unless output is quieted.

    Raises:
        TellconfConfigError: If a settings file is not valid TOML.
        TellconfFileNotFoundError: If an explicit ``--config`` file is missing.
        TellconfIOError: If a settings file cannot be read.
    """
    paths: tuple[str, ...] = tuple(ctx.obj.get("config_paths", ()))
    no_config: bool = bool(ctx.obj.get("no_config", False))
    try:
        config: Config = load_config(
            extra_files=[Path(p) for p in paths],
            no_discovery=no_config,
        )
    except ConfigLoadError as exc:
        raise TellconfConfigError(str(exc)) from exc
    except FileNotFoundError as exc:
        raise TellconfFileNotFoundError(f"Config file not found: {exc.filename}") from exc
    except (OSError, UnicodeError) as exc:
        raise TellconfIOError(f"Cannot read config file: {exc}") from exc

    if get_effective_verbosity(ctx) <= logging.WARNING:
        console = get_console(ctx)
        for diag in config.diagnostics:
            console.warn(f"[warning] {diag}")
    return config


def display_name(path: str) -> str:
    """Return the name used for ``path`` in messages (``<stdin>`` for ``-``)."""
    return "<stdin>" if path == STDIN_PATH else path


def read_input(path: str, *, encoding: str) -> str:
    """Read a configuration file, or STDIN when ``path`` is ``-``.

    Raises:
        TellconfFileNotFoundError: If the file does not exist.
        TellconfIOError: If the file cannot be read or decoded.
    """
    if path == STDIN_PATH:
        return click.get_text_stream("stdin").read()
    try:
        return read_conf_text(path, encoding=encoding)
    except FileNotFoundError as exc:
        raise TellconfFileNotFoundError(f"{path}: no such file") from exc
    except (OSError, UnicodeError) as exc:
        raise TellconfIOError(f"{path}: cannot read file: {exc}") from exc


def parse_input(
    text: str,
    *,
    path: str,
    diagnostics: DiagnosticLog | None = None,
) -> ConfDocument:
    """Parse ``text`` read from ``path``.

    Raises:
        TellconfParseFailure: If the text is not a valid configuration.
    """
    try:
        return parse(text, diagnostics=diagnostics)
    except TellconfParseError as exc:
        logger.debug("Parse failure in %s: %s", path, exc)
        raise TellconfParseFailure(f"{display_name(path)}: {exc}") from exc
