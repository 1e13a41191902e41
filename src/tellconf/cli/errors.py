# topmark:header:start
#
#   project      : TellConf
#   file         : errors.py
#   file_relpath : src/tellconf/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the TellConf CLI.

Raise these in commands to stop with a standardized message and exit code.
They prefer the project console from the Click context when one is present,
and fall back to Click's default error display otherwise.
"""

from __future__ import annotations

from typing import IO, Any

import click

from tellconf.cli.exit_codes import ExitCode


class TellconfError(click.ClickException):
    """Base class for all TellConf CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(getattr(ctx, "obj", None), dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(self.format_message(), fg="bright_red"))
                return
        super().show(file)


class TellconfUsageError(TellconfError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class TellconfParseFailure(TellconfError):
    """Error for configuration files that fail to parse."""

    exit_code = ExitCode.PARSE_ERROR


class TellconfFileNotFoundError(TellconfError):
    """Error when an input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class TellconfIOError(TellconfError):
    """Error for I/O and text decoding errors reading/writing files."""

    exit_code = ExitCode.IO_ERROR


class TellconfConfigError(TellconfError):
    """Error for invalid TellConf settings files."""

    exit_code = ExitCode.CONFIG_ERROR
