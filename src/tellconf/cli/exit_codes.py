# topmark:header:start
#
#   project      : TellConf
#   file         : exit_codes.py
#   file_relpath : src/tellconf/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Standardized exit codes used by the TellConf CLI."""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the TellConf CLI.

    Attributes:
        SUCCESS: Successful execution with no errors.
        FAILURE: Generic failure.
        WOULD_CHANGE: ``format`` without ``--apply`` found files that are not
            normalized.
        USAGE_ERROR: Command-line invocation error. Mirrors BSD ``EX_USAGE (64)``.
        PARSE_ERROR: A configuration file could not be parsed. Mirrors BSD
            ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: Input path does not exist. Mirrors BSD ``EX_NOINPUT (66)``.
        IO_ERROR: I/O or decoding error reading/writing a file. Mirrors BSD
            ``EX_IOERR (74)``.
        CONFIG_ERROR: Invalid TellConf settings file. Mirrors BSD ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1
    WOULD_CHANGE = 2

    USAGE_ERROR = 64  # EX_USAGE
    PARSE_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    IO_ERROR = 74  # EX_IOERR
    CONFIG_ERROR = 78  # EX_CONFIG
