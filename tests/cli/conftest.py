# topmark:header:start
#
#   project      : TellConf
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running TellConf in a controlled working directory.

`run_cli_in()` changes the process working directory to the given ``tmp_path``
before invoking the Click CLI, so relative paths resolve against the test
directory and settings discovery only sees files the test created.
"""

from __future__ import annotations

import os
from collections.abc import Sequence
from typing import IO, TYPE_CHECKING, Any

import pytest
from click.testing import CliRunner, Result

from tellconf.cli.exit_codes import ExitCode
from tellconf.cli.main import cli

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture(autouse=True)
def plain_terminal(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep color detection deterministic regardless of the developer's shell."""
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)


def run_cli_in(
    tmp_path: Path,
    argv: Sequence[str],
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI with ``tmp_path`` as the working directory.

    Args:
        tmp_path (Path): Pytest-provided temporary directory used as the CWD for the
            command invocation.
        argv (Sequence[str]): CLI argument vector, e.g. ``["check", "tellstick.conf"]``.
        input_text (str | bytes | IO[Any] | None): Optional standard input to pass to
            the command.

    Returns:
        Result: The `click.testing.Result` produced by `click.testing.CliRunner.invoke`.

    Example:
        ```python
        res = run_cli_in(tmp_path, ["check", "tellstick.conf"])
        assert res.exit_code == ExitCode.SUCCESS
        ```
    """
    runner = CliRunner()
    cwd: str = os.getcwd()
    try:
        os.chdir(tmp_path)
        return runner.invoke(cli, list(argv), input=input_text)
    finally:
        os.chdir(cwd)


def run_cli(
    argv: Sequence[str],
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI without changing the working directory.

    Use this helper when the test does not depend on files in the working
    directory (``--help``, ``version``) or when it passes ``--no-config``.

    Args:
        argv (Sequence[str]): CLI argument vector.
        input_text (str | bytes | IO[Any] | None): Optional standard input.

    Returns:
        Result: The `click.testing.Result` produced by `click.testing.CliRunner.invoke`.
    """
    return CliRunner().invoke(cli, list(argv), input=input_text)


def assert_exit(result: Result, expected: ExitCode) -> None:
    """Assert the exit code, showing the output when it differs."""
    assert result.exit_code == expected, (
        f"expected {expected.name} ({int(expected)}), got {result.exit_code}:\n{result.output}"
    )


def assert_SUCCESS(result: Result) -> None:  # noqa: N802
    """Assert that the command exited with `ExitCode.SUCCESS`."""
    assert_exit(result, ExitCode.SUCCESS)


def assert_WOULD_CHANGE(result: Result) -> None:  # noqa: N802
    """Assert that the command exited with `ExitCode.WOULD_CHANGE`."""
    assert_exit(result, ExitCode.WOULD_CHANGE)
