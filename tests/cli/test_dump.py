# topmark:header:start
#
#   project      : TellConf
#   file         : test_dump.py
#   file_relpath : tests/cli/test_dump.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test: the ``dump`` command in its output formats."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import tomlkit

from tellconf import parse
from tellconf.cli.exit_codes import ExitCode
from tests.cli.conftest import assert_exit, assert_SUCCESS, run_cli_in
from tests.conftest import SAMPLE_CONF, mark_cli

if TYPE_CHECKING:
    from pathlib import Path


@mark_cli
def test_dump_conf_is_normalized(sample_conf: Path) -> None:
    result = run_cli_in(sample_conf.parent, ["dump", sample_conf.name])
    assert_SUCCESS(result)
    assert result.output.startswith("device {\n")
    assert '\nuser = "nobody"\n' in result.output
    assert "#" not in result.output
    assert parse(result.output) == parse(SAMPLE_CONF)


@mark_cli
def test_dump_json(sample_conf: Path) -> None:
    result = run_cli_in(sample_conf.parent, ["dump", "--format", "json", sample_conf.name])
    assert_SUCCESS(result)
    assert json.loads(result.output) == parse(SAMPLE_CONF)


@mark_cli
def test_dump_toml(sample_conf: Path) -> None:
    result = run_cli_in(sample_conf.parent, ["dump", "--format", "TOML", sample_conf.name])
    assert_SUCCESS(result)
    assert tomlkit.parse(result.output).unwrap() == parse(SAMPLE_CONF)


@mark_cli
def test_dump_uses_configured_indent(sample_conf: Path) -> None:
    (sample_conf.parent / "tellconf.toml").write_text("[format]\nindent = 4\n", encoding="utf-8")
    result = run_cli_in(sample_conf.parent, ["dump", sample_conf.name])
    assert_SUCCESS(result)
    assert "\n    id = 1\n" in result.output


@mark_cli
def test_dump_stdin(tmp_path: Path) -> None:
    result = run_cli_in(tmp_path, ["dump", "-"], input_text="device {\nid = 1\n}\n")
    assert_SUCCESS(result)
    assert result.output == "device {\n  id = 1\n}\n"


@mark_cli
def test_dump_unknown_format(sample_conf: Path) -> None:
    result = run_cli_in(sample_conf.parent, ["dump", "--format", "yaml", sample_conf.name])
    assert result.exit_code == 2
    assert "Must be one of: conf, json, toml" in result.output


@mark_cli
def test_dump_parse_error(tmp_path: Path) -> None:
    (tmp_path / "bad.conf").write_text("controller\n", encoding="utf-8")
    result = run_cli_in(tmp_path, ["dump", "bad.conf"])
    assert_exit(result, ExitCode.PARSE_ERROR)
    assert "bad.conf: line 1: Expected '{', but found end of input" in result.output


@mark_cli
def test_dump_missing_file(tmp_path: Path) -> None:
    result = run_cli_in(tmp_path, ["dump", "missing.conf"])
    assert_exit(result, ExitCode.FILE_NOT_FOUND)
