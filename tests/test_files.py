# topmark:header:start
#
#   project      : TellConf
#   file         : test_files.py
#   file_relpath : tests/test_files.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""File helpers: `load`, `dump` and the text read/write primitives."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from tellconf import DiagnosticLog, UnterminatedBlockError, dump, load
from tellconf.files import read_conf_text, write_conf_text

if TYPE_CHECKING:
    from pathlib import Path


def test_load_sample(sample_conf: Path) -> None:
    doc = load(sample_conf)
    assert len(doc["devices"]) == 2
    assert doc["controller"]["serial"] == "A501ABCD"


def test_load_accepts_str_path(sample_conf: Path) -> None:
    assert load(str(sample_conf)) == load(sample_conf)


def test_load_collects_diagnostics(tmp_path: Path) -> None:
    path = tmp_path / "dup.conf"
    path.write_text("a = 1\na = 2\n", encoding="utf-8")
    diagnostics = DiagnosticLog()
    assert load(path, diagnostics=diagnostics) == {"devices": [], "a": 2}
    assert len(diagnostics) == 1


def test_load_crlf_file(tmp_path: Path) -> None:
    path = tmp_path / "win.conf"
    path.write_bytes(b'device {\r\n  name = "Lamp"\r\n}\r\n')
    assert load(path) == {"devices": [{"name": "Lamp"}]}


def test_load_propagates_parse_errors(tmp_path: Path) -> None:
    path = tmp_path / "bad.conf"
    path.write_text("device {\n", encoding="utf-8")
    with pytest.raises(UnterminatedBlockError):
        load(path)


def test_load_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load(tmp_path / "missing.conf")


def test_load_with_encoding(tmp_path: Path) -> None:
    path = tmp_path / "latin.conf"
    path.write_bytes('name = "Kök"\n'.encode("latin-1"))
    assert load(path, encoding="latin-1")["name"] == "Kök"
    with pytest.raises(UnicodeDecodeError):
        load(path)


def test_dump_writes_rendered_text_with_final_newline(tmp_path: Path) -> None:
    path = tmp_path / "out.conf"
    dump({"devices": [{"id": 1}]}, path)
    assert path.read_text(encoding="utf-8") == "device {\n  id = 1\n}\n"


def test_dump_without_final_newline(tmp_path: Path) -> None:
    path = tmp_path / "out.conf"
    dump({"A": "B"}, path, final_newline=False)
    assert path.read_text(encoding="utf-8") == 'A = "B"'


def test_dump_empty_document_writes_empty_file(tmp_path: Path) -> None:
    path = tmp_path / "empty.conf"
    dump({}, path)
    assert path.read_text(encoding="utf-8") == ""


def test_dump_then_load(tmp_path: Path, sample_conf: Path) -> None:
    doc = load(sample_conf)
    out = tmp_path / "copy.conf"
    dump(doc, out, indent=4)
    assert load(out) == doc


def test_read_keeps_line_endings(tmp_path: Path) -> None:
    path = tmp_path / "crlf.conf"
    path.write_bytes(b"a = 1\r\n")
    assert read_conf_text(path) == "a = 1\r\n"


def test_write_does_not_double_final_newline(tmp_path: Path) -> None:
    path = tmp_path / "nl.conf"
    write_conf_text(path, "a = 1\n")
    assert path.read_bytes() == b"a = 1\n"
