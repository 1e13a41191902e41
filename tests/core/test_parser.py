# topmark:header:start
#
#   project      : TellConf
#   file         : test_parser.py
#   file_relpath : tests/core/test_parser.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Parser behavior: dispatch, blocks, nesting, diagnostics and fatal errors."""

from __future__ import annotations

import logging

import pytest

from tellconf import (
    ExpectedAssignmentError,
    ExpectedBlockOpenError,
    ReservedKeyError,
    TellconfParseError,
    UnknownValueTypeError,
    UnterminatedBlockError,
    parse,
)
from tellconf.core.cursor import LineCursor
from tellconf.core.diagnostics import DiagnosticLevel, DiagnosticLog
from tellconf.core.lines import logical_lines
from tellconf.core.parser import parse_block, starts_with_keyword
from tests.conftest import SAMPLE_CONF, parametrize


def test_empty_input_has_empty_device_list() -> None:
    assert parse("") == {"devices": []}
    assert parse("\n  \n# only a comment\n") == {"devices": []}


def test_comments_are_ignored() -> None:
    assert parse('# X = "Y"\nZ = "W"\n') == {"Z": "W", "devices": []}


def test_top_level_value_types() -> None:
    doc = parse('INT = 12\nFLOAT = 1.0\nBOOL_T = True\nBOOL_F = false\nNONE = null\nSTR = "s"\n')
    assert doc == {
        "devices": [],
        "INT": 12,
        "FLOAT": 1.0,
        "BOOL_T": True,
        "BOOL_F": False,
        "NONE": None,
        "STR": "s",
    }
    assert isinstance(doc["INT"], int)
    assert isinstance(doc["FLOAT"], float)


def test_pair_splits_on_first_equals_sign() -> None:
    assert parse('url = "a=b"')["url"] == "a=b"
    assert parse('key="tight"')["key"] == "tight"


def test_devices_accumulate_in_order() -> None:
    text = 'device {\n  A = "B"\n}\ndevice {\n  B = "C"\n}\n'
    assert parse(text)["devices"] == [{"A": "B"}, {"B": "C"}]


def test_nested_parameters_block() -> None:
    text = 'device {\n  A = "B"\n  parameters {\n    AA = "BB"\n  }\n}\n'
    assert parse(text) == {"devices": [{"A": "B", "parameters": {"AA": "BB"}}]}


def test_parameters_may_nest_recursively() -> None:
    text = "device {\nparameters {\nparameters {\nx = 1\n}\n}\n}\n"
    assert parse(text)["devices"] == [{"parameters": {"parameters": {"x": 1}}}]


def test_controller_block() -> None:
    doc = parse("controller {\n  id = 1\n  type = 2\n}\n")
    assert doc == {"devices": [], "controller": {"id": 1, "type": 2}}


def test_last_controller_wins_with_warning(caplog: pytest.LogCaptureFixture) -> None:
    text = "controller {\n  id = 1\n}\ncontroller {\n  id = 2\n}\n"
    diagnostics = DiagnosticLog()
    with caplog.at_level(logging.WARNING):
        doc = parse(text, diagnostics=diagnostics)
    assert doc["controller"] == {"id": 2}
    assert [(d.level, d.lineno) for d in diagnostics] == [(DiagnosticLevel.WARNING, 4)]
    assert "controller" in caplog.text


def test_duplicate_key_last_value_wins(caplog: pytest.LogCaptureFixture) -> None:
    diagnostics = DiagnosticLog()
    with caplog.at_level(logging.WARNING):
        doc = parse("a = 1\nb = 2\na = 3\n", diagnostics=diagnostics)
    assert doc["a"] == 3
    assert diagnostics.has_warning()
    assert [d.lineno for d in diagnostics] == [3]
    assert "Duplicate key 'a'" in caplog.text


def test_duplicate_key_inside_block_is_reported() -> None:
    diagnostics = DiagnosticLog()
    doc = parse("device {\nid = 1\nid = 2\n}\n", diagnostics=diagnostics)
    assert doc["devices"] == [{"id": 2}]
    assert len(diagnostics) == 1


def test_device_node_is_a_plain_pair() -> None:
    doc = parse('deviceNode = "/dev/tellstick"\n')
    assert doc == {"devices": [], "deviceNode": "/dev/tellstick"}


@parametrize("key", ["devicePath", "device_id", "controllers", "controllerType"])
def test_keys_that_only_share_a_prefix_are_pairs(key: str) -> None:
    assert parse(f"{key} = 1")[key] == 1


def test_brace_on_next_line() -> None:
    text = 'device\n{\n  name = "Lamp"\n}\n'
    assert parse(text)["devices"] == [{"name": "Lamp"}]


def test_content_after_opening_brace_is_parsed() -> None:
    text = 'device { name = "Lamp"\n}\n'
    assert parse(text)["devices"] == [{"name": "Lamp"}]


def test_content_after_closing_brace_continues_parsing() -> None:
    text = 'device {\nparameters {\nx = 1\n} }\nuser = "nobody"\n'
    doc = parse(text)
    assert doc == {"devices": [{"parameters": {"x": 1}}], "user": "nobody"}


def test_empty_blocks() -> None:
    assert parse("device {\n}\n") == {"devices": [{}]}
    assert parse("device {}\n") == {"devices": [{}]}


def test_realistic_file() -> None:
    doc = parse(SAMPLE_CONF)
    assert doc["user"] == "nobody"
    assert doc["ignoreControllerConfirmation"] == "false"
    assert doc["controller"] == {"id": 1, "type": 2, "serial": "A501ABCD"}
    assert [d["name"] for d in doc["devices"]] == ["Lamp", "Heater"]
    assert doc["devices"][0]["parameters"] == {"house": "12345", "unit": 1}


def test_unterminated_block() -> None:
    with pytest.raises(UnterminatedBlockError) as excinfo:
        parse('device {\n  A = "B"\n')
    assert excinfo.value.block_name == "device"
    assert excinfo.value.lineno == 2


def test_unterminated_nested_block_names_innermost() -> None:
    with pytest.raises(UnterminatedBlockError) as excinfo:
        parse("controller {\nparameters {\nx = 1\n")
    assert excinfo.value.block_name == "parameters"


def test_single_line_block_is_unterminated() -> None:
    """Text after a quoted value is dropped, so the closing brace is never seen."""
    with pytest.raises(UnterminatedBlockError):
        parse('device { A = "B" }')


def test_unknown_value() -> None:
    with pytest.raises(UnknownValueTypeError) as excinfo:
        parse("a = 1\nA = @@@\n")
    assert excinfo.value.lineno == 2
    assert excinfo.value.line == "A = @@@"


def test_overflowing_number_in_block_is_unknown_value() -> None:
    with pytest.raises(UnknownValueTypeError) as excinfo:
        parse("device {\n  level = 1e999\n}\n")
    assert excinfo.value.lineno == 2
    assert excinfo.value.text == "1e999"


@parametrize(
    "text, found",
    [
        ("device\n", None),
        ("device\nid = 1\n", "id = 1"),
        ("controller [\n}\n", "["),
        ("device {\nparameters = 1\n}\n", "= 1"),
    ],
)
def test_expected_block_open(text: str, found: str | None) -> None:
    with pytest.raises(ExpectedBlockOpenError) as excinfo:
        parse(text)
    assert excinfo.value.found == found


@parametrize("text", ["just some words\n", "= 1\n", "}\n", "device {\nnot a pair\n}\n"])
def test_expected_assignment(text: str) -> None:
    with pytest.raises(ExpectedAssignmentError):
        parse(text)


def test_devices_key_is_reserved() -> None:
    with pytest.raises(ReservedKeyError):
        parse("devices = 1\n")


def test_all_parse_errors_share_a_base_class() -> None:
    for text in ["a = ?", "device", "device {", "oops", "devices = 2"]:
        with pytest.raises(TellconfParseError):
            parse(text)


def test_parse_block_leaves_cursor_after_block() -> None:
    cursor = LineCursor(logical_lines("device {\nid = 1\n}\nnext = 2\n"))
    assert parse_block(cursor, "device") == {"id": 1}
    line = cursor.peek()
    assert line is not None and line.text == "next = 2"


@parametrize(
    "text, keyword, expected",
    [
        ("device", "device", True),
        ("device {", "device", True),
        ("device{", "device", True),
        ("device\t{", "device", True),
        ("deviceNode = 1", "device", False),
        ("devices = 1", "device", False),
        ("dev", "device", False),
    ],
)
def test_starts_with_keyword(text: str, keyword: str, expected: bool) -> None:
    assert starts_with_keyword(text, keyword) is expected
