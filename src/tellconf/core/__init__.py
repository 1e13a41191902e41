# topmark:header:start
#
#   project      : TellConf
#   file         : __init__.py
#   file_relpath : src/tellconf/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core parser and serializer for the TellConf configuration format.

This package is pure: it turns strings into documents and documents into
strings. File I/O lives in `tellconf.files`.
"""

from __future__ import annotations

from tellconf.core.diagnostics import Diagnostic, DiagnosticLevel, DiagnosticLog
from tellconf.core.errors import (
    ExpectedAssignmentError,
    ExpectedBlockOpenError,
    RenderError,
    ReservedKeyError,
    TellconfParseError,
    UnknownValueTypeError,
    UnterminatedBlockError,
)
from tellconf.core.parser import parse
from tellconf.core.render import render
from tellconf.core.types import ConfBlock, ConfDocument, ConfValue

__all__ = [
    "ConfBlock",
    "ConfDocument",
    "ConfValue",
    "Diagnostic",
    "DiagnosticLevel",
    "DiagnosticLog",
    "ExpectedAssignmentError",
    "ExpectedBlockOpenError",
    "RenderError",
    "ReservedKeyError",
    "TellconfParseError",
    "UnknownValueTypeError",
    "UnterminatedBlockError",
    "parse",
    "render",
]
