# topmark:header:start
#
#   project      : TellConf
#   file         : __init__.py
#   file_relpath : src/tellconf/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TellConf package.

TellConf reads and writes the line-oriented device/controller configuration
format used by home-automation gateways (``tellstick.conf``)::

    user = "nobody"
    controller {
      id = 1
    }
    device {
      id = 1
      name = "Lamp"
      parameters {
        house = "A"
      }
    }

`parse` turns such text into plain Python data (``{"devices": [...], ...}``),
and `render` turns that data back into text. `load` and `dump` do the same
for files.
"""

from __future__ import annotations

from tellconf.core import (
    ConfBlock,
    ConfDocument,
    ConfValue,
    DiagnosticLog,
    ExpectedAssignmentError,
    ExpectedBlockOpenError,
    RenderError,
    ReservedKeyError,
    TellconfParseError,
    UnknownValueTypeError,
    UnterminatedBlockError,
    parse,
    render,
)
from tellconf.files import dump, load

__all__ = [
    "ConfBlock",
    "ConfDocument",
    "ConfValue",
    "DiagnosticLog",
    "ExpectedAssignmentError",
    "ExpectedBlockOpenError",
    "RenderError",
    "ReservedKeyError",
    "TellconfParseError",
    "UnknownValueTypeError",
    "UnterminatedBlockError",
    "dump",
    "load",
    "parse",
    "render",
]
