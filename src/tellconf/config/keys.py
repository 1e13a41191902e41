# topmark:header:start
#
#   project      : TellConf
#   file         : keys.py
#   file_relpath : src/tellconf/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for TellConf configuration.

Keys defined here are external configuration API (``tellconf.toml`` and
``[tool.tellconf]`` in ``pyproject.toml``); renaming one is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by TellConf configuration."""

    # pyproject.toml nesting
    SECTION_TOOL: Final[str] = "tool"
    SECTION_TELLCONF: Final[str] = "tellconf"

    # [format]
    SECTION_FORMAT: Final[str] = "format"

    KEY_INDENT: Final[str] = "indent"
    KEY_FINAL_NEWLINE: Final[str] = "final_newline"
    KEY_ENCODING: Final[str] = "encoding"
