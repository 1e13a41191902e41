# topmark:header:start
#
#   project      : TellConf
#   file         : loaders.py
#   file_relpath : src/tellconf/config/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load TOML configuration sources.

This module provides I/O helpers for reading TellConf settings from:
- ``[tool.tellconf]`` in ``pyproject.toml``, and
- a standalone ``tellconf.toml``.

Parsing is done with `tomlkit` and returned as plain `dict` structures.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from tellconf.config.keys import Toml
from tellconf.config.logging import get_logger
from tellconf.constants import PYPROJECT_TOML_NAME, TELLCONF_TOML_NAME

if TYPE_CHECKING:
    from tellconf.config.logging import TellconfLogger

TomlTable = dict[str, Any]

logger: TellconfLogger = get_logger(__name__)


class ConfigLoadError(ValueError):
    """A configuration file exists but is not valid TOML."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        super().__init__(f"Invalid TOML in {path}: {reason}")


def load_toml_dict(path: Path) -> TomlTable:
    """Read a TOML file into a plain ``dict``.

    Args:
        path (Path): The TOML file.

    Returns:
        TomlTable: The unwrapped document.

    Raises:
        ConfigLoadError: If the file is not valid TOML.
    """
    text: str = path.read_text(encoding="utf-8")
    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except TomlkitParseError as exc:
        raise ConfigLoadError(path, str(exc)) from exc
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def extract_tellconf_table(data: TomlTable, *, from_pyproject: bool) -> TomlTable | None:
    """Return the TellConf settings table from a parsed TOML document.

    For ``pyproject.toml`` the table lives under ``[tool.tellconf]``; a
    standalone ``tellconf.toml`` is the table itself.

    Args:
        data (TomlTable): Parsed TOML document.
        from_pyproject (bool): Whether ``data`` came from ``pyproject.toml``.

    Returns:
        TomlTable | None: The settings table, or None when absent.
    """
    if not from_pyproject:
        return data
    tool: Any = data.get(Toml.SECTION_TOOL)
    if not isinstance(tool, dict):
        return None
    table: Any = cast("TomlTable", tool).get(Toml.SECTION_TELLCONF)
    return cast("TomlTable", table) if isinstance(table, dict) else None


def discover_config_files(root: Path) -> list[Path]:
    """Return config files found in ``root``, lowest precedence first.

    Args:
        root (Path): Directory to search (usually the working directory).

    Returns:
        list[Path]: Existing files among ``pyproject.toml`` and ``tellconf.toml``.
    """
    found: list[Path] = []
    for name in (PYPROJECT_TOML_NAME, TELLCONF_TOML_NAME):
        candidate: Path = root / name
        if candidate.is_file():
            logger.debug("Found config candidate %s", candidate)
            found.append(candidate)
    return found
