# topmark:header:start
#
#   project      : TellConf
#   file         : model.py
#   file_relpath : src/tellconf/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model and merge policy.

This module defines:
    - `Config`: an immutable snapshot of the formatting options.
    - `MutableConfig`: a mutable builder that merges layered TOML sources and
      is frozen into a `Config`.

Precedence, lowest first: built-in defaults, ``[tool.tellconf]`` in
``pyproject.toml``, ``tellconf.toml``, then files passed explicitly.
Unknown keys and values of the wrong type are recorded as warning
diagnostics and ignored.
"""

from __future__ import annotations

import codecs
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from tellconf.config.keys import Toml
from tellconf.config.loaders import (
    discover_config_files,
    extract_tellconf_table,
    load_toml_dict,
)
from tellconf.config.logging import get_logger
from tellconf.constants import DEFAULT_ENCODING, DEFAULT_INDENT, PYPROJECT_TOML_NAME
from tellconf.core.diagnostics import Diagnostic, DiagnosticLog

if TYPE_CHECKING:
    from collections.abc import Iterable

    from tellconf.config.loaders import TomlTable
    from tellconf.config.logging import TellconfLogger

logger: TellconfLogger = get_logger(__name__)

_KNOWN_FORMAT_KEYS: frozenset[str] = frozenset(
    {Toml.KEY_INDENT, Toml.KEY_FINAL_NEWLINE, Toml.KEY_ENCODING}
)


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration.

    Attributes:
        indent (int): Spaces per nesting level when rendering.
        final_newline (bool): Whether files written by TellConf end with a newline.
        encoding (str): Text encoding for reading and writing files.
        config_files (tuple[Path, ...]): Sources merged into this snapshot.
        diagnostics (tuple[Diagnostic, ...]): Warnings raised while merging.
    """

    indent: int = DEFAULT_INDENT
    final_newline: bool = True
    encoding: str = DEFAULT_ENCODING
    config_files: tuple[Path, ...] = ()
    diagnostics: tuple[Diagnostic, ...] = ()

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this configuration."""
        return MutableConfig(
            indent=self.indent,
            final_newline=self.final_newline,
            encoding=self.encoding,
            config_files=list(self.config_files),
            diagnostics=DiagnosticLog(list(self.diagnostics)),
        )


@dataclass
class MutableConfig:
    """Mutable configuration builder used while merging sources."""

    indent: int = DEFAULT_INDENT
    final_newline: bool = True
    encoding: str = DEFAULT_ENCODING
    config_files: list[Path] = field(default_factory=lambda: [])
    diagnostics: DiagnosticLog = field(default_factory=DiagnosticLog)

    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a builder holding the built-in defaults."""
        return cls()

    def freeze(self) -> Config:
        """Return an immutable `Config` snapshot."""
        return Config(
            indent=self.indent,
            final_newline=self.final_newline,
            encoding=self.encoding,
            config_files=tuple(self.config_files),
            diagnostics=tuple(self.diagnostics),
        )

    def merge_table(self, table: TomlTable, *, source: str) -> MutableConfig:
        """Overlay the settings found in ``table``.

        Args:
            table (TomlTable): A TellConf settings table (``[format]`` etc.).
            source (str): Human readable origin, used in diagnostics.

        Returns:
            MutableConfig: ``self``, for chaining.
        """
        for section in table:
            if section != Toml.SECTION_FORMAT:
                self._warn(f"{source}: ignoring unknown section [{section}]")

        fmt: Any = table.get(Toml.SECTION_FORMAT, {})
        if not isinstance(fmt, dict):
            self._warn(f"{source}: [{Toml.SECTION_FORMAT}] must be a table")
            return self

        for key, value in fmt.items():
            where = f"{source}: [{Toml.SECTION_FORMAT}].{key}"
            if key not in _KNOWN_FORMAT_KEYS:
                self._warn(f"{where} is not a known setting")
            elif key == Toml.KEY_INDENT:
                if isinstance(value, int) and not isinstance(value, bool) and value >= 0:
                    self.indent = value
                else:
                    self._warn(f"{where} must be a non-negative integer, got {value!r}")
            elif key == Toml.KEY_FINAL_NEWLINE:
                if isinstance(value, bool):
                    self.final_newline = value
                else:
                    self._warn(f"{where} must be a boolean, got {value!r}")
            elif key == Toml.KEY_ENCODING:
                if isinstance(value, str) and _is_known_encoding(value):
                    self.encoding = value
                else:
                    self._warn(f"{where} must name a known text encoding, got {value!r}")
        return self

    def merge_file(self, path: Path) -> MutableConfig:
        """Load ``path`` and overlay its TellConf settings, if any.

        Args:
            path (Path): ``pyproject.toml`` or a standalone TellConf TOML file.

        Returns:
            MutableConfig: ``self``, for chaining.
        """
        data: TomlTable = load_toml_dict(path)
        table = extract_tellconf_table(data, from_pyproject=path.name == PYPROJECT_TOML_NAME)
        if table is None:
            logger.debug("No TellConf settings in %s", path)
            return self
        logger.debug("Merging TellConf settings from %s", path)
        self.config_files.append(path)
        return self.merge_table(table, source=str(path))

    def _warn(self, message: str) -> None:
        logger.warning(message)
        self.diagnostics.add_warning(message)


def _is_known_encoding(name: str) -> bool:
    try:
        codecs.lookup(name)
    except LookupError:
        return False
    return True


def load_config(
    root: Path | None = None,
    *,
    extra_files: Iterable[Path] = (),
    no_discovery: bool = False,
) -> Config:
    """Resolve the effective configuration.

    Args:
        root (Path | None): Directory searched for ``pyproject.toml`` and
            ``tellconf.toml``; defaults to the working directory.
        extra_files (Iterable[Path]): Explicit config files, merged last.
        no_discovery (bool): Skip the files in ``root``.

    Returns:
        Config: The frozen, merged configuration.

    Raises:
        ConfigLoadError: If a config file contains invalid TOML.
    """
    draft: MutableConfig = MutableConfig.from_defaults()
    if not no_discovery:
        for path in discover_config_files(root or Path.cwd()):
            draft.merge_file(path)
    for path in extra_files:
        draft.merge_file(Path(path))
    return draft.freeze()
