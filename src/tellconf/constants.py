# topmark:header:start
#
#   project      : TellConf
#   file         : constants.py
#   file_relpath : src/tellconf/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TellConf Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version
from typing import Final

try:
    TELLCONF_VERSION: str = get_version("tellconf")
except PackageNotFoundError:  # pragma: no cover - only when running from a source checkout
    TELLCONF_VERSION = "0.0.0"

# Block keywords recognized by the parser.
DEVICE_BLOCK: Final[str] = "device"
CONTROLLER_BLOCK: Final[str] = "controller"
PARAMETERS_BLOCK: Final[str] = "parameters"

# Top-level scalar key that shares the `device` prefix but is never a block.
DEVICE_NODE_KEY: Final[str] = "deviceNode"

# Document key holding the list of device blocks.
DEVICES_KEY: Final[str] = "devices"

COMMENT_PREFIX: Final[str] = "#"
BLOCK_OPEN: Final[str] = "{"
BLOCK_CLOSE: Final[str] = "}"
ASSIGNMENT: Final[str] = "="

DEFAULT_INDENT: Final[int] = 2
DEFAULT_ENCODING: Final[str] = "utf-8"

# Configuration discovery.
TELLCONF_TOML_NAME: Final[str] = "tellconf.toml"
PYPROJECT_TOML_NAME: Final[str] = "pyproject.toml"

# Environment variable used to force the internal log level.
LOG_LEVEL_ENV_VAR: Final[str] = "TELLCONF_LOG_LEVEL"

# Pseudo path meaning "read from STDIN / write to STDOUT".
STDIN_PATH: Final[str] = "-"
