# topmark:header:start
#
#   project      : TellConf
#   file         : formats.py
#   file_relpath : src/tellconf/formats.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Alternate renderings of a parsed document (JSON and TOML).

TOML has no ``null`` value, so ``None`` entries are stripped when rendering TOML.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from enum import Enum
from typing import TYPE_CHECKING, Any, cast

import tomlkit

from tellconf.config.logging import get_logger
from tellconf.core.render import render

if TYPE_CHECKING:
    from tellconf.config.logging import TellconfLogger

logger: TellconfLogger = get_logger(__name__)


class OutputFormat(str, Enum):
    """Output formats supported by ``tellconf dump``."""

    CONF = "conf"
    JSON = "json"
    TOML = "toml"


def _strip_none_for_toml(value: object) -> object:
    """Remove TOML-incompatible `None` from mappings/lists.

    Scalars are moved ahead of nested tables in each mapping: in TOML, a key
    written after a table header belongs to that table.
    """
    if isinstance(value, Mapping):
        scalars: dict[str, object] = {}
        nested: dict[str, object] = {}
        m: Mapping[object, object] = cast("Mapping[object, object]", value)
        for k_any, v_any in m.items():
            if v_any is None:
                logger.debug("Ignoring `None` entry in Mapping for key %s", k_any)
                continue
            k: str = k_any if isinstance(k_any, str) else str(k_any)
            # An empty list renders inline (``devices = []``), so it stays with the scalars.
            is_table = isinstance(v_any, Mapping) or (isinstance(v_any, list) and bool(v_any))
            target = nested if is_table else scalars
            target[k] = _strip_none_for_toml(v_any)
        return {**scalars, **nested}

    if isinstance(value, list):
        seq: list[object] = cast("list[object]", value)
        return [_strip_none_for_toml(v) for v in seq if v is not None]

    return value


def to_json(document: Mapping[str, Any]) -> str:
    """Serialize a document to indented JSON."""
    return json.dumps(document, indent=2)


def to_toml(document: Mapping[str, Any]) -> str:
    """Serialize a document to TOML.

    The ``devices`` list becomes an array of tables (``[[devices]]``) and the
    controller a table (``[controller]``).

    Args:
        document (Mapping[str, Any]): The document to render.

    Returns:
        str: The rendered TOML document as a string.
    """
    cleaned: Any = _strip_none_for_toml(document)
    return cast("str", cast("Any", tomlkit).dumps(cast("Mapping[str, Any]", cleaned)))


def render_as(document: Mapping[str, Any], fmt: OutputFormat, *, indent: int = 2) -> str:
    """Render ``document`` in the requested output format.

    Args:
        document (Mapping[str, Any]): The document to render.
        fmt (OutputFormat): Target format.
        indent (int): Indentation width for the native format.

    Returns:
        str: The rendered text.
    """
    if fmt is OutputFormat.JSON:
        return to_json(document)
    if fmt is OutputFormat.TOML:
        return to_toml(document)
    return render(document, indent=indent)
