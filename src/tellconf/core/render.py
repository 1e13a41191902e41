# topmark:header:start
#
#   project      : TellConf
#   file         : render.py
#   file_relpath : src/tellconf/core/render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Serializer: document-shaped values to configuration text.

Rendering rules, applied per key in iteration order:

- a list renders each element as a block named after the *singularized* key
  (a trailing ``s`` is dropped, so ``devices`` becomes ``device``);
- a mapping renders as ``KEY {`` / indented children / ``}``;
- anything else renders as ``KEY = VALUE`` (see `tellconf.core.values.format_value`).

The output has no trailing newline. Singularization is a heuristic: any list
key ending in ``s`` loses it, and no other plural forms are recognized.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from tellconf.config.logging import get_logger
from tellconf.constants import (
    ASSIGNMENT,
    BLOCK_CLOSE,
    BLOCK_OPEN,
    COMMENT_PREFIX,
    CONTROLLER_BLOCK,
    DEFAULT_INDENT,
    DEVICE_BLOCK,
    DEVICES_KEY,
    PARAMETERS_BLOCK,
)
from tellconf.core.errors import RenderError
from tellconf.core.guards import is_block, is_block_list, is_scalar
from tellconf.core.parser import starts_with_keyword
from tellconf.core.values import format_value

if TYPE_CHECKING:
    from collections.abc import Mapping

    from tellconf.config.logging import TellconfLogger

logger: TellconfLogger = get_logger(__name__)

_KEY_FORBIDDEN_START: tuple[str, ...] = (COMMENT_PREFIX, BLOCK_OPEN, BLOCK_CLOSE)


def singularize(key: str) -> str:
    """Return the block name used for elements of the list stored under ``key``."""
    return key[:-1] if key.endswith("s") else key


def _check_pair_key(key: str, level: int) -> None:
    """Reject keys whose ``KEY = VALUE`` line would not parse back as that pair."""
    if not key or key != key.strip() or ASSIGNMENT in key or "\n" in key or "\r" in key:
        raise RenderError(f"Key cannot be written as an assignment: {key!r}")
    if key.startswith(_KEY_FORBIDDEN_START):
        raise RenderError(f"Key cannot start with {key[0]!r}: {key!r}")

    line: str = f"{key} {ASSIGNMENT}"
    keywords: tuple[str, ...] = (
        (DEVICE_BLOCK, CONTROLLER_BLOCK) if level == 0 else (PARAMETERS_BLOCK,)
    )
    if any(starts_with_keyword(line, kw) for kw in keywords) or (
        level == 0 and key == DEVICES_KEY
    ):
        raise RenderError(f"Key {key!r} is reserved for blocks and cannot hold a scalar")


def _render_block(name: str, block: Mapping[str, Any], level: int, indent: int) -> str:
    pad: str = " " * (level * indent)
    body: str = _render_entries(block, level + 1, indent)
    if not body:
        return f"{pad}{name} {BLOCK_OPEN}\n{pad}{BLOCK_CLOSE}"
    return f"{pad}{name} {BLOCK_OPEN}\n{body}\n{pad}{BLOCK_CLOSE}"


def _render_entries(mapping: Mapping[str, Any], level: int, indent: int) -> str:
    pad: str = " " * (level * indent)
    parts: list[str] = []

    for key, value in mapping.items():
        if not isinstance(key, str):
            raise RenderError(f"Keys must be strings, got {key!r}")
        if is_block_list(value):
            name: str = singularize(key)
            for item in value:
                if not is_block(item):
                    raise RenderError(f"List {key!r} must contain only mappings, got {item!r}")
                parts.append(_render_block(name, item, level, indent))
        elif is_block(value):
            parts.append(_render_block(key, value, level, indent))
        elif is_scalar(value):
            _check_pair_key(key, level)
            parts.append(f"{pad}{key} = {format_value(value)}")
        else:
            raise RenderError(f"Unsupported value for {key!r}: {value!r}")

    return "\n".join(parts)


def render(document: Mapping[str, Any], *, indent: int = DEFAULT_INDENT) -> str:
    """Render a document-shaped mapping as configuration text.

    Args:
        document (Mapping[str, Any]): The document (or any structurally equivalent
            nested mapping). It is read, never modified.
        indent (int): Spaces per nesting level.

    Returns:
        str: The rendered text, without a trailing newline. An empty mapping
            renders as an empty string.

    Raises:
        RenderError: If the structure contains a shape the format cannot express
            (a list of scalars, nested lists, non-string keys, strings containing
            a double quote or a line break, non-finite floats), or a scalar key
            that would not read back as the same pair (empty, padded, containing
            ``=`` or a line break, starting with ``#``, ``{`` or ``}``, or a block
            keyword such as ``device = 1``).

    Note:
        Block and list names are written as given. Only ``device`` blocks,
        one ``controller`` block and nested ``parameters`` blocks are read back
        by `tellconf.core.parser.parse`; other names render without error.
    """
    if indent < 0:
        raise RenderError(f"indent must not be negative, got {indent}")
    text: str = _render_entries(document, 0, indent)
    logger.trace("Rendered %d top-level entries into %d characters", len(document), len(text))
    return text
