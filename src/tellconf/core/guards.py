# topmark:header:start
#
#   project      : TellConf
#   file         : guards.py
#   file_relpath : src/tellconf/core/guards.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Type guards for document-shaped values.

The serializer accepts any structurally equivalent nested mapping/list value,
so it relies on these predicates to decide how each entry is rendered.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, TypeGuard

from tellconf.core.types import ConfValue


def is_block(obj: object) -> TypeGuard[Mapping[str, Any]]:
    """Type guard for a block-like mapping.

    Args:
        obj (object): Value to test.

    Returns:
        TypeGuard[Mapping[str, Any]]: ``True`` if ``obj`` is a ``Mapping``.
    """
    return isinstance(obj, Mapping)


def is_block_list(obj: object) -> TypeGuard[Sequence[Any]]:
    """Type guard for an ordered sequence of blocks.

    Strings are sequences too, so they are excluded explicitly. Item types are
    not validated here; the serializer rejects non-block items itself.

    Args:
        obj (object): Value to test.

    Returns:
        TypeGuard[Sequence[Any]]: True if obj is a list or tuple.
    """
    return isinstance(obj, (list, tuple))


def is_scalar(obj: object) -> TypeGuard[ConfValue]:
    """Type guard for a scalar configuration value.

    Args:
        obj (object): Value to test.

    Returns:
        TypeGuard[ConfValue]: True if obj is a str, int, float, bool or None.
    """
    return obj is None or isinstance(obj, (str, int, float, bool))
