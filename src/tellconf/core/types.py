# topmark:header:start
#
#   project      : TellConf
#   file         : types.py
#   file_relpath : src/tellconf/core/types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared type aliases for the configuration document model.

A document is plain Python data: blocks are insertion-ordered ``dict`` objects,
the device list is a ``list`` of blocks, and scalar values are ``str``, ``int``,
``float``, ``bool`` or ``None``.
"""

from __future__ import annotations

from typing import Any, Union

ConfValue = Union[str, int, float, bool, None]
ConfBlock = dict[str, Any]
ConfDocument = dict[str, Any]
