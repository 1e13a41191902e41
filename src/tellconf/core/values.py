# topmark:header:start
#
#   project      : TellConf
#   file         : values.py
#   file_relpath : src/tellconf/core/values.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Scalar value coercion (text to Python) and formatting (Python to text).

Coercion is tried in a fixed order: quoted string, ``false``, ``true``,
``null`` (all case-insensitive), then number. Anything else is an error.

Known limitation:
    Only the content of the *first* double-quoted substring is kept. Text
    after the closing quote (a ``}`` or a second assignment on the same line)
    is silently discarded.
"""

from __future__ import annotations

import math
import re
from typing import TYPE_CHECKING

from tellconf.core.errors import RenderError, UnknownValueTypeError

if TYPE_CHECKING:
    from tellconf.core.types import ConfValue

_QUOTED_RE = re.compile(r'"(.*?)"')
_INT_RE = re.compile(r"[-+]?\d+")
_FLOAT_RE = re.compile(r"[-+]?(?:\d+\.\d*|\.\d+|\d+(?=[eE]))(?:[eE][-+]?\d+)?")


def coerce_value(text: str, *, lineno: int | None = None, line: str | None = None) -> ConfValue:
    """Convert the right-hand side of an assignment into a Python value.

    Args:
        text (str): The trimmed value text.
        lineno (int | None): Source line number, used for error reporting.
        line (str | None): The logical line, used for error reporting.

    Returns:
        ConfValue: A ``str``, ``bool``, ``None``, ``int`` or ``float``.

    Raises:
        UnknownValueTypeError: If ``text`` matches none of the literal forms.
    """
    quoted = _QUOTED_RE.search(text)
    if quoted is not None:
        return quoted.group(1)

    lowered: str = text.lower()
    if lowered == "false":
        return False
    if lowered == "true":
        return True
    if lowered == "null":
        return None

    if _INT_RE.fullmatch(text):
        try:
            return int(text)
        except ValueError as exc:
            # Over the interpreter's integer string conversion limit.
            raise UnknownValueTypeError(text, lineno=lineno, line=line) from exc
    if _FLOAT_RE.fullmatch(text):
        number = float(text)
        # Overflowing literals such as 1e999 cannot be written back.
        if math.isfinite(number):
            return number

    raise UnknownValueTypeError(text, lineno=lineno, line=line)


def format_value(value: object) -> str:
    """Render a scalar value as it appears on the right of ``KEY = ``.

    Strings are double-quoted; booleans become ``true``/``false``; ``None``
    becomes ``null``; integers use ``str`` and floats ``repr`` so that ``1.0``
    keeps its decimal point.

    Args:
        value (object): The scalar to format.

    Returns:
        str: The textual form.

    Raises:
        RenderError: If the value cannot be read back by the parser.
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        try:
            return str(value)
        except ValueError as exc:
            raise RenderError(f"Integer has too many digits to write: {exc}") from exc
    if isinstance(value, float):
        if not math.isfinite(value):
            raise RenderError(f"Non-finite number cannot be written: {value!r}")
        return repr(value)
    if isinstance(value, str):
        if '"' in value or "\n" in value or "\r" in value:
            raise RenderError(f"String value cannot contain quotes or line breaks: {value!r}")
        return f'"{value}"'
    raise RenderError(f"Unsupported value type {type(value).__name__}: {value!r}")
