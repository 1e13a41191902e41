# topmark:header:start
#
#   project      : TellConf
#   file         : lines.py
#   file_relpath : src/tellconf/core/lines.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Lexical preprocessing: raw text to logical lines.

Only full-line comments are recognized. A ``#`` that follows real content on
the same line is kept as part of that line.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from tellconf.constants import COMMENT_PREFIX

_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")


@dataclass(frozen=True, slots=True)
class LogicalLine:
    """A trimmed, non-empty, non-comment source line.

    Attributes:
        lineno (int): 1-based line number in the source text.
        text (str): The line with leading and trailing whitespace removed.
    """

    lineno: int
    text: str


def logical_lines(text: str) -> list[LogicalLine]:
    """Split ``text`` into logical lines.

    Lines are split on ``\\n``, ``\\r\\n`` and ``\\r``, trimmed, and dropped when
    they are empty or start with ``#``.

    Args:
        text (str): The complete raw file content.

    Returns:
        list[LogicalLine]: Logical lines in source order, one per kept source line.
    """
    out: list[LogicalLine] = []
    for lineno, raw in enumerate(_LINE_BREAK_RE.split(text), start=1):
        stripped: str = raw.strip()
        if not stripped or stripped.startswith(COMMENT_PREFIX):
            continue
        out.append(LogicalLine(lineno, stripped))
    return out
