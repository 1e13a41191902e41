# topmark:header:start
#
#   project      : TellConf
#   file         : cursor.py
#   file_relpath : src/tellconf/core/cursor.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Forward-only cursor over logical lines.

The cursor owns a private copy of the line sequence. Block parsing may
*replace* the current line (for example with the text left over after a
consumed ``{`` or ``}``) but the position only ever moves forward.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from tellconf.core.lines import LogicalLine

if TYPE_CHECKING:
    from collections.abc import Iterable


class LineCursor:
    """A peek/advance cursor over a sequence of `LogicalLine`.

    Args:
        lines (Iterable[LogicalLine]): The logical lines to walk.
    """

    def __init__(self, lines: Iterable[LogicalLine]) -> None:
        self._lines: list[LogicalLine] = list(lines)
        self._pos: int = 0

    @property
    def position(self) -> int:
        """Zero-based index of the current line."""
        return self._pos

    def at_end(self) -> bool:
        """Return True when every line has been consumed."""
        return self._pos >= len(self._lines)

    def peek(self) -> LogicalLine | None:
        """Return the current line without consuming it, or None at end of input."""
        if self.at_end():
            return None
        return self._lines[self._pos]

    def advance(self) -> None:
        """Move past the current line."""
        if not self.at_end():
            self._pos += 1

    def replace(self, text: str) -> None:
        """Replace the text of the current line, keeping its line number.

        An empty (after trimming) ``text`` consumes the line instead, since empty
        lines never reach the parser.

        Args:
            text (str): The new line content.
        """
        current = self.peek()
        if current is None:
            return
        stripped = text.strip()
        if not stripped:
            self.advance()
            return
        self._lines[self._pos] = LogicalLine(current.lineno, stripped)

    def last_lineno(self) -> int | None:
        """Return the line number of the last line, or None for empty input."""
        if not self._lines:
            return None
        return self._lines[-1].lineno

    def __len__(self) -> int:
        return len(self._lines)
