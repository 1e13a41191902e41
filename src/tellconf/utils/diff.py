# topmark:header:start
#
#   project      : TellConf
#   file         : diff.py
#   file_relpath : src/tellconf/utils/diff.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unified diff helpers for ``tellconf format --diff``."""

from __future__ import annotations

import difflib
from typing import TYPE_CHECKING

from yachalk import chalk

if TYPE_CHECKING:
    from collections.abc import Sequence


def unified_diff(original: str, updated: str, *, path: str) -> list[str]:
    """Return unified diff lines between two versions of a file.

    Args:
        original (str): Current file content.
        updated (str): Normalized content.
        path (str): Path shown in the ``---``/``+++`` headers.

    Returns:
        list[str]: Diff lines without trailing newlines; empty when equal.
    """
    return list(
        difflib.unified_diff(
            original.splitlines(),
            updated.splitlines(),
            fromfile=f"{path} (current)",
            tofile=f"{path} (formatted)",
            lineterm="",
        )
    )


def render_patch(patch: Sequence[str] | str, *, color: bool = True) -> str:
    """Render a unified diff, optionally colorized.

    Args:
        patch: A unified diff as either a sequence of lines or a multiline string.
        color: Whether to apply ANSI colors.

    Returns:
        The formatted diff, one line per input line, each terminated by ``\\n``.
    """
    lines: list[str] = patch.splitlines() if isinstance(patch, str) else list(patch)
    if not color:
        return "".join(f"{line}\n" for line in lines)

    def process_line(line: str) -> str:
        match line[:1]:
            case "-":
                return chalk.bold.red(line)
            case "+":
                return chalk.bold.green(line)
            case "@":
                return chalk.cyan(line)
            case _:
                return chalk.white(line)

    return "".join(f"{process_line(line)}\n" for line in lines)
