# topmark:header:start
#
#   project      : TellConf
#   file         : files.py
#   file_relpath : src/tellconf/files.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Read and write configuration files.

These helpers are the thin I/O layer around `tellconf.core.parse` and
`tellconf.core.render`. I/O failures (``OSError``, ``UnicodeError``) are not
caught here; they propagate to the caller.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

from tellconf.config.logging import get_logger
from tellconf.constants import DEFAULT_ENCODING, DEFAULT_INDENT
from tellconf.core.parser import parse
from tellconf.core.render import render

if TYPE_CHECKING:
    from collections.abc import Mapping

    from tellconf.config.logging import TellconfLogger
    from tellconf.core.diagnostics import DiagnosticLog
    from tellconf.core.types import ConfDocument

logger: TellconfLogger = get_logger(__name__)


def read_conf_text(path: Path | str, *, encoding: str = DEFAULT_ENCODING) -> str:
    """Return the text content of a configuration file.

    Line endings are returned untouched; the preprocessor handles LF, CRLF and CR.

    Args:
        path (Path | str): File to read.
        encoding (str): Text encoding.

    Returns:
        str: The file content.
    """
    p = Path(path)
    logger.debug("Reading %s", p)
    with p.open("r", encoding=encoding, newline="") as fh:
        return fh.read()


def write_conf_text(
    path: Path | str,
    text: str,
    *,
    encoding: str = DEFAULT_ENCODING,
    final_newline: bool = True,
) -> None:
    """Write rendered configuration text to ``path``.

    Args:
        path (Path | str): Destination file.
        text (str): Rendered configuration (as returned by `render`).
        encoding (str): Text encoding.
        final_newline (bool): Append a single ``\\n`` when ``text`` is not empty.
    """
    p = Path(path)
    if final_newline and text and not text.endswith("\n"):
        text += "\n"
    logger.debug("Writing %d characters to %s", len(text), p)
    with p.open("w", encoding=encoding, newline="") as fh:
        fh.write(text)


def load(
    path: Path | str,
    *,
    encoding: str = DEFAULT_ENCODING,
    diagnostics: DiagnosticLog | None = None,
) -> ConfDocument:
    """Read and parse a configuration file.

    Args:
        path (Path | str): File to read.
        encoding (str): Text encoding.
        diagnostics (DiagnosticLog | None): Optional sink for non-fatal warnings.

    Returns:
        ConfDocument: The parsed document.
    """
    return parse(read_conf_text(path, encoding=encoding), diagnostics=diagnostics)


def dump(
    document: Mapping[str, Any],
    path: Path | str,
    *,
    indent: int = DEFAULT_INDENT,
    encoding: str = DEFAULT_ENCODING,
    final_newline: bool = True,
) -> None:
    """Render ``document`` and write it to ``path``.

    Args:
        document (Mapping[str, Any]): Document-shaped value to write.
        path (Path | str): Destination file.
        indent (int): Spaces per nesting level.
        encoding (str): Text encoding.
        final_newline (bool): Append a trailing newline to non-empty output.
    """
    text: str = render(document, indent=indent)
    write_conf_text(path, text, encoding=encoding, final_newline=final_newline)
