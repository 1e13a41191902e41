# topmark:header:start
#
#   project      : TellConf
#   file         : parser.py
#   file_relpath : src/tellconf/core/parser.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Block parser: logical lines to a configuration document.

The parser has no opinion about the order of definitions. Top-level lines are
dispatched in priority order:

1. ``device`` (but not ``deviceNode``) opens a device block, appended to
   ``devices``;
2. ``controller`` opens the controller block, replacing any earlier one;
3. anything else is a ``KEY = VALUE`` pair merged into the document.

Inside a block, a ``parameters`` line opens a nested block stored under the
``parameters`` key. The block routine is generic over the block name, so a
``parameters`` block may itself contain another ``parameters`` block.

A ``}`` closes the innermost open block. Any text after it on the same line is
handed back to the enclosing parse, so ``} }`` closes two blocks.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from tellconf.config.logging import get_logger
from tellconf.constants import (
    ASSIGNMENT,
    BLOCK_CLOSE,
    BLOCK_OPEN,
    CONTROLLER_BLOCK,
    DEVICE_BLOCK,
    DEVICE_NODE_KEY,
    DEVICES_KEY,
    PARAMETERS_BLOCK,
)
from tellconf.core.cursor import LineCursor
from tellconf.core.errors import (
    ExpectedAssignmentError,
    ExpectedBlockOpenError,
    ReservedKeyError,
    UnterminatedBlockError,
)
from tellconf.core.lines import logical_lines
from tellconf.core.values import coerce_value

if TYPE_CHECKING:
    from tellconf.config.logging import TellconfLogger
    from tellconf.core.diagnostics import DiagnosticLog
    from tellconf.core.lines import LogicalLine
    from tellconf.core.types import ConfBlock, ConfDocument, ConfValue

logger: TellconfLogger = get_logger(__name__)


def starts_with_keyword(text: str, keyword: str) -> bool:
    """Return True if ``text`` starts with the block keyword ``keyword``.

    The keyword must be the whole line or be followed by whitespace or ``{``,
    so ``devicePath = 1`` is not a ``device`` block.

    Args:
        text (str): A logical line.
        keyword (str): Block name such as ``device``.

    Returns:
        bool: Whether the line opens a ``keyword`` block.
    """
    if not text.startswith(keyword):
        return False
    rest: str = text[len(keyword) :]
    return not rest or rest[0].isspace() or rest[0] == BLOCK_OPEN


def parse_pair(line: LogicalLine) -> tuple[str, ConfValue]:
    """Parse a single ``KEY = VALUE`` assignment.

    The line is split on the first ``=``; the key is kept verbatim.

    Args:
        line (LogicalLine): The logical line holding the assignment.

    Returns:
        tuple[str, ConfValue]: The key and its coerced value.

    Raises:
        ExpectedAssignmentError: If there is no ``=`` or the key is empty.
    """
    key, sep, raw_value = line.text.partition(ASSIGNMENT)
    key = key.strip()
    if not sep or not key:
        raise ExpectedAssignmentError(lineno=line.lineno, line=line.text)
    return key, coerce_value(raw_value.strip(), lineno=line.lineno, line=line.text)


def _store(
    target: dict[str, object],
    key: str,
    value: object,
    *,
    lineno: int,
    diagnostics: DiagnosticLog | None,
) -> None:
    if key in target:
        message = f"Duplicate key {key!r}; the last value wins"
        logger.warning("line %d: %s", lineno, message)
        if diagnostics is not None:
            diagnostics.add_warning(message, lineno=lineno)
    target[key] = value


def _open_block(cursor: LineCursor, block_name: str) -> None:
    """Consume ``block_name`` and the opening ``{``.

    On return the cursor points at the first body line, which may be the text
    that followed ``{`` on the same line.
    """
    header = cursor.peek()
    assert header is not None
    rest: str = header.text[len(block_name) :].strip()

    if not rest:
        cursor.advance()
        nxt = cursor.peek()
        if nxt is None:
            raise ExpectedBlockOpenError(None, lineno=header.lineno, line=header.text)
        if not nxt.text.startswith(BLOCK_OPEN):
            raise ExpectedBlockOpenError(nxt.text, lineno=nxt.lineno, line=nxt.text)
        rest = nxt.text
    elif not rest.startswith(BLOCK_OPEN):
        raise ExpectedBlockOpenError(rest, lineno=header.lineno, line=header.text)

    cursor.replace(rest[len(BLOCK_OPEN) :])


def parse_block(
    cursor: LineCursor,
    block_name: str,
    *,
    diagnostics: DiagnosticLog | None = None,
) -> ConfBlock:
    """Parse a ``name { ... }`` block starting at the cursor.

    Args:
        cursor (LineCursor): Cursor positioned on the block header line.
        block_name (str): The block keyword the header starts with.
        diagnostics (DiagnosticLog | None): Optional sink for non-fatal warnings.

    Returns:
        ConfBlock: The parsed block. The cursor is left on the line after the
            closing ``}``, or on the remainder of that line if it had any.

    Raises:
        ExpectedBlockOpenError: If the header is not followed by ``{``.
        UnterminatedBlockError: If input ends before the closing ``}``.
    """
    header = cursor.peek()
    assert header is not None
    logger.trace("Entering %r block at line %d", block_name, header.lineno)

    block: ConfBlock = {}
    _open_block(cursor, block_name)

    while (line := cursor.peek()) is not None:
        if line.text.startswith(BLOCK_CLOSE):
            cursor.replace(line.text[len(BLOCK_CLOSE) :])
            logger.trace("Leaving %r block at line %d", block_name, line.lineno)
            return block
        if starts_with_keyword(line.text, PARAMETERS_BLOCK):
            nested: ConfBlock = parse_block(cursor, PARAMETERS_BLOCK, diagnostics=diagnostics)
            _store(block, PARAMETERS_BLOCK, nested, lineno=line.lineno, diagnostics=diagnostics)
            continue
        key, value = parse_pair(line)
        _store(block, key, value, lineno=line.lineno, diagnostics=diagnostics)
        cursor.advance()

    raise UnterminatedBlockError(block_name, lineno=cursor.last_lineno(), line=header.text)


def parse_lines(
    lines: list[LogicalLine],
    *,
    diagnostics: DiagnosticLog | None = None,
) -> ConfDocument:
    """Parse preprocessed logical lines into a document.

    Args:
        lines (list[LogicalLine]): Output of `tellconf.core.lines.logical_lines`.
        diagnostics (DiagnosticLog | None): Optional sink for non-fatal warnings.

    Returns:
        ConfDocument: The document; ``devices`` is always present.
    """
    document: ConfDocument = {DEVICES_KEY: []}
    cursor = LineCursor(lines)

    while (line := cursor.peek()) is not None:
        if starts_with_keyword(line.text, DEVICE_BLOCK) and not line.text.startswith(
            DEVICE_NODE_KEY
        ):
            document[DEVICES_KEY].append(parse_block(cursor, DEVICE_BLOCK, diagnostics=diagnostics))
        elif starts_with_keyword(line.text, CONTROLLER_BLOCK):
            if CONTROLLER_BLOCK in document:
                message = "Multiple 'controller' blocks; the last one wins"
                logger.warning("line %d: %s", line.lineno, message)
                if diagnostics is not None:
                    diagnostics.add_warning(message, lineno=line.lineno)
            document[CONTROLLER_BLOCK] = parse_block(
                cursor, CONTROLLER_BLOCK, diagnostics=diagnostics
            )
        else:
            key, value = parse_pair(line)
            if key == DEVICES_KEY:
                raise ReservedKeyError(key, lineno=line.lineno, line=line.text)
            _store(document, key, value, lineno=line.lineno, diagnostics=diagnostics)
            cursor.advance()

    logger.debug(
        "Parsed %d logical lines: %d device(s), controller=%s",
        len(cursor),
        len(document[DEVICES_KEY]),
        CONTROLLER_BLOCK in document,
    )
    return document


def parse(text: str, *, diagnostics: DiagnosticLog | None = None) -> ConfDocument:
    """Parse configuration text into a document.

    Args:
        text (str): The complete file content.
        diagnostics (DiagnosticLog | None): Optional sink for non-fatal warnings
            such as duplicate keys or repeated ``controller`` blocks.

    Returns:
        ConfDocument: ``{"devices": [...], "controller": {...}, KEY: VALUE, ...}``.

    Raises:
        TellconfParseError: On the first malformed line; no partial result is returned.
    """
    return parse_lines(logical_lines(text), diagnostics=diagnostics)
