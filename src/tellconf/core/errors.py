# topmark:header:start
#
#   project      : TellConf
#   file         : errors.py
#   file_relpath : src/tellconf/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the TellConf parser and serializer.

All parse failures are fatal: the parser never returns a partial document.
Each error records the 1-based source line number and the logical line text
when they are known, so callers can point users at the offending input.
"""

from __future__ import annotations


class TellconfParseError(ValueError):
    """Base class for all parse-time failures.

    Attributes:
        message (str): Human readable description without location.
        lineno (int | None): 1-based source line number, if known.
        line (str | None): The trimmed logical line the error refers to, if any.
    """

    def __init__(self, message: str, *, lineno: int | None = None, line: str | None = None):
        self.message = message
        self.lineno = lineno
        self.line = line
        super().__init__(self.__str__())

    def __str__(self) -> str:
        if self.lineno is None:
            return self.message
        return f"line {self.lineno}: {self.message}"


class UnknownValueTypeError(TellconfParseError):
    """The value text is not a string, boolean, null or number literal."""

    def __init__(self, text: str, *, lineno: int | None = None, line: str | None = None):
        self.text = text
        super().__init__(f"Unknown value type: {text!r}", lineno=lineno, line=line)


class ExpectedBlockOpenError(TellconfParseError):
    """A block header was not followed by ``{``."""

    def __init__(self, found: str | None, *, lineno: int | None = None, line: str | None = None):
        self.found = found
        shown = "end of input" if found is None else repr(found)
        super().__init__(f"Expected '{{', but found {shown}", lineno=lineno, line=line)


class UnterminatedBlockError(TellconfParseError):
    """End of input was reached inside an open block."""

    def __init__(self, block_name: str, *, lineno: int | None = None, line: str | None = None):
        self.block_name = block_name
        super().__init__(
            f"Unexpected end of config in {block_name!r} block", lineno=lineno, line=line
        )


class ExpectedAssignmentError(TellconfParseError):
    """A line is neither a block nor a ``KEY = VALUE`` assignment."""

    def __init__(self, *, lineno: int | None = None, line: str | None = None):
        super().__init__(f"Expected 'KEY = VALUE', but found {line!r}", lineno=lineno, line=line)


class ReservedKeyError(TellconfParseError):
    """A scalar assignment uses a key reserved for block structure (``devices``)."""

    def __init__(self, key: str, *, lineno: int | None = None, line: str | None = None):
        self.key = key
        super().__init__(f"Key {key!r} is reserved and cannot be assigned", lineno=lineno, line=line)


class RenderError(ValueError):
    """The value handed to the serializer is not document-shaped.

    Raised for shapes the text format cannot express, such as a list of scalars
    or a string containing a double quote.
    """
