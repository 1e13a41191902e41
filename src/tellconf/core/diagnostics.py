# topmark:header:start
#
#   project      : TellConf
#   file         : diagnostics.py
#   file_relpath : src/tellconf/core/diagnostics.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Non-fatal diagnostics collected while parsing or loading configuration.

Parse *errors* are exceptions (see `tellconf.core.errors`). Diagnostics cover
everything that does not stop processing: duplicate keys, an overwritten
``controller`` block, ignored configuration keys.

Sections:
    * DiagnosticLevel: severity levels with associated terminal colors.
    * Diagnostic: immutable structured diagnostic payload.
    * DiagnosticStats: aggregated per-level counts.
    * DiagnosticLog: mutable collection with helpers for adding and summarizing.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, cast

from yachalk import chalk

from tellconf.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Iterator

    from tellconf.config.logging import TellconfLogger


logger: TellconfLogger = get_logger(__name__)


class DiagnosticLevel(Enum):
    """Severity levels for diagnostics, ordered ERROR > WARNING > INFO."""

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"

    @property
    def color(self) -> Callable[[str], str]:
        """Return the `yachalk` color function associated with this severity level.

        Returns:
            Callable[[str], str]: The `yachalk` color function for this level.
        """
        return cast(
            "Callable[[str], str]",
            {
                DiagnosticLevel.INFO: chalk.blue,
                DiagnosticLevel.WARNING: chalk.yellow,
                DiagnosticLevel.ERROR: chalk.red_bright,
            }[self],
        )


@dataclass(frozen=True)
class Diagnostic:
    """Structured diagnostic with a severity level, message and optional line number."""

    level: DiagnosticLevel
    message: str
    lineno: int | None = None

    def __str__(self) -> str:
        if self.lineno is None:
            return self.message
        return f"line {self.lineno}: {self.message}"


@dataclass(frozen=True)
class DiagnosticStats:
    """Aggregated counts for diagnostics by severity level."""

    n_info: int
    n_warning: int
    n_error: int

    @property
    def total(self) -> int:
        """Return the total count of diagnostics."""
        return self.n_info + self.n_warning + self.n_error


@dataclass
class DiagnosticLog:
    """Mutable collection of diagnostics for one parse or config load."""

    items: list[Diagnostic] = field(default_factory=lambda: [])

    def _add(self, diagnostic: Diagnostic) -> None:
        self.items.append(diagnostic)
        logger.trace("Adding [%s]: %r", diagnostic.level.value, diagnostic.message)

    def add_info(self, message: str, *, lineno: int | None = None) -> None:
        """Add an ``info`` diagnostic.

        Args:
            message: The diagnostic message.
            lineno: Optional 1-based source line number.
        """
        self._add(Diagnostic(DiagnosticLevel.INFO, message, lineno))

    def add_warning(self, message: str, *, lineno: int | None = None) -> None:
        """Add a ``warning`` diagnostic.

        Args:
            message: The diagnostic message.
            lineno: Optional 1-based source line number.
        """
        self._add(Diagnostic(DiagnosticLevel.WARNING, message, lineno))

    def add_error(self, message: str, *, lineno: int | None = None) -> None:
        """Add an ``error`` diagnostic.

        Args:
            message: The diagnostic message.
            lineno: Optional 1-based source line number.
        """
        self._add(Diagnostic(DiagnosticLevel.ERROR, message, lineno))

    def stats(self) -> DiagnosticStats:
        """Return per-level counts for diagnostics in this log."""
        return compute_diagnostic_stats(self.items)

    def has_warning(self) -> bool:
        """Return True if the log contains warning diagnostics."""
        return any(d.level == DiagnosticLevel.WARNING for d in self.items)

    def has_error(self) -> bool:
        """Return True if the log contains error diagnostics."""
        return any(d.level == DiagnosticLevel.ERROR for d in self.items)

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)


def compute_diagnostic_stats(diagnostics: Iterable[Diagnostic]) -> DiagnosticStats:
    """Return per-level counts for a sequence of diagnostics.

    Args:
        diagnostics: the diagnostics to count.

    Returns:
        Per-level counts.
    """
    items = list(diagnostics)
    n_info: int = sum(1 for d in items if d.level == DiagnosticLevel.INFO)
    n_warn: int = sum(1 for d in items if d.level == DiagnosticLevel.WARNING)
    n_err: int = sum(1 for d in items if d.level == DiagnosticLevel.ERROR)
    return DiagnosticStats(n_info=n_info, n_warning=n_warn, n_error=n_err)
