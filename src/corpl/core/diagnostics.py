# topmark:header:start
#
#   project      : Corpl
#   file         : diagnostics.py
#   file_relpath : src/corpl/core/diagnostics.py
#   license      : MIT
#   copyright    : (c) 2025 The Corpl authors
#
# topmark:header:end

"""Diagnostic types collected while toggling a file.

The engine never prints. Non-fatal conditions (uncommon comment marker, a
section without common text, a line that cannot be safely deactivated) are
recorded here and rendered by the CLI.

Sections:
    * DiagnosticLevel: severity levels.
    * Diagnostic: immutable structured diagnostic payload (level + message).
    * DiagnosticStats: aggregated per-level counts.
    * DiagnosticLog: mutable per-file collection.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from corpl.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from corpl.config.logging import CorplLogger

logger: CorplLogger = get_logger(__name__)


class DiagnosticLevel(Enum):
    """Severity levels for diagnostics collected during processing.

    Levels are ordered by importance: ERROR > WARNING > INFO.
    """

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True)
class Diagnostic:
    """Structured diagnostic with a severity level, message and optional 1-based line."""

    level: DiagnosticLevel
    message: str
    line: int | None = None

    def render(self) -> str:
        """Return the message prefixed with its line number, when known."""
        if self.line is None:
            return self.message
        return f"line {self.line}: {self.message}"


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
    """Mutable, per-file collection of diagnostics."""

    items: list[Diagnostic] = field(default_factory=lambda: [])

    def add(self, diagnostic: Diagnostic) -> None:
        """Append a diagnostic and mirror it to the internal log."""
        self.items.append(diagnostic)
        logger.trace("Adding [%s]: %r", diagnostic.level.value, diagnostic.render())

    def extend(self, diagnostics: Iterable[Diagnostic]) -> None:
        """Append several diagnostics in order."""
        for d in diagnostics:
            self.add(d)

    def add_warning(self, message: str, *, line: int | None = None) -> None:
        """Add a ``warning`` diagnostic.

        Warnings are also logged at WARNING level so they remain visible when the
        engine is driven without the CLI.
        """
        logger.warning("%s", message if line is None else f"line {line}: {message}")
        self.add(Diagnostic(DiagnosticLevel.WARNING, message, line))

    def has_warning(self) -> bool:
        """Return True if the log contains warning diagnostics."""
        return any(d.level == DiagnosticLevel.WARNING for d in self.items)

    def freeze(self) -> tuple[Diagnostic, ...]:
        """Return an immutable snapshot of the collected diagnostics."""
        return tuple(self.items)

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)


def compute_diagnostic_stats(diagnostics: Iterable[Diagnostic]) -> DiagnosticStats:
    """Return per-level counts for a sequence of diagnostics.

    Args:
        diagnostics (Iterable[Diagnostic]): The diagnostics to count.

    Returns:
        DiagnosticStats: Per-level counts.
    """
    items = list(diagnostics)
    n_info: int = sum(1 for d in items if d.level == DiagnosticLevel.INFO)
    n_warn: int = sum(1 for d in items if d.level == DiagnosticLevel.WARNING)
    n_err: int = sum(1 for d in items if d.level == DiagnosticLevel.ERROR)
    return DiagnosticStats(n_info=n_info, n_warning=n_warn, n_error=n_err)
