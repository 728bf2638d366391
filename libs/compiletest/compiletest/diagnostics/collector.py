"""Diagnostic collector for problems found while loading configuration or reading test headers."""

from __future__ import annotations

from compiletest.diagnostics.diagnostic import Diagnostic
from compiletest.diagnostics.location import SourceLocation
from compiletest.diagnostics.severity import DiagnosticSeverity


class DiagnosticCollector:
    """Accumulates diagnostics so one bad input does not stop the others being checked."""

    def __init__(self) -> None:
        self._diagnostics: list[Diagnostic] = []

    def error(
        self,
        message: str,
        location: SourceLocation | None = None,
        *,
        notes: tuple[str, ...] = (),
    ) -> None:
        """Record an error diagnostic."""
        self._diagnostics.append(Diagnostic(DiagnosticSeverity.ERROR, message, location, notes))

    def warning(
        self,
        message: str,
        location: SourceLocation | None = None,
        *,
        notes: tuple[str, ...] = (),
    ) -> None:
        """Record a warning diagnostic."""
        self._diagnostics.append(Diagnostic(DiagnosticSeverity.WARNING, message, location, notes))

    def info(
        self,
        message: str,
        location: SourceLocation | None = None,
        *,
        notes: tuple[str, ...] = (),
    ) -> None:
        """Record an informational diagnostic."""
        self._diagnostics.append(Diagnostic(DiagnosticSeverity.INFO, message, location, notes))

    def extend(self, diagnostics: list[Diagnostic]) -> None:
        """Append diagnostics gathered by another collector."""
        self._diagnostics.extend(diagnostics)

    def has_errors(self) -> bool:
        """Return True if any error diagnostics have been recorded."""
        return any(d.severity.is_fatal for d in self._diagnostics)

    def errors(self) -> list[Diagnostic]:
        """Return only the error diagnostics."""
        return [d for d in self._diagnostics if d.severity.is_fatal]

    def get_all(self) -> list[Diagnostic]:
        """Return a copy of all collected diagnostics."""
        return list(self._diagnostics)

    def format_all(self) -> str:
        """Format all diagnostics as a newline-separated string."""
        return "\n".join(str(d) for d in self._diagnostics)
