"""Diagnostic severity levels."""

from __future__ import annotations

from enum import Enum


class DiagnosticSeverity(Enum):
    """How much a diagnostic matters to the run.

    An ERROR rejects the configuration document, or the single test whose
    header it points at. WARNING and INFO are reported but never stop
    anything, e.g. a gdb banner with no version number in it.
    """

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"

    def __str__(self) -> str:
        return self.value

    @property
    def is_fatal(self) -> bool:
        """True when the diagnosed input cannot be used."""
        return self is DiagnosticSeverity.ERROR
