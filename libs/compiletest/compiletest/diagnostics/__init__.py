"""Diagnostics subpackage (Layer 0 -- zero internal dependencies)."""

from compiletest.diagnostics.collector import DiagnosticCollector
from compiletest.diagnostics.diagnostic import Diagnostic
from compiletest.diagnostics.location import SourceLocation
from compiletest.diagnostics.severity import DiagnosticSeverity

__all__ = ["SourceLocation", "DiagnosticSeverity", "Diagnostic", "DiagnosticCollector"]
