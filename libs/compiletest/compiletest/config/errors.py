"""Errors raised while loading a run configuration."""

from __future__ import annotations

from compiletest.diagnostics.diagnostic import Diagnostic


class ConfigError(Exception):
    """Raised when a configuration document cannot be turned into a Config."""

    def __init__(self, diagnostics: list[Diagnostic]) -> None:
        super().__init__("\n".join(str(d) for d in diagnostics))
        self.diagnostics = list(diagnostics)
