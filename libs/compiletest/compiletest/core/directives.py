"""Turning a mode token read from a test header into a Mode."""

from __future__ import annotations

from compiletest.core.modes import Mode, ModeParseError
from compiletest.diagnostics.collector import DiagnosticCollector
from compiletest.diagnostics.location import SourceLocation


def parse_declared_mode(
    text: str,
    location: SourceLocation | None,
    diag: DiagnosticCollector,
) -> Mode | None:
    """Parse a mode declared by a test, reporting a bad token instead of raising.

    Returns None when ``text`` is not a mode; an error pointing at ``location``
    is recorded in ``diag`` so the run can skip this test and carry on.
    """
    try:
        return Mode.parse(text.strip())
    except ModeParseError as e:
        diag.error(
            str(e),
            location,
            notes=(f"expected one of: {', '.join(m.value for m in Mode)}",),
        )
        return None
