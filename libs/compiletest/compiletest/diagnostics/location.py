"""Locations inside test files and configuration documents."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SourceLocation:
    """Where a diagnostic points: a test file, a config file, or a key inside one.

    ``line`` is 1-indexed and may be absent when the problem concerns a whole
    file (e.g. a config document) rather than one directive line.
    """

    file: str
    line: int | None = None
    column: int | None = None
    key: str | None = None

    def __str__(self) -> str:
        text = self.file
        if self.line is not None:
            text += f":{self.line}"
            if self.column is not None:
                text += f":{self.column}"
        if self.key is not None:
            text += f" [{self.key}]"
        return text
