"""Alternate compiler configurations a whole run can be compared under."""

from __future__ import annotations

import sys
from enum import Enum


class CompareMode(Enum):
    """A compiler configuration used to re-run tests against separate golden files."""

    NLL = "nll"

    def __str__(self) -> str:
        return self.value

    def encode(self) -> str:
        """Return the tag used in golden file names."""
        return self.value

    @classmethod
    def parse(cls, text: str) -> CompareMode:
        """Look up a compare mode, exiting the process if there is none.

        The value comes from the harness command line, so an unknown tag means
        the whole invocation is wrong and nothing should run.
        """
        for member in cls:
            if member.value == text:
                return member
        sys.exit(f"unknown --compare-mode option: {text}")
