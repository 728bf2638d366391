"""Colour setting for test progress output."""

from __future__ import annotations

from enum import Enum


class ColorConfig(Enum):
    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, text: str) -> ColorConfig:
        for member in cls:
            if member.value == text:
                return member
        choices = ", ".join(m.value for m in cls)
        raise ValueError(f"argument for --color must be {choices} (was {text})")
