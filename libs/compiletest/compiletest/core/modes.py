"""Test execution modes."""

from __future__ import annotations

from enum import Enum


class ModeParseError(ValueError):
    """Raised when a mode token is not one of the known modes."""

    def __init__(self, text: str) -> None:
        super().__init__(f"unrecognized mode: {text!r}")
        self.text = text


class Mode(Enum):
    """The pass/fail contract a test declares, keyed by its header spelling."""

    COMPILE_FAIL = "compile-fail"
    PARSE_FAIL = "parse-fail"
    RUN_FAIL = "run-fail"
    RUN_PASS = "run-pass"
    RUN_PASS_VALGRIND = "run-pass-valgrind"
    PRETTY = "pretty"
    DEBUGINFO_GDB = "debuginfo-gdb"
    DEBUGINFO_LLDB = "debuginfo-lldb"
    CODEGEN = "codegen"
    RUSTDOC = "rustdoc"
    CODEGEN_UNITS = "codegen-units"
    INCREMENTAL = "incremental"
    RUN_MAKE = "run-make"
    UI = "ui"
    MIR_OPT = "mir-opt"

    def __str__(self) -> str:
        return self.value

    def encode(self) -> str:
        """Return the canonical lowercase-hyphenated spelling."""
        return self.value

    @classmethod
    def parse(cls, text: str) -> Mode:
        """Look up a mode by its spelling.

        Raises:
            ModeParseError: ``text`` names no mode. The caller decides whether
                that aborts anything; usually it only disqualifies one test.
        """
        for member in cls:
            if member.value == text:
                return member
        raise ModeParseError(text)

    def disambiguator(self) -> str:
        """Suffix that keeps this mode's build output apart from a concurrent peer's.

        run-pass and pretty run over the same sources at the same time, as do
        the gdb and lldb debuginfo suites.
        """
        table: dict[Mode, str] = {
            Mode.PRETTY: ".pretty",
            Mode.DEBUGINFO_GDB: ".gdb",
            Mode.DEBUGINFO_LLDB: ".lldb",
        }
        return table.get(self, "")

    @staticmethod
    def concurrent_groups() -> tuple[frozenset[Mode], ...]:
        """Sets of modes that may execute against the same test file at once."""
        return (
            frozenset({Mode.RUN_PASS, Mode.PRETTY}),
            frozenset({Mode.DEBUGINFO_GDB, Mode.DEBUGINFO_LLDB}),
        )
