from __future__ import annotations

from itertools import combinations

import pytest

from compiletest.core import Mode, ModeParseError, parse_declared_mode
from compiletest.diagnostics import DiagnosticCollector, DiagnosticSeverity, SourceLocation

SPELLINGS = [
    (Mode.COMPILE_FAIL, "compile-fail"),
    (Mode.PARSE_FAIL, "parse-fail"),
    (Mode.RUN_FAIL, "run-fail"),
    (Mode.RUN_PASS, "run-pass"),
    (Mode.RUN_PASS_VALGRIND, "run-pass-valgrind"),
    (Mode.PRETTY, "pretty"),
    (Mode.DEBUGINFO_GDB, "debuginfo-gdb"),
    (Mode.DEBUGINFO_LLDB, "debuginfo-lldb"),
    (Mode.CODEGEN, "codegen"),
    (Mode.RUSTDOC, "rustdoc"),
    (Mode.CODEGEN_UNITS, "codegen-units"),
    (Mode.INCREMENTAL, "incremental"),
    (Mode.RUN_MAKE, "run-make"),
    (Mode.UI, "ui"),
    (Mode.MIR_OPT, "mir-opt"),
]


class TestModeEncoding:
    def test_fifteen_modes(self):
        assert len(list(Mode)) == 15

    def test_declaration_order(self):
        assert [m for m, _ in SPELLINGS] == list(Mode)

    @pytest.mark.parametrize("mode,spelling", SPELLINGS, ids=[s for _, s in SPELLINGS])
    def test_spelling(self, mode, spelling):
        assert str(mode) == spelling
        assert mode.encode() == spelling
        assert Mode.parse(spelling) is mode

    def test_round_trip(self):
        for mode in Mode:
            assert Mode.parse(mode.encode()) is mode

    def test_encoding_is_injective(self):
        for a, b in combinations(Mode, 2):
            assert a.encode() != b.encode()


class TestModeParseErrors:
    @pytest.mark.parametrize("text", ["not-a-mode", "", "Run-Pass", "run_pass", "ui ", "nll"])
    def test_unknown_token(self, text):
        with pytest.raises(ModeParseError) as excinfo:
            Mode.parse(text)
        assert excinfo.value.text == text

    def test_error_is_value_error(self):
        with pytest.raises(ValueError):
            Mode.parse("bogus")

    def test_message_names_token(self):
        with pytest.raises(ModeParseError, match="bogus"):
            Mode.parse("bogus")


class TestDisambiguator:
    @pytest.mark.parametrize(
        "mode,suffix",
        [
            (Mode.PRETTY, ".pretty"),
            (Mode.DEBUGINFO_GDB, ".gdb"),
            (Mode.DEBUGINFO_LLDB, ".lldb"),
            (Mode.RUN_PASS, ""),
            (Mode.UI, ""),
            (Mode.COMPILE_FAIL, ""),
        ],
    )
    def test_values(self, mode, suffix):
        assert mode.disambiguator() == suffix

    def test_every_mode_has_one(self):
        for mode in Mode:
            suffix = mode.disambiguator()
            assert suffix == "" or suffix.startswith(".")

    def test_concurrent_modes_are_distinct(self):
        """Modes that can run on the same file at once never share output directories."""
        for group in Mode.concurrent_groups():
            suffixes = [m.disambiguator() for m in group]
            assert len(set(suffixes)) == len(suffixes), group

    def test_concurrent_groups_cover_suffixed_modes(self):
        grouped = set().union(*Mode.concurrent_groups())
        for mode in Mode:
            if mode.disambiguator():
                assert mode in grouped


class TestDeclaredMode:
    def test_valid(self):
        diag = DiagnosticCollector()
        mode = parse_declared_mode("run-pass", SourceLocation("foo.rs", 1), diag)
        assert mode is Mode.RUN_PASS
        assert diag.get_all() == []

    def test_surrounding_whitespace(self):
        diag = DiagnosticCollector()
        assert parse_declared_mode("  ui\n", None, diag) is Mode.UI

    def test_invalid_reports_and_continues(self):
        diag = DiagnosticCollector()
        loc = SourceLocation("src/test/ui/foo.rs", 3, 4)
        assert parse_declared_mode("run-passs", loc, diag) is None
        assert parse_declared_mode("ui", loc, diag) is Mode.UI

        diags = diag.get_all()
        assert len(diags) == 1
        assert diags[0].severity == DiagnosticSeverity.ERROR
        assert diags[0].location == loc
        assert "run-passs" in diags[0].message
        assert "run-pass" in diags[0].notes[0]
