"""
compiletest command line

Checks run configuration files and answers naming questions about golden
files without running any tests.

Usage:
    compiletest check-config CONFIG
    compiletest expected-output TEST [--revision R] [--compare-mode M] [--kind K]
    compiletest modes
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from compiletest.config import (
    UI_EXTENSIONS,
    UI_STDERR,
    Config,
    ConfigError,
    TestPaths,
    expected_output_path,
    load_config,
)
from compiletest.core import CompareMode, Mode
from compiletest.diagnostics import DiagnosticCollector, DiagnosticSeverity


def _status(present: bool) -> str:
    return "yes" if present else "no"


def print_summary(config: Config) -> None:
    """Print what a run with this configuration would do."""
    print("=" * 70)
    print("CONFIGURATION SUMMARY")
    print("=" * 70)
    print(f"\n  {'mode':30s} {config.mode}")
    compare = str(config.compare_mode) if config.compare_mode is not None else "-"
    print(f"  {'compare mode':30s} {compare}")
    print(f"  {'stage':30s} {config.stage_id}")
    print(f"  {'host':30s} {config.host}")
    print(f"  {'target':30s} {config.target}")
    print(f"  {'src base':30s} {config.src_base}")
    print(f"  {'build base':30s} {config.build_base}")

    print("\nTools:")
    print(f"  {'rustdoc':30s} {_status(config.rustdoc_path is not None)}")
    print(f"  {'FileCheck':30s} {_status(config.llvm_filecheck is not None)}")
    print(f"  {'valgrind':30s} {_status(config.has_valgrind)}")
    print(f"  {'gdb':30s} {_status(config.has_gdb)}")
    print(f"  {'lldb':30s} {_status(config.has_lldb)}")
    print(f"  {'nodejs':30s} {_status(config.nodejs is not None)}")
    print(f"  {'remote execution':30s} {_status(config.runs_remotely)}")
    print()


def cmd_check_config(args: argparse.Namespace) -> int:
    print(f"Loading configuration from: {args.config}")
    diag = DiagnosticCollector()
    try:
        config = load_config(args.config, diag)
    except ConfigError as e:
        warnings = [d for d in diag.get_all() if d.severity == DiagnosticSeverity.WARNING]
        print()
        print("ERRORS:")
        for error in e.diagnostics:
            print(f"  ✗ {error}")
        if warnings:
            print()
            print("WARNINGS:")
            for warning in warnings:
                print(f"  ⚠ {warning}")
        print()
        print("Configuration is INVALID.")
        return 1

    print("✓ Configuration is valid")
    print()
    if diag.get_all():
        print("WARNINGS:")
        for warning in diag.get_all():
            print(f"  ⚠ {warning}")
        print()
    print_summary(config)
    return 0


def cmd_expected_output(args: argparse.Namespace) -> int:
    test = Path(args.test)
    base = Path(args.base) if args.base else test.parent
    try:
        testpaths = TestPaths.from_file(test, base)
    except ValueError:
        print(f"ERROR: {test} is not inside {base}", file=sys.stderr)
        return 1
    compare_mode = CompareMode.parse(args.compare_mode) if args.compare_mode else None
    print(expected_output_path(testpaths, args.revision, compare_mode, args.kind))
    return 0


def cmd_modes(args: argparse.Namespace) -> int:
    for mode in Mode:
        print(f"{mode.value:20s} {mode.disambiguator() or '-'}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="compiletest",
        description="Inspect compiler test harness configuration and golden file names.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    check = sub.add_parser("check-config", help="validate a YAML run configuration")
    check.add_argument("config", help="path to the configuration file")
    check.set_defaults(func=cmd_check_config)

    expected = sub.add_parser("expected-output", help="print the golden file path for a test")
    expected.add_argument("test", help="path to the test file")
    expected.add_argument("--base", help="directory the test was discovered under")
    expected.add_argument("--revision", help="test revision")
    expected.add_argument("--compare-mode", help="compare mode tag, e.g. nll")
    expected.add_argument("--kind", choices=UI_EXTENSIONS, default=UI_STDERR)
    expected.set_defaults(func=cmd_expected_output)

    modes = sub.add_parser("modes", help="list test modes and their output suffixes")
    modes.set_defaults(func=cmd_modes)

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
