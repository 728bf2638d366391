"""Conformance runner backed by the compiletest library."""

from __future__ import annotations

from pathlib import Path

from compiletest.config import (
    Config,
    TestPaths,
    expected_output_path,
    output_base_dir,
)
from compiletest.core import CompareMode, Mode, ModeParseError
from tests.conformance.runner import NamingResult

SRC_BASE = Path("src/test")
BUILD_BASE = Path("build/test")


class LibraryRunner:
    """Resolves names through ``expected_output_path`` and ``output_base_dir``."""

    name = "library"

    def resolve(
        self,
        test: str,
        *,
        mode: str = "ui",
        revision: str | None = None,
        compare_mode: str | None = None,
        kind: str = "stderr",
    ) -> NamingResult:
        try:
            parsed_mode = Mode.parse(mode)
        except ModeParseError as e:
            return NamingResult(golden=None, errors=[str(e)])

        compare = CompareMode.parse(compare_mode) if compare_mode is not None else None
        config = Config(
            compile_lib_path=Path("build/lib"),
            run_lib_path=Path("build/lib"),
            rustc_path=Path("build/bin/rustc"),
            src_base=SRC_BASE,
            build_base=BUILD_BASE,
            stage_id="stage1",
            mode=parsed_mode,
            target="x86_64-unknown-linux-gnu",
            host="x86_64-unknown-linux-gnu",
            compare_mode=compare,
        )
        testpaths = TestPaths.from_file(SRC_BASE / test, SRC_BASE)
        golden = expected_output_path(testpaths, revision, compare, kind)
        build_dir = output_base_dir(config, testpaths, revision)
        return NamingResult(
            golden=golden.relative_to(SRC_BASE).as_posix(),
            build_dir=build_dir.relative_to(BUILD_BASE).as_posix(),
        )
