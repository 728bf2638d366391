"""Shared fixtures for compiletest unit tests."""

from pathlib import Path

import pytest

from compiletest.config import Config, TestPaths
from compiletest.core import Mode


def make_config(**overrides) -> Config:
    """A Config with only the required fields set, plus ``overrides``."""
    values = dict(
        compile_lib_path=Path("/build/stage1/lib"),
        run_lib_path=Path("/build/stage1/lib/rustlib/lib"),
        rustc_path=Path("/build/stage1/bin/rustc"),
        src_base=Path("/src/test/ui"),
        build_base=Path("/build/test/ui"),
        stage_id="stage1-x86_64-unknown-linux-gnu",
        mode=Mode.UI,
        target="x86_64-unknown-linux-gnu",
        host="x86_64-unknown-linux-gnu",
    )
    values.update(overrides)
    return Config(**values)


@pytest.fixture
def make():
    """Factory for Configs that differ from the minimal one."""
    return make_config


@pytest.fixture
def config() -> Config:
    return make_config()


@pytest.fixture
def foo_test() -> TestPaths:
    """``foo.rs`` at the root of the ui suite."""
    return TestPaths(
        file=Path("/src/test/ui/foo.rs"),
        base=Path("/src/test/ui"),
        relative_dir=Path(""),
    )


@pytest.fixture
def nested_test() -> TestPaths:
    """``borrowck/two-phase.rs`` one directory below the suite root."""
    return TestPaths.from_file(
        Path("/src/test/ui/borrowck/two-phase.rs"),
        Path("/src/test/ui"),
    )
