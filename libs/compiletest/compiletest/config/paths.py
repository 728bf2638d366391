"""Test file identity and the paths derived from it.

Golden files are named ``<stem>[.<revision>][.<compare-mode>].<kind>``. Every
golden file already on disk follows that order, so it must not change.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from compiletest.config.config import Config
from compiletest.core.compare_mode import CompareMode

UI_STDERR = "stderr"
UI_STDOUT = "stdout"
UI_EXTENSIONS: tuple[str, ...] = (UI_STDERR, UI_STDOUT)


@dataclass(frozen=True)
class TestPaths:
    """One test file and where it was found."""

    file: Path  # e.g. ui/foo/bar/baz.rs
    base: Path  # e.g. ui, auxiliary
    relative_dir: Path  # e.g. foo/bar

    @classmethod
    def from_file(cls, file: Path, base: Path) -> TestPaths:
        """Describe ``file`` relative to the directory it was discovered in.

        Raises:
            ValueError: ``file`` is not inside ``base``.
        """
        file = Path(file)
        base = Path(base)
        return cls(file=file, base=base, relative_dir=file.parent.relative_to(base))


def expected_output_path(
    testpaths: TestPaths,
    revision: str | None,
    compare_mode: CompareMode | None,
    kind: str,
) -> Path:
    """Golden file for ``kind`` output, e.g. ``foo.stderr`` from ``foo.rs``."""
    if kind not in UI_EXTENSIONS:
        raise AssertionError(f"unknown output kind {kind!r}, expected one of {UI_EXTENSIONS}")
    parts: list[str] = []
    if revision is not None:
        parts.append(revision)
    if compare_mode is not None:
        parts.append(compare_mode.encode())
    parts.append(kind)
    return testpaths.file.with_suffix("." + ".".join(parts))


def output_testname_unique(config: Config, testpaths: TestPaths, revision: str | None) -> Path:
    """Directory name for one variant of a test.

    Revision, compare mode and the mode's disambiguator all go in, so
    variants that run at the same time never share a build directory.
    """
    name = testpaths.file.stem
    if revision is not None:
        name += f".{revision}"
    if config.compare_mode is not None:
        name += f".{config.compare_mode}"
    name += config.mode.disambiguator()
    return Path(name)


def output_base_dir(config: Config, testpaths: TestPaths, revision: str | None) -> Path:
    """Build directory for one variant of a test, mirroring the source tree."""
    return (
        config.build_base
        / testpaths.relative_dir
        / output_testname_unique(config, testpaths, revision)
    )


def output_base_name(config: Config, testpaths: TestPaths, revision: str | None) -> Path:
    """Path prefix for the files a test variant produces (binaries, logs)."""
    return output_base_dir(config, testpaths, revision) / testpaths.file.stem
