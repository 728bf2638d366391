"""The resolved settings for one harness run."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from compiletest.core.color import ColorConfig
from compiletest.core.compare_mode import CompareMode
from compiletest.core.modes import Mode


@dataclass(frozen=True)
class Config:
    """Every tool path, version probe and switch a test run reads.

    Built once at start-up and shared read-only by all test workers. Fields
    typed ``X | None`` describe tools or probes that may be missing on the
    host; consumers skip the tests that need them.
    """

    # Library paths required for running the compiler
    compile_lib_path: Path
    # Library paths required for running compiled programs
    run_lib_path: Path
    rustc_path: Path
    # Directory containing the tests to run
    src_base: Path
    # Directory where programs are built
    build_base: Path
    # Name of the stage being built (stage1, etc)
    stage_id: str
    mode: Mode
    # Target system to be tested
    target: str
    # Host triple for the compiler being invoked
    host: str

    rustdoc_path: Path | None = None
    # Python executable used to drive LLDB
    lldb_python: str = "python"
    # Python executable used for htmldocck
    docck_python: str = "python"
    llvm_filecheck: Path | None = None
    valgrind_path: str | None = None
    # Fail run-pass-valgrind tests when valgrind is unavailable instead of
    # running them as plain run-pass tests
    force_valgrind: bool = False

    run_ignored: bool = False
    # Only run tests whose name matches this filter
    filter: str | None = None
    # Match the filter exactly rather than as a substring
    filter_exact: bool = False
    # Write a parseable log of the tests that were run
    logfile: Path | None = None
    # Command line to prefix program execution with, e.g. valgrind
    runtool: str | None = None
    host_rustcflags: str | None = None
    target_rustcflags: str | None = None

    gdb: str | None = None
    # ((major * 1000) + minor) * 1000 + patch
    gdb_version: int | None = None
    gdb_native_rust: bool = False
    lldb_version: str | None = None
    llvm_version: str | None = None
    system_llvm: bool = False

    android_cross_path: Path = Path()
    adb_path: str = ""
    adb_test_dir: str = ""
    # Whether an android device is available
    adb_device_status: bool = False
    # Directory containing LLDB's Python module
    lldb_python_dir: str | None = None

    verbose: bool = False
    # One character per test instead of one line
    quiet: bool = False
    color: ColorConfig = ColorConfig.AUTO
    remote_test_client: Path | None = None
    # Selects which golden files the actual output is compared to
    compare_mode: CompareMode | None = None

    # run-make toolchain and LLVM component settings
    cc: str = ""
    cxx: str = ""
    cflags: str = ""
    ar: str = ""
    linker: str | None = None
    llvm_components: str = ""
    llvm_cxxflags: str = ""
    nodejs: str | None = None

    @property
    def has_gdb(self) -> bool:
        return self.gdb is not None

    @property
    def has_lldb(self) -> bool:
        return self.lldb_version is not None

    @property
    def has_valgrind(self) -> bool:
        return self.valgrind_path is not None

    @property
    def is_android_target(self) -> bool:
        return "android" in self.target

    @property
    def runs_remotely(self) -> bool:
        """True when compiled programs execute somewhere other than the host."""
        if self.remote_test_client is not None:
            return True
        return self.is_android_target and self.adb_device_status

    def matches_filter(self, test_name: str) -> bool:
        """Return True if ``test_name`` passes the configured name filter."""
        if self.filter is None:
            return True
        if self.filter_exact:
            return test_name == self.filter
        return self.filter in test_name
