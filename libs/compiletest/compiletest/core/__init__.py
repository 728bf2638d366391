"""Core subpackage (Layer 1 -- depends only on diagnostics)."""

from compiletest.core.color import ColorConfig
from compiletest.core.compare_mode import CompareMode
from compiletest.core.directives import parse_declared_mode
from compiletest.core.modes import Mode, ModeParseError
from compiletest.core.versions import extract_gdb_version, extract_lldb_version

__all__ = [
    "Mode",
    "ModeParseError",
    "CompareMode",
    "ColorConfig",
    "parse_declared_mode",
    "extract_gdb_version",
    "extract_lldb_version",
]
