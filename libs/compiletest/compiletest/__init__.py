"""Mode taxonomy, run configuration and golden-file naming for a compiler test harness."""

from compiletest.config import (
    UI_EXTENSIONS,
    UI_STDERR,
    UI_STDOUT,
    Config,
    ConfigError,
    TestPaths,
    expected_output_path,
    load_config,
)
from compiletest.core import ColorConfig, CompareMode, Mode, ModeParseError

__version__ = "0.1.0"

__all__ = [
    "Mode",
    "ModeParseError",
    "CompareMode",
    "ColorConfig",
    "Config",
    "ConfigError",
    "TestPaths",
    "expected_output_path",
    "load_config",
    "UI_EXTENSIONS",
    "UI_STDERR",
    "UI_STDOUT",
]
