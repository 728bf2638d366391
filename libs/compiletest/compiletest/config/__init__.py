"""Run configuration subpackage (Layer 2 -- depends on core, diagnostics)."""

from compiletest.config.config import Config
from compiletest.config.errors import ConfigError
from compiletest.config.loader import config_from_mapping, load_config, load_schema
from compiletest.config.paths import (
    UI_EXTENSIONS,
    UI_STDERR,
    UI_STDOUT,
    TestPaths,
    expected_output_path,
    output_base_dir,
    output_base_name,
    output_testname_unique,
)

__all__ = [
    "Config",
    "ConfigError",
    "TestPaths",
    "expected_output_path",
    "output_testname_unique",
    "output_base_dir",
    "output_base_name",
    "load_config",
    "config_from_mapping",
    "load_schema",
    "UI_EXTENSIONS",
    "UI_STDERR",
    "UI_STDOUT",
]
