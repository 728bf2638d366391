"""Loading a Config from a YAML document.

The document is checked against ``schema.json`` first; every schema
violation becomes an error diagnostic so the user sees all of them at once.
Values that need more than a type check (modes, colours, version banners)
are converted afterwards.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema
import yaml

from compiletest.config.config import Config
from compiletest.config.errors import ConfigError
from compiletest.core.color import ColorConfig
from compiletest.core.compare_mode import CompareMode
from compiletest.core.directives import parse_declared_mode
from compiletest.core.versions import extract_gdb_version, extract_lldb_version
from compiletest.diagnostics.collector import DiagnosticCollector
from compiletest.diagnostics.location import SourceLocation

SCHEMA_PATH = Path(__file__).parent / "schema.json"

PATH_FIELDS = frozenset({
    "compile_lib_path",
    "run_lib_path",
    "rustc_path",
    "rustdoc_path",
    "llvm_filecheck",
    "src_base",
    "build_base",
    "logfile",
    "android_cross_path",
    "remote_test_client",
})


def load_schema() -> dict:
    """Load the JSON schema for configuration documents."""
    with open(SCHEMA_PATH, "r") as f:
        return json.load(f)


def load_config(path: str | Path, diag: DiagnosticCollector | None = None) -> Config:
    """Read and validate a YAML configuration file.

    Relative paths in the document are resolved against the file's directory.
    Warnings are recorded in ``diag`` when one is given.

    Raises:
        ConfigError: the file cannot be read, is not UTF-8 YAML, or fails validation.
    """
    path = Path(path)
    source = str(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        collector = DiagnosticCollector()
        collector.error("config file not found", SourceLocation(source))
        raise ConfigError(collector.get_all())
    except OSError as e:
        collector = DiagnosticCollector()
        collector.error(f"cannot read config file: {e.strerror or e}", SourceLocation(source))
        raise ConfigError(collector.get_all()) from e
    except UnicodeDecodeError as e:
        collector = DiagnosticCollector()
        collector.error(
            f"config file is not valid UTF-8: {e.reason} at byte {e.start}",
            SourceLocation(source),
        )
        raise ConfigError(collector.get_all()) from e
    except yaml.YAMLError as e:
        collector = DiagnosticCollector()
        mark = getattr(e, "problem_mark", None)
        if mark is not None:
            location = SourceLocation(source, mark.line + 1, mark.column + 1)
        else:
            location = SourceLocation(source)
        collector.error(f"invalid YAML: {e}", location)
        raise ConfigError(collector.get_all()) from e
    return config_from_mapping(data, source=source, base_dir=path.parent, diag=diag)


def config_from_mapping(
    data: Any,
    *,
    source: str = "<config>",
    base_dir: Path | None = None,
    diag: DiagnosticCollector | None = None,
) -> Config:
    """Build a Config from already-parsed configuration data.

    An unknown ``compare_mode`` ends the process, like the equivalent
    command-line option does.
    """
    collector = DiagnosticCollector()

    if not isinstance(data, dict):
        collector.error("configuration document must be a mapping", SourceLocation(source))
        raise ConfigError(collector.get_all())

    validator = jsonschema.Draft7Validator(load_schema())
    for error in sorted(validator.iter_errors(data), key=lambda e: [str(p) for p in e.path]):
        key = ".".join(str(p) for p in error.path) or None
        collector.error(error.message, SourceLocation(source, key=key))
    if collector.has_errors():
        _forward(collector, diag)
        raise ConfigError(collector.errors())

    values: dict[str, Any] = {}
    for name, raw in data.items():
        location = SourceLocation(source, key=name)
        if name in PATH_FIELDS:
            values[name] = _resolve_path(raw, base_dir)
        elif name == "mode":
            values[name] = parse_declared_mode(raw, location, collector)
        elif name == "compare_mode":
            values[name] = CompareMode.parse(raw) if raw is not None else None
        elif name == "color":
            try:
                values[name] = ColorConfig.parse(raw)
            except ValueError as e:
                collector.error(str(e), location)
        elif name == "gdb_version":
            values[name] = _gdb_version(raw, location, collector)
        elif name == "lldb_version":
            values[name] = (extract_lldb_version(raw) or raw) if raw is not None else None
        else:
            values[name] = raw

    _check_consistency(values, source, collector)
    _forward(collector, diag)
    if collector.has_errors():
        raise ConfigError(collector.errors())
    return Config(**values)


def _resolve_path(raw: str | None, base_dir: Path | None) -> Path | None:
    if raw is None:
        return None
    if raw == "":
        return Path()
    path = Path(raw).expanduser()
    if base_dir is not None and not path.is_absolute():
        path = base_dir / path
    return path


def _gdb_version(
    raw: int | str | None,
    location: SourceLocation,
    collector: DiagnosticCollector,
) -> int | None:
    if raw is None or isinstance(raw, int):
        return raw
    version = extract_gdb_version(raw)
    if version is None:
        collector.warning(
            f"could not find a version number in {raw!r}; gdb version treated as unknown",
            location,
        )
    return version


def _check_consistency(values: dict[str, Any], source: str, collector: DiagnosticCollector) -> None:
    if values.get("force_valgrind") and values.get("valgrind_path") is None:
        collector.warning(
            "force_valgrind is set but valgrind_path is not; run-pass-valgrind tests will fail",
            SourceLocation(source, key="force_valgrind"),
        )
    if values.get("gdb_version") is not None and values.get("gdb") is None:
        collector.warning(
            "gdb_version is set without gdb; debuginfo-gdb tests will be skipped",
            SourceLocation(source, key="gdb_version"),
        )
    if values.get("quiet") and values.get("verbose"):
        collector.warning(
            "both quiet and verbose are set",
            SourceLocation(source, key="quiet"),
        )


def _forward(collector: DiagnosticCollector, diag: DiagnosticCollector | None) -> None:
    if diag is not None:
        diag.extend(collector.get_all())
