"""Version probes for the debuggers a run may drive."""

from __future__ import annotations

import re

# major.minor with optional .patch, not preceded by another digit or dot
_GDB_VERSION_RE = re.compile(r"(?<![\d.])(\d+)\.(\d+)(?:\.(\d+))?")
_LLDB_APPLE_RE = re.compile(r"^lldb-(\d+)")
_LLDB_RELEASE_RE = re.compile(r"^lldb version (\d+)\.(\d+)")


def extract_gdb_version(full_version_line: str) -> int | None:
    """Encode the version in a ``gdb --version`` banner as one comparable int.

    The result is ``((major * 1000) + minor) * 1000 + patch``, so 7.11.1 becomes
    7011001. Anything after the patch number (dates, ``-git``, distro
    suffixes) is ignored.

    >>> extract_gdb_version("GNU gdb (GDB) 7.11.1")
    7011001
    >>> extract_gdb_version("GNU gdb (GDB) Fedora 7.12-24.fc25")
    7012000
    """
    match = _GDB_VERSION_RE.search(full_version_line.strip())
    if match is None:
        return None
    major = int(match.group(1))
    minor = int(match.group(2))
    patch = int(match.group(3)) if match.group(3) else 0
    return ((major * 1000) + minor) * 1000 + patch


def extract_lldb_version(full_version_line: str) -> str | None:
    """Return the comparable part of an ``lldb --version`` banner.

    Apple builds print ``lldb-350.0.0`` and yield ``"350"``; upstream releases
    print ``lldb version 6.0.1`` and yield ``"6.0"``.
    """
    line = full_version_line.strip()
    match = _LLDB_APPLE_RE.match(line)
    if match is not None:
        return match.group(1)
    match = _LLDB_RELEASE_RE.match(line)
    if match is not None:
        return f"{match.group(1)}.{match.group(2)}"
    return None
