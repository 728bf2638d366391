"""Pytest configuration for the naming conformance suite.

Every case names a test file relative to ``src/test`` plus the mode,
revision, compare mode and output kind it runs under; a runner answers with
the golden file and build directory it would use. Golden names are
compared verbatim because existing ``.stderr``/``.stdout`` files on disk
were written under exactly those names.
"""

import pytest
from tests.conformance.runners.library_runner import LibraryRunner


def get_available_runners():
    """Return the naming runners to check; another harness can add its own here."""
    return [LibraryRunner()]


@pytest.fixture(params=get_available_runners(), ids=lambda r: r.name)
def runner(request):
    """Provide each naming runner in turn.

    Currently includes:
    - library: ``expected_output_path`` and ``output_base_dir`` from compiletest
    """
    return request.param
