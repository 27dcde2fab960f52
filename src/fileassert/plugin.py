"""pytest plugin exposing the ``file_assert`` fixture.

Configure path display rewriting in ``pytest.ini``/``pyproject.toml``::

    [tool.pytest.ini_options]
    fileassert_path_remove = "/tmp/pytest-of-ci"
    fileassert_path_add = "<tmp>"
"""

from __future__ import annotations

import logging
from typing import Any

import pytest

from fileassert.assertions import AssertionResult
from fileassert.config import PathDisplay
from fileassert.suite import FileAssertions


def pytest_addoption(parser):
    parser.addini(
        "fileassert_path_remove",
        default="",
        help="Path prefix to replace in fileassert diagnostics",
    )
    parser.addini(
        "fileassert_path_add",
        default="",
        help="Replacement for fileassert_path_remove in diagnostics",
    )


def display_from_config(config: Any) -> PathDisplay:
    return PathDisplay(
        remove=config.getini("fileassert_path_remove") or "",
        add=config.getini("fileassert_path_add") or "",
    )


class PytestFileAssertions(FileAssertions):
    """FileAssertions that fail the current test instead of returning a failure."""

    def _check(self, result: AssertionResult) -> AssertionResult:
        __tracebackhide__ = True
        if not result.passed:
            pytest.fail(result.diagnostic, pytrace=False)
        return result

    def exists(self, path):
        __tracebackhide__ = True
        return self._check(super().exists(path))

    def not_exists(self, path):
        __tracebackhide__ = True
        return self._check(super().not_exists(path))

    def empty(self, path):
        __tracebackhide__ = True
        return self._check(super().empty(path))

    def not_empty(self, path):
        __tracebackhide__ = True
        return self._check(super().not_empty(path))

    def contains(self, path, regex):
        __tracebackhide__ = True
        return self._check(super().contains(path, regex))

    def not_contains(self, path, regex):
        __tracebackhide__ = True
        return self._check(super().not_contains(path, regex))

    def size_equals(self, path, size):
        __tracebackhide__ = True
        return self._check(super().size_equals(path, size))


@pytest.fixture
def file_assert(request) -> PytestFileAssertions:
    """Filesystem assertions that fail the test with a diagnostic."""
    return PytestFileAssertions(
        display=display_from_config(request.config),
        logger=logging.getLogger("fileassert.pytest"),
    )
