"""Filesystem assertions for test suites."""

from fileassert.assertions import AssertionResult, InvalidArgumentsError
from fileassert.config import PathDisplay
from fileassert.suite import FileAssertions

__all__ = ["AssertionResult", "FileAssertions", "InvalidArgumentsError", "PathDisplay"]
