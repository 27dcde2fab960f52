"""Assertion system for checking filesystem state."""

from fileassert.assertions.base import AssertionResult, InvalidArgumentsError
from fileassert.assertions.filesystem import (
    check_file_contains,
    check_file_empty,
    check_file_exists,
    check_file_not_contains,
    check_file_not_empty,
    check_file_not_exists,
    check_file_size_equals,
    evaluate_assertion,
)

__all__ = [
    "AssertionResult",
    "InvalidArgumentsError",
    "check_file_contains",
    "check_file_empty",
    "check_file_exists",
    "check_file_not_contains",
    "check_file_not_empty",
    "check_file_not_exists",
    "check_file_size_equals",
    "evaluate_assertion",
]
