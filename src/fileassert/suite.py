"""Bound assertion helpers and YAML suite execution."""

from __future__ import annotations

import logging

from fileassert.assertions import (
    AssertionResult,
    check_file_contains,
    check_file_empty,
    check_file_exists,
    check_file_not_contains,
    check_file_not_empty,
    check_file_not_exists,
    check_file_size_equals,
    evaluate_assertion,
)
from fileassert.assertions.filesystem import PathArg
from fileassert.config import PathDisplay, SuiteConfig


class FileAssertions:
    """Assertion set bound to one path display configuration and logger."""

    def __init__(
        self,
        display: PathDisplay | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.display = display or PathDisplay()
        self.logger = logger or logging.getLogger(__name__)

    def exists(self, path: PathArg) -> AssertionResult:
        return check_file_exists(path, display=self.display, logger=self.logger)

    def not_exists(self, path: PathArg) -> AssertionResult:
        return check_file_not_exists(path, display=self.display, logger=self.logger)

    def empty(self, path: PathArg) -> AssertionResult:
        return check_file_empty(path, display=self.display, logger=self.logger)

    def not_empty(self, path: PathArg) -> AssertionResult:
        return check_file_not_empty(path, display=self.display, logger=self.logger)

    def contains(self, path: PathArg, regex: str) -> AssertionResult:
        return check_file_contains(path, regex, display=self.display, logger=self.logger)

    def not_contains(self, path: PathArg, regex: str) -> AssertionResult:
        return check_file_not_contains(
            path, regex, display=self.display, logger=self.logger
        )

    def size_equals(self, path: PathArg, size: int | str) -> AssertionResult:
        return check_file_size_equals(
            path, size, display=self.display, logger=self.logger
        )


def run_suite(
    config: SuiteConfig, logger: logging.Logger | None = None
) -> list[AssertionResult]:
    """Evaluate every assertion in *config* in order and collect the results."""
    logger = logger or logging.getLogger(__name__)
    logger.info(f"Running suite '{config.name}' ({len(config.assertions)} assertions)")

    results = []
    for assertion in config.assertions:
        result = evaluate_assertion(
            assertion, display=config.path_display, logger=logger
        )
        results.append(result)

    failed = sum(1 for r in results if not r.passed)
    logger.info(f"Suite '{config.name}' finished: {len(results) - failed} passed, {failed} failed")
    return results
