"""Base data structures for the assertion system."""

from __future__ import annotations

from dataclasses import dataclass, field

from fileassert.output import decorate, print_kv_single, print_kv_single_or_multi


class InvalidArgumentsError(ValueError):
    """Raised when an assertion is called with missing or malformed arguments."""


@dataclass
class AssertionResult:
    """Result of evaluating a single filesystem assertion.

    Attributes:
        name: Identifier for the assertion (e.g. "file_exists:out/hello.txt").
        passed: Whether the predicate held.
        message: Diagnostic title on failure, empty on success.
        details: Ordered key/value lines shown under the title (``path``,
            ``output``). Paths are already rewritten for display.
        width: Key column width used when rendering ``details``.
        multiline_keys: Keys whose values may switch the block to the
            multi-line layout. All other keys use the single-line layout.
        weight: Relative importance when results are aggregated in a suite.
    """

    name: str
    passed: bool
    message: str = ""
    details: list[tuple[str, str]] = field(default_factory=list)
    width: int = 4
    multiline_keys: frozenset[str] = frozenset()
    weight: float = 1.0

    @property
    def status(self) -> int:
        return 0 if self.passed else 1

    @property
    def diagnostic(self) -> str | None:
        """Rendered failure text, or None when the assertion passed."""
        if self.passed:
            return None
        body = ""
        for key, value in self.details:
            if key in self.multiline_keys:
                body += print_kv_single_or_multi(self.width, key, value)
            else:
                body += print_kv_single(self.width, key, value)
        return decorate(self.message, body)
