"""Filesystem assertion checks (existence, emptiness, content, size)."""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path
from typing import Any

from pydantic import BaseModel

from fileassert.assertions.base import AssertionResult, InvalidArgumentsError
from fileassert.config import PathDisplay

_DEFAULT_DISPLAY = PathDisplay()

PathArg = str | os.PathLike


def _require_path(path: PathArg | None) -> str:
    if path is None or str(path) == "":
        raise InvalidArgumentsError("invalid arguments: a path is required")
    path = os.fspath(path)
    if "\0" in path:
        raise InvalidArgumentsError(f"invalid arguments: path contains a NUL byte: {path!r}")
    return path


def _failure(
    name: str,
    title: str,
    path: str,
    display: PathDisplay | None,
    **extra: Any,
) -> AssertionResult:
    shown = (display or _DEFAULT_DISPLAY).apply(path)
    return AssertionResult(
        name=name, passed=False, message=title, details=[("path", shown)], **extra
    )


def _size(path: str) -> int | None:
    try:
        return os.stat(path).st_size
    except OSError:
        return None


def _read_text(path: str) -> str | None:
    try:
        return Path(path).read_bytes().decode("utf-8", errors="replace")
    except OSError:
        return None


def _compile(regex: str | None) -> re.Pattern[str]:
    if regex is None:
        raise InvalidArgumentsError("invalid arguments: a regex is required")
    try:
        return re.compile(regex)
    except re.error as e:
        raise InvalidArgumentsError(f"invalid arguments: bad regex '{regex}': {e}") from e


def _search_lines(pattern: re.Pattern[str], content: str) -> bool:
    """Match *pattern* against each line separately, like a line-oriented grep."""
    if not content:
        return False
    lines = content.split("\n")
    if content.endswith("\n"):
        lines.pop()
    return any(pattern.search(line) is not None for line in lines)


def check_file_exists(
    path: PathArg,
    *,
    display: PathDisplay | None = None,
    logger: logging.Logger | None = None,
) -> AssertionResult:
    """Check that a file or directory exists.

    Logical complement of :func:`check_file_not_exists`.
    """
    path = _require_path(path)
    logger = logger or logging.getLogger(__name__)
    logger.info(f"Checking file_exists: {path}")

    passed = os.path.exists(path)
    logger.info(f"File {path} exists={passed}")

    if passed:
        return AssertionResult(name=f"file_exists:{path}", passed=True)
    return _failure(f"file_exists:{path}", "file does not exist", path, display)


def check_file_not_exists(
    path: PathArg,
    *,
    display: PathDisplay | None = None,
    logger: logging.Logger | None = None,
) -> AssertionResult:
    """Check that nothing exists at a path.

    Logical complement of :func:`check_file_exists`.
    """
    path = _require_path(path)
    logger = logger or logging.getLogger(__name__)
    logger.info(f"Checking file_not_exists: {path}")

    exists = os.path.exists(path)
    logger.info(f"File {path} exists={exists}")

    if not exists:
        return AssertionResult(name=f"file_not_exists:{path}", passed=True)
    return _failure(
        f"file_not_exists:{path}",
        "file exists, but it was expected to be absent",
        path,
        display,
    )


def check_file_empty(
    path: PathArg,
    *,
    display: PathDisplay | None = None,
    logger: logging.Logger | None = None,
) -> AssertionResult:
    """Check that a file has zero size.

    A path that does not exist has no size and therefore counts as empty.
    On failure the current contents are included in the diagnostic.
    """
    path = _require_path(path)
    logger = logger or logging.getLogger(__name__)
    logger.info(f"Checking file_empty: {path}")

    size = _size(path)
    logger.info(f"File {path} size={size}")

    if not size:
        return AssertionResult(name=f"file_empty:{path}", passed=True)

    content = _read_text(path)
    if content is None:
        logger.warning(f"Could not read {path} for diagnostic output")
        content = ""

    result = _failure(
        f"file_empty:{path}",
        "file is not empty",
        path,
        display,
        width=8,
        multiline_keys=frozenset({"output"}),
    )
    result.details.append(("output", content.rstrip("\n")))
    return result


def check_file_not_empty(
    path: PathArg,
    *,
    display: PathDisplay | None = None,
    logger: logging.Logger | None = None,
) -> AssertionResult:
    """Check that a file has non-zero size. Missing paths fail."""
    path = _require_path(path)
    logger = logger or logging.getLogger(__name__)
    logger.info(f"Checking file_not_empty: {path}")

    size = _size(path)
    logger.info(f"File {path} size={size}")

    if size:
        return AssertionResult(name=f"file_not_empty:{path}", passed=True)
    return _failure(
        f"file_not_empty:{path}",
        "file empty, but it was expected to contain something",
        path,
        display,
    )


def check_file_contains(
    path: PathArg,
    regex: str,
    *,
    display: PathDisplay | None = None,
    logger: logging.Logger | None = None,
) -> AssertionResult:
    """Check that a file contains text matching a regex.

    Each line is searched on its own, so a match never spans a line break
    and ``^``/``$`` anchor at line boundaries. An empty file never matches.
    """
    path = _require_path(path)
    pattern = _compile(regex)
    logger = logger or logging.getLogger(__name__)
    logger.info(f"Checking file_contains: {path} for pattern '{regex}'")

    content = _read_text(path)
    if content is None:
        logger.warning(f"File {path} not found or not readable")
        matched = False
    else:
        matched = _search_lines(pattern, content)
        logger.info(f"Pattern '{regex}' matched={matched} in {path}")

    if matched:
        return AssertionResult(name=f"file_contains:{path}", passed=True)
    return _failure(f"file_contains:{path}", "file does not contain regex", path, display)


def check_file_not_contains(
    path: PathArg,
    regex: str,
    *,
    display: PathDisplay | None = None,
    logger: logging.Logger | None = None,
) -> AssertionResult:
    """Check that an existing file has no text matching a regex.

    Logical complement of :func:`check_file_contains` for readable files. A
    missing or unreadable file fails as well.
    """
    path = _require_path(path)
    pattern = _compile(regex)
    logger = logger or logging.getLogger(__name__)
    logger.info(f"Checking file_not_contains: {path} for pattern '{regex}'")

    content = _read_text(path)
    if content is None:
        logger.warning(f"File {path} not found or not readable")
        passed = False
    else:
        passed = not _search_lines(pattern, content)
        logger.info(f"Pattern '{regex}' matched={not passed} in {path}")

    if passed:
        return AssertionResult(name=f"file_not_contains:{path}", passed=True)
    return _failure(f"file_not_contains:{path}", "file contains regex", path, display)


def check_file_size_equals(
    path: PathArg,
    size: int | str,
    *,
    display: PathDisplay | None = None,
    logger: logging.Logger | None = None,
) -> AssertionResult:
    """Check that a file is exactly ``size`` bytes long.

    The expected value is compared as text against the decimal byte count, so
    anything non-numeric never matches. Missing paths fail.
    """
    path = _require_path(path)
    if size is None:
        raise InvalidArgumentsError("invalid arguments: an expected size is required")
    logger = logger or logging.getLogger(__name__)
    logger.info(f"Checking file_size_equals: {path} expecting {size} bytes")

    actual = _size(path)
    passed = actual is not None and str(size) == str(actual)
    logger.info(f"File {path} size={actual}, expected={size}, passed={passed}")

    if passed:
        return AssertionResult(name=f"file_size_equals:{path}", passed=True)
    return _failure(
        f"file_size_equals:{path}",
        "file size does not match expected size",
        path,
        display,
    )


def evaluate_assertion(
    assertion_dict: dict[str, Any] | BaseModel,
    *,
    display: PathDisplay | None = None,
    logger: logging.Logger | None = None,
) -> AssertionResult:
    """Dispatch an assertion dict to the appropriate checker.

    Supported formats:
        {"file_exists": "out/report.txt"}
        {"file_not_exists": "out/tmp.lock"}
        {"file_empty": "err.log"}
        {"file_not_empty": "out.log"}
        {"file_contains": {"path": "out.log", "pattern": "^done"}}
        {"file_not_contains": {"path": "out.log", "pattern": "Traceback"}}
        {"file_size_equals": {"path": "blob.bin", "size": 6}}

    All assertion types support an optional ``weight`` field (default 1.0).

    Raises ValueError for unknown assertion types.
    """
    if not assertion_dict:
        raise ValueError("Empty assertion dict")

    if isinstance(assertion_dict, BaseModel):
        assertion_dict = assertion_dict.model_dump()

    if logger is None:
        logger = logging.getLogger(__name__)

    weight = assertion_dict.get("weight", 1.0)

    atype = next((k for k in assertion_dict if k != "weight"), None)
    if atype is None:
        raise ValueError("Empty assertion dict")
    value = assertion_dict[atype]

    if atype == "file_exists":
        result = check_file_exists(value, display=display, logger=logger)
    elif atype == "file_not_exists":
        result = check_file_not_exists(value, display=display, logger=logger)
    elif atype == "file_empty":
        result = check_file_empty(value, display=display, logger=logger)
    elif atype == "file_not_empty":
        result = check_file_not_empty(value, display=display, logger=logger)
    elif atype == "file_contains":
        result = check_file_contains(
            value["path"], value["pattern"], display=display, logger=logger
        )
    elif atype == "file_not_contains":
        result = check_file_not_contains(
            value["path"], value["pattern"], display=display, logger=logger
        )
    elif atype == "file_size_equals":
        result = check_file_size_equals(
            value["path"], value["size"], display=display, logger=logger
        )
    else:
        raise ValueError(f"Unknown assertion type: '{atype}'")

    result.weight = weight
    return result
