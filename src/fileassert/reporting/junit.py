from __future__ import annotations

from pathlib import Path

from junitparser import Failure, JUnitXml, TestCase, TestSuite

from fileassert.assertions import AssertionResult


def write_junit(
    results: list[AssertionResult], path: Path, suite_name: str = "fileassert"
) -> Path:
    """Write junit.xml with one test case per assertion result, return path."""
    xml = JUnitXml()
    suite = TestSuite(suite_name)

    for result in results:
        case = TestCase(result.name)
        case.classname = suite_name
        if not result.passed:
            failure = Failure(result.message)
            failure.text = result.diagnostic
            case.result = [failure]
        suite.add_testcase(case)

    suite.add_property("weighted_score", str(weighted_score(results)))

    # Use append (not +=) to preserve properties
    xml.append(suite)

    path.parent.mkdir(parents=True, exist_ok=True)
    xml.write(str(path), pretty=True)
    return path


def weighted_score(results: list[AssertionResult]) -> float:
    """Percentage of total weight carried by passing assertions."""
    total = sum(r.weight for r in results)
    if total == 0:
        return 0.0
    passed = sum(r.weight for r in results if r.passed)
    return round(100.0 * passed / total, 2)
