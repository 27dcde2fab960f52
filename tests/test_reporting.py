from __future__ import annotations

import pytest
from junitparser import Failure, JUnitXml

from fileassert.assertions import AssertionResult
from fileassert.reporting.junit import weighted_score, write_junit


@pytest.fixture
def sample_results() -> list[AssertionResult]:
    return [
        AssertionResult(name="file_exists:/out/a.txt", passed=True),
        AssertionResult(
            name="file_size_equals:/out/b.bin",
            passed=False,
            message="file size does not match expected size",
            details=[("path", "<out>/b.bin")],
            weight=3.0,
        ),
    ]


def test_write_junit_one_case_per_result(tmp_path, sample_results):
    path = write_junit(sample_results, tmp_path / "junit.xml", suite_name="build")
    assert path.exists()

    suite = list(JUnitXml.fromfile(str(path)))[0]
    assert suite.name == "build"
    cases = list(suite)
    assert [c.name for c in cases] == [
        "file_exists:/out/a.txt",
        "file_size_equals:/out/b.bin",
    ]
    assert cases[0].is_passed
    failure = cases[1].result[0]
    assert isinstance(failure, Failure)
    assert failure.message == "file size does not match expected size"
    assert "path : <out>/b.bin" in failure.text


def test_write_junit_records_weighted_score(tmp_path, sample_results):
    path = write_junit(sample_results, tmp_path / "junit.xml")
    suite = list(JUnitXml.fromfile(str(path)))[0]
    props = {p.name: p.value for p in suite.properties()}
    assert props["weighted_score"] == "25.0"


def test_weighted_score():
    results = [
        AssertionResult(name="a", passed=True, weight=1.0),
        AssertionResult(name="b", passed=False, weight=1.0),
    ]
    assert weighted_score(results) == 50.0
    assert weighted_score([]) == 0.0
