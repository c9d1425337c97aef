"""Tests for JUnit report loading."""

import logging
from pathlib import Path
from unittest.mock import patch

import pytest

from origin_test_filter.report import ReportLoadError, load_test_cases

REPORT = """<?xml version="1.0" encoding="UTF-8"?>
<testsuites>
  <testsuite name="openshift-tests" tests="4">
    <testcase name="[sig-storage] [Feature:X] does a thing" time="1.5"/>
    <testcase name="[sig-network] pods talk [Serial]" time="2">
      <failure message="timed out">stack trace here</failure>
    </testcase>
    <testcase name="[sig-apps] deploys">
      <skipped message="not supported"/>
    </testcase>
    <testcase name="plain test">
      <error message="panic"/>
    </testcase>
  </testsuite>
</testsuites>
"""


@pytest.fixture
def report_file(tmp_path: Path) -> Path:
    """Write a sample JUnit report."""
    path = tmp_path / "junit.xml"
    path.write_text(REPORT)
    return path


def test_loads_all_test_cases_in_order(report_file: Path) -> None:
    """Loads every testcase element in document order."""
    test_cases = load_test_cases(report_file)

    assert [tc.name for tc in test_cases] == [
        "[sig-storage] [Feature:X] does a thing",
        "[sig-network] pods talk [Serial]",
        "[sig-apps] deploys",
        "plain test",
    ]


def test_classifies_status(report_file: Path) -> None:
    """Maps outcome elements to statuses."""
    test_cases = load_test_cases(report_file)

    assert [tc.status for tc in test_cases] == ["passed", "failed", "skipped", "other"]


def test_decomposes_names(report_file: Path) -> None:
    """Populates context, tags and simple name from the raw name."""
    test_case = load_test_cases(report_file)[0]

    assert test_case.context == "sig-storage"
    assert list(test_case.tags) == ["sig-storage", "Feature:X"]
    assert test_case.simple_name == "does a thing"


def test_collects_error_text(report_file: Path) -> None:
    """Joins message and body of failure and error elements."""
    test_cases = load_test_cases(report_file)

    assert test_cases[0].error_text is None
    assert test_cases[1].error_text == "timed out\nstack trace here"
    assert test_cases[2].error_text is None
    assert test_cases[3].error_text == "panic"


def test_accepts_bare_testsuite(tmp_path: Path) -> None:
    """Accepts a document whose root is a single testsuite."""
    path = tmp_path / "junit.xml"
    path.write_text('<testsuite><testcase name="a"/><testcase name="b"/></testsuite>')

    assert [tc.name for tc in load_test_cases(path)] == ["a", "b"]


def test_flattens_nested_suites(tmp_path: Path) -> None:
    """Test cases in nested suites are included."""
    path = tmp_path / "junit.xml"
    path.write_text(
        "<testsuites><testsuite><testsuite>"
        '<testcase name="inner"/>'
        '</testsuite><testcase name="outer"/></testsuite></testsuites>'
    )

    assert [tc.name for tc in load_test_cases(path)] == ["inner", "outer"]


def test_raises_for_missing_file(tmp_path: Path) -> None:
    """Raises ReportLoadError when the report does not exist."""
    with pytest.raises(ReportLoadError, match="Report file not found"):
        load_test_cases(tmp_path / "missing.xml")


def test_raises_for_malformed_xml(tmp_path: Path) -> None:
    """Raises ReportLoadError for malformed XML."""
    path = tmp_path / "junit.xml"
    path.write_text("<testsuites><testsuite>")

    with pytest.raises(ReportLoadError, match="Invalid JUnit XML"):
        load_test_cases(path)


def test_accepts_suites_under_any_root(tmp_path: Path) -> None:
    """Test suites wrapped in an arbitrary root element are loaded."""
    path = tmp_path / "junit.xml"
    path.write_text('<report><testsuite><testcase name="a"/></testsuite></report>')

    assert [tc.name for tc in load_test_cases(path)] == ["a"]


def test_warns_when_no_test_cases(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    """Returns an empty list and logs a warning for a report without tests."""
    path = tmp_path / "junit.xml"
    path.write_text("<project/>")

    with caplog.at_level(logging.WARNING):
        assert load_test_cases(path) == []

    assert "No test cases found" in caplog.text


def test_raises_for_unreadable_file(report_file: Path) -> None:
    """Raises ReportLoadError when the report cannot be read."""
    with (
        patch(
            "origin_test_filter.report.ET.parse",
            side_effect=PermissionError("Permission denied"),
        ),
        pytest.raises(ReportLoadError, match="Cannot read report file") as exc_info,
    ):
        load_test_cases(report_file)

    assert isinstance(exc_info.value.__cause__, PermissionError)
