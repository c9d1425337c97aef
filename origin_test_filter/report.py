"""Load test cases from a JUnit XML report."""

import logging
import xml.etree.ElementTree as ET
from pathlib import Path

from origin_test_filter.models.test_case import TestCase, TestStatus
from origin_test_filter.names import decompose

log = logging.getLogger(__name__)


class ReportLoadError(ValueError):
    """Raised when a report file cannot be read or parsed."""


def load_test_cases(path: Path) -> list[TestCase]:
    """Load every test case of a JUnit report, in document order.

    Test cases are collected from anywhere in the document, so a
    ``<testsuites>`` root, a bare ``<testsuite>`` and suites wrapped in some
    other element are all accepted; nested suites are flattened.

    Raises:
        ReportLoadError: If the file is missing, unreadable or not valid XML

    """
    if not path.is_file():
        raise ReportLoadError(f"Report file not found: {path}")

    try:
        root = ET.parse(path).getroot()
    except ET.ParseError as e:
        raise ReportLoadError(f"Invalid JUnit XML in {path}: {e}") from e
    except OSError as e:
        raise ReportLoadError(f"Cannot read report file {path}: {e}") from e

    test_cases = [build_test_case(element) for element in root.iter("testcase")]
    if not test_cases:
        log.warning("No test cases found in %s", path)
    log.info("Loaded %d test case(s) from %s", len(test_cases), path)
    return test_cases


def build_test_case(element: ET.Element) -> TestCase:
    """Convert a ``<testcase>`` element into a decomposed test case."""
    name = element.get("name", "")
    status, error_text = parse_outcome(element)
    parts = decompose(name)

    return TestCase(
        name=name,
        simple_name=parts.simple_name,
        context=parts.context,
        tags=parts.tags,
        status=status,
        error_text=error_text,
    )


def parse_outcome(element: ET.Element) -> tuple[TestStatus, str | None]:
    """Classify a ``<testcase>`` by its first outcome child.

    Returns:
        The status and, for failures and errors, the reported error text.

    """
    if (failure := element.find("failure")) is not None:
        return "failed", error_text_of(failure)
    if (error := element.find("error")) is not None:
        return "other", error_text_of(error)
    if element.find("skipped") is not None:
        return "skipped", None
    return "passed", None


def error_text_of(element: ET.Element) -> str:
    """Join the ``message`` attribute and body text of an outcome element."""
    parts = [
        part.strip()
        for part in (element.get("message"), element.text)
        if part and part.strip()
    ]
    return "\n".join(parts)
