"""Select test cases and render them as text."""

import logging
from collections.abc import Sequence

from origin_test_filter.corpus import SourceCorpus
from origin_test_filter.locator import SourceLookupError, locate_test_source
from origin_test_filter.models.config import FilterConfig
from origin_test_filter.models.test_case import TestCase

log = logging.getLogger(__name__)

SEPARATOR = "-"


def matches(test_case: TestCase, config: FilterConfig) -> bool:
    """Check a test case against the tag and result filters."""
    if config.tag and config.tag not in test_case.tags:
        return False

    match config.result:
        case "passed":
            return test_case.is_passed()
        case "failed":
            return test_case.is_failed()
        case "skipped":
            return test_case.is_skipped()
        case _:
            return True


def select_test_cases(
    test_cases: Sequence[TestCase], config: FilterConfig
) -> Sequence[TestCase]:
    """Return the test cases passing the filters, in their original order."""
    return [test_case for test_case in test_cases if matches(test_case, config)]


def render_source(test_case: TestCase, corpus: SourceCorpus) -> Sequence[str]:
    """Render the source location line for a test case.

    Lookup failures are reported inline and do not stop rendering.
    """
    lines: list[str] = []
    try:
        location = locate_test_source(test_case.name, corpus)
    except SourceLookupError as e:
        log.warning("Source lookup failed for %r: %s", test_case.name, e)
        lines.append(f"ERR: {e}")
        location = None

    lines.append(location.pretty_string() if location else "Source not found")
    return lines


def render_test_case(
    test_case: TestCase,
    config: FilterConfig,
    corpus: SourceCorpus | None = None,
) -> Sequence[str]:
    """Render one test case as output lines, ending with a separator."""
    lines = [test_case.simple_name, f"context: {test_case.context}"]

    if test_case.tags:
        lines.append("tags:")
        lines.extend(f" - {tag}" for tag in test_case.tags)

    if corpus is not None:
        lines.extend(render_source(test_case, corpus))

    if config.show_errors and config.result in {"failed", "all"}:
        lines.append("ERROR:")
        lines.append(test_case.error_text or "")

    lines.append(SEPARATOR)
    return lines
