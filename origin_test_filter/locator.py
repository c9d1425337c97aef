"""Locate the source of a test by searching the corpus for its name."""

import logging

from origin_test_filter.corpus import SourceCorpus
from origin_test_filter.models.source import SourceLocation

log = logging.getLogger(__name__)


class SourceLookupError(Exception):
    """Raised when a test name cannot be searched for."""


def find_in_corpus(corpus: SourceCorpus, needle: str) -> tuple[str, int] | None:
    """Find the first file containing ``needle``.

    Returns:
        The file path and the 1-based line of the match, or None.

    """
    for path, contents in corpus:
        position = contents.find(needle)
        if position >= 0:
            return path, contents.count("\n", 0, position) + 1
    return None


def locate_test_source(name: str, corpus: SourceCorpus) -> SourceLocation | None:
    """Find where a test is defined by searching for its name.

    Test names are usually a literal from the test source followed by
    generated or parameterised words, so the full name is tried first and
    then shorter and shorter prefixes of it, one word at a time. The longest
    prefix found anywhere in the corpus wins. An empty prefix is never
    searched for, so None means no word of the name was found.

    Raises:
        SourceLookupError: If the name is blank

    """
    if not name.strip():
        raise SourceLookupError("Cannot search for a test with a blank name")

    words = name.split(" ")
    for count in range(len(words), 0, -1):
        candidate = " ".join(words[:count])
        if not candidate.strip():
            continue

        if (match := find_in_corpus(corpus, candidate)) is not None:
            path, line_number = match
            if count < len(words):
                log.debug(
                    "Matched %d of %d word(s) of %r in %s", count, len(words), name, path
                )
            return SourceLocation(
                path=corpus.relative_path(path), line_number=line_number
            )

    log.debug("No source found for %r", name)
    return None
