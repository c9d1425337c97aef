"""Models for resolved test source locations."""

from dataclasses import dataclass

ORIGIN_BLOB_URL = "https://github.com/openshift/origin/blob/master"


@dataclass(frozen=True, kw_only=True)
class SourceLocation:
    """Place in the origin tree where a test's name literal was found.

    ``path`` is relative to the tree root and keeps its leading slash so it can
    be appended directly to the blob URL.
    """

    path: str
    line_number: int

    def github_link(self) -> str:
        return f"{ORIGIN_BLOB_URL}{self.path}#L{self.line_number}"

    def pretty_string(self) -> str:
        return "Test source code location: " + self.github_link()
