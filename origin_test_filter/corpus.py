"""In-memory corpus of origin source files searched for test names."""

import logging
import os
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType

log = logging.getLogger(__name__)

SOURCE_SUFFIX = ".go"
# Generated code (deepcopy, conversions, bindata) repeats test strings verbatim.
EXCLUDE_MARKER = "zz_generated"


class CorpusBuildError(OSError):
    """Raised when the source tree cannot be walked or a file cannot be read."""


@dataclass(frozen=True, kw_only=True)
class SourceCorpus:
    """Read-only mapping of file path to file contents.

    Entries are kept in path order so a search that stops at the first hit
    always reports the same file.
    """

    root: Path
    files: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        ordered = {path: self.files[path] for path in sorted(self.files)}
        object.__setattr__(self, "files", MappingProxyType(ordered))

    def __len__(self) -> int:
        return len(self.files)

    def __iter__(self) -> Iterator[tuple[str, str]]:
        return iter(self.files.items())

    def relative_path(self, path: str) -> str:
        """Return ``path`` with the corpus root stripped, keeping a leading slash."""
        relative = Path(path).relative_to(self.root).as_posix()
        return f"/{relative}"


def is_source_file(
    path: str,
    suffix: str = SOURCE_SUFFIX,
    exclude_marker: str = EXCLUDE_MARKER,
) -> bool:
    """Check if a file path is eligible for the corpus."""
    return path.endswith(suffix) and exclude_marker not in path


def build_source_corpus(
    root: Path,
    suffix: str = SOURCE_SUFFIX,
    exclude_marker: str = EXCLUDE_MARKER,
) -> SourceCorpus:
    """Read every eligible source file under ``root`` into memory.

    Args:
        root: Root of the source tree (e.g. an openshift/origin checkout)
        suffix: Only files whose path ends with this are read
        exclude_marker: Files whose path contains this are skipped

    Returns:
        Corpus keyed by the full path of each file.

    Raises:
        CorpusBuildError: If the tree cannot be walked or a file cannot be read

    """
    if not root.is_dir():
        raise CorpusBuildError(f"Source tree not found: {root}")

    def on_walk_error(exc: OSError) -> None:
        raise CorpusBuildError(f"Cannot walk source tree: {exc}") from exc

    files: dict[str, str] = {}
    for dirpath, _dirnames, filenames in os.walk(root, onerror=on_walk_error):
        for filename in filenames:
            path = os.path.join(dirpath, filename)
            if not is_source_file(path, suffix, exclude_marker):
                continue

            try:
                # Bytes are decoded as-is so line endings stay untouched.
                contents = Path(path).read_bytes().decode("utf-8", errors="replace")
            except OSError as e:
                raise CorpusBuildError(f"Cannot read source file {path}: {e}") from e

            files[path] = contents

    log.info("Loaded %d source file(s) from %s", len(files), root)
    return SourceCorpus(root=root, files=files)
