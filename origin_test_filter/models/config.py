"""Run configuration built once from the command line."""

from pathlib import Path
from typing import Literal

from pydantic import Field

from origin_test_filter.models.base import Model

ResultFilter = Literal["all", "passed", "failed", "skipped"]


class FilterConfig(Model):
    """Immutable options controlling which tests are shown and how."""

    filename: Path = Field(..., description="JUnit report to read")
    origin_tree_path: Path = Field(..., description="Root of the origin checkout")
    result: ResultFilter = Field(default="all", description="Status to keep")
    tag: str | None = Field(default=None, description="Tag a test must carry")
    show_errors: bool = Field(default=False, description="Print failure output")
