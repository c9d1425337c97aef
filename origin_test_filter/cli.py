"""CLI entry point for filtering origin JUnit results."""

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from pydantic import ValidationError

from origin_test_filter.corpus import CorpusBuildError, build_source_corpus
from origin_test_filter.filtering import render_test_case, select_test_cases
from origin_test_filter.models.config import FilterConfig
from origin_test_filter.report import ReportLoadError, load_test_cases

RESULT_CHOICES = ("all", "skipped", "failed", "passed")
TRUE_VALUES = frozenset({"1", "t", "T", "TRUE", "true", "True"})
FALSE_VALUES = frozenset({"0", "f", "F", "FALSE", "false", "False"})


def run(config: FilterConfig) -> int:
    """Filter and print test cases, returning the exit code."""
    log = logging.getLogger("origin_test_filter")

    try:
        test_cases = load_test_cases(config.filename)
    except ReportLoadError as e:
        print(e)
        return 1

    try:
        corpus = build_source_corpus(config.origin_tree_path)
    except CorpusBuildError as e:
        print(e)
        return 1

    selected = select_test_cases(test_cases, config)
    log.info("Showing %d of %d test case(s)", len(selected), len(test_cases))

    for test_case in selected:
        for line in render_test_case(test_case, config, corpus):
            print(line)

    return 0


def parse_bool(value: str) -> bool:
    """Parse a boolean flag value such as ``true``, ``F`` or ``0``."""
    if value in TRUE_VALUES:
        return True
    if value in FALSE_VALUES:
        return False
    raise argparse.ArgumentTypeError(f"invalid boolean value: {value!r}")


def create_parser() -> argparse.ArgumentParser:
    """Return the argument parser.

    Options use single-dash long names (``-filename``); the double-dash
    spellings are accepted as well. ``-show-errors`` works as a bare switch or
    with an explicit value such as ``-show-errors=false``.
    """
    parser = argparse.ArgumentParser(
        description="Filter OpenShift origin JUnit results by tag and status",
        allow_abbrev=False,
    )
    parser.add_argument(
        "-filename", "--filename", default="", help="input junit file"
    )
    parser.add_argument(
        "-origin-tree-path",
        "--origin-tree-path",
        dest="origin_tree_path",
        default="",
        help="root of an openshift/origin checkout",
    )
    parser.add_argument(
        "-result",
        "--result",
        choices=RESULT_CHOICES,
        default="all",
        help="choices: all, skipped, failed, passed",
    )
    parser.add_argument("-tag", "--tag", default="", help="Tag, e.g. sig-storage")
    parser.add_argument(
        "-show-errors",
        "--show-errors",
        dest="show_errors",
        type=parse_bool,
        nargs="?",
        const=True,
        default=False,
        help="print the error output of failed tests",
    )
    return parser


def parse_config(argv: Sequence[str] | None = None) -> FilterConfig | None:
    """Parse arguments into a config, or print what is missing and return None."""
    args = create_parser().parse_args(argv)

    if not args.filename:
        print("missing input filename")
        return None

    if not args.origin_tree_path:
        print("missing origin-tree-path")
        return None

    try:
        return FilterConfig(
            filename=Path(args.filename),
            origin_tree_path=Path(args.origin_tree_path),
            result=args.result,
            tag=args.tag or None,
            show_errors=args.show_errors,
        )
    except ValidationError as e:
        print(e)
        return None


def main(argv: Sequence[str] | None = None) -> None:
    """CLI entry point."""
    config = parse_config(argv)
    if config is None:
        sys.exit(1)

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    sys.exit(run(config))


if __name__ == "__main__":  # pragma: no cover
    main()
