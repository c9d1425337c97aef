"""Decompose composite test names into context, tags and a simple name.

OpenShift origin test names carry their metadata inline, e.g.
``[sig-storage] [Feature:X] does a thing [Serial]``. The leading label is the
context (usually the owning SIG); every bracketed label, the context included,
is a tag.
"""

import re
from collections.abc import Sequence
from dataclasses import dataclass

CONTEXT_PATTERN = re.compile(r"^\[(?P<label>[\w\-.]+)\]", re.ASCII)
TAG_PATTERN = re.compile(r"\[(?P<label>[\w\-.:/]+)\]", re.ASCII)


@dataclass(frozen=True, kw_only=True)
class NameParts:
    """Result of decomposing a raw test name."""

    context: str
    tags: Sequence[str]
    simple_name: str


def parse_context(name: str) -> str:
    """Return the bracketed label at the very start of ``name``, or ``""``."""
    if match := CONTEXT_PATTERN.match(name):
        return match.group("label")
    return ""


def parse_tags(name: str) -> list[str]:
    """Return every bracketed label in ``name``, left to right.

    The result is not filtered: the context label shows up here too, and a
    label repeated in the name is repeated in the result.
    """
    return [match.group("label") for match in TAG_PATTERN.finditer(name)]


def get_simple_name(name: str, context: str, tags: Sequence[str]) -> str:
    """Strip the tag and context fragments out of ``name``.

    Tags are removed as literal ``[tag]`` substrings wherever they occur. The
    context is then removed once together with the space that follows it.
    When the name opened with removed labels, the whitespace they leave at the
    front is dropped; any other whitespace is left alone.
    """
    labels = [*tags, context] if context else list(tags)
    leading = any(name.startswith(f"[{label}]") for label in labels)

    for tag in tags:
        name = name.replace(f"[{tag}]", "")

    if context:
        name = name.replace(f"[{context}] ", "", 1)

    if leading:
        name = name.lstrip()
    return name


def decompose(name: str) -> NameParts:
    """Split a raw test name into its context, tags and simple name."""
    context = parse_context(name)
    tags = parse_tags(name)
    return NameParts(
        context=context,
        tags=tags,
        simple_name=get_simple_name(name, context, tags),
    )
