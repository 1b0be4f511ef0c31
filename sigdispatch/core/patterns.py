# sigdispatch/core/patterns.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

from typing import FrozenSet, Sequence, Tuple, Union

from sigdispatch.core.types import TypeTag

UNION_SEPARATOR = "|"

Specifier = Union[str, TypeTag]


def parse_specifier(specifier: Specifier) -> FrozenSet[str]:
    """
    Split a union specifier such as ``"string | number"`` into its tags.

    Whitespace around each tag is ignored and empty entries are discarded, so
    ``"string||"`` parses to ``{"string"}`` and ``""`` to the empty set.

    :param specifier: A union string or a single TypeTag.
    :return: The set of tag names in the union.
    """
    if isinstance(specifier, TypeTag):
        return frozenset((specifier.value,))
    return frozenset(tag.strip() for tag in specifier.split(UNION_SEPARATOR) if tag.strip())


def normalize_specifier(specifier: Specifier) -> str:
    """
    Return the canonical text of a specifier: tags trimmed, empties dropped,
    original order kept.
    """
    if isinstance(specifier, TypeTag):
        return specifier.value
    tags = [tag.strip() for tag in specifier.split(UNION_SEPARATOR)]
    return UNION_SEPARATOR.join(tag for tag in tags if tag)


def types_match(left: Specifier, right: Specifier) -> bool:
    """
    Compare two union specifiers.

    The wildcard ``any`` on either side matches everything; otherwise the
    specifiers match when they share at least one tag. The comparison is
    symmetric.
    """
    a = parse_specifier(left)
    b = parse_specifier(right)
    if TypeTag.ANY.value in a or TypeTag.ANY.value in b:
        return True
    return not a.isdisjoint(b)


def patterns_match(left: Sequence[Specifier], right: Sequence[Specifier]) -> bool:
    """
    Compare two patterns position by position.

    Patterns of different length never match. Each position is compared on its
    own, so the relation is not transitive when wildcards are involved.
    """
    if len(left) != len(right):
        return False
    return all(types_match(a, b) for a, b in zip(left, right))


def format_pattern(pattern: Sequence[Specifier]) -> str:
    """Render a pattern as ``[string, number|null]`` for messages."""
    return "[" + ", ".join(normalize_specifier(s) for s in pattern) + "]"


def as_pattern(pattern: Sequence[Specifier]) -> Tuple[str, ...]:
    """Normalize every specifier of a pattern into an immutable tuple."""
    return tuple(normalize_specifier(s) for s in pattern)
