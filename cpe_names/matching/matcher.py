"""Wildcard-aware comparison of Well-Formed Names.

Each attribute pair is compared independently to produce a
:class:`~cpe_names.grammar.types.Relation`; the name-level predicates are
then folded from the full relation mapping.
"""

from __future__ import annotations

from collections.abc import Mapping

from cpe_names.grammar.model import WellFormedName
from cpe_names.grammar.support import (
    contains_wildcards,
    count_escape_characters,
    count_preceding_backslashes,
    unescaped_length,
)
from cpe_names.grammar.types import ANY, ATTRIBUTES, NA, Attribute, AttributeValue, Relation

# Marks an unlimited leading or trailing tolerance.
UNLIMITED = -1


def compare(source: AttributeValue, target: AttributeValue) -> Relation:
    """Compare a source attribute value with a target attribute value.

    Matching is case-insensitive. A target holding an unquoted wildcard
    cannot be compared and yields ``UNDEFINED``.
    """
    if isinstance(source, str):
        source = source.lower()
    if isinstance(target, str):
        target = target.lower()
        if contains_wildcards(target):
            return Relation.UNDEFINED

    if source == target:
        return Relation.EQUAL
    if source is ANY:
        return Relation.SUPERSET
    if target is ANY:
        return Relation.SUBSET
    if source is NA or target is NA:
        return Relation.DISJOINT
    return compare_strings(source, target)


def _is_unescaped(value: str, index: int) -> bool:
    return count_preceding_backslashes(value, index) % 2 == 0


def compare_strings(source: str, target: str) -> Relation:
    """Compare a source pattern with a literal target string.

    Unquoted ``*`` and ``?`` may only appear at the ends of ``source``; they
    set how many target characters may precede or follow the literal core.
    Returns ``SUPERSET`` when some occurrence of the core fits inside those
    tolerances, otherwise ``DISJOINT``.
    """
    start, begins = 0, 0
    end, ends = len(source), 0

    if source.startswith("*"):
        start, begins = 1, UNLIMITED
    else:
        while start < len(source) and source[start] == "?":
            start += 1
            begins += 1

    if source.endswith("*") and _is_unescaped(source, end - 1):
        end, ends = end - 1, UNLIMITED
    else:
        while end > 0 and source[end - 1] == "?" and _is_unescaped(source, end - 1):
            end -= 1
            ends += 1

    # only ? (e.g. "???")
    if not source.strip("?"):
        if len(source) >= unescaped_length(target):
            return Relation.SUPERSET
        return Relation.DISJOINT

    core = source[start:end]
    index = -1
    leftover = len(target)
    while leftover > 0:
        index = target.find(core, index + 1)
        if index == -1:
            break
        escapes = count_escape_characters(target[:index])
        if index > 0 and begins != UNLIMITED and begins < index - escapes:
            break
        escapes = count_escape_characters(target[index + 1 :])
        leftover = len(target) - index - escapes - len(core)
        if leftover > 0 and ends != UNLIMITED and leftover > ends:
            continue
        return Relation.SUPERSET
    return Relation.DISJOINT


def compare_all(source: WellFormedName, target: WellFormedName) -> dict[Attribute, Relation]:
    """Compare every attribute of two names, in canonical attribute order."""
    return {a: compare(source.get(a), target.get(a)) for a in ATTRIBUTES}


def relations_disjoint(relations: Mapping[Attribute, Relation]) -> bool:
    return any(r is Relation.DISJOINT for r in relations.values())


def relations_equal(relations: Mapping[Attribute, Relation]) -> bool:
    return all(r is Relation.EQUAL for r in relations.values())


def relations_subset(relations: Mapping[Attribute, Relation]) -> bool:
    return all(r in (Relation.SUBSET, Relation.EQUAL) for r in relations.values())


def relations_superset(relations: Mapping[Attribute, Relation]) -> bool:
    return all(r in (Relation.SUPERSET, Relation.EQUAL) for r in relations.values())


def is_disjoint(source: WellFormedName, target: WellFormedName) -> bool:
    """True if any attribute pair is disjoint."""
    return relations_disjoint(compare_all(source, target))


def is_equal(source: WellFormedName, target: WellFormedName) -> bool:
    """True if every attribute pair is equal."""
    return relations_equal(compare_all(source, target))


def is_subset(source: WellFormedName, target: WellFormedName) -> bool:
    """True if the source names a subset of the target."""
    return relations_subset(compare_all(source, target))


def is_superset(source: WellFormedName, target: WellFormedName) -> bool:
    """True if the source names a superset of the target."""
    return relations_superset(compare_all(source, target))


__all__ = [
    "compare",
    "compare_all",
    "compare_strings",
    "is_disjoint",
    "is_equal",
    "is_subset",
    "is_superset",
    "relations_disjoint",
    "relations_equal",
    "relations_subset",
    "relations_superset",
]
