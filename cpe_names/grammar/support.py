"""Static helpers for the CPE attribute-value grammar.

These escape-aware scanners are shared by the name model, the unbinder and
the matcher. They are written as explicit index loops because the legality
of ``*`` and ``?`` depends on position and on the backslash run before them.

Two notions of "escaped" coexist here. :func:`contains_wildcards`,
:func:`contains_questions` and :func:`unescaped_colon_index` only look at the
single preceding character, while :func:`count_preceding_backslashes` lets
the matcher test the parity of the whole run.
"""

from __future__ import annotations

import unicodedata
from typing import TypeVar

from cpe_names.exceptions import IllegalArgumentError, ParseError

E = TypeVar("E")


def enum_values(enum_cls: type[E]) -> list[str]:
    """Return the allowed string values for a StrEnum type.

    Example:
        >>> from cpe_names.grammar.types import Relation
        >>> enum_values(Relation)
        ['disjoint', 'subset', 'superset', 'equal', 'undefined']
    """
    return [e.value for e in enum_cls]  # type: ignore[attr-defined]


def coerce_enum(enum_cls: type[E], value: E | str) -> E:
    """Coerce a possibly-string value to an enum member.

    Accepts the enum member already, or its ``.value`` string.

    Raises:
        IllegalArgumentError: If the value is not a member or a known value.
    """
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        try:
            return enum_cls(value)  # type: ignore[call-arg]
        except ValueError as e:
            allowed = enum_values(enum_cls)
            raise IllegalArgumentError(
                f"Invalid {enum_cls.__name__} token. Allowed values: {allowed}", value
            ) from e
    raise IllegalArgumentError(
        f"Expected {enum_cls.__name__} or str; got {type(value).__name__}", value
    )


def is_alphanum(value: str) -> bool:
    """Return True if ``value`` holds only ASCII letters, digits or ``_``."""
    return all(char.isascii() and (char.isalnum() or char == "_") for char in value)


def is_punctuation(char: str) -> bool:
    """Return True for Unicode punctuation (categories ``P*``).

    Symbols such as ``$``, ``+`` or ``~`` are category ``S*`` and do not count.
    """
    return unicodedata.category(char).startswith("P")


def contains_wildcards(value: str) -> bool:
    """Return True if ``value`` holds a ``*`` or ``?`` not preceded by ``\\``."""
    prev = " "
    for char in value:
        if char in "*?" and prev != "\\":
            return True
        prev = char
    return False


def contains_questions(value: str) -> bool:
    """Return True if ``value`` holds a ``?`` not preceded by ``\\``."""
    prev = " "
    for char in value:
        if char == "?" and prev != "\\":
            return True
        prev = char
    return False


def count_escape_characters(value: str) -> int:
    """Count escaping backslashes in ``value``.

    A backslash that is itself escaped (the second of ``\\\\``) is not counted.
    """
    count = 0
    active = False
    for char in value:
        if not active and char == "\\":
            count += 1
            active = True
        else:
            active = False
    return count


def unescaped_length(value: str) -> int:
    """Length of ``value`` once its escape characters are removed."""
    return len(value) - count_escape_characters(value)


def count_preceding_backslashes(value: str, index: int) -> int:
    """Length of the run of backslashes immediately before ``value[index]``."""
    count = 0
    while index > 0 and value[index - 1] == "\\":
        index -= 1
        count += 1
    return count


def unescaped_colon_index(value: str) -> int:
    """Index of the first colon whose preceding character is not ``\\``.

    Returns ``-1`` when there is no such colon.
    """
    for index, char in enumerate(value):
        if char == ":" and (index == 0 or value[index - 1] != "\\"):
            return index
    return -1


def validate_string_value(value: str) -> None:
    """Check an attribute string against the quoting and wildcard grammar.

    Raises:
        ParseError: If the value violates any rule.
    """
    if value.startswith("**") or value.endswith("**"):
        raise ParseError("component cannot contain more than one * in sequence", value)

    last = len(value) - 1
    prev = " "
    for index, char in enumerate(value):
        if not char.isprintable():
            raise ParseError("encountered non printable character", value)
        if char.isspace():
            raise ParseError("component cannot contain whitespace", value)
        if is_punctuation(char) and prev != "\\" and char != "\\":
            if char == "*" and index not in (0, last):
                raise ParseError("component cannot contain embedded *", value)
            if char not in "*?_":
                raise ParseError("component cannot contain unquoted punctuation", value)
        prev = char

    if "?" in value:
        if value == "?":
            return
        if contains_questions(value.strip("?")):
            raise ParseError("component cannot contain embedded ?", value)

    if value == "*":
        raise ParseError("component cannot be a single *", value)

    if value == "\\-":
        raise ParseError("component cannot be a quoted hyphen", value)


__all__ = [
    "coerce_enum",
    "contains_questions",
    "contains_wildcards",
    "count_escape_characters",
    "count_preceding_backslashes",
    "enum_values",
    "is_alphanum",
    "is_punctuation",
    "unescaped_colon_index",
    "unescaped_length",
    "validate_string_value",
]
